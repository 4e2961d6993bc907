from ._artifact_store import ArtifactStore

__all__ = ["ArtifactStore"]
