from ._generated_artifact import GeneratedArtifact
from ._key_pair import KeyPair
from ._tunnel_parameters import TunnelParameters

__all__ = ["GeneratedArtifact", "KeyPair", "TunnelParameters"]
