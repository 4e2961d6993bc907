from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered peer configuration and the client's base64 public key."""

    config_text: str
    client_public_key_encoded: str
