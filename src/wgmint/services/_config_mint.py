from __future__ import annotations

from pathlib import Path

from wgmint.logging import get_logger
from wgmint.schema import GeneratedArtifact, TunnelParameters
from wgmint.settings import Settings
from wgmint.stores import ArtifactStore

from ._config_formatter import ConfigFormatter
from ._key_pair_generator import KeyPairGenerator

logger = get_logger(__name__)


class ConfigMint:
    """
    High-level API to generate WireGuard peer configs and hand them off for saving.

    Each `generate` call draws a brand new key pair; nothing is cached.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        generator: KeyPairGenerator | None = None,
        formatter: ConfigFormatter | None = None,
        store: ArtifactStore | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.generator = generator or KeyPairGenerator()
        self.formatter = formatter or ConfigFormatter()
        self.store = store or ArtifactStore()

    def generate(self, params: TunnelParameters | None = None) -> GeneratedArtifact:
        """
        Run one generation cycle.

        Raises RandomnessUnavailable when no secure random source exists.
        """
        params = params or self.settings.tunnel_parameters()
        key_pair = self.generator.generate()
        artifact = self.formatter.format(key_pair, params)
        logger.info(
            "Generated peer config for %s (client public key %s)",
            params.client_address,
            artifact.client_public_key_encoded,
        )
        return artifact

    def save(self, artifact: GeneratedArtifact, filename: str | None = None) -> Path:
        """Hand the rendered config to the artifact store."""
        return self.store.save(filename or self.settings.output_filename, artifact.config_text)
