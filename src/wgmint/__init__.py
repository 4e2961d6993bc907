from wgmint.exceptions import RandomnessUnavailable, WgMintError
from wgmint.schema import GeneratedArtifact, KeyPair, TunnelParameters
from wgmint.services import ConfigFormatter, ConfigMint, KeyPairGenerator
from wgmint.settings import Settings

__all__ = [
    "ConfigFormatter",
    "ConfigMint",
    "GeneratedArtifact",
    "KeyPair",
    "KeyPairGenerator",
    "RandomnessUnavailable",
    "Settings",
    "TunnelParameters",
    "WgMintError",
]
