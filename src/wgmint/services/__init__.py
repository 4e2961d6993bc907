from ._config_formatter import CONFIG_TEMPLATE, ConfigFormatter
from ._config_mint import ConfigMint
from ._key_pair_generator import KeyPairGenerator, RandomSource, clamp_private_key

__all__ = [
    "CONFIG_TEMPLATE",
    "ConfigFormatter",
    "ConfigMint",
    "KeyPairGenerator",
    "RandomSource",
    "clamp_private_key",
]
