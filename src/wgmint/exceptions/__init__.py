from ._invalid_tunnel_parameters import InvalidTunnelParameters
from ._randomness_unavailable import RandomnessUnavailable
from ._settings_configuration_error import SettingsConfigurationError
from ._wgmint_error import WgMintError

__all__ = [
    "InvalidTunnelParameters",
    "RandomnessUnavailable",
    "SettingsConfigurationError",
    "WgMintError",
]
