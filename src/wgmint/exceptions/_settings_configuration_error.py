from ._wgmint_error import WgMintError


class SettingsConfigurationError(WgMintError):
    """Raised when settings loaded from the environment are malformed."""
