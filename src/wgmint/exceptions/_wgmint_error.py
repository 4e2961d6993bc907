class WgMintError(Exception):
    """Base class for every error raised by wgmint."""
