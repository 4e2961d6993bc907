from ._settings import ENV_PREFIX, Settings

__all__ = ["ENV_PREFIX", "Settings"]
