from ._wgmint_error import WgMintError


class RandomnessUnavailable(WgMintError):
    """
    The secure random source could not be read.

    Fatal for the current generation request. There is no fallback to a
    weaker source and retrying is pointless.
    """
