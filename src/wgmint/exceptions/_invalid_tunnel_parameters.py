from __future__ import annotations

from ._wgmint_error import WgMintError


class InvalidTunnelParameters(WgMintError):
    """Raised by the optional validation layer, never by the formatter."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid tunnel parameters: " + "; ".join(self.problems))
