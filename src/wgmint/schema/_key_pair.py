from __future__ import annotations

from dataclasses import dataclass, field

from wgmint.encoding import KEY_SIZE


@dataclass(frozen=True)
class KeyPair:
    """
    Raw X25519 key material for one tunnel endpoint.

    Attributes:
        private_key (bytes): 32-byte clamped private scalar.
        public_key (bytes): 32-byte public value derived from `private_key`.
    """

    private_key: bytes = field(repr=False)
    public_key: bytes

    def __post_init__(self) -> None:
        for name in ("private_key", "public_key"):
            value = getattr(self, name)
            if len(value) != KEY_SIZE:
                raise ValueError(f"{name} must be {KEY_SIZE} bytes, got {len(value)}")
