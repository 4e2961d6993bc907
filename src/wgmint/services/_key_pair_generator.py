from __future__ import annotations

import secrets
from typing import Callable

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519

from wgmint.encoding import KEY_SIZE
from wgmint.exceptions import RandomnessUnavailable
from wgmint.logging import get_logger
from wgmint.schema import KeyPair

RandomSource = Callable[[int], bytes]

logger = get_logger(__name__)


def clamp_private_key(scalar: bytes) -> bytes:
    """Apply X25519 clamping (RFC 7748) to a 32-byte scalar."""
    if len(scalar) != KEY_SIZE:
        raise ValueError(f"Scalar must be {KEY_SIZE} bytes, got {len(scalar)}")
    clamped = bytearray(scalar)
    clamped[0] &= 248
    clamped[31] &= 127
    clamped[31] |= 64
    return bytes(clamped)


class KeyPairGenerator:
    """Handles generation of X25519 key pairs for WireGuard peers."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        """
        random_source: callable returning `n` cryptographically secure bytes.
        Defaults to `secrets.token_bytes`.
        """
        self._random_source = random_source or secrets.token_bytes

    def generate(self) -> KeyPair:
        """Draw a fresh scalar and return the clamped key pair."""
        try:
            scalar = self._random_source(KEY_SIZE)
        except (OSError, NotImplementedError) as error:
            raise RandomnessUnavailable(
                f"Secure random source is not available: {error}"
            ) from error
        if len(scalar) != KEY_SIZE:
            raise RandomnessUnavailable(
                f"Secure random source returned {len(scalar)} bytes, expected {KEY_SIZE}"
            )
        return self.from_private_key(scalar)

    @staticmethod
    def from_private_key(private_key: bytes) -> KeyPair:
        """Derive the public counterpart of an existing private scalar."""
        clamped = clamp_private_key(private_key)
        public_key = (
            x25519.X25519PrivateKey.from_private_bytes(clamped)
            .public_key()
            .public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw,
            )
        )
        logger.debug("Derived X25519 key pair")
        return KeyPair(private_key=clamped, public_key=public_key)
