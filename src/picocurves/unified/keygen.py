"""Private key generation shared by every curve family."""

from __future__ import annotations

import logging

from ..errors import KeyGenerationError

logger = logging.getLogger(__name__)


def random_private_key(curve) -> bytes:
    """
    New private key from the curve handle's bound random-byte source.

    Montgomery handles return clamped bytes; Weierstrass and BLS handles
    return a hash-to-field reduced scalar.

    Raises:
        KeyGenerationError: the random source or the curve routine failed;
            the original exception is the __cause__.
    """
    try:
        return curve.utils.random_private_key()
    except Exception as error:
        logger.debug("random private key generation failed: %r", error)
        raise KeyGenerationError("Failed to generate random private key") from error


__all__: tuple[str, ...] = ("random_private_key",)
