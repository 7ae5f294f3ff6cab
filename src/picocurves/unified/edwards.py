"""Unified key and signature operations for Edwards curves (Ed25519)."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import Any

from ..curves.edwards import (
    EdwardsCurve,
    create_ed25519,
    get_edwards_curve_name,
    get_edwards_key_byte_length,
)
from ..curves.types import RandomBytes, default_random_bytes
from ..errors import (
    ConversionError,
    PolicyError,
    PublicKeyDerivationError,
    SigningError,
    ValidationError,
)
from ..serde import encode_base64url
from .jwk import check_header, decode_member
from .keygen import random_private_key
from .types import JwkPrivateKey, JwkPublicKey

logger = logging.getLogger(__name__)

EDDSA = "EdDSA"


def edwards_random_private_key(curve: EdwardsCurve) -> bytes:
    return random_private_key(curve)


def edwards_is_valid_private_key(curve: EdwardsCurve, private_key: bytes) -> bool:
    """32-byte seed, or 64-byte seed || public key, with a seed that is not all-zero."""
    size = curve.n_byte_length
    if len(private_key) not in (size, size * 2):
        return False
    return any(private_key[:size])


def _seed(curve: EdwardsCurve, private_key: bytes) -> bytes:
    # 64-byte keys are seed || public key
    size = curve.n_byte_length
    if len(private_key) == size * 2:
        return private_key[:size]
    return private_key


def edwards_get_public_key(
    curve: EdwardsCurve, private_key: bytes, compressed: bool = True
) -> bytes:
    """
    Public key for a 32-byte seed or a 64-byte seed || public key.

    For the 64-byte form the embedded public key must match the one derived
    from the seed.

    Raises:
        PolicyError: compressed is False.
        PublicKeyDerivationError: any other failure.
    """
    if not compressed:
        raise PolicyError("Uncompressed public key is not supported")

    try:
        if not edwards_is_valid_private_key(curve, private_key):
            raise ValidationError("Edwards private key is invalid")
        size = curve.n_byte_length
        public_key = curve.get_public_key(_seed(curve, private_key))
        if len(private_key) == size * 2 and not hmac.compare_digest(
            public_key, bytes(private_key[size:])
        ):
            raise ValidationError("Embedded public key is invalid")
        return public_key
    except Exception as error:
        logger.debug("public key derivation failed: %r", error)
        raise PublicKeyDerivationError("Failed to get public key") from error


def edwards_sign(
    curve: EdwardsCurve, message: bytes, private_key: bytes, recoverable: bool = False
) -> bytes:
    """
    EdDSA signature of message.

    Raises:
        PolicyError: recoverable is True.
        SigningError: any other failure.
    """
    if recoverable:
        raise PolicyError("Recovered signature is not supported")

    try:
        if not edwards_is_valid_private_key(curve, private_key):
            raise ValidationError("Edwards private key is invalid")
        return curve.sign(message, _seed(curve, private_key))
    except Exception as error:
        logger.debug("signing failed: %r", error)
        raise SigningError("Failed to sign message") from error


def edwards_verify(
    curve: EdwardsCurve, signature: bytes, message: bytes, public_key: bytes
) -> bool:
    """True iff signature is valid; malformed input yields False."""
    try:
        return curve.verify(signature, message, public_key)
    except Exception as error:
        logger.debug("verification failed: %r", error)
        return False


def edwards_recover_public_key(
    curve: EdwardsCurve, signature: bytes, message: bytes, compressed: bool = True
) -> bytes:
    raise PolicyError("Public key recovery is not supported")


def edwards_to_jwk_public_key(curve: EdwardsCurve, public_key: bytes) -> JwkPublicKey:
    """OKP JWK {kty, crv, alg, x}; ConversionError on failure."""
    try:
        key_byte_length = get_edwards_key_byte_length(curve)
        if len(public_key) != key_byte_length:
            raise ValidationError(
                f"Invalid public key length: {len(public_key)}, "
                f"expected {key_byte_length}"
            )
        return {
            "kty": "OKP",
            "crv": get_edwards_curve_name(curve),
            "alg": EDDSA,
            "x": encode_base64url(public_key),
        }
    except Exception as error:
        logger.debug("public key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert public key to JWK") from error


def edwards_to_jwk_private_key(
    curve: EdwardsCurve, private_key: bytes
) -> JwkPrivateKey:
    """OKP JWK {kty, crv, alg, x, d} for a 32-byte seed; ConversionError on failure."""
    try:
        key_byte_length = get_edwards_key_byte_length(curve)
        if len(private_key) != key_byte_length:
            raise ValidationError(
                f"Invalid private key length: {len(private_key)}, "
                f"expected {key_byte_length}"
            )
        public_key = edwards_get_public_key(curve, private_key)
        jwk_public_key = edwards_to_jwk_public_key(curve, public_key)
        return {**jwk_public_key, "d": encode_base64url(private_key)}
    except Exception as error:
        logger.debug("private key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert private key to JWK") from error


def _to_raw_public_key(curve: EdwardsCurve, jwk: Mapping[str, Any]) -> bytes:
    check_header(jwk, "OKP", get_edwards_curve_name(curve), EDDSA)
    return decode_member(jwk, "x", curve.n_byte_length)


def edwards_to_raw_public_key(
    curve: EdwardsCurve, jwk_public_key: JwkPublicKey
) -> bytes:
    try:
        return _to_raw_public_key(curve, jwk_public_key)
    except Exception as error:
        logger.debug("JWK to raw public key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw public key") from error


def edwards_to_raw_private_key(
    curve: EdwardsCurve, jwk_private_key: JwkPrivateKey
) -> bytes:
    """
    32-byte seed from an OKP JWK.

    Raises:
        ConversionError: header or encoding problems, or x is not the public
            key of d.
    """
    try:
        public_key = _to_raw_public_key(curve, jwk_private_key)
        private_key = decode_member(jwk_private_key, "d", curve.n_byte_length)
        derived = edwards_get_public_key(curve, private_key)
        if not hmac.compare_digest(derived, public_key):
            raise ValidationError("Invalid JWK: invalid key data for d")
        return private_key
    except Exception as error:
        logger.debug("JWK to raw private key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw private key") from error


class Edwards:
    """
    Key management and EdDSA signatures for one Edwards curve handle.

    Example:
        ed25519 = Ed25519()
        private_key = ed25519.random_private_key()
        signature = ed25519.sign(b"hello", private_key)
        assert ed25519.verify(signature, b"hello", ed25519.get_public_key(private_key))
    """

    signature_algorithm_name = EDDSA

    def __init__(self, curve: EdwardsCurve) -> None:
        self.curve = curve
        self.curve_name = get_edwards_curve_name(curve)
        self.key_byte_length = get_edwards_key_byte_length(curve)

    @property
    def random_bytes(self) -> RandomBytes:
        return self.curve.random_bytes

    def random_private_key(self) -> bytes:
        return edwards_random_private_key(self.curve)

    def get_public_key(self, private_key: bytes, compressed: bool = True) -> bytes:
        return edwards_get_public_key(self.curve, private_key, compressed)

    def sign(
        self, message: bytes, private_key: bytes, recoverable: bool = False
    ) -> bytes:
        return edwards_sign(self.curve, message, private_key, recoverable)

    def verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        return edwards_verify(self.curve, signature, message, public_key)

    def recover_public_key(
        self, signature: bytes, message: bytes, compressed: bool = True
    ) -> bytes:
        return edwards_recover_public_key(self.curve, signature, message, compressed)

    def to_jwk_private_key(self, private_key: bytes) -> JwkPrivateKey:
        return edwards_to_jwk_private_key(self.curve, private_key)

    def to_jwk_public_key(self, public_key: bytes) -> JwkPublicKey:
        return edwards_to_jwk_public_key(self.curve, public_key)

    def to_raw_private_key(self, jwk_private_key: JwkPrivateKey) -> bytes:
        return edwards_to_raw_private_key(self.curve, jwk_private_key)

    def to_raw_public_key(self, jwk_public_key: JwkPublicKey) -> bytes:
        return edwards_to_raw_public_key(self.curve, jwk_public_key)


class Ed25519(Edwards):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_ed25519(random_bytes))


__all__: tuple[str, ...] = (
    "EDDSA",
    "Ed25519",
    "Edwards",
    "edwards_get_public_key",
    "edwards_is_valid_private_key",
    "edwards_random_private_key",
    "edwards_recover_public_key",
    "edwards_sign",
    "edwards_to_jwk_private_key",
    "edwards_to_jwk_public_key",
    "edwards_to_raw_private_key",
    "edwards_to_raw_public_key",
    "edwards_verify",
)
