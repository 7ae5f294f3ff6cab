"""
Unified key operations for Montgomery curves (X25519).

Each operation presents one error kind regardless of what the curve handle
raised underneath; the original exception is kept as __cause__.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import Any

from ..curves.montgomery import (
    MontgomeryCurve,
    create_x25519,
    get_montgomery_curve_name,
)
from ..curves.types import RandomBytes, default_random_bytes
from ..errors import (
    ConversionError,
    PolicyError,
    PublicKeyDerivationError,
    SharedSecretError,
    ValidationError,
)
from ..serde import encode_base64url
from .jwk import check_header, decode_member
from .keygen import random_private_key
from .small_order import x25519_is_small_order_point
from .types import JwkPrivateKey, JwkPublicKey

logger = logging.getLogger(__name__)


def montgomery_is_valid_private_key(curve: MontgomeryCurve, private_key: bytes) -> bool:
    """Exact scalar length and not all-zero."""
    if len(private_key) != curve.gu_bytes_length:
        return False
    return any(private_key)


def montgomery_random_private_key(curve: MontgomeryCurve) -> bytes:
    """Clamped random private key; KeyGenerationError on failure."""
    return random_private_key(curve)


def montgomery_get_public_key(
    curve: MontgomeryCurve, private_key: bytes, compressed: bool = True
) -> bytes:
    """
    Public key (u-coordinate) for private_key.

    Montgomery points only have the one u-coordinate encoding, so an explicit
    request for the uncompressed form is refused before the curve is called.

    Raises:
        PolicyError: compressed is False.
        PublicKeyDerivationError: wrong length, all-zero key, or any failure
            of the underlying derivation.
    """
    if not compressed:
        raise PolicyError("Uncompressed public key is not supported")

    try:
        if not montgomery_is_valid_private_key(curve, private_key):
            raise ValidationError(
                f"Invalid private key: {len(private_key)} bytes, "
                f"expected {curve.gu_bytes_length}, non-zero"
            )
        return curve.get_public_key(private_key)
    except Exception as error:
        logger.debug("public key derivation failed: %r", error)
        raise PublicKeyDerivationError("Failed to get public key") from error


def montgomery_get_shared_secret(
    curve: MontgomeryCurve, curve_name: str, private_key: bytes, public_key: bytes
) -> bytes:
    """
    Diffie-Hellman shared secret.

    For X25519 a small-order peer key is refused up front; for any curve an
    all-zero result is refused.

    Raises:
        SharedSecretError: on any failure.
    """
    try:
        if curve_name == "X25519" and x25519_is_small_order_point(public_key):
            raise ValidationError("Public key is a small order point")
        if not montgomery_is_valid_private_key(curve, private_key):
            raise ValidationError("Private key is invalid")

        shared_secret = curve.get_shared_secret(private_key, public_key)

        if not any(shared_secret):
            raise ValidationError("Shared secret is zero")
        return shared_secret
    except Exception as error:
        logger.debug("shared secret computation failed: %r", error)
        raise SharedSecretError("Failed to compute shared secret") from error


def montgomery_to_jwk_public_key(
    curve: MontgomeryCurve, key_byte_length: int, curve_name: str, public_key: bytes
) -> JwkPublicKey:
    """OKP JWK {kty, crv, x} for public_key; ConversionError on failure."""
    try:
        if len(public_key) != key_byte_length:
            raise ValidationError(
                f"Invalid public key length: {len(public_key)}, "
                f"expected {key_byte_length}"
            )
        return {"kty": "OKP", "crv": curve_name, "x": encode_base64url(public_key)}
    except Exception as error:
        logger.debug("public key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert public key to JWK") from error


def montgomery_to_jwk_private_key(
    curve: MontgomeryCurve, key_byte_length: int, curve_name: str, private_key: bytes
) -> JwkPrivateKey:
    """
    OKP JWK {kty, crv, x, d} for private_key, deriving x.

    Raises:
        ConversionError: for any failure, including a failed public key
            derivation.
    """
    try:
        if len(private_key) != key_byte_length:
            raise ValidationError(
                f"Invalid private key length: {len(private_key)}, "
                f"expected {key_byte_length}"
            )
        public_key = montgomery_get_public_key(curve, private_key)
        jwk_public_key = montgomery_to_jwk_public_key(
            curve, key_byte_length, curve_name, public_key
        )
        return {**jwk_public_key, "d": encode_base64url(private_key)}
    except Exception as error:
        logger.debug("private key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert private key to JWK") from error


def _to_raw_public_key(curve: MontgomeryCurve, jwk: Mapping[str, Any]) -> bytes:
    check_header(jwk, "OKP", get_montgomery_curve_name(curve))
    return decode_member(jwk, "x", curve.gu_bytes_length)


def _to_raw_private_key(curve: MontgomeryCurve, jwk: Mapping[str, Any]) -> bytes:
    public_key = _to_raw_public_key(curve, jwk)
    private_key = decode_member(jwk, "d", curve.gu_bytes_length)
    derived = montgomery_get_public_key(curve, private_key)
    if not hmac.compare_digest(derived, public_key):
        raise ValidationError("Invalid JWK: invalid key data for d")
    return private_key


def montgomery_to_raw_public_key(
    curve: MontgomeryCurve, jwk_public_key: JwkPublicKey
) -> bytes:
    """Raw public key from an OKP JWK; ConversionError on failure."""
    try:
        return _to_raw_public_key(curve, jwk_public_key)
    except Exception as error:
        logger.debug("JWK to raw public key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw public key") from error


def montgomery_to_raw_private_key(
    curve: MontgomeryCurve, jwk_private_key: JwkPrivateKey
) -> bytes:
    """
    Raw private key from an OKP JWK (inverse of montgomery_to_jwk_private_key).

    Both x and d must decode to exactly the curve's key length, and x must be
    the public key derived from d.

    Raises:
        ConversionError: on any mismatch, length violation or bad encoding.
    """
    try:
        return _to_raw_private_key(curve, jwk_private_key)
    except Exception as error:
        logger.debug("JWK to raw private key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw private key") from error


class Montgomery:
    """
    Key management for one Montgomery curve handle.

    Example:
        x25519 = X25519(secrets.token_bytes)
        private_key = x25519.random_private_key()
        public_key = x25519.get_public_key(private_key)
        jwk = x25519.to_jwk_private_key(private_key)
    """

    def __init__(self, curve: MontgomeryCurve) -> None:
        self.curve = curve
        self.curve_name = get_montgomery_curve_name(curve)
        self.key_byte_length = curve.gu_bytes_length

    @property
    def random_bytes(self) -> RandomBytes:
        return self.curve.random_bytes

    def random_private_key(self) -> bytes:
        return montgomery_random_private_key(self.curve)

    def get_public_key(self, private_key: bytes, compressed: bool = True) -> bytes:
        return montgomery_get_public_key(self.curve, private_key, compressed)

    def get_shared_secret(self, private_key: bytes, public_key: bytes) -> bytes:
        return montgomery_get_shared_secret(
            self.curve, self.curve_name, private_key, public_key
        )

    def to_jwk_private_key(self, private_key: bytes) -> JwkPrivateKey:
        return montgomery_to_jwk_private_key(
            self.curve, self.key_byte_length, self.curve_name, private_key
        )

    def to_jwk_public_key(self, public_key: bytes) -> JwkPublicKey:
        return montgomery_to_jwk_public_key(
            self.curve, self.key_byte_length, self.curve_name, public_key
        )

    def to_raw_private_key(self, jwk_private_key: JwkPrivateKey) -> bytes:
        return montgomery_to_raw_private_key(self.curve, jwk_private_key)

    def to_raw_public_key(self, jwk_public_key: JwkPublicKey) -> bytes:
        return montgomery_to_raw_public_key(self.curve, jwk_public_key)


class X25519(Montgomery):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_x25519(random_bytes))


__all__: tuple[str, ...] = (
    "Montgomery",
    "X25519",
    "montgomery_get_public_key",
    "montgomery_get_shared_secret",
    "montgomery_is_valid_private_key",
    "montgomery_random_private_key",
    "montgomery_to_jwk_private_key",
    "montgomery_to_jwk_public_key",
    "montgomery_to_raw_private_key",
    "montgomery_to_raw_public_key",
)
