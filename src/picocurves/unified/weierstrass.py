"""
Unified key, ECDH and ECDSA operations for short Weierstrass curves.

Private keys are big-endian scalars of the curve's byte length. Public keys
are SEC1 points; the JWK form carries the affine x and y coordinates.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import Any

from ..curves.types import RandomBytes, default_random_bytes
from ..curves.weierstrass import (
    WeierstrassCurve,
    create_p256,
    create_p384,
    create_p521,
    create_secp256k1,
    get_weierstrass_curve_name,
    get_weierstrass_signature_algorithm,
)
from ..errors import (
    ConversionError,
    PolicyError,
    PublicKeyDerivationError,
    SharedSecretError,
    SigningError,
    ValidationError,
)
from ..serde import encode_base64url
from .jwk import check_header, decode_member
from .keygen import random_private_key
from .types import JwkPrivateKey, JwkPublicKey

logger = logging.getLogger(__name__)


def weierstrass_is_valid_private_key(
    curve: WeierstrassCurve, private_key: bytes
) -> bool:
    return curve.utils.is_valid_private_key(private_key)


def weierstrass_is_valid_public_key(
    curve: WeierstrassCurve, public_key: bytes
) -> bool:
    """True iff public_key is a SEC1 encoding of a point on the curve."""
    try:
        curve.get_point(public_key)
    except (ValueError, TypeError):
        return False
    return True


def weierstrass_random_private_key(curve: WeierstrassCurve) -> bytes:
    return random_private_key(curve)


def weierstrass_get_public_key(
    curve: WeierstrassCurve, private_key: bytes, compressed: bool = True
) -> bytes:
    """
    SEC1 public key for private_key.

    Args:
        curve: Weierstrass curve handle.
        private_key: n_byte_length-byte scalar in [1, n - 1].
        compressed: 02/03 || x when True, 04 || x || y otherwise.

    Raises:
        PublicKeyDerivationError: the private key is out of range or has the
            wrong length.
    """
    try:
        if not weierstrass_is_valid_private_key(curve, private_key):
            raise ValidationError("Weierstrass private key is invalid")
        return curve.get_public_key(private_key, compressed)
    except Exception as error:
        logger.debug("public key derivation failed: %r", error)
        raise PublicKeyDerivationError("Failed to get public key") from error


def weierstrass_get_shared_secret(
    curve: WeierstrassCurve, private_key: bytes, public_key: bytes
) -> bytes:
    """ECDH shared x-coordinate; SharedSecretError on failure or a zero result."""
    try:
        shared_secret = curve.get_shared_secret(private_key, public_key)
        if not any(shared_secret):
            raise ValidationError("Shared secret is zero")
        return shared_secret
    except Exception as error:
        logger.debug("shared secret computation failed: %r", error)
        raise SharedSecretError("Failed to compute shared secret") from error


def weierstrass_sign(
    curve: WeierstrassCurve,
    message: bytes,
    private_key: bytes,
    recoverable: bool = False,
) -> bytes:
    """
    Compact r || s ECDSA signature over the curve's hash of message.

    Raises:
        PolicyError: recoverable is True; no recovery id is available.
        SigningError: any other failure.
    """
    if recoverable:
        raise PolicyError("Recovered signature is not supported")

    try:
        return curve.sign(message, private_key)
    except Exception as error:
        logger.debug("signing failed: %r", error)
        raise SigningError("Failed to sign message") from error


def weierstrass_verify(
    curve: WeierstrassCurve, signature: bytes, message: bytes, public_key: bytes
) -> bool:
    try:
        return curve.verify(signature, message, public_key)
    except Exception as error:
        logger.debug("verification failed: %r", error)
        return False


def weierstrass_recover_public_key(
    curve: WeierstrassCurve, signature: bytes, message: bytes, compressed: bool = True
) -> bytes:
    raise PolicyError("Public key recovery is not supported")


def weierstrass_to_jwk_public_key(
    curve: WeierstrassCurve,
    key_byte_length: int,
    curve_name: str,
    signature_algorithm_name: str,
    public_key: bytes,
) -> JwkPublicKey:
    """EC JWK {kty, crv, alg, x, y} for a compressed or uncompressed point."""
    try:
        x, y = curve.get_point(public_key)
        return {
            "kty": "EC",
            "crv": curve_name,
            "alg": signature_algorithm_name,
            "x": encode_base64url(x.to_bytes(key_byte_length, "big")),
            "y": encode_base64url(y.to_bytes(key_byte_length, "big")),
        }
    except Exception as error:
        logger.debug("public key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert public key to JWK") from error


def weierstrass_to_jwk_private_key(
    curve: WeierstrassCurve,
    key_byte_length: int,
    curve_name: str,
    signature_algorithm_name: str,
    private_key: bytes,
) -> JwkPrivateKey:
    try:
        public_key = weierstrass_get_public_key(curve, private_key)
        jwk_public_key = weierstrass_to_jwk_public_key(
            curve, key_byte_length, curve_name, signature_algorithm_name, public_key
        )
        return {**jwk_public_key, "d": encode_base64url(private_key)}
    except Exception as error:
        logger.debug("private key to JWK conversion failed: %r", error)
        raise ConversionError("Failed to convert private key to JWK") from error


def _to_raw_public_key(
    curve: WeierstrassCurve,
    key_byte_length: int,
    curve_name: str,
    signature_algorithm_name: str,
    jwk: Mapping[str, Any],
) -> bytes:
    check_header(jwk, "EC", curve_name, signature_algorithm_name)
    x = decode_member(jwk, "x", key_byte_length)
    y = decode_member(jwk, "y", key_byte_length)
    public_key = b"\x04" + x + y
    if not weierstrass_is_valid_public_key(curve, public_key):
        raise ValidationError("Invalid JWK: point is not on the curve")
    return public_key


def weierstrass_to_raw_public_key(
    curve: WeierstrassCurve,
    key_byte_length: int,
    curve_name: str,
    signature_algorithm_name: str,
    jwk_public_key: JwkPublicKey,
) -> bytes:
    """
    Uncompressed SEC1 point (04 || x || y) from an EC JWK.

    Raises:
        ConversionError: header, encoding or length problems, or a point that
            is not on the curve.
    """
    try:
        return _to_raw_public_key(
            curve, key_byte_length, curve_name, signature_algorithm_name, jwk_public_key
        )
    except Exception as error:
        logger.debug("JWK to raw public key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw public key") from error


def weierstrass_to_raw_private_key(
    curve: WeierstrassCurve,
    key_byte_length: int,
    curve_name: str,
    signature_algorithm_name: str,
    jwk_private_key: JwkPrivateKey,
) -> bytes:
    """Private scalar from an EC JWK; d must derive the x/y point."""
    try:
        public_key = _to_raw_public_key(
            curve,
            key_byte_length,
            curve_name,
            signature_algorithm_name,
            jwk_private_key,
        )
        private_key = decode_member(jwk_private_key, "d", key_byte_length)
        derived = weierstrass_get_public_key(curve, private_key, compressed=False)
        if not hmac.compare_digest(derived, public_key):
            raise ValidationError("Invalid JWK: invalid key data for d")
        return private_key
    except Exception as error:
        logger.debug("JWK to raw private key conversion failed: %r", error)
        raise ConversionError("Failed to convert JWK to raw private key") from error


class Weierstrass:
    """
    Key management, ECDH and ECDSA for one short Weierstrass curve handle.

    Example:
        p256 = P256()
        alice, bob = p256.random_private_key(), p256.random_private_key()
        secret = p256.get_shared_secret(alice, p256.get_public_key(bob))
    """

    def __init__(self, curve: WeierstrassCurve) -> None:
        self.curve = curve
        self.curve_name = get_weierstrass_curve_name(curve)
        self.signature_algorithm_name = get_weierstrass_signature_algorithm(curve)
        self.key_byte_length = curve.n_byte_length

    @property
    def random_bytes(self) -> RandomBytes:
        return self.curve.random_bytes

    def random_private_key(self) -> bytes:
        return weierstrass_random_private_key(self.curve)

    def is_valid_private_key(self, private_key: bytes) -> bool:
        return weierstrass_is_valid_private_key(self.curve, private_key)

    def is_valid_public_key(self, public_key: bytes) -> bool:
        return weierstrass_is_valid_public_key(self.curve, public_key)

    def get_public_key(self, private_key: bytes, compressed: bool = True) -> bytes:
        return weierstrass_get_public_key(self.curve, private_key, compressed)

    def get_shared_secret(self, private_key: bytes, public_key: bytes) -> bytes:
        return weierstrass_get_shared_secret(self.curve, private_key, public_key)

    def sign(
        self, message: bytes, private_key: bytes, recoverable: bool = False
    ) -> bytes:
        return weierstrass_sign(self.curve, message, private_key, recoverable)

    def verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        return weierstrass_verify(self.curve, signature, message, public_key)

    def recover_public_key(
        self, signature: bytes, message: bytes, compressed: bool = True
    ) -> bytes:
        return weierstrass_recover_public_key(
            self.curve, signature, message, compressed
        )

    def to_jwk_private_key(self, private_key: bytes) -> JwkPrivateKey:
        return weierstrass_to_jwk_private_key(
            self.curve,
            self.key_byte_length,
            self.curve_name,
            self.signature_algorithm_name,
            private_key,
        )

    def to_jwk_public_key(self, public_key: bytes) -> JwkPublicKey:
        return weierstrass_to_jwk_public_key(
            self.curve,
            self.key_byte_length,
            self.curve_name,
            self.signature_algorithm_name,
            public_key,
        )

    def to_raw_private_key(self, jwk_private_key: JwkPrivateKey) -> bytes:
        return weierstrass_to_raw_private_key(
            self.curve,
            self.key_byte_length,
            self.curve_name,
            self.signature_algorithm_name,
            jwk_private_key,
        )

    def to_raw_public_key(self, jwk_public_key: JwkPublicKey) -> bytes:
        return weierstrass_to_raw_public_key(
            self.curve,
            self.key_byte_length,
            self.curve_name,
            self.signature_algorithm_name,
            jwk_public_key,
        )


class P256(Weierstrass):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_p256(random_bytes))


class P384(Weierstrass):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_p384(random_bytes))


class P521(Weierstrass):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_p521(random_bytes))


class Secp256k1(Weierstrass):
    def __init__(self, random_bytes: RandomBytes = default_random_bytes) -> None:
        super().__init__(create_secp256k1(random_bytes))


__all__: tuple[str, ...] = (
    "P256",
    "P384",
    "P521",
    "Secp256k1",
    "Weierstrass",
    "weierstrass_get_public_key",
    "weierstrass_get_shared_secret",
    "weierstrass_is_valid_private_key",
    "weierstrass_is_valid_public_key",
    "weierstrass_random_private_key",
    "weierstrass_recover_public_key",
    "weierstrass_sign",
    "weierstrass_to_jwk_private_key",
    "weierstrass_to_jwk_public_key",
    "weierstrass_to_raw_private_key",
    "weierstrass_to_raw_public_key",
    "weierstrass_verify",
)
