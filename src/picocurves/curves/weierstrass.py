"""
Short Weierstrass curves (P-256, P-384, P-521, secp256k1): curve handles over
the cryptography package's EC primitives, with an injectable random-byte
source and hash-to-field private key generation.
"""

from __future__ import annotations

from typing import NamedTuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..errors import UnknownCurveError
from .modular import get_min_hash_length, map_hash_to_field
from .types import RandomBytes, WeierstrassUtils, default_random_bytes


class WeierstrassCurveParams(NamedTuple):
    p: int
    n: int
    n_byte_length: int
    ec_curve: type[ec.EllipticCurve]
    hash_algorithm: type[hashes.HashAlgorithm]
    low_s: bool


P256_CURVE = WeierstrassCurveParams(
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    n_byte_length=32,
    ec_curve=ec.SECP256R1,
    hash_algorithm=hashes.SHA256,
    low_s=False,
)

P384_CURVE = WeierstrassCurveParams(
    p=int(
        "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe"
        "ffffffff0000000000000000ffffffff",
        16,
    ),
    n=int(
        "ffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf"
        "581a0db248b0a77aecec196accc52973",
        16,
    ),
    n_byte_length=48,
    ec_curve=ec.SECP384R1,
    hash_algorithm=hashes.SHA384,
    low_s=False,
)

# p = 2^521 - 1
P521_CURVE = WeierstrassCurveParams(
    p=2**521 - 1,
    n=int(
        "01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
        "fa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409",
        16,
    ),
    n_byte_length=66,
    ec_curve=ec.SECP521R1,
    hash_algorithm=hashes.SHA512,
    low_s=False,
)

SECP256K1_CURVE = WeierstrassCurveParams(
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    n_byte_length=32,
    ec_curve=ec.SECP256K1,
    hash_algorithm=hashes.SHA256,
    low_s=True,
)

# field prime -> (curve name, JWS algorithm)
_CURVE_NAMES: dict[int, tuple[str, str]] = {
    P256_CURVE.p: ("P-256", "ES256"),
    P384_CURVE.p: ("P-384", "ES384"),
    P521_CURVE.p: ("P-521", "ES512"),
    SECP256K1_CURVE.p: ("secp256k1", "ES256K"),
}


class WeierstrassCurve:
    """
    Capability object for one short Weierstrass curve.

    Private keys are n_byte_length-byte big-endian scalars in [1, n - 1].
    Public keys are SEC1 points, compressed (02/03 || x) or uncompressed
    (04 || x || y). Signatures are compact r || s.
    """

    def __init__(
        self, params: WeierstrassCurveParams, random_bytes: RandomBytes
    ) -> None:
        self.params = params
        self.p = params.p
        self.n = params.n
        self.n_byte_length = params.n_byte_length
        self.random_bytes = random_bytes
        self.utils = WeierstrassUtils(
            random_private_key=self._random_private_key,
            is_valid_private_key=self._is_valid_private_key,
        )

    def _random_private_key(self) -> bytes:
        length = get_min_hash_length(self.n)
        return map_hash_to_field(self.random_bytes(length), self.n)

    def _is_valid_private_key(self, private_key: bytes) -> bool:
        if len(private_key) != self.n_byte_length:
            return False
        return 0 < int.from_bytes(private_key, "big") < self.n

    def _load_private_key(self, private_key: bytes) -> ec.EllipticCurvePrivateKey:
        if not self._is_valid_private_key(private_key):
            raise ValueError("invalid private key")
        d = int.from_bytes(private_key, "big")
        return ec.derive_private_key(d, self.params.ec_curve())

    def _load_public_key(self, public_key: bytes) -> ec.EllipticCurvePublicKey:
        return ec.EllipticCurvePublicKey.from_encoded_point(
            self.params.ec_curve(), bytes(public_key)
        )

    def get_public_key(self, private_key: bytes, compressed: bool = True) -> bytes:
        if compressed:
            fmt = PublicFormat.CompressedPoint
        else:
            fmt = PublicFormat.UncompressedPoint
        key = self._load_private_key(private_key)
        return key.public_key().public_bytes(Encoding.X962, fmt)

    def get_point(self, public_key: bytes) -> tuple[int, int]:
        """Affine (x, y) of a SEC1 point; ValueError if it is not on the curve."""
        numbers = self._load_public_key(public_key).public_numbers()
        return (numbers.x, numbers.y)

    def get_shared_secret(self, private_key: bytes, public_key: bytes) -> bytes:
        """ECDH: x-coordinate of private_key * public_key."""
        key = self._load_private_key(private_key)
        return key.exchange(ec.ECDH(), self._load_public_key(public_key))

    def sign(self, message: bytes, private_key: bytes) -> bytes:
        """ECDSA over hash(message); low-S normalized on secp256k1."""
        key = self._load_private_key(private_key)
        der = key.sign(bytes(message), ec.ECDSA(self.params.hash_algorithm()))
        r, s = decode_dss_signature(der)
        if self.params.low_s and s > self.n // 2:
            s = self.n - s
        return to_raw_signature(self, r, s)

    def verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        """True iff signature is a valid compact signature for public_key."""
        r, s = from_raw_signature(self, signature)
        if self.params.low_s and s > self.n // 2:
            return False
        try:
            self._load_public_key(public_key).verify(
                encode_dss_signature(r, s),
                bytes(message),
                ec.ECDSA(self.params.hash_algorithm()),
            )
        except InvalidSignature:
            return False
        return True


def from_raw_signature(
    curve: WeierstrassCurve, raw_signature: bytes
) -> tuple[int, int]:
    """
    Split a compact r || s signature into (r, s).

    A trailing recovery byte (length 2 * n_byte_length + 1) is accepted and
    ignored.
    """
    size = curve.n_byte_length
    if len(raw_signature) == size * 2 + 1:
        raw_signature = raw_signature[:-1]
    if len(raw_signature) != size * 2:
        raise ValueError("Invalid raw signature")
    r = int.from_bytes(raw_signature[:size], "big")
    s = int.from_bytes(raw_signature[size:], "big")
    if not (0 < r < curve.n and 0 < s < curve.n):
        raise ValueError("Invalid raw signature")
    return (r, s)


def to_raw_signature(curve: WeierstrassCurve, r: int, s: int) -> bytes:
    size = curve.n_byte_length
    return r.to_bytes(size, "big") + s.to_bytes(size, "big")


def create_p256(
    random_bytes: RandomBytes = default_random_bytes,
) -> WeierstrassCurve:
    return WeierstrassCurve(P256_CURVE, random_bytes)


def create_p384(
    random_bytes: RandomBytes = default_random_bytes,
) -> WeierstrassCurve:
    return WeierstrassCurve(P384_CURVE, random_bytes)


def create_p521(
    random_bytes: RandomBytes = default_random_bytes,
) -> WeierstrassCurve:
    return WeierstrassCurve(P521_CURVE, random_bytes)


def create_secp256k1(
    random_bytes: RandomBytes = default_random_bytes,
) -> WeierstrassCurve:
    return WeierstrassCurve(SECP256K1_CURVE, random_bytes)


def get_weierstrass_curve_name(curve: WeierstrassCurve) -> str:
    """Canonical curve name from the field prime."""
    try:
        return _CURVE_NAMES[curve.p][0]
    except KeyError:
        raise UnknownCurveError("Unknown curve") from None


def get_weierstrass_signature_algorithm(curve: WeierstrassCurve) -> str:
    """JWS algorithm name (ES256, ES384, ES512, ES256K) from the field prime."""
    try:
        return _CURVE_NAMES[curve.p][1]
    except KeyError:
        raise UnknownCurveError("Unknown curve") from None


__all__: tuple[str, ...] = (
    "P256_CURVE",
    "P384_CURVE",
    "P521_CURVE",
    "SECP256K1_CURVE",
    "WeierstrassCurve",
    "WeierstrassCurveParams",
    "create_p256",
    "create_p384",
    "create_p521",
    "create_secp256k1",
    "from_raw_signature",
    "get_weierstrass_curve_name",
    "get_weierstrass_signature_algorithm",
    "to_raw_signature",
)
