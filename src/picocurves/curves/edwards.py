"""
Edwards curves (Ed25519, RFC 8032): curve handle over the cryptography
package, with an injectable random-byte source for seed generation.
"""

from __future__ import annotations

from typing import NamedTuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..errors import UnknownCurveError
from .types import CurveUtils, RandomBytes, default_random_bytes


class EdwardsCurveParams(NamedTuple):
    p: int
    n: int
    n_byte_length: int


# Field prime p = 2^255 - 19, group order L (order of base point)
ED25519_CURVE = EdwardsCurveParams(
    p=2**255 - 19,
    n=2**252 + 27742317777372353535851937790883648493,
    n_byte_length=32,
)


class EdwardsCurve:
    """
    Capability object for one Edwards curve.

    Private keys are n_byte_length-byte seeds; public keys are compressed
    points of the same length.
    """

    def __init__(
        self,
        params: EdwardsCurveParams,
        random_bytes: RandomBytes,
        private_key_type=ed25519.Ed25519PrivateKey,
        public_key_type=ed25519.Ed25519PublicKey,
    ) -> None:
        self.params = params
        self.p = params.p
        self.n = params.n
        self.n_byte_length = params.n_byte_length
        self.random_bytes = random_bytes
        self._private_key_type = private_key_type
        self._public_key_type = public_key_type
        self.utils = CurveUtils(random_private_key=self._random_private_key)

    def _random_private_key(self) -> bytes:
        seed = self.random_bytes(self.n_byte_length)
        if not any(seed):
            raise ValueError("random source returned an all-zero seed")
        return seed

    def get_public_key(self, seed: bytes) -> bytes:
        """Compressed public key from seed."""
        key = self._private_key_type.from_private_bytes(bytes(seed))
        return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def sign(self, message: bytes, seed: bytes) -> bytes:
        """Signature (R || S) of message under seed."""
        key = self._private_key_type.from_private_bytes(bytes(seed))
        return key.sign(bytes(message))

    def verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool:
        """True iff signature is valid; malformed keys raise ValueError."""
        key = self._public_key_type.from_public_bytes(bytes(public_key))
        try:
            key.verify(bytes(signature), bytes(message))
        except InvalidSignature:
            return False
        return True


def create_ed25519(
    random_bytes: RandomBytes = default_random_bytes,
) -> EdwardsCurve:
    """Ed25519 curve handle bound to random_bytes."""
    return EdwardsCurve(ED25519_CURVE, random_bytes)


def get_edwards_curve_name(curve: EdwardsCurve) -> str:
    """Canonical curve name from the field prime."""
    if curve.p == ED25519_CURVE.p:
        return "Ed25519"
    raise UnknownCurveError("Unknown curve")


def get_edwards_key_byte_length(curve: EdwardsCurve) -> int:
    return curve.n_byte_length


__all__: tuple[str, ...] = (
    "ED25519_CURVE",
    "EdwardsCurve",
    "EdwardsCurveParams",
    "create_ed25519",
    "get_edwards_curve_name",
    "get_edwards_key_byte_length",
)
