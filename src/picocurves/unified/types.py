"""JWK record shapes and the capability sets the unified curve objects provide."""

from __future__ import annotations

from typing import Protocol, TypedDict

from ..curves.types import RandomBytes


class _JwkPublicKeyRequired(TypedDict):
    kty: str
    crv: str
    x: str


class JwkPublicKey(_JwkPublicKeyRequired, total=False):
    alg: str
    y: str


class JwkPrivateKey(JwkPublicKey):
    d: str


class UnifiedCurve(Protocol):
    curve_name: str
    key_byte_length: int

    @property
    def random_bytes(self) -> RandomBytes: ...

    def random_private_key(self) -> bytes: ...

    def get_public_key(self, private_key: bytes, compressed: bool = True) -> bytes: ...

    def to_jwk_private_key(self, private_key: bytes) -> JwkPrivateKey: ...

    def to_jwk_public_key(self, public_key: bytes) -> JwkPublicKey: ...

    def to_raw_private_key(self, jwk_private_key: JwkPrivateKey) -> bytes: ...

    def to_raw_public_key(self, jwk_public_key: JwkPublicKey) -> bytes: ...


class EcdhCurve(UnifiedCurve, Protocol):
    def get_shared_secret(self, private_key: bytes, public_key: bytes) -> bytes: ...


class SignatureCurve(UnifiedCurve, Protocol):
    signature_algorithm_name: str

    def sign(
        self, message: bytes, private_key: bytes, recoverable: bool = False
    ) -> bytes: ...

    def verify(self, signature: bytes, message: bytes, public_key: bytes) -> bool: ...

    def recover_public_key(
        self, signature: bytes, message: bytes, compressed: bool = True
    ) -> bytes: ...


__all__: tuple[str, ...] = (
    "EcdhCurve",
    "JwkPrivateKey",
    "JwkPublicKey",
    "SignatureCurve",
    "UnifiedCurve",
)
