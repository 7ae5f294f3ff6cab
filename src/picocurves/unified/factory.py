"""Construct unified curve objects by canonical curve name."""

from __future__ import annotations

from ..curves.types import RandomBytes
from ..errors import UnknownCurveError
from .edwards import Ed25519
from .montgomery import X25519
from .types import EcdhCurve, SignatureCurve
from .weierstrass import P256, P384, P521, Secp256k1

_ECDH_CURVES = {
    "P-256": P256,
    "P-384": P384,
    "P-521": P521,
    "secp256k1": Secp256k1,
    "X25519": X25519,
}

_SIGNATURE_CURVES = {
    "P-256": P256,
    "P-384": P384,
    "P-521": P521,
    "secp256k1": Secp256k1,
    "Ed25519": Ed25519,
}


def create_ecdh_curve(curve_name: str, random_bytes: RandomBytes) -> EcdhCurve:
    """
    Key-agreement curve for curve_name.

    Raises:
        UnknownCurveError: curve_name is not one of P-256, P-384, P-521,
            secp256k1, X25519.
    """
    try:
        factory = _ECDH_CURVES[curve_name]
    except KeyError:
        raise UnknownCurveError(f"Unsupported ECDH curve: {curve_name}") from None
    return factory(random_bytes)


def create_signature_curve(
    curve_name: str, random_bytes: RandomBytes
) -> SignatureCurve:
    """
    Signature curve for curve_name.

    Raises:
        UnknownCurveError: curve_name is not one of P-256, P-384, P-521,
            secp256k1, Ed25519.
    """
    try:
        factory = _SIGNATURE_CURVES[curve_name]
    except KeyError:
        raise UnknownCurveError(
            f"Unsupported signature curve: {curve_name}"
        ) from None
    return factory(random_bytes)


def _disallowed_random_bytes(byte_length: int = 32) -> bytes:
    raise RuntimeError("RNG usage is disallowed for this curve")


def create_signature_curve_rng_disallowed(curve_name: str) -> SignatureCurve:
    """
    Signature curve whose random source always raises.

    Signing, verification and JWK conversion work as usual; key generation
    fails with KeyGenerationError.
    """
    return create_signature_curve(curve_name, _disallowed_random_bytes)


__all__: tuple[str, ...] = (
    "create_ecdh_curve",
    "create_signature_curve",
    "create_signature_curve_rng_disallowed",
)
