"""
Curve handles: Montgomery (X25519), Edwards (Ed25519), short Weierstrass
(P-256, P-384, P-521, secp256k1) and BLS12-381.
"""

from .bls12_381 import BLS12_381_FR_ORDER, Bls12381Curve, create_bls12_381
from .edwards import (
    ED25519_CURVE,
    EdwardsCurve,
    create_ed25519,
    get_edwards_curve_name,
    get_edwards_key_byte_length,
)
from .modular import (
    get_field_bytes_length,
    get_min_hash_length,
    map_hash_to_field,
)
from .montgomery import (
    MontgomeryCurve,
    adjust_scalar_bytes,
    create_x25519,
    get_montgomery_curve_name,
)
from .types import RandomBytes, default_random_bytes
from .weierstrass import (
    WeierstrassCurve,
    create_p256,
    create_p384,
    create_p521,
    create_secp256k1,
    get_weierstrass_curve_name,
    get_weierstrass_signature_algorithm,
)

__all__: tuple[str, ...] = (
    # Types
    "RandomBytes",
    "default_random_bytes",
    # Hash-to-field
    "get_field_bytes_length",
    "get_min_hash_length",
    "map_hash_to_field",
    # Montgomery
    "MontgomeryCurve",
    "adjust_scalar_bytes",
    "create_x25519",
    "get_montgomery_curve_name",
    # Edwards
    "ED25519_CURVE",
    "EdwardsCurve",
    "create_ed25519",
    "get_edwards_curve_name",
    "get_edwards_key_byte_length",
    # Weierstrass
    "WeierstrassCurve",
    "create_p256",
    "create_p384",
    "create_p521",
    "create_secp256k1",
    "get_weierstrass_curve_name",
    "get_weierstrass_signature_algorithm",
    # Pairing-friendly
    "BLS12_381_FR_ORDER",
    "Bls12381Curve",
    "create_bls12_381",
)
