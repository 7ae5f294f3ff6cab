"""
Unified key management over elliptic curves: private key generation,
public key derivation, key agreement, signatures and JWK conversion for
X25519, Ed25519, P-256, P-384, P-521 and secp256k1. Arithmetic comes from
the cryptography package.
"""

import logging

from .__about__ import __version__
from .curves import (
    create_bls12_381,
    create_ed25519,
    create_p256,
    create_p384,
    create_p521,
    create_secp256k1,
    create_x25519,
    get_edwards_curve_name,
    get_montgomery_curve_name,
    get_weierstrass_curve_name,
    get_weierstrass_signature_algorithm,
)
from .errors import (
    ConversionError,
    CurveError,
    KeyGenerationError,
    PolicyError,
    PublicKeyDerivationError,
    SharedSecretError,
    SigningError,
    UnknownCurveError,
    ValidationError,
)
from .serde import decode_base64url, encode_base64url
from .unified import (
    P256,
    P384,
    P521,
    X25519,
    Ed25519,
    EcdhCurve,
    Edwards,
    JwkPrivateKey,
    JwkPublicKey,
    Montgomery,
    Secp256k1,
    SignatureCurve,
    Weierstrass,
    create_ecdh_curve,
    create_signature_curve,
    create_signature_curve_rng_disallowed,
    random_private_key,
    x25519_is_small_order_point,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "ConversionError",
    "CurveError",
    "KeyGenerationError",
    "PolicyError",
    "PublicKeyDerivationError",
    "SharedSecretError",
    "SigningError",
    "UnknownCurveError",
    "ValidationError",
    # Serde
    "decode_base64url",
    "encode_base64url",
    # Curve handles
    "create_bls12_381",
    "create_ed25519",
    "create_p256",
    "create_p384",
    "create_p521",
    "create_secp256k1",
    "create_x25519",
    # Curve name resolvers
    "get_edwards_curve_name",
    "get_montgomery_curve_name",
    "get_weierstrass_curve_name",
    "get_weierstrass_signature_algorithm",
    # Unified: types
    "EcdhCurve",
    "JwkPrivateKey",
    "JwkPublicKey",
    "SignatureCurve",
    # Unified: curves
    "Ed25519",
    "Edwards",
    "Montgomery",
    "P256",
    "P384",
    "P521",
    "Secp256k1",
    "Weierstrass",
    "X25519",
    # Unified: operations
    "random_private_key",
    "x25519_is_small_order_point",
    # Unified: factory
    "create_ecdh_curve",
    "create_signature_curve",
    "create_signature_curve_rng_disallowed",
)
