"""
Unified key layer: one key-management contract across curve families.

Every operation presents a single error kind from picocurves.errors, chained
to whatever the underlying curve handle raised.
"""

from .edwards import (
    Ed25519,
    Edwards,
    edwards_get_public_key,
    edwards_is_valid_private_key,
    edwards_random_private_key,
    edwards_recover_public_key,
    edwards_sign,
    edwards_to_jwk_private_key,
    edwards_to_jwk_public_key,
    edwards_to_raw_private_key,
    edwards_to_raw_public_key,
    edwards_verify,
)
from .factory import (
    create_ecdh_curve,
    create_signature_curve,
    create_signature_curve_rng_disallowed,
)
from .keygen import random_private_key
from .montgomery import (
    X25519,
    Montgomery,
    montgomery_get_public_key,
    montgomery_get_shared_secret,
    montgomery_is_valid_private_key,
    montgomery_random_private_key,
    montgomery_to_jwk_private_key,
    montgomery_to_jwk_public_key,
    montgomery_to_raw_private_key,
    montgomery_to_raw_public_key,
)
from .small_order import SMALL_ORDER_POINTS, x25519_is_small_order_point
from .types import (
    EcdhCurve,
    JwkPrivateKey,
    JwkPublicKey,
    SignatureCurve,
    UnifiedCurve,
)
from .weierstrass import (
    P256,
    P384,
    P521,
    Secp256k1,
    Weierstrass,
    weierstrass_get_public_key,
    weierstrass_get_shared_secret,
    weierstrass_is_valid_private_key,
    weierstrass_is_valid_public_key,
    weierstrass_random_private_key,
    weierstrass_recover_public_key,
    weierstrass_sign,
    weierstrass_to_jwk_private_key,
    weierstrass_to_jwk_public_key,
    weierstrass_to_raw_private_key,
    weierstrass_to_raw_public_key,
    weierstrass_verify,
)

__all__: tuple[str, ...] = (
    # Types
    "EcdhCurve",
    "JwkPrivateKey",
    "JwkPublicKey",
    "SignatureCurve",
    "UnifiedCurve",
    # Shared
    "SMALL_ORDER_POINTS",
    "random_private_key",
    "x25519_is_small_order_point",
    # Montgomery
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
    # Edwards
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
    # Weierstrass
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
    # Factory
    "create_ecdh_curve",
    "create_signature_curve",
    "create_signature_curve_rng_disallowed",
)
