#!/usr/bin/env python3
"""Example: sign and verify with every signature curve, keys via JWK."""

import secrets

from picocurves import create_signature_curve, create_signature_curve_rng_disallowed

message = b"Hello, picocurves"
for name in ("Ed25519", "P-256", "P-384", "P-521", "secp256k1"):
    curve = create_signature_curve(name, secrets.token_bytes)
    jwk = curve.to_jwk_private_key(curve.random_private_key())

    # Verifier side: no randomness needed
    verifier = create_signature_curve_rng_disallowed(name)
    private_key = verifier.to_raw_private_key(jwk)
    signature = curve.sign(message, private_key)
    ok = verifier.verify(signature, message, verifier.get_public_key(private_key))
    print(f"{name:10} {jwk['kty']} alg={curve.signature_algorithm_name:7} verify={ok}")
