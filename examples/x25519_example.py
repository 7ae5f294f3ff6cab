#!/usr/bin/env python3
"""Example: X25519 key agreement with JWK export."""

import json

from picocurves import X25519, x25519_is_small_order_point

x25519 = X25519()
alice = x25519.random_private_key()
bob = x25519.random_private_key()
alice_pub = x25519.get_public_key(alice)
bob_pub = x25519.get_public_key(bob)

print("Bob's key is small order:", x25519_is_small_order_point(bob_pub))
secret_a = x25519.get_shared_secret(alice, bob_pub)
secret_b = x25519.get_shared_secret(bob, alice_pub)
print("Shared secret:", secret_a.hex()[:32] + "...")
print("Agree:", secret_a == secret_b)

jwk = x25519.to_jwk_private_key(alice)
print("Alice JWK:", json.dumps({**jwk, "d": "..."}))
print("Round-trip:", x25519.to_raw_private_key(jwk) == alice)
