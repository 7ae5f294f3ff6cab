"""Stability tests for the unified curves.

Lock in exact outputs for published inputs (RFC 7748, RFC 8032 and the
generator point of each Weierstrass curve) so that any change in how keys
are derived, encoded or signed is detected.
"""

from __future__ import annotations

from picocurves import P256, X25519, Ed25519, Secp256k1

# --- X25519: RFC 7748 section 6.1 ---
X25519_ALICE_PRIV = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
)
X25519_ALICE_PUB = bytes.fromhex(
    "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
)
X25519_BOB_PRIV = bytes.fromhex(
    "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
)
X25519_BOB_PUB = bytes.fromhex(
    "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f"
)

# --- Ed25519: RFC 8032 section 7.1, TEST 1 ---
ED25519_SECRET = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
ED25519_PUBLIC_EXPECTED = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
ED25519_MSG = b""
ED25519_SIG_EXPECTED = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)

# --- Weierstrass: private key 1 maps to the generator G ---
PRIV_ONE = bytes(31) + bytes([1])
SECP_PUB_EXPECTED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
P256_PUB_EXPECTED = bytes.fromhex(
    "046b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
    "4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"
)


def test_x25519_public_key_stable() -> None:
    """RFC 7748 public keys for Alice and Bob must not change."""
    x25519 = X25519()
    assert x25519.get_public_key(X25519_ALICE_PRIV) == X25519_ALICE_PUB
    assert x25519.get_public_key(X25519_BOB_PRIV) == X25519_BOB_PUB


def test_x25519_shared_secret_stable() -> None:
    x25519 = X25519()
    alice = x25519.get_shared_secret(X25519_ALICE_PRIV, X25519_BOB_PUB)
    bob = x25519.get_shared_secret(X25519_BOB_PRIV, X25519_ALICE_PUB)
    assert alice == bob
    assert len(alice) == 32


def test_ed25519_public_key_stable() -> None:
    """Ed25519 public key for RFC 8032 test secret must not change."""
    assert Ed25519().get_public_key(ED25519_SECRET) == ED25519_PUBLIC_EXPECTED


def test_ed25519_sign_stable() -> None:
    """Ed25519 signature for RFC 8032 test vector must not change."""
    assert Ed25519().sign(ED25519_MSG, ED25519_SECRET) == ED25519_SIG_EXPECTED


def test_ed25519_verify_stable() -> None:
    """Ed25519 verify must accept the RFC 8032 (sig, message, pub) triple."""
    assert (
        Ed25519().verify(ED25519_SIG_EXPECTED, ED25519_MSG, ED25519_PUBLIC_EXPECTED)
        is True
    )


def test_secp256k1_public_key_stable() -> None:
    secp = Secp256k1()
    assert secp.get_public_key(PRIV_ONE, compressed=False) == SECP_PUB_EXPECTED
    assert secp.get_public_key(PRIV_ONE) == b"\x02" + SECP_PUB_EXPECTED[1:33]


def test_p256_public_key_stable() -> None:
    p256 = P256()
    assert p256.get_public_key(PRIV_ONE, compressed=False) == P256_PUB_EXPECTED
    # Gy is odd
    assert p256.get_public_key(PRIV_ONE) == b"\x03" + P256_PUB_EXPECTED[1:33]
