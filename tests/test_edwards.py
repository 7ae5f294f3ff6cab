"""Tests for the unified Edwards (Ed25519) key and signature layer."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519 as ed25519_lib
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
)

from picocurves import Ed25519
from picocurves.errors import (
    ConversionError,
    KeyGenerationError,
    PolicyError,
    PublicKeyDerivationError,
    SigningError,
    ValidationError,
)
from picocurves.serde import encode_base64url
from picocurves.unified import edwards_is_valid_private_key

# RFC 8032 section 7.1, TEST 1 and TEST 2
SECRET_1 = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
PUBLIC_1 = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
SIGNATURE_1 = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)
SECRET_2 = bytes.fromhex(
    "4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb"
)
PUBLIC_2 = bytes.fromhex(
    "3d4017c3e843895a92b70aa74d1b7ebc9c982ccf2ec4968cc0cd55f12af4660c"
)


def test_curve_metadata() -> None:
    ed25519 = Ed25519()
    assert ed25519.curve_name == "Ed25519"
    assert ed25519.signature_algorithm_name == "EdDSA"
    assert ed25519.key_byte_length == 32


def test_random_private_key_uses_bound_source() -> None:
    requests: list[int] = []

    def source(byte_length: int) -> bytes:
        requests.append(byte_length)
        return b"\x05" * byte_length

    assert Ed25519(source).random_private_key() == b"\x05" * 32
    assert requests == [32]


def test_random_private_key_source_failure() -> None:
    def failing(byte_length: int) -> bytes:
        raise OSError("no entropy")

    with pytest.raises(KeyGenerationError) as info:
        Ed25519(failing).random_private_key()
    assert isinstance(info.value.__cause__, OSError)


def test_get_public_key() -> None:
    ed25519 = Ed25519()
    assert ed25519.get_public_key(SECRET_1) == PUBLIC_1
    assert ed25519.get_public_key(SECRET_2) == PUBLIC_2


def test_get_public_key_accepts_seed_and_public_key() -> None:
    assert Ed25519().get_public_key(SECRET_1 + PUBLIC_1) == PUBLIC_1


def test_get_public_key_rejects_wrong_embedded_public_key() -> None:
    with pytest.raises(PublicKeyDerivationError) as info:
        Ed25519().get_public_key(SECRET_1 + PUBLIC_2)
    assert isinstance(info.value.__cause__, ValidationError)


@pytest.mark.parametrize("private_key", [bytes(31), bytes(33), bytes(0)])
def test_get_public_key_rejects_length(private_key: bytes) -> None:
    with pytest.raises(PublicKeyDerivationError):
        Ed25519().get_public_key(private_key)


def test_get_public_key_uncompressed_is_policy_error() -> None:
    with pytest.raises(PolicyError):
        Ed25519().get_public_key(SECRET_1, compressed=False)


def test_sign_and_verify() -> None:
    ed25519 = Ed25519()
    assert ed25519.sign(b"", SECRET_1) == SIGNATURE_1
    assert ed25519.verify(SIGNATURE_1, b"", PUBLIC_1) is True
    signature = ed25519.sign(b"hello", SECRET_2)
    assert ed25519.verify(signature, b"hello", PUBLIC_2) is True
    assert ed25519.verify(signature, b"hellO", PUBLIC_2) is False
    assert ed25519.verify(signature, b"hello", PUBLIC_1) is False


def test_sign_with_seed_and_public_key() -> None:
    assert Ed25519().sign(b"", SECRET_1 + PUBLIC_1) == SIGNATURE_1


def test_sign_recoverable_is_policy_error() -> None:
    with pytest.raises(PolicyError, match="Recovered signature"):
        Ed25519().sign(b"", SECRET_1, recoverable=True)


def test_sign_rejects_invalid_key() -> None:
    with pytest.raises(SigningError, match="Failed to sign message") as info:
        Ed25519().sign(b"", bytes(31))
    assert info.value.__cause__ is not None


def test_verify_malformed_input_returns_false() -> None:
    ed25519 = Ed25519()
    assert ed25519.verify(SIGNATURE_1[:63], b"", PUBLIC_1) is False
    assert ed25519.verify(SIGNATURE_1, b"", PUBLIC_1[:31]) is False


def test_recover_public_key_is_policy_error() -> None:
    with pytest.raises(PolicyError, match="recovery is not supported"):
        Ed25519().recover_public_key(SIGNATURE_1, b"")


def test_interop_with_library_generated_keys() -> None:
    lib_key = ed25519_lib.Ed25519PrivateKey.generate()
    seed = lib_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    ed25519 = Ed25519()
    public_key = ed25519.get_public_key(seed)
    assert ed25519.verify(lib_key.sign(b"interop"), b"interop", public_key)
    lib_key.public_key().verify(ed25519.sign(b"interop", seed), b"interop")


def test_to_jwk_private_key() -> None:
    assert Ed25519().to_jwk_private_key(SECRET_1) == {
        "kty": "OKP",
        "crv": "Ed25519",
        "alg": "EdDSA",
        "x": encode_base64url(PUBLIC_1),
        "d": encode_base64url(SECRET_1),
    }


def test_jwk_round_trip() -> None:
    ed25519 = Ed25519()
    for seed in (SECRET_1, SECRET_2, ed25519.random_private_key()):
        jwk = ed25519.to_jwk_private_key(seed)
        assert ed25519.to_raw_private_key(jwk) == seed
        assert ed25519.to_raw_public_key(jwk) == ed25519.get_public_key(seed)


def test_to_raw_public_key_accepts_missing_alg() -> None:
    jwk = {"kty": "OKP", "crv": "Ed25519", "x": encode_base64url(PUBLIC_1)}
    assert Ed25519().to_raw_public_key(jwk) == PUBLIC_1


@pytest.mark.parametrize(
    "changes",
    [
        {"alg": "ES256"},
        {"crv": "X25519"},
        {"kty": "EC"},
        {"d": encode_base64url(SECRET_2)},
        {"d": None},
        {"x": encode_base64url(PUBLIC_1[:31])},
    ],
)
def test_to_raw_private_key_rejects(changes: dict) -> None:
    jwk = {**Ed25519().to_jwk_private_key(SECRET_1), **changes}
    with pytest.raises(ConversionError):
        Ed25519().to_raw_private_key(jwk)


def test_to_jwk_private_key_rejects_expanded_key() -> None:
    with pytest.raises(ConversionError):
        Ed25519().to_jwk_private_key(SECRET_1 + PUBLIC_1)


def test_to_jwk_public_key_rejects_length() -> None:
    with pytest.raises(ConversionError, match="public key to JWK"):
        Ed25519().to_jwk_public_key(PUBLIC_1[:31])


def test_is_valid_private_key() -> None:
    curve = Ed25519().curve
    assert edwards_is_valid_private_key(curve, SECRET_1)
    assert edwards_is_valid_private_key(curve, SECRET_1 + PUBLIC_1)
    assert not edwards_is_valid_private_key(curve, bytes(32))
    assert not edwards_is_valid_private_key(curve, bytes(32) + PUBLIC_1)
    assert not edwards_is_valid_private_key(curve, SECRET_1[:31])
    assert not edwards_is_valid_private_key(curve, SECRET_1 + b"\x00")


@pytest.mark.parametrize("private_key", [bytes(32), bytes(64)])
def test_get_public_key_rejects_zero_seed(private_key: bytes) -> None:
    with pytest.raises(PublicKeyDerivationError) as info:
        Ed25519().get_public_key(private_key)
    assert isinstance(info.value.__cause__, ValidationError)


def test_sign_rejects_zero_seed() -> None:
    with pytest.raises(SigningError) as info:
        Ed25519().sign(b"", bytes(32))
    assert isinstance(info.value.__cause__, ValidationError)


def test_to_jwk_private_key_rejects_zero_seed() -> None:
    with pytest.raises(ConversionError, match="private key to JWK") as info:
        Ed25519().to_jwk_private_key(bytes(32))
    assert isinstance(info.value.__cause__, PublicKeyDerivationError)


def test_to_raw_private_key_rejects_zero_d() -> None:
    jwk = {**Ed25519().to_jwk_private_key(SECRET_1), "d": encode_base64url(bytes(32))}
    with pytest.raises(ConversionError):
        Ed25519().to_raw_private_key(jwk)
