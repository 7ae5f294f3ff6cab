"""Tests for curve handles and curve name resolvers."""

from __future__ import annotations

import pytest

from picocurves.curves import (
    BLS12_381_FR_ORDER,
    ED25519_CURVE,
    EdwardsCurve,
    MontgomeryCurve,
    WeierstrassCurve,
    adjust_scalar_bytes,
    create_bls12_381,
    create_ed25519,
    create_p256,
    create_p384,
    create_p521,
    create_secp256k1,
    create_x25519,
    get_edwards_curve_name,
    get_edwards_key_byte_length,
    get_montgomery_curve_name,
    get_weierstrass_curve_name,
    get_weierstrass_signature_algorithm,
)
from picocurves.curves.weierstrass import (
    P256_CURVE,
    from_raw_signature,
    to_raw_signature,
)
from picocurves.errors import UnknownCurveError


class RecordingSource:
    """Random-byte source returning a fixed byte, recording each request."""

    def __init__(self, fill: int = 0) -> None:
        self.fill = fill
        self.requests: list[int] = []

    def __call__(self, byte_length: int) -> bytes:
        self.requests.append(byte_length)
        return bytes([self.fill]) * byte_length


def test_adjust_scalar_bytes_clamps() -> None:
    clamped = adjust_scalar_bytes(b"\xff" * 32)
    assert clamped[0] == 0xF8
    assert clamped[31] == 0x7F
    assert clamped[1:31] == b"\xff" * 30
    assert adjust_scalar_bytes(bytes(32))[31] == 0x40


def test_adjust_scalar_bytes_rejects_length() -> None:
    with pytest.raises(ValueError):
        adjust_scalar_bytes(bytes(31))


def test_x25519_handle() -> None:
    source = RecordingSource(0xFF)
    curve = create_x25519(source)
    assert curve.p == 2**255 - 19
    assert curve.gu_bytes_length == 32
    key = curve.utils.random_private_key()
    assert source.requests == [32]
    assert key == adjust_scalar_bytes(b"\xff" * 32)


def test_get_montgomery_curve_name() -> None:
    assert get_montgomery_curve_name(create_x25519()) == "X25519"


def test_get_montgomery_curve_name_unknown() -> None:
    # X448 sized handle
    curve = MontgomeryCurve(
        p=2**448 - 2**224 - 1,
        gu_bytes_length=56,
        random_bytes=RecordingSource(),
        adjust_scalar_bytes=lambda data: data,
    )
    with pytest.raises(UnknownCurveError):
        get_montgomery_curve_name(curve)


def test_ed25519_handle() -> None:
    source = RecordingSource(7)
    curve = create_ed25519(source)
    assert curve.utils.random_private_key() == b"\x07" * 32
    assert source.requests == [32]
    assert get_edwards_curve_name(curve) == "Ed25519"
    assert get_edwards_key_byte_length(curve) == 32


def test_get_edwards_curve_name_unknown() -> None:
    curve = EdwardsCurve(ED25519_CURVE._replace(p=7), RecordingSource())
    with pytest.raises(UnknownCurveError):
        get_edwards_curve_name(curve)


@pytest.mark.parametrize(
    ("create", "name", "alg", "hash_length"),
    [
        (create_p256, "P-256", "ES256", 48),
        (create_p384, "P-384", "ES384", 72),
        (create_p521, "P-521", "ES512", 99),
        (create_secp256k1, "secp256k1", "ES256K", 48),
    ],
)
def test_weierstrass_handles(create, name: str, alg: str, hash_length: int) -> None:
    source = RecordingSource()
    curve = create(source)
    assert get_weierstrass_curve_name(curve) == name
    assert get_weierstrass_signature_algorithm(curve) == alg
    key = curve.utils.random_private_key()
    assert source.requests == [hash_length]
    # all-zero input reduces to 1
    assert key == bytes(curve.n_byte_length - 1) + b"\x01"
    assert curve.utils.is_valid_private_key(key)


def test_weierstrass_is_valid_private_key_bounds() -> None:
    curve = create_p256()
    n = curve.n
    assert curve.utils.is_valid_private_key((n - 1).to_bytes(32, "big"))
    assert not curve.utils.is_valid_private_key(n.to_bytes(32, "big"))
    assert not curve.utils.is_valid_private_key(bytes(32))
    assert not curve.utils.is_valid_private_key(bytes(31))


def test_get_weierstrass_curve_name_unknown() -> None:
    curve = WeierstrassCurve(P256_CURVE._replace(p=7), RecordingSource())
    with pytest.raises(UnknownCurveError):
        get_weierstrass_curve_name(curve)
    with pytest.raises(UnknownCurveError):
        get_weierstrass_signature_algorithm(curve)


def test_raw_signature_helpers() -> None:
    curve = create_p256()
    raw = to_raw_signature(curve, 1, 2)
    assert raw == bytes(31) + b"\x01" + bytes(31) + b"\x02"
    assert from_raw_signature(curve, raw) == (1, 2)
    # trailing recovery byte is ignored
    assert from_raw_signature(curve, raw + b"\x01") == (1, 2)


@pytest.mark.parametrize(
    "raw",
    [
        bytes(63),
        bytes(66),
        bytes(64),  # r = s = 0
        (2**256 - 1).to_bytes(32, "big") + bytes(31) + b"\x01",  # r >= n
    ],
)
def test_from_raw_signature_rejects(raw: bytes) -> None:
    with pytest.raises(ValueError):
        from_raw_signature(create_p256(), raw)


def test_bls12_381_random_private_key() -> None:
    source = RecordingSource()
    curve = create_bls12_381(source)
    assert curve.fr_order == BLS12_381_FR_ORDER
    assert curve.utils.random_private_key() == bytes(31) + b"\x01"
    assert source.requests == [48]


def test_bls12_381_random_private_key_in_range() -> None:
    curve = create_bls12_381()
    for _ in range(8):
        key = curve.utils.random_private_key()
        assert len(key) == 32
        assert 1 <= int.from_bytes(key, "big") < BLS12_381_FR_ORDER
