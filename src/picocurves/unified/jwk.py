"""
JWK member checks shared by the OKP and EC codecs. These raise
ValidationError; the public codec functions wrap it in ConversionError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import ValidationError
from ..serde import decode_base64url


def require_member(jwk: Mapping[str, Any], name: str) -> str:
    """Value of a required string member."""
    value = jwk.get(name)
    if value is None:
        raise ValidationError(f"Invalid JWK: missing required parameter for {name}")
    if not isinstance(value, str):
        raise ValidationError(f"Invalid JWK: invalid parameter type for {name}")
    return value


def decode_member(jwk: Mapping[str, Any], name: str, byte_length: int) -> bytes:
    """Base64URL-decode a required member and check its exact byte length."""
    value = require_member(jwk, name)
    try:
        decoded = decode_base64url(value)
    except ValueError as e:
        raise ValidationError(f"Invalid JWK: malformed encoding for {name}") from e
    if len(decoded) != byte_length:
        raise ValidationError(
            f"Invalid JWK: invalid key data for {name}: "
            f"{len(decoded)} bytes, expected {byte_length}"
        )
    return decoded


def check_header(
    jwk: Mapping[str, Any], kty: str, crv: str, alg: str | None = None
) -> None:
    """
    Check kty and crv, and alg when the JWK carries one.

    alg is optional in a JWK; when present it must equal the expected value.
    Passing alg=None leaves the member unchecked.
    """
    if not isinstance(jwk, Mapping):
        raise ValidationError("Invalid JWK: expected a JSON object")
    if require_member(jwk, "kty") != kty:
        raise ValidationError("Invalid JWK: unsupported key type")
    if require_member(jwk, "crv") != crv:
        raise ValidationError("Invalid JWK: unsupported curve")
    if alg is not None and jwk.get("alg") not in (None, alg):
        raise ValidationError("Invalid JWK: unsupported algorithm")


__all__: tuple[str, ...] = (
    "check_header",
    "decode_member",
    "require_member",
)
