"""Serialization / deserialization (serde): Base64URL for JWK members."""

from .base64url import decode_base64url, encode_base64url

__all__: tuple[str, ...] = ("decode_base64url", "encode_base64url")
