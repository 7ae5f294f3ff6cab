"""
Hash-to-field reduction (RFC 9380 section 5 style): map a wide random byte
string into [1, order - 1] without noticeable modulo bias.
"""

from __future__ import annotations


def get_field_bytes_length(order: int) -> int:
    """Bytes needed to encode any element below order."""
    if not isinstance(order, int) or order <= 1:
        raise ValueError("field order must be an int > 1")
    return (order.bit_length() + 7) // 8


def get_min_hash_length(order: int) -> int:
    """
    Minimum input length for map_hash_to_field: field length plus half again,
    which keeps the bias of the reduction below 2^-(8 * length / 2).
    """
    length = get_field_bytes_length(order)
    return length + (length + 1) // 2


def map_hash_to_field(key: bytes, order: int) -> bytes:
    """
    Reduce key (big-endian) into a scalar in [1, order - 1].

    Args:
        key: At least get_min_hash_length(order) bytes, 16..1024 bytes long.
        order: Group or field order.

    Returns:
        Scalar as get_field_bytes_length(order) big-endian bytes.
    """
    field_len = get_field_bytes_length(order)
    min_len = get_min_hash_length(order)
    if len(key) < 16 or len(key) < min_len or len(key) > 1024:
        raise ValueError(
            f"expected {min_len}-1024 bytes of input, got {len(key)}"
        )
    num = int.from_bytes(key, "big")
    reduced = num % (order - 1) + 1
    return reduced.to_bytes(field_len, "big")


__all__: tuple[str, ...] = (
    "get_field_bytes_length",
    "get_min_hash_length",
    "map_hash_to_field",
)
