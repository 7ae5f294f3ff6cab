"""Shared types for curve handles: the injectable random-byte source."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable

RandomBytes = Callable[[int], bytes]


def default_random_bytes(byte_length: int = 32) -> bytes:
    """Default random-byte source (OS CSPRNG via secrets)."""
    return secrets.token_bytes(byte_length)


@dataclass
class CurveUtils:
    """Key helpers bound to one curve handle; attributes may be replaced in tests."""

    random_private_key: Callable[[], bytes]


@dataclass
class WeierstrassUtils(CurveUtils):
    is_valid_private_key: Callable[[bytes], bool]


__all__: tuple[str, ...] = (
    "CurveUtils",
    "RandomBytes",
    "WeierstrassUtils",
    "default_random_bytes",
)
