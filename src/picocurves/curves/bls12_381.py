"""
BLS12-381 (pairing-friendly): private key generation only. Keys are scalars
in the Fr subgroup, drawn by hash-to-field reduction of wide random input.
"""

from __future__ import annotations

from .modular import get_min_hash_length, map_hash_to_field
from .types import CurveUtils, RandomBytes, default_random_bytes

# Order r of the G1/G2 prime-order subgroups (scalar field Fr)
BLS12_381_FR_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001


class Bls12381Curve:
    def __init__(self, random_bytes: RandomBytes) -> None:
        self.fr_order = BLS12_381_FR_ORDER
        self.random_bytes = random_bytes
        self.utils = CurveUtils(random_private_key=self._random_private_key)

    def _random_private_key(self) -> bytes:
        length = get_min_hash_length(self.fr_order)
        return map_hash_to_field(self.random_bytes(length), self.fr_order)


def create_bls12_381(
    random_bytes: RandomBytes = default_random_bytes,
) -> Bls12381Curve:
    return Bls12381Curve(random_bytes)


__all__: tuple[str, ...] = (
    "BLS12_381_FR_ORDER",
    "Bls12381Curve",
    "create_bls12_381",
)
