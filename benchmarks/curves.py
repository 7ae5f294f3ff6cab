"""
Benchmark unified curve operations: key generation, public key derivation,
key agreement, signing and JWK round-trips for every supported curve.

Run from repo root, e.g.:

  PYTHONPATH=src python benchmarks/curves.py
"""

from __future__ import annotations

import os
import sys
import time

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_SRC = os.path.join(_REPO_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from picocurves import create_ecdh_curve, create_signature_curve  # noqa: E402

MSG = b"bench message"


def _time_it(fn, *args, n: int = 200, **kwargs) -> float:
    # Warmup
    for _ in range(10):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    elapsed = time.perf_counter() - start
    return elapsed / n


def _report(name: str, t: float) -> None:
    print(f"  {name:20} {t * 1e6:9.1f} us")


def main() -> None:
    n = 200
    print(f"Benchmark: picocurves unified layer ({n} iterations)")
    print()

    for name in ("X25519", "P-256", "P-384", "P-521", "secp256k1"):
        curve = create_ecdh_curve(name, os.urandom)
        a, b = curve.random_private_key(), curve.random_private_key()
        b_pub = curve.get_public_key(b)
        print(name)
        _report("random_private_key", _time_it(curve.random_private_key, n=n))
        _report("get_public_key", _time_it(curve.get_public_key, a, n=n))
        _report("get_shared_secret", _time_it(curve.get_shared_secret, a, b_pub, n=n))
        jwk = curve.to_jwk_private_key(a)
        _report("to_jwk_private_key", _time_it(curve.to_jwk_private_key, a, n=n))
        _report("to_raw_private_key", _time_it(curve.to_raw_private_key, jwk, n=n))
        print()

    for name in ("Ed25519", "P-256", "secp256k1"):
        curve = create_signature_curve(name, os.urandom)
        key = curve.random_private_key()
        pub = curve.get_public_key(key)
        sig = curve.sign(MSG, key)
        print(name)
        _report("sign", _time_it(curve.sign, MSG, key, n=n))
        _report("verify", _time_it(curve.verify, sig, MSG, pub, n=n))
        print()


if __name__ == "__main__":
    main()
