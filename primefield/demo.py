#!/usr/bin/env python3
"""Square-root sweep demo.

Usage:
    python -m primefield.demo [p]

For a prime p ≡ 3 (mod 4) (default 47) the script:
1. Builds a field handle with the p ≡ 3 (mod 4) square root.
2. Walks a = 1 … p-1 and tests each value with Euler's criterion.
3. Checks every root against a brute-force search for x with x² ≡ a.
4. Stops with a non-zero exit status on the first mismatch.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Tuple

from primefield.config import KNOWN_MODULI
from primefield.handle import PrimeField, p3mod4

DEFAULT_P = KNOWN_MODULI["demo47"]


class SqrtMismatchError(AssertionError):
    """Raised when sqrt disagrees with the brute-force roots of a residue."""


def brute_force_roots(F: PrimeField, a: int) -> List[int]:
    """All x in [1, p) with x² ≡ a (mod p)."""
    return [x for x in range(1, F.p) if F.multiply(x, x) == a % F.p]


def sweep(p: int = DEFAULT_P) -> List[Tuple[int, int]]:
    """Return ``(a, sqrt(a))`` for every residue a in [1, p)."""
    F = p3mod4(p)
    results: List[Tuple[int, int]] = []
    for a in range(1, p):
        if not F.qr(a):
            continue
        root = F.sqrt(a)
        expected = brute_force_roots(F, a)
        if root not in expected:
            raise SqrtMismatchError(f"mismatch on a = {a}: sqrt={root}, roots={expected}")
        results.append((a, root))
    return results


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    p = int(args[0], 0) if args else DEFAULT_P

    banner(f"sqrt sweep over F_{p}")
    try:
        results = sweep(p)
    except SqrtMismatchError as exc:
        print(f"   FAIL: {exc}")
        return 1
    for a, root in results:
        print(f"\t{a}, {root}² ≡ {a}")
    print(f"\n   Residues checked: {len(results)} of {p - 1}")

    banner("SWEEP COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(main())
