"""Global configuration for primefield."""

import os

# ---------- Default modulus (Mersenne prime M127, ≡ 3 mod 4) ----------
PRIME = 2**127 - 1

# Env var PRIMEFIELD_MODULUS overrides PRIME for build_field();
# decimal or 0x-prefixed hex.  Read on use, not at import.
MODULUS_ENV_VAR = "PRIMEFIELD_MODULUS"


class ConfigError(ValueError):
    """Raised when an environment override cannot be parsed."""


def default_modulus() -> int:
    """Return PRIME, or the value of PRIMEFIELD_MODULUS when set."""
    raw = os.environ.get(MODULUS_ENV_VAR, "").strip()
    if not raw:
        return PRIME
    try:
        return int(raw, 0)
    except ValueError:
        raise ConfigError(f"{MODULUS_ENV_VAR}={raw!r} is not an integer") from None


# ---------- Square-root provider used by build_field() ----------
DEFAULT_SQRT_PROVIDER = "p3mod4"

# ---------- Well-known prime moduli, all ≡ 3 (mod 4) ----------
KNOWN_MODULI = {
    "demo47": 47,
    "m127": 2**127 - 1,
    "secp256k1": 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    "p256": 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    "bn254": 21888242871839275222246405745257275088696311157297823662689037894645226208583,
    "bls12_381": 0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB,
}
