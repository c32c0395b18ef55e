"""Field parameters and handle construction from configuration."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from primefield.config import DEFAULT_SQRT_PROVIDER, KNOWN_MODULI, default_modulus
from primefield.handle import PrimeField
from primefield.sqrt import SQRT_PROVIDERS, get_sqrt_provider

logger = logging.getLogger(__name__)


class FieldParams(BaseModel):
    """Modulus plus the name of the square-root provider to bind."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    # PRIMEFIELD_MODULUS when set, else config.PRIME
    modulus: int = Field(default_factory=default_modulus)
    # None builds a field without sqrt
    sqrt_provider: Optional[str] = DEFAULT_SQRT_PROVIDER

    @field_validator("modulus")
    @classmethod
    def _modulus_above_one(cls, v: int) -> int:
        if v < 2:
            raise ValueError(f"modulus must be at least 2, got {v}")
        return v

    @field_validator("sqrt_provider")
    @classmethod
    def _provider_registered(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in SQRT_PROVIDERS:
            raise ValueError(f"unknown sqrt provider {v!r}")
        return v

    @classmethod
    def named(cls, name: str, sqrt_provider: Optional[str] = DEFAULT_SQRT_PROVIDER) -> "FieldParams":
        """Params for one of the moduli in ``config.KNOWN_MODULI``."""
        if name not in KNOWN_MODULI:
            raise KeyError(f"Unknown modulus {name!r} (known: {sorted(KNOWN_MODULI)})")
        return cls(modulus=KNOWN_MODULI[name], sqrt_provider=sqrt_provider)


def build_field(params: FieldParams | None = None) -> PrimeField:
    """Build a ``PrimeField`` from *params* (defaults from ``config``).

    A malformed PRIMEFIELD_MODULUS raises ``config.ConfigError`` here, not
    at import.
    """
    if params is None:
        params = FieldParams()
    provider = None
    if params.sqrt_provider is not None:
        provider = get_sqrt_provider(params.sqrt_provider)
    logger.debug("build_field: modulus bits=%d provider=%s", params.modulus.bit_length(), params.sqrt_provider)
    return PrimeField(params.modulus, provider)
