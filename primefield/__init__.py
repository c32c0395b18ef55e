"""Prime-field arithmetic over plain Python ints."""

from primefield.field import (
    FieldError,
    InvalidExponentError,
    InvalidInverseError,
    add,
    additive_inverse,
    divide,
    multiply,
    power,
    qr,
    reciprocal,
    subtract,
)
from primefield.handle import PrimeField, p3mod4
from primefield.params import FieldParams, build_field
from primefield.sqrt import (
    SQRT_PROVIDERS,
    SqrtProvider,
    UnknownSqrtProviderError,
    get_sqrt_provider,
    sqrt_p3mod4,
)

__all__ = [
    "FieldError",
    "FieldParams",
    "InvalidExponentError",
    "InvalidInverseError",
    "PrimeField",
    "SQRT_PROVIDERS",
    "SqrtProvider",
    "UnknownSqrtProviderError",
    "add",
    "additive_inverse",
    "build_field",
    "divide",
    "get_sqrt_provider",
    "multiply",
    "p3mod4",
    "power",
    "qr",
    "reciprocal",
    "sqrt_p3mod4",
    "subtract",
]
