"""
Core math modules

Полиномиальная арифметика с epsilon-толерантностью и перевод чисел
из систем счисления 2..16.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_POLYNOMIAL,
    is_close_abs,
    is_valid_float,
    is_zero,
    validate_eps,
)

# Polynomial
from src.core.math.polynomial import (
    DEFAULT_FORMAT_CONFIG,
    DECIMAL_SEPARATORS,
    Polynomial,
    PolynomialFormatConfig,
)

# Base Conversion
from src.core.math.base_conversion import (
    INT32_MAX,
    INT32_MIN,
    NotationFormatError,
    to_decimal,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_POLYNOMIAL",
    # Numerical Safeguards — Functions
    "is_close_abs",
    "is_valid_float",
    "is_zero",
    "validate_eps",
    # Polynomial — Config
    "DEFAULT_FORMAT_CONFIG",
    "DECIMAL_SEPARATORS",
    "PolynomialFormatConfig",
    # Polynomial — Types
    "Polynomial",
    # Base Conversion — Constants
    "INT32_MAX",
    "INT32_MIN",
    # Base Conversion — Exceptions
    "NotationFormatError",
    # Base Conversion — Functions
    "to_decimal",
]
