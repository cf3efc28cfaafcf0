"""
Contract Validation Module

Модуль для валидации JSON представлений Polynomial и Notation.
"""

from .validators import (
    ContractValidator,
    NotationValidator,
    PolynomialValidator,
    SchemaLoader,
    validate_notation,
    validate_polynomial,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialValidator",
    "NotationValidator",
    # Functions
    "validate_polynomial",
    "validate_notation",
]
