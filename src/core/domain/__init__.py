"""
Domain models and value objects.

Contains the Notation value object for positional numeral systems.
"""

from src.core.domain.notation import (
    ALL_DIGITS,
    NOTATION_BASE_MAX,
    NOTATION_BASE_MIN,
    Notation,
)

__all__ = [
    # Constants
    "ALL_DIGITS",
    "NOTATION_BASE_MAX",
    "NOTATION_BASE_MIN",
    # Models
    "Notation",
]
