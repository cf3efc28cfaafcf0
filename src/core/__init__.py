"""
Core value types and numerical primitives.

This package contains self-contained building blocks with no external
state: polynomial arithmetic, epsilon comparisons, numeral notations
and base conversion, and JSON contracts for serialized values.
"""
