"""
Base Conversion — Перевод строки в системе счисления 2..16 в int32

Функция to_decimal переводит запись числа (без знака) в заданной
Notation в целое число со знаковым 32-битным диапазоном.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Регистр цифр не важен ("1aCb67" == "1ACB67")
2. Ведущие нули игнорируются и не вызывают ложного переполнения
3. Результат всегда в [0, INT32_MAX]; выход за диапазон → OverflowError
4. Символ вне notation.digits → NotationFormatError
"""

import logging
from typing import Final

from src.core.domain.notation import Notation

logger = logging.getLogger(__name__)

# =============================================================================
# INT32 BOUNDS
# =============================================================================

INT32_MAX: Final[int] = 2**31 - 1
INT32_MIN: Final[int] = -(2**31)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotationFormatError(ValueError):
    """
    Строка содержит символ, не являющийся цифрой заданной системы счисления.
    """

    def __init__(self, source: str, symbol: str, notation: Notation):
        self.source = source
        self.symbol = symbol
        self.notation = notation
        super().__init__(
            f"source {source!r} has a wrong format: {symbol!r} "
            f"is not a digit of base {notation.base} ({notation.digits})"
        )


# =============================================================================
# CONVERSION
# =============================================================================


def to_decimal(source: str, notation: Notation) -> int:
    """
    Перевод записи числа в системе notation в int.

    Args:
        source: Непустая строка цифр (регистр не важен)
        notation: Система счисления

    Returns:
        Значение в диапазоне [0, INT32_MAX]

    Raises:
        ValueError: Если source пуст/None или notation None
        NotationFormatError: Если в source есть символ вне notation.digits
        OverflowError: Если значение выходит за int32

    Examples:
        >>> to_decimal("1ACB67", Notation(16))
        1756007
        >>> to_decimal("10", Notation(5))
        5
    """
    if not source:
        raise ValueError("source is None or empty")

    if notation is None:
        raise ValueError("notation is None")

    # Нормализованная форма: без ведущих нулей, чтобы не переполнить rank
    digits = source.upper().lstrip("0")

    result = 0
    rank = 1

    for position, symbol in enumerate(reversed(digits)):
        value = notation.index_of(symbol)
        if value < 0:
            raise NotationFormatError(source, symbol, notation)

        result += value * rank
        if result > INT32_MAX:
            raise OverflowError(f"source {source!r} exceeds int32 range in base {notation.base}")

        # rank для следующего разряда нужен только если он есть
        if position < len(digits) - 1:
            rank *= notation.base
            if rank > INT32_MAX:
                raise OverflowError(
                    f"source {source!r} exceeds int32 range in base {notation.base}"
                )

    logger.debug("Converted %r from base %d to %d", source, notation.base, result)
    return result
