"""
Numerical Safeguards — Epsilon Primitives для полиномиальной арифметики

Модуль обеспечивает единые правила сравнения float во всех операциях
с коэффициентами полиномов:
- Epsilon-параметр EPS_POLYNOMIAL для нормализации и равенства
- Epsilon-сравнения с нулём и между двумя значениями
- Проверка NaN/Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнения строгие: abs(x) < eps (значение, равное eps, НЕ считается нулём)
2. EPS_POLYNOMIAL = 10e-10 (т.е. 1e-9); литерал сохранён как есть,
   ожидания тестов откалиброваны под него
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для коэффициентов полинома
# Используется при нормализации (отбрасывание старших нулей), равенстве
# и форматировании. 10e-10 == 1e-9.
EPS_POLYNOMIAL: Final[float] = 10e-10


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_eps(eps: float) -> None:
    """
    Проверка, что epsilon положительный и конечный.

    Args:
        eps: Толерантность

    Raises:
        ValueError: Если eps <= 0 или NaN/Inf
    """
    if not is_valid_float(eps) or eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, eps: float = EPS_POLYNOMIAL) -> bool:
    """
    Проверка, является ли значение численным нулём.

    Args:
        value: Проверяемое значение
        eps: Абсолютная толерантность (default: EPS_POLYNOMIAL)

    Returns:
        True если abs(value) < eps

    Examples:
        >>> is_zero(1e-10)
        True
        >>> is_zero(-1e-10)
        True
        >>> is_zero(1e-3)
        False
    """
    validate_eps(eps)
    return abs(value) < eps


def is_close_abs(a: float, b: float, eps: float = EPS_POLYNOMIAL) -> bool:
    """
    Абсолютное сравнение двух float с толерантностью.

    В отличие от math.isclose, относительная толерантность не используется:
    коэффициенты 1e12 и 1e12 + 1 считаются различными.

    Args:
        a: Первое значение
        b: Второе значение
        eps: Абсолютная толерантность (default: EPS_POLYNOMIAL)

    Returns:
        True если abs(a - b) < eps

    Examples:
        >>> is_close_abs(1.1999999999, 1.2)
        True
        >>> is_close_abs(1.0, 1.1)
        False
    """
    validate_eps(eps)
    return abs(a - b) < eps
