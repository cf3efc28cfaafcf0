"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Значение EPS_POLYNOMIAL (литерал 10e-10 == 1e-9)
2. Строгие epsilon-сравнения с нулём и между значениями
3. Проверку NaN/Inf
4. Валидацию eps
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_POLYNOMIAL,
    is_close_abs,
    is_valid_float,
    is_zero,
    validate_eps,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestEpsilonConstants:
    """Тесты epsilon-параметров"""

    def test_eps_polynomial_literal_is_1e9(self) -> None:
        """10e-10 — это 1e-9, а не 1e-10"""
        assert EPS_POLYNOMIAL == 1e-9
        assert EPS_POLYNOMIAL != 1e-10

    def test_eps_polynomial_positive(self) -> None:
        """Epsilon положительный"""
        assert EPS_POLYNOMIAL > 0


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_zero(self) -> None:
        """Точный ноль — ноль"""
        assert is_zero(0.0)
        assert is_zero(-0.0)

    def test_below_eps_is_zero(self) -> None:
        """Значения меньше eps по модулю — ноль"""
        assert is_zero(1e-10)
        assert is_zero(-5e-10)

    def test_eps_itself_is_not_zero(self) -> None:
        """Сравнение строгое: ровно eps — не ноль"""
        assert not is_zero(EPS_POLYNOMIAL)
        assert not is_zero(-EPS_POLYNOMIAL)

    def test_regular_values_not_zero(self) -> None:
        """Обычные значения — не ноль"""
        assert not is_zero(1.0)
        assert not is_zero(-0.001)

    def test_custom_eps(self) -> None:
        """Пользовательская толерантность"""
        assert is_zero(0.05, eps=0.1)
        assert not is_zero(0.05, eps=0.01)


class TestIsCloseAbs:
    """Тесты для is_close_abs"""

    def test_float_noise_is_close(self) -> None:
        """Шум в последних разрядах не влияет на равенство"""
        assert is_close_abs(1.1999999999, 1.2)
        assert is_close_abs(-5.89999999999, -5.9)

    def test_different_values_not_close(self) -> None:
        """Разные значения не равны"""
        assert not is_close_abs(1.0, 1.1)
        assert not is_close_abs(2.0, 3.0)

    def test_absolute_not_relative(self) -> None:
        """Для больших чисел толерантность абсолютная"""
        assert not is_close_abs(1e12, 1e12 + 1.0)

    def test_symmetric(self) -> None:
        """Сравнение симметрично"""
        assert is_close_abs(1.0, 1.0 + 1e-10) == is_close_abs(1.0 + 1e-10, 1.0)


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateEps:
    """Тесты для validate_eps"""

    def test_positive_eps_accepted(self) -> None:
        """Положительный eps проходит"""
        validate_eps(1e-9)
        validate_eps(1.0)

    @pytest.mark.parametrize("eps", [0.0, -1e-6, math.nan, math.inf])
    def test_invalid_eps_raises(self, eps: float) -> None:
        """Невалидный eps вызывает ошибку"""
        with pytest.raises(ValueError, match="eps must be positive"):
            validate_eps(eps)

    def test_comparisons_validate_eps(self) -> None:
        """Функции сравнения проверяют eps"""
        with pytest.raises(ValueError, match="eps must be positive"):
            is_zero(1.0, eps=0.0)

        with pytest.raises(ValueError, match="eps must be positive"):
            is_close_abs(1.0, 1.0, eps=-1.0)
