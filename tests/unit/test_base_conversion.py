"""
Тесты для модуля Base Conversion

Проверяет:
1. Перевод строк в системах 2..16 в int
2. Регистр и ведущие нули
3. Переполнение int32
4. Ошибки формата и аргументов
5. Логирование успешной конверсии
"""

import logging

import pytest

from src.core.domain import Notation
from src.core.math.base_conversion import (
    INT32_MAX,
    NotationFormatError,
    to_decimal,
)

# =============================================================================
# УСПЕШНАЯ КОНВЕРСИЯ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    @pytest.mark.parametrize(
        "source, base, expected",
        [
            ("0110111101100001100001010111111", 2, 934331071),
            ("01101111011001100001010111111", 2, 233620159),
            ("11101101111011001100001010", 2, 62370570),
            ("1aCb67", 16, 1756007),
            ("1ACB67", 16, 1756007),
            ("764241", 8, 256161),
            ("10", 5, 5),
            ("23423523", 10, 23423523),
        ],
    )
    def test_can_convert_string_representation_to_int32(
        self, source: str, base: int, expected: int
    ) -> None:
        """Перевод из разных систем счисления"""
        assert to_decimal(source, Notation(base)) == expected

    def test_zero(self) -> None:
        """Строка из нулей → 0"""
        assert to_decimal("0", Notation(10)) == 0
        assert to_decimal("0000", Notation(2)) == 0

    def test_leading_zeros_do_not_overflow(self) -> None:
        """Длинные ведущие нули не вызывают ложного переполнения"""
        source = "0" * 100 + "101"
        assert to_decimal(source, Notation(2)) == 5

    def test_int32_max(self) -> None:
        """Граница int32 достижима"""
        assert to_decimal("7FFFFFFF", Notation(16)) == INT32_MAX
        assert to_decimal("1" * 31, Notation(2)) == INT32_MAX


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestToDecimalErrors:
    """Тесты ошибок to_decimal"""

    @pytest.mark.parametrize(
        "source, base",
        [
            ("1" * 79, 2),
            ("1" * 73, 2),
            ("80000000", 16),
            ("1" + "0" * 31, 2),
            ("9999999999", 10),
        ],
    )
    def test_throws_overflow_when_source_is_bigger_than_int32(self, source: str, base: int) -> None:
        """Значение больше INT32_MAX → OverflowError"""
        with pytest.raises(OverflowError, match="exceeds int32 range"):
            to_decimal(source, Notation(base))

    @pytest.mark.parametrize(
        "source, base, symbol",
        [
            ("54fg4", 16, "G"),
            ("123", 2, "3"),
            ("...", 7, "."),
            ("12-3", 10, "-"),
        ],
    )
    def test_throws_format_error_if_source_contains_wrong_symbols(
        self, source: str, base: int, symbol: str
    ) -> None:
        """Символ вне алфавита → NotationFormatError"""
        with pytest.raises(NotationFormatError, match="wrong format") as exc_info:
            to_decimal(source, Notation(base))

        assert exc_info.value.symbol == symbol
        assert exc_info.value.source == source
        assert exc_info.value.notation == Notation(base)

    def test_format_error_is_value_error(self) -> None:
        """NotationFormatError — подкласс ValueError"""
        with pytest.raises(ValueError):
            to_decimal("Z", Notation(16))

    @pytest.mark.parametrize("source", ["", None])
    def test_throws_if_source_is_none_or_empty(self, source: str) -> None:
        """Пустая строка или None → ValueError"""
        with pytest.raises(ValueError, match="source is None or empty"):
            to_decimal(source, Notation(4))

    def test_throws_if_notation_is_none(self) -> None:
        """Notation None → ValueError"""
        with pytest.raises(ValueError, match="notation is None"):
            to_decimal("123", None)


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================


class TestToDecimalLogging:
    """Тесты логирования"""

    def test_success_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Успешная конверсия пишет DEBUG запись"""
        caplog.set_level(logging.DEBUG, logger="src.core.math.base_conversion")

        to_decimal("FF", Notation(16))

        assert any("Converted 'FF' from base 16 to 255" in r.message for r in caplog.records)

    def test_errors_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Ошибки пробрасываются без записи в лог"""
        caplog.set_level(logging.DEBUG, logger="src.core.math.base_conversion")

        with pytest.raises(NotationFormatError):
            to_decimal("XYZ", Notation(16))

        assert caplog.records == []
