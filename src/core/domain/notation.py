"""
Notation — Алфавит позиционной системы счисления

Immutable Pydantic модель: основание (2..16) и набор цифр,
являющийся префиксом "0123456789ABCDEF" длины base.

Инвариант: digits[i] — каноническая цифра для значения i; len(digits) == base.
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from src.core.contracts import validate_notation

# =============================================================================
# CONSTANTS
# =============================================================================

NOTATION_BASE_MIN: Final[int] = 2
NOTATION_BASE_MAX: Final[int] = 16

# Полный алфавит; цифры notation — его префикс
ALL_DIGITS: Final[str] = "0123456789ABCDEF"


# =============================================================================
# NOTATION MODEL
# =============================================================================


class Notation(BaseModel):
    """
    Система счисления с основанием от 2 до 16.

    Immutable модель (frozen=True). Основание вне диапазона → ValidationError.
    """

    base: int = Field(
        ...,
        ge=NOTATION_BASE_MIN,
        le=NOTATION_BASE_MAX,
        description="Основание системы счисления (2..16)",
    )

    model_config = {"frozen": True}

    def __init__(self, base: int, **data: Any) -> None:
        super().__init__(base=base, **data)

    @property
    def digits(self) -> str:
        """Цифры системы счисления по возрастанию значения."""
        return ALL_DIGITS[: self.base]

    def index_of(self, symbol: str) -> int:
        """
        Значение цифры (без учёта регистра).

        Args:
            symbol: Один символ

        Returns:
            Значение цифры в [0, base), либо -1 если символ не цифра этой системы
        """
        if len(symbol) != 1:
            return -1
        return self.digits.find(symbol.upper())

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Notation":
        """
        Десериализация с проверкой по схеме notation.json.

        Raises:
            jsonschema.ValidationError: Если data нарушает контракт
        """
        validate_notation(data)
        return cls.model_validate(data)

    def to_contract(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        validate_notation(data)
        return data
