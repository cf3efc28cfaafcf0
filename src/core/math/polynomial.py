"""
Polynomial — Immutable полином с float-коэффициентами

Модуль реализует value-тип полинома одной переменной:
- Коэффициенты хранятся по убыванию степени: coefficients[0] — старший член
- Нормализация: старшие численные нули (abs < EPS_POLYNOMIAL) отбрасываются
- Арифметика: +, -, * (полином и скаляр), унарный минус
- Равенство с epsilon-толерантностью, hash по точным битам коэффициентов
- Форматирование в алгебраическую запись ("x^2 + 2x + 3")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. coefficients не пуст; coefficients[0] не ноль, кроме нулевого полинома (0.0,)
2. power == len(coefficients) - 1
3. Экземпляр неизменяем (frozen=True); любая операция создаёт новый полином
4. Операнды никогда не модифицируются
5. NaN/Inf коэффициенты запрещены

ПОЛИТИКА HASH:
    hash(p) == hash(p.coefficients). Равные в пределах eps, но побитово
    различные полиномы могут иметь разный hash. Равные побитово всегда
    имеют одинаковый hash.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Final, Iterator, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_polynomial
from src.core.math.numerical_safeguards import (
    EPS_POLYNOMIAL,
    is_close_abs,
    is_zero,
    validate_eps,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Допустимые разделители дробной части при форматировании
DECIMAL_SEPARATORS: Final[tuple[str, ...]] = (".", ",")

# Граница, до которой целые float печатаются без экспоненты
INTEGRAL_FORMAT_LIMIT: Final[float] = 1e16

Coefficients = tuple[float, ...]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PolynomialFormatConfig:
    """Конфигурация строкового представления полинома.

    Разделитель дробной части фиксируется на уровне развёртывания,
    а не переключается по текущей локали.
    """

    decimal_separator: str = "."
    eps: float = EPS_POLYNOMIAL

    def __post_init__(self) -> None:
        if self.decimal_separator not in DECIMAL_SEPARATORS:
            raise ValueError(
                f"decimal_separator must be one of {DECIMAL_SEPARATORS}, "
                f"got {self.decimal_separator!r}"
            )
        validate_eps(self.eps)


DEFAULT_FORMAT_CONFIG: Final[PolynomialFormatConfig] = PolynomialFormatConfig()


# =============================================================================
# ARRAY OPERATIONS
# =============================================================================


def _normalize(coefficients: Sequence[float], eps: float = EPS_POLYNOMIAL) -> Coefficients:
    """Отбрасывает старшие численные нули; все нули → (0.0,)."""
    for index, value in enumerate(coefficients):
        if not is_zero(value, eps):
            return tuple(coefficients[index:])
    return (0.0,)


def _negate(coefficients: Sequence[float]) -> Coefficients:
    return tuple(-value for value in coefficients)


def _longer_and_shorter(
    lhs: Sequence[float], rhs: Sequence[float]
) -> tuple[Sequence[float], Sequence[float]]:
    # При равной длине "длиннее" считается rhs
    if len(lhs) > len(rhs):
        return lhs, rhs
    return rhs, lhs


def _sum(lhs: Sequence[float], rhs: Sequence[float]) -> list[float]:
    """
    Сумма с выравниванием по младшим степеням (по хвосту).

    Старшие члены более длинного операнда переносятся в результат как есть.
    """
    longer, shorter = _longer_and_shorter(lhs, rhs)
    offset = len(longer) - len(shorter)

    result = list(longer[:offset])
    result.extend(a + b for a, b in zip(longer[offset:], shorter))
    return result


def _diff(lhs: Sequence[float], rhs: Sequence[float]) -> list[float]:
    """
    Разность lhs - rhs с выравниванием по хвосту.

    Если rhs не короче lhs, оба операнда инвертируются и вычисляется
    (-rhs) - (-lhs), чтобы старшие члены результата имели верный знак.
    """
    longer, shorter = _longer_and_shorter(lhs, rhs)
    if len(rhs) >= len(lhs):
        longer, shorter = _negate(longer), _negate(shorter)

    offset = len(longer) - len(shorter)

    result = list(longer[:offset])
    result.extend(a - b for a, b in zip(longer[offset:], shorter))
    return result


def _convolve(lhs: Sequence[float], rhs: Sequence[float]) -> list[float]:
    """Полное дискретное свёртывание: len(result) = len(lhs) + len(rhs) - 1."""
    result = [0.0] * (len(lhs) + len(rhs) - 1)

    for i, a in enumerate(lhs):
        if is_zero(a):
            continue
        for j, b in enumerate(rhs):
            result[i + j] += a * b

    return result


def _scale(coefficients: Sequence[float], factor: float) -> list[float]:
    return [value * factor for value in coefficients]


# =============================================================================
# OPERAND HANDLING
# =============================================================================


def _is_operand(value: Any) -> bool:
    # None допускается, чтобы выдать ValueError вместо TypeError
    return value is None or isinstance(value, (Polynomial, list, tuple))


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real)


def _operand_coefficients(operand: Any, name: str) -> Sequence[float]:
    """
    Извлечение коэффициентов операнда.

    Сырая последовательность трактуется в том же порядке (по убыванию степени),
    что и конструктор, без предварительной нормализации.

    Raises:
        ValueError: Если операнд None
        TypeError: Если тип операнда не поддерживается
    """
    if operand is None:
        raise ValueError(f"{name} is None")
    if isinstance(operand, Polynomial):
        return operand.coefficients
    if isinstance(operand, (list, tuple)):
        return tuple(float(value) for value in operand)
    raise TypeError(
        f"{name} must be a Polynomial or a sequence of floats, got {type(operand).__name__}"
    )


def _apply(
    lhs: Any,
    rhs: Any,
    operation: Callable[[Sequence[float], Sequence[float]], list[float]],
) -> "Polynomial":
    lhs_coefficients = _operand_coefficients(lhs, "lhs")
    rhs_coefficients = _operand_coefficients(rhs, "rhs")
    return Polynomial(operation(lhs_coefficients, rhs_coefficients))


# =============================================================================
# FORMATTING
# =============================================================================


def _format_number(value: float, config: PolynomialFormatConfig) -> str:
    if value.is_integer() and abs(value) < INTEGRAL_FORMAT_LIMIT:
        text = str(int(value))
    else:
        text = repr(value)

    if config.decimal_separator != ".":
        text = text.replace(".", config.decimal_separator)
    return text


def _power_suffix(power: int) -> str:
    return "x" if power == 1 else f"x^{power}"


def _sign_marker(value: float) -> str:
    return " - " if value < 0 else " + "


# =============================================================================
# POLYNOMIAL MODEL
# =============================================================================


class Polynomial(BaseModel):
    """
    Immutable полином одной переменной.

    Коэффициенты передаются по убыванию степени:
        Polynomial([1, 2, 3])  →  x^2 + 2x + 3

    Immutable модель (frozen=True): арифметика всегда возвращает
    новый экземпляр.
    """

    coefficients: tuple[float, ...] = Field(
        ...,
        min_length=1,
        description="Коэффициенты по убыванию степени (нормализованные)",
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    def __init__(self, coefficients: Sequence[float], **data: Any) -> None:
        super().__init__(coefficients=coefficients, **data)

    @field_validator("coefficients", mode="before")
    @classmethod
    def require_ordered_numbers(cls, v: Any) -> Any:
        """
        Коэффициенты — упорядоченная последовательность (list/tuple) чисел.

        set/frozenset не имеют порядка степеней, строки и bool не являются
        коэффициентами; lax-режим pydantic их бы молча привёл.
        """
        if v is None:
            return v
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"coefficients must be a list or tuple, got {type(v).__name__}")
        for value in v:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"coefficient must be a real number, got {value!r}")
        return v

    @field_validator("coefficients")
    @classmethod
    def normalize_leading_zeros(cls, v: Coefficients) -> Coefficients:
        """
        Нормализация: удаление старших численных нулей.

        Если все коэффициенты — численные нули, результат (0.0,).
        """
        return _normalize(v)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def power(self) -> int:
        """Степень полинома (0 для констант и нулевого полинома)."""
        return len(self.coefficients) - 1

    @property
    def degree(self) -> int:
        return self.power

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        """Коэффициенты по убыванию степени (вместо пар поле/значение BaseModel)."""
        return iter(self.coefficients)

    def __contains__(self, value: object) -> bool:
        """Есть ли коэффициент, равный value в пределах EPS_POLYNOMIAL."""
        if isinstance(value, bool) or not _is_scalar(value):
            return False
        return any(is_close_abs(c, float(value)) for c in self.coefficients)

    def __getitem__(self, index: int) -> float:
        """
        Коэффициент по позиции в хранимом массиве (0 — старший член).

        Raises:
            IndexError: Если index вне [0, power]
        """
        if index < 0 or index > self.power:
            raise IndexError(f"index {index} is out of polynomial range [0, {self.power}]")
        return self.coefficients[index]

    def coefficient_of_degree(self, degree: int) -> float:
        """
        Коэффициент при x^degree.

        Args:
            degree: Степень члена

        Returns:
            Коэффициент, либо 0.0 если degree вне [0, power]
        """
        if degree < 0 or degree > self.power:
            return 0.0
        return self.coefficients[self.power - degree]

    def to_list(self) -> list[float]:
        """Копия коэффициентов (изменение копии не влияет на полином)."""
        return list(self.coefficients)

    def clone(self) -> "Polynomial":
        return Polynomial(self.coefficients)

    def evaluate(self, x: float) -> float:
        """Значение полинома в точке x (схема Горнера)."""
        result = 0.0
        for coefficient in self.coefficients:
            result = result * x + coefficient
        return result

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    # -------------------------------------------------------------------------
    # Equality / hash
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self.coefficients) != len(other.coefficients):
            return False
        return all(
            is_close_abs(a, b) for a, b in zip(self.coefficients, other.coefficients)
        )

    def __hash__(self) -> int:
        return hash(self.coefficients)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Polynomial":
        if not _is_operand(other):
            return NotImplemented
        return _apply(self, other, _sum)

    def __radd__(self, other: Any) -> "Polynomial":
        if not _is_operand(other):
            return NotImplemented
        return _apply(other, self, _sum)

    def __sub__(self, other: Any) -> "Polynomial":
        if not _is_operand(other):
            return NotImplemented
        return _apply(self, other, _diff)

    def __rsub__(self, other: Any) -> "Polynomial":
        if not _is_operand(other):
            return NotImplemented
        return _apply(other, self, _diff)

    def __mul__(self, other: Any) -> "Polynomial":
        if other is None:
            raise ValueError("rhs is None")
        if isinstance(other, Polynomial):
            return Polynomial(_convolve(self.coefficients, other.coefficients))
        if _is_scalar(other):
            return Polynomial(_scale(self.coefficients, float(other)))
        return NotImplemented

    def __rmul__(self, other: Any) -> "Polynomial":
        if other is None:
            raise ValueError("lhs is None")
        if _is_scalar(other):
            return Polynomial(_scale(self.coefficients, float(other)))
        return NotImplemented

    def __neg__(self) -> "Polynomial":
        return Polynomial(_negate(self.coefficients))

    def __pos__(self) -> "Polynomial":
        return self.clone()

    # -------------------------------------------------------------------------
    # Named proxies
    # -------------------------------------------------------------------------

    @staticmethod
    def add(lhs: Any, rhs: Any) -> "Polynomial":
        """lhs + rhs; любой из операндов может быть сырой последовательностью."""
        return _apply(lhs, rhs, _sum)

    @staticmethod
    def subtract(lhs: Any, rhs: Any) -> "Polynomial":
        """lhs - rhs; любой из операндов может быть сырой последовательностью."""
        return _apply(lhs, rhs, _diff)

    @staticmethod
    def multiply(lhs: Any, rhs: Any) -> "Polynomial":
        """
        lhs * rhs для пар (Polynomial, Polynomial), (Polynomial, scalar),
        (scalar, Polynomial).

        Raises:
            ValueError: Если один из операндов None
            TypeError: Если ни один из операндов не Polynomial
        """
        if lhs is None:
            raise ValueError("lhs is None")
        if rhs is None:
            raise ValueError("rhs is None")
        if isinstance(lhs, Polynomial):
            result = lhs.__mul__(rhs)
        elif isinstance(rhs, Polynomial):
            result = rhs.__rmul__(lhs)
        else:
            result = NotImplemented

        if result is NotImplemented:
            raise TypeError(
                f"unsupported operands for multiply: "
                f"{type(lhs).__name__} and {type(rhs).__name__}"
            )
        return result

    @staticmethod
    def compare(lhs: "Polynomial | None", rhs: "Polynomial | None") -> bool:
        """Равенство, допускающее None: None равен только None."""
        if lhs is rhs:
            return True
        if lhs is None or rhs is None:
            return False
        return lhs == rhs

    # -------------------------------------------------------------------------
    # String representation
    # -------------------------------------------------------------------------

    def to_string(self, config: PolynomialFormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
        """
        Алгебраическая запись полинома, старшая степень первой.

        Правила:
        - Константа: только число ("5")
        - Старший член: коэффициент опускается только если он равен +1;
          -1 печатается как "-1x^n"
        - Средние члены: нулевые пропускаются, знак выносится в " + "/" - ",
          модуль коэффициента опускается только если коэффициент равен +1
        - Свободный член: опускается, если равен нулю

        Examples:
            >>> str(Polynomial([1, 2, 3]))
            'x^2 + 2x + 3'
            >>> str(Polynomial([1, 2]))
            'x + 2'
        """
        eps = config.eps

        if self.power == 0:
            return _format_number(self.coefficients[0], config)

        leading = self.coefficients[0]
        parts = []
        if not is_close_abs(leading, 1.0, eps):
            parts.append(_format_number(leading, config))
        parts.append(_power_suffix(self.power))

        for index in range(1, self.power):
            value = self.coefficients[index]
            if is_zero(value, eps):
                continue
            parts.append(_sign_marker(value))
            if not is_close_abs(value, 1.0, eps):
                parts.append(_format_number(abs(value), config))
            parts.append(_power_suffix(self.power - index))

        constant = self.coefficients[-1]
        if not is_zero(constant, eps):
            parts.append(_sign_marker(constant))
            parts.append(_format_number(abs(constant), config))

        return "".join(parts)

    def format(self, config: PolynomialFormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
        return self.to_string(config)

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Contract (JSON)
    # -------------------------------------------------------------------------

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Polynomial":
        """
        Десериализация с проверкой по схеме polynomial.json.

        Raises:
            jsonschema.ValidationError: Если data нарушает контракт
        """
        validate_polynomial(data)
        return cls.model_validate(data)

    def to_contract(self) -> dict[str, Any]:
        """JSON-совместимый dict, проверенный по схеме polynomial.json."""
        data = self.model_dump(mode="json")
        validate_polynomial(data)
        return data
