"""
BigNumber — знаковое целое произвольной точности

Immutable Pydantic модель в sign-magnitude представлении:
- is_positive: True для неотрицательных значений
- magnitude: base-256 разряды модуля, младший разряд первым

Беззнаковые алгоритмы живут в src.core.math; модель отвечает за
диспетчеризацию знаков и за Python-операторы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude никогда не пустая
2. Нет старших нулевых разрядов, кроме канонического нуля (0,)
3. Ноль всегда хранится с is_positive=True (нет отрицательного нуля)
4. Значения immutable: каждая операция возвращает новый экземпляр

ДЕЛЕНИЕ: частное усекается к нулю, знак остатка совпадает со знаком
делимого (-17 // 5 == -3, -17 % 5 == -2). Это отличается от floor
division встроенного int.

BITWISE: правила знаков НЕ являются two's complement:
- AND → неотрицательный, только если оба операнда неотрицательны
- OR  → неотрицательный, если хотя бы один операнд неотрицателен
- XOR → всегда неотрицательный
- NOT → инверсия разрядов текущей длины и смена знака
"""

import logging
from enum import Enum
from typing import Annotated, Any, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.errors import UnsupportedOperationError
from src.core.math.bitwise import (
    and_magnitudes,
    not_magnitude,
    or_magnitudes,
    xor_magnitudes,
)
from src.core.math.conversion import (
    SignedWidth,
    int_to_sign_magnitude,
    magnitude_to_int,
)
from src.core.math.division import div_rem_magnitudes
from src.core.math.magnitude import (
    DIGIT_BITS,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    normalize,
    sub_magnitudes,
)
from src.core.math.multiplication import mul_magnitudes
from src.core.math.shifts import (
    shift_left_magnitude,
    shift_right_magnitude,
    validate_shift_amount,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух BigNumber."""

    LT = -1
    EQ = 0
    GT = 1


# Один разряд magnitude
Digit = Annotated[int, Field(ge=0, le=255)]


# =============================================================================
# BIGNUMBER MODEL
# =============================================================================


class BigNumber(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True). Прямое создание с неканонической
    magnitude (ведущий ноль, отрицательный ноль, разряд вне 0..255)
    вызывает ValidationError.
    """

    is_positive: bool = Field(True, description="True для неотрицательных значений")
    magnitude: tuple[Digit, ...] = Field(
        ZERO_MAGNITUDE,
        min_length=1,
        description="Base-256 разряды модуля, младший первым",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_canonical_magnitude(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка канонической формы: нет ведущих нулей и нет отрицательного нуля."""
        if len(v) > 1 and v[-1] == 0:
            raise ValueError(f"magnitude has a redundant most-significant zero digit: {v}")

        if v == ZERO_MAGNITUDE and info.data.get("is_positive") is False:
            raise ValueError("zero must be stored with is_positive=True")

        return v

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, is_positive: bool, digits: Sequence[int]) -> "BigNumber":
        """Сборка из произвольного буфера: нормализация и канонический ноль."""
        magnitude = tuple(normalize(digits))
        if magnitude == ZERO_MAGNITUDE:
            is_positive = True
        return cls(is_positive=is_positive, magnitude=magnitude)

    @classmethod
    def from_int(
        cls,
        value: int,
        width: SignedWidth | int | str | None = None,
    ) -> "BigNumber":
        """
        Конверсия из знакового машинного целого.

        Args:
            value: Целое значение
            width: Знаковая ширина value (SignedWidth, число бит, имя или None)

        Returns:
            BigNumber с тем же значением

        Raises:
            TypeError: Если value не int
            IntegerRangeError: Если value не помещается в width

        Examples:
            >>> BigNumber.from_int(300).magnitude
            (44, 1)
            >>> BigNumber.from_int(-2**63, width=64).is_positive
            False
        """
        is_positive, digits = int_to_sign_magnitude(value, width)
        return cls.from_parts(is_positive, digits)

    def to_int(self) -> int:
        """Точная конверсия в Python int."""
        value = magnitude_to_int(self.magnitude)
        return value if self.is_positive else -value

    # -------------------------------------------------------------------------
    # Свойства значения
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.magnitude == ZERO_MAGNITUDE

    def sign(self) -> int:
        """-1, 0 или +1."""
        if self.is_zero():
            return 0
        return 1 if self.is_positive else -1

    def byte_length(self) -> int:
        return len(self.magnitude)

    def bit_length(self) -> int:
        """Количество значащих бит magnitude (0 для нуля)."""
        if self.is_zero():
            return 0
        return (len(self.magnitude) - 1) * DIGIT_BITS + self.magnitude[-1].bit_length()

    def negate(self) -> "BigNumber":
        return self.from_parts(not self.is_positive, self.magnitude)

    def abs_value(self) -> "BigNumber":
        return self.from_parts(True, self.magnitude)

    # -------------------------------------------------------------------------
    # Сложение / вычитание
    # -------------------------------------------------------------------------

    def add(self, other: "BigNumber") -> "BigNumber":
        """
        Сложение.

        Разные знаки сводятся к вычитанию:
            a + (-b) → a - b
            (-a) + b → b - a
        """
        if self.is_positive and not other.is_positive:
            return self.sub(other.abs_value())
        if not self.is_positive and other.is_positive:
            return other.sub(self.abs_value())

        return self.from_parts(self.is_positive, add_magnitudes(self.magnitude, other.magnitude))

    def sub(self, other: "BigNumber") -> "BigNumber":
        """
        Вычитание.

        Четыре случая знаков сводятся к беззнаковому вычитанию:
            a - (-b)          → a + b
            (-a) - b          → -(a + b)
            a - b, |a| < |b|  → -(b - a)
            a - b, |a| >= |b| → sub_magnitudes(a, b)
        """
        if not other.is_positive:
            return self.add(other.abs_value())

        if not self.is_positive:
            return self.abs_value().add(other).negate()

        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            return self.from_parts(False, sub_magnitudes(other.magnitude, self.magnitude))

        return self.from_parts(True, sub_magnitudes(self.magnitude, other.magnitude))

    # -------------------------------------------------------------------------
    # Умножение / деление
    # -------------------------------------------------------------------------

    def mul(self, other: "BigNumber") -> "BigNumber":
        """Произведение; результат неотрицателен, если знаки совпадают."""
        return self.from_parts(
            self.is_positive == other.is_positive,
            mul_magnitudes(self.magnitude, other.magnitude),
        )

    def div_rem(self, other: "BigNumber") -> tuple["BigNumber", "BigNumber"]:
        """
        Частное и остаток за один проход.

        Знак частного: знаки операндов совпадают → неотрицательное.
        Знак остатка: совпадает со знаком делимого.

        Raises:
            DivisionByZeroError: Если other равен нулю

        Examples:
            >>> q, r = BigNumber.from_int(-17).div_rem(BigNumber.from_int(5))
            >>> (q.to_int(), r.to_int())
            (-3, -2)
        """
        quotient, remainder = div_rem_magnitudes(self.magnitude, other.magnitude)
        return (
            self.from_parts(self.is_positive == other.is_positive, quotient),
            self.from_parts(self.is_positive, remainder),
        )

    def div(self, other: "BigNumber") -> "BigNumber":
        return self.div_rem(other)[0]

    def rem(self, other: "BigNumber") -> "BigNumber":
        return self.div_rem(other)[1]

    # -------------------------------------------------------------------------
    # Сдвиги
    # -------------------------------------------------------------------------

    def shift_left(self, amount: int) -> "BigNumber":
        """Сдвиг magnitude влево на amount бит; знак сохраняется."""
        return self.from_parts(self.is_positive, shift_left_magnitude(self.magnitude, amount))

    def shift_right(self, amount: int) -> "BigNumber":
        """
        Сдвиг magnitude вправо на amount бит; знак сохраняется.

        Выдвинутые биты теряются, поэтому для отрицательных значений результат
        усекается к нулю: (-1).shift_right(1) == 0.
        """
        return self.from_parts(self.is_positive, shift_right_magnitude(self.magnitude, amount))

    def logical_shift_right(self, amount: int) -> "BigNumber":
        """
        Логический (беззнаковый) сдвиг вправо — не поддерживается.

        Raises:
            InvalidShiftAmountError: Если amount невалиден
            UnsupportedOperationError: Всегда для валидного amount
        """
        validate_shift_amount(amount)
        logger.debug("logical_shift_right requested, amount=%d", amount)
        raise UnsupportedOperationError(
            "Logical (unsigned) right shift is not supported for sign-magnitude BigNumber"
        )

    # -------------------------------------------------------------------------
    # Bitwise
    # -------------------------------------------------------------------------

    def bit_and(self, other: "BigNumber") -> "BigNumber":
        return self.from_parts(
            self.is_positive and other.is_positive,
            and_magnitudes(self.magnitude, other.magnitude),
        )

    def bit_or(self, other: "BigNumber") -> "BigNumber":
        return self.from_parts(
            self.is_positive or other.is_positive,
            or_magnitudes(self.magnitude, other.magnitude),
        )

    def bit_xor(self, other: "BigNumber") -> "BigNumber":
        return self.from_parts(True, xor_magnitudes(self.magnitude, other.magnitude))

    def bit_not(self) -> "BigNumber":
        """Инверсия разрядов и знака: ~0 == -255, ~255 == 0."""
        return self.from_parts(not self.is_positive, not_magnitude(self.magnitude))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigNumber") -> Ordering:
        """
        Полный порядок по знаку и magnitude.

        Неотрицательное всегда больше отрицательного; при общем знаке
        решает magnitude, с инверсией для отрицательных.
        """
        if self.is_positive != other.is_positive:
            return Ordering.GT if self.is_positive else Ordering.LT

        order = compare_magnitudes(self.magnitude, other.magnitude)
        if not self.is_positive:
            order = -order
        return Ordering(order)

    # -------------------------------------------------------------------------
    # Python operators
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.is_positive == rhs.is_positive and self.magnitude == rhs.magnitude

    def __hash__(self) -> int:
        # Совместим с равенством BigNumber == int
        return hash(self.to_int())

    def __lt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is Ordering.LT

    def __le__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is not Ordering.GT

    def __gt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is Ordering.GT

    def __ge__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is not Ordering.LT

    def __add__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.add(rhs)

    def __radd__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.add(self)

    def __sub__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.sub(rhs)

    def __rsub__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.sub(self)

    def __mul__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.mul(rhs)

    def __rmul__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.mul(self)

    def __floordiv__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.div(rhs)

    def __rfloordiv__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.div(self)

    def __mod__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.rem(rhs)

    def __rmod__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.rem(self)

    def __divmod__(self, other: Any) -> tuple["BigNumber", "BigNumber"]:
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.div_rem(rhs)

    def __rdivmod__(self, other: Any) -> tuple["BigNumber", "BigNumber"]:
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.div_rem(self)

    def __lshift__(self, amount: Any) -> "BigNumber":
        return self.shift_left(_shift_amount(amount))

    def __rshift__(self, amount: Any) -> "BigNumber":
        return self.shift_right(_shift_amount(amount))

    def __and__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.bit_and(rhs)

    def __rand__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.bit_and(self)

    def __or__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.bit_or(rhs)

    def __ror__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.bit_or(self)

    def __xor__(self, other: Any) -> "BigNumber":
        rhs = _coerce(other)
        return NotImplemented if rhs is None else self.bit_xor(rhs)

    def __rxor__(self, other: Any) -> "BigNumber":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.bit_xor(self)

    def __invert__(self) -> "BigNumber":
        return self.bit_not()

    def __neg__(self) -> "BigNumber":
        return self.negate()

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return self.abs_value()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: Any) -> BigNumber | None:
    """Приведение операнда: BigNumber как есть, int через from_int, иначе None."""
    if isinstance(value, BigNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigNumber.from_int(value)
    return None


def _shift_amount(amount: Any) -> Any:
    """BigNumber как величина сдвига разворачивается в int; остальное проверит shift engine."""
    if isinstance(amount, BigNumber):
        return amount.to_int()
    return amount


ZERO = BigNumber()
ONE = BigNumber(magnitude=(1,))
