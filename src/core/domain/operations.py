"""
Operations — функциональный публичный интерфейс BigNumber

Тонкие функции над BigNumber для вызывающего кода, который предпочитает
add(a, b) операторам a + b. Семантика полностью совпадает с методами модели.
"""

from src.core.domain.big_number import BigNumber, Ordering
from src.core.math.conversion import SignedWidth


def from_int(value: int, width: SignedWidth | int | str | None = None) -> BigNumber:
    """
    Конверсия из знакового машинного целого заданной ширины.

    Raises:
        TypeError: Если value не int
        IntegerRangeError: Если value вне диапазона width
    """
    return BigNumber.from_int(value, width)


def add(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.add(b)


def sub(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.sub(b)


def mul(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.mul(b)


def div_rem(a: BigNumber, b: BigNumber) -> tuple[BigNumber, BigNumber]:
    """
    Частное (усечение к нулю) и остаток (знак делимого).

    Raises:
        DivisionByZeroError: Если b равен нулю
    """
    return a.div_rem(b)


def div(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.div(b)


def rem(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.rem(b)


def compare(a: BigNumber, b: BigNumber) -> Ordering:
    return a.compare(b)


def shift_left(value: BigNumber, amount: int) -> BigNumber:
    """
    Raises:
        InvalidShiftAmountError: Если amount отрицательный или не int
    """
    return value.shift_left(amount)


def shift_right(value: BigNumber, amount: int) -> BigNumber:
    """
    Raises:
        InvalidShiftAmountError: Если amount отрицательный или не int
    """
    return value.shift_right(amount)


def logical_shift_right(value: BigNumber, amount: int) -> BigNumber:
    """
    Raises:
        UnsupportedOperationError: Всегда (операция не поддерживается)
    """
    return value.logical_shift_right(amount)


def bit_and(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.bit_and(b)


def bit_or(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.bit_or(b)


def bit_xor(a: BigNumber, b: BigNumber) -> BigNumber:
    return a.bit_xor(b)


def bit_not(value: BigNumber) -> BigNumber:
    return value.bit_not()
