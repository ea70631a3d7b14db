"""
BigNumber Errors — таксономия исключений

Все ошибки поднимаются синхронно и никогда не приводят к повреждённому значению.
Каждое исключение наследует ближайший builtin, поэтому вызывающий код может
ловить как BigNumberError, так и стандартный тип (ZeroDivisionError и т.д.).

Таксономия:
- DivisionByZeroError        — делитель равен канонической нулевой magnitude
- UnsupportedOperationError  — логический (беззнаковый) сдвиг вправо
- IntegerRangeError          — значение не помещается в заявленную ширину
- InvalidShiftAmountError    — отрицательная или нецелая величина сдвига
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigNumberError(Exception):
    """Базовое исключение для всех ошибок BigNumber."""

    pass


class DivisionByZeroError(BigNumberError, ZeroDivisionError):
    """
    Деление на ноль в div_rem / div / rem.

    Делитель с magnitude (0,) не имеет определённого результата:
    операция должна упасть явно, а не зациклиться.
    """

    pass


class UnsupportedOperationError(BigNumberError, NotImplementedError):
    """Операция объявлена, но не поддерживается (logical_shift_right)."""

    pass


class IntegerRangeError(BigNumberError, OverflowError):
    """
    Значение вне диапазона заявленной знаковой ширины.

    Возникает вместо молчаливого wrap-around при конверсии из машинного целого.
    """

    pass


class InvalidShiftAmountError(BigNumberError, ValueError):
    """Величина сдвига отрицательная или не является int."""

    pass
