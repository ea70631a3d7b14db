"""
Division — restoring binary long division над magnitudes

Частное и остаток вычисляются за один проход (div и rem — проекции).

АЛГОРИТМ (по одному шагу на каждый бит делимого, начиная со старшего):
    1. remainder <<= 1
    2. remainder |= текущий бит делимого
    3. если remainder >= divisor:
           remainder -= divisor
           соответствующий бит частного = 1

Количество шагов = len(dividend) * 8.

Fast paths:
- |dividend| <  |divisor| → ([0], dividend)
- |dividend| == |divisor| → ([1], [0])

Знаки здесь не рассматриваются: обе magnitudes беззнаковые,
знаки восстанавливает вызывающий код.
"""

import logging
from typing import Sequence

from src.core.errors import DivisionByZeroError
from src.core.math.magnitude import (
    DIGIT_BITS,
    compare_magnitudes,
    is_zero_magnitude,
    normalize,
    sub_magnitudes,
)
from src.core.math.shifts import shift_left_magnitude

logger = logging.getLogger(__name__)


def div_rem_magnitudes(
    dividend: Sequence[int],
    divisor: Sequence[int],
) -> tuple[list[int], list[int]]:
    """
    Частное и остаток от деления magnitudes.

    Args:
        dividend: Нормализованное делимое
        divisor: Нормализованный делитель

    Returns:
        (quotient, remainder) — обе magnitudes нормализованы

    Raises:
        DivisionByZeroError: Если divisor == [0]

    Examples:
        >>> div_rem_magnitudes([17], [5])
        ([3], [2])
        >>> div_rem_magnitudes([4], [9])
        ([0], [4])
    """
    if is_zero_magnitude(divisor):
        logger.debug("div_rem_magnitudes: zero divisor, dividend=%s", list(dividend))
        raise DivisionByZeroError("BigNumber division by zero")

    order = compare_magnitudes(dividend, divisor)
    if order < 0:
        return [0], list(dividend)
    if order == 0:
        return [1], [0]

    quotient = [0] * len(dividend)
    remainder: list[int] = [0]

    for bit_index in range(len(dividend) * DIGIT_BITS - 1, -1, -1):
        digit_index, bit_offset = divmod(bit_index, DIGIT_BITS)
        bit = (dividend[digit_index] >> bit_offset) & 1

        remainder = shift_left_magnitude(remainder, 1)
        remainder[0] |= bit

        if compare_magnitudes(remainder, divisor) >= 0:
            remainder = sub_magnitudes(remainder, divisor)
            quotient[digit_index] |= 1 << bit_offset

    return normalize(quotient), normalize(remainder)
