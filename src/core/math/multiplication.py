"""
Multiplication — школьное умножение magnitudes

Алгоритм O(n·m) однобайтовых умножений:
    для каждого разряда i левого операнда
        partial_i = left[i] × right  (с переносом по основанию 256)
        partial_i сдвигается на i целых разрядов (i ведущих нулей)
    результат = Σ partial_i  (через add_magnitudes)

Fast paths:
- любой операнд == [0] → [0]
- любой операнд == [1] → копия другого операнда
"""

from typing import Sequence

from src.core.math.magnitude import (
    DIGIT_BITS,
    DIGIT_MASK,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    normalize,
)


def mul_digit(digits: Sequence[int], factor: int, offset: int = 0) -> list[int]:
    """
    Умножение magnitude на один разряд с последующим сдвигом на offset разрядов.

    Args:
        digits: Magnitude
        factor: Однобайтовый множитель (0..255)
        offset: Количество младших нулевых разрядов (позиция partial product)

    Returns:
        Partial product (может быть ненормализованным при factor == 0)
    """
    result = [0] * offset
    carry = 0

    for digit in digits:
        product = digit * factor + carry
        result.append(product & DIGIT_MASK)
        carry = product >> DIGIT_BITS

    if carry:
        result.append(carry)

    return result


def mul_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Произведение двух нормализованных magnitudes.

    Args:
        left: Первый множитель
        right: Второй множитель

    Returns:
        Нормализованное произведение

    Examples:
        >>> mul_magnitudes([123], [200, 1])
        [24, 219]
        >>> mul_magnitudes([0], [5, 7])
        [0]
    """
    if tuple(left) == ZERO_MAGNITUDE or tuple(right) == ZERO_MAGNITUDE:
        return [0]

    if tuple(left) == ONE_MAGNITUDE:
        return list(right)
    if tuple(right) == ONE_MAGNITUDE:
        return list(left)

    total: list[int] = [0]
    for i, digit in enumerate(left):
        if digit == 0:
            continue
        total = add_magnitudes(total, mul_digit(right, digit, offset=i))

    return normalize(total)
