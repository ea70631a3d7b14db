"""
Bitwise Engine — побайтовые AND / OR / XOR / NOT над magnitudes

Операции работают только с magnitude; более короткий операнд
концептуально дополняется нулевыми старшими разрядами.

ВАЖНО: правила комбинирования знаков (AND → and знаков, OR → or знаков,
XOR → всегда неотрицательный, NOT → инверсия знака) реализуются в
BigNumber и НЕ являются семантикой two's complement. Например,
(-1) & 1 == 1 (в two's complement тоже 1), но (-1) | 2 == 3, а не -1.
"""

from typing import Sequence

from src.core.math.magnitude import DIGIT_MASK, normalize


def _ordered(left: Sequence[int], right: Sequence[int]) -> tuple[Sequence[int], Sequence[int]]:
    """Swap операндов так, чтобы левый был не длиннее правого."""
    if len(left) > len(right):
        return right, left
    return left, right


def and_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Побайтовое AND.

    Разряды сверх длины короткого операнда дают 0, поэтому результат
    обрезается до короткого операнда и заново нормализуется.

    Examples:
        >>> and_magnitudes([0xF0, 0x01], [0x3C])
        [48]
        >>> and_magnitudes([0x0F], [0xF0, 0x01])
        [0]
    """
    shorter, longer = _ordered(left, right)
    return normalize([a & b for a, b in zip(shorter, longer)])


def or_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Побайтовое OR.

    Examples:
        >>> or_magnitudes([0x0F], [0xF0, 0x01])
        [255, 1]
    """
    shorter, longer = _ordered(left, right)
    result = [a | b for a, b in zip(shorter, longer)]
    result.extend(longer[len(shorter):])
    return normalize(result)


def xor_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Побайтовое XOR.

    Examples:
        >>> xor_magnitudes([0xFF, 0x01], [0xFF, 0x01])
        [0]
    """
    shorter, longer = _ordered(left, right)
    result = [a ^ b for a, b in zip(shorter, longer)]
    result.extend(longer[len(shorter):])
    return normalize(result)


def not_magnitude(digits: Sequence[int]) -> list[int]:
    """
    Инверсия каждого разряда в пределах текущей длины magnitude.

    Examples:
        >>> not_magnitude([0])
        [255]
        >>> not_magnitude([0xF0, 0x01])
        [15, 254]
    """
    return normalize([~digit & DIGIT_MASK for digit in digits])
