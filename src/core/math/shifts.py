"""
Shift Engine — сдвиги magnitude на произвольное число бит

Сдвиг на n бит раскладывается на:
- n // 8 целых разрядов (добавление / отбрасывание байтов)
- n % 8 бит внутри разрядов (с переносом между соседними байтами)

Сдвиг вправо отбрасывает выдвинутые биты без округления.
"""

from typing import Sequence

from src.core.errors import InvalidShiftAmountError
from src.core.math.magnitude import DIGIT_BITS, DIGIT_MASK, normalize


def validate_shift_amount(amount: int) -> None:
    """
    Проверка величины сдвига.

    Raises:
        InvalidShiftAmountError: Если amount не int (или bool) либо отрицательный
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidShiftAmountError(
            f"Shift amount must be an int, got {type(amount).__name__}"
        )

    if amount < 0:
        raise InvalidShiftAmountError(f"Shift amount must be non-negative, got {amount}")


def shift_left_magnitude(digits: Sequence[int], amount: int) -> list[int]:
    """
    Сдвиг magnitude влево на amount бит.

    Сдвиг влево никогда не теряет бит: перенос из старшего разряда
    становится новым старшим разрядом.

    Args:
        digits: Нормализованная magnitude
        amount: Количество бит (>= 0)

    Returns:
        Сдвинутая magnitude

    Examples:
        >>> shift_left_magnitude([1], 10)
        [0, 4]
        >>> shift_left_magnitude([128], 1)
        [0, 1]
    """
    validate_shift_amount(amount)

    if list(digits) == [0]:
        return [0]

    whole_digits, bits = divmod(amount, DIGIT_BITS)
    result = [0] * whole_digits

    if bits == 0:
        result.extend(digits)
        return result

    carry = 0
    for digit in digits:
        result.append(((digit << bits) & DIGIT_MASK) | carry)
        carry = digit >> (DIGIT_BITS - bits)

    if carry:
        result.append(carry)

    return result


def shift_right_magnitude(digits: Sequence[int], amount: int) -> list[int]:
    """
    Сдвиг magnitude вправо на amount бит.

    Младшие n // 8 разрядов отбрасываются целиком; остаток бит сдвигается
    от старшего разряда к младшему, перенося младшие биты вниз.

    Args:
        digits: Нормализованная magnitude
        amount: Количество бит (>= 0)

    Returns:
        Нормализованная сдвинутая magnitude ([0] если все биты выдвинуты)

    Examples:
        >>> shift_right_magnitude([0, 4], 10)
        [1]
        >>> shift_right_magnitude([255], 8)
        [0]
    """
    validate_shift_amount(amount)

    whole_digits, bits = divmod(amount, DIGIT_BITS)
    remaining = list(digits[whole_digits:])

    if not remaining:
        return [0]

    if bits == 0:
        return normalize(remaining)

    reversed_result: list[int] = []
    carry = 0
    for digit in reversed(remaining):
        reversed_result.append((digit >> bits) | carry)
        carry = (digit << (DIGIT_BITS - bits)) & DIGIT_MASK

    reversed_result.reverse()
    return normalize(reversed_result)
