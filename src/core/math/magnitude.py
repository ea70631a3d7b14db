"""
Magnitude — беззнаковая арифметика над base-256 разрядами

Magnitude хранится как последовательность байтов (0..255), младший разряд первым.
Модуль содержит примитивы, на которых построены все остальные операции:
- Нормализация (удаление старших нулевых разрядов)
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Сравнение magnitudes

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Magnitude никогда не пустая
2. Старший разряд ненулевой, кроме канонического нуля [0]
3. Функции никогда не мутируют входные последовательности
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество бит в одном разряде magnitude
DIGIT_BITS: Final[int] = 8

# Основание системы счисления (один байт на разряд)
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS

# Маска одного разряда
DIGIT_MASK: Final[int] = DIGIT_BASE - 1

# Каноническое представление нуля
ZERO_MAGNITUDE: Final[tuple[int, ...]] = (0,)

# Magnitude единицы (используется fast path умножения)
ONE_MAGNITUDE: Final[tuple[int, ...]] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(digits: Sequence[int]) -> list[int]:
    """
    Удаление старших нулевых разрядов.

    Полностью нулевая (или пустая) magnitude сворачивается в [0].

    Args:
        digits: Разряды, младший первым

    Returns:
        Новый список без избыточных старших нулей

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([0, 0])
        [0]
    """
    result = list(digits)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    if not result:
        return [0]
    return result


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Проверка, является ли magnitude нулевой (с учётом ненормализованных нулей)."""
    return all(digit == 0 for digit in digits)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Сложение двух magnitudes по основанию 256 с переносом.

    Более длинный операнд ведёт цикл; перенос, переживший последний разряд,
    добавляет новый старший разряд.

    Args:
        left: Первая magnitude
        right: Вторая magnitude

    Returns:
        Сумма magnitudes

    Examples:
        >>> add_magnitudes([200], [100])
        [44, 1]
        >>> add_magnitudes([255, 255], [1])
        [0, 0, 1]
    """
    if len(left) < len(right):
        left, right = right, left

    result: list[int] = []
    carry = 0

    for i in range(len(left)):
        total = left[i] + carry
        if i < len(right):
            total += right[i]

        carry = total >> DIGIT_BITS
        result.append(total & DIGIT_MASK)

    if carry:
        result.append(carry)

    return result


def sub_magnitudes(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """
    Вычитание magnitudes по основанию 256 с заёмом.

    Предусловие: |left| >= |right|. Вызывающий код обязан выполнить
    swap-диспетчеризацию по знакам до вызова.

    Args:
        left: Уменьшаемое (не меньше вычитаемого)
        right: Вычитаемое

    Returns:
        Нормализованная разность

    Examples:
        >>> sub_magnitudes([44, 1], [100])
        [200]
        >>> sub_magnitudes([0, 1], [1])
        [255]
    """
    result: list[int] = []
    borrow = 0

    for i in range(len(left)):
        diff = left[i] - borrow
        if i < len(right):
            diff -= right[i]

        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return normalize(result)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Сравнение двух нормализованных magnitudes.

    Более длинная magnitude больше; при равной длине решает первый
    несовпадающий разряд, начиная со старшего.

    Returns:
        -1 если left < right
         0 если left == right
        +1 если left > right
    """
    if len(left) != len(right):
        return 1 if len(left) > len(right) else -1

    for i in range(len(left) - 1, -1, -1):
        if left[i] != right[i]:
            return 1 if left[i] > right[i] else -1

    return 0
