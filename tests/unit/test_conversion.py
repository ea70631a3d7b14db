"""
Тесты для модуля Conversion (машинные целые → BigNumber)

Проверяет:
1. Описания знаковых ширин (SignedWidth) и реестр
2. Разложение int на знак и base-256 разряды
3. Минимальное значение ширины (расширение перед abs)
4. IntegerRangeError вместо молчаливого wrap-around
5. Отказ от нецелых входов
"""

import pytest

from src.core.domain import BigNumber, from_int
from src.core.errors import BigNumberError, IntegerRangeError
from src.core.math import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    SignedWidth,
    get_signed_width,
    int_to_sign_magnitude,
    magnitude_to_int,
    resolve_width,
)

# =============================================================================
# SIGNED WIDTH
# =============================================================================


class TestSignedWidth:
    """Тесты для SignedWidth"""

    def test_ranges(self) -> None:
        """Диапазоны стандартных ширин"""
        assert INT8.range() == (-128, 127)
        assert INT16.range() == (-32768, 32767)
        assert INT32.range() == (-(2**31), 2**31 - 1)
        assert INT64.range() == (-(2**63), 2**63 - 1)
        assert INT128.max_value() == 2**127 - 1

    def test_contains(self) -> None:
        """Проверка принадлежности диапазону"""
        assert INT8.contains(-128)
        assert INT8.contains(127)
        assert not INT8.contains(128)
        assert not INT8.contains(-129)

    def test_custom_width(self) -> None:
        """Произвольная ширина"""
        width = SignedWidth("int24", 24)
        assert width.range() == (-(2**23), 2**23 - 1)

    def test_invalid_bits_raises(self) -> None:
        """Неположительная ширина запрещена"""
        with pytest.raises(ValueError, match="bits must be positive"):
            SignedWidth("int0", 0)

        with pytest.raises(ValueError, match="bits must be an int"):
            SignedWidth("bad", 8.0)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """SignedWidth — frozen dataclass"""
        with pytest.raises(AttributeError):
            INT8.bits = 16  # type: ignore[misc]


class TestWidthLookup:
    """Тесты для get_signed_width / resolve_width"""

    def test_lookup_by_name_and_alias(self) -> None:
        """Поиск по имени и алиасам (без учёта регистра)"""
        assert get_signed_width("int32") is INT32
        assert get_signed_width("int32_t") is INT32
        assert get_signed_width(" LONG ") is INT64
        assert get_signed_width("sbyte") is INT8

    def test_unknown_name_raises(self) -> None:
        """Неизвестная ширина → KeyError со списком известных"""
        with pytest.raises(KeyError, match="Unknown signed width"):
            get_signed_width("int7")

    def test_resolve_width(self) -> None:
        """Приведение аргумента width"""
        assert resolve_width(None) is None
        assert resolve_width(INT16) is INT16
        assert resolve_width("short") is INT16
        assert resolve_width(12) == SignedWidth("int12", 12)

    def test_resolve_invalid_width_raises(self) -> None:
        """width неподдерживаемого типа → ValueError"""
        with pytest.raises(ValueError, match="width must be"):
            resolve_width(8.5)  # type: ignore[arg-type]


# =============================================================================
# INT -> MAGNITUDE
# =============================================================================


class TestIntToSignMagnitude:
    """Тесты для int_to_sign_magnitude / magnitude_to_int"""

    def test_zero_is_canonical(self) -> None:
        """Ноль → (True, [0])"""
        assert int_to_sign_magnitude(0) == (True, [0])

    def test_little_endian_digits(self) -> None:
        """Разряды младшим первым"""
        assert int_to_sign_magnitude(300) == (True, [44, 1])
        assert int_to_sign_magnitude(-0x010203) == (False, [3, 2, 1])

    def test_round_trip_to_int(self) -> None:
        """magnitude_to_int обращает разложение"""
        for value in (1, 255, 256, 65535, 2**64 + 7):
            _, digits = int_to_sign_magnitude(value)
            assert magnitude_to_int(digits) == value

    def test_width_minimum_is_widened(self) -> None:
        """Минимальное значение ширины конвертируется без переполнения"""
        assert int_to_sign_magnitude(-128, INT8) == (False, [128])
        assert int_to_sign_magnitude(-(2**31), INT32) == (False, [0, 0, 0, 128])

        is_positive, digits = int_to_sign_magnitude(-(2**63), INT64)
        assert not is_positive
        assert digits == [0, 0, 0, 0, 0, 0, 0, 128]

    def test_out_of_range_raises(self) -> None:
        """Значение вне ширины → IntegerRangeError (не wrap-around)"""
        with pytest.raises(IntegerRangeError, match="does not fit into int8"):
            int_to_sign_magnitude(128, INT8)

        with pytest.raises(IntegerRangeError, match="does not fit into int64"):
            int_to_sign_magnitude(-(2**63) - 1, "int64")

    def test_range_error_taxonomy(self) -> None:
        """IntegerRangeError — это BigNumberError и OverflowError"""
        with pytest.raises(OverflowError):
            int_to_sign_magnitude(2**16, 16)

        with pytest.raises(BigNumberError):
            int_to_sign_magnitude(2**16, 16)

    def test_non_int_rejected(self) -> None:
        """bool и float не принимаются"""
        with pytest.raises(TypeError, match="value must be an int"):
            int_to_sign_magnitude(True)

        with pytest.raises(TypeError, match="value must be an int"):
            int_to_sign_magnitude(1.0)  # type: ignore[arg-type]


# =============================================================================
# FROM_INT
# =============================================================================


class TestFromInt:
    """Тесты для BigNumber.from_int / from_int"""

    def test_from_int_values(self) -> None:
        """Конверсия сохраняет значение"""
        assert from_int(300).magnitude == (44, 1)
        assert from_int(-5).is_positive is False
        assert from_int(0) == BigNumber()

    def test_from_int_with_each_width(self) -> None:
        """Одна функция для всех ширин"""
        for width in (INT8, INT16, INT32, INT64, INT128):
            low, high = width.range()
            assert from_int(low, width).to_int() == low
            assert from_int(high, width).to_int() == high

    def test_from_int_out_of_range(self) -> None:
        """from_int пробрасывает IntegerRangeError"""
        with pytest.raises(IntegerRangeError):
            BigNumber.from_int(2**31, width=INT32)

    def test_from_int_unbounded(self) -> None:
        """width=None — без ограничения"""
        value = 2**200 - 1
        big = from_int(value)
        assert big.to_int() == value
        assert big.byte_length() == 25
