"""
Conversion — построение magnitude из машинных целых

Единая параметризованная по ширине конверсия вместо отдельной функции
на каждый тип (int8, int16, int32, int64, ...).

Минимальное значение ширины (например, -2**63 для int64) нельзя
взять по модулю в пределах той же ширины. Здесь abs() всегда
вычисляется в неограниченном Python int, то есть значение расширяется
до большей ширины перед взятием модуля.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Final, Iterable, Sequence

from src.core.errors import IntegerRangeError
from src.core.math.magnitude import DIGIT_BITS, DIGIT_MASK

logger = logging.getLogger(__name__)


# =============================================================================
# ЗНАКОВЫЕ ШИРИНЫ
# =============================================================================


@dataclass(frozen=True)
class SignedWidth:
    """Описание знакового целого фиксированной ширины (two's complement диапазон)."""

    name: str
    bits: int

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise ValueError(f"bits must be an int, got {type(self.bits).__name__}")
        if self.bits < 1:
            raise ValueError(f"bits must be positive, got {self.bits}")

    def min_value(self) -> int:
        """Минимальное представимое значение: -2**(bits-1)."""
        return -(1 << (self.bits - 1))

    def max_value(self) -> int:
        """Максимальное представимое значение: 2**(bits-1) - 1."""
        return (1 << (self.bits - 1)) - 1

    def range(self) -> tuple[int, int]:
        """Return (min, max) inclusive range."""
        return (self.min_value(), self.max_value())

    def contains(self, value: int) -> bool:
        """Помещается ли value в эту ширину."""
        return self.min_value() <= value <= self.max_value()


INT8: Final[SignedWidth] = SignedWidth("int8", 8)
INT16: Final[SignedWidth] = SignedWidth("int16", 16)
INT32: Final[SignedWidth] = SignedWidth("int32", 32)
INT64: Final[SignedWidth] = SignedWidth("int64", 64)
INT128: Final[SignedWidth] = SignedWidth("int128", 128)


def _make_widths() -> Dict[str, SignedWidth]:
    widths: Dict[str, SignedWidth] = {}

    def add(width: SignedWidth, aliases: Iterable[str] = ()) -> None:
        widths[width.name] = width
        for alias in aliases:
            widths[alias] = width

    add(INT8, aliases=("int8_t", "sbyte"))
    add(INT16, aliases=("int16_t", "short"))
    add(INT32, aliases=("int32_t", "int"))
    add(INT64, aliases=("int64_t", "long"))
    add(INT128, aliases=("int128_t",))

    return widths


SIGNED_WIDTHS: Final[Dict[str, SignedWidth]] = _make_widths()


def get_signed_width(name: str) -> SignedWidth:
    """Lookup a width by name, raising a helpful error if it does not exist."""
    normalized = name.strip().lower()
    try:
        return SIGNED_WIDTHS[normalized]
    except KeyError as exc:
        available = ", ".join(sorted(SIGNED_WIDTHS))
        raise KeyError(f"Unknown signed width '{name}'. Known widths: {available}") from exc


def resolve_width(width: SignedWidth | int | str | None) -> SignedWidth | None:
    """
    Приведение аргумента width к SignedWidth.

    Args:
        width: None (без ограничения), число бит, имя ширины или SignedWidth

    Returns:
        SignedWidth или None для неограниченного Python int
    """
    if width is None or isinstance(width, SignedWidth):
        return width
    if isinstance(width, str):
        return get_signed_width(width)
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"width must be SignedWidth, int, str or None, got {width!r}")
    return SignedWidth(f"int{width}", width)


# =============================================================================
# INT <-> MAGNITUDE
# =============================================================================


def int_to_sign_magnitude(
    value: int,
    width: SignedWidth | int | str | None = None,
) -> tuple[bool, list[int]]:
    """
    Разложение целого на знак и base-256 разряды (младший первым).

    Args:
        value: Целое значение (bool не допускается)
        width: Заявленная знаковая ширина value (None — без ограничения)

    Returns:
        (is_positive, magnitude); ноль → (True, [0])

    Raises:
        TypeError: Если value не int
        IntegerRangeError: Если value вне диапазона width

    Examples:
        >>> int_to_sign_magnitude(300)
        (True, [44, 1])
        >>> int_to_sign_magnitude(-128, 8)
        (False, [128])
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")

    resolved = resolve_width(width)
    if resolved is not None and not resolved.contains(value):
        min_val, max_val = resolved.range()
        logger.debug("int_to_sign_magnitude: %d outside %s", value, resolved.name)
        raise IntegerRangeError(
            f"value {value} does not fit into {resolved.name} (range {min_val}..{max_val})"
        )

    if value == 0:
        return True, [0]

    is_positive = value > 0
    # abs() в неограниченном int: минимальное значение ширины не переполняется
    remaining = abs(value)

    digits: list[int] = []
    while remaining > 0:
        digits.append(remaining & DIGIT_MASK)
        remaining >>= DIGIT_BITS

    return is_positive, digits


def magnitude_to_int(digits: Sequence[int]) -> int:
    """Сборка неотрицательного Python int из base-256 разрядов (младший первым)."""
    value = 0
    for digit in reversed(digits):
        value = (value << DIGIT_BITS) | digit
    return value
