"""
Domain models and value objects.

Contains the BigNumber value type and its functional operation surface.
"""

from src.core.domain.big_number import ONE, ZERO, BigNumber, Ordering
from src.core.domain.operations import (
    add,
    bit_and,
    bit_not,
    bit_or,
    bit_xor,
    compare,
    div,
    div_rem,
    from_int,
    logical_shift_right,
    mul,
    rem,
    shift_left,
    shift_right,
    sub,
)

__all__ = [
    # BigNumber model
    "BigNumber",
    "Ordering",
    "ZERO",
    "ONE",
    # Operations — Arithmetic
    "add",
    "sub",
    "mul",
    "div_rem",
    "div",
    "rem",
    # Operations — Comparison
    "compare",
    # Operations — Shifts
    "shift_left",
    "shift_right",
    "logical_shift_right",
    # Operations — Bitwise
    "bit_and",
    "bit_or",
    "bit_xor",
    "bit_not",
    # Operations — Conversion
    "from_int",
]
