"""
Core math modules для BigNumber

Беззнаковые алгоритмы над base-256 magnitudes (младший разряд первым).
Знаки обрабатываются на уровне src.core.domain.
"""

# Magnitude primitives
from src.core.math.magnitude import (
    # Constants
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    # Functions
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    normalize,
    sub_magnitudes,
)

# Multiplication
from src.core.math.multiplication import mul_digit, mul_magnitudes

# Division
from src.core.math.division import div_rem_magnitudes

# Shifts
from src.core.math.shifts import (
    shift_left_magnitude,
    shift_right_magnitude,
    validate_shift_amount,
)

# Bitwise
from src.core.math.bitwise import (
    and_magnitudes,
    not_magnitude,
    or_magnitudes,
    xor_magnitudes,
)

# Conversion
from src.core.math.conversion import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    SIGNED_WIDTHS,
    SignedWidth,
    get_signed_width,
    int_to_sign_magnitude,
    magnitude_to_int,
    resolve_width,
)

__all__ = [
    # Magnitude — Constants
    "DIGIT_BASE",
    "DIGIT_BITS",
    "DIGIT_MASK",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "is_zero_magnitude",
    "normalize",
    "sub_magnitudes",
    # Multiplication
    "mul_digit",
    "mul_magnitudes",
    # Division
    "div_rem_magnitudes",
    # Shifts
    "shift_left_magnitude",
    "shift_right_magnitude",
    "validate_shift_amount",
    # Bitwise
    "and_magnitudes",
    "not_magnitude",
    "or_magnitudes",
    "xor_magnitudes",
    # Conversion — Types
    "SignedWidth",
    # Conversion — Constants
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "SIGNED_WIDTHS",
    # Conversion — Functions
    "get_signed_width",
    "int_to_sign_magnitude",
    "magnitude_to_int",
    "resolve_width",
]
