from typing import Any

import numpy as np

from satfront.core.types import Lit, MAX_LITERAL


def is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer))


def check_literal_range(value: int) -> int:
    """Rejects zero and magnitudes beyond MAX_LITERAL."""
    if value == 0:
        raise ValueError("non-zero integer expected")
    if value > MAX_LITERAL or value < -MAX_LITERAL:
        raise ValueError(f"integer '{value}' is too small or too large")
    return value


def decode_literal(value: Any) -> Lit:
    """
    Converts a DIMACS style signed literal into a Lit.
    The variable index is zero-based, sign is True for negated literals.
    """
    if not is_integer(value):
        raise TypeError("integer expected")
    val = check_literal_range(int(value))
    return Lit(abs(val) - 1, val < 0)


def encode_literal(lit: Lit) -> int:
    """Converts a Lit back into a signed one-based integer."""
    val = lit.var + 1
    return -val if lit.sign else val
