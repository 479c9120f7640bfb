from array import array
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from satfront.cnf.literals import check_literal_range, is_integer
from satfront.core.types import Lit

# C int, long and long long, as understood by array.array and numpy.
FLAT_TYPECODES = ("i", "l", "q")
FLAT_ITEMSIZES = frozenset(array(code).itemsize for code in FLAT_TYPECODES)


def buffer_format(obj: Any) -> Optional[Tuple[str, int]]:
    """
    Returns (typecode, itemsize) for objects that carry a machine integer
    layout (array.array or numpy arrays), or None for plain iterables.
    """
    if isinstance(obj, np.ndarray):
        return obj.dtype.char, obj.dtype.itemsize
    if hasattr(obj, "typecode") and hasattr(obj, "itemsize") and hasattr(obj, "buffer_info"):
        return obj.typecode, obj.itemsize
    return None


def check_buffer_format(typecode: Any, itemsize: Optional[int] = None) -> None:
    """Accepts C int, long and long long layouts only."""
    if not isinstance(typecode, str) or typecode not in FLAT_TYPECODES:
        raise ValueError(f"invalid clause array: invalid typecode '{typecode}'")
    if itemsize is None:
        itemsize = array(typecode).itemsize
    if itemsize not in FLAT_ITEMSIZES:
        raise ValueError(f"invalid clause array: invalid itemsize '{itemsize}'")


def buffer_values(obj: Any) -> List[int]:
    """Reads a flat machine integer buffer into Python ints."""
    if isinstance(obj, np.ndarray):
        return obj.ravel().tolist()
    return obj.tolist()


def iter_flat_clauses(values: Sequence[Any]) -> Iterator[Tuple[List[Lit], int]]:
    """
    Splits zero separated, zero terminated literals into clauses.
    Yields (literals, max_var) per clause. Runs of length zero are skipped,
    so a leading zero or two adjacent zeros never produce an empty clause.
    The terminator is checked before anything is yielded.
    """
    if len(values) == 0:
        return
    if not is_integer(values[-1]):
        raise TypeError("integer expected")
    if values[-1] != 0:
        raise ValueError("last clause not terminated by zero")

    lits = []
    max_var = -1
    for value in values:
        if not is_integer(value):
            raise TypeError("integer expected")
        val = int(value)
        if val == 0:
            if lits:
                yield lits, max_var
            lits = []
            max_var = -1
            continue
        check_literal_range(val)
        var = abs(val) - 1
        max_var = max(max_var, var)
        lits.append(Lit(var, val < 0))
