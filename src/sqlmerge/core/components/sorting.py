from __future__ import annotations

"""
Natural Order Comparison.

Orders names the way a person reads them: runs of ASCII digits are compared
by numeric value, every other character by code point. Used to give merged
scripts a stable, human-friendly sequence ("2.sql" before "10.sql").
"""

import re
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

_DIGIT_RUN = re.compile(r"[0-9]+")

# -----------------------------------------------------------------------------
# COMPARATOR
# -----------------------------------------------------------------------------

def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_natural(a: str, b: str) -> int:
    """
    Compare two names in natural order.

    Digit runs are compared by value; on equal value the run with fewer
    leading zeros sorts first. Other characters compare by code point, so
    the comparison is case-sensitive. When one name is a prefix of the
    other, the shorter one sorts first.

    Args:
        a: Left-hand name.
        b: Right-hand name.

    Returns:
        int: Negative if a < b, zero if equal, positive if a > b.
    """
    i, j = 0, 0
    len_a, len_b = len(a), len(b)

    while i < len_a and j < len_b:
        run_a = _DIGIT_RUN.match(a, i)
        run_b = _DIGIT_RUN.match(b, j)

        if run_a and run_b:
            digits_a, digits_b = run_a.group(), run_b.group()
            by_value = _sign(int(digits_a) - int(digits_b))
            if by_value:
                return by_value
            by_width = _sign(len(digits_a) - len(digits_b))
            if by_width:
                return by_width
            i, j = run_a.end(), run_b.end()
            continue

        ca, cb = a[i], b[j]
        if ca != cb:
            return -1 if ca < cb else 1
        i += 1
        j += 1

    return _sign((len_a - i) - (len_b - j))


# -----------------------------------------------------------------------------
# SORTING HELPERS
# -----------------------------------------------------------------------------

def sort_naturally(
        items: Iterable[T],
        key: Optional[Callable[[T], str]] = None,
) -> List[T]:
    """
    Return a new list sorted in natural order.

    The sort is stable: items whose keys compare equal keep their input order.

    Args:
        items: Items to sort.
        key: Extracts the name to compare. Defaults to the item itself.

    Returns:
        List[T]: Sorted copy of the items.
    """
    extract = key or (lambda item: item)
    return sorted(items, key=cmp_to_key(lambda x, y: compare_natural(extract(x), extract(y))))
