"""Text helpers: UTF-16 to byte-string conversion, printf formatting, sorted lookup."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from itertools import islice, takewhile
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def unicode_to_local_string(units: Iterable[int], length: int) -> bytes:
    """Encode up to ``length`` UTF-16 code units as UTF-8 bytes.

    Conversion stops at the first zero unit. Each unit is encoded on its
    own, so surrogate halves become three-byte sequences.
    """
    chars = "".join(
        chr(unit & 0xFFFF)
        for unit in takewhile(lambda u: u & 0xFFFF, islice(units, max(length, 0)))
    )
    return chars.encode("utf-8", "surrogatepass")


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style ``fmt``."""
    return fmt % args


def binary_find(
    seq: Sequence[T],
    value: T,
    less: Callable[[T, T], bool] | None = None,
) -> int | None:
    """Return the index of an element equivalent to ``value`` in sorted ``seq``.

    Equivalence follows ``less`` (default ``<``); returns ``None`` if absent.
    """
    if less is None:
        less = operator.lt
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if less(seq[mid], value):
            lo = mid + 1
        else:
            hi = mid
    if lo == len(seq) or less(value, seq[lo]):
        return None
    return lo