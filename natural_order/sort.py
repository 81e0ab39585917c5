from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, List, MutableSequence, Optional, TypeVar

from natural_order.compare import compare
from natural_order.config import get_config
from natural_order.errors import UnorderablePairError
from natural_order.sequence import HumanString
from natural_order.tokenizer import tokenize
from natural_order.types import GREATER, INCOMPARABLE, LESS, DigitMode

LOGGER = logging.getLogger("natural_order.sort")

T = TypeVar("T")

_CMP_INT = {LESS: -1, GREATER: 1}


def _ordered_indices(
    strings: List[str], *, reverse: bool, digits: DigitMode
) -> List[int]:
    # one tokenization per input; the sort only ever compares these
    keys: List[HumanString] = [tokenize(s, digits=digits) for s in strings]

    def _cmp(i: int, j: int) -> int:
        res = compare(keys[i], keys[j])
        if res == INCOMPARABLE:
            raise UnorderablePairError(strings[i], strings[j])
        return _CMP_INT.get(res, 0)

    return sorted(range(len(strings)), key=cmp_to_key(_cmp), reverse=reverse)


def natural_sort(
    items: MutableSequence[T],
    *,
    key: Optional[Callable[[T], str]] = None,
    reverse: Optional[bool] = None,
    digits: Optional[DigitMode] = None,
) -> None:
    """
    Sort `items` in place in natural order ("file2" before "file11").

    key:     maps an item to the string being ordered (default: the item itself).
    reverse: descending order; None -> config default.
    digits:  "unicode" | "ascii" numeric classification; None -> config default.

    Raises UnorderablePairError if the sort has to compare two strings that
    have no natural order (e.g. "1" vs "a"); `items` is untouched then.
    """
    if reverse is None or digits is None:
        # config is only read when a default is actually needed
        cfg = get_config().sort
        if reverse is None:
            reverse = cfg.reverse
        if digits is None:
            digits = cfg.digits

    snapshot = list(items)
    strings = [key(x) if key is not None else x for x in snapshot]
    LOGGER.debug("natural_sort: %d items (digits=%s, reverse=%s)", len(strings), digits, reverse)

    order = _ordered_indices(strings, reverse=reverse, digits=digits)
    items[:] = [snapshot[i] for i in order]


def natural_sorted(
    iterable: Iterable[T],
    *,
    key: Optional[Callable[[T], str]] = None,
    reverse: Optional[bool] = None,
    digits: Optional[DigitMode] = None,
) -> List[T]:
    """Return a new list sorted in natural order. Same semantics as natural_sort()."""
    out = list(iterable)  # implicit copy
    natural_sort(out, key=key, reverse=reverse, digits=digits)
    return out
