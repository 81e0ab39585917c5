"""
Does: Partial order over token sequences ("natural" ordering).
Inputs: two sequences of Letters/Number tokens (HumanString or any Sequence[Token]).
Outputs: Ordering literal, "LESS" | "EQUAL" | "GREATER" | "INCOMPARABLE".

Notes:
- Number vs Number compares magnitudes as digit strings (length first, then
  lexically), so runs of any length work and leading zeros never matter.
- Letters vs Letters is plain code-point order. No case folding, no locale.
- A Number facing Letters at the same position is INCOMPARABLE and ends the
  comparison right there.
- When every paired token is EQUAL the shorter sequence is LESS.
"""

from __future__ import annotations
from typing import Sequence

from natural_order.types import (
    EQUAL,
    GREATER,
    INCOMPARABLE,
    LESS,
    DigitMode,
    Letters,
    Number,
    Ordering,
    Token,
)


def _cmp(a, b) -> Ordering:
    if a < b:
        return LESS
    if a > b:
        return GREATER
    return EQUAL


def _magnitude(tok: Number) -> tuple[int, str]:
    d = tok.digits
    return len(d), d


def compare_tokens(a: Token, b: Token) -> Ordering:
    if isinstance(a, Number) and isinstance(b, Number):
        return _cmp(_magnitude(a), _magnitude(b))
    if isinstance(a, Letters) and isinstance(b, Letters):
        return _cmp(a.text, b.text)
    return INCOMPARABLE


def compare(a: Sequence[Token], b: Sequence[Token]) -> Ordering:
    for ta, tb in zip(a, b):
        res = compare_tokens(ta, tb)
        if res != EQUAL:
            # INCOMPARABLE, LESS and GREATER all short-circuit
            return res
    return _cmp(len(a), len(b))


def compare_strings(a: str, b: str, *, digits: DigitMode = "unicode") -> Ordering:
    from natural_order.tokenizer import tokenize

    return compare(tokenize(a, digits=digits), tokenize(b, digits=digits))
