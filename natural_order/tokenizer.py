from __future__ import annotations
from typing import Iterator, List, Tuple, get_args

from natural_order.sequence import HumanString
from natural_order.types import DigitMode, Letters, Number, Token

# Deterministic run tokenizer.
# Rules:
# - A run is the maximal stretch of characters of the same class (numeric / non-numeric).
# - "unicode": numeric = any Unicode decimal digit (str.isdecimal, category Nd).
#   "ascii": numeric = '0'..'9' only; every other digit is just a letter.
# - Runs are kept verbatim, whitespace and punctuation included, so the
#   concatenation of token texts always reproduces the input.
# - No failure mode on str input. Empty input -> empty sequence.

_DIGIT_MODES = get_args(DigitMode)


def _is_unicode_digit(ch: str) -> bool:
    return ch.isdecimal()


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def iter_runs(text: str, *, digits: DigitMode = "unicode") -> Iterator[Tuple[bool, str]]:
    """Yield (is_numeric, run) for each maximal run of `text`, left to right."""
    if not isinstance(text, str):
        raise TypeError(f"tokenize expects str, got {type(text).__name__}")
    if digits not in _DIGIT_MODES:
        raise ValueError(f"digits must be one of {_DIGIT_MODES}, got {digits!r}")
    is_digit = _is_unicode_digit if digits == "unicode" else _is_ascii_digit

    i = 0
    n = len(text)
    while i < n:
        numeric = is_digit(text[i])
        j = i + 1
        while j < n and is_digit(text[j]) == numeric:
            j += 1
        yield numeric, text[i:j]
        i = j


def tokenize(text: str, *, digits: DigitMode = "unicode") -> HumanString:
    tokens: List[Token] = []
    for numeric, run in iter_runs(text, digits=digits):
        tokens.append(Number(run) if numeric else Letters(run))
    return HumanString(tuple(tokens))
