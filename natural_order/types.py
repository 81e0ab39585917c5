from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Literal, Union

# -----------------------
# Simple string enums
# -----------------------
Ordering = Literal["LESS", "EQUAL", "GREATER", "INCOMPARABLE"]
DigitMode = Literal["unicode", "ascii"]

LESS: Ordering = "LESS"
EQUAL: Ordering = "EQUAL"
GREATER: Ordering = "GREATER"
INCOMPARABLE: Ordering = "INCOMPARABLE"

# int(str) refuses very long inputs on recent interpreters; convert in slices below that.
_CHUNK = 1000

# -----------------------
# Core data types
# -----------------------

@dataclass(frozen=True)
class Letters:
    """Maximal run of non-numeric characters, kept verbatim."""
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Letters text must be non-empty")
        # ascii mode keeps other decimal digits (e.g. "x\u0663") inside Letters
        if any("0" <= ch <= "9" for ch in self.text):
            raise ValueError(f"Letters text must not contain digits: {self.text!r}")


@dataclass(frozen=True)
class Number:
    """
    Maximal run of decimal digits.
    Fields:
      text: the run exactly as it appeared (leading zeros and non-ASCII digits kept)

    Equality is on `text`, so Number("05") != Number("5") even though
    both have magnitude 5. Ordering by magnitude lives in natural_order.compare.
    """
    text: str

    def __post_init__(self) -> None:
        if not self.text or not self.text.isdecimal():
            raise ValueError(f"Number text must be a non-empty run of decimal digits: {self.text!r}")

    @property
    def digits(self) -> str:
        """Canonical ASCII digits without leading zeros ("0" for an all-zero run)."""
        ascii_digits = "".join(str(unicodedata.decimal(ch)) for ch in self.text)
        return ascii_digits.lstrip("0") or "0"

    @property
    def value(self) -> int:
        digits = self.digits
        out = 0
        for i in range(0, len(digits), _CHUNK):
            part = digits[i:i + _CHUNK]
            out = out * 10 ** len(part) + int(part)
        return out

    @classmethod
    def from_int(cls, n: int) -> Number:
        if n < 0:
            raise ValueError(f"Number tokens are non-negative, got {n}")
        # repr-free conversion so huge ints don't trip the str conversion limit
        if n == 0:
            return cls("0")
        parts: list[str] = []
        base = 10 ** _CHUNK
        while n:
            n, rem = divmod(n, base)
            parts.append(str(rem))
        head, *rest = reversed(parts)
        return cls(head + "".join(p.zfill(_CHUNK) for p in rest))


Token = Union[Letters, Number]
