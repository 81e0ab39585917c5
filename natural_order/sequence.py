from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, overload

from natural_order.compare import compare
from natural_order.types import EQUAL, GREATER, LESS, DigitMode, Ordering, Token


@dataclass(frozen=True)
class HumanString:
    """
    Immutable token sequence of one input string, comparable in natural order.

    `==` is structural: HumanString.from_str("05") != HumanString.from_str("5"),
    while partial_cmp() on the same pair is "EQUAL".
    The ordering operators follow the partial order; for an incomparable pair
    (e.g. "1" vs "a") <, <=, > and >= are all False, like sets.
    """
    tokens: Tuple[Token, ...] = ()

    @classmethod
    def from_str(cls, text: str, *, digits: DigitMode = "unicode") -> HumanString:
        from natural_order.tokenizer import tokenize

        return tokenize(text, digits=digits)

    @property
    def text(self) -> str:
        return "".join(t.text for t in self.tokens)

    def partial_cmp(self, other: HumanString) -> Ordering:
        return compare(self.tokens, other.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @overload
    def __getitem__(self, i: int) -> Token: ...
    @overload
    def __getitem__(self, i: slice) -> Tuple[Token, ...]: ...

    def __getitem__(self, i):
        return self.tokens[i]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HumanString):
            return NotImplemented
        return self.partial_cmp(other) == LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HumanString):
            return NotImplemented
        return self.partial_cmp(other) in (LESS, EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HumanString):
            return NotImplemented
        return self.partial_cmp(other) == GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HumanString):
            return NotImplemented
        return self.partial_cmp(other) in (GREATER, EQUAL)

    def __str__(self) -> str:
        return self.text
