"""
Natural ("human") ordering of strings.

Plain string sorting is lexical, so "file11.txt" lands before "file2.txt".
natural_sort() compares embedded digit runs by magnitude instead:

    >>> files = ["file1.txt", "file11.txt", "file2.txt"]
    >>> natural_sort(files)
    >>> files
    ['file1.txt', 'file2.txt', 'file11.txt']

Comparable values can be built directly with HumanString.from_str().
"""

from natural_order.compare import compare, compare_strings, compare_tokens
from natural_order.errors import UnorderablePairError
from natural_order.sequence import HumanString
from natural_order.sort import natural_sort, natural_sorted
from natural_order.tokenizer import iter_runs, tokenize
from natural_order.types import (
    EQUAL,
    GREATER,
    INCOMPARABLE,
    LESS,
    Letters,
    Number,
    Ordering,
    Token,
)

__all__ = [
    "EQUAL",
    "GREATER",
    "INCOMPARABLE",
    "LESS",
    "HumanString",
    "Letters",
    "Number",
    "Ordering",
    "Token",
    "UnorderablePairError",
    "compare",
    "compare_strings",
    "compare_tokens",
    "iter_runs",
    "natural_sort",
    "natural_sorted",
    "tokenize",
]
