from __future__ import annotations

import pytest

from natural_order.compare import compare, compare_strings, compare_tokens
from natural_order.tokenizer import tokenize
from natural_order.types import EQUAL, GREATER, INCOMPARABLE, LESS, Letters, Number


def _cmp(a: str, b: str):
    return compare(tokenize(a), tokenize(b))


def test_letters():
    assert _cmp("aaa", "aaa") == EQUAL
    assert _cmp("aaa", "aab") == LESS
    assert _cmp("aab", "aaa") == GREATER
    assert _cmp("aaa", "aa") == GREATER

def test_numbers():
    assert _cmp("111", "111") == EQUAL
    assert _cmp("111", "112") == LESS
    assert _cmp("112", "111") == GREATER
    assert _cmp("9", "10") == LESS

def test_letters_then_numbers():
    assert _cmp("a1", "a1") == EQUAL
    assert _cmp("a1", "a2") == LESS
    assert _cmp("a2", "a1") == GREATER

def test_second_pair_decides():
    assert _cmp("1a2", "1b1") == LESS

def test_kind_mismatch_is_incomparable():
    assert _cmp("1", "a") == INCOMPARABLE
    assert _cmp("a", "1") == INCOMPARABLE
    # short-circuits before later pairs are looked at
    assert _cmp("1z", "a0") == INCOMPARABLE

def test_first_difference_wins_over_later_mismatch():
    # "a" < "b" decides before the kind mismatch at position 1
    assert _cmp("a1", "bz") == LESS

@pytest.mark.parametrize("prefix,suffix", [("", ""), ("file", ".txt"), ("v", "-rc"), ("", "x")])
def test_numeric_magnitude_with_shared_affixes(prefix, suffix):
    for n, m in [(0, 1), (2, 11), (9, 10), (99, 1000), (10 ** 30, 10 ** 30 + 1)]:
        assert _cmp(f"{prefix}{n}{suffix}", f"{prefix}{m}{suffix}") == LESS
        assert _cmp(f"{prefix}{m}{suffix}", f"{prefix}{n}{suffix}") == GREATER

def test_reflexive():
    for s in ["", "a", "1", "abc123xyz456", "007", "  ", "x٣"]:
        assert _cmp(s, s) == EQUAL

def test_prefix_rule():
    assert _cmp("a", "a1") == LESS
    assert _cmp("a1", "a") == GREATER
    assert _cmp("file", "file.txt") == LESS
    assert _cmp("", "a") == LESS
    assert _cmp("", "") == EQUAL

def test_leading_zeros_equal_under_compare_only():
    assert _cmp("007", "7") == EQUAL
    assert _cmp("file007", "file7") == EQUAL
    assert tokenize("007") != tokenize("7")
    assert _cmp("008", "7") == GREATER

def test_letters_are_case_sensitive_code_point_order():
    assert _cmp("B", "a") == LESS
    assert _cmp("a", "á") == LESS

def test_unicode_digits_compare_numerically():
    assert _cmp("x٩", "x10") == LESS
    assert _cmp("٠٠٧", "7") == EQUAL

def test_huge_numbers_no_overflow():
    a = "1" + "0" * 6000
    b = "9" * 6000
    assert _cmp(b, a) == LESS
    assert _cmp("00" + a, a) == EQUAL

def test_compare_tokens_directly():
    assert compare_tokens(Number("2"), Number("10")) == LESS
    assert compare_tokens(Letters("b"), Letters("a")) == GREATER
    assert compare_tokens(Number("1"), Letters("a")) == INCOMPARABLE

def test_compare_accepts_plain_token_lists():
    assert compare([Letters("a"), Number("2")], [Letters("a"), Number("10")]) == LESS
    assert compare([], []) == EQUAL

def test_compare_strings():
    assert compare_strings("file2", "file11") == LESS
    assert compare_strings("1", "a") == INCOMPARABLE
    # in ascii mode the arabic-indic digit is a letter, so it faces a number
    assert compare_strings("x٩", "x10", digits="ascii") == GREATER
