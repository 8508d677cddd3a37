"""Small string puzzles: replacing, counting, ordering and matching."""

from __future__ import annotations

import string
from collections import Counter

_SPECIAL = frozenset(string.punctuation)


def _require_lowercase(word: str) -> None:
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"expected lowercase letters only, got {char!r}")


def replace_all(sentence: str, old: str = "XXX", new: str = "CCC") -> str:
    """Replace the first occurrence of old again and again until none is left.

    Raises ValueError when old is empty or new contains old, since the
    replacing would then never end.
    """
    if not old:
        raise ValueError("pattern must not be empty")
    if old in new:
        raise ValueError("replacement contains the pattern")
    while old in sentence:
        sentence = sentence.replace(old, new, 1)
    return sentence


def replace_char(sentence: str, old: str = "X", new: str = " ") -> str:
    """Replace every occurrence of the single character old with new."""
    if len(old) != 1:
        raise ValueError("old must be a single character")
    return sentence.replace(old, new)


def palindrome_arrangement(word: str) -> str | None:
    """Rearrange word into a palindrome, or return None if that cannot be done.

    Characters are laid out in sorted order on each half; the one character
    that occurs an odd number of times, if any, forms the middle.
    """
    counts = sorted(Counter(word).items())
    if sum(1 for _, n in counts if n % 2) > 1:
        return None
    half = "".join(ch * (n // 2) for ch, n in counts if n % 2 == 0)
    middle = "".join(ch * n for ch, n in counts if n % 2)
    return half + middle + half[::-1]


def special_char_counts(sentence: str) -> dict[str, int]:
    """Count printable ASCII punctuation characters, in order of first appearance."""
    return dict(Counter(ch for ch in sentence if ch in _SPECIAL))


def char_counts(word: str) -> dict[str, int]:
    """Count the letters of a lowercase word, in order of first appearance."""
    _require_lowercase(word)
    return dict(Counter(word))


def sorted_letters(line: str) -> str:
    """Return the lowercase letters of line in alphabetical order, dropping the rest."""
    return "".join(sorted(ch for ch in line if "a" <= ch <= "z"))


def frequency_sorted(word: str) -> tuple[list[tuple[str, int]], str]:
    """Rank the letters of a lowercase word by count, then alphabetically.

    Returns the (letter, count) pairs and the word rebuilt in that order.
    """
    _require_lowercase(word)
    pairs = sorted(Counter(word).items(), key=lambda pair: (-pair[1], pair[0]))
    return pairs, "".join(ch * n for ch, n in pairs)


def reverse_string(text: str) -> str:
    """Return text backwards."""
    return text[::-1]


def is_subsequence(word: str, candidate: str) -> bool:
    """Return True if the characters of candidate appear in word in the same order."""
    remaining = iter(word)
    return all(char in remaining for char in candidate)


def word_counts(sentence: str) -> dict[str, int]:
    """Count whitespace-separated words, listed in sorted order."""
    return dict(sorted(Counter(sentence.split()).items()))