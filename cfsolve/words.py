"""String puzzle solutions: letter counting, case handling and simple scanning."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable
from itertools import groupby

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LEADING_LETTERS = "TFN"
_TARGET_WORD = "hello"
_DANGER_RUN = 7
_FEMALE_VERDICT = "CHAT WITH HER!"
_MALE_VERDICT = "IGNORE HIM!"


def anton_or_danik(s: str) -> str:
    """Name the winner of the games in ``s``; a tie goes to Anton."""
    anton = s.count("A")
    danik = len(s) - anton
    return "Anton" if anton >= danik else "Danik"


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run the Bit++ statements starting from ``x = 0`` and return the final ``x``."""
    x = 0
    for statement in statements:
        if "+" in statement[:2]:
            x += 1
        else:
            x -= 1
    return x


def boy_or_girl(name: str) -> str:
    """Return the verdict based on the parity of distinct characters in ``name``."""
    distinct: dict[str, None] = {}
    for ch in name:
        distinct.setdefault(ch, None)
    if len(distinct) % 2 == 0:
        return _FEMALE_VERDICT
    return _MALE_VERDICT


def say_hello(s: str) -> bool:
    """Tell whether ``hello`` can be obtained from ``s`` by deleting characters."""
    remaining = iter(s)
    return all(letter in remaining for letter in _TARGET_WORD)


def swap_first_letters(a: str, b: str) -> tuple[str, str]:
    """Exchange the first characters of two words."""
    if not a or not b:
        raise ValueError("both words must be non-empty")
    return b[0] + a[1:], a[0] + b[1:]


def can_reduce_to(s: str, c: str) -> bool:
    """Tell whether ``s`` can be reduced to ``c`` by deleting adjacent pairs."""
    return c in s[::2]


def difficult_order(s: str) -> str:
    """Reorder the uppercase letters of ``s`` so that T, F and N come first, in that order."""
    bad = [ch for ch in s if ch not in string.ascii_uppercase]
    if bad:
        raise ValueError(f"expected uppercase Latin letters only, got {bad[0]!r}")
    counts = Counter(s)
    leading = "".join(letter * counts[letter] for letter in _LEADING_LETTERS)
    rest = "".join(
        letter * counts[letter]
        for letter in string.ascii_uppercase
        if letter not in _LEADING_LETTERS
    )
    return leading + rest


def sort_letters(s: str) -> str:
    """Return the characters of ``s`` in ascending order."""
    return "".join(sorted(s))


def zeroes_to_erase(s: str) -> int:
    """Count the zeroes lying between the first and the last ``1`` of ``s``."""
    first = s.find("1")
    if first == -1:
        return 0
    last = s.rfind("1")
    return s.count("0", first, last + 1)


def is_dangerous(s: str) -> bool:
    """Tell whether ``s`` holds seven or more equal characters in a row."""
    return any(sum(1 for _ in run) >= _DANGER_RUN for _, run in groupby(s))


def rearrange_summands(s: str) -> str:
    """Sort the summands of a ``+``-separated sum of single digits."""
    return "+".join(sorted(ch for ch in s if ch != "+"))


def is_lucky(ticket: str) -> bool:
    """Tell whether the first three digits of a six-digit ticket sum to the last three."""
    if len(ticket) != 6 or not all(ch in string.digits for ch in ticket):
        raise ValueError(f"expected six decimal digits, got {ticket!r}")
    first = sum(int(ch) for ch in ticket[:3])
    second = sum(int(ch) for ch in ticket[3:])
    return first == second


def compare_ignoring_case(a: str, b: str) -> int:
    """Compare two words ignoring ASCII case; return -1, 0 or 1."""
    left = a.translate(_TO_LOWER)
    right = b.translate(_TO_LOWER)
    return (left > right) - (left < right)


def skibidus_plural(s: str) -> str:
    """Turn a singular ending in ``us`` into its plural ending in ``i``."""
    if s.endswith("us"):
        return s[:-2] + "i"
    return s


def is_reverse(s: str, t: str) -> bool:
    """Tell whether ``t`` is ``s`` written backwards."""
    return s[::-1] == t


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters as first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def fix_case(word: str) -> str:
    """Convert the word to the case held by the majority of its letters; ties go lower."""
    lower = sum(1 for ch in word if ch in string.ascii_lowercase)
    upper = sum(1 for ch in word if ch in string.ascii_uppercase)
    if upper > lower:
        return word.translate(_TO_UPPER)
    return word.translate(_TO_LOWER)


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of ``word`` and leave the rest untouched."""
    if not word:
        return word
    return word[0].translate(_TO_UPPER) + word[1:]


def is_yes(s: str) -> bool:
    """Tell whether ``s`` spells ``yes`` in any mix of cases."""
    if len(s) < 3:
        return False
    return all(ch in pair for ch, pair in zip(s, ("yY", "eE", "sS")))


def can_have_good_pairs(n: int, k: int, s: str) -> bool:
    """Tell whether the binary string ``s`` can be rearranged to have exactly ``k`` good pairs."""
    zeros = s.count("0")
    ones = n - zeros
    half = n // 2
    return any(
        2 * x + (half - k) <= zeros and 2 * (k - x) + (half - k) <= ones
        for x in range(k + 1)
    )


def read_column(rows: Iterable[str]) -> str:
    """Read the lowercase letters of the grid rows from top to bottom."""
    return "".join(ch for row in rows for ch in row if ch in string.ascii_lowercase)