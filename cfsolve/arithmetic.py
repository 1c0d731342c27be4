"""Number-based puzzle solutions: digits, divisibility, counting and small searches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FIB_SEARCH_RANGE = range(-199, 200)
_SQUARE_SEARCH_RANGE = range(0, 101)


def digit_sum(n: int) -> int:
    """Return the sum of the two digits of a two-digit number."""
    tens, ones = divmod(n, 10)
    return tens + ones


def last_two_digits_of_power_of_five(n: int) -> str:
    """Return the last two digits of 5 raised to ``n`` as printed text."""
    return str(n) if n < 2 else "25"


def years_to_outgrow(a: int, b: int) -> int:
    """Count the years until ``a`` (tripling yearly) exceeds ``b`` (doubling yearly)."""
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def moves_to_divisible(a: int, b: int) -> int:
    """Return the fewest increments of ``a`` that make it divisible by ``b``."""
    remainder = a % b
    return 0 if remainder == 0 else b - remainder


def domino_count(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an ``m`` by ``n`` board."""
    return (m * n) // 2


def easy_problem_pairs(n: int) -> int:
    """Return the number of ordered positive pairs ``(a, b)`` with ``a + b == n``."""
    return n - 1


def max_fibonacciness(a1: int, a2: int, a4: int, a5: int) -> int:
    """Return the best count of Fibonacci relations over every choice of the third term."""

    def relations(a3: int) -> int:
        return sum((a3 == a1 + a2, a4 == a2 + a3, a5 == a3 + a4))

    return max(0, max(relations(a3) for a3 in _FIB_SEARCH_RANGE))


def fizzbuzz_remixed(n: int) -> int:
    """Count the integers ``0..n`` whose remainders modulo 3 and 5 agree."""
    full_cycles, rest = divmod(n, 15)
    return full_cycles * 3 + sum(1 for i in range(rest + 1) if i % 3 == i % 5)


def kefir_liters(n: int, a: int, b: int, c: int) -> int:
    """Return the most liters of kefir affordable with ``n`` roubles.

    A plastic bottle costs ``a``; a glass bottle costs ``b`` and returns ``c`` when handed back.
    """
    refill = b - c
    if refill >= a or n < b:
        return n // a
    n -= b
    liters = 1
    more, n = divmod(n, refill)
    liters += more
    n += c
    return liters + n // a


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count the dragons among ``1..d`` whose number is a multiple of any of ``k, l, m, n``."""
    divisors = (k, l, m, n)
    if 1 in divisors:
        return d
    return sum(1 for i in range(1, d + 1) if any(i % x == 0 for x in divisors))


def toasts_per_friend(
    friends: int,
    bottles: int,
    bottle_ml: int,
    limes: int,
    slices: int,
    salt: int,
    drink_ml: int,
    salt_per_toast: int,
) -> int:
    """Return how many toasts each friend can make with the shared supplies."""
    drink_toasts = bottles * bottle_ml // drink_ml
    lime_toasts = limes * slices
    salt_toasts = salt // salt_per_toast
    return min(drink_toasts, lime_toasts, salt_toasts) // friends


def banana_debt(cost: int, money: int, count: int) -> int:
    """Return how much must be borrowed to buy ``count`` bananas priced ``cost * i``."""
    total = cost * count * (count + 1) // 2
    return max(total - money, 0)


def square_year(year: str) -> tuple[int, int] | None:
    """Find non-negative ``a, b`` with ``(a + b) ** 2`` equal to a four-digit year.

    The split of the year into its two halves is tried first; otherwise the first
    pair in ascending order is returned. ``None`` means no pair exists.
    """
    if len(year) != 4 or not year.isdigit() or not year.isascii():
        raise ValueError(f"expected four decimal digits, got {year!r}")
    value = int(year)
    a, b = int(year[:2]), int(year[2:])
    if (a + b) ** 2 == value:
        return a, b
    return next(
        (
            (i, j)
            for i in _SQUARE_SEARCH_RANGE
            for j in _SQUARE_SEARCH_RANGE
            if (i + j) ** 2 == value
        ),
        None,
    )


def is_sum_of_others(a: int, b: int, c: int) -> bool:
    """Tell whether one of the three numbers equals the sum of the other two."""
    return a == b + c or b == a + c or c == a + b


def can_reach_ten(a: int, b: int, c: int) -> bool:
    """Tell whether some two of the three digits add up to at least ten."""
    return a + b >= 10 or a + c >= 10 or b + c >= 10


def kth_not_divisible(n: int, k: int) -> int:
    """Return the ``k``-th positive integer that is not divisible by ``n``."""
    return k + (k - 1) // (n - 1)


def is_ideal_generator(k: int) -> bool:
    """Tell whether ``k`` is an ideal generator, which holds exactly for odd ``k``."""
    return k == 1 or k % 2 == 1


def greedy_grid_exists(n: int, m: int) -> bool:
    """Tell whether an ``n`` by ``m`` grid exists on which the greedy path is not optimal."""
    if n == 1 or m == 1:
        return False
    return not (n == 2 and m == 2)


def smallest_digit(n: int) -> int:
    """Return the smallest decimal digit of a positive integer."""
    if n <= 0:
        raise ValueError(f"expected a positive integer, got {n}")
    return min(int(digit) for digit in str(n))


def restore_numbers(values: Iterable[int]) -> tuple[int, int, int]:
    """Recover ``a, b, c`` from the four values ``a+b, a+c, b+c, a+b+c`` in any order."""
    ordered: Sequence[int] = sorted(values)
    if len(ordered) != 4:
        raise ValueError(f"expected four values, got {len(ordered)}")
    total = ordered[3]
    return total - ordered[2], total - ordered[1], total - ordered[0]


def _has_distinct_digits(year: int) -> bool:
    digits = f"{year % 10000:04d}"
    return len(set(digits)) == len(digits)


def next_beautiful_year(year: int) -> int:
    """Return the first year after ``year`` whose four digits are all different."""
    year += 1
    while not _has_distinct_digits(year):
        year += 1
    return year


def rectangles_square_verdict(l1: int, b1: int, l2: int, b2: int, l3: int, b3: int) -> str:
    """Return the verdict on whether three rectangles can tile a square."""
    if l1 + l2 + l3 == b1 and b1 == b2 and b2 == b3:
        return "YES"
    if l2 + l3 == l1 and b2 == b3 and b1 + b2 == l1:
        return "YES"
    if b1 + b2 + b3 == l1 and l1 == l2 and l2 == l3:
        return "Yes"
    if b2 + b3 == b1 and l2 == l3 and l1 + l2 == b1:
        return "YES"
    return "NO"