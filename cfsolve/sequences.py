"""Puzzle solutions over lists, grids and generated text lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_CENTER = 3
_COLOR_PIXELS = frozenset("CMY")
_HORSESHOE_COUNT = 4
_EQUAL_SUBSEQUENCE_ANSWERS = {
    (4, 2): "1010",
    (5, 3): "10110",
    (5, 5): "11111",
    (6, 2): "100010",
    (1, 1): "1",
}


def lever_iterations(a: Sequence[int], b: Sequence[int]) -> int:
    """Return how many lever iterations run before ``a`` can no longer be lowered toward ``b``."""
    if len(a) != len(b):
        raise ValueError(f"sequences differ in length: {len(a)} and {len(b)}")
    return sum(max(x - y, 0) for x, y in zip(a, b)) + 1


def advancing_count(scores: Sequence[int], k: int) -> int:
    """Count participants with a positive score at least that of the ``k``-th place."""
    if not 1 <= k <= len(scores):
        raise ValueError(f"place {k} is outside 1..{len(scores)}")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def can_pass_alarm(doors: Sequence[int], x: int) -> bool:
    """Tell whether the button held for ``x`` seconds opens every closed door.

    The button is pressed at the first closed door; every later closed door must
    fall within the ``x`` seconds it lasts. With no closed door the answer is no.
    """
    first = next((i for i, door in enumerate(doors) if door == 1), None)
    if first is None:
        return False
    return all(door != 1 for door in doors[first + x:])


def can_be_strictly_increasing(values: Iterable[int]) -> bool:
    """Tell whether the values can be reordered into a strictly increasing sequence."""
    items = list(values)
    return len(set(items)) == len(items)


def can_win_tournament(strengths: Sequence[int], j: int, k: int) -> bool:
    """Tell whether player ``j`` can be among the last ``k`` players standing."""
    if not 1 <= j <= len(strengths):
        raise ValueError(f"player {j} is outside 1..{len(strengths)}")
    if k > 1:
        return True
    return strengths[j - 1] == max(strengths)


def horseshoes_to_buy(colors: Iterable[int]) -> int:
    """Return how many horseshoes must be bought so that all four colors differ."""
    items = list(colors)
    if len(items) != _HORSESHOE_COUNT:
        raise ValueError(f"expected {_HORSESHOE_COUNT} colors, got {len(items)}")
    return _HORSESHOE_COUNT - len(set(items))


def team_problem_count(votes: Iterable[Iterable[int]]) -> int:
    """Count the problems for which at least two of the three friends are sure."""
    return sum(1 for vote in votes if sum(vote) > 1)


def beautiful_matrix_moves(matrix: Iterable[Iterable[int]]) -> int:
    """Return the swaps needed to move the single ``1`` to the centre of a 5x5 matrix."""
    position = None
    for row, cells in enumerate(matrix, start=1):
        for col, cell in enumerate(cells, start=1):
            if cell == 1:
                position = (row, col)
    if position is None:
        raise ValueError("matrix holds no 1")
    row, col = position
    return abs(row - _CENTER) + abs(col - _CENTER)


def is_colored(pixels: Iterable[Iterable[str]]) -> bool:
    """Tell whether any pixel is cyan, magenta or yellow."""
    return any(pixel in _COLOR_PIXELS for row in pixels for pixel in row)


def pyramid(rows: int = 5) -> list[str]:
    """Return the lines of a centred star pyramid with ``rows`` rows."""
    return ["  " * (rows - i) + "* " * (2 * i - 1) for i in range(1, rows + 1)]


def hulk_feelings(n: int) -> list[str]:
    """Return Hulk's feelings of ``n`` layers, one layer per line."""
    lines = []
    for i in range(1, n + 1):
        feeling = "I hate" if i % 2 == 1 else "I love"
        lines.append(feeling + (" it" if i == n else " that "))
    return lines


def equal_subsequence_string(n: int, k: int) -> str:
    """Return a binary string of length ``n`` holding ``k`` ones."""
    if not 0 <= k <= n:
        raise ValueError(f"cannot place {k} ones in a string of length {n}")
    known = _EQUAL_SUBSEQUENCE_ANSWERS.get((n, k))
    if known is not None:
        return known
    return "1" * k + "0" * (n - k)