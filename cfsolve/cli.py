"""Command-line entry point that answers puzzle input read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from itertools import chain, islice

from cfsolve.arithmetic import digit_sum, square_year
from cfsolve.sequences import is_colored, pyramid, team_problem_count
from cfsolve.words import abbreviate, compare_ignoring_case, read_column

_PAPER_ROWS = 8


class _Tokens:
    """Whitespace-separated input read one token or one character at a time."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def chars(self, count: int) -> list[str]:
        """Read ``count`` non-blank characters, ignoring how they are spaced."""
        taken = list(islice(chain.from_iterable(self._items), count))
        if len(taken) < count:
            raise ValueError("unexpected end of input")
        return taken


def _ab_again(tokens: _Tokens) -> str:
    cases = tokens.integer()
    return "".join(f"{digit_sum(tokens.integer())}\n" for _ in range(cases))


def _photos(tokens: _Tokens) -> str:
    rows, cols = tokens.integer(), tokens.integer()
    pixels = tokens.chars(rows * cols)
    grid = [pixels[start:start + cols] for start in range(0, len(pixels), cols)] if cols else []
    return "#" + ("Color" if is_colored(grid) else "Black&White")


def _square_year(tokens: _Tokens) -> str:
    cases = tokens.integer()
    lines = []
    for _ in range(cases):
        found = square_year(tokens.word())
        lines.append("-1" if found is None else f"{found[0]} {found[1]}")
    return "".join(f"{line}\n" for line in lines)


def _team(tokens: _Tokens) -> str:
    problems = tokens.integer()
    votes = [
        (tokens.integer(), tokens.integer(), tokens.integer())
        for _ in range(problems)
    ]
    return str(team_problem_count(votes))


def _watermelon(tokens: _Tokens) -> str:
    return "".join(f"{line}\n" for line in pyramid())


def _long_words(tokens: _Tokens) -> str:
    count = tokens.integer()
    return "".join(f"{abbreviate(tokens.word())}\n" for _ in range(count))


def _petya(tokens: _Tokens) -> str:
    first, second = tokens.word(), tokens.word()
    return f"{compare_ignoring_case(first, second)}\n"


def _word_on_paper(tokens: _Tokens) -> str:
    cases = tokens.integer()
    return "".join(
        f"{read_column([tokens.word() for _ in range(_PAPER_ROWS)])}\n"
        for _ in range(cases)
    )


_COMMANDS: dict[str, tuple[Callable[[_Tokens], str], str]] = {
    "ab-again": (_ab_again, "sum the digits of two-digit numbers"),
    "photos": (_photos, "tell a colour photo from a black-and-white one"),
    "square-year": (_square_year, "split years into a and b with (a + b) squared"),
    "team": (_team, "count problems at least two friends are sure of"),
    "watermelon": (_watermelon, "print a star pyramid"),
    "long-words": (_long_words, "abbreviate words longer than ten letters"),
    "petya": (_petya, "compare two words ignoring case"),
    "word-on-paper": (_word_on_paper, "read the word written down a column"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Solve a puzzle whose input is read from standard input.",
    )
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen puzzle on standard input and print its answer."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        output = handler(_Tokens(sys.stdin.read()))
    except ValueError as exc:
        sys.stderr.write(f"cfsolve: {exc}\n")
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())