"""Score a Rock-Paper-Scissors strategy guide.

Each round scores the value of our move (rock 1, paper 2, scissors 3) plus the value of
its outcome (lose 0, draw 3, win 6). The guide is read into memory once and scored twice,
first reading the second letter as our move, then as the outcome we should arrange.
Any malformed line aborts the whole run; no partial totals are reported.
"""
from typing import IO, Dict, Iterable, Iterator, List

from .moves import outcome, value
from .strategies import MalformedLine, Round, Strategy
from .util import print_


def outcome_score(round_: Round) -> int:
    return int(outcome(round_.first, round_.second))


def round_score(round_: Round) -> int:
    return value(round_.second) + outcome_score(round_)


def parse_rounds(lines: Iterable[str], strategy: Strategy) -> Iterator[Round]:
    for line_number, line in enumerate(lines, 1):
        try:
            round_ = strategy.parse_line(line)
        except MalformedLine as e:
            raise e.at(line_number) from None
        print_(f"{strategy.name} line {line_number}: {round_.first.name} vs {round_.second.name}")
        yield round_


def total_score(lines: Iterable[str], strategy: Strategy) -> int:
    return sum(map(round_score, parse_rounds(lines, strategy)))


def read_lines(input_: IO[str]) -> List[str]:
    return input_.read().splitlines()


def run(input_: IO[str]) -> Dict[int, int]:
    lines = read_lines(input_)
    return {strategy.part: total_score(lines, strategy) for strategy in Strategy}


def format_results(results: Dict[int, int]) -> str:
    return "\n".join(f"Part {part} result: {total}" for part, total in sorted(results.items()))


def test():
    import io

    from .moves import Move

    input_ = "A Y\nB X\nC Z\n"
    assert run(io.StringIO(input_)) == {1: 15, 2: 12}
    assert list(parse_rounds(input_.splitlines(), Strategy.outcomes)) == [
        Round(Move.rock, Move.rock),
        Round(Move.paper, Move.rock),
        Round(Move.scissors, Move.rock),
    ]
    for bad in ["A", "A Q", "A Y Z", ""]:
        try:
            total_score([bad], Strategy.moves)
        except MalformedLine:
            pass
        else:
            raise AssertionError(f"{bad!r} should not parse")
