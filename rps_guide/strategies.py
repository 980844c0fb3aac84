"""Two readings of a strategy guide line.

Every line holds two letters. The first is always the opponent's move. The second is
either our move (`Strategy.moves`, part 1) or the outcome we're asked to arrange
(`Strategy.outcomes`, part 2), in which case our move is worked out from the opponent's.
"""
from enum import Enum
from itertools import cycle
from typing import Callable, Dict, Mapping, NamedTuple, Optional, Tuple, TypeVar

from .moves import Move, Outcome, move_for

T = TypeVar("T")

MOVE_MAPPING: Dict[str, Move] = dict(zip("ABCXYZ", cycle(Move)))
OUTCOME_MAPPING: Dict[str, Outcome] = dict(zip("XYZ", Outcome))


class MalformedLine(ValueError):
    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(line, reason, line_number)

    def at(self, line_number: int) -> "MalformedLine":
        return type(self)(self.line, self.reason, line_number)

    def __str__(self):
        where = "" if self.line_number is None else f" on line {self.line_number}"
        return f"malformed line{where}: {self.line.rstrip()!r} ({self.reason})"


class Round(NamedTuple):
    first: Move
    second: Move


def split_line(line: str) -> Tuple[str, str]:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedLine(line, f"expected 2 tokens, got {len(tokens)}")
    first, second = tokens
    return first, second


def lookup(table: Mapping[str, T], token: str, line: str) -> T:
    try:
        return table[token]
    except KeyError:
        raise MalformedLine(line, f"unrecognized token {token!r}") from None


# Problem 1


def parse_moves(line: str) -> Round:
    first, second = split_line(line)
    return Round(lookup(MOVE_MAPPING, first, line), lookup(MOVE_MAPPING, second, line))


# Problem 2


def parse_outcomes(line: str) -> Round:
    first, desired = split_line(line)
    their_move = lookup(MOVE_MAPPING, first, line)
    outcome_ = lookup(OUTCOME_MAPPING, desired, line)
    return Round(their_move, move_for(their_move, outcome_))


class Strategy(Enum):
    moves = 1
    outcomes = 2

    @property
    def part(self) -> int:
        return self.value

    def parse_line(self, line: str) -> Round:
        return PARSERS[self](line)


PARSERS: Dict[Strategy, Callable[[str], Round]] = {
    Strategy.moves: parse_moves,
    Strategy.outcomes: parse_outcomes,
}
