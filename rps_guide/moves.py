from enum import IntEnum
from typing import Dict, List


class Move(IntEnum):
    rock = 1
    paper = 2
    scissors = 3


class Outcome(IntEnum):
    lose = 0
    draw = 3
    win = 6


MOVES: List[Move] = list(Move)


def _shift(move: Move, offset: int) -> Move:
    # moves are cyclic; each one is beaten by its successor
    return MOVES[(MOVES.index(move) + offset) % len(MOVES)]


BEATEN_BY: Dict[Move, Move] = {m: _shift(m, 1) for m in Move}
BEATS: Dict[Move, Move] = {m: _shift(m, -1) for m in Move}


def value(move: Move) -> int:
    return int(move)


def what_beats(move: Move) -> Move:
    return BEATEN_BY[move]


def what_loses_to(move: Move) -> Move:
    return BEATS[move]


def outcome(first: Move, second: Move) -> Outcome:
    """Outcome of a round from the second player's point of view"""
    if first == second:
        return Outcome.draw
    elif what_beats(first) == second:
        return Outcome.win
    else:
        return Outcome.lose


def move_for(first: Move, desired: Outcome) -> Move:
    if desired == Outcome.draw:
        return first
    elif desired == Outcome.win:
        return what_beats(first)
    else:
        return what_loses_to(first)
