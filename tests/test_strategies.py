import pytest

from rps_guide.moves import Move
from rps_guide.strategies import MalformedLine, Round, Strategy, parse_moves, parse_outcomes

R, P, S = Move.rock, Move.paper, Move.scissors


@pytest.mark.parametrize(
    "line, expected",
    [
        ("A Y", Round(R, P)),
        ("B X", Round(P, R)),
        ("C Z", Round(S, S)),
        ("X A\n", Round(R, R)),
        ("  B   Z  ", Round(P, S)),
    ],
)
def test_parse_moves(line: str, expected: Round):
    assert parse_moves(line) == expected
    assert Strategy.moves.parse_line(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("A Y", Round(R, R)),
        ("B X", Round(P, R)),
        ("C Z", Round(S, R)),
        ("A X", Round(R, S)),
        ("A Z", Round(R, P)),
        ("C X\n", Round(S, P)),
        ("X Z", Round(R, P)),
        ("Z X", Round(S, P)),
    ],
)
def test_parse_outcomes(line: str, expected: Round):
    assert parse_outcomes(line) == expected
    assert Strategy.outcomes.parse_line(line) == expected


@pytest.mark.parametrize("strategy", list(Strategy))
@pytest.mark.parametrize("line", ["A", "A Q", "Q Y", "A Y Z", "", "   ", "AY", "a y"])
def test_malformed_line(strategy: Strategy, line: str):
    with pytest.raises(MalformedLine):
        strategy.parse_line(line)


def test_outcome_letter_is_not_a_move():
    with pytest.raises(MalformedLine, match="unrecognized token 'C'"):
        parse_outcomes("A C")


def test_malformed_line_message():
    error = MalformedLine("A Q\n", "unrecognized token 'Q'").at(7)
    assert error.line_number == 7
    assert isinstance(error, ValueError)
    assert str(error) == "malformed line on line 7: 'A Q' (unrecognized token 'Q')"


def test_strategy_parts():
    assert [s.part for s in Strategy] == [1, 2]
