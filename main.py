#! /usr/bin/env python
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Dict, Iterable, Optional, Tuple

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from rps_guide import scoring
from rps_guide.strategies import MalformedLine, Round, Strategy
from rps_guide.util import set_verbose, zip_with

INPUT_PATH = Path("inputs/2022/02.txt")


def print_solution(solution):
    print(solution)


def print_rounds(rounds: Iterable[Tuple[Round, int]]):
    for (first, second), score in rounds:
        print(f"{first.name} {second.name} {score}")


def get_input(path: Optional[str] = None) -> IO[str]:
    # an explicit path always wins over piped stdin
    if path is not None:
        return open(path)
    return open(INPUT_PATH) if sys.stdin.isatty() else sys.stdin


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
    exit_codes={Exception: 1, FileNotFoundError: 2, MalformedLine: 3},
)


@cli.definition
class RPSGuide:
    """Score a Rock-Paper-Scissors strategy guide under both readings of its second column"""

    @cli_spec.output_handler(print_solution)
    def run(self, *, path: Optional[str] = None, log_rounds: bool = False) -> str:
        """Score the strategy guide both ways and print one result line per part. The default
        input is inputs/2022/02.txt, but input will be read from stdin if input is piped there
        and no --path is given.

        :param path: location of the strategy guide, if not the default
        :param log_rounds: log every resolved round to stderr
        """
        set_verbose(log_rounds)
        with get_input(path) as input_:
            print("Scoring strategy guide...", file=sys.stderr)
            tic = perf_counter_ns()
            results: Dict[int, int] = scoring.run(input_)
            toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return scoring.format_results(results)

    @cli_spec.output_handler(print_solution)
    def score(
        self, *, strategy: Strategy, path: Optional[str] = None, log_rounds: bool = False
    ) -> int:
        """Score the strategy guide under a single reading of its second column

        :param strategy: `moves` to read the second letter as our move (part 1),
          `outcomes` to read it as the outcome to arrange (part 2)
        :param path: location of the strategy guide, if not the default
        :param log_rounds: log every resolved round to stderr
        """
        set_verbose(log_rounds)
        with get_input(path) as input_:
            return scoring.total_score(scoring.read_lines(input_), strategy)

    @cli_spec.output_handler(print_rounds)
    def rounds(self, *, strategy: Strategy, path: Optional[str] = None):
        """Print each resolved round, one per line: the opponent's move, our move, and the score

        :param strategy: `moves` or `outcomes`; see the `score` command
        :param path: location of the strategy guide, if not the default
        """
        with get_input(path) as input_:
            lines = scoring.read_lines(input_)
        return list(zip_with(scoring.round_score, scoring.parse_rounds(lines, strategy)))

    def test(self):
        """Run the built-in checks for the scoring rules"""
        scoring.test()
        print("Tests pass!")

    def info(self):
        """Print the scoring rules and the signature of the scoring entry point"""
        print("Strategy guide scoring info:")
        if scoring.__doc__:
            print(scoring.__doc__, end="\n\n")
        print("Signature:")
        print(signature(scoring.run))

    def input(self, *, path: Optional[str] = None):
        """Print the strategy guide text to stdout"""
        with open(INPUT_PATH if path is None else path, "r") as f:
            for line in f:
                print(line, file=sys.stdout, end="")


if __name__ == "__main__":
    cli.run()
