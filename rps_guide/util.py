import sys
from typing import Callable, Iterable, Iterator, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")
U = TypeVar("U")


# Iterators


def zip_with(f: Callable[[T], U], it: Iterable[T]) -> Iterator[Tuple[T, U]]:
    for i in it:
        yield i, f(i)


# IO


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
