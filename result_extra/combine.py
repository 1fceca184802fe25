"""Applicative helpers and traversal of lists and pairs of Results.

Pair helpers take and return plain 2-tuples. List helpers accept any
iterable and always produce lists.
"""

from collections.abc import Callable, Iterable

from result_extra.result import Err, Ok, Result, map, map2


def singleton[A](a: A) -> Ok[A]:
    return Ok(a)


def and_map[A, B, E](ra: Result[A, E], rfn: Result[Callable[[A], B], E]) -> Result[B, E]:
    """Apply a wrapped function to a wrapped value.

    rfn is inspected first: if it is an Err it is returned without looking
    at ra, so when both are errors the function side wins.
    """
    match rfn:
        case Err():
            return rfn
        case Ok(fn):
            return map(fn, ra)


def combine[A, E](results: Iterable[Result[A, E]]) -> Result[list[A], E]:
    """Collect all payloads in order, or return the leftmost Err."""
    values: list[A] = []
    for r in results:
        match r:
            case Ok(value):
                values.append(value)
            case Err():
                return r
    return Ok(values)


def combine_map[A, B, E](
    f: Callable[[A], Result[B, E]], items: Iterable[A]
) -> Result[list[B], E]:
    """Map f over every item, then combine.

    f runs on all items before any error is picked.
    """
    return combine([f(item) for item in items])


def combine_first[A, C, E](pair: tuple[Result[A, E], C]) -> Result[tuple[A, C], E]:
    r, c = pair
    return map(lambda a: (a, c), r)


def combine_second[C, B, E](pair: tuple[C, Result[B, E]]) -> Result[tuple[C, B], E]:
    c, r = pair
    return map(lambda b: (c, b), r)


def combine_both[A, B, E](
    pair: tuple[Result[A, E], Result[B, E]],
) -> Result[tuple[A, B], E]:
    """Both sides must succeed. The left error wins when both fail."""
    ra, rb = pair
    return map2(lambda a, b: (a, b), ra, rb)


def combine_map_first[A, B, C, E](
    f: Callable[[A], Result[B, E]], pair: tuple[A, C]
) -> Result[tuple[B, C], E]:
    a, c = pair
    return combine_first((f(a), c))


def combine_map_second[C, A, B, E](
    f: Callable[[A], Result[B, E]], pair: tuple[C, A]
) -> Result[tuple[C, B], E]:
    c, a = pair
    return combine_second((c, f(a)))


def combine_map_both[A, B, C, D, E](
    f: Callable[[A], Result[C, E]],
    g: Callable[[B], Result[D, E]],
    pair: tuple[A, B],
) -> Result[tuple[C, D], E]:
    a, b = pair
    return combine_both((f(a), g(b)))


def partition[A, E](results: Iterable[Result[A, E]]) -> tuple[list[A], list[E]]:
    """Split into (successes, errors), each keeping the original order."""
    oks: list[A] = []
    errs: list[E] = []
    for r in results:
        match r:
            case Ok(value):
                oks.append(value)
            case Err(error):
                errs.append(error)
    return oks, errs


def filter[A, E](err: E, predicate: Callable[[A], bool], r: Result[A, E]) -> Result[A, E]:
    """Turn an Ok whose payload fails predicate into Err(err).

    Errors are returned unchanged and the predicate is not called for them.
    """
    match r:
        case Ok(value) if not predicate(value):
            return Err(err)
        case _:
            return r
