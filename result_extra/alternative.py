"""Choosing between two Results, biased towards success.

or_ and or_lazy prefer their first argument. or_else and or_else_lazy take
the fallback first, so ``partial(or_else, fallback)`` can sit in a pipeline
after the value it guards.
"""

from collections.abc import Callable

from result_extra.result import Err, Ok, Result


def or_[A, E](ra: Result[A, E], rb: Result[A, E]) -> Result[A, E]:
    """First success wins; if both fail, the second error wins."""
    match ra:
        case Ok():
            return ra
        case Err():
            return rb


def or_lazy[A, E](ra: Result[A, E], frb: Callable[[], Result[A, E]]) -> Result[A, E]:
    """Like or_, but frb is only called when ra is an Err."""
    match ra:
        case Ok():
            return ra
        case Err():
            return frb()


def or_else[A, E](ra: Result[A, E], rb: Result[A, E]) -> Result[A, E]:
    """Return rb if it succeeded, otherwise the fallback ra."""
    return or_(rb, ra)


def or_else_lazy[A, E](fra: Callable[[], Result[A, E]], rb: Result[A, E]) -> Result[A, E]:
    """Like or_else, but fra is only called when rb is an Err."""
    return or_lazy(rb, fra)
