"""Result type for flat error handling (like Rust's Result<T, E>)."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok[T]:
    """Success result."""

    value: T


@dataclass(frozen=True)
class Err[E]:
    """Error result."""

    error: E


Result = Ok[T] | Err[E]


def map[A, B, X](f: Callable[[A], B], r: Result[A, X]) -> Result[B, X]:
    """Apply f to the success payload, pass errors through."""
    match r:
        case Ok(value):
            return Ok(f(value))
        case Err():
            return r


def map2[A, B, C, X](
    f: Callable[[A, B], C], ra: Result[A, X], rb: Result[B, X]
) -> Result[C, X]:
    """Combine two results with f. The first Err in argument order wins."""
    match ra, rb:
        case Err(), _:
            return ra
        case _, Err():
            return rb
        case Ok(a), Ok(b):
            return Ok(f(a, b))


def map_error[A, X, Y](f: Callable[[X], Y], r: Result[A, X]) -> Result[A, Y]:
    """Apply f to the error payload, pass successes through."""
    match r:
        case Ok():
            return r
        case Err(error):
            return Err(f(error))


def and_then[A, B, X](f: Callable[[A], Result[B, X]], r: Result[A, X]) -> Result[B, X]:
    """Chain a fallible computation onto a success."""
    match r:
        case Ok(value):
            return f(value)
        case Err():
            return r


def with_default[A, X](default: A, r: Result[A, X]) -> A:
    match r:
        case Ok(value):
            return value
        case Err():
            return default


def to_optional[A, X](r: Result[A, X]) -> A | None:
    match r:
        case Ok(value):
            return value
        case Err():
            return None
