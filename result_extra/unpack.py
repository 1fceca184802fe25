"""Inspecting and taking apart a single Result."""

from collections.abc import Callable

from result_extra.result import Err, Ok, Result


def is_ok(r: Result) -> bool:
    match r:
        case Ok():
            return True
        case Err():
            return False


def is_err(r: Result) -> bool:
    match r:
        case Ok():
            return False
        case Err():
            return True


def extract[A, E](f: Callable[[E], A], r: Result[A, E]) -> A:
    """Return the success payload, or turn the error into one with f."""
    match r:
        case Ok(value):
            return value
        case Err(error):
            return f(error)


def unwrap[A, B, E](default: B, f: Callable[[A], B], r: Result[A, E]) -> B:
    """Return f(value) for Ok, otherwise the plain default.

    The error payload is discarded, never passed anywhere.
    """
    match r:
        case Ok(value):
            return f(value)
        case Err():
            return default


def unpack[A, B, E](
    err_func: Callable[[E], B], ok_func: Callable[[A], B], r: Result[A, E]
) -> B:
    """Eliminate a Result with one function per variant."""
    match r:
        case Ok(value):
            return ok_func(value)
        case Err(error):
            return err_func(error)


def map_both[A, B, E, F](
    err_func: Callable[[E], F], ok_func: Callable[[A], B], r: Result[A, E]
) -> Result[B, F]:
    """Map whichever payload is present, keeping the variant."""
    match r:
        case Ok(value):
            return Ok(ok_func(value))
        case Err(error):
            return Err(err_func(error))


def error[A, E](r: Result[A, E]) -> E | None:
    """Return the error payload, or None for Ok.

    Err(None) also gives None, so use is_err when the payload may be None.
    """
    match r:
        case Ok():
            return None
        case Err(err):
            return err


def merge[A](r: Result[A, A]) -> A:
    """Return whichever payload is present.

    Only meaningful when both variants carry the same type.
    """
    match r:
        case Ok(value):
            return value
        case Err(err):
            return err


def join[A, E](r: Result[Result[A, E], E]) -> Result[A, E]:
    """Flatten a Result nested in Ok. An outer Err is returned as is."""
    match r:
        case Ok(inner):
            return inner
        case Err():
            return r
