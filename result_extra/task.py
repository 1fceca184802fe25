"""Bridge from Result to an already-completed asyncio future."""

import asyncio

from result_extra.logging_config import get_logger
from result_extra.result import Err, Ok, Result

log = get_logger(__name__)


class TaskRejected(Exception):
    """Raised by a future built from an Err whose payload is not an exception."""

    def __init__(self, error: object):
        super().__init__(f"Err({error!r})")
        self.error = error


def to_task[A, E](
    r: Result[A, E], *, loop: asyncio.AbstractEventLoop | None = None
) -> asyncio.Future[A]:
    """Return a future that is already resolved or rejected.

    Args:
        r: Result to convert.
        loop: Loop that owns the future (default: the running loop).

    Returns:
        Future holding the Ok payload, or failing with the Err payload. Exception
        payloads are set directly, anything else is wrapped in TaskRejected.
    """
    loop = loop or asyncio.get_running_loop()
    future: asyncio.Future[A] = loop.create_future()

    match r:
        case Ok(value):
            future.set_result(value)
        case Err(error):
            # Futures refuse StopIteration
            if isinstance(error, Exception) and not isinstance(error, StopIteration):
                exc: Exception = error
            else:
                exc = TaskRejected(error)
            log.debug("future_rejected", error=repr(error))
            future.set_exception(exc)

    return future
