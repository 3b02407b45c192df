"""Persistence layer errors."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError

from engage.domain.error import UnavailableError

P = ParamSpec("P")
R = TypeVar("R")


def store_unavailable_on_connection_error(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Translate connection-level database failures into UnavailableError.

    Constraint violations and programming errors are left untouched.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (OperationalError, InterfaceError, ConnectionError) as e:
            logfire.error(
                "Engagement store unavailable",
                operation=func.__qualname__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise UnavailableError("Engagement store is unavailable") from e

    return wrapper
