"""Process-wide access point to the record store.

All Django stores pass through ``StoreConnection.init()`` before touching the
database. The first caller opens the connection; callers arriving while that
attempt is in flight wait on the same attempt instead of opening their own.
A failed attempt is cleared so the next ``init()`` tries again.
"""

import functools
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, TypeVar

from django.db import DEFAULT_DB_ALIAS, DatabaseError, InterfaceError, OperationalError, connections

from events.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _connect_default(alias: str) -> None:
    connections[alias].ensure_connection()


class StoreConnection:
    """Lazily established, shared store connection with explicit lifecycle."""

    def __init__(
        self,
        alias: str = DEFAULT_DB_ALIAS,
        connector: Callable[[str], None] = _connect_default,
    ) -> None:
        self._alias = alias
        self._connector = connector
        self._lock = threading.Lock()
        self._attempt: Future | None = None

    @property
    def connected(self) -> bool:
        attempt = self._attempt
        return attempt is not None and attempt.done() and attempt.exception() is None

    def init(self) -> None:
        """Connect if not already connected or connecting.

        Raises:
            StoreUnavailableError: If the connection attempt failed.
        """
        with self._lock:
            attempt = self._attempt
            owner = attempt is None
            if owner:
                attempt = self._attempt = Future()

        if owner:
            self._run(attempt)
        attempt.result()

    def reset(self) -> None:
        """Forget the cached attempt so the next ``init()`` reconnects."""
        with self._lock:
            self._attempt = None

    def _run(self, attempt: Future) -> None:
        try:
            self._connector(self._alias)
        except DatabaseError as exc:
            logger.error(f"Store connection to '{self._alias}' failed: {exc}")
            self._discard(attempt)
            error = StoreUnavailableError()
            error.__cause__ = exc
            attempt.set_exception(error)
        except BaseException as exc:
            self._discard(attempt)
            attempt.set_exception(exc)
        else:
            logger.info(f"Store connection to '{self._alias}' established")
            attempt.set_result(None)

    def _discard(self, attempt: Future) -> None:
        with self._lock:
            if self._attempt is attempt:
                self._attempt = None


store_connection = StoreConnection()


def init() -> None:
    store_connection.init()


def reset() -> None:
    store_connection.reset()


def requires_store(method: F) -> F:
    """Run a store method behind ``init()``, mapping transport failures.

    The decorated object must expose the connection as ``self._connection``.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        self._connection.init()
        try:
            return method(self, *args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            logger.error(f"Store operation {method.__name__} failed: {exc}")
            self._connection.reset()
            raise StoreUnavailableError() from exc

    return wrapper  # type: ignore[return-value]
