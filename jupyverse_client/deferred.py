from __future__ import annotations

from typing import Any, Callable, Generator, Generic, TypeVar

import structlog
from anyio import Event

logger = structlog.get_logger()

T = TypeVar("T")

_PENDING = object()


class InvalidStateError(Exception):
    pass


class Deferred(Generic[T]):
    """A value that is settled at most once, by whoever holds the deferred.

    The first call to `resolve` or `reject` wins, later calls are no-ops. Any number of
    tasks can await the deferred, and callbacks can be added before or after it is
    settled: each one is called exactly once.
    """

    _event: Event
    _callbacks: list[Callable[[Deferred[T]], Any]]

    def __init__(self) -> None:
        self._event = Event()
        self._value: Any = _PENDING
        self._exception: BaseException | None = None
        self._callbacks = []

    @property
    def done(self) -> bool:
        return self._event.is_set()

    def resolve(self, value: T) -> bool:
        if self.done:
            return False
        self._value = value
        self._settle()
        return True

    def reject(self, exception: BaseException) -> bool:
        if self.done:
            return False
        self._exception = exception
        self._settle()
        return True

    def _settle(self) -> None:
        self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            # one failing observer doesn't keep the others from seeing the outcome
            try:
                callback(self)
            except Exception:
                logger.exception("Deferred callback failed", callback=repr(callback))

    def add_done_callback(self, callback: Callable[[Deferred[T]], Any]) -> None:
        if self.done:
            callback(self)
        else:
            self._callbacks.append(callback)

    def result(self) -> T:
        if not self.done:
            raise InvalidStateError("Deferred value is not settled yet")
        if self._exception is not None:
            raise self._exception
        return self._value

    def exception(self) -> BaseException | None:
        if not self.done:
            raise InvalidStateError("Deferred value is not settled yet")
        return self._exception

    async def wait(self) -> T:
        await self._event.wait()
        return self.result()

    def __await__(self) -> Generator[Any, None, T]:
        return self.wait().__await__()
