"""Write-once async cache cell with single-flight semantics."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Lazily computes a value once and shares the in-flight computation.

    Concurrent callers arriving while the first computation runs await the
    same task. A successful result is kept for the lifetime of the cell.
    A failure is handed to every waiter and not kept, so the next call starts
    a fresh computation. Cancelling a waiter does not cancel the computation.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], name: str = "") -> None:
        self._factory = factory
        self.name = name
        self._pending: Optional[asyncio.Future[T]] = None
        self._value: Optional[T] = None
        self._resolved = False

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def in_flight(self) -> bool:
        return self._pending is not None

    async def _run(self) -> T:
        try:
            value = await self._factory()
        except BaseException:
            # Failed attempts are not cached, even when no waiter is left to see them
            self._pending = None
            raise
        self._value = value
        self._resolved = True
        self._pending = None
        return value

    @staticmethod
    def _consume(future: "asyncio.Future[T]") -> None:
        if not future.cancelled() and future.exception() is not None:
            logger.debug("Cache cell computation failed: %s", future.exception())

    async def get(self) -> T:
        if self._resolved:
            return self._value  # type: ignore[return-value]

        if self._pending is None:
            logger.debug("Computing %s", self.name or "cache cell")
            self._pending = asyncio.ensure_future(self._run())
            self._pending.add_done_callback(self._consume)

        return await asyncio.shield(self._pending)
