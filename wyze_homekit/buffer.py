"""Buffer rapid property writes into a single device command."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import logging

from .const import BUFFER_WINDOW

_LOGGER = logging.getLogger(__name__)

SendCallable = Callable[[dict[str, str]], Awaitable[None]]


class PropertyWriteBuffer:
    """Coalesce property writes issued within a short window.

    The first write starts the window. Every write that arrives before the
    window closes joins the same batch; a later write to the same property
    replaces the earlier value. When the window closes the batch is handed to
    ``send`` in one call and every writer of the batch receives its outcome.
    """

    def __init__(self, send: SendCallable, delay: float = BUFFER_WINDOW) -> None:
        self.delay = delay
        self._send = send
        self._pending: dict[str, str] = {}
        self._future: asyncio.Future | None = None
        self._task: asyncio.Task | None = None

    async def async_set(self, pid: str, value: str) -> None:
        """Queue a property write and wait until its batch has been sent."""
        loop = asyncio.get_running_loop()
        self._pending[pid] = value
        if self._future is None:
            self._future = loop.create_future()
            self._task = loop.create_task(self._async_flush_later(self._future))
        future = self._future
        await future

    async def _async_flush_later(self, future: asyncio.Future) -> None:
        try:
            await asyncio.sleep(self.delay)
            properties = self._pending
            self._pending = {}
            self._future = None
            self._task = None

            _LOGGER.debug("Sending buffered properties: %s", properties)
            try:
                await self._send(properties)
            except Exception as err:  # noqa: BLE001
                _LOGGER.debug("Buffered write of %s failed: %s", properties, err)
                future.set_exception(err)
            else:
                future.set_result(None)
        finally:
            # Settle the batch even when cancelled
            if self._future is future:
                self._pending = {}
                self._future = None
                self._task = None
            if not future.done():
                future.cancel()
