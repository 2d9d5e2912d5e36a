"""Extend the basic Accessory class for Wyze devices."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Iterable
import logging
from typing import Any, Protocol

from homeassistant.util.decorator import Registry
from pyhap.accessory import Accessory
from pyhap.const import CATEGORY_OTHER

_LOGGER = logging.getLogger(__name__)

TYPES: Registry[str, type[WyzeAccessory]] = Registry()


class PropertyWriter(Protocol):
    """Anything that can push a single property write to a device."""

    async def async_set(self, pid: str, value: str) -> None: ...


def get_accessory(
    driver: Any,
    product_type: str,
    name: str,
    mac: str,
    writer: PropertyWriter,
    aid: int | None = None,
) -> WyzeAccessory | None:
    """Take a Wyze product type and return the matching accessory object."""
    if product_type not in TYPES:
        _LOGGER.debug(
            "Device %s (%s) has unsupported product type %s", name, mac, product_type
        )
        return None

    _LOGGER.debug('Add "%s" as "%s"', mac, product_type)
    return TYPES[product_type](driver, name, mac, writer, aid=aid)


class WyzeAccessory(Accessory):
    """Adapter class for Accessory backed by a Wyze device."""

    category = CATEGORY_OTHER

    def __init__(
        self,
        driver: Any,
        name: str,
        mac: str,
        writer: PropertyWriter,
        aid: int | None = None,
    ) -> None:
        """Initialize an Accessory object."""
        super().__init__(driver, name, aid=aid)
        self.mac = mac
        self.nickname = name
        self.writer = writer
        self._tasks: set[asyncio.Future] = set()

    async def async_set_buffered_property(self, pid: str, value: Any) -> None:
        """Queue a property write for the device and wait for it to settle."""
        await self.writer.async_set(pid, str(value))

    def update_characteristics(
        self, power: bool, property_list: Iterable[tuple[str, str]]
    ) -> None:
        """Project a device snapshot onto the HomeKit characteristics.

        Overridden by accessory types.
        """
        raise NotImplementedError

    def schedule_write(self, coro: Coroutine[Any, Any, None], description: str):
        """Run a write handler on the driver loop and log if it fails."""
        task = self.driver.async_add_job(coro)
        self._tasks.add(task)

        def _done(fut: asyncio.Future) -> None:
            self._tasks.discard(fut)
            if fut.cancelled():
                return
            if (err := fut.exception()) is not None:
                _LOGGER.error(
                    "%s: Failed to %s: %s", self.display_name, description, err
                )

        task.add_done_callback(_done)
        return task
