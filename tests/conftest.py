"""Fixtures for the Wyze HomeKit tests."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from pyhap.loader import get_loader

from wyze_homekit.type_lights import MeshLight


@pytest.fixture
def hk_driver():
    """Return a driver double backed by the real HAP loader."""
    driver = MagicMock()
    driver.loader = get_loader()
    return driver


@pytest.fixture
def writer():
    """Return a property writer that succeeds."""
    writer = MagicMock()
    writer.async_set = AsyncMock(return_value=None)
    return writer


@pytest.fixture
def light(hk_driver, writer):
    """Return a MeshLight bound to the driver double."""
    return MeshLight(hk_driver, "Bedroom", "2CAA8E000001", writer, aid=2)
