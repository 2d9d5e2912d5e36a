"""Data models shared by the Wyze HomeKit accessories."""

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Any, NamedTuple


class RemoteProperty(NamedTuple):
    """A single property as reported by the Wyze API."""

    pid: str
    value: str


class ColorWriteState(enum.Enum):
    """Coalescing state for HomeKit hue/saturation writes.

    IDLE  -- no half written color is pending.
    ARMED -- one of hue/saturation was written; the next write of either
             flushes the combined color to the device and returns to IDLE.
    """

    IDLE = "idle"
    ARMED = "armed"


@dataclass
class ColorCache:
    """Last known hue, saturation and brightness of a light."""

    hue: float | None = None
    saturation: float | None = None
    brightness: float | None = None


def parse_property_list(payload: Any) -> list[RemoteProperty]:
    """Extract the property list from a Wyze API response.

    Accepts the full response ({"data": {"property_list": [...]}}), the
    bare list of {"pid", "value"} dicts, or a sequence of (pid, value) pairs.
    """
    if isinstance(payload, dict):
        payload = (payload.get("data") or {}).get("property_list") or []

    properties = []
    for item in payload:
        if isinstance(item, dict):
            properties.append(RemoteProperty(item["pid"], str(item["value"])))
        else:
            pid, value = item
            properties.append(RemoteProperty(pid, str(value)))
    return properties
