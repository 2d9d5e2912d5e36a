"""Collection of useful functions for the Wyze HomeKit accessories."""

from __future__ import annotations

from homeassistant.util.color import (
    color_hsv_to_RGB,
    color_RGB_to_hsv,
    color_rgb_to_hex,
    rgb_hex_to_rgb_list,
)

from .const import (
    HOMEKIT_COLOR_TEMP_MAX,
    HOMEKIT_COLOR_TEMP_MIN,
    POWER_OFF,
    POWER_ON,
    WYZE_COLOR_TEMP_MAX,
    WYZE_COLOR_TEMP_MIN,
)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Limit value to the closed range [min_value, max_value]."""
    return max(min_value, min(max_value, value))


def range_to_float(value: float, min_value: float, max_value: float) -> float:
    """Normalize value within [min_value, max_value] to a float in [0, 1]."""
    return (value - min_value) / (max_value - min_value)


def float_to_range(value: float, min_value: float, max_value: float) -> int:
    """Project a normalized float back onto [min_value, max_value]."""
    return round(value * (max_value - min_value) + min_value)


def remap(
    value: float,
    source_min: float,
    source_max: float,
    target_min: float,
    target_max: float,
) -> int:
    """Linearly map value from the source range onto the target range.

    The value is clamped to the source range first, so the result always
    lies within the target range.
    """
    value = clamp(value, source_min, source_max)
    return float_to_range(
        range_to_float(value, source_min, source_max), target_min, target_max
    )


def device_to_homekit_color_temp(value: float) -> int:
    """Convert a Wyze color temperature to the HomeKit scale."""
    return remap(
        value,
        WYZE_COLOR_TEMP_MIN,
        WYZE_COLOR_TEMP_MAX,
        HOMEKIT_COLOR_TEMP_MIN,
        HOMEKIT_COLOR_TEMP_MAX,
    )


def homekit_to_device_color_temp(value: float) -> int:
    """Convert a HomeKit color temperature to the Wyze scale."""
    return remap(
        value,
        HOMEKIT_COLOR_TEMP_MIN,
        HOMEKIT_COLOR_TEMP_MAX,
        WYZE_COLOR_TEMP_MIN,
        WYZE_COLOR_TEMP_MAX,
    )


def hex_to_hsv(value: str) -> tuple[float, float, float]:
    """Decode a 6 digit RGB hex string into hue, saturation and value.

    Raises ValueError for strings that are not valid hex.
    """
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    red, green, blue = rgb_hex_to_rgb_list(value)
    return color_RGB_to_hsv(red, green, blue)


def hsv_to_hex(hue: float, saturation: float, value: float) -> str:
    """Encode hue, saturation and value as a 6 digit lowercase RGB hex string."""
    return color_rgb_to_hex(*color_hsv_to_RGB(hue, saturation, value))


def power_to_property(value) -> str:
    return POWER_ON if value else POWER_OFF
