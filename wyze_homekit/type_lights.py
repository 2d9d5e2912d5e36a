"""Class to hold all light accessories."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
from typing import Any

from pyhap.const import CATEGORY_LIGHTBULB

from .accessories import TYPES, PropertyWriter, WyzeAccessory
from .const import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    CHAR_BRIGHTNESS,
    CHAR_COLOR_TEMPERATURE,
    CHAR_HUE,
    CHAR_ON,
    CHAR_SATURATION,
    COLOR_VALUE,
    HOMEKIT_COLOR_TEMP_MAX,
    HOMEKIT_COLOR_TEMP_MIN,
    HUE_MAX,
    HUE_MIN,
    PROP_BRIGHTNESS,
    PROP_COLOR,
    PROP_COLOR_TEMP,
    PROP_MAX_VALUE,
    PROP_MIN_VALUE,
    PROP_POWER,
    SATURATION_MAX,
    SATURATION_MIN,
    SERV_LIGHTBULB,
    TYPE_MESH_LIGHT,
)
from .models import ColorCache, ColorWriteState, parse_property_list
from .util import (
    clamp,
    device_to_homekit_color_temp,
    hex_to_hsv,
    homekit_to_device_color_temp,
    hsv_to_hex,
    power_to_property,
)

_LOGGER = logging.getLogger(__name__)


@TYPES.register(TYPE_MESH_LIGHT)
class MeshLight(WyzeAccessory):
    """Generate a Light accessory for a Wyze mesh bulb.

    Supports power, brightness, color temperature and hue/saturation.
    HomeKit sends a color pick as a hue write followed by a saturation write;
    the pair is merged into one hex color write to the device.
    """

    category = CATEGORY_LIGHTBULB

    def __init__(
        self,
        driver: Any,
        name: str,
        mac: str,
        writer: PropertyWriter,
        aid: int | None = None,
    ) -> None:
        """Initialize a new MeshLight accessory object."""
        super().__init__(driver, name, mac, writer, aid=aid)

        # Hue and saturation arrive as separate writes
        self.cache = ColorCache()
        self.color_state = ColorWriteState.IDLE

        serv_light = self.add_preload_service(
            SERV_LIGHTBULB,
            [CHAR_BRIGHTNESS, CHAR_COLOR_TEMPERATURE, CHAR_HUE, CHAR_SATURATION],
        )
        self.char_on = serv_light.configure_char(
            CHAR_ON, value=False, setter_callback=self.set_on
        )
        self.char_brightness = serv_light.configure_char(
            CHAR_BRIGHTNESS, value=100, setter_callback=self.set_brightness
        )
        self.char_color_temp = serv_light.configure_char(
            CHAR_COLOR_TEMPERATURE,
            value=HOMEKIT_COLOR_TEMP_MIN,
            properties={
                PROP_MIN_VALUE: HOMEKIT_COLOR_TEMP_MIN,
                PROP_MAX_VALUE: HOMEKIT_COLOR_TEMP_MAX,
            },
            setter_callback=self.set_color_temperature,
        )
        self.char_hue = serv_light.configure_char(
            CHAR_HUE, value=0, setter_callback=self.set_hue
        )
        self.char_saturation = serv_light.configure_char(
            CHAR_SATURATION, value=0, setter_callback=self.set_saturation
        )

        self._property_handlers: dict[str, Callable[[str], None]] = {
            PROP_BRIGHTNESS: self.update_brightness,
            PROP_COLOR_TEMP: self.update_color_temp,
            PROP_COLOR: self.update_color,
        }

    # Device -> HomeKit

    def update_characteristics(
        self, power: bool, property_list: Iterable[tuple[str, str]]
    ) -> None:
        """Update every characteristic from a device snapshot."""
        self.char_on.set_value(bool(power))

        for pid, value in parse_property_list(property_list):
            handler = self._property_handlers.get(pid)
            if handler is None:
                continue
            handler(value)

    def update_brightness(self, value: str) -> None:
        """Copy the device brightness, both sides use 0-100."""
        self.char_brightness.set_value(int(value))

    def update_color_temp(self, value: str) -> None:
        """Set color temperature from the device Kelvin scale."""
        self.char_color_temp.set_value(device_to_homekit_color_temp(int(value)))

    def update_color(self, value: str) -> None:
        """Convert a hex color from the device into HomeKit hue/saturation."""
        hue, saturation, brightness = hex_to_hsv(value)
        _LOGGER.debug(
            "Updating color record for %s to %s: %s",
            self.mac,
            value,
            (hue, saturation, brightness),
        )

        if self.color_state is ColorWriteState.ARMED:
            _LOGGER.debug(
                "%s: Device color changed while a color write was pending, "
                "dropping the pending write",
                self.mac,
            )
            self.color_state = ColorWriteState.IDLE

        self.char_hue.set_value(hue)
        self.char_saturation.set_value(saturation)
        self.cache = ColorCache(hue, saturation, brightness)

    # HomeKit -> device

    def set_on(self, value: bool) -> None:
        self.schedule_write(self.async_set_on(value), "set power")

    def set_brightness(self, value: int) -> None:
        self.schedule_write(self.async_set_brightness(value), "set brightness")

    def set_color_temperature(self, value: int) -> None:
        self.schedule_write(
            self.async_set_color_temperature(value), "set color temperature"
        )

    def set_hue(self, value: float) -> None:
        self.schedule_write(self.async_set_hue(value), "set hue")

    def set_saturation(self, value: float) -> None:
        self.schedule_write(self.async_set_saturation(value), "set saturation")

    async def async_set_on(self, value: bool) -> None:
        _LOGGER.info("Setting power for %s to %s", self.mac, value)
        await self.async_set_buffered_property(PROP_POWER, power_to_property(value))

    async def async_set_brightness(self, value: int) -> None:
        value = clamp(value, BRIGHTNESS_MIN, BRIGHTNESS_MAX)
        _LOGGER.info("Setting brightness for %s to %s", self.mac, value)
        await self.async_set_buffered_property(PROP_BRIGHTNESS, value)
        self.cache.brightness = value

    async def async_set_color_temperature(self, value: int) -> None:
        wyze_value = homekit_to_device_color_temp(value)
        _LOGGER.info(
            "Setting color temperature for %s to %s (%s)", self.mac, value, wyze_value
        )
        await self.async_set_buffered_property(PROP_COLOR_TEMP, wyze_value)

    async def async_set_hue(self, value: float) -> None:
        value = clamp(value, HUE_MIN, HUE_MAX)
        _LOGGER.info("Setting hue (color) for %s to %s", self.mac, value)
        _LOGGER.debug(
            "(H)SV values: %s, %s, %s",
            value,
            self.cache.saturation,
            self.cache.brightness,
        )
        await self._async_apply_color_cache(hue=value)

    async def async_set_saturation(self, value: float) -> None:
        value = clamp(value, SATURATION_MIN, SATURATION_MAX)
        _LOGGER.info("Setting saturation (color) for %s to %s", self.mac, value)
        _LOGGER.debug(
            "H(S)V values: %s, %s, %s",
            self.cache.hue,
            value,
            self.cache.brightness,
        )
        await self._async_apply_color_cache(saturation=value)

    async def _async_apply_color_cache(self, **fields: float) -> None:
        """Advance the color write state machine.

        IDLE  + write -> store the field, ARMED, nothing sent.
        ARMED + write -> store the field, IDLE, send the combined color.
                         A failed send restores the previous field values
                         and the ARMED state before re-raising.
        """
        previous = {field: getattr(self.cache, field) for field in fields}
        for field, value in fields.items():
            setattr(self.cache, field, value)

        if self.color_state is ColorWriteState.IDLE:
            self.color_state = ColorWriteState.ARMED
            return

        self.color_state = ColorWriteState.IDLE
        hex_value = hsv_to_hex(
            self.cache.hue or 0, self.cache.saturation or 0, COLOR_VALUE
        )
        _LOGGER.info("Applying RGB for %s: %s", self.nickname, hex_value)

        try:
            await self.async_set_buffered_property(PROP_COLOR, hex_value)
        except Exception:
            # Only roll back fields no later write has replaced
            for field, value in previous.items():
                if getattr(self.cache, field) == fields[field]:
                    setattr(self.cache, field, value)
            if self.color_state is ColorWriteState.IDLE:
                self.color_state = ColorWriteState.ARMED
            raise
