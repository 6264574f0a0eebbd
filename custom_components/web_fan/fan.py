"""Fan platform for Web Fan."""
import logging
from typing import Any

from homeassistant.components.fan import (
    DIRECTION_FORWARD,
    DIRECTION_REVERSE,
    FanEntity,
    FanEntityFeature,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .api import WebFanApiClient, WebFanConnectionError
from .const import (
    CONF_APIROUTE,
    CONF_SERIAL,
    DOMAIN,
    ROTATION_CLOCKWISE,
    ROTATION_COUNTER_CLOCKWISE,
)
from .coordinator import WebFanDataUpdateCoordinator
from .helpers import get_device_info

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Web Fan fan entity."""
    coordinator: WebFanDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]["coordinator"]
    api: WebFanApiClient = hass.data[DOMAIN][entry.entry_id]["api"]

    device_info = get_device_info(
        entry.data, hass.data[DOMAIN][entry.entry_id]["device_defaults"]
    )

    async_add_entities([WebFanEntity(coordinator, api, entry, device_info)])


class WebFanEntity(CoordinatorEntity[WebFanDataUpdateCoordinator], FanEntity):
    """Fan whose state lives behind a web API."""

    _attr_has_entity_name = True
    _attr_name = None

    def __init__(
        self,
        coordinator: WebFanDataUpdateCoordinator,
        api: WebFanApiClient,
        entry: ConfigEntry,
        device_info: DeviceInfo,
    ) -> None:
        """Initialize the fan."""
        super().__init__(coordinator)
        self.api = api
        serial = entry.data.get(CONF_SERIAL) or entry.data[CONF_APIROUTE]
        self._attr_unique_id = f"{serial}_fan"
        self._attr_device_info = device_info

        self._attr_supported_features = (
            FanEntityFeature.TURN_ON | FanEntityFeature.TURN_OFF
        )
        if coordinator.rotation_speed_enabled:
            self._attr_supported_features |= FanEntityFeature.SET_SPEED
        if coordinator.rotation_direction_enabled:
            self._attr_supported_features |= FanEntityFeature.DIRECTION

    @property
    def is_on(self) -> bool | None:
        """Return true if the fan is on."""
        return self.coordinator.state.on

    @property
    def percentage(self) -> int | None:
        """Return the last known rotation speed."""
        if not self.coordinator.rotation_speed_enabled:
            return None
        return self.coordinator.state.rotation_speed

    @property
    def current_direction(self) -> str | None:
        """Return the last known rotation direction."""
        if not self.coordinator.rotation_direction_enabled:
            return None
        direction = self.coordinator.state.rotation_direction
        if direction is None:
            return None
        if direction == ROTATION_COUNTER_CLOCKWISE:
            return DIRECTION_REVERSE
        return DIRECTION_FORWARD

    async def async_turn_on(
        self,
        percentage: int | None = None,
        preset_mode: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Turn the fan on."""
        await self._set_state(True)
        if percentage is not None and self.coordinator.rotation_speed_enabled:
            await self.async_set_percentage(percentage)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the fan off."""
        await self._set_state(False)

    async def _set_state(self, on: bool) -> None:
        try:
            await self.api.set_state(on)
        except WebFanConnectionError as err:
            _LOGGER.warning("Error setting state: %s", err)
            raise HomeAssistantError(f"Failed to set state: {err}") from err
        self.coordinator.async_apply_local(on=on)

    async def async_set_percentage(self, percentage: int) -> None:
        """Set the rotation speed."""
        try:
            value = await self.api.set_rotation_speed(percentage)
        except WebFanConnectionError as err:
            _LOGGER.warning("Error setting rotationSpeed: %s", err)
            raise HomeAssistantError(f"Failed to set rotation speed: {err}") from err
        self.coordinator.async_apply_local(rotation_speed=value)

    async def async_set_direction(self, direction: str) -> None:
        """Set the rotation direction."""
        target = (
            ROTATION_COUNTER_CLOCKWISE
            if direction == DIRECTION_REVERSE
            else ROTATION_CLOCKWISE
        )
        try:
            value = await self.api.set_rotation_direction(target)
        except WebFanConnectionError as err:
            _LOGGER.warning("Error setting rotationDirection: %s", err)
            raise HomeAssistantError(
                f"Failed to set rotation direction: {err}"
            ) from err
        self.coordinator.async_apply_local(rotation_direction=value)
