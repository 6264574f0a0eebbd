"""Data update coordinator for Web Fan."""
from dataclasses import replace
from datetime import timedelta
import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import WebFanApiClient, WebFanConnectionError, WebFanParseError
from .const import (
    CHARACTERISTICS,
    CONF_POLL_INTERVAL,
    CONF_ROTATION_DIRECTION,
    CONF_ROTATION_SPEED,
    DEFAULT_POLL_INTERVAL,
    DOMAIN,
)
from .helpers import FanState

_LOGGER = logging.getLogger(__name__)


class WebFanDataUpdateCoordinator(DataUpdateCoordinator[FanState]):
    """Polls the fan status and holds its last known characteristic values."""

    def __init__(
        self, hass: HomeAssistant, entry: ConfigEntry, api: WebFanApiClient
    ) -> None:
        """Initialize the coordinator."""
        poll_interval = entry.options.get(
            CONF_POLL_INTERVAL,
            entry.data.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL),
        )
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=DOMAIN,
            update_interval=timedelta(seconds=poll_interval),
        )
        self.api = api
        self.rotation_speed_enabled: bool = entry.data.get(CONF_ROTATION_SPEED, False)
        self.rotation_direction_enabled: bool = entry.data.get(
            CONF_ROTATION_DIRECTION, False
        )

    @property
    def state(self) -> FanState:
        """Return the cached state, empty before the first report."""
        return self.data if self.data is not None else FanState()

    async def _async_update_data(self) -> FanState:
        """Fetch the status from the device."""
        try:
            payload = await self.api.get_status()
        except WebFanConnectionError as err:
            _LOGGER.warning("Error getting status: %s", err)
            raise UpdateFailed(f"Polling failed: {err}") from err
        except WebFanParseError as err:
            _LOGGER.warning("Error parsing status: %s", err)
            return self.state

        try:
            state = self.state.apply_status(
                payload,
                rotation_speed=self.rotation_speed_enabled,
                rotation_direction=self.rotation_direction_enabled,
            )
        except WebFanParseError as err:
            _LOGGER.warning("Error parsing status: %s", err)
            return self.state

        _LOGGER.debug("Updated state to: %s", state.on)
        if self.rotation_speed_enabled:
            _LOGGER.debug("Updated rotationSpeed to: %s", state.rotation_speed)
        if self.rotation_direction_enabled:
            _LOGGER.debug("Updated rotationDirection to: %s", state.rotation_direction)
        return state

    @callback
    def async_handle_push(self, characteristic: str, value: Any) -> bool:
        """Apply a value pushed by the device to the listener.

        No request is sent to the device. Returns False if the push was
        ignored.
        """
        if characteristic not in CHARACTERISTICS:
            _LOGGER.warning(
                'Unknown characteristic "%s" with value "%s"', characteristic, value
            )
            return False

        try:
            state = self.state.apply_push(characteristic, value)
        except ValueError as err:
            _LOGGER.warning(
                'Invalid value "%s" for %s: %s', value, characteristic, err
            )
            return False

        _LOGGER.info("Updated %s to: %s", characteristic, value)
        self.async_set_updated_data(state)
        return True

    @callback
    def async_apply_local(self, **changes: Any) -> None:
        """Record values that were successfully set on the device."""
        self.async_set_updated_data(replace(self.state, **changes))
