"""Helper functions for the Web Fan integration."""
from dataclasses import dataclass, replace
import logging
from typing import Any, Mapping

from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.loader import async_get_integration

from .api import WebFanParseError
from .const import (
    CHAR_ROTATION_DIRECTION,
    CHAR_ROTATION_SPEED,
    CHAR_STATE,
    CONF_APIROUTE,
    CONF_FIRMWARE,
    CONF_MANUFACTURER,
    CONF_MODEL,
    CONF_NAME,
    CONF_SERIAL,
    DEFAULT_NAME,
    DOMAIN,
    KEY_CURRENT_STATE,
    KEY_ROTATION_DIRECTION,
    KEY_ROTATION_SPEED,
)

_LOGGER = logging.getLogger(__name__)


def coerce_state(value: Any) -> bool:
    """Convert a device or webhook on/off value to a bool.

    Accepts booleans, numbers and their string forms ("1", "0", "true").
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "on"):
            return True
        if text in ("false", "off"):
            return False
        return float(text) != 0
    raise ValueError(f"Cannot interpret {value!r} as a state")


def coerce_number(value: Any) -> int:
    """Convert a device or webhook numeric value to an int."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Cannot interpret {value!r} as a number")
    try:
        return int(round(float(value)))
    except OverflowError as err:
        raise ValueError(f"Cannot interpret {value!r} as a number") from err


@dataclass(frozen=True)
class FanState:
    """Last known characteristic values of the fan.

    ``None`` means the value has not been reported yet.
    """

    on: bool | None = None
    rotation_speed: int | None = None
    rotation_direction: int | None = None

    def apply_status(
        self,
        payload: Mapping[str, Any],
        rotation_speed: bool = False,
        rotation_direction: bool = False,
    ) -> "FanState":
        """Return the state updated from a ``/status`` body.

        Speed and direction are only read when the matching feature is
        enabled. Raises WebFanParseError if the body cannot be applied, in
        which case nothing is changed.
        """
        if KEY_CURRENT_STATE not in payload:
            raise WebFanParseError(f"Missing {KEY_CURRENT_STATE} in status")

        try:
            changes: dict[str, Any] = {"on": coerce_state(payload[KEY_CURRENT_STATE])}
            if rotation_speed and payload.get(KEY_ROTATION_SPEED) is not None:
                changes["rotation_speed"] = coerce_number(payload[KEY_ROTATION_SPEED])
            if rotation_direction and payload.get(KEY_ROTATION_DIRECTION) is not None:
                changes["rotation_direction"] = coerce_number(
                    payload[KEY_ROTATION_DIRECTION]
                )
        except (TypeError, ValueError) as err:
            raise WebFanParseError(f"Invalid value in status: {err}") from err

        return replace(self, **changes)

    def apply_push(self, characteristic: str, value: Any) -> "FanState":
        """Return the state with one pushed characteristic replaced.

        Raises ValueError for an unknown characteristic or a bad value.
        """
        if characteristic == CHAR_STATE:
            return replace(self, on=coerce_state(value))
        if characteristic == CHAR_ROTATION_SPEED:
            return replace(self, rotation_speed=coerce_number(value))
        if characteristic == CHAR_ROTATION_DIRECTION:
            return replace(self, rotation_direction=coerce_number(value))
        raise ValueError(f"Unknown characteristic {characteristic!r}")


async def async_get_device_defaults(hass: HomeAssistant) -> dict[str, str]:
    """Return device metadata defaults taken from the integration manifest.

    Manufacturer is the first code owner (the package author), falling back
    to the integration name; model is the package name; firmware is the
    package version.
    """
    integration = await async_get_integration(hass, DOMAIN)
    codeowners = integration.manifest.get("codeowners") or []
    return {
        CONF_MANUFACTURER: codeowners[0].lstrip("@") if codeowners else integration.name,
        CONF_MODEL: integration.domain,
        CONF_FIRMWARE: str(integration.version) if integration.version else "",
    }


def get_device_info(
    config: Mapping[str, Any], defaults: Mapping[str, str]
) -> DeviceInfo:
    """Build device info dictionary for entities."""
    serial = config.get(CONF_SERIAL) or config[CONF_APIROUTE]
    return DeviceInfo(
        identifiers={(DOMAIN, serial)},
        name=config.get(CONF_NAME) or DEFAULT_NAME,
        manufacturer=config.get(CONF_MANUFACTURER) or defaults[CONF_MANUFACTURER],
        model=config.get(CONF_MODEL) or defaults[CONF_MODEL],
        serial_number=serial,
        sw_version=config.get(CONF_FIRMWARE) or defaults[CONF_FIRMWARE] or None,
    )
