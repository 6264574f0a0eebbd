"""Button platform for Web Fan."""
import logging

from homeassistant.components.button import ButtonDeviceClass, ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import CONF_APIROUTE, CONF_SERIAL, DOMAIN
from .helpers import get_device_info

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Web Fan identify button."""
    device_info = get_device_info(
        entry.data, hass.data[DOMAIN][entry.entry_id]["device_defaults"]
    )

    async_add_entities([WebFanIdentifyButton(entry, device_info)])


class WebFanIdentifyButton(ButtonEntity):
    """Button to identify the fan."""

    _attr_has_entity_name = True
    _attr_device_class = ButtonDeviceClass.IDENTIFY

    def __init__(self, entry: ConfigEntry, device_info: DeviceInfo) -> None:
        """Initialize the button."""
        serial = entry.data.get(CONF_SERIAL) or entry.data[CONF_APIROUTE]
        self._attr_unique_id = f"{serial}_identify"
        self._attr_device_info = device_info

    async def async_press(self) -> None:
        """Handle the button press."""
        _LOGGER.info("Identify requested!")
