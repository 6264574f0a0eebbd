"""The Web Fan integration."""
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import WebFanApiClient
from .const import (
    CONF_APIROUTE,
    CONF_HTTP_METHOD,
    CONF_LISTENER,
    CONF_PASSWORD,
    CONF_PORT,
    CONF_TIMEOUT,
    CONF_URL_STYLE,
    CONF_USERNAME,
    DEFAULT_HTTP_METHOD,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_URL_STYLE,
    DOMAIN,
)
from .coordinator import WebFanDataUpdateCoordinator
from .helpers import async_get_device_defaults
from .listener import WebFanListener

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[Platform] = [
    Platform.FAN,
    Platform.BUTTON,
]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Web Fan from a config entry."""
    api = WebFanApiClient(
        entry.data[CONF_APIROUTE],
        http_method=entry.data.get(CONF_HTTP_METHOD, DEFAULT_HTTP_METHOD),
        timeout=entry.options.get(
            CONF_TIMEOUT, entry.data.get(CONF_TIMEOUT, DEFAULT_TIMEOUT)
        ),
        username=entry.data.get(CONF_USERNAME),
        password=entry.data.get(CONF_PASSWORD),
        url_style=entry.data.get(CONF_URL_STYLE, DEFAULT_URL_STYLE),
        session=async_get_clientsession(hass, verify_ssl=False),
    )

    coordinator = WebFanDataUpdateCoordinator(hass, entry, api)

    # Raises ConfigEntryNotReady if the device cannot be reached
    await coordinator.async_config_entry_first_refresh()

    listener = None
    if entry.data.get(CONF_LISTENER, False):
        listener = WebFanListener(
            entry.data.get(CONF_PORT, DEFAULT_PORT), coordinator.async_handle_push
        )
        try:
            await listener.async_start()
        except OSError as err:
            _LOGGER.warning("Could not start listen server: %s", err)
            raise ConfigEntryNotReady(f"Could not start listen server: {err}") from err

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        "coordinator": coordinator,
        "api": api,
        "listener": listener,
        "device_defaults": await async_get_device_defaults(hass),
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    # Reload entry when options change
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        entry_data = hass.data[DOMAIN].pop(entry.entry_id)
        if entry_data["listener"] is not None:
            await entry_data["listener"].async_stop()
        await entry_data["api"].close()

    return unload_ok


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload config entry when options change."""
    await hass.config_entries.async_reload(entry.entry_id)
