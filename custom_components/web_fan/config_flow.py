"""Config flow for Web Fan integration."""
import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.selector import (
    SelectSelector,
    SelectSelectorConfig,
    SelectSelectorMode,
)

from .api import WebFanApiClient, WebFanConnectionError, WebFanParseError
from .const import (
    CONF_APIROUTE,
    CONF_FIRMWARE,
    CONF_HTTP_METHOD,
    CONF_LISTENER,
    CONF_MANUFACTURER,
    CONF_MODEL,
    CONF_NAME,
    CONF_PASSWORD,
    CONF_POLL_INTERVAL,
    CONF_PORT,
    CONF_ROTATION_DIRECTION,
    CONF_ROTATION_SPEED,
    CONF_SERIAL,
    CONF_TIMEOUT,
    CONF_URL_STYLE,
    CONF_USERNAME,
    DEFAULT_HTTP_METHOD,
    DEFAULT_NAME,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_URL_STYLE,
    DOMAIN,
    HTTP_METHODS,
    URL_STYLE_PATH,
    URL_STYLE_QUERY,
)

_LOGGER = logging.getLogger(__name__)

STEP_USER_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
        vol.Required(CONF_APIROUTE): str,
        vol.Required(CONF_POLL_INTERVAL, default=DEFAULT_POLL_INTERVAL): int,
        vol.Required(CONF_ROTATION_SPEED, default=False): bool,
        vol.Required(CONF_ROTATION_DIRECTION, default=False): bool,
        vol.Required(CONF_LISTENER, default=False): bool,
        vol.Required(CONF_PORT, default=DEFAULT_PORT): int,
        vol.Required(CONF_HTTP_METHOD, default=DEFAULT_HTTP_METHOD): SelectSelector(
            SelectSelectorConfig(
                options=HTTP_METHODS,
                custom_value=True,
                mode=SelectSelectorMode.DROPDOWN,
            )
        ),
        vol.Required(CONF_URL_STYLE, default=DEFAULT_URL_STYLE): vol.In(
            [URL_STYLE_QUERY, URL_STYLE_PATH]
        ),
        vol.Required(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): int,
        vol.Optional(CONF_USERNAME): str,
        vol.Optional(CONF_PASSWORD): str,
        vol.Optional(CONF_MANUFACTURER): str,
        vol.Optional(CONF_MODEL): str,
        vol.Optional(CONF_SERIAL): str,
        vol.Optional(CONF_FIRMWARE): str,
    }
)


class WebFanConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Web Fan."""

    VERSION = 1

    @staticmethod
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> config_entries.OptionsFlow:
        """Get the options flow for this handler."""
        return WebFanOptionsFlow()

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            apiroute = user_input[CONF_APIROUTE].rstrip("/")
            user_input[CONF_APIROUTE] = apiroute
            user_input[CONF_HTTP_METHOD] = user_input[CONF_HTTP_METHOD].strip().upper()

            await self.async_set_unique_id(apiroute)
            self._abort_if_unique_id_configured()

            api = WebFanApiClient(
                apiroute,
                http_method=user_input[CONF_HTTP_METHOD],
                timeout=user_input[CONF_TIMEOUT],
                username=user_input.get(CONF_USERNAME),
                password=user_input.get(CONF_PASSWORD),
                url_style=user_input[CONF_URL_STYLE],
                session=async_get_clientsession(self.hass, verify_ssl=False),
            )

            try:
                await api.get_status()
            except WebFanConnectionError:
                _LOGGER.warning("Could not reach %s", apiroute)
                errors["base"] = "cannot_connect"
            except WebFanParseError:
                _LOGGER.warning("Unexpected status response from %s", apiroute)
                errors["base"] = "invalid_response"
            except Exception:  # pylint: disable=broad-except
                _LOGGER.exception("Unexpected exception while checking %s", apiroute)
                errors["base"] = "unknown"
            else:
                return self.async_create_entry(
                    title=user_input[CONF_NAME],
                    data=user_input,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=STEP_USER_DATA_SCHEMA,
            errors=errors,
        )


class WebFanOptionsFlow(config_entries.OptionsFlow):
    """Handle options flow for Web Fan."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Manage the options."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        current_interval = self.config_entry.options.get(
            CONF_POLL_INTERVAL,
            self.config_entry.data.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL),
        )
        current_timeout = self.config_entry.options.get(
            CONF_TIMEOUT,
            self.config_entry.data.get(CONF_TIMEOUT, DEFAULT_TIMEOUT),
        )

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_POLL_INTERVAL, default=current_interval): int,
                    vol.Required(CONF_TIMEOUT, default=current_timeout): int,
                }
            ),
        )
