"""API client for Web Fan devices."""
import json
import logging
from typing import Any

import aiohttp

from .const import (
    DEFAULT_HTTP_METHOD,
    DEFAULT_TIMEOUT,
    DEFAULT_URL_STYLE,
    PATH_SET_ROTATION_DIRECTION,
    PATH_SET_ROTATION_SPEED,
    PATH_SET_STATE,
    PATH_STATUS,
    URL_STYLE_PATH,
)

_LOGGER = logging.getLogger(__name__)


class WebFanError(Exception):
    """Base error for Web Fan devices."""


class WebFanConnectionError(WebFanError):
    """The device could not be reached or did not answer in time."""


class WebFanParseError(WebFanError):
    """The device answered with a body that could not be understood."""


class WebFanApiClient:
    """API client for a fan exposing the Web Fan HTTP API."""

    def __init__(
        self,
        apiroute: str,
        *,
        http_method: str = DEFAULT_HTTP_METHOD,
        timeout: int = DEFAULT_TIMEOUT,
        username: str | None = None,
        password: str | None = None,
        url_style: str = DEFAULT_URL_STYLE,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the API client.

        ``timeout`` is in milliseconds. Basic auth is only sent when both
        ``username`` and ``password`` are given.
        """
        self.apiroute = apiroute.rstrip("/")
        self.http_method = http_method.upper()
        self.timeout = timeout
        self.url_style = url_style
        self.auth: aiohttp.BasicAuth | None = None
        if username and password:
            self.auth = aiohttp.BasicAuth(username, password)
        self._session = session
        self._owns_session = session is None

    def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure a session exists and return it."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def build_url(self, action: str, value: Any = None) -> str:
        """Build the device URL for an action and optional value."""
        url = f"{self.apiroute}/{action}"
        if value is None:
            return url
        if self.url_style == URL_STYLE_PATH:
            return f"{url}/{value}"
        return f"{url}?value={value}"

    async def _request(self, method: str, url: str) -> str:
        """Execute a single request and return the response body.

        There is no retry: a failed request is reported to the caller once.
        """
        session = self._ensure_session()

        try:
            async with session.request(
                method,
                url,
                data="",
                auth=self.auth,
                ssl=False,
                timeout=aiohttp.ClientTimeout(total=self.timeout / 1000),
            ) as response:
                body = await response.text()
                _LOGGER.debug("%s %s returned HTTP %s", method, url, response.status)
                return body
        except (aiohttp.ClientError, TimeoutError) as err:
            raise WebFanConnectionError(
                f"{method} {url} failed: {err or type(err).__name__}"
            ) from err

    async def get_status(self) -> dict[str, Any]:
        """Get the current device status."""
        url = self.build_url(PATH_STATUS)
        _LOGGER.debug("Getting status: %s", url)
        body = await self._request("GET", url)
        _LOGGER.debug("Device response: %s", body)

        try:
            data = json.loads(body)
        except ValueError as err:
            raise WebFanParseError(f"Invalid JSON from {url}: {err}") from err

        if not isinstance(data, dict):
            raise WebFanParseError(f"Expected a JSON object from {url}, got {body!r}")
        return data

    async def _set(self, action: str, value: Any) -> None:
        url = self.build_url(action, value)
        _LOGGER.debug("Setting %s: %s", action, url)
        await self._request(self.http_method, url)

    async def set_state(self, on: bool) -> int:
        """Switch the fan on or off. Returns the value sent (0 or 1)."""
        value = 1 if on else 0
        await self._set(PATH_SET_STATE, value)
        _LOGGER.info("Set state to %s", value)
        return value

    async def set_rotation_speed(self, speed: int) -> int:
        """Set the rotation speed percentage (0-100)."""
        value = int(speed)
        await self._set(PATH_SET_ROTATION_SPEED, value)
        _LOGGER.info("Set rotationSpeed to %s", value)
        return value

    async def set_rotation_direction(self, direction: int) -> int:
        """Set the rotation direction (0 clockwise, 1 counter-clockwise)."""
        value = int(direction)
        await self._set(PATH_SET_ROTATION_DIRECTION, value)
        _LOGGER.info("Set rotationDirection to %s", value)
        return value
