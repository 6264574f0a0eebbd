"""Inbound HTTP listener for values pushed by a Web Fan device."""
import logging
from typing import Callable

from aiohttp import web

from .const import CHARACTERISTICS, RESPONSE_HANDLING, RESPONSE_INVALID

_LOGGER = logging.getLogger(__name__)

PushHandler = Callable[[str, str], object]


def parse_push_request(request: web.BaseRequest) -> tuple[str, str | None]:
    """Extract the characteristic name and value from a push request.

    Both ``/<name>?value=<value>`` and ``/<name>/<value>`` are accepted.
    """
    segments = [segment for segment in request.path.split("/") if segment]
    if not segments:
        return "", None
    name = segments[0]
    if len(segments) == 2:
        return name, segments[1]
    if len(segments) > 2:
        return "/".join(segments), None
    return name, request.query.get("value")


class WebFanListener:
    """Minimal HTTP server accepting characteristic pushes from the device."""

    def __init__(self, port: int, handler: PushHandler, host: str = "0.0.0.0") -> None:
        """Initialize the listener."""
        self.host = host
        self.port = port
        self.handler = handler
        self._runner: web.AppRunner | None = None

    def build_app(self) -> web.Application:
        """Build the aiohttp application serving push requests."""
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self._handle)
        return app

    async def _handle(self, request: web.Request) -> web.Response:
        """Answer a push request and dispatch it."""
        name, value = parse_push_request(request)
        if name not in CHARACTERISTICS or value is None:
            _LOGGER.warning("Invalid request: %s", request.path_qs)
            return web.Response(text=RESPONSE_INVALID)

        _LOGGER.debug("Handling request")
        # The handler logs and ignores values it cannot apply
        self.handler(name, value)
        return web.Response(text=RESPONSE_HANDLING)

    async def async_start(self) -> None:
        """Bind the listener to its port."""
        self._runner = web.AppRunner(self.build_app(), access_log=None)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        _LOGGER.info("Listen server: http://%s:%s", self.host, self.port)

    async def async_stop(self) -> None:
        """Stop the listener and release its port."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
