"""Tests for the Web Fan API client against a local device stub."""
import asyncio

import aiohttp
from aiohttp import web
from aiohttp.test_utils import TestServer
import pytest

from custom_components.web_fan.api import (
    WebFanApiClient,
    WebFanConnectionError,
    WebFanParseError,
)

pytestmark = pytest.mark.usefixtures("socket_enabled")


class DeviceStub:
    """Records requests and answers like a Web Fan device."""

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.status_body = '{"currentState": 1, "rotationSpeed": 40, "rotationDirection": 0}'
        self.http_status = 200
        self.delay = 0.0

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(
            {
                "method": request.method,
                "path_qs": request.path_qs,
                "auth": request.headers.get("Authorization"),
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if request.path.endswith("/status"):
            return web.Response(text=self.status_body, status=self.http_status)
        return web.Response(text="OK", status=self.http_status)


@pytest.fixture
async def device():
    stub = DeviceStub()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", stub.handle)
    server = TestServer(app)
    await server.start_server()
    stub.apiroute = str(server.make_url("/api"))
    yield stub
    await server.close()


@pytest.fixture
async def session():
    async with aiohttp.ClientSession() as client_session:
        yield client_session


def test_build_url_query_style():
    api = WebFanApiClient("http://fan.local/api/")

    assert api.build_url("status") == "http://fan.local/api/status"
    assert api.build_url("setState", 1) == "http://fan.local/api/setState?value=1"


def test_build_url_path_style():
    api = WebFanApiClient("http://fan.local/api", url_style="path")

    assert api.build_url("setRotationSpeed", 55) == "http://fan.local/api/setRotationSpeed/55"


def test_basic_auth_needs_both_credentials():
    assert WebFanApiClient("http://fan.local", username="admin").auth is None
    assert WebFanApiClient("http://fan.local", username="admin", password="pw").auth is not None


async def test_get_status(device, session):
    api = WebFanApiClient(device.apiroute, session=session)

    status = await api.get_status()

    assert status == {"currentState": 1, "rotationSpeed": 40, "rotationDirection": 0}
    assert device.requests == [{"method": "GET", "path_qs": "/api/status", "auth": None}]


async def test_set_state_sends_one_and_zero(device, session):
    api = WebFanApiClient(device.apiroute, session=session)

    assert await api.set_state(True) == 1
    assert await api.set_state(False) == 0

    assert [r["path_qs"] for r in device.requests] == [
        "/api/setState?value=1",
        "/api/setState?value=0",
    ]


async def test_path_style_and_configured_method(device, session):
    api = WebFanApiClient(
        device.apiroute, http_method="post", url_style="path", session=session
    )

    await api.set_rotation_speed(55)
    await api.set_rotation_direction(1)
    await api.get_status()

    assert [(r["method"], r["path_qs"]) for r in device.requests] == [
        ("POST", "/api/setRotationSpeed/55"),
        ("POST", "/api/setRotationDirection/1"),
        ("GET", "/api/status"),
    ]


async def test_basic_auth_header_is_sent(device, session):
    api = WebFanApiClient(
        device.apiroute, username="admin", password="secret", session=session
    )

    await api.set_state(True)

    assert device.requests[0]["auth"] == aiohttp.BasicAuth("admin", "secret").encode()


async def test_malformed_json_raises_parse_error(device, session):
    device.status_body = "{not json"
    api = WebFanApiClient(device.apiroute, session=session)

    with pytest.raises(WebFanParseError):
        await api.get_status()


async def test_non_object_json_raises_parse_error(device, session):
    device.status_body = "[1, 2]"
    api = WebFanApiClient(device.apiroute, session=session)

    with pytest.raises(WebFanParseError):
        await api.get_status()


async def test_error_status_with_json_body_is_applied(device, session):
    device.http_status = 500
    device.status_body = '{"currentState": 1}'
    api = WebFanApiClient(device.apiroute, session=session)

    assert await api.get_status() == {"currentState": 1}


async def test_error_status_with_html_body_is_a_parse_error(device, session):
    device.http_status = 500
    device.status_body = "<html><body>Internal Server Error</body></html>"
    api = WebFanApiClient(device.apiroute, session=session)

    with pytest.raises(WebFanParseError):
        await api.get_status()


async def test_set_answered_with_error_status_succeeds(device, session):
    device.http_status = 404
    api = WebFanApiClient(device.apiroute, session=session)

    assert await api.set_state(True) == 1
    assert len(device.requests) == 1


async def test_timeout_raises_connection_error_without_retry(device, session):
    device.delay = 0.5
    api = WebFanApiClient(device.apiroute, timeout=50, session=session)

    with pytest.raises(WebFanConnectionError):
        await api.get_status()
    assert len(device.requests) == 1


async def test_unreachable_device_raises_connection_error(session):
    api = WebFanApiClient("http://127.0.0.1:1/api", session=session)

    with pytest.raises(WebFanConnectionError):
        await api.get_status()


async def test_close_leaves_shared_session_open(session):
    api = WebFanApiClient("http://127.0.0.1:1/api", session=session)

    await api.close()

    assert not session.closed
