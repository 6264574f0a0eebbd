"""Fixtures for Web Fan tests."""
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.web_fan.api import WebFanApiClient
from custom_components.web_fan.const import (
    CONF_APIROUTE,
    CONF_HTTP_METHOD,
    CONF_LISTENER,
    CONF_NAME,
    CONF_POLL_INTERVAL,
    CONF_PORT,
    CONF_ROTATION_DIRECTION,
    CONF_ROTATION_SPEED,
    CONF_TIMEOUT,
    CONF_URL_STYLE,
    DOMAIN,
)

APIROUTE = "http://192.168.1.50/api"


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations):
    """Enable loading of custom_components/web_fan."""
    yield


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Config entry data for a fan with speed and direction support."""
    return {
        CONF_NAME: "Office Fan",
        CONF_APIROUTE: APIROUTE,
        CONF_POLL_INTERVAL: 300,
        CONF_ROTATION_SPEED: True,
        CONF_ROTATION_DIRECTION: True,
        CONF_LISTENER: False,
        CONF_PORT: 2000,
        CONF_HTTP_METHOD: "GET",
        CONF_URL_STYLE: "query",
        CONF_TIMEOUT: 3000,
    }


@pytest.fixture
def config_entry(config_data) -> MockConfigEntry:
    """Mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title="Office Fan",
        data=config_data,
        unique_id=APIROUTE,
    )


@pytest.fixture
def mock_api() -> MagicMock:
    """API client stand-in whose calls can be inspected."""
    api = MagicMock(spec=WebFanApiClient)
    api.get_status = AsyncMock(
        return_value={"currentState": 1, "rotationSpeed": 40, "rotationDirection": 0}
    )
    api.set_state = AsyncMock(side_effect=lambda on: 1 if on else 0)
    api.set_rotation_speed = AsyncMock(side_effect=int)
    api.set_rotation_direction = AsyncMock(side_effect=int)
    api.close = AsyncMock()
    return api


@pytest.fixture
def patch_api(mock_api):
    """Make the integration use mock_api instead of a real client."""
    with patch("custom_components.web_fan.WebFanApiClient", return_value=mock_api):
        yield mock_api
