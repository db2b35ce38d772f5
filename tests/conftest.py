"""
Shared fixtures for the GreenMo notifier tests.

Every outbound call goes through `requests`, so tests patch
`greenmo.utils.upstream.requests.get` / `.post` and hand back fake responses.
"""
from unittest.mock import MagicMock

import pytest

from greenmo.utils.parameters import Config


@pytest.fixture
def config():
    return Config(
        maps_api_key="xxx",
        pushover_token="token",
        pushover_user="user",
        default_fuel_level=40,
        cars_by_default=True,
        request_timeout=5,
    )


@pytest.fixture
def make_response():
    def _make(status_code=200, json_data=None, content=b""):
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def bbox_params():
    return {
        "lat1": "1.123456",
        "lon1": "2.123456",
        "lat2": "3.123456",
        "lon2": "4.123456",
    }
