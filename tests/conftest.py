from unittest.mock import Mock

import pytest

from ebike_status.feed import decode_station_status


@pytest.fixture
def feed_payload() -> dict:
    """station_status.json with a green, a yellow and an empty station; 139 is absent."""
    return {
        "last_updated": 1528845200,
        "ttl": 10,
        "data": {
            "stations": [
                {"station_id": "22", "num_bikes_available": 9, "num_ebikes_available": 5, "num_docks_available": 10},
                {"station_id": "17", "num_bikes_available": 4, "num_ebikes_available": 1, "num_docks_available": 2},
                {"station_id": "20", "num_bikes_available": 0, "num_ebikes_available": 0, "num_docks_available": 19},
                {"station_id": "129", "num_ebikes_available": 3},
                {"station_id": "125", "num_ebikes_available": 2},
                {"station_id": "124", "num_ebikes_available": 7},
                {"station_id": "130", "num_ebikes_available": 4},
                {"station_id": "126", "num_ebikes_available": 1},
                {"station_id": "999", "num_ebikes_available": 12},
            ]
        },
    }


@pytest.fixture
def feed(feed_payload):
    return decode_station_status(feed_payload)


@pytest.fixture
def mock_get(feed_payload, monkeypatch):
    """Replace requests.get in the feed module with a Mock returning feed_payload."""
    response = Mock()
    response.status_code = 200
    response.json.return_value = feed_payload
    response.raise_for_status.return_value = None
    get = Mock(return_value=response)
    monkeypatch.setattr("ebike_status.feed.requests.get", get)
    return get
