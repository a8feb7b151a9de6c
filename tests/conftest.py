import json
import os
import sys

import pytest

# Ensure project root is on sys.path so tests can import `openweather_client`
# when pytest is invoked from the repository root or other working directories.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


WARSAW_PAYLOAD = {
    "coord": {"lon": 21.0118, "lat": 52.2298},
    "weather": [
        {"id": 500, "main": "Rain", "description": "słabe opady deszczu", "icon": "10d"}
    ],
    "base": "stations",
    "main": {
        "temp": 11.4,
        "feels_like": 10.6,
        "temp_min": 10.2,
        "temp_max": 12.3,
        "pressure": 1012,
        "humidity": 81,
    },
    "wind": {"speed": 4.12, "deg": 240},
    "name": "Warszawa",
    "cod": 200,
}


@pytest.fixture
def weather_payload():
    return json.loads(json.dumps(WARSAW_PAYLOAD))


@pytest.fixture
def weather_body(weather_payload):
    return json.dumps(weather_payload).encode("utf-8")
