from __future__ import annotations

import logging
from unittest.mock import patch

import httpx
import pytest

from openweather_client.errors import WeatherError, WeatherErrorKind
from openweather_client.request import build_url, redact


def test_build_url_fixed_parameters():
    url = build_url("London", "secret")

    assert url.scheme == "https"
    assert url.host == "api.openweathermap.org"
    assert url.path == "/data/2.5/weather"
    assert url.params["q"] == "London"
    assert url.params["appid"] == "secret"
    assert url.params["units"] == "metric"
    assert url.params["lang"] == "pl"


@pytest.mark.parametrize(
    "city",
    [
        "New York",
        "Bielsko-Biała",
        "Kraków",
        "Łódź",
        "A&B",
        "Foo/Bar",
        "what?",
        "#1 city",
        "a+b=c",
        "東京",
    ],
)
def test_build_url_round_trips_city(city):
    url = build_url(city, "secret")
    assert url.params["q"] == city
    # reserved characters must not leak into the raw query
    assert list(url.params.keys()) == ["q", "appid", "units", "lang"]


def test_build_url_escapes_reserved_characters():
    url = build_url("Foo Bar&x=/?#", "secret")
    query = url.query.decode("ascii")
    assert query.startswith("q=Foo%20Bar%26x%3D%2F%3F%23&")


def test_build_url_unencodable_city_is_bad_url():
    with pytest.raises(WeatherError) as exc_info:
        build_url("War\udcffszawa", "secret")
    assert exc_info.value.kind is WeatherErrorKind.BAD_URL
    assert str(exc_info.value) == "Nieprawidłowy adres URL."


def test_build_url_invalid_url_is_bad_url():
    with patch("openweather_client.request.httpx.URL", side_effect=httpx.InvalidURL("bad")):
        try:
            build_url("London", "secret")
            assert False, "WeatherError should have been raised"
        except WeatherError as e:
            assert e.kind is WeatherErrorKind.BAD_URL
            assert isinstance(e.__cause__, httpx.InvalidURL)


def test_redact_masks_api_key():
    url = build_url("London", "secret")
    text = redact(url)
    assert "secret" not in text
    assert "appid=%2A%2A%2A" in text or "appid=***" in text


def test_build_url_unencodable_key_is_bad_url(caplog):
    caplog.set_level(logging.DEBUG, logger="openweather_client.request")
    with pytest.raises(WeatherError) as exc_info:
        build_url("Toruń", "sec\udcffret")
    assert exc_info.value.kind is WeatherErrorKind.BAD_URL
    assert "Cannot encode API key" in caplog.text
    assert "Cannot encode city" not in caplog.text
    assert "Toruń" not in caplog.text
