from __future__ import annotations

import logging
from typing import Final
from urllib.parse import quote

import httpx

from .errors import WeatherError

logger = logging.getLogger(__name__)

OPENWEATHER_BASE: Final[str] = "https://api.openweathermap.org"
CURRENT_WEATHER_PATH: Final[str] = "/data/2.5/weather"

# Fixed for every request
UNITS: Final[str] = "metric"
LANG: Final[str] = "pl"


def _encode(value: str) -> str:
    # safe="" so that "/" is escaped as well
    return quote(value, safe="", encoding="utf-8", errors="strict")


def build_url(city: str, api_key: str) -> httpx.URL:
    """Return the current-weather URL for ``city``.

    Raises WeatherError(BAD_URL) if ``city`` or ``api_key`` cannot be encoded
    as a query value or the composed string is not a valid URL. Makes no
    network calls.
    """
    try:
        q = _encode(city)
    except UnicodeEncodeError as exc:
        logger.debug("Cannot encode city %r: %s", city, exc)
        raise WeatherError.bad_url() from exc
    try:
        appid = _encode(api_key)
    except UnicodeEncodeError as exc:
        # the key itself stays out of the log
        logger.debug("Cannot encode API key: %s", exc.reason)
        raise WeatherError.bad_url() from exc

    raw = (
        f"{OPENWEATHER_BASE}{CURRENT_WEATHER_PATH}"
        f"?q={q}&appid={appid}&units={UNITS}&lang={LANG}"
    )
    try:
        return httpx.URL(raw)
    except httpx.InvalidURL as exc:
        logger.debug("Composed URL is invalid: %s", exc)
        raise WeatherError.bad_url() from exc


def redact(url: httpx.URL) -> str:
    """URL as text with the API key masked, for log records."""
    if "appid" not in url.params:
        return str(url)
    return str(url.copy_set_param("appid", "***"))


__all__ = ["build_url", "redact", "OPENWEATHER_BASE", "CURRENT_WEATHER_PATH"]
