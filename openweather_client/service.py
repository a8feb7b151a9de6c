from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from .config import settings
from .errors import WeatherError
from .interpreter import interpret
from .models import WeatherRecord
from .request import build_url, redact

logger = logging.getLogger(__name__)


class WeatherService:
    """OpenWeatherMap current-weather client.

    Pass ``client`` to reuse an ``httpx.AsyncClient`` across calls; it is
    left open. Without one, a client is created and closed for every call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.openweather_api_key
        self.client = client

    async def fetch_weather(self, city: str) -> WeatherRecord:
        """Fetch current weather for ``city``.

        Issues exactly one GET request. Every failure is raised as a
        WeatherError.
        """
        if not self.api_key:
            logger.warning("OPENWEATHER_API_KEY is not set")
            raise WeatherError.invalid_api_key("OPENWEATHER_API_KEY is not set.")

        url = build_url(city, self.api_key)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("GET %s", redact(url))

        try:
            response = await self._get(url)
        except (httpx.TransportError, asyncio.CancelledError) as exc:
            logger.debug("Request failed: %r", exc)
            raise WeatherError.network(exc) from exc
        except httpx.HTTPError as exc:
            logger.debug("Unexpected HTTP failure: %r", exc)
            raise WeatherError.unknown(str(exc) or None) from exc
        except Exception as exc:
            # a caller-supplied client may wrap any transport
            logger.debug("Unexpected transport failure: %r", exc)
            raise WeatherError.unknown(str(exc) or None) from exc

        return interpret(response.status_code, response.content)

    async def _get(self, url: httpx.URL) -> httpx.Response:
        if self.client is not None:
            return await self.client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)


__all__ = ["WeatherService"]
