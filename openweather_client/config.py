from __future__ import annotations

import os
from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional


def _clean(value: Optional[str]) -> Optional[str]:
    # an empty or blank OPENWEATHER_API_KEY counts as unset
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """OpenWeatherMap client configuration.

    ``settings`` below is built once, when this module is first imported, from
    the process environment and a ``.env`` file if one exists. Variables
    already present in the environment win over ``.env``.

    ``WeatherService(api_key=...)`` takes precedence over
    ``openweather_api_key``; it is only the default for services created
    without an explicit key.
    """

    openweather_api_key: Optional[str]

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not)
        load_dotenv()

        return cls(
            openweather_api_key=_clean(os.getenv("OPENWEATHER_API_KEY")),
        )


settings = Settings.load()
