from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


@dataclass(frozen=True)
class ConditionEntry:
    """One weather condition as reported by the provider."""

    category: str
    description: str
    icon_id: str


@dataclass(frozen=True)
class WeatherRecord:
    """Current weather for a single location.

    Units follow the ``units=metric`` request parameter:
    - temperatures in Celsius
    - pressure in hectopascal (hPa)
    - wind speed in metres per second (m/s)

    ``feels_like_celsius`` is None when the provider omits it.
    """

    location_name: str
    temperature_celsius: float
    feels_like_celsius: Optional[float]
    pressure_hpa: int
    conditions: Tuple[ConditionEntry, ...]
    wind_speed_meters_per_second: float


# wire models ------------------------------------------------------------
class ConditionPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    main: str
    description: str
    icon: str


class MainPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    temp: float
    feels_like: Optional[float] = None
    pressure: int


class WindPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    speed: float


class WeatherPayload(BaseModel):
    """Body of a successful ``/data/2.5/weather`` response."""

    model_config = ConfigDict(strict=True)

    name: str
    main: MainPayload
    weather: List[ConditionPayload]
    wind: WindPayload

    def to_record(self) -> WeatherRecord:
        return WeatherRecord(
            location_name=self.name,
            temperature_celsius=self.main.temp,
            feels_like_celsius=self.main.feels_like,
            pressure_hpa=self.main.pressure,
            conditions=tuple(
                ConditionEntry(category=w.main, description=w.description, icon_id=w.icon)
                for w in self.weather
            ),
            wind_speed_meters_per_second=self.wind.speed,
        )


class ErrorEnvelope(BaseModel):
    """Generic error body, e.g. ``{"cod": 404, "message": "city not found"}``.

    OpenWeather sends ``cod`` either as a number or as a string depending on
    the endpoint and error, so it is normalized to ``str`` here.
    """

    cod: Optional[str] = None
    message: Optional[str] = None

    @field_validator("cod", mode="before")
    @classmethod
    def _normalize_cod(cls, value: Any) -> Optional[str]:
        # bool is an int subclass but never a valid code
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value
        return None

    @field_validator("message", mode="before")
    @classmethod
    def _text_only(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @classmethod
    def probe(cls, body: bytes) -> Optional["ErrorEnvelope"]:
        """Return the decoded envelope, or None when ``body`` is not one."""
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return None


__all__ = [
    "ConditionEntry",
    "WeatherRecord",
    "ConditionPayload",
    "MainPayload",
    "WindPayload",
    "WeatherPayload",
    "ErrorEnvelope",
]
