from __future__ import annotations

from enum import Enum
from typing import Optional


class WeatherErrorKind(str, Enum):
    BAD_URL = "bad_url"
    INVALID_API_KEY = "invalid_api_key"
    CITY_NOT_FOUND = "city_not_found"
    RATE_LIMITED = "rate_limited"
    SERVER = "server"
    DECODING = "decoding"
    NETWORK = "network"
    UNKNOWN = "unknown"


_DEFAULT_MESSAGES = {
    WeatherErrorKind.BAD_URL: "Nieprawidłowy adres URL.",
    WeatherErrorKind.INVALID_API_KEY: "Nieprawidłowy klucz API.",
    WeatherErrorKind.CITY_NOT_FOUND: "Nie znaleziono miasta.",
    WeatherErrorKind.RATE_LIMITED: "Przekroczono limit zapytań. Spróbuj ponownie później.",
    WeatherErrorKind.UNKNOWN: "Nieznany błąd.",
}


class WeatherError(Exception):
    """Raised when a weather lookup fails.

    The set of failures is closed: ``kind`` tells which one happened and the
    remaining attributes carry whatever detail that kind has.

    - ``message``: text recovered from the provider, if any
    - ``status``: HTTP status, only for ``SERVER``
    - ``underlying``: the original exception, for ``DECODING`` and ``NETWORK``
    """

    def __init__(
        self,
        kind: WeatherErrorKind,
        *,
        message: Optional[str] = None,
        status: Optional[int] = None,
        underlying: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status = status
        self.underlying = underlying
        super().__init__(self.user_message)

    @classmethod
    def bad_url(cls) -> "WeatherError":
        return cls(WeatherErrorKind.BAD_URL)

    @classmethod
    def invalid_api_key(cls, message: Optional[str] = None) -> "WeatherError":
        return cls(WeatherErrorKind.INVALID_API_KEY, message=message)

    @classmethod
    def city_not_found(cls, message: Optional[str] = None) -> "WeatherError":
        return cls(WeatherErrorKind.CITY_NOT_FOUND, message=message)

    @classmethod
    def rate_limited(cls, message: Optional[str] = None) -> "WeatherError":
        return cls(WeatherErrorKind.RATE_LIMITED, message=message)

    @classmethod
    def server(cls, status: int, message: Optional[str] = None) -> "WeatherError":
        return cls(WeatherErrorKind.SERVER, message=message, status=status)

    @classmethod
    def decoding(cls, underlying: BaseException) -> "WeatherError":
        return cls(WeatherErrorKind.DECODING, underlying=underlying)

    @classmethod
    def network(cls, underlying: BaseException) -> "WeatherError":
        return cls(WeatherErrorKind.NETWORK, underlying=underlying)

    @classmethod
    def unknown(cls, message: Optional[str] = None) -> "WeatherError":
        return cls(WeatherErrorKind.UNKNOWN, message=message)

    @property
    def user_message(self) -> str:
        """Human readable text, never empty."""
        if self.kind is WeatherErrorKind.DECODING:
            return f"Błąd dekodowania danych: {_describe(self.underlying)}"
        if self.kind is WeatherErrorKind.NETWORK:
            return f"Błąd sieci: {_describe(self.underlying)}"
        if self.message:
            return self.message
        if self.kind is WeatherErrorKind.SERVER:
            return f"Błąd serwera (kod: {self.status})."
        return _DEFAULT_MESSAGES[self.kind]

    def __repr__(self) -> str:
        return (
            f"WeatherError(kind={self.kind.value!r}, status={self.status!r}, "
            f"message={self.message!r}, underlying={self.underlying!r})"
        )


def _describe(exc: Optional[BaseException]) -> str:
    if exc is None:
        return "brak szczegółów"
    # CancelledError and some timeouts carry no text
    return str(exc) or exc.__class__.__name__


__all__ = ["WeatherError", "WeatherErrorKind"]
