from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from .errors import WeatherError
from .models import ErrorEnvelope, WeatherPayload, WeatherRecord

logger = logging.getLogger(__name__)


def _body_text(body: bytes) -> Optional[str]:
    if not body:
        return None
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None


def probe_error_message(body: bytes) -> Optional[str]:
    """Best-effort provider message for an error response.

    Prefers ``message`` from the JSON error envelope and falls back to the raw
    body text. Returns None when neither is available.
    """
    envelope = ErrorEnvelope.probe(body)
    if envelope is not None and envelope.message is not None:
        return envelope.message
    return _body_text(body)


def _classify(status: int, message: Optional[str]) -> WeatherError:
    if status == 401:
        return WeatherError.invalid_api_key(message)
    if status == 404:
        return WeatherError.city_not_found(message)
    if status == 429:
        return WeatherError.rate_limited(message)
    return WeatherError.server(status, message)


def interpret(status: int, body: bytes) -> WeatherRecord:
    """Turn an HTTP status and body into a WeatherRecord.

    Any status other than 200 raises the matching WeatherError without
    looking at the success schema. A 200 body that does not match the schema
    raises WeatherError(DECODING) wrapping the validation error.
    """
    if status != 200:
        logger.debug("Provider returned %s: %r", status, _body_text(body))
        raise _classify(status, probe_error_message(body))

    try:
        payload = WeatherPayload.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("Failed to decode weather payload: %s; raw body: %r", exc, _body_text(body))
        raise WeatherError.decoding(exc) from exc
    return payload.to_record()


__all__ = ["interpret", "probe_error_message"]
