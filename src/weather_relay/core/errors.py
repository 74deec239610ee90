# src/weather_relay/core/errors.py
from __future__ import annotations

GENERIC_UPSTREAM_MESSAGE = "Error fetching weather data from external API"


class RelayError(Exception):
    """Base for every failure the relay reports to its caller as `{"error": ...}`."""
    status_code: int = 500
    message: str = "Internal server error."

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidRequest(RelayError):
    status_code = 400
    message = "City parameter is required."


class ServerMisconfigured(RelayError):
    status_code = 500
    message = "Server is not configured with the API key."


class UpstreamError(RelayError):
    """Provider answered with a non-2xx status; status and message are forwarded."""
    message = GENERIC_UPSTREAM_MESSAGE

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message, status_code)


class TransportFailure(RelayError):
    status_code = 500
    message = "Failed to fetch weather data."


class MalformedUpstreamResponse(TransportFailure):
    """2xx body missing fields we map (e.g. an empty `weather` list)."""
