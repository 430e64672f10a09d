"""Game error taxonomy.

Each error carries the HTTP status and the machine-readable ``error`` string
the transport layer renders as ``{"error": ..., "message": ...}``.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for expected, client-visible failures."""

    status_code: int = 500
    error: str = "Internal Server Error"
    default_message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message or self.error)

    def to_body(self) -> dict[str, str]:
        body = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


class StoreUnbound(GameError):
    """No store adapter is configured. Not retryable without a config fix."""

    status_code = 500
    error = "KV_NOT_BOUND"
    default_message = "Game store is not bound. Set LUMEN_STORE_BACKEND and restart the service."


class NotInitialized(GameError):
    """Required global records are missing. Run initialization first."""

    status_code = 503
    error = "KV_NOT_INITIALIZED"
    default_message = "Game data is not initialized. Call /api/init first."


class InvalidRequest(GameError):
    status_code = 400
    error = "Invalid request"


class CityNotFound(GameError):
    status_code = 404
    error = "City not found"


class PlayerNotFound(GameError):
    status_code = 404
    error = "Player not found"
