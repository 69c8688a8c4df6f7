"""Exceptions raised by the REST side of the client."""

from typing import Any, Optional


class WaxpeerError(Exception):
    """Base class for all client errors."""
    pass


class RateLimitExceeded(WaxpeerError):
    """Local rate limit hit; the request was never sent."""

    def __init__(self, endpoint: str, message: str = "Too many requests, try again later") -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.message = message

    def __str__(self):
        return f"RateLimitExceeded: {self.endpoint} - {self.message}"


class WaxpeerRequestError(WaxpeerError):
    """Transport failure or timeout while talking to the REST API."""

    def __init__(self, method: str, path: str, message: str) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.message = message

    def __str__(self):
        return f"WaxpeerRequestError: {self.method} {self.path} - {self.message}"


class WaxpeerHTTPError(WaxpeerError):
    def __init__(self, status: int, path: str, payload: Optional[Any] = None) -> None:
        super().__init__(f"HTTP {status} for {path}")
        self.status = status
        self.path = path
        self.payload = payload

    def __str__(self):
        return f"WaxpeerHTTPError: {self.status} - {self.path} - {self.payload}"
