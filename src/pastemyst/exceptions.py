"""
Custom exceptions for the PasteMyst client.
"""

from typing import Dict, Any, Optional


class PasteMystError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NetworkError(PasteMystError):
    """Raised when the request never got a response (DNS, connect, TLS)."""

    pass


class RequestTimeoutError(NetworkError):
    """Raised when the request exceeds the transport timeout."""

    pass


class DecodeError(PasteMystError):
    """Raised when a response body is not JSON or does not match the expected record."""

    pass


class HTTPStatusError(PasteMystError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class NotFoundError(HTTPStatusError):
    """Raised when the requested paste, user or resource does not exist."""

    pass


class AuthorizationError(HTTPStatusError):
    """Raised when the token is missing, invalid, or lacks access."""

    pass


class LanguageNotFoundError(NotFoundError):
    """Raised when a language lookup matches nothing."""

    pass
