"""
Pure functions for interpreting API responses.

Functions for decoding bodies into records and mapping failed requests and
error statuses to client exceptions, without I/O dependencies.
"""

from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import (
    AuthorizationError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
    PasteMystError,
    RequestTimeoutError,
)

M = TypeVar("M", bound=BaseModel)


def parse_json(response: httpx.Response) -> Any:
    """Parse a response body as JSON."""
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(
            f"Response is not valid JSON: {e}",
            {"status_code": response.status_code, "body": response.text},
        ) from e


def decode_response(response: httpx.Response, model: Type[M]) -> M:
    """Decode a JSON response body into ``model``."""
    return decode_payload(parse_json(response), model)


def decode_payload(data: Any, model: Type[M]) -> M:
    """Validate already parsed JSON against ``model``."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response does not match {model.__name__}",
            {"errors": e.errors(include_url=False)},
        ) from e


def extract_status_message(response: httpx.Response) -> Dict[str, Any]:
    """Return the JSON error body if it has one, otherwise the raw text."""
    try:
        data = response.json()
    except ValueError:
        return {"body": response.text} if response.text else {}

    if isinstance(data, dict):
        return data
    return {"body": data}


def map_status_code_to_exception(
    status_code: int, message: str, details: Dict[str, Any]
) -> HTTPStatusError:
    """Map HTTP status codes to client exceptions."""
    if status_code == 404:
        return NotFoundError(f"Not found: {message}", status_code, details)
    elif status_code in (401, 403):
        return AuthorizationError(
            f"Not authorized ({status_code}): {message}", status_code, details
        )
    else:
        return HTTPStatusError(
            f"Unexpected status ({status_code}): {message}", status_code, details
        )


def parse_http_error_response(response: httpx.Response) -> HTTPStatusError:
    """Build the exception for a non-success response."""
    details = extract_status_message(response)
    message = details.get("statusMessage") or response.reason_phrase
    if not message:
        message = f"HTTP {response.status_code}"
    return map_status_code_to_exception(response.status_code, str(message), details)


def map_request_exception(
    exception: httpx.RequestError, method: str, url: str
) -> PasteMystError:
    """Map transport failures to client exceptions."""
    details = {"method": method, "url": url}

    if isinstance(exception, httpx.TimeoutException):
        return RequestTimeoutError(f"Request timed out: {method} {url}", details)
    return NetworkError(f"Request failed: {method} {url}: {exception}", details)
