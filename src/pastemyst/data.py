"""
Language data endpoints.

Lookups that match nothing raise ``LanguageNotFoundError``.
"""

from typing import Optional

from . import endpoints
from .core.responses import (
    decode_payload,
    extract_status_message,
    parse_http_error_response,
    parse_json,
)
from .exceptions import LanguageNotFoundError
from .models import LanguageInfo
from .sync import sync_wrapper
from .transport import Transport, get_transport


async def _lookup(url: str, query: str, transport: Transport) -> LanguageInfo:
    response = await transport.request("GET", url)

    if response.status_code == 404:
        details = extract_status_message(response)
        raise LanguageNotFoundError(
            f"No language matches '{query}'", response.status_code, details
        )
    if not response.is_success:
        raise parse_http_error_response(response)

    data = parse_json(response)
    if isinstance(data, dict) and "name" not in data and "statusMessage" in data:
        raise LanguageNotFoundError(
            f"No language matches '{query}'", response.status_code, data
        )

    return decode_payload(data, LanguageInfo)


async def get_language_by_name_async(
    name: str, *, transport: Optional[Transport] = None
) -> LanguageInfo:
    """Look up a language by its display name, e.g. ``"Python"``."""
    transport = transport or get_transport()
    url = endpoints.language_by_name_url(name, transport.api_root)
    return await _lookup(url, name, transport)


async def get_language_by_extension_async(
    extension: str, *, transport: Optional[Transport] = None
) -> LanguageInfo:
    """Look up a language by file extension, without the dot, e.g. ``"rs"``."""
    transport = transport or get_transport()
    url = endpoints.language_by_extension_url(extension, transport.api_root)
    return await _lookup(url, extension, transport)


get_language_by_name = sync_wrapper(get_language_by_name_async)
get_language_by_extension = sync_wrapper(get_language_by_extension_async)
