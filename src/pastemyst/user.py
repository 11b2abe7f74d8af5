"""
User endpoints.
"""

from typing import Optional

from . import endpoints
from .config import get_logger
from .core.responses import parse_http_error_response
from .models import UserInfo
from .sync import sync_wrapper
from .transport import Transport, get_transport

logger = get_logger("user")


async def user_exists_async(
    username: str, *, transport: Optional[Transport] = None
) -> bool:
    """
    Check whether a user exists.

    Returns True on 200 and False on 404. Any other status raises
    ``HTTPStatusError``.
    """
    transport = transport or get_transport()
    url = endpoints.user_exists_url(username, transport.api_root)
    response = await transport.request("GET", url)

    if response.status_code == 200:
        return True
    if response.status_code == 404:
        return False
    raise parse_http_error_response(response)


async def get_user_async(
    username: str, *, transport: Optional[Transport] = None
) -> UserInfo:
    """
    Fetch a user's public profile.

    The existence endpoint is queried first. For a missing user a warning is
    logged and ``UserInfo.empty()`` is returned without fetching the profile.
    """
    transport = transport or get_transport()

    if not await user_exists_async(username, transport=transport):
        logger.warning(
            "The user '%s' does not exist and an empty object is returned.", username
        )
        return UserInfo.empty()

    url = endpoints.user_url(username, transport.api_root)
    return await transport.execute("GET", url, UserInfo)


user_exists = sync_wrapper(user_exists_async)
get_user = sync_wrapper(get_user_async)
