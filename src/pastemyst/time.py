"""
Time conversion endpoint.
"""

from enum import Enum
from typing import Optional, Union

from . import endpoints
from .config import get_logger
from .constants import ExpiresIn
from .models import ExpiryResult
from .sync import sync_wrapper
from .transport import Transport, get_transport

logger = get_logger("time")


async def expires_into_unix_async(
    created_at: int,
    expires_in: Union[ExpiresIn, str],
    *,
    transport: Optional[Transport] = None,
) -> int:
    """
    Convert a creation time and expiry tag into the unix time of deletion.

    An unknown tag is not sent to the server: a warning is logged and 0 is
    returned.

    Example:
        >>> await expires_into_unix_async(1588441258, ExpiresIn.ONE_WEEK)
        1589046058
    """
    tag = expires_in.value if isinstance(expires_in, Enum) else expires_in

    if not ExpiresIn.is_valid(tag):
        logger.warning(
            "The given expires timestamp is not valid and 0 will be returned."
        )
        return 0

    transport = transport or get_transport()
    url = endpoints.expires_in_to_unix_url(created_at, tag, transport.api_root)
    response = await transport.execute("GET", url, ExpiryResult)
    return response.result


expires_into_unix = sync_wrapper(expires_into_unix_async)
