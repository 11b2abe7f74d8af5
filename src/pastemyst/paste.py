"""
Paste endpoints: fetch, create, edit and delete pastes.

Every operation is a coroutine (``*_async``) with a blocking twin of the same
name without the suffix. Private variants send the caller's token verbatim
in the ``Authorization`` header.
"""

from typing import Optional

from . import endpoints
from .models import CreatePayload, EditPayload, Paste
from .sync import sync_wrapper
from .transport import Transport, get_transport


async def get_paste_async(
    paste_id: str, *, transport: Optional[Transport] = None
) -> Paste:
    """Fetch a public paste by id."""
    transport = transport or get_transport()
    url = endpoints.paste_url(paste_id, transport.api_root)
    return await transport.execute("GET", url, Paste)


async def get_private_paste_async(
    paste_id: str, auth_token: str, *, transport: Optional[Transport] = None
) -> Paste:
    """Fetch a paste that needs the owner's token to read."""
    transport = transport or get_transport()
    url = endpoints.paste_url(paste_id, transport.api_root)
    return await transport.execute("GET", url, Paste, auth_token=auth_token)


async def create_paste_async(
    payload: CreatePayload, *, transport: Optional[Transport] = None
) -> Paste:
    """
    Create an anonymous paste.

    The server assigns the id, timestamps and pasty ids and answers with the
    full paste.

    Example:
        >>> paste = await create_paste_async(
        ...     CreatePayload(title="hello", pasties=[Pasty(code="print(1)")])
        ... )
        >>> paste.id
    """
    transport = transport or get_transport()
    url = endpoints.create_paste_url(transport.api_root)
    return await transport.execute("POST", url, Paste, body=payload.to_json_dict())


async def create_private_paste_async(
    payload: CreatePayload, auth_token: str, *, transport: Optional[Transport] = None
) -> Paste:
    """Create a paste owned by the account the token belongs to."""
    transport = transport or get_transport()
    url = endpoints.create_paste_url(transport.api_root)
    return await transport.execute(
        "POST", url, Paste, body=payload.to_json_dict(), auth_token=auth_token
    )


async def edit_paste_async(
    payload: EditPayload,
    paste_id: str,
    auth_token: str,
    *,
    transport: Optional[Transport] = None,
) -> Paste:
    """
    Edit a paste.

    The pasty list in ``payload`` replaces the current one, so unchanged
    pasties have to be sent along with their ids.
    """
    transport = transport or get_transport()
    url = endpoints.paste_url(paste_id, transport.api_root)
    return await transport.execute(
        "PATCH", url, Paste, body=payload.to_json_dict(), auth_token=auth_token
    )


async def delete_paste_async(
    paste_id: str, auth_token: str, *, transport: Optional[Transport] = None
) -> int:
    """Delete a paste and return the raw HTTP status code (200 on success)."""
    transport = transport or get_transport()
    url = endpoints.paste_url(paste_id, transport.api_root)
    response = await transport.request("DELETE", url, auth_token=auth_token)
    return response.status_code


get_paste = sync_wrapper(get_paste_async)
get_private_paste = sync_wrapper(get_private_paste_async)
create_paste = sync_wrapper(create_paste_async)
create_private_paste = sync_wrapper(create_private_paste_async)
edit_paste = sync_wrapper(edit_paste_async)
delete_paste = sync_wrapper(delete_paste_async)
