"""
PasteMystClient: one token and one transport shared by every operation.
"""

from typing import Optional, Union

import httpx

from . import data, paste, time, user
from .config import Settings, get_logger, setup_logging
from .constants import ExpiresIn
from .models import CreatePayload, EditPayload, LanguageInfo, Paste, UserInfo
from .sync import SyncClientMixin
from .transport import Transport


class PasteMystClient(SyncClientMixin):
    """
    Client bound to one account token and one transport.

    All methods are coroutines; each has a blocking ``*_sync`` twin. When a
    token is bound, pastes are fetched and created through the private
    endpoints so the account's own private pastes are reachable.

    Examples:
        >>> client = PasteMystClient(auth_token=os.environ["PASTEMYST_TOKEN"])
        >>> created = await client.create_paste(payload)
        >>> status = client.delete_paste_sync(created.id)
    """

    def __init__(
        self,
        auth_token: Optional[str] = None,
        settings: Optional[Settings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.auth_token = auth_token
        self.transport = Transport(settings, http_transport=http_transport)
        self.logger = get_logger("client")

        if self.transport.settings.debug:
            setup_logging(self.transport.settings)
            self.logger.debug("PasteMystClient using %s", self.transport.api_root)

    def _require_token(self, operation: str) -> str:
        if not self.auth_token:
            raise ValueError(f"{operation} requires an auth token")
        return self.auth_token

    async def get_paste(self, paste_id: str) -> Paste:
        if self.auth_token:
            return await paste.get_private_paste_async(
                paste_id, self.auth_token, transport=self.transport
            )
        return await paste.get_paste_async(paste_id, transport=self.transport)

    async def create_paste(self, payload: CreatePayload) -> Paste:
        if self.auth_token:
            return await paste.create_private_paste_async(
                payload, self.auth_token, transport=self.transport
            )
        return await paste.create_paste_async(payload, transport=self.transport)

    async def edit_paste(self, payload: EditPayload, paste_id: str) -> Paste:
        token = self._require_token("edit_paste")
        return await paste.edit_paste_async(
            payload, paste_id, token, transport=self.transport
        )

    async def delete_paste(self, paste_id: str) -> int:
        token = self._require_token("delete_paste")
        status = await paste.delete_paste_async(
            paste_id, token, transport=self.transport
        )
        if status != 200:
            self.logger.info("Deleting paste %s returned status %d", paste_id, status)
        return status

    async def get_user(self, username: str) -> UserInfo:
        return await user.get_user_async(username, transport=self.transport)

    async def user_exists(self, username: str) -> bool:
        return await user.user_exists_async(username, transport=self.transport)

    async def get_language_by_name(self, name: str) -> LanguageInfo:
        return await data.get_language_by_name_async(name, transport=self.transport)

    async def get_language_by_extension(self, extension: str) -> LanguageInfo:
        return await data.get_language_by_extension_async(
            extension, transport=self.transport
        )

    async def expires_into_unix(
        self, created_at: int, expires_in: Union[ExpiresIn, str]
    ) -> int:
        return await time.expires_into_unix_async(
            created_at, expires_in, transport=self.transport
        )
