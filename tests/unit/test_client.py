"""
Tests for PasteMystClient.
"""

import httpx
import pytest

from pastemyst import PasteMystClient
from pastemyst.config import Settings
from pastemyst.exceptions import LanguageNotFoundError, NotFoundError
from pastemyst.models import CreatePayload, EditPayload, Pasty, UserInfo


@pytest.fixture
def make_client(fake_api):
    def factory(auth_token=None):
        return PasteMystClient(
            auth_token=auth_token,
            settings=Settings(_env_file=None),
            http_transport=httpx.MockTransport(fake_api),
        )

    return factory


def payload(**overrides):
    fields = dict(title="client paste", pasties=[Pasty(title="a", code="1")])
    fields.update(overrides)
    return CreatePayload(**fields)


class TestClientWithToken:
    async def test_private_lifecycle(self, make_client, owner_token):
        client = make_client(owner_token)

        created = await client.create_paste(payload(is_private=True))
        assert created.owner_id == "owner1"

        fetched = await client.get_paste(created.id)
        assert fetched.is_private is True

        edited = await client.edit_paste(
            EditPayload(title="new", is_private=True, pasties=list(fetched.pasties)),
            created.id,
        )
        assert edited.title == "new"

        assert await client.delete_paste(created.id) == 200
        with pytest.raises(NotFoundError):
            await client.get_paste(created.id)

    def test_sync_lifecycle(self, make_client, owner_token):
        client = make_client(owner_token)

        created = client.create_paste_sync(payload())
        assert client.get_paste_sync(created.id).title == "client paste"
        assert client.delete_paste_sync(created.id) == 200
        assert client.delete_paste_sync(created.id) == 404

    async def test_token_header_sent(self, make_client, fake_api, owner_token):
        client = make_client(owner_token)
        await client.create_paste(payload())

        assert fake_api.requests[-1].headers["Authorization"] == owner_token


class TestClientWithoutToken:
    async def test_public_calls(self, make_client, fake_api):
        client = make_client()

        created = await client.create_paste(payload())
        assert created.owner_id == ""
        assert (await client.get_paste(created.id)).id == created.id
        assert "Authorization" not in fake_api.requests[-1].headers

    async def test_token_required_operations(self, make_client, fake_api):
        client = make_client()

        with pytest.raises(ValueError, match="requires an auth token"):
            await client.delete_paste("x")
        with pytest.raises(ValueError, match="requires an auth token"):
            await client.edit_paste(EditPayload(pasties=[Pasty(code="x")]), "x")
        assert fake_api.requests == []

    async def test_lookups(self, make_client):
        client = make_client()

        assert await client.user_exists("alice") is True
        assert await client.get_user("ghost") == UserInfo.empty()
        assert (await client.get_language_by_name("Python")).mode == "python"
        assert (await client.get_language_by_extension("py")).name == "Python"
        assert await client.expires_into_unix(100, "1h") == 3700
        assert await client.expires_into_unix(100, "bogus") == 0

        with pytest.raises(LanguageNotFoundError):
            await client.get_language_by_name("Nope")

    def test_sync_lookups(self, make_client):
        client = make_client()

        assert client.user_exists_sync("alice") is True
        assert client.get_user_sync("alice").username == "alice"
        assert client.get_language_by_name_sync("Plain Text").mimes == ["text/plain"]
        assert client.get_language_by_extension_sync("pyw").name == "Python"
        assert client.expires_into_unix_sync(100, "never") == 0
