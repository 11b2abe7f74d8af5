"""
Pure functions for building PasteMyst API addresses and headers.

Identifiers are concatenated as given: nothing is validated or URL-encoded.
"""

from typing import Dict, Optional

API_ROOT = "https://paste.myst.rs/api/v2/"

AUTH_HEADER = "Authorization"
USER_AGENT = "pastemyst-python/1.0"


def paste_url(paste_id: str, api_root: str = API_ROOT) -> str:
    return f"{api_root}paste/{paste_id}"


def create_paste_url(api_root: str = API_ROOT) -> str:
    return f"{api_root}paste"


def language_by_name_url(name: str, api_root: str = API_ROOT) -> str:
    return f"{api_root}data/language?name={name}"


def language_by_extension_url(extension: str, api_root: str = API_ROOT) -> str:
    return f"{api_root}data/languageExt?extension={extension}"


def user_url(username: str, api_root: str = API_ROOT) -> str:
    return f"{api_root}user/{username}"


def user_exists_url(username: str, api_root: str = API_ROOT) -> str:
    return f"{user_url(username, api_root)}/exists"


def expires_in_to_unix_url(
    created_at: int, expires_in: str, api_root: str = API_ROOT
) -> str:
    return (
        f"{api_root}time/expiresInToUnixTime"
        f"?createdAt={created_at}&expiresIn={expires_in}"
    )


def build_headers(
    auth_token: Optional[str] = None, user_agent: str = USER_AGENT
) -> Dict[str, str]:
    """Build request headers.

    The token is sent verbatim, without a scheme. Any string, even an empty
    one, is attached; only ``None`` leaves the header out.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    if auth_token is not None:
        headers[AUTH_HEADER] = auth_token
    return headers
