"""
PasteMyst client

Python client for the PasteMyst v2 REST API.
"""

from .client import PasteMystClient
from .constants import EditType, ExpiresIn, Language, LANGUAGES
from .models import (
    CreatePayload,
    EditHistory,
    EditPayload,
    LanguageInfo,
    Paste,
    Pasty,
    UserInfo,
)
from .paste import (
    create_paste,
    create_paste_async,
    create_private_paste,
    create_private_paste_async,
    delete_paste,
    delete_paste_async,
    edit_paste,
    edit_paste_async,
    get_paste,
    get_paste_async,
    get_private_paste,
    get_private_paste_async,
)
from .user import get_user, get_user_async, user_exists, user_exists_async
from .data import (
    get_language_by_extension,
    get_language_by_extension_async,
    get_language_by_name,
    get_language_by_name_async,
)
from .time import expires_into_unix, expires_into_unix_async
from .exceptions import (
    PasteMystError,
    NetworkError,
    RequestTimeoutError,
    DecodeError,
    HTTPStatusError,
    NotFoundError,
    AuthorizationError,
    LanguageNotFoundError,
)

__version__ = "1.0.0"

__all__ = [
    "PasteMystClient",
    # Records
    "Paste",
    "Pasty",
    "EditHistory",
    "CreatePayload",
    "EditPayload",
    "LanguageInfo",
    "UserInfo",
    # Vocabularies
    "ExpiresIn",
    "EditType",
    "Language",
    "LANGUAGES",
    # Pastes
    "get_paste",
    "get_paste_async",
    "get_private_paste",
    "get_private_paste_async",
    "create_paste",
    "create_paste_async",
    "create_private_paste",
    "create_private_paste_async",
    "edit_paste",
    "edit_paste_async",
    "delete_paste",
    "delete_paste_async",
    # Users
    "get_user",
    "get_user_async",
    "user_exists",
    "user_exists_async",
    # Language data
    "get_language_by_name",
    "get_language_by_name_async",
    "get_language_by_extension",
    "get_language_by_extension_async",
    # Time
    "expires_into_unix",
    "expires_into_unix_async",
    # Errors
    "PasteMystError",
    "NetworkError",
    "RequestTimeoutError",
    "DecodeError",
    "HTTPStatusError",
    "NotFoundError",
    "AuthorizationError",
    "LanguageNotFoundError",
]
