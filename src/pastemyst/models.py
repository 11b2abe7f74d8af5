"""
Data models for PasteMyst API records.

Every model is an immutable snapshot. Wire names are camelCase and are kept as
aliases so responses decode directly and payloads encode back to the exact
field names the API expects; construction by Python field name works too.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import EditType, ExpiresIn, Language


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize with wire names, leaving out unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class Pasty(_Record):
    """
    A single file within a paste.

    ``id`` is assigned by the server and stays unset when building a pasty
    for a create or edit payload.

    Example:
        >>> Pasty(title="main.py", language=Language.PYTHON, code="print(1)")
    """

    id: Optional[str] = Field(default=None, alias="_id")
    language: str = Language.AUTODETECT
    title: str = ""
    code: str

    @field_validator("language", mode="before")
    @classmethod
    def _language_value(cls, value: Any) -> Any:
        return _enum_value(value)


class EditHistory(_Record):
    """
    One recorded change to a paste.

    Attributes:
        id: Identifier of this entry
        edit_id: Group identifier shared by edits made at the same time
        edit_type: Which field changed
        metadata: Extra data, mostly the id of the affected pasty
        edit: Previous value of the changed field
        edited_at: Unix time of the edit
    """

    id: str = Field(alias="_id")
    edit_id: str = Field(alias="editId")
    edit_type: EditType = Field(alias="editType")
    metadata: List[str] = Field(default_factory=list)
    edit: str
    edited_at: int = Field(alias="editedAt")


class Paste(_Record):
    """
    A paste as returned by the API.

    ``owner_id`` is an empty string for anonymous pastes and ``deletes_at``
    is 0 for pastes that never expire.
    """

    id: str = Field(alias="_id")
    owner_id: str = Field(alias="ownerId")
    title: str
    created_at: int = Field(alias="createdAt")
    expires_in: str = Field(alias="expiresIn")
    deletes_at: int = Field(alias="deletesAt")
    stars: int
    is_private: bool = Field(alias="isPrivate")
    is_public: bool = Field(alias="isPublic")
    tags: List[str] = Field(default_factory=list)
    pasties: List[Pasty]
    edits: List[EditHistory] = Field(default_factory=list)

    @property
    def has_owner(self) -> bool:
        return self.owner_id != ""

    @property
    def expires(self) -> bool:
        return self.deletes_at != 0


class _PastePayload(_Record):
    title: str = ""
    is_private: bool = Field(default=False, alias="isPrivate")
    is_public: bool = Field(default=False, alias="isPublic")
    tags: str = ""
    pasties: List[Pasty]

    @field_validator("tags", mode="before")
    @classmethod
    def _join_tags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return value


class EditPayload(_PastePayload):
    """
    Body of a paste edit.

    The API replaces the whole pasty list, so every pasty has to be resent
    even when only one of them changes. Pasties that keep their ``id`` are
    updated in place; pasties without one are added. Expiry cannot be edited.
    """


class CreatePayload(_PastePayload):
    """
    Body of a paste creation.

    ``tags`` is sent as one comma separated string; a list or tuple is joined.

    Example:
        >>> CreatePayload(
        ...     title="snippets",
        ...     expires_in=ExpiresIn.ONE_DAY,
        ...     tags=["python", "demo"],
        ...     pasties=[Pasty(title="a.py", code="pass")],
        ... )
    """

    expires_in: str = Field(default=ExpiresIn.NEVER.value, alias="expiresIn")

    @field_validator("expires_in", mode="before")
    @classmethod
    def _expires_in_value(cls, value: Any) -> Any:
        return _enum_value(value)


class LanguageInfo(_Record):
    """Language metadata from the data endpoints."""

    name: str
    mode: str
    mimes: List[str] = Field(default_factory=list)
    ext: Optional[List[str]] = None
    color: Optional[str] = None


class UserInfo(_Record):
    """
    Public profile of a user.

    ``supporter_length`` is the number of months the user has supported the
    service, 0 if never.
    """

    id: str = Field(alias="_id")
    username: str
    avatar_url: str = Field(alias="avatarUrl")
    default_lang: str = Field(alias="defaultLang")
    public_profile: bool = Field(alias="publicProfile")
    supporter_length: int = Field(alias="supporterLength")
    contributor: bool

    @classmethod
    def empty(cls) -> "UserInfo":
        """Zero-valued record returned for users that do not exist."""
        return cls(
            id="",
            username="",
            avatar_url="",
            default_lang="",
            public_profile=False,
            supporter_length=0,
            contributor=False,
        )

    @property
    def exists(self) -> bool:
        return self.id != ""


class ExpiryResult(_Record):
    result: int
