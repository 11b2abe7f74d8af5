import itertools
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from pastemyst.config import Settings
from pastemyst.transport import Transport

API_PREFIX = "/api/v2/"
OWNER_TOKEN = "secret-token"
OWNER_ID = "owner1"
NOW = 1588441258

EXPIRY_SECONDS = {
    "never": 0,
    "1h": 3600,
    "2h": 7200,
    "10h": 36000,
    "1d": 86400,
    "2d": 172800,
    "1w": 604800,
    "1m": 2592000,
    "1y": 31536000,
}


class FakePasteMyst:
    """
    In-memory stand-in for the PasteMyst API, used as an httpx.MockTransport
    handler. Every request it sees is recorded in ``requests``.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.pastes: Dict[str, Dict[str, Any]] = {}
        self.tokens = {OWNER_TOKEN: OWNER_ID}
        self.users = {
            "alice": {
                "_id": "u1",
                "username": "alice",
                "avatarUrl": "https://paste.myst.rs/static/avatar/alice.png",
                "defaultLang": "Python",
                "publicProfile": True,
                "supporterLength": 3,
                "contributor": False,
            }
        }
        self.languages = [
            {
                "name": "Python",
                "mode": "python",
                "mimes": ["text/x-python"],
                "ext": ["py", "pyw"],
                "color": "#3572A5",
            },
            {
                "name": "Plain Text",
                "mode": "text",
                "mimes": ["text/plain"],
            },
        ]
        self.overrides: Dict[tuple, httpx.Response] = {}
        self._ids = itertools.count(1)

    def override(self, method: str, path: str, response: httpx.Response) -> None:
        """Answer ``method path`` with a fixed response."""
        self.overrides[(method, API_PREFIX + path)] = response

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == API_PREFIX + path]

    def _next_id(self) -> str:
        return f"id{next(self._ids)}"

    def _owner(self, request: httpx.Request) -> str:
        return self.tokens.get(request.headers.get("Authorization", ""), "")

    @staticmethod
    def _error(status: int, message: str) -> httpx.Response:
        return httpx.Response(status, json={"statusMessage": message})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        override = self.overrides.get((request.method, request.url.path))
        if override is not None:
            return override

        parts = request.url.path[len(API_PREFIX):].split("/")
        resource = parts[0]

        if resource == "paste":
            return self._paste(request, parts[1:])
        if resource == "user":
            return self._user(request, parts[1:])
        if resource == "data":
            return self._language(request, parts[1])
        if resource == "time":
            return self._time(request)
        return self._error(404, "Not found.")

    def _paste(self, request: httpx.Request, parts: List[str]) -> httpx.Response:
        owner = self._owner(request)

        if not parts:
            body = json.loads(request.content)
            if body.get("isPrivate") and not owner:
                return self._error(401, "Unauthorized.")
            return self._create(body, owner)

        paste = self.pastes.get(parts[0])
        if paste is None or (paste["isPrivate"] and paste["ownerId"] != owner):
            return self._error(404, "Requested paste doesn't exist.")

        if request.method == "GET":
            return httpx.Response(200, json=paste)
        if paste["ownerId"] == "" or paste["ownerId"] != owner:
            return self._error(401, "Unauthorized.")
        if request.method == "DELETE":
            del self.pastes[parts[0]]
            return httpx.Response(200)
        if request.method == "PATCH":
            return self._edit(paste, json.loads(request.content))
        return self._error(405, "Method not allowed.")

    def _pasties(self, pasties: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [
            {
                "_id": pasty.get("_id") or self._next_id(),
                "language": pasty.get("language", "Autodetect"),
                "title": pasty.get("title", ""),
                "code": pasty["code"],
            }
            for pasty in pasties
        ]

    def _create(self, body: Dict[str, Any], owner: str) -> httpx.Response:
        if not body.get("pasties"):
            return self._error(400, "Pasties cannot be empty.")

        expires_in = body.get("expiresIn", "never")
        seconds = EXPIRY_SECONDS[expires_in]
        paste = {
            "_id": self._next_id(),
            "ownerId": owner,
            "title": body.get("title", ""),
            "createdAt": NOW,
            "expiresIn": expires_in,
            "deletesAt": NOW + seconds if seconds else 0,
            "stars": 0,
            "isPrivate": body.get("isPrivate", False),
            "isPublic": body.get("isPublic", False),
            "tags": [t.strip() for t in body.get("tags", "").split(",") if t.strip()],
            "pasties": self._pasties(body["pasties"]),
            "edits": [],
        }
        self.pastes[paste["_id"]] = paste
        return httpx.Response(200, json=paste)

    def _edit(self, paste: Dict[str, Any], body: Dict[str, Any]) -> httpx.Response:
        edit_id = self._next_id()
        if body.get("title", paste["title"]) != paste["title"]:
            paste["edits"].append(
                {
                    "_id": self._next_id(),
                    "editId": edit_id,
                    "editType": 0,
                    "metadata": [],
                    "edit": paste["title"],
                    "editedAt": NOW + 60,
                }
            )
            paste["title"] = body["title"]

        old_code = {p["_id"]: p["code"] for p in paste["pasties"]}
        pasties = self._pasties(body["pasties"])
        for pasty in pasties:
            previous = old_code.get(pasty["_id"])
            if previous is not None and previous != pasty["code"]:
                paste["edits"].append(
                    {
                        "_id": self._next_id(),
                        "editId": edit_id,
                        "editType": 3,
                        "metadata": [pasty["_id"]],
                        "edit": previous,
                        "editedAt": NOW + 60,
                    }
                )

        paste["pasties"] = pasties
        paste["isPrivate"] = body.get("isPrivate", paste["isPrivate"])
        paste["isPublic"] = body.get("isPublic", paste["isPublic"])
        paste["tags"] = [t.strip() for t in body.get("tags", "").split(",") if t.strip()]
        return httpx.Response(200, json=paste)

    def _user(self, request: httpx.Request, parts: List[str]) -> httpx.Response:
        user = self.users.get(parts[0])
        if len(parts) > 1 and parts[1] == "exists":
            return httpx.Response(200 if user else 404)
        if user is None:
            return self._error(404, "User not found.")
        return httpx.Response(200, json=user)

    def _language(self, request: httpx.Request, kind: str) -> httpx.Response:
        match: Optional[Dict[str, Any]] = None
        if kind == "language":
            name = request.url.params.get("name", "").lower()
            match = next((l for l in self.languages if l["name"].lower() == name), None)
        elif kind == "languageExt":
            ext = request.url.params.get("extension", "")
            match = next((l for l in self.languages if ext in l.get("ext", [])), None)

        if match is None:
            return self._error(404, "Language not found.")
        return httpx.Response(200, json=match)

    def _time(self, request: httpx.Request) -> httpx.Response:
        created_at = int(request.url.params["createdAt"])
        seconds = EXPIRY_SECONDS[request.url.params["expiresIn"]]
        return httpx.Response(200, json={"result": created_at + seconds if seconds else 0})


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def fake_api():
    return FakePasteMyst()


@pytest.fixture
def transport(settings, fake_api):
    return Transport(settings, http_transport=httpx.MockTransport(fake_api))


@pytest.fixture
def owner_token():
    return OWNER_TOKEN
