"""Where the client gets its bearer credential from."""

from typing import Protocol


class AccessTokenSource(Protocol):
    """The signed-in session. ``None`` means nobody is signed in."""

    async def get_access_token(self) -> str | None: ...


class StaticTokenSession:
    """A session holding a token obtained elsewhere (e.g. NOTES_ACCESS_TOKEN)."""

    def __init__(self, access_token: str | None = None):
        self._access_token = access_token or None

    async def get_access_token(self) -> str | None:
        return self._access_token
