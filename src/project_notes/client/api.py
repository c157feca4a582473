"""Typed wrapper around the project notes functions.

Every call resolves to exactly one of ``ApiData`` or ``ApiError``. Expected
failures (no session, error status, network trouble, unreadable body) are
values, never exceptions. Only misuse of the wrapper raises.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

import httpx
from pydantic import BaseModel, ValidationError

from src.project_notes.client.session import AccessTokenSource

NOT_AUTHENTICATED = "Not authenticated"
DEFAULT_ERROR = "An error occurred"

SUPPORTED_METHODS = frozenset({"GET", "POST", "DELETE"})
_FUNCTION_NAME = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class Project(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    created_at: datetime


class Note(BaseModel):
    id: UUID
    project_id: UUID
    content: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class ApiData[T]:
    data: T


@dataclass(frozen=True, slots=True)
class ApiError:
    error: str


type ApiResult[T] = ApiData[T] | ApiError


class FunctionsClient:
    """Calls one function per request with the session's bearer credential."""

    def __init__(
        self,
        functions_url: str,
        session: AccessTokenSource,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._session = session
        self._api_key = api_key
        self._http = httpx.AsyncClient(base_url=functions_url.rstrip("/"), transport=transport)

    async def call(
        self,
        function_name: str,
        method: str = "GET",
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> ApiResult[Any]:
        """Invoke a function and unwrap its ``{"data"}`` / ``{"error"}`` body.

        Raises:
            ValueError: If the method is unsupported or the function name is
                not a lowercase dash-separated identifier.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        if not _FUNCTION_NAME.match(function_name):
            raise ValueError(f"Invalid function name: {function_name!r}")

        token = await self._session.get_access_token()
        if not token:
            return ApiError(NOT_AUTHENTICATED)

        headers = {"Authorization": f"Bearer {token}"}
        if self._api_key:
            headers["apikey"] = self._api_key

        try:
            response = await self._http.request(
                method,
                f"/{function_name}",
                params=dict(params) if params else None,
                json=body if body else None,
                headers=headers,
            )
            payload = response.json()
        except httpx.HTTPError as e:
            return ApiError(str(e) or DEFAULT_ERROR)
        except ValueError as e:
            return ApiError(str(e) or DEFAULT_ERROR)

        if not response.is_success:
            message = payload.get("error") if isinstance(payload, dict) else None
            return ApiError(message or DEFAULT_ERROR)

        return ApiData(payload.get("data") if isinstance(payload, dict) else None)

    async def aclose(self) -> None:
        await self._http.aclose()


def _parse[T](result: ApiResult[Any], parser: Callable[[Any], T]) -> ApiResult[T]:
    if isinstance(result, ApiError):
        return result
    try:
        return ApiData(parser(result.data))
    except (ValidationError, TypeError) as e:
        return ApiError(str(e))


def _succeeded(data: Any) -> bool:
    return bool(isinstance(data, dict) and data.get("success"))


class ProjectsApi:
    def __init__(self, client: FunctionsClient):
        self.client = client

    async def get_all(self) -> ApiResult[list[Project]]:
        result = await self.client.call("get-projects")
        return _parse(result, lambda data: [Project.model_validate(p) for p in data or []])

    async def create(self, name: str, description: str | None = None) -> ApiResult[Project]:
        result = await self.client.call(
            "create-project",
            method="POST",
            body={"name": name, "description": description},
        )
        return _parse(result, Project.model_validate)

    async def get_by_id(self, project_id: UUID | str) -> ApiResult[Project]:
        result = await self.client.call("get-project", params={"id": str(project_id)})
        return _parse(result, Project.model_validate)

    async def update(
        self,
        project_id: UUID | str,
        name: str,
        description: str | None = None,
    ) -> ApiResult[Project]:
        result = await self.client.call(
            "update-project",
            method="POST",
            body={"id": str(project_id), "name": name, "description": description},
        )
        return _parse(result, Project.model_validate)

    async def delete(self, project_id: UUID | str) -> ApiResult[bool]:
        result = await self.client.call(
            "delete-project", method="DELETE", params={"id": str(project_id)}
        )
        return _parse(result, _succeeded)


class NotesApi:
    def __init__(self, client: FunctionsClient):
        self.client = client

    async def get_by_project(self, project_id: UUID | str) -> ApiResult[list[Note]]:
        result = await self.client.call("get-notes", params={"project_id": str(project_id)})
        return _parse(result, lambda data: [Note.model_validate(n) for n in data or []])

    async def create(self, project_id: UUID | str, content: str) -> ApiResult[Note]:
        result = await self.client.call(
            "create-note",
            method="POST",
            body={"project_id": str(project_id), "content": content},
        )
        return _parse(result, Note.model_validate)

    async def update(self, note_id: UUID | str, content: str) -> ApiResult[Note]:
        result = await self.client.call(
            "update-note",
            method="POST",
            body={"id": str(note_id), "content": content},
        )
        return _parse(result, Note.model_validate)

    async def delete(self, note_id: UUID | str) -> ApiResult[bool]:
        result = await self.client.call("delete-note", method="DELETE", params={"id": str(note_id)})
        return _parse(result, _succeeded)
