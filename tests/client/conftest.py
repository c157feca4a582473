"""Fixtures wiring the client wrapper to the application in-process."""

from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from src.project_notes.client import FunctionsClient, NotesApi, ProjectsApi, StaticTokenSession
from tests.helpers import FUNCTIONS, make_token


@pytest.fixture
async def functions_client(app: FastAPI, user_id: UUID) -> AsyncGenerator[FunctionsClient]:
    """Client signed in as ``user_id``, talking to the app over ASGI."""
    client = FunctionsClient(
        f"http://test{FUNCTIONS}",
        StaticTokenSession(make_token(user_id)),
        transport=ASGITransport(app=app),
    )
    yield client
    await client.aclose()


@pytest.fixture
def projects_api(functions_client: FunctionsClient) -> ProjectsApi:
    return ProjectsApi(functions_client)


@pytest.fixture
def notes_api(functions_client: FunctionsClient) -> NotesApi:
    return NotesApi(functions_client)
