"""Tests for the notes-client command line."""

from uuid import UUID, uuid4

import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from src.project_notes.client.cli import build_parser, run
from src.project_notes.client.config import ClientSettings
from tests.helpers import make_token

pytestmark = pytest.mark.integration


@pytest.fixture
def settings(user_id: UUID) -> ClientSettings:
    return ClientSettings(
        api_url="http://test",
        access_token=make_token(user_id),
        _env_file=None,
    )


@pytest.fixture
def invoke(app: FastAPI, settings: ClientSettings, capsys):
    async def _invoke(*argv: str) -> tuple[int, str]:
        args = build_parser().parse_args(list(argv))
        code = await run(args, settings, transport=ASGITransport(app=app))
        return code, capsys.readouterr().out

    return _invoke


async def test_create_then_list(invoke):
    code, out = await invoke("projects", "create", "Trip", "--description", "Planning")
    assert code == 0
    assert "Trip" in out
    assert "Planning" in out

    code, out = await invoke("projects", "list")
    assert code == 0
    assert "Trip" in out


async def test_validation_error_exits_1(invoke):
    code, out = await invoke("projects", "create", "a" * 101)

    assert code == 1
    assert "Error: Project name is too long" in out


async def test_notes_for_unknown_project(invoke):
    code, out = await invoke("notes", "list", str(uuid4()))

    assert code == 1
    assert "Error: Project not found" in out


async def test_note_lifecycle(invoke, projects_api, notes_api):
    project = (await projects_api.create("Trip")).data

    code, out = await invoke("notes", "add", str(project.id), "Book flights")
    assert code == 0
    assert "Book flights" in out

    notes = (await notes_api.get_by_project(str(project.id))).data
    note_id = str(notes[0].id)
    code, out = await invoke("notes", "edit", str(project.id), note_id, "Book trains")
    assert code == 0
    assert "Book trains" in out

    code, out = await invoke("notes", "delete", str(project.id), note_id, "--yes")
    assert code == 0
    assert "No notes yet" in out


async def test_delete_prompts_without_yes(invoke, projects_api, monkeypatch):
    project = (await projects_api.create("Trip")).data
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    code, out = await invoke("projects", "delete", str(project.id))

    assert code == 0
    assert "Trip" in out


async def test_unauthenticated(app: FastAPI, capsys):
    settings = ClientSettings(api_url="http://test", access_token=None, _env_file=None)
    args = build_parser().parse_args(["projects", "list"])

    code = await run(args, settings, transport=ASGITransport(app=app))

    assert code == 1
    assert "Error: Not authenticated" in capsys.readouterr().out


async def test_rename_keeps_description(invoke, projects_api):
    project = (await projects_api.create("Trip", "Planning")).data

    code, out = await invoke("projects", "update", str(project.id), "Trip 2")
    assert code == 0
    assert "Trip 2" in out

    stored = (await projects_api.get_by_id(str(project.id))).data
    assert stored.name == "Trip 2"
    assert stored.description == "Planning"


async def test_update_replaces_description(invoke, projects_api):
    project = (await projects_api.create("Trip", "Planning")).data

    code, _ = await invoke(
        "projects", "update", str(project.id), "Trip", "--description", "Booked"
    )
    assert code == 0

    stored = (await projects_api.get_by_id(str(project.id))).data
    assert stored.description == "Booked"
