"""Tests for the project functions."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.project_notes.models import Note, Project
from tests.factories import NoteFactory, ProjectFactory, utc_now

pytestmark = pytest.mark.integration


async def _create(client: AsyncClient, name: str, description: str | None = None) -> dict:
    response = await client.post(
        "/create-project", json={"name": name, "description": description}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateProject:
    """Tests for POST create-project."""

    async def test_create_and_read_back(self, user_client: AsyncClient):
        created = await _create(user_client, "Trip", "Planning")

        assert UUID(created["id"])
        assert created["name"] == "Trip"
        assert created["description"] == "Planning"
        assert set(created) == {"id", "name", "description", "created_at"}

        response = await user_client.get("/get-project", params={"id": created["id"]})
        assert response.status_code == 200
        fetched = response.json()["data"]
        assert fetched["name"] == "Trip"
        assert fetched["description"] == "Planning"

    async def test_trims_and_nulls_blank_description(self, user_client: AsyncClient):
        created = await _create(user_client, "  Trip  ", "   ")

        assert created["name"] == "Trip"
        assert created["description"] is None

    async def test_description_optional(self, user_client: AsyncClient):
        response = await user_client.post("/create-project", json={"name": "Solo"})

        assert response.status_code == 201
        assert response.json()["data"]["description"] is None

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({}, "Project name is required"),
            ({"name": ""}, "Project name is required"),
            ({"name": "   "}, "Project name is required"),
            ({"name": "a" * 101}, "Project name is too long"),
            ({"name": None}, "Project name is required"),
            ({"name": 42}, "Input should be a valid string"),
        ],
    )
    async def test_validation(self, user_client: AsyncClient, body: dict, message: str):
        response = await user_client.post("/create-project", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": message}

    async def test_name_of_exactly_100_chars(self, user_client: AsyncClient):
        created = await _create(user_client, "a" * 100)
        assert created["name"] == "a" * 100

    async def test_invalid_json(self, user_client: AsyncClient):
        response = await user_client.post(
            "/create-project",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}


class TestListProjects:
    """Tests for GET get-projects."""

    async def test_only_own_projects_newest_first(
        self,
        user_client: AsyncClient,
        db_session: AsyncSession,
        user_id: UUID,
        other_user_id: UUID,
    ):
        now = utc_now()
        older = ProjectFactory.build(user_id=user_id, name="Older", created_at=now)
        newer = ProjectFactory.build(
            user_id=user_id, name="Newer", created_at=now + timedelta(minutes=1)
        )
        foreign = ProjectFactory.build(user_id=other_user_id, name="Foreign")
        db_session.add_all([older, newer, foreign])
        await db_session.commit()

        response = await user_client.get("/get-projects")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()["data"]] == ["Newer", "Older"]

    async def test_empty(self, user_client: AsyncClient):
        response = await user_client.get("/get-projects")

        assert response.status_code == 200
        assert response.json() == {"data": []}

    async def test_repeated_reads_are_identical(self, user_client: AsyncClient):
        await _create(user_client, "One")
        await _create(user_client, "Two")

        first = await user_client.get("/get-projects")
        second = await user_client.get("/get-projects")

        assert first.json() == second.json()


class TestGetProject:
    """Tests for GET get-project."""

    async def test_missing_id(self, user_client: AsyncClient):
        response = await user_client.get("/get-project")

        assert response.status_code == 400
        assert response.json() == {"error": "Project ID is required"}

    async def test_malformed_id(self, user_client: AsyncClient):
        response = await user_client.get("/get-project", params={"id": "not-a-uuid"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid project ID"}

    async def test_unknown_id(self, user_client: AsyncClient):
        response = await user_client.get("/get-project", params={"id": str(uuid4())})

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}

    async def test_foreign_project_looks_missing(
        self, user_client: AsyncClient, other_client: AsyncClient
    ):
        foreign = await _create(other_client, "Theirs")

        response = await user_client.get("/get-project", params={"id": foreign["id"]})

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}


class TestUpdateProject:
    """Tests for POST update-project."""

    async def test_update_replaces_fields(self, user_client: AsyncClient):
        created = await _create(user_client, "Trip", "Planning")

        response = await user_client.post(
            "/update-project",
            json={"id": created["id"], "name": " Holiday ", "description": ""},
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["id"] == created["id"]
        assert updated["name"] == "Holiday"
        assert updated["description"] is None
        assert updated["created_at"] == created["created_at"]

    async def test_name_too_long(self, user_client: AsyncClient):
        created = await _create(user_client, "Trip")

        response = await user_client.post(
            "/update-project", json={"id": created["id"], "name": "a" * 101}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Project name is too long"}

    async def test_missing_id_reported_first(self, user_client: AsyncClient):
        response = await user_client.post("/update-project", json={"name": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Project ID is required"}

    async def test_foreign_project_untouched(
        self,
        user_client: AsyncClient,
        other_client: AsyncClient,
        db_session: AsyncSession,
    ):
        foreign = await _create(other_client, "Theirs", "Keep me")

        response = await user_client.post(
            "/update-project", json={"id": foreign["id"], "name": "Mine now"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}
        stored = await db_session.get(Project, UUID(foreign["id"]))
        assert stored is not None
        assert stored.name == "Theirs"
        assert stored.description == "Keep me"


class TestDeleteProject:
    """Tests for DELETE delete-project."""

    async def test_delete(self, user_client: AsyncClient):
        created = await _create(user_client, "Trip")

        response = await user_client.delete("/delete-project", params={"id": created["id"]})

        assert response.status_code == 200
        assert response.json() == {"data": {"success": True}}
        again = await user_client.get("/get-project", params={"id": created["id"]})
        assert again.status_code == 404

    async def test_delete_cascades_to_notes(
        self,
        user_client: AsyncClient,
        db_session: AsyncSession,
        user_id: UUID,
    ):
        project = ProjectFactory.build(user_id=user_id)
        db_session.add(project)
        await db_session.commit()
        db_session.add_all([NoteFactory.for_project(project) for _ in range(3)])
        await db_session.commit()

        response = await user_client.delete("/delete-project", params={"id": str(project.id)})
        assert response.status_code == 200

        notes = await user_client.get("/get-notes", params={"project_id": str(project.id)})
        assert notes.status_code == 200
        assert notes.json() == {"data": []}
        remaining = await db_session.execute(select(Note).where(Note.project_id == project.id))
        assert remaining.scalars().all() == []

    async def test_delete_twice(self, user_client: AsyncClient):
        created = await _create(user_client, "Trip")
        await user_client.delete("/delete-project", params={"id": created["id"]})

        response = await user_client.delete("/delete-project", params={"id": created["id"]})

        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}

    async def test_foreign_project_survives(
        self,
        user_client: AsyncClient,
        other_client: AsyncClient,
    ):
        foreign = await _create(other_client, "Theirs")

        response = await user_client.delete("/delete-project", params={"id": foreign["id"]})

        assert response.status_code == 404
        still_there = await other_client.get("/get-project", params={"id": foreign["id"]})
        assert still_there.status_code == 200

    async def test_missing_id(self, user_client: AsyncClient):
        response = await user_client.delete("/delete-project")

        assert response.status_code == 400
        assert response.json() == {"error": "Project ID is required"}
