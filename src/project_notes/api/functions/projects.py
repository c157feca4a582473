"""Project handlers.

Each handler authenticates (``CurrentUser``), receives validated input from
its schema, runs one owner-scoped store operation and answers with the
``{"data"}`` / ``{"error"}`` envelope.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from src.project_notes.api.dependencies import CurrentUser, ProjectServiceDep
from src.project_notes.api.responses import ERROR_RESPONSES, NOT_FOUND_RESPONSE, respond
from src.project_notes.schemas import (
    DataResponse,
    DeleteResult,
    ProjectCreate,
    ProjectIdQuery,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(tags=["projects"])


@router.get(
    "/get-projects",
    response_model=DataResponse[list[ProjectRead]],
    summary="List projects",
    description="List the caller's projects, newest first.",
    responses=ERROR_RESPONSES,
)
async def get_projects(user: CurrentUser, service: ProjectServiceDep) -> JSONResponse:
    result = await service.list_projects(user.id)
    return respond(result.map(lambda projects: [ProjectRead.model_validate(p) for p in projects]))


@router.post(
    "/create-project",
    response_model=DataResponse[ProjectRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project owned by the caller. Name and description are trimmed.",
    responses=ERROR_RESPONSES,
)
async def create_project(
    request: ProjectCreate,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> JSONResponse:
    result = await service.create_project(user.id, request)
    return respond(result.map(ProjectRead.model_validate), status.HTTP_201_CREATED)


@router.get(
    "/get-project",
    response_model=DataResponse[ProjectRead],
    summary="Get project",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def get_project(
    query: Annotated[ProjectIdQuery, Query()],
    user: CurrentUser,
    service: ProjectServiceDep,
) -> JSONResponse:
    result = await service.get_project(user.id, query.id)
    return respond(result.map(ProjectRead.model_validate))


@router.post(
    "/update-project",
    response_model=DataResponse[ProjectRead],
    summary="Update project",
    description="Replace a project's name and description.",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def update_project(
    request: ProjectUpdate,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> JSONResponse:
    result = await service.update_project(user.id, request)
    return respond(result.map(ProjectRead.model_validate))


@router.delete(
    "/delete-project",
    response_model=DataResponse[DeleteResult],
    summary="Delete project",
    description="Delete a project together with all of its notes.",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def delete_project(
    query: Annotated[ProjectIdQuery, Query()],
    user: CurrentUser,
    service: ProjectServiceDep,
) -> JSONResponse:
    result = await service.delete_project(user.id, query.id)
    return respond(result.map(lambda _: DeleteResult()))
