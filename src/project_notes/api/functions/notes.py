"""Note handlers."""

from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from src.project_notes.api.dependencies import CurrentUser, NoteServiceDep
from src.project_notes.api.responses import ERROR_RESPONSES, NOT_FOUND_RESPONSE, respond
from src.project_notes.schemas import (
    DataResponse,
    DeleteResult,
    NoteCreate,
    NoteIdQuery,
    NoteRead,
    NotesQuery,
    NoteUpdate,
)

router = APIRouter(tags=["notes"])


@router.get(
    "/get-notes",
    response_model=DataResponse[list[NoteRead]],
    summary="List notes",
    description="List a project's notes, newest first. Unknown projects have no notes.",
    responses=ERROR_RESPONSES,
)
async def get_notes(
    query: Annotated[NotesQuery, Query()],
    user: CurrentUser,
    service: NoteServiceDep,
) -> JSONResponse:
    result = await service.list_notes(user.id, query.project_id)
    return respond(result.map(lambda notes: [NoteRead.model_validate(n) for n in notes]))


@router.post(
    "/create-note",
    response_model=DataResponse[NoteRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create note",
    description="Add a note to one of the caller's projects.",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def create_note(
    request: NoteCreate,
    user: CurrentUser,
    service: NoteServiceDep,
) -> JSONResponse:
    result = await service.create_note(user.id, request)
    return respond(result.map(NoteRead.model_validate), status.HTTP_201_CREATED)


@router.post(
    "/update-note",
    response_model=DataResponse[NoteRead],
    summary="Update note",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def update_note(
    request: NoteUpdate,
    user: CurrentUser,
    service: NoteServiceDep,
) -> JSONResponse:
    result = await service.update_note(user.id, request)
    return respond(result.map(NoteRead.model_validate))


@router.delete(
    "/delete-note",
    response_model=DataResponse[DeleteResult],
    summary="Delete note",
    responses=ERROR_RESPONSES | NOT_FOUND_RESPONSE,
)
async def delete_note(
    query: Annotated[NoteIdQuery, Query()],
    user: CurrentUser,
    service: NoteServiceDep,
) -> JSONResponse:
    result = await service.delete_note(user.id, query.id)
    return respond(result.map(lambda _: DeleteResult()))
