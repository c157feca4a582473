from fastapi import APIRouter

from src.project_notes.api.functions import notes, projects

functions_router = APIRouter()
functions_router.include_router(projects.router)
functions_router.include_router(notes.router)
