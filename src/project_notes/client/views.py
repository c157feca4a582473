"""Project and note screens for the command line client.

A view owns one state dataclass and mutates it in response to user actions.
After every successful mutation it re-fetches the whole collection rather
than patching its list in place.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from src.project_notes.client.api import ApiError, Note, NotesApi, Project, ProjectsApi

ConfirmCallback = Callable[[str], bool]

PROJECT_NOT_FOUND = "Project not found"
DELETE_PROJECT_PROMPT = (
    "Are you sure you want to delete this project? All notes will also be deleted."
)
DELETE_NOTE_PROMPT = "Are you sure you want to delete this note?"


def _format_date(project_or_note: Project | Note) -> str:
    return project_or_note.created_at.strftime("%Y-%m-%d %H:%M")


@dataclass
class ProjectsState:
    projects: list[Project] = field(default_factory=list)
    name: str = ""
    description: str = ""
    editing: Project | None = None
    edit_name: str = ""
    edit_description: str = ""
    loading: bool = True
    creating: bool = False
    updating: bool = False
    error: str = ""


@dataclass
class NotesState:
    project: Project | None = None
    notes: list[Note] = field(default_factory=list)
    content: str = ""
    editing: Note | None = None
    edit_content: str = ""
    loading: bool = True
    creating: bool = False
    updating: bool = False
    error: str = ""
    leave_requested: bool = False


class ProjectsView:
    """List, create, edit and delete the signed-in user's projects."""

    def __init__(self, api: ProjectsApi, confirm: ConfirmCallback):
        self.api = api
        self.confirm = confirm
        self.state = ProjectsState()

    async def load(self) -> None:
        self.state.loading = True
        result = await self.api.get_all()
        if isinstance(result, ApiError):
            self.state.error = result.error
        else:
            self.state.projects = result.data
        self.state.loading = False

    def find(self, project_id: UUID | str) -> Project | None:
        return next((p for p in self.state.projects if str(p.id) == str(project_id)), None)

    async def create(self) -> None:
        if self.state.creating:
            return

        self.state.creating = True
        self.state.error = ""
        try:
            result = await self.api.create(self.state.name, self.state.description)
            if isinstance(result, ApiError):
                self.state.error = result.error
                return
            self.state.name = ""
            self.state.description = ""
            await self.load()
        finally:
            self.state.creating = False

    def start_edit(self, project: Project) -> None:
        self.state.editing = project
        self.state.edit_name = project.name
        self.state.edit_description = project.description or ""
        self.state.error = ""

    def cancel_edit(self) -> None:
        self.state.editing = None
        self.state.edit_name = ""
        self.state.edit_description = ""
        self.state.error = ""

    async def update(self) -> None:
        editing = self.state.editing
        if editing is None or self.state.updating:
            return

        self.state.updating = True
        self.state.error = ""
        try:
            result = await self.api.update(
                editing.id, self.state.edit_name, self.state.edit_description
            )
            if isinstance(result, ApiError):
                self.state.error = result.error
                return
            self.state.editing = None
            await self.load()
        finally:
            self.state.updating = False

    async def delete(self, project_id: UUID | str) -> None:
        if not self.confirm(DELETE_PROJECT_PROMPT):
            return

        self.state.error = ""
        result = await self.api.delete(project_id)
        if isinstance(result, ApiError):
            self.state.error = result.error
            return
        await self.load()

    def render(self) -> str:
        state = self.state
        lines = ["Projects", ""]
        if state.error:
            lines += [f"Error: {state.error}", ""]

        if state.editing is not None:
            lines += [
                f"Editing project {state.editing.id}",
                f"  Name: {state.edit_name}",
                f"  Description: {state.edit_description}",
                "",
            ]

        if state.loading:
            lines.append("Loading projects...")
        elif not state.projects:
            lines.append("No projects yet. Create your first project above!")
        else:
            for project in state.projects:
                lines.append(f"{project.id}  {project.name}")
                if project.description:
                    lines.append(f"    {project.description}")
                lines.append(f"    Created {_format_date(project)}")
        return "\n".join(lines)


class NotesView:
    """Notes of one project, with the project's name as header.

    If the project cannot be loaded the view sets ``leave_requested`` so the
    front end goes back to the project list.
    """

    def __init__(
        self,
        projects_api: ProjectsApi,
        notes_api: NotesApi,
        project_id: UUID | str,
        confirm: ConfirmCallback,
    ):
        self.projects_api = projects_api
        self.notes_api = notes_api
        self.project_id = project_id
        self.confirm = confirm
        self.state = NotesState()

    async def load(self) -> None:
        await self.load_project()
        if self.state.leave_requested:
            self.state.loading = False
            return
        await self.load_notes()

    async def load_project(self) -> None:
        result = await self.projects_api.get_by_id(self.project_id)
        if isinstance(result, ApiError):
            self.state.error = PROJECT_NOT_FOUND
            self.state.leave_requested = True
        else:
            self.state.project = result.data

    async def load_notes(self) -> None:
        self.state.loading = True
        result = await self.notes_api.get_by_project(self.project_id)
        if isinstance(result, ApiError):
            self.state.error = result.error
        else:
            self.state.notes = result.data
        self.state.loading = False

    def find(self, note_id: UUID | str) -> Note | None:
        return next((n for n in self.state.notes if str(n.id) == str(note_id)), None)

    async def create(self) -> None:
        if self.state.creating:
            return

        self.state.creating = True
        self.state.error = ""
        try:
            result = await self.notes_api.create(self.project_id, self.state.content)
            if isinstance(result, ApiError):
                self.state.error = result.error
                return
            self.state.content = ""
            await self.load_notes()
        finally:
            self.state.creating = False

    def start_edit(self, note: Note) -> None:
        self.state.editing = note
        self.state.edit_content = note.content
        self.state.error = ""

    def cancel_edit(self) -> None:
        self.state.editing = None
        self.state.edit_content = ""
        self.state.error = ""

    async def update(self) -> None:
        editing = self.state.editing
        if editing is None or self.state.updating:
            return

        self.state.updating = True
        self.state.error = ""
        try:
            result = await self.notes_api.update(editing.id, self.state.edit_content)
            if isinstance(result, ApiError):
                self.state.error = result.error
                return
            self.state.editing = None
            await self.load_notes()
        finally:
            self.state.updating = False

    async def delete(self, note_id: UUID | str) -> None:
        if not self.confirm(DELETE_NOTE_PROMPT):
            return

        self.state.error = ""
        result = await self.notes_api.delete(note_id)
        if isinstance(result, ApiError):
            self.state.error = result.error
            return
        await self.load_notes()

    def render(self) -> str:
        state = self.state
        title = state.project.name if state.project else "Notes"
        lines = [title, ""]
        if state.error:
            lines += [f"Error: {state.error}", ""]

        if state.editing is not None:
            lines += [f"Editing note {state.editing.id}", f"  {state.edit_content}", ""]

        if state.loading:
            lines.append("Loading notes...")
        elif not state.notes:
            lines.append("No notes yet. Add your first note above!")
        else:
            for note in state.notes:
                lines.append(f"{note.id}  {_format_date(note)}")
                lines.append(f"    {note.content}")
        return "\n".join(lines)
