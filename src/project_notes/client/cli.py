"""``notes-client`` - manage projects and notes from the terminal.

Usage:
    notes-client projects list
    notes-client projects create NAME [--description D]
    notes-client projects update ID NAME [--description D]
    notes-client projects delete ID [--yes]
    notes-client notes list PROJECT_ID
    notes-client notes add PROJECT_ID CONTENT
    notes-client notes edit PROJECT_ID NOTE_ID CONTENT
    notes-client notes delete PROJECT_ID NOTE_ID [--yes]

Configuration comes from NOTES_API_URL, NOTES_API_KEY and NOTES_ACCESS_TOKEN.
"""

import argparse
import asyncio
import sys

import httpx

from src.project_notes.client.api import FunctionsClient, NotesApi, ProjectsApi
from src.project_notes.client.config import ClientSettings, get_client_settings
from src.project_notes.client.session import StaticTokenSession
from src.project_notes.client.views import (
    PROJECT_NOT_FOUND,
    ConfirmCallback,
    NotesView,
    ProjectsView,
)

NOTE_NOT_FOUND = "Note not found"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="notes-client", description=__doc__.splitlines()[0])
    resources = parser.add_subparsers(dest="resource", required=True)

    projects = resources.add_parser("projects", help="Manage projects")
    project_commands = projects.add_subparsers(dest="command", required=True)
    project_commands.add_parser("list", help="List your projects")
    create = project_commands.add_parser("create", help="Create a project")
    create.add_argument("name")
    create.add_argument("--description", default="")
    update = project_commands.add_parser("update", help="Rename or re-describe a project")
    update.add_argument("id")
    update.add_argument("name")
    update.add_argument(
        "--description", default=None, help="New description; omit to keep the current one"
    )
    delete = project_commands.add_parser("delete", help="Delete a project and its notes")
    delete.add_argument("id")
    delete.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    notes = resources.add_parser("notes", help="Manage the notes of a project")
    note_commands = notes.add_subparsers(dest="command", required=True)
    listing = note_commands.add_parser("list", help="List a project's notes")
    listing.add_argument("project_id")
    add = note_commands.add_parser("add", help="Add a note")
    add.add_argument("project_id")
    add.add_argument("content")
    edit = note_commands.add_parser("edit", help="Replace a note's content")
    edit.add_argument("project_id")
    edit.add_argument("note_id")
    edit.add_argument("content")
    remove = note_commands.add_parser("delete", help="Delete a note")
    remove.add_argument("project_id")
    remove.add_argument("note_id")
    remove.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


def prompt_confirm(message: str) -> bool:
    answer = input(f"{message} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def _confirm_for(args: argparse.Namespace) -> ConfirmCallback:
    if getattr(args, "yes", False):
        return lambda _message: True
    return prompt_confirm


async def run_projects(args: argparse.Namespace, api: ProjectsApi) -> ProjectsView:
    view = ProjectsView(api, _confirm_for(args))
    await view.load()
    if view.state.error:
        return view

    match args.command:
        case "create":
            view.state.name = args.name
            view.state.description = args.description
            await view.create()
        case "update":
            project = view.find(args.id)
            if project is None:
                view.state.error = PROJECT_NOT_FOUND
                return view
            view.start_edit(project)
            view.state.edit_name = args.name
            if args.description is not None:
                view.state.edit_description = args.description
            await view.update()
        case "delete":
            await view.delete(args.id)
    return view


async def run_notes(
    args: argparse.Namespace,
    projects_api: ProjectsApi,
    notes_api: NotesApi,
) -> NotesView:
    view = NotesView(projects_api, notes_api, args.project_id, _confirm_for(args))
    await view.load()
    if view.state.error:
        return view

    match args.command:
        case "add":
            view.state.content = args.content
            await view.create()
        case "edit":
            note = view.find(args.note_id)
            if note is None:
                view.state.error = NOTE_NOT_FOUND
                return view
            view.start_edit(note)
            view.state.edit_content = args.content
            await view.update()
        case "delete":
            await view.delete(args.note_id)
    return view


async def run(
    args: argparse.Namespace,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Execute one command, print the resulting screen and return the exit code."""
    client = FunctionsClient(
        settings.functions_url,
        StaticTokenSession(settings.access_token),
        api_key=settings.api_key,
        transport=transport,
    )
    try:
        projects_api = ProjectsApi(client)
        if args.resource == "projects":
            view: ProjectsView | NotesView = await run_projects(args, projects_api)
        else:
            view = await run_notes(args, projects_api, NotesApi(client))
    finally:
        await client.aclose()

    print(view.render())
    return 1 if view.state.error else 0


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    sys.exit(asyncio.run(run(args, get_client_settings())))


if __name__ == "__main__":
    main()
