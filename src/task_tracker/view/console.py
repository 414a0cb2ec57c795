from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .client import TaskApiClient
from .view import TaskFilter, TaskView

logger = logging.getLogger(__name__)

HELP = """Commands:
  add <text>           create a task
  toggle <id>          flip a task's completion
  edit <id> <text>     change a task's description
  delete <id>          remove a task
  filter all|active|completed
  refresh              reload tasks from the server
  dismiss              clear the error message
  help                 show this text
  quit                 exit"""


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        return None


# PUBLIC_INTERFACE
async def handle_command(view: TaskView, line: str) -> Optional[str]:
    """
    Apply one console command to the view.

    Returns a message for the user when the command itself was not usable
    (unknown command, bad id), HELP for 'help', an empty string otherwise.
    Raises EOFError on 'quit'.
    """
    cmd, _, rest = line.strip().partition(" ")
    cmd = cmd.lower()
    rest = rest.strip()

    if cmd in {"quit", "exit"}:
        raise EOFError
    if cmd == "help":
        return HELP
    if cmd == "refresh":
        await view.load()
        return ""
    if cmd == "dismiss":
        view.dismiss_error()
        return ""
    if cmd == "add":
        view.new_description = rest
        await view.add()
        return ""
    if cmd == "filter":
        try:
            view.set_filter(TaskFilter(rest.lower()))
        except ValueError:
            return "Filter must be one of: all, active, completed"
        return ""
    if cmd in {"toggle", "delete", "edit"}:
        raw_id, _, text = rest.partition(" ")
        task_id = _parse_id(raw_id)
        if task_id is None:
            return f"Usage: {cmd} <id>" + (" <text>" if cmd == "edit" else "")
        if cmd == "toggle":
            await view.toggle(task_id)
        elif cmd == "delete":
            await view.delete(task_id)
        else:
            await view.edit(task_id, text.strip())
        return ""
    return f"Unknown command: {cmd}. Type 'help' for a list."


# PUBLIC_INTERFACE
async def run_console(base_url: str) -> None:
    """Interactive loop: mount the view, then read commands until quit or EOF."""
    async with TaskApiClient(base_url) as client:
        view = TaskView(client)
        await view.mount()
        print(view.render())
        print("\nType 'help' for commands.")

        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, exiting.")
                print()
                break

            if not line.strip():
                continue
            try:
                message = await handle_command(view, line)
            except EOFError:
                break

            if message:
                print(message)
            if message != HELP:
                print(view.render())
