"""Scratchpad controller - decides what happens to which window."""

import shlex
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .actions import ActionDispatcher
from .common import UNKNOWN
from .config import Settings
from .niri import FocusedWorkspace, WindowInfo, fetch_workspaces
from .notify import Notifier
from .selector import find_by_id, find_by_index, find_focused, select
from .state import ScratchpadEntry, ScratchpadStore, save_state

NO_SCRATCHPAD_AT_INDEX = "No scratchpad window at this index"
NO_SCRATCHPAD_FOUND = "No scratchpad window found."


class Mode(Enum):
    TOGGLE = "toggle"
    MARK = "mark"
    RECALL = "recall"
    REMOVE = "remove"
    LIST = "list"


@dataclass
class Request:
    """What one invocation was asked to do."""

    mode: Mode = Mode.TOGGLE
    index: int | None = None
    app_id: str | None = None
    title: str | None = None
    spawn: str | None = None


def format_list(store: ScratchpadStore) -> str:
    lines = ["Scratchpads:", ""]
    for i, entry in enumerate(store, start=1):
        lines.append(
            f"[{i}] {entry.app_id} | {entry.title} | from workspace {entry.workspace - 1}"
        )
    if not store.windows:
        lines.append("none")
    return "\n".join(lines)


def split_command(command: str | None) -> list[str]:
    """Split a spawn command line into program and arguments."""
    if not command:
        return []
    try:
        return shlex.split(command)
    except ValueError as e:
        print(f"Invalid spawn command {command!r}: {e}", file=sys.stderr)
        return []


class ScratchpadController:
    """Runs a single request against one window snapshot and the store.

    The store is reconciled by the caller before it gets here, so index
    addressing always refers to live windows.
    """

    def __init__(
        self,
        store: ScratchpadStore,
        windows: list[WindowInfo],
        settings: Settings,
        dispatcher: ActionDispatcher | None = None,
        workspaces: Callable[[], FocusedWorkspace] = fetch_workspaces,
        notifier: Notifier | None = None,
    ):
        self.store = store
        self.windows = windows
        self.settings = settings
        self.dispatcher = dispatcher or ActionDispatcher()
        self._fetch_workspaces = workspaces
        self.notifier = notifier or Notifier(settings.notify)

    def handle(self, request: Request) -> int:
        """Dispatch a request to its mode. Returns the process exit code."""
        if request.mode is Mode.LIST:
            return self.list_scratchpads()
        if request.mode is Mode.REMOVE:
            return self.remove(request.index)
        if request.mode is Mode.MARK:
            return self.mark()
        if request.mode is Mode.RECALL:
            return self.recall(request.index)
        return self.toggle(request.app_id, request.title, request.spawn)

    def list_scratchpads(self) -> int:
        message = format_list(self.store)
        print(message)
        self.notifier.info(message)
        return 0

    def remove(self, index: int | None) -> int:
        if index is None or not self.store.is_valid_index(index):
            return self._index_error()

        entry = self.store.pop(index)
        self._save()

        window = find_by_id(self.windows, entry.id)
        if window is None:
            return 0

        focused = self._fetch_workspaces()
        self.dispatcher.release(window.id, focused, self.settings.multi_monitor)
        return 0

    def mark(self) -> int:
        window = find_focused(self.windows)
        if window is None:
            print("No focused window to mark", file=sys.stderr)
            return 1

        if self.store.contains(window.id):
            return 0

        entry = ScratchpadEntry(
            id=window.id,
            title=window.title or UNKNOWN,
            app_id=window.app_id or UNKNOWN,
            workspace=window.workspace_id or 0,
        )
        self.store.append(entry)
        self._save()
        self._hide(window)
        return 0

    def recall(self, index: int | None) -> int:
        if index is None or not self.store.is_valid_index(index):
            return self._index_error()

        window = find_by_index(self.store, self.windows, index)
        if window is None:
            # Stale entry, dropped by reconciliation on the next run
            return 0

        # An already focused window is always sent away
        self._toggle_window(window)
        return 0

    def toggle(
        self,
        app_id: str | None = None,
        title: str | None = None,
        spawn: str | None = None,
    ) -> int:
        window = select(self.windows, app_id=app_id, title=title)

        if window is None:
            command = split_command(spawn)
            if command:
                self.dispatcher.spawn(command)
                return 0
            print(NO_SCRATCHPAD_FOUND, file=sys.stderr)
            self.notifier.error(NO_SCRATCHPAD_FOUND)
            return 1

        self._toggle_window(window)
        return 0

    def _toggle_window(self, window: WindowInfo) -> None:
        if not window.is_focused:
            focused = self._fetch_workspaces()
            if window.workspace_id != focused.id:
                self.dispatcher.bring_to_focus(
                    window,
                    focused,
                    multi_monitor=self.settings.multi_monitor,
                    animations=self.settings.animations,
                )
                return

        self._hide(window)

    def _hide(self, window: WindowInfo) -> None:
        self.dispatcher.hide(
            window.id, self.settings.workspace, animations=self.settings.animations
        )

    def _index_error(self) -> int:
        print(NO_SCRATCHPAD_AT_INDEX, file=sys.stderr)
        self.notifier.error(NO_SCRATCHPAD_AT_INDEX)
        return 1

    def _save(self) -> None:
        save_state(self.store, self.settings.state_file)
