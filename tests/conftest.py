"""Shared fixtures: fake niri snapshots and a recording action runner."""

import pytest

from nscratch import notify
from nscratch.actions import ActionDispatcher
from nscratch.config import Settings
from nscratch.niri import FocusedWorkspace, WindowInfo, WorkspaceInfo
from nscratch.state import ScratchpadEntry, ScratchpadStore


class RecordingRunner:
    """Stands in for niri.run_action and remembers every call."""

    def __init__(self):
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, action: str, *args: str) -> None:
        self.calls.append((action, *args))

    @property
    def actions(self) -> list[str]:
        return [call[0] for call in self.calls]


def make_window(
    id: int,
    app_id: str | None = "app",
    title: str | None = "title",
    workspace_id: int | None = 1,
    is_focused: bool = False,
    is_floating: bool = False,
) -> WindowInfo:
    return WindowInfo(
        id=id,
        app_id=app_id,
        title=title,
        workspace_id=workspace_id,
        is_focused=is_focused,
        is_floating=is_floating,
    )


def make_entry(id: int, workspace: int = 1) -> ScratchpadEntry:
    return ScratchpadEntry(id=id, title=f"title-{id}", app_id=f"app-{id}", workspace=workspace)


def make_store(*ids: int) -> ScratchpadStore:
    return ScratchpadStore([make_entry(i) for i in ids])


def focused_workspace(id: int = 2, idx: int = 2, output: str = "DP-1") -> FocusedWorkspace:
    ws = WorkspaceInfo(id=id, idx=idx, output=output, is_focused=True)
    return FocusedWorkspace(id=id, idx=idx, output=output, workspaces=[ws])


@pytest.fixture(autouse=True)
def sent_notifications(monkeypatch):
    """Capture notify-send calls instead of running them."""
    sent: list[tuple[str, str]] = []

    def fake_send(message, *, title="nscratch", **_kwargs):
        sent.append((title, message))

    monkeypatch.setattr(notify, "send", fake_send)
    return sent


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def dispatcher(runner) -> ActionDispatcher:
    return ActionDispatcher(run=runner)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(state_file=tmp_path / "nscratch" / "state.json")
