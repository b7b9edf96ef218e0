"""Compositor query client - snapshots of niri windows and workspaces."""

import json
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Any

from .errors import NiriError


@dataclass
class WindowInfo:
    """Information about a window."""

    id: int
    app_id: str | None
    title: str | None
    workspace_id: int | None
    is_focused: bool
    is_floating: bool

    @classmethod
    def from_niri(cls, data: dict[str, Any]) -> "WindowInfo":
        return cls(
            id=data["id"],
            app_id=data.get("app_id"),
            title=data.get("title"),
            workspace_id=data["workspace_id"],
            is_focused=data["is_focused"],
            is_floating=data["is_floating"],
        )


@dataclass
class WorkspaceInfo:
    """Information about a workspace."""

    id: int
    idx: int
    output: str | None
    is_focused: bool

    @classmethod
    def from_niri(cls, data: dict[str, Any]) -> "WorkspaceInfo":
        return cls(
            id=data["id"],
            idx=data["idx"],
            output=data.get("output"),
            is_focused=data["is_focused"],
        )


@dataclass
class FocusedWorkspace:
    """The focused workspace plus the snapshot it was found in."""

    id: int
    idx: int
    output: str | None
    workspaces: list[WorkspaceInfo] = field(default_factory=list)


def _query(what: str) -> list[dict[str, Any]]:
    """Run `niri msg -j <what>` and return the decoded JSON list."""
    try:
        result = subprocess.run(
            ["niri", "msg", "-j", what],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise NiriError("niri command not found") from e
    except subprocess.CalledProcessError as e:
        raise NiriError(f"niri msg {what} failed: {(e.stderr or '').strip()}") from e

    try:
        payload = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise NiriError(f"Unparseable niri {what} response: {e}") from e

    if not isinstance(payload, list):
        raise NiriError(f"Unexpected niri {what} response: {type(payload).__name__}")
    return payload


def fetch_windows() -> list[WindowInfo]:
    """Fetch all windows from niri."""
    try:
        return [WindowInfo.from_niri(w) for w in _query("windows")]
    except (KeyError, TypeError) as e:
        raise NiriError(f"Malformed niri window record: {e!r}") from e


def fetch_workspaces() -> FocusedWorkspace:
    """Fetch all workspaces and locate the focused one."""
    try:
        workspaces = [WorkspaceInfo.from_niri(ws) for ws in _query("workspaces")]
    except (KeyError, TypeError) as e:
        raise NiriError(f"Malformed niri workspace record: {e!r}") from e

    for ws in workspaces:
        if ws.is_focused:
            return FocusedWorkspace(
                id=ws.id, idx=ws.idx, output=ws.output, workspaces=workspaces
            )

    raise NiriError("No focused workspace found")


def run_action(action: str, *args: str) -> None:
    """Run a niri msg action command.

    Effects are not guaranteed: failures are reported on stderr and
    otherwise ignored.
    """
    try:
        result = subprocess.run(
            ["niri", "msg", "action", action, *args],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            print(
                f"niri action {action} failed: {(result.stderr or '').strip()}",
                file=sys.stderr,
            )
    except OSError as e:
        print(f"Failed to run niri action {action}: {e}", file=sys.stderr)
