import json
import subprocess

import pytest

from nscratch import niri
from nscratch.errors import NiriError

WINDOW = {
    "id": 12,
    "title": "htop",
    "app_id": "foot",
    "pid": 4242,
    "workspace_id": 3,
    "is_focused": True,
    "is_floating": False,
    "is_urgent": False,
}

WORKSPACES = [
    {"id": 1, "idx": 1, "name": None, "output": "DP-1", "is_active": True, "is_focused": False},
    {"id": 3, "idx": 2, "name": None, "output": "DP-2", "is_active": True, "is_focused": True},
]


class FakeRun:
    def __init__(self, stdout="", returncode=0, stderr="", exc=None):
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.exc = exc
        self.commands: list[list[str]] = []

    def __call__(self, cmd, **kwargs):
        self.commands.append(cmd)
        if self.exc:
            raise self.exc
        if kwargs.get("check") and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, cmd, self.stdout, self.stderr)
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs) -> FakeRun:
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(niri.subprocess, "run", fake)
        return fake

    return install


def test_fetch_windows_decodes_records(fake_run) -> None:
    fake = fake_run(stdout=json.dumps([WINDOW, dict(WINDOW, id=13, app_id=None, is_focused=False)]))

    windows = niri.fetch_windows()

    assert fake.commands == [["niri", "msg", "-j", "windows"]]
    assert windows[0] == niri.WindowInfo(
        id=12, app_id="foot", title="htop", workspace_id=3, is_focused=True, is_floating=False
    )
    assert windows[1].app_id is None


def test_fetch_windows_missing_required_key_is_fatal(fake_run) -> None:
    broken = {k: v for k, v in WINDOW.items() if k != "is_floating"}
    fake_run(stdout=json.dumps([broken]))

    with pytest.raises(NiriError, match="is_floating"):
        niri.fetch_windows()


@pytest.mark.parametrize("stdout", ["", "{oops", '{"Err": "no"}'])
def test_fetch_windows_unparseable_is_fatal(fake_run, stdout) -> None:
    fake_run(stdout=stdout)
    with pytest.raises(NiriError):
        niri.fetch_windows()


def test_fetch_windows_process_failure_is_fatal(fake_run) -> None:
    fake_run(returncode=1, stderr="Error: not running")
    with pytest.raises(NiriError, match="not running"):
        niri.fetch_windows()


def test_fetch_windows_without_niri_is_fatal(fake_run) -> None:
    fake_run(exc=FileNotFoundError("niri"))
    with pytest.raises(NiriError, match="not found"):
        niri.fetch_windows()


def test_fetch_workspaces_finds_focused(fake_run) -> None:
    fake = fake_run(stdout=json.dumps(WORKSPACES))

    focused = niri.fetch_workspaces()

    assert fake.commands == [["niri", "msg", "-j", "workspaces"]]
    assert (focused.id, focused.idx, focused.output) == (3, 2, "DP-2")
    assert len(focused.workspaces) == 2


def test_fetch_workspaces_without_focus_is_fatal(fake_run) -> None:
    fake_run(stdout=json.dumps([dict(ws, is_focused=False) for ws in WORKSPACES]))
    with pytest.raises(NiriError, match="No focused workspace"):
        niri.fetch_workspaces()


def test_run_action_builds_command(fake_run) -> None:
    fake = fake_run()
    assert niri.run_action("focus-window", "--id", "12") is None
    assert fake.commands == [["niri", "msg", "action", "focus-window", "--id", "12"]]


def test_run_action_ignores_failures(fake_run, capsys) -> None:
    fake_run(returncode=1, stderr="Error: bad window")
    niri.run_action("focus-window", "--id", "12")
    assert "bad window" in capsys.readouterr().err

    fake_run(exc=FileNotFoundError("niri"))
    niri.run_action("focus-window", "--id", "12")
