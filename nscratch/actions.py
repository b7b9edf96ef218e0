"""Translate scratchpad sub-actions into niri msg action calls."""

from typing import Callable

from .niri import FocusedWorkspace, WindowInfo, run_action

ActionRunner = Callable[..., None]


class ActionDispatcher:
    """Issues niri actions for scratchpad moves.

    Every call is best effort and returns nothing; the next invocation
    re-reads the compositor state anyway.
    """

    def __init__(self, run: ActionRunner | None = None):
        self.run = run or run_action

    def hide(self, window_id: int, workspace: str, animations: bool = False) -> None:
        """Move a window to the hidden scratchpad workspace."""
        self.run(
            "move-window-to-workspace",
            "--window-id",
            str(window_id),
            "--focus",
            "false",
            workspace,
        )
        if animations:
            # Tiling on the hidden workspace so it floats in again on show
            self.run("move-window-to-tiling", "--id", str(window_id))

    def bring_to_focus(
        self,
        window: WindowInfo,
        focused: FocusedWorkspace,
        multi_monitor: bool = False,
        animations: bool = False,
    ) -> None:
        """Move a window onto the focused workspace and focus it."""
        self.run(
            "move-window-to-workspace",
            "--window-id",
            str(window.id),
            str(focused.idx),
        )
        if multi_monitor and focused.output:
            self.run("move-window-to-monitor", "--id", str(window.id), focused.output)
        if animations and not window.is_floating:
            self.run("move-window-to-floating", "--id", str(window.id))
        self.focus(window.id)

    def release(
        self, window_id: int, focused: FocusedWorkspace, multi_monitor: bool = False
    ) -> None:
        """Bring a window that stopped being a scratchpad back as a tiled window."""
        self.run(
            "move-window-to-workspace",
            "--window-id",
            str(window_id),
            str(focused.idx),
        )
        self.run("move-window-to-tiling", "--id", str(window_id))
        if multi_monitor and focused.output:
            self.run("move-window-to-monitor", "--id", str(window_id), focused.output)
        self.focus(window_id)

    def focus(self, window_id: int) -> None:
        self.run("focus-window", "--id", str(window_id))

    def spawn(self, command: list[str]) -> None:
        # niri spawn so the process is parented by niri, not us
        self.run("spawn", "--", *command)
