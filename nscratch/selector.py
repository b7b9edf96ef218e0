"""Window selection against a niri window snapshot."""

from .niri import WindowInfo
from .state import ScratchpadStore


def find_by_app_id(windows: list[WindowInfo], app_id: str) -> WindowInfo | None:
    return next((w for w in windows if w.app_id == app_id), None)


def find_by_title(windows: list[WindowInfo], title: str) -> WindowInfo | None:
    return next((w for w in windows if w.title == title), None)


def find_by_id(windows: list[WindowInfo], window_id: int) -> WindowInfo | None:
    return next((w for w in windows if w.id == window_id), None)


def find_focused(windows: list[WindowInfo]) -> WindowInfo | None:
    return next((w for w in windows if w.is_focused), None)


def find_by_index(
    store: ScratchpadStore, windows: list[WindowInfo], index: int
) -> WindowInfo | None:
    """Resolve a 1-based store index to its live window.

    Returns None both for an index outside the store and for an entry
    whose window is gone; callers check bounds first when they need to
    tell the two apart.
    """
    if not store.is_valid_index(index):
        return None
    return find_by_id(windows, store.entry_at(index).id)


def select(
    windows: list[WindowInfo],
    app_id: str | None = None,
    title: str | None = None,
) -> WindowInfo | None:
    """Find the scratchpad window named on the command line.

    app_id takes priority over title. With neither, nothing matches.
    """
    if app_id is not None:
        return find_by_app_id(windows, app_id)
    if title is not None:
        return find_by_title(windows, title)
    return None
