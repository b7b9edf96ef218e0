"""Persistent scratchpad state - the ordered list of marked windows."""

import json
import os
import sys
import tempfile
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class ScratchpadEntry:
    """A window marked as a scratchpad."""

    id: int
    title: str
    app_id: str
    workspace: int

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ScratchpadEntry":
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            app_id=str(data["app_id"]),
            workspace=int(data["workspace"]),
        )


@dataclass
class ScratchpadStore:
    """Ordered scratchpad entries, addressed by 1-based index.

    No two entries share a window id.
    """

    windows: list[ScratchpadEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.windows)

    def __iter__(self) -> Iterator[ScratchpadEntry]:
        return iter(self.windows)

    def contains(self, window_id: int) -> bool:
        return any(entry.id == window_id for entry in self.windows)

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self.windows)

    def entry_at(self, index: int) -> ScratchpadEntry:
        if not self.is_valid_index(index):
            raise IndexError(f"No scratchpad at index {index}")
        return self.windows[index - 1]

    def append(self, entry: ScratchpadEntry) -> bool:
        """Append an entry. Returns False if its window is already stored."""
        if self.contains(entry.id):
            return False
        self.windows.append(entry)
        return True

    def pop(self, index: int) -> ScratchpadEntry:
        """Remove and return the entry at a 1-based index."""
        entry = self.entry_at(index)
        del self.windows[index - 1]
        return entry

    def reconciled(self, window_ids: Iterable[int]) -> "ScratchpadStore":
        """Return a copy without entries whose window no longer exists."""
        live = set(window_ids)
        return ScratchpadStore([entry for entry in self.windows if entry.id in live])

    def to_json(self) -> dict[str, Any]:
        return {"windows": [asdict(entry) for entry in self.windows]}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ScratchpadStore":
        store = cls()
        for item in data["windows"]:
            store.append(ScratchpadEntry.from_json(item))
        return store


def load_state(path: Path) -> ScratchpadStore:
    """Load scratchpad state from disk. Missing or corrupt state is empty."""
    if not path.exists():
        return ScratchpadStore()

    try:
        with open(path) as f:
            data = json.load(f)
        return ScratchpadStore.from_json(data)
    except (
        OSError,
        ValueError,
        KeyError,
        TypeError,
        OverflowError,
        RecursionError,
    ) as e:
        print(f"Ignoring unreadable scratchpad state {path}: {e}", file=sys.stderr)
        return ScratchpadStore()


def save_state(store: ScratchpadStore, path: Path) -> None:
    """Save scratchpad state to disk, replacing the previous file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_file = tempfile.mkstemp(dir=path.parent, suffix=".json.tmp")
    except OSError as e:
        print(f"Failed to save scratchpad state: {e}", file=sys.stderr)
        return

    try:
        with os.fdopen(fd, "w") as f:
            json.dump(store.to_json(), f, indent=2)
        os.replace(temp_file, path)
    except OSError as e:
        os.unlink(temp_file)
        print(f"Failed to save scratchpad state: {e}", file=sys.stderr)
    except BaseException:
        os.unlink(temp_file)
        raise
