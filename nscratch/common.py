"""
Shared paths and defaults for nscratch.
"""

import os
from pathlib import Path

cache_dir = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
STATE_FILE = Path(cache_dir) / "nscratch" / "state.json"
CONFIG_DIR = Path.home() / ".config" / "niri"
CONFIG_FILE = CONFIG_DIR / "nscratch.yaml"

WORKSPACE_ENV = "NS_WORKSPACE"
DEFAULT_WORKSPACE = "scratch"
UNKNOWN = "unknown"
