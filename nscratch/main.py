"""
nscratch - toggle, mark, list and remove niri scratchpad windows.
"""

import argparse
import sys

from . import __version__
from .config import Settings, load_settings
from .controller import Mode, Request, ScratchpadController
from .errors import NscratchError
from .niri import fetch_windows
from .state import load_state, save_state


def index_arg(value: str) -> int:
    # 0 is accepted here and rejected as an out-of-range index later
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid index: {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nscratch",
        description="Toggle scratchpad windows on the niri compositor",
    )

    match_group = parser.add_mutually_exclusive_group(required=False)
    match_group.add_argument(
        "--app-id",
        "-i",
        type=str,
        help="Application ID of the scratchpad window (e.g., 'org.gnome.Nautilus')",
    )
    match_group.add_argument(
        "--title",
        "-t",
        type=str,
        help="Exact title of the scratchpad window",
    )

    parser.add_argument(
        "--spawn",
        "-s",
        type=str,
        default=None,
        help="Command to launch when no matching window exists (e.g., 'foot --app-id scratch')",
    )
    parser.add_argument(
        "--animations",
        "-a",
        action="store_true",
        help="Switch windows between tiling and floating so niri animates them",
    )
    parser.add_argument(
        "--multi-monitor",
        "-m",
        action="store_true",
        help="Also move shown windows to the focused output",
    )

    mode_group = parser.add_mutually_exclusive_group(required=False)
    mode_group.add_argument(
        "--mark",
        action="store_true",
        help="Mark the focused window as a scratchpad and hide it",
    )
    mode_group.add_argument(
        "--index",
        type=index_arg,
        metavar="N",
        help="Toggle the N-th marked scratchpad (1-based)",
    )
    mode_group.add_argument(
        "--remove",
        type=index_arg,
        metavar="N",
        help="Unmark the N-th scratchpad and bring it back as a tiled window",
    )
    mode_group.add_argument(
        "--list",
        action="store_true",
        help="Show marked scratchpads",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def request_from_args(args: argparse.Namespace) -> Request:
    if args.list:
        mode = Mode.LIST
    elif args.remove is not None:
        mode = Mode.REMOVE
    elif args.mark:
        mode = Mode.MARK
    elif args.index is not None:
        mode = Mode.RECALL
    else:
        mode = Mode.TOGGLE

    index = args.remove if mode is Mode.REMOVE else args.index
    return Request(
        mode=mode,
        index=index,
        app_id=args.app_id,
        title=args.title,
        spawn=args.spawn,
    )


def run(request: Request, settings: Settings) -> int:
    """Run one request against a fresh niri snapshot."""
    windows = fetch_windows()

    stored = load_state(settings.state_file)
    store = stored.reconciled(w.id for w in windows)
    if len(store) != len(stored):
        save_state(store, settings.state_file)

    controller = ScratchpadController(store, windows, settings)
    return controller.handle(request)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    settings.animations = settings.animations or args.animations
    settings.multi_monitor = settings.multi_monitor or args.multi_monitor

    try:
        return run(request_from_args(args), settings)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except NscratchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
