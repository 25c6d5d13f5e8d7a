"""
tilewalk - Entry point.

Moves the foreground window once and exits; meant to be bound to a
hotkey by the desktop.

Run with:  python -m tilewalk right
           python -m tilewalk down --span
           python -m tilewalk left --layout layouts.json
           python -m tilewalk --bindings
"""

from __future__ import annotations

import argparse
import logging
import sys

from tilewalk.config.bindings import resolve_bindings
from tilewalk.core.commands import CommandDispatcher, build_navigation_commands
from tilewalk.core.services import DisplayService
from tilewalk.errors import LayoutLoadError
from tilewalk.tiling.directional import Direction
from tilewalk.tiling.navigator import Navigator
from tilewalk.tiling.providers import StaticLayoutProvider

log = logging.getLogger(__name__)


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for tilewalk."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.addHandler(handler)

    # Boundary tracing is chatty at DEBUG
    logging.getLogger("tilewalk.tiling.boundary").setLevel(logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tilewalk", description="Move the foreground window between layout tiles.")
    parser.add_argument(
        "direction",
        nargs="?",
        type=Direction.parse,
        metavar="{left,right,up,down}",
    )
    parser.add_argument("--span", action="store_true", help="grow the window over the next tile")
    parser.add_argument("--layout", metavar="FILE", help="JSON file with one layout per display index")
    parser.add_argument("--bindings", action="store_true", help="print the key bindings and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace, displays: DisplayService) -> int:
    """Build the navigator over *displays* and perform what *args* ask for."""
    if args.layout:
        try:
            provider = StaticLayoutProvider.from_file(args.layout)
        except LayoutLoadError as exc:
            log.error("%s", exc)
            return 1
    else:
        provider = StaticLayoutProvider()

    navigator = Navigator(provider, displays)
    dispatcher = CommandDispatcher()
    build_navigation_commands(dispatcher, navigator)

    if args.bindings:
        for combo, command in resolve_bindings(dispatcher).items():
            print(f"{combo}\t{command}")
        return 0

    prefix = "span" if args.span else "move"
    return 0 if dispatcher.execute(f"{prefix}_{args.direction.value}") else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.direction is None and not args.bindings:
        parser.error("a direction is required unless --bindings is given")
    setup_logging(args.verbose)

    # Win32 only: imported here so --help works everywhere
    from tilewalk.tiling.monitor import Win32DisplayService

    return run(args, Win32DisplayService())


if __name__ == "__main__":
    sys.exit(main())
