"""
tilewalk.core.commands - Dispatcher de comandos internos.

Mapea nombres de comandos en string a funciones, de modo que la tabla
de atajos (tilewalk.config.bindings) use strings como "move_left" o
"span_down" sin conocer al Navigator.

    dispatcher = CommandDispatcher()
    build_navigation_commands(dispatcher, navigator)
    dispatcher.execute("move_left")

Tambien se puede usar como decorador:
    @dispatcher.command("move_left")
    def move_left():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilewalk.tiling.directional import Direction

if TYPE_CHECKING:
    from tilewalk.tiling.navigator import Navigator

log = logging.getLogger(__name__)


# Type for command functions: called with no arguments
CommandFn = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Command:
    """Metadata for a registered command."""

    name: str
    fn: CommandFn
    description: str
    category: str


class CommandDispatcher:
    """Registry that maps command name strings to callable functions."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    @property
    def count(self) -> int:
        return len(self._commands)

    @property
    def command_names(self) -> list[str]:
        """All registered command names, sorted."""
        return sorted(self._commands.keys())

    def register(
        self,
        name: str,
        fn: CommandFn,
        description: str = "",
        category: str = "general",
    ) -> None:
        """
        Register a command by name.

        If a command with the same name already exists, it is replaced.
        """
        if name in self._commands:
            log.info("Command replaced: %s", name)

        self._commands[name] = Command(
            name=name,
            fn=fn,
            description=description,
            category=category,
        )
        log.debug("Command registered: %s (%s)", name, category)

    def execute(self, name: str) -> bool:
        """
        Execute a command by name.

        Returns:
            True if the command was found and ran without raising.
        """
        cmd = self._commands.get(name)
        if cmd is None:
            log.warning("Unknown command: %s", name)
            return False

        log.debug("Executing command: %s", name)
        try:
            cmd.fn()
        except Exception:
            log.exception("Error executing command: %s", name)
            return False

        return True

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def command(
        self,
        name: str,
        description: str = "",
        category: str = "general",
    ) -> Callable[[CommandFn], CommandFn]:
        """Decorator to register a function as a command."""

        def decorator(fn: CommandFn) -> CommandFn:
            self.register(name, fn, description=description, category=category)
            return fn

        return decorator

    def list_commands(self, category: str | None = None) -> list[Command]:
        """Registered commands sorted by name, optionally for one category."""
        commands = list(self._commands.values())
        if category is not None:
            commands = [c for c in commands if c.category == category]
        return sorted(commands, key=lambda c: c.name)


def build_navigation_commands(dispatcher: CommandDispatcher, navigator: Navigator) -> None:
    """
    Register move_<direction> and span_<direction> for every direction.

    Both act on the focused window; when there is nothing to move to
    the command is a silent no-op.
    """

    def _make(direction: Direction, span: bool) -> CommandFn:
        def _navigate() -> None:
            navigator.navigate_focused(direction, span=span)
        return _navigate

    for _dir in Direction:
        dispatcher.register(
            f"move_{_dir.value}",
            _make(_dir, span=False),
            description=f"Move window to the tile {_dir.value}",
            category="move",
        )
        dispatcher.register(
            f"span_{_dir.value}",
            _make(_dir, span=True),
            description=f"Grow window over the next tile {_dir.value}",
            category="span",
        )

    log.info("Navigation commands registered: %d", dispatcher.count)
