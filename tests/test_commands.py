"""Tests for the command dispatcher and the default key bindings."""

from conftest import DISPLAY, FakeDisplays, FakeWindow

from tilewalk.config.bindings import DEFAULT_BINDINGS, resolve_bindings
from tilewalk.core.commands import CommandDispatcher, build_navigation_commands
from tilewalk.tiling.navigator import Navigator
from tilewalk.tiling.providers import StaticLayoutProvider
from tilewalk.tiling.rect import Rect


def _dispatcher(window: FakeWindow) -> CommandDispatcher:
    navigator = Navigator(StaticLayoutProvider(), FakeDisplays([DISPLAY], focused=window))
    dispatcher = CommandDispatcher()
    build_navigation_commands(dispatcher, navigator)
    return dispatcher


def test_navigation_commands_registered() -> None:
    dispatcher = _dispatcher(FakeWindow(Rect(0, 0, 500, 500)))
    assert dispatcher.count == 8
    assert [c.name for c in dispatcher.list_commands("span")] == [
        "span_down",
        "span_left",
        "span_right",
        "span_up",
    ]


def test_move_command_moves_focused_window() -> None:
    window = FakeWindow(Rect(0, 0, 500, 500))
    dispatcher = _dispatcher(window)

    assert dispatcher.execute("move_right")
    assert window.moves == [Rect(500, 0, 500, 500)]

    assert dispatcher.execute("span_left")
    assert window.rect == Rect(0, 0, 1000, 500)


def test_execute_unknown_or_failing_command() -> None:
    dispatcher = CommandDispatcher()
    assert not dispatcher.execute("move_sideways")

    @dispatcher.command("explode", category="test")
    def explode() -> None:
        raise RuntimeError("boom")

    assert dispatcher.has("explode")
    assert dispatcher.get("explode").category == "test"
    assert not dispatcher.execute("explode")


def test_register_replaces_existing() -> None:
    dispatcher = CommandDispatcher()
    calls = []
    dispatcher.register("ping", lambda: calls.append(1))
    dispatcher.register("ping", lambda: calls.append(2))
    dispatcher.execute("ping")
    assert calls == [2]
    assert dispatcher.count == 1


def test_default_bindings_resolve() -> None:
    dispatcher = _dispatcher(FakeWindow(Rect(0, 0, 500, 500)))
    resolved = resolve_bindings(dispatcher)
    assert resolved == DEFAULT_BINDINGS
    assert resolved["<Super><Alt>Down"] == "span_down"


def test_unknown_binding_skipped() -> None:
    dispatcher = _dispatcher(FakeWindow(Rect(0, 0, 500, 500)))
    bindings = {"<Super>Left": "move_left", "<Super>q": "close_window"}
    assert resolve_bindings(dispatcher, bindings) == {"<Super>Left": "move_left"}
