"""
tilewalk.core.services - What the navigator needs from the desktop.

The navigation core never talks to the OS directly. It goes through
these two protocols; tilewalk.core.window and tilewalk.tiling.monitor
provide the Win32 implementation, and tests provide in-memory fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol

from tilewalk.tiling.rect import Rect


class ManagedWindow(Protocol):
    """A top-level window the navigator can query and move."""

    def frame_rect(self) -> Rect:
        """Outer frame rectangle in screen coordinates."""
        ...

    def monitor_index(self) -> int:
        """Index of the display the window is on."""
        ...

    def unmaximize(self) -> None:
        ...

    def unfullscreen(self) -> None:
        ...

    def move_resize(self, rect: Rect) -> bool:
        """Move and resize the window to cover *rect*."""
        ...


class DisplayService(Protocol):
    """Display geometry and the focused window."""

    def focused_window(self) -> Optional[ManagedWindow]:
        ...

    def monitor_count(self) -> int:
        ...

    def monitor_geometry(self, index: int) -> Rect:
        """Full geometry of a display."""
        ...

    def work_area(self, index: int) -> Optional[Rect]:
        """Usable area of a display (panels and taskbar excluded)."""
        ...
