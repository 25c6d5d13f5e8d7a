"""
tilewalk.core.window - Win32 handle to the window being navigated.

Each Win32Window is a lightweight, live handle to a real top-level
window. Geometry is read from the OS on demand so it is never stale.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tilewalk.core import win32
from tilewalk.tiling.rect import Rect

if TYPE_CHECKING:
    from tilewalk.tiling.monitor import Win32DisplayService

log = logging.getLogger(__name__)


class Win32Window:
    """
    ManagedWindow implementation over an HWND.

    Equality and hashing are based solely on the HWND value.
    """

    __slots__ = ("_hwnd", "_displays")

    def __init__(self, hwnd: int, displays: Win32DisplayService) -> None:
        self._hwnd = hwnd
        self._displays = displays

    @property
    def hwnd(self) -> int:
        return self._hwnd

    @property
    def is_valid(self) -> bool:
        """True if the underlying OS window still exists."""
        return win32.is_window_valid(self._hwnd)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def frame_rect(self) -> Rect:
        return Rect.from_ltrb(*win32.get_window_rect(self._hwnd))

    def monitor_index(self) -> int:
        return self._displays.index_of_handle(win32.monitor_from_window(self._hwnd))

    # ------------------------------------------------------------------
    # State normalization
    # ------------------------------------------------------------------
    def unmaximize(self) -> None:
        if win32.is_window_zoomed(self._hwnd):
            win32.show_window(self._hwnd, win32.SW_RESTORE)
            log.debug("UNMAXIMIZE %s", self)

    def unfullscreen(self) -> None:
        """
        Restore a natively fullscreen window (no caption or thick frame,
        covering its whole monitor).
        """
        style = win32.get_window_style(self._hwnd)
        if style & (win32.WS_CAPTION | win32.WS_THICKFRAME):
            return

        monitor = self._displays.monitor_geometry(self.monitor_index())
        frame = self.frame_rect()
        tol = win32.FULLSCREEN_TOLERANCE
        if (
            frame.left <= monitor.left + tol
            and frame.top <= monitor.top + tol
            and frame.right >= monitor.right - tol
            and frame.bottom >= monitor.bottom - tol
        ):
            win32.show_window(self._hwnd, win32.SW_RESTORE)
            log.debug("UNFULLSCREEN %s", self)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def move_resize(self, rect: Rect) -> bool:
        """Reposition and resize the window (coordinates rounded to pixels)."""
        left, top = round(rect.left), round(rect.top)
        width = round(rect.right) - left
        height = round(rect.bottom) - top
        return win32.set_window_pos(
            self._hwnd,
            left,
            top,
            width,
            height,
            flags=win32.SWP_NOZORDER | win32.SWP_NOACTIVATE | win32.SWP_FRAMECHANGED,
        )

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Win32Window):
            return self._hwnd == other._hwnd
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._hwnd)

    def __repr__(self) -> str:
        return f"Win32Window(hwnd={self._hwnd:#010x})"
