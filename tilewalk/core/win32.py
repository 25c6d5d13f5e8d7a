"""
tilewalk.core.win32 - Win32 window calls used to move the focused window.

Only the handful of user32 entry points the navigator needs: read a
window's frame, its maximized/fullscreen state and its monitor, and
move/resize it. Windows only; nothing else in the package imports
ctypes.
"""

from __future__ import annotations

import ctypes
import ctypes.wintypes

user32 = ctypes.windll.user32

# Handles are pointer sized; the default c_int restype truncates them on 64-bit
user32.MonitorFromWindow.argtypes = [ctypes.wintypes.HWND, ctypes.wintypes.DWORD]
user32.MonitorFromWindow.restype = ctypes.wintypes.HMONITOR

# ============================================================================
# Constants
# ============================================================================

# ShowWindow commands
SW_RESTORE = 9

# GetWindowLong indices
GWL_STYLE = -16

# Window styles
WS_CAPTION = 0x00C00000
WS_THICKFRAME = 0x00040000

# SetWindowPos flags
SWP_NOZORDER = 0x0004
SWP_NOACTIVATE = 0x0010
SWP_FRAMECHANGED = 0x0020
HWND_TOP = 0

# MonitorFromWindow flags
MONITOR_DEFAULTTONEAREST = 0x00000002

# Tolerance (px) when checking whether a window covers its monitor
FULLSCREEN_TOLERANCE = 5


# ============================================================================
# Wrapped API functions
# ============================================================================

def get_window_rect(hwnd: int) -> tuple[int, int, int, int]:
    """Return (left, top, right, bottom) of the window."""
    rect = ctypes.wintypes.RECT()
    user32.GetWindowRect(hwnd, ctypes.byref(rect))
    return (rect.left, rect.top, rect.right, rect.bottom)


def get_window_style(hwnd: int) -> int:
    """Return the WS_* style bits."""
    return user32.GetWindowLongW(hwnd, GWL_STYLE)


def is_window_zoomed(hwnd: int) -> bool:
    """True if the window is maximized."""
    return bool(user32.IsZoomed(hwnd))


def is_window_valid(hwnd: int) -> bool:
    return bool(user32.IsWindow(hwnd))


def get_foreground_window() -> int:
    """Return the HWND of the current foreground window (0 if none)."""
    return user32.GetForegroundWindow() or 0


def show_window(hwnd: int, cmd: int) -> bool:
    return bool(user32.ShowWindow(hwnd, cmd))


def monitor_from_window(hwnd: int) -> int:
    """HMONITOR of the display that holds most of the window."""
    return user32.MonitorFromWindow(hwnd, MONITOR_DEFAULTTONEAREST) or 0


def set_window_pos(
    hwnd: int,
    x: int,
    y: int,
    width: int,
    height: int,
    flags: int = SWP_NOZORDER | SWP_NOACTIVATE,
    insert_after: int = HWND_TOP,
) -> bool:
    """Move and resize a window."""
    return bool(
        user32.SetWindowPos(hwnd, insert_after, x, y, width, height, flags)
    )
