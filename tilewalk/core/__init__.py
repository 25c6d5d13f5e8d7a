"""
tilewalk.core - Window services and command plumbing.

This package contains:
    - services : ManagedWindow / DisplayService protocols used by the navigator
    - commands : CommandDispatcher and the navigation commands
    - win32    : Low-level Win32 window calls via ctypes (Windows only)
    - window   : Win32Window, the ManagedWindow over an HWND (Windows only)

The Win32 modules are not imported here so the package stays importable
on any platform.
"""

from tilewalk.core.services import DisplayService, ManagedWindow
from tilewalk.core.commands import Command, CommandDispatcher, build_navigation_commands

__all__ = [
    "DisplayService", "ManagedWindow",
    "Command", "CommandDispatcher", "build_navigation_commands",
]
