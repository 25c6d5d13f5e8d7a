"""
tilewalk.tiling.monitor - Monitores del sistema y su area disponible.

Usa win32api de pywin32 para enumerar los monitores y obtener su area
total y su area de trabajo (descontando la taskbar y otras barras del
sistema). Win32DisplayService expone esos datos a la navegacion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import win32api
import win32con

from tilewalk.core import win32
from tilewalk.core.window import Win32Window
from tilewalk.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Monitor
# ============================================================================
@dataclass(frozen=True, slots=True)
class Monitor:
    """
    Representa un monitor fisico conectado al sistema.

    Atributos:
        handle:     Valor del HMONITOR.
        name:       Nombre del dispositivo (ej. r'\\\\.\\DISPLAY1').
        full_rect:  Area total del monitor (resolucion completa).
        work_rect:  Area de trabajo (descontando taskbar y barras).
        is_primary: True si es el monitor principal.
    """

    handle: int
    name: str
    full_rect: Rect
    work_rect: Rect
    is_primary: bool = False


# ============================================================================
# Funciones de deteccion
# ============================================================================

def get_monitors() -> list[Monitor]:
    """
    Enumera todos los monitores conectados al sistema.

    Returns:
        Lista de Monitor ordenada: el primario primero, luego por nombre.
        El indice en esta lista es el indice de monitor que usa la
        navegacion.
    """
    monitors: list[Monitor] = []

    for hmonitor, _hdc, _rect in win32api.EnumDisplayMonitors(None, None):
        try:
            info = win32api.GetMonitorInfo(hmonitor)
        except win32api.error:
            log.warning("No se pudo obtener info del monitor %s", hmonitor)
            continue

        # info['Monitor'] = (left, top, right, bottom) - area total
        # info['Work']    = (left, top, right, bottom) - area de trabajo
        monitor = Monitor(
            handle=int(hmonitor),
            name=info["Device"],
            full_rect=Rect.from_ltrb(*info["Monitor"]),
            work_rect=Rect.from_ltrb(*info["Work"]),
            is_primary=bool(info["Flags"] & win32con.MONITORINFOF_PRIMARY),
        )
        monitors.append(monitor)
        log.debug(
            "Monitor detectado: %s | total=%s | trabajo=%s | primario=%s",
            monitor.name,
            monitor.full_rect,
            monitor.work_rect,
            monitor.is_primary,
        )

    monitors.sort(key=lambda m: (not m.is_primary, m.name))

    log.info("Monitores detectados: %d", len(monitors))
    return monitors


# ============================================================================
# Win32DisplayService
# ============================================================================
class Win32DisplayService:
    """
    Servicio de monitores sobre Win32.

    focused_window() vuelve a enumerar los monitores, de modo que
    conectar o desconectar una pantalla entre dos navegaciones no deja
    datos viejos.
    """

    def __init__(self, monitors: list[Monitor] | None = None) -> None:
        self._monitors = monitors if monitors is not None else get_monitors()

    def refresh(self) -> None:
        self._monitors = get_monitors()

    @property
    def monitors(self) -> list[Monitor]:
        return list(self._monitors)

    def monitor_count(self) -> int:
        return len(self._monitors)

    def monitor_geometry(self, index: int) -> Rect:
        return self._monitors[index].full_rect

    def work_area(self, index: int) -> Optional[Rect]:
        if not 0 <= index < len(self._monitors):
            return None
        return self._monitors[index].work_rect

    def index_of_handle(self, hmonitor: int) -> int:
        """Indice del monitor con ese HMONITOR (0 si no se encuentra)."""
        for i, monitor in enumerate(self._monitors):
            if monitor.handle == hmonitor:
                return i
        log.debug("HMONITOR %#x desconocido, usando monitor 0", hmonitor)
        return 0

    def focused_window(self) -> Optional[Win32Window]:
        hwnd = win32.get_foreground_window()
        if not hwnd:
            return None
        self.refresh()
        return Win32Window(hwnd, self)
