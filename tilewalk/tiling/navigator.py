"""
tilewalk.tiling.navigator - Navegacion direccional entre regiones.

El Navigator coordina el provider de layouts, el servicio de monitores
y la seleccion direccional para mover la ventana enfocada:

    - Modo normal: mueve la ventana a la region vecina en la direccion
      pedida; si no hay vecina en el monitor, salta al monitor vecino y
      elige la region mas cercana al centro original de la ventana.
    - Modo span: agranda la ventana para cubrir tambien la region
      vecina (union de regiones). Nunca cambia de monitor.

Cada llamada recalcula todo desde cero y termina, como mucho, en una
sola llamada a move_resize(). Que no haya vecina no es un error: la
llamada simplemente no hace nada y retorna None.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from tilewalk.errors import RECOVERABLE_PROVIDER_ERRORS, log_recoverable
from tilewalk.tiling.directional import (
    Direction,
    choose_adjacent,
    choose_adjacent_to_span,
    pick_display_in_direction,
)
from tilewalk.tiling.layout_tree import LayoutTree, default_2x2
from tilewalk.tiling.leaves import (
    Leaf,
    collect_leaves,
    find_leaf_for_point,
    leaves_overlapping,
    nearest_leaf,
    span_rect,
)
from tilewalk.tiling.providers import DefaultLayoutStrategy, LayoutProvider
from tilewalk.tiling.rect import Rect

if TYPE_CHECKING:
    from tilewalk.core.services import DisplayService, ManagedWindow

log = logging.getLogger(__name__)


class Navigator:
    """
    Mueve ventanas entre las regiones de los layouts de cada monitor.

    Uso tipico:
        nav = Navigator(provider, displays)
        nav.navigate_focused(Direction.RIGHT)
        nav.navigate_focused(Direction.DOWN, span=True)
    """

    def __init__(
        self,
        provider: LayoutProvider,
        displays: DisplayService,
        default_layout: DefaultLayoutStrategy = default_2x2,
    ) -> None:
        """
        Args:
            provider:       Origen de los layouts por monitor.
            displays:       Servicio de monitores y ventana enfocada.
            default_layout: Layout de respaldo si el provider falla o no
                            tiene layout para un monitor.
        """
        self._provider = provider
        self._displays = displays
        self._default_layout = default_layout

    # ------------------------------------------------------------------
    # Layouts y hojas
    # ------------------------------------------------------------------
    def load_layout(self, display_index: int) -> LayoutTree:
        """
        Layout del monitor, o el de respaldo si no se puede cargar.

        Cualquier excepcion del provider cuenta como "sin layout": el
        provider puede ser codigo externo con sus propios errores.
        """
        try:
            layout = self._provider.load_layout_for_display(display_index)
        except Exception:
            log_recoverable(
                log,
                "Layout load failed for display %d, using default layout",
                display_index,
                level=logging.WARNING,
            )
            layout = None

        if layout is None:
            layout = self._default_layout()
        return layout

    def leaves_for_display(self, display_index: int) -> list[Leaf]:
        """
        Hojas calculadas del layout de un monitor.

        Retorna una lista vacia si el monitor no tiene area de trabajo
        (p.ej. se desconecto durante la consulta).
        """
        try:
            work = self._displays.work_area(display_index)
        except RECOVERABLE_PROVIDER_ERRORS:
            log_recoverable(log, "Work area query failed for display %d", display_index)
            return []

        if work is None or work.is_empty:
            log.debug("Display %d has no usable area", display_index)
            return []

        layout = self.load_layout(display_index)
        layout.calculate_rects(work.x, work.y, work.w, work.h)
        return collect_leaves(layout)

    # ------------------------------------------------------------------
    # Navegacion
    # ------------------------------------------------------------------
    def navigate_focused(self, direction: Direction, span: bool = False) -> Optional[Rect]:
        """Navega con la ventana enfocada, si la hay."""
        window = self._displays.focused_window()
        if window is None:
            log.debug("navigate %s: no focused window", direction.value)
            return None
        return self.navigate(window, direction, span=span)

    def navigate(
        self,
        window: ManagedWindow,
        direction: Direction,
        span: bool = False,
    ) -> Optional[Rect]:
        """
        Mueve (o agranda, en modo span) la ventana en una direccion.

        Args:
            window:    Ventana a mover.
            direction: Direccion pedida.
            span:      True para agrandar la seleccion en vez de moverla.

        Returns:
            El rectangulo aplicado a la ventana, o None si no se hizo nada.
        """
        self._ensure_normal(window)

        display = window.monitor_index()
        leaves = self.leaves_for_display(display)
        if not leaves:
            return None

        frame = window.frame_rect()
        cx, cy = frame.center
        current = find_leaf_for_point(leaves, cx, cy) or nearest_leaf(leaves, cx, cy)
        if current is None:
            return None

        if span:
            return self._grow_span(window, leaves, frame, current, direction)

        neighbour = choose_adjacent(leaves, current.rect, direction)
        if neighbour is not None:
            return self._apply(window, neighbour.rect, direction)

        return self._jump_display(window, display, (cx, cy), direction)

    def _grow_span(
        self,
        window: ManagedWindow,
        leaves: list[Leaf],
        frame: Rect,
        current: Leaf,
        direction: Direction,
    ) -> Optional[Rect]:
        span = span_rect(leaves_overlapping(leaves, frame)) or current.rect

        next_leaf = choose_adjacent_to_span(leaves, span, direction)
        if next_leaf is None:
            log.debug("span %s: nothing to grow into from %s", direction.value, span)
            return None

        return self._apply(window, span.union(next_leaf.rect), direction)

    def _jump_display(
        self,
        window: ManagedWindow,
        display: int,
        origin: tuple[float, float],
        direction: Direction,
    ) -> Optional[Rect]:
        try:
            geometries = [
                self._displays.monitor_geometry(i)
                for i in range(self._displays.monitor_count())
            ]
        except RECOVERABLE_PROVIDER_ERRORS:
            log_recoverable(log, "Monitor geometry query failed")
            return None

        target_display = pick_display_in_direction(geometries, display, direction)
        if target_display == display:
            log.debug("navigate %s: no tile or display beyond display %d", direction.value, display)
            return None

        leaves = self.leaves_for_display(target_display)
        target = nearest_leaf(leaves, *origin)
        if target is None:
            return None

        log.info("navigate %s: display %d -> %d", direction.value, display, target_display)
        return self._apply(window, target.rect, direction)

    # ------------------------------------------------------------------
    # Efectos sobre la ventana
    # ------------------------------------------------------------------
    @staticmethod
    def _ensure_normal(window: ManagedWindow) -> None:
        """Sale de pantalla completa y desmaximiza antes de mover."""
        for action in (window.unfullscreen, window.unmaximize):
            try:
                action()
            except RECOVERABLE_PROVIDER_ERRORS:
                log_recoverable(log, "Window state normalization failed")

    @staticmethod
    def _apply(window: ManagedWindow, rect: Rect, direction: Direction) -> Optional[Rect]:
        if not window.move_resize(rect):
            log.debug("navigate %s: move to %s rejected by the window", direction.value, rect)
            return None
        log.info("navigate %s: window -> %s", direction.value, rect)
        return rect
