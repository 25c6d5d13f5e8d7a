"""
tilewalk.render.drawing - Dibujo del layout sobre un contexto tipo Cairo.

Cada region hoja se dibuja como un contorno de esquinas redondeadas.
Si la region tiene un inset encima, el contorno sigue el poligono que
queda tras recortarlo (tilewalk.tiling.boundary), y el inset se dibuja
despues por separado.

El contexto solo necesita la API de cairo.Context que se usa aqui:
new_path, move_to, line_to, arc, arc_negative, close_path,
set_source_rgba, fill y stroke.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from tilewalk.tiling.boundary import Polygon, extract_boundary, polygon_area
from tilewalk.tiling.layout_tree import LayoutTree
from tilewalk.tiling.rect import Rect

log = logging.getLogger(__name__)


DEFAULT_CORNER_RADIUS = 10

# Por debajo de esto una esquina se considera recta
_EPSILON = 1e-6

# (nombre del metodo de cairo.Context, argumentos)
PathOp = tuple[str, tuple[float, ...]]


@dataclass(frozen=True, slots=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class Colors:
    """Colores de relleno normal, relleno resaltado y borde."""

    background: RGBA
    highlight: RGBA
    border: RGBA


# Azul por defecto
DEFAULT_COLORS = Colors(
    background=RGBA(12 / 255, 117 / 255, 222 / 255, 0.3),
    highlight=RGBA(12 / 255, 117 / 255, 222 / 255, 0.6),
    border=RGBA(12 / 255, 117 / 255, 222 / 255, 1.0),
)


# ============================================================================
# Contorno redondeado
# ============================================================================

def rounded_path(polygon: Polygon, radius: float) -> list[PathOp]:
    """
    Operaciones de trazo para *polygon* con esquinas redondeadas.

    Cada esquina se sustituye por un arco de radio
    min(radius, lado_entrante / 2, lado_saliente / 2) tangente a ambos
    lados. Las esquinas colineales quedan como tramos rectos. Un
    poligono con area negativa se recorre al reves.

    Returns:
        Lista de (metodo, argumentos); vacia si hay menos de 3 puntos.
    """
    if len(polygon) < 3:
        return []

    points = list(polygon)
    if polygon_area(points) < 0:
        points.reverse()

    radius = max(0.0, radius)
    count = len(points)
    ops: list[PathOp] = []

    for i in range(count):
        px, py = points[i - 1]
        x, y = points[i]
        nx, ny = points[(i + 1) % count]

        in_x, in_y = x - px, y - py
        out_x, out_y = nx - x, ny - y
        len_in = math.hypot(in_x, in_y)
        len_out = math.hypot(out_x, out_y)
        if len_in == 0 or len_out == 0:
            continue

        in_x, in_y = in_x / len_in, in_y / len_in
        out_x, out_y = out_x / len_out, out_y / len_out

        corner = min(radius, len_in / 2, len_out / 2)
        start = (x - in_x * corner, y - in_y * corner)
        end = (x + out_x * corner, y + out_y * corner)

        ops.append(("line_to" if ops else "move_to", start))

        turn = in_x * out_y - in_y * out_x
        if corner > _EPSILON and abs(turn) > _EPSILON:
            cx = x - in_x * corner + out_x * corner
            cy = y - in_y * corner + out_y * corner
            a0 = math.atan2(start[1] - cy, start[0] - cx)
            a1 = math.atan2(end[1] - cy, end[0] - cx)
            ops.append(("arc" if turn > 0 else "arc_negative", (cx, cy, corner, a0, a1)))
        else:
            ops.append(("line_to", end))

    if ops:
        ops.append(("close_path", ()))
    return ops


def _replay(cr: Any, ops: list[PathOp]) -> None:
    cr.new_path()
    for name, args in ops:
        getattr(cr, name)(*args)


def draw_rounded_polygon(
    cr: Any,
    rect: Rect,
    radius: float,
    fill: RGBA,
    stroke: RGBA,
    excluded: Optional[Rect] = None,
) -> bool:
    """
    Rellena y perfila *rect* (menos *excluded*) con esquinas redondeadas.

    Returns:
        True si se dibujo algo; False si no quedaba area visible.
    """
    ops = rounded_path(extract_boundary(rect, excluded), radius)
    if not ops:
        return False

    cr.set_source_rgba(fill.r, fill.g, fill.b, fill.a)
    _replay(cr, ops)
    cr.fill()

    cr.set_source_rgba(stroke.r, stroke.g, stroke.b, stroke.a)
    _replay(cr, ops)
    cr.stroke()
    return True


# ============================================================================
# Layout completo
# ============================================================================

def draw_layout(
    cr: Any,
    tree: LayoutTree,
    display_rect: Rect,
    colors: Colors = DEFAULT_COLORS,
    corner_radius: float = DEFAULT_CORNER_RADIUS,
    cutout: Optional[Rect] = None,
    node: int = 0,
) -> int:
    """
    Dibuja las regiones de *tree* a partir de *node*.

    Las coordenadas se hacen relativas a *display_rect* (la superficie
    cubre un monitor). Los rectangulos del arbol ya deben estar
    calculados.

    Args:
        cr:            Contexto de dibujo tipo cairo.Context.
        tree:          Layout con rectangulos calculados.
        display_rect:  Geometria del monitor.
        colors:        Colores de relleno y borde.
        corner_radius: Radio de las esquinas.
        cutout:        Recorte heredado (inset del ancestro), relativo.
        node:          Nodo desde el que dibujar.

    Returns:
        Numero de regiones dibujadas.
    """
    current = tree.node(node)
    if current.rect is None:
        return 0

    dx, dy = -display_rect.x, -display_rect.y
    drawn = 0

    inset = tree.node(current.inset) if current.inset is not None else None
    if inset is not None and inset.rect is not None and cutout is None:
        cutout = inset.rect.translate(dx, dy).pad(-inset.margin)

    if current.is_leaf():
        fill = colors.highlight if current.is_highlighted else colors.background
        region = current.rect.translate(dx, dy).pad(current.margin)
        if draw_rounded_polygon(cr, region, corner_radius, fill, colors.border, cutout):
            drawn += 1
        else:
            log.debug("Region %d has no visible area, skipped", current.index)

    for child in current.children:
        drawn += draw_layout(cr, tree, display_rect, colors, corner_radius, cutout, child)

    if inset is not None:
        drawn += draw_layout(cr, tree, display_rect, colors, corner_radius, None, inset.index)

    return drawn
