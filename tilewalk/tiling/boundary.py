"""
tilewalk.tiling.boundary - Contorno de un rectangulo con un recorte.

Dado el rectangulo de una region y otro rectangulo que se le resta
(el inset que se dibuja por separado), calcula el poligono que describe
lo que queda visible. El resultado alimenta al renderer, que lo dibuja
con esquinas redondeadas.

El algoritmo:
    1. Calcular la interseccion entre la region y el recorte.
    2. Partir la region en una rejilla minima usando los bordes de
       ambos rectangulos como cortes.
    3. Conservar las celdas cuyo centro esta en la region y fuera de
       la interseccion.
    4. Emitir los bordes de cada celda; un borde compartido por dos
       celdas se cancela, de modo que solo sobrevive el contorno.
    5. Encadenar los bordes supervivientes en lazos cerrados y
       quedarse con el de mayor area.

Los puntos se comparan con coordenadas cuantizadas (enteros), nunca
con igualdad de floats.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from tilewalk.tiling.rect import Rect

log = logging.getLogger(__name__)


Point = tuple[float, float]
Polygon = list[Point]

# Escala de cuantizacion: 6 decimales de precision
COORD_PRECISION = 1e6

# Longitud minima para considerar que un borde existe
_MIN_EDGE = 1e-7

_PointKey = tuple[int, int]
_EdgeKey = tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class _Edge:
    start: Point
    end: Point


def _key_coord(value: float) -> int:
    return round(value * COORD_PRECISION)


def _point_key(point: Point) -> _PointKey:
    return (_key_coord(point[0]), _key_coord(point[1]))


def _edge_key(x1: float, y1: float, x2: float, y2: float) -> _EdgeKey:
    """Clave no dirigida: A->B y B->A producen la misma clave."""
    ax, ay = _key_coord(x1), _key_coord(y1)
    bx, by = _key_coord(x2), _key_coord(y2)
    return (min(ax, bx), min(ay, by), max(ax, bx), max(ay, by))


def _oriented_key(edge: _Edge) -> tuple[_PointKey, _PointKey]:
    return (_point_key(edge.start), _point_key(edge.end))


def _unique_sorted(values: Iterable[float]) -> list[float]:
    """Valores finitos unicos (segun su clave cuantizada), ordenados."""
    seen: set[int] = set()
    unique: list[float] = []
    for value in values:
        if not math.isfinite(value):
            continue
        key = _key_coord(value)
        if key in seen:
            continue
        seen.add(key)
        unique.append(value)
    unique.sort()
    return unique


def polygon_area(points: Polygon) -> float:
    """
    Area con signo por la formula del cordon (shoelace).

    En coordenadas de pantalla (Y hacia abajo) un recorrido
    sup-izq -> sup-der -> inf-der -> inf-izq da area positiva.
    Menos de 3 puntos -> 0.
    """
    if len(points) < 3:
        return 0.0

    total = 0.0
    count = len(points)
    for i in range(count):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % count]
        total += x1 * y2 - x2 * y1
    return total * 0.5


def _kept_cells(rect: Rect, inter: Rect) -> list[tuple[float, float, float, float]]:
    xs = _unique_sorted([rect.left, rect.right, inter.left, inter.right])
    ys = _unique_sorted([rect.top, rect.bottom, inter.top, inter.bottom])

    cells: list[tuple[float, float, float, float]] = []
    for x0, x1 in zip(xs, xs[1:]):
        if x1 <= x0:
            continue
        cx = (x0 + x1) / 2
        for y0, y1 in zip(ys, ys[1:]):
            if y1 <= y0:
                continue
            cy = (y0 + y1) / 2
            if rect.contains_point(cx, cy) and not inter.contains_point(cx, cy):
                cells.append((x0, x1, y0, y1))
    return cells


def _boundary_edges(cells: list[tuple[float, float, float, float]]) -> list[_Edge]:
    """Bordes de todas las celdas, cancelando los compartidos."""
    edges: dict[_EdgeKey, _Edge] = {}

    def add(x1: float, y1: float, x2: float, y2: float) -> None:
        if abs(x1 - x2) < _MIN_EDGE and abs(y1 - y2) < _MIN_EDGE:
            return
        key = _edge_key(x1, y1, x2, y2)
        if key in edges:
            del edges[key]
        else:
            edges[key] = _Edge((x1, y1), (x2, y2))

    for x0, x1, y0, y1 in cells:
        add(x0, y0, x1, y0)
        add(x1, y0, x1, y1)
        add(x1, y1, x0, y1)
        add(x0, y1, x0, y0)

    return list(edges.values())


def _trace_loops(edges: list[_Edge]) -> list[Polygon]:
    """
    Encadena bordes dirigidos en lazos cerrados.

    Un lazo que llega a un punto sin borde de salida disponible se
    descarta.
    """
    by_start: dict[_PointKey, list[_Edge]] = {}
    for edge in edges:
        by_start.setdefault(_point_key(edge.start), []).append(edge)

    visited: set[tuple[_PointKey, _PointKey]] = set()
    loops: list[Polygon] = []

    for first in edges:
        if _oriented_key(first) in visited:
            continue

        loop: Polygon = []
        start_key = _point_key(first.start)
        current = first

        while True:
            visited.add(_oriented_key(current))
            loop.append(current.start)

            next_key = _point_key(current.end)
            if next_key == start_key:
                break

            following = next(
                (e for e in by_start.get(next_key, ()) if _oriented_key(e) not in visited),
                None,
            )
            if following is None:
                log.debug("Boundary loop dead-ends at %s, dropped", current.end)
                loop = []
                break
            current = following

        if loop:
            loops.append(loop)

    return loops


def extract_boundary(rect: Rect, excluded: Rect | None = None) -> Polygon:
    """
    Poligono de *rect* menos la parte que solapa con *excluded*.

    Args:
        rect:     Region a dibujar. Debe tener ancho y alto positivos.
        excluded: Recorte opcional.

    Returns:
        Lista ordenada de puntos (x, y) con area positiva. Si no hay
        recorte efectivo, las cuatro esquinas de *rect*. Lista vacia si
        *rect* es degenerado, si el recorte lo cubre entero o si ningun
        lazo se pudo cerrar. Si quedan varias piezas (o un agujero), solo
        se retorna el lazo de mayor area.
    """
    if rect.is_empty:
        return []

    inter = rect.intersection(excluded)
    if inter is None:
        return rect.corners()

    cells = _kept_cells(rect, inter)
    if not cells:
        return []

    edges = _boundary_edges(cells)
    if not edges:
        return []

    best: Polygon = []
    best_area = -math.inf
    for loop in _trace_loops(edges):
        area = abs(polygon_area(loop))
        if area > best_area:
            best = loop
            best_area = area

    return best
