"""
tilewalk.tiling - Geometria de layouts y navegacion direccional.

Este paquete contiene:
    - rect        : Estructura Rect para geometria de areas
    - scoring     : Seleccion del mejor candidato puntuado
    - boundary    : Contorno de una region con un inset recortado
    - layout_tree : LayoutTree - arbol de regiones (arena de nodos)
    - providers   : Origen de los layouts por monitor
    - leaves      : Hojas de un layout calculado y busquedas sobre ellas
    - directional : Seleccion de vecino por direccion (tile, span, monitor)
    - navigator   : Navigator - mueve la ventana enfocada entre regiones
    - monitor     : Deteccion de monitores via pywin32 (solo Windows, no
                    se importa aqui)
"""

from tilewalk.tiling.rect import Rect
from tilewalk.tiling.boundary import Polygon, extract_boundary, polygon_area
from tilewalk.tiling.layout_tree import LayoutNode, LayoutTree, default_2x2
from tilewalk.tiling.providers import LayoutProvider, StaticLayoutProvider
from tilewalk.tiling.leaves import Leaf, collect_leaves
from tilewalk.tiling.directional import (
    Direction,
    choose_adjacent,
    choose_adjacent_to_span,
    pick_display_in_direction,
)
from tilewalk.tiling.navigator import Navigator

__all__ = [
    "Rect",
    "Polygon",
    "extract_boundary",
    "polygon_area",
    "LayoutNode",
    "LayoutTree",
    "default_2x2",
    "LayoutProvider",
    "StaticLayoutProvider",
    "Leaf",
    "collect_leaves",
    "Direction",
    "choose_adjacent",
    "choose_adjacent_to_span",
    "pick_display_in_direction",
    "Navigator",
]
