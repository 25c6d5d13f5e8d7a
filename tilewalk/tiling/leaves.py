"""
tilewalk.tiling.leaves - Hojas de un layout ya calculado.

Aplana el arbol de un monitor en una lista de regiones finales (hojas)
con su rectangulo, y ofrece las busquedas que necesita la navegacion:
hoja bajo un punto, hoja mas cercana, hojas solapadas por una ventana
y el rectangulo union (span) de varias hojas.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from tilewalk.tiling.layout_tree import LayoutNode, LayoutTree
from tilewalk.tiling.rect import Rect
from tilewalk.tiling.scoring import pick_best

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Leaf:
    """
    Region final del layout.

    Atributos:
        rect: Rectangulo calculado en coordenadas de pantalla.
        node: Indice del nodo en el LayoutTree (solo para resaltarlo).
    """

    rect: Rect
    node: int


def collect_leaves(tree: LayoutTree) -> list[Leaf]:
    """
    Hojas del arbol con rectangulo calculado, en pre-orden.

    Los insets no se incluyen, de modo que las hojas de un monitor no
    se solapan entre si.
    """
    leaves: list[Leaf] = []

    def visit(node: LayoutNode) -> None:
        if node.is_leaf() and node.rect is not None:
            leaves.append(Leaf(node.rect, node.index))

    tree.for_self_and_descendants(visit)
    return leaves


def find_leaf_for_point(leaves: list[Leaf], px: float, py: float) -> Optional[Leaf]:
    """Primera hoja cuyo rectangulo contiene el punto (bordes incluidos)."""
    return next((leaf for leaf in leaves if leaf.rect.contains_point(px, py)), None)


def nearest_leaf(leaves: list[Leaf], px: float, py: float) -> Optional[Leaf]:
    """Hoja cuyo centro esta mas cerca del punto."""
    return pick_best(
        leaves,
        secondary=lambda leaf: math.hypot(leaf.rect.center_x - px, leaf.rect.center_y - py),
    )


def leaves_overlapping(leaves: list[Leaf], rect: Rect) -> list[Leaf]:
    """Hojas que comparten area con *rect*."""
    return [leaf for leaf in leaves if leaf.rect.overlaps(rect)]


def span_rect(leaves: list[Leaf]) -> Optional[Rect]:
    """Union envolvente de los rectangulos de *leaves*, o None si esta vacia."""
    result: Optional[Rect] = None
    for leaf in leaves:
        result = leaf.rect if result is None else result.union(leaf.rect)
    return result


def set_highlight(tree: LayoutTree, node: Optional[int]) -> None:
    """Resalta una sola region (o ninguna si *node* es None)."""
    for n in tree:
        n.is_highlighted = n.index == node
