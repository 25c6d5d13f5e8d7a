"""
tilewalk.tiling.layout_tree - Arbol de regiones de un layout.

Un layout es una particion recursiva del area de trabajo de un monitor.
Cada nodo interno tiene exactamente dos hijos; el porcentaje del PRIMER
hijo decide como se parte el padre:

    percentage > 0  -> corte vertical: el primer hijo es la columna
                       izquierda con ese fraccion del ancho.
    percentage < 0  -> corte horizontal: el primer hijo es la fila
                       superior con |percentage| del alto.

El segundo hijo recibe el resto (su porcentaje se ignora, por convencion 0).

Esquema del layout por defecto (2x2):
    +--------+--------+
    |   1    |   3    |
    +--------+--------+
    |   2    |   4    |
    +--------+--------+

Ademas, un nodo puede llevar un *inset*: un sub-arbol flotante colocado
dentro de su rectangulo (caja fraccional) que se dibuja encima y se
recorta del resto de regiones.

Los nodos viven en una lista (arena) y se referencian por indice; el
arbol no guarda referencias vivas entre objetos.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from tilewalk.errors import LayoutLoadError
from tilewalk.tiling.rect import Rect

log = logging.getLogger(__name__)


# Margen por defecto alrededor de cada region (pixeles)
DEFAULT_MARGIN = 4

# Caja por defecto de un inset: centrado, mitad de ancho y alto
DEFAULT_INSET_BOX: tuple[float, float, float, float] = (0.25, 0.25, 0.5, 0.5)


@dataclass(slots=True)
class LayoutNode:
    """
    Nodo del arbol de layout.

    Atributos:
        index:          Posicion en la arena.
        percentage:     Fraccion de corte (ver docstring del modulo).
        margin:         Margen interior para dibujar la region.
        parent:         Indice del padre, o None para raices.
        children:       Indices de los hijos (0 o 2).
        rect:           Rectangulo calculado; None hasta calculate_rects().
        inset:          Indice de la raiz del sub-arbol inset, o None.
        inset_box:      (fx, fy, fw, fh) del inset relativo a este nodo.
        is_highlighted: Flag de presentacion (region resaltada).
    """

    index: int
    percentage: float = 0.0
    margin: float = DEFAULT_MARGIN
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)
    rect: Optional[Rect] = None
    inset: Optional[int] = None
    inset_box: tuple[float, float, float, float] = DEFAULT_INSET_BOX
    is_highlighted: bool = False

    def is_leaf(self) -> bool:
        return not self.children


class LayoutTree:
    """
    Arbol de layout almacenado como arena de nodos.

    El nodo 0 es siempre la raiz. Los sub-arboles inset comparten la
    misma arena pero no cuelgan de ``children`` de nadie: solo se llega
    a ellos a traves de ``LayoutNode.inset``.

    Uso tipico:
        tree = LayoutTree()
        left = tree.add_node(0.5, parent=tree.root.index)
        tree.add_node(0, parent=tree.root.index)
        tree.calculate_rects(0, 0, 1920, 1080)
    """

    def __init__(self, margin: float = DEFAULT_MARGIN) -> None:
        self._nodes: list[LayoutNode] = [LayoutNode(index=0, margin=margin)]

    # ------------------------------------------------------------------
    # Acceso
    # ------------------------------------------------------------------
    @property
    def root(self) -> LayoutNode:
        return self._nodes[0]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def node(self, index: int) -> LayoutNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[LayoutNode]:
        return iter(self._nodes)

    # ------------------------------------------------------------------
    # Construccion
    # ------------------------------------------------------------------
    def add_node(
        self,
        percentage: float = 0.0,
        parent: Optional[int] = None,
        margin: float = DEFAULT_MARGIN,
    ) -> int:
        """
        Agrega un nodo a la arena.

        Args:
            percentage: Fraccion de corte (solo cuenta en el primer hijo).
            parent:     Indice del padre; None crea una raiz suelta (usado
                        por los insets).
            margin:     Margen interior de la region.

        Returns:
            Indice del nuevo nodo.

        Raises:
            ValueError: Si el padre ya tiene dos hijos.
        """
        index = len(self._nodes)
        if parent is not None:
            siblings = self._nodes[parent].children
            if len(siblings) >= 2:
                raise ValueError(f"Layout node {parent} already has two children")
            siblings.append(index)

        self._nodes.append(
            LayoutNode(index=index, percentage=percentage, margin=margin, parent=parent)
        )
        return index

    def add_inset(
        self,
        owner: int,
        box: tuple[float, float, float, float] = DEFAULT_INSET_BOX,
        margin: float = DEFAULT_MARGIN,
    ) -> int:
        """Crea la raiz de un sub-arbol inset dentro de *owner*."""
        index = self.add_node(0.0, parent=None, margin=margin)
        owner_node = self._nodes[owner]
        owner_node.inset = index
        owner_node.inset_box = box
        return index

    def clone(self) -> LayoutTree:
        """Copia profunda, para que cada consulta calcule sobre su propio arbol."""
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Calculo de rectangulos
    # ------------------------------------------------------------------
    def calculate_rects(self, x: float, y: float, width: float, height: float) -> None:
        """
        Calcula el rectangulo de cada nodo dentro del area dada.

        Los nodos de la arena que no son alcanzables desde la raiz (ni por
        hijos ni por insets) quedan con rect=None.
        """
        for node in self._nodes:
            node.rect = None
        self._layout(0, Rect(x, y, width, height))

    def _layout(self, index: int, area: Rect) -> None:
        node = self._nodes[index]
        node.rect = area

        if len(node.children) == 2:
            first = self._nodes[node.children[0]]
            fraction = min(1.0, abs(first.percentage))
            if first.percentage > 0:
                split_w = area.w * fraction
                self._layout(first.index, Rect(area.x, area.y, split_w, area.h))
                self._layout(
                    node.children[1],
                    Rect(area.x + split_w, area.y, area.w - split_w, area.h),
                )
            elif first.percentage < 0:
                split_h = area.h * fraction
                self._layout(first.index, Rect(area.x, area.y, area.w, split_h))
                self._layout(
                    node.children[1],
                    Rect(area.x, area.y + split_h, area.w, area.h - split_h),
                )
            else:
                log.warning("Layout node %d has a zero split, children left without rects", index)
        elif node.children:
            log.warning("Layout node %d has %d children, expected 2", index, len(node.children))

        if node.inset is not None:
            fx, fy, fw, fh = node.inset_box
            self._layout(
                node.inset,
                Rect(area.x + area.w * fx, area.y + area.h * fy, area.w * fw, area.h * fh),
            )

    # ------------------------------------------------------------------
    # Recorrido
    # ------------------------------------------------------------------
    def for_self_and_descendants(
        self,
        visitor: Callable[[LayoutNode], None],
        start: int = 0,
    ) -> None:
        """
        Visita *start* y sus descendientes en pre-orden.

        Los insets no se visitan: sus regiones se superponen a las del
        arbol que las contiene.
        """
        stack = [start]
        while stack:
            node = self._nodes[stack.pop()]
            visitor(node)
            stack.extend(reversed(node.children))

    # ------------------------------------------------------------------
    # Definiciones como diccionario
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutTree:
        """
        Construye un arbol desde una definicion anidada.

        Formato:
            {"percentage": 0, "margin": 4,
             "children": [{...}, {...}],
             "inset": {"box": [fx, fy, fw, fh], ...}}

        Raises:
            LayoutLoadError: Si la definicion no es valida.
        """
        try:
            tree = cls(margin=float(data.get("margin", DEFAULT_MARGIN)))
            tree._fill_from_dict(0, data)
        except (TypeError, ValueError, AttributeError) as exc:
            raise LayoutLoadError(f"Invalid layout definition: {exc}") from exc
        return tree

    def _fill_from_dict(self, index: int, data: Mapping[str, Any]) -> None:
        children = data.get("children") or []
        if len(children) not in (0, 2):
            raise ValueError(f"expected 0 or 2 children, got {len(children)}")

        for child in children:
            child_index = self.add_node(
                float(child.get("percentage", 0.0)),
                parent=index,
                margin=float(child.get("margin", DEFAULT_MARGIN)),
            )
            self._fill_from_dict(child_index, child)

        inset = data.get("inset")
        if inset:
            box = tuple(float(v) for v in inset.get("box", DEFAULT_INSET_BOX))
            if len(box) != 4:
                raise ValueError("inset box needs 4 values")
            inset_index = self.add_inset(
                index,
                box=box,  # type: ignore[arg-type]
                margin=float(inset.get("margin", DEFAULT_MARGIN)),
            )
            self._fill_from_dict(inset_index, inset)

    def __repr__(self) -> str:
        leaves = sum(1 for n in self._nodes if n.is_leaf())
        return f"LayoutTree(nodes={len(self._nodes)}, leaves={leaves})"


def default_2x2() -> LayoutTree:
    """Layout de respaldo: dos columnas, cada una partida en dos filas."""
    tree = LayoutTree()
    root = tree.root.index

    left = tree.add_node(0.5, parent=root)
    right = tree.add_node(0.0, parent=root)
    for column in (left, right):
        tree.add_node(-0.5, parent=column)
        tree.add_node(0.0, parent=column)

    return tree
