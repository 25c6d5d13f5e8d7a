"""
tilewalk.tiling.providers - Origen de los layouts de cada monitor.

La navegacion no sabe de donde salen los layouts: los pide a un
LayoutProvider por indice de monitor. Si el provider falla o no tiene
layout para ese monitor, se usa una estrategia de respaldo (por defecto
el layout 2x2).
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from typing import Any, Optional, Protocol, Union

from tilewalk.errors import LayoutLoadError
from tilewalk.tiling.layout_tree import LayoutTree

log = logging.getLogger(__name__)


# Estrategia de respaldo: callable sin argumentos que crea un arbol nuevo
DefaultLayoutStrategy = Callable[[], LayoutTree]

LayoutDefinition = Union[LayoutTree, Mapping[str, Any]]


class LayoutProvider(Protocol):
    """Cualquier objeto capaz de entregar el layout de un monitor."""

    def load_layout_for_display(self, display_index: int) -> Optional[LayoutTree]:
        ...


class StaticLayoutProvider:
    """
    Provider en memoria: un layout (arbol o diccionario) por monitor.

    Cada consulta retorna un arbol nuevo, de modo que calcular
    rectangulos sobre el no altera la definicion guardada.
    """

    def __init__(self, layouts: Mapping[int, LayoutDefinition] | None = None) -> None:
        self._layouts: dict[int, LayoutDefinition] = dict(layouts or {})

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> StaticLayoutProvider:
        """
        Lee los layouts de un archivo JSON.

        Formato: {"0": {...layout...}, "1": {...}}; la clave es el
        indice del monitor y el valor una definicion de from_dict().

        Raises:
            LayoutLoadError: Si el archivo no se puede leer o no tiene
                             ese formato.
        """
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise LayoutLoadError(f"Cannot read layouts from {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise LayoutLoadError(f"{path}: expected an object keyed by display index")

        layouts: dict[int, LayoutDefinition] = {}
        for key, definition in data.items():
            try:
                index = int(key)
            except ValueError:
                raise LayoutLoadError(f"{path}: invalid display index {key!r}") from None
            if not isinstance(definition, dict):
                raise LayoutLoadError(f"{path}: layout for display {index} is not an object")
            layouts[index] = definition

        log.info("Loaded %d layout(s) from %s", len(layouts), path)
        return cls(layouts)

    @property
    def display_indices(self) -> list[int]:
        return sorted(self._layouts)

    def set_layout(self, display_index: int, layout: LayoutDefinition) -> None:
        self._layouts[display_index] = layout

    def load_layout_for_display(self, display_index: int) -> Optional[LayoutTree]:
        """
        Retorna una copia del layout del monitor, o None si no tiene.

        Raises:
            LayoutLoadError: Si la definicion guardada no es valida.
        """
        layout = self._layouts.get(display_index)
        if layout is None:
            log.debug("No layout stored for display %d", display_index)
            return None
        if isinstance(layout, LayoutTree):
            return layout.clone()
        if isinstance(layout, Mapping):
            return LayoutTree.from_dict(layout)
        raise LayoutLoadError(
            f"Unsupported layout for display {display_index}: {type(layout).__name__}"
        )

    def __repr__(self) -> str:
        return f"StaticLayoutProvider(displays={self.display_indices})"
