"""
tilewalk.config.bindings - Tabla de atajos de navegacion.

Solo datos: combinacion de teclas -> nombre de comando. Registrar los
atajos en el sistema es trabajo del host; aqui solo se decide que
combinacion dispara cada comando.

    Mover ventana:
        Super + Flechas         -> Mover a la region vecina (o al monitor
                                   vecino si no hay region)

    Span (agrandar sobre varias regiones):
        Super + Alt + Flechas   -> Agrandar la ventana sobre la region
                                   vecina; repetir para seguir creciendo
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tilewalk.core.commands import CommandDispatcher

log = logging.getLogger(__name__)


_ARROWS: dict[str, str] = {
    "Up": "up",
    "Down": "down",
    "Left": "left",
    "Right": "right",
}

DEFAULT_BINDINGS: dict[str, str] = {
    **{f"<Super>{key}": f"move_{name}" for key, name in _ARROWS.items()},
    **{f"<Super><Alt>{key}": f"span_{name}" for key, name in _ARROWS.items()},
}


def resolve_bindings(
    dispatcher: CommandDispatcher,
    bindings: Mapping[str, str] = DEFAULT_BINDINGS,
) -> dict[str, str]:
    """
    Filtra la tabla de atajos a los comandos que existen.

    Args:
        dispatcher: Dispatcher con los comandos ya registrados.
        bindings:   Tabla combinacion -> comando.

    Returns:
        Las entradas cuyo comando esta registrado.
    """
    resolved: dict[str, str] = {}
    for combo, command in bindings.items():
        if not dispatcher.has(command):
            log.warning("Binding %s: command %r not found, skipping", combo, command)
            continue
        resolved[combo] = command

    log.info("Bindings resolved: %d/%d", len(resolved), len(bindings))
    return resolved
