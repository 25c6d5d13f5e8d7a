"""
tilewalk.render - Dibujo de layouts sobre un contexto tipo Cairo.
"""

from tilewalk.render.drawing import (
    DEFAULT_COLORS,
    Colors,
    RGBA,
    draw_layout,
    draw_rounded_polygon,
    rounded_path,
)

__all__ = [
    "DEFAULT_COLORS",
    "Colors",
    "RGBA",
    "draw_layout",
    "draw_rounded_polygon",
    "rounded_path",
]
