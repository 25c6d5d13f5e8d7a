"""
tilewalk.tiling.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa un area de pantalla.
Se usa para describir el area de cada monitor, las regiones (tiles)
del layout y el rectangulo destino de cada ventana.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles de pantalla, pero pueden ser
    fraccionarias (los layouts dividen por porcentajes). El origen (0, 0)
    es la esquina superior-izquierda del monitor primario.

    Un Rect de ancho o alto 0 es degenerado pero valido: ninguna operacion
    falla con el, simplemente no tiene area.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles.
        h: Alto en pixeles.
    """

    x: float
    y: float
    w: float
    h: float

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def is_empty(self) -> bool:
        """True si el rectangulo no tiene area positiva."""
        return not (self.w > 0 and self.h > 0)

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def intersection(self, other: Rect | None) -> Rect | None:
        """
        Parte comun de ambos rectangulos.

        Returns:
            El Rect compartido, o None si no se solapan (incluye el caso
            de que solo compartan un borde o una esquina).
        """
        if other is None:
            return None

        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)

        if right <= left or bottom <= top:
            return None
        return Rect.from_ltrb(left, top, right, bottom)

    def union(self, other: Rect) -> Rect:
        """Rectangulo envolvente minimo que contiene a ambos."""
        return Rect.from_ltrb(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def overlaps(self, other: Rect) -> bool:
        """True si comparten area (tocarse en un borde no cuenta)."""
        return not (
            self.right <= other.left
            or other.right <= self.left
            or self.bottom <= other.top
            or other.bottom <= self.top
        )

    def contains_rect(self, other: Rect) -> bool:
        """True si *other* cae completamente dentro (bordes incluidos)."""
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def contains_point(self, px: float, py: float) -> bool:
        """Test de punto con bordes inclusivos."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def horizontal_overlap(self, other: Rect) -> float:
        """Longitud compartida sobre el eje X (0 si no hay solape)."""
        return max(0.0, min(self.right, other.right) - max(self.left, other.left))

    def vertical_overlap(self, other: Rect) -> float:
        """Longitud compartida sobre el eje Y (0 si no hay solape)."""
        return max(0.0, min(self.bottom, other.bottom) - max(self.top, other.top))

    def center_distance(self, other: Rect) -> float:
        """Distancia euclidea entre los centros."""
        return math.hypot(other.center_x - self.center_x, other.center_y - self.center_y)

    def pad(self, margin: float) -> Rect:
        """
        Reduce el rectangulo aplicando un margen interior uniforme.

        Un margen negativo agranda el rectangulo (se usa para dejar aire
        alrededor de un inset). A diferencia de un recorte, el resultado
        puede quedar con dimensiones <= 0; quien dibuja lo descarta.
        """
        return Rect(self.x + margin, self.y + margin, self.w - 2 * margin, self.h - 2 * margin)

    def translate(self, dx: float, dy: float) -> Rect:
        """Desplaza el rectangulo sin cambiar su tamano."""
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def corners(self) -> list[tuple[float, float]]:
        """Esquinas en orden: sup-izq, sup-der, inf-der, inf-izq."""
        return [
            (self.left, self.top),
            (self.right, self.top),
            (self.right, self.bottom),
            (self.left, self.bottom),
        ]

    # ------------------------------------------------------------------
    # Conversion a tupla Win32 (left, top, right, bottom)
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[float, float, float, float]:
        """Retorna (left, top, right, bottom) para compatibilidad Win32."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w:g}x{self.h:g}+{self.x:g}+{self.y:g})"
