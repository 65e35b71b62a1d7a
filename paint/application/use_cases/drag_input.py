"""
Traducción de gestos de arrastre a cambios sobre el almacén de trazos.

Cada evento de arrastre llega como (posición anterior, posición nueva).
`translate_drag` no toca ningún estado: devuelve la transición a aplicar
y `apply_transition` la ejecuta sobre un StrokeStore.
"""
from dataclasses import dataclass, replace

from paint.domain.entities.segment import Color, Point, Segment
from paint.domain.services.geometry import is_erasable
from paint.application.use_cases.ui_config import DEFAULT_BRUSH_SIZE, DEFAULT_COLOR


@dataclass(frozen=True)
class ToolState:
    color: Color = DEFAULT_COLOR
    brush_size: float = DEFAULT_BRUSH_SIZE
    eraser_active: bool = False

    def to_dict(self):
        return {
            "color": self.color.to_hex(),
            "brush_size": self.brush_size,
            "eraser": self.eraser_active,
        }


@dataclass(frozen=True)
class AppendSegment:
    segment: Segment


@dataclass(frozen=True)
class EraseAt:
    cursor: Point
    brush_size: float


# ===============================
# 🔹 CAMBIOS DE MODO
# ===============================

def select_color(tool, color):
    """Elegir un color sale del modo borrador."""
    return replace(tool, color=color, eraser_active=False)


def select_eraser(tool):
    """Entra en modo borrador sin perder el color guardado."""
    return replace(tool, eraser_active=True)


def set_brush_size(tool, brush_size):
    return replace(tool, brush_size=brush_size)


# ===============================
# 🔹 ARRASTRE
# ===============================

def drag_delta(position, drag_amount):
    """Posición anterior a partir de la posición actual y el desplazamiento del gesto."""
    return position - drag_amount


def translate_drag(tool, previous, position):
    if tool.eraser_active:
        return EraseAt(cursor=position, brush_size=tool.brush_size)
    return AppendSegment(Segment(
        start=previous,
        end=position,
        color=tool.color,
        stroke_width=tool.brush_size,
    ))


def apply_transition(store, transition):
    """Aplica la transición y devuelve cuántos segmentos se agregaron (+) o quitaron (-)."""
    if isinstance(transition, AppendSegment):
        store.append(transition.segment)
        return 1
    if isinstance(transition, EraseAt):
        removed = store.remove_where(
            lambda s: is_erasable(s, transition.cursor, transition.brush_size)
        )
        return -removed
    raise TypeError(f"Transición desconocida: {transition!r}")
