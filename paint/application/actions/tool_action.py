import logging
import math

from paint.application.use_cases import drag_input

logger = logging.getLogger(__name__)


def parse_brush_size(text, current):
    """
    Lee el tamaño del pincel escrito por el usuario.
    Si no es un número positivo se conserva el tamaño anterior.
    """
    try:
        size = float(str(text).strip())
    except (TypeError, ValueError):
        return current
    if not math.isfinite(size) or size <= 0:
        return current
    return size


def update_brush_size(session, text):
    def change(tool):
        size = parse_brush_size(text, tool.brush_size)
        if size != tool.brush_size:
            logger.info("[INFO] Tamaño de pincel: %s px", size)
        return drag_input.set_brush_size(tool, size)

    return session.update_tool(change)


def activate_eraser(session):
    return session.select_eraser()


def reset_canvas(session):
    session.reset()
