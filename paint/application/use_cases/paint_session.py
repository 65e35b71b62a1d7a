import logging
from threading import Lock

from paint.domain.entities.stroke_store import StrokeStore
from paint.application.use_cases import drag_input
from paint.application.use_cases.notifications import NotificationCenter

logger = logging.getLogger(__name__)


class PaintSession:
    """
    Estado de la aplicación: herramienta actual + trazos + avisos.
    Los eventos de arrastre se aplican de a uno (lock).
    """

    def __init__(self, tool=None, store=None, notifications=None):
        self.tool = tool or drag_input.ToolState()
        self.store = store if store is not None else StrokeStore()
        self.notifications = notifications or NotificationCenter()
        self._lock = Lock()

    # ===============================
    # 🔹 HERRAMIENTAS
    # ===============================

    def select_color(self, color):
        with self._lock:
            self.tool = drag_input.select_color(self.tool, color)
        logger.info("[INFO] Color seleccionado: %s", color.to_hex())
        return self.tool

    def select_eraser(self):
        with self._lock:
            self.tool = drag_input.select_eraser(self.tool)
        logger.info("[INFO] Modo borrador activado")
        return self.tool

    def set_brush_size(self, brush_size):
        with self._lock:
            self.tool = drag_input.set_brush_size(self.tool, brush_size)
        return self.tool

    def update_tool(self, change):
        """Aplica change(tool) -> tool con el lock tomado (lectura y escritura juntas)."""
        with self._lock:
            self.tool = change(self.tool)
            return self.tool

    # ===============================
    # 🔹 TRAZOS
    # ===============================

    def on_drag(self, previous, position):
        """Aplica un evento de arrastre. Devuelve la transición aplicada y el cambio de tamaño."""
        with self._lock:
            transition = drag_input.translate_drag(self.tool, previous, position)
            delta = drag_input.apply_transition(self.store, transition)
            total = len(self.store)
        if delta < 0:
            logger.debug("[TRACE] Borrados %d segmentos, quedan %d", -delta, total)
        return transition, delta

    def reset(self):
        with self._lock:
            self.store.clear()
        logger.info("[INFO] Lienzo reiniciado")

    def snapshot(self):
        with self._lock:
            return self.store.snapshot()

    def to_dict(self):
        with self._lock:
            tool = self.tool
            segments = self.store.snapshot()
        return {
            "tool": tool.to_dict(),
            "segments": [s.to_dict() for s in segments],
        }


# Sesión única del proceso
_current = None
_current_lock = Lock()


def get_session():
    global _current
    with _current_lock:
        if _current is None:
            _current = PaintSession()
        return _current


def reset_session():
    """Descarta la sesión actual (al reiniciar la app o en tests)."""
    global _current
    with _current_lock:
        _current = None
