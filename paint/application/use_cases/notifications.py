import logging
from collections import deque
from dataclasses import dataclass
from threading import Lock

logger = logging.getLogger(__name__)

MAX_PENDING = 50


@dataclass(frozen=True)
class Notification:
    message: str
    level: str = "info"   # info | error
    kind: str = ""

    def to_dict(self):
        return {"message": self.message, "level": self.level, "kind": self.kind}


class NotificationCenter:
    """
    Mensajes cortos para el usuario (equivalente a un toast).
    El hilo de exportación publica y la vista los retira.
    """

    def __init__(self, maxlen=MAX_PENDING):
        self._pending = deque(maxlen=maxlen)
        self._lock = Lock()

    def publish(self, message, level="info", kind=""):
        note = Notification(message=message, level=level, kind=kind)
        with self._lock:
            self._pending.append(note)
        logger.debug("[TRACE] Notificación: %s", message)
        return note

    def drain(self):
        with self._lock:
            notes = list(self._pending)
            self._pending.clear()
        return notes

    def __len__(self):
        with self._lock:
            return len(self._pending)
