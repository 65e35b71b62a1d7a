import logging
import os
import time

from paint.domain.errors import PermissionDenied, WriteFailure
from paint.domain.services.image_sink import ImageSinkPort

logger = logging.getLogger(__name__)


def default_filename():
    """Painting_<milisegundos>.png"""
    return f"Painting_{int(time.time() * 1000)}.png"


def safe_filename(name):
    """Deja solo el nombre base y asegura la extensión .png."""
    name = os.path.basename((name or "").strip())
    if not name or name in (".", ".."):
        return default_filename()
    if not name.lower().endswith(".png"):
        name += ".png"
    return name


class FileImageSink(ImageSinkPort):
    """Escribe la imagen en un archivo nuevo dentro de `directory`."""

    def __init__(self, directory, filename=None):
        self.directory = directory
        self.filename = safe_filename(filename)

    @property
    def path(self):
        return os.path.join(self.directory, self.filename)

    def describe(self):
        return self.path

    def write(self, data):
        if os.path.isdir(self.directory) and not os.access(self.directory, os.W_OK):
            raise PermissionDenied(f"Sin permiso de escritura en {self.directory}")

        try:
            os.makedirs(self.directory, exist_ok=True)
            # 'x': siempre un archivo nuevo, nunca se pisa uno existente
            with open(self.path, "xb") as fh:
                fh.write(data)
        except PermissionError as e:
            raise PermissionDenied(str(e)) from e
        except FileExistsError as e:
            raise WriteFailure(f"Ya existe {self.path}") from e
        except OSError as e:
            self._discard_partial()
            raise WriteFailure(str(e)) from e

        logger.info("[SAVE] %d bytes escritos en %s", len(data), self.path)

    def _discard_partial(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("[ERROR] No se pudo eliminar archivo parcial %s: %s", self.path, e)

