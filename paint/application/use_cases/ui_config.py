from django.conf import settings

from paint.domain.entities.segment import Color

# Paleta de la barra superior (nombre, color RGBA)
PALETTE = [
    ("red", Color(255, 0, 0)),
    ("green", Color(0, 255, 0)),
    ("blue", Color(0, 0, 255)),
    ("black", Color(0, 0, 0)),
]

DEFAULT_COLOR = Color(0, 0, 0)
DEFAULT_BRUSH_SIZE = 10.0

# Lienzo fijo de exportación, sin escalar desde el tamaño en pantalla
EXPORT_WIDTH = 1080
EXPORT_HEIGHT = 1920


def export_size():
    return (
        getattr(settings, "PAINT_EXPORT_WIDTH", EXPORT_WIDTH),
        getattr(settings, "PAINT_EXPORT_HEIGHT", EXPORT_HEIGHT),
    )


def export_dir():
    return getattr(settings, "PAINT_EXPORT_DIR", "media/exports")
