import logging
from concurrent.futures import ThreadPoolExecutor

from paint.domain.errors import EncodingFailure, ExportError, PermissionDenied, WriteFailure
from paint.application.use_cases.ui_config import export_size
from paint.infrastructure.opencv.raster_utils import encode_png, rasterize

logger = logging.getLogger(__name__)

# Un solo hilo: las exportaciones se ejecutan en orden de llegada
_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="paint-export")

ERROR_MESSAGES = {
    EncodingFailure: "No se pudo guardar la imagen",
    WriteFailure: "Algo salió mal al escribir el archivo",
    PermissionDenied: "Permiso denegado",
}
GENERIC_ERROR = "Algo salió mal"


# ===============================
# 🔹 RENDERIZADO
# ===============================

def render_png(segments, width=None, height=None):
    """Rasteriza los segmentos y devuelve los bytes PNG."""
    default_w, default_h = export_size()
    image = rasterize(segments, width or default_w, height or default_h)
    return encode_png(image)


# ===============================
# 🔹 EXPORTACIÓN
# ===============================

def export_drawing(segments, sink, notifications, width=None, height=None):
    """
    Exporta una copia fija de los segmentos al destino.
    Ningún error sale de aquí: se registra y se avisa al usuario.
    """
    try:
        data = render_png(segments, width, height)
        sink.write(data)
    except ExportError as e:
        logger.error("[ERROR] Exportación fallida (%s): %s", e.kind, e)
        message = ERROR_MESSAGES.get(type(e), GENERIC_ERROR)
        notifications.publish(message, level="error", kind=e.kind)
        return False
    except Exception:
        logger.exception("[ERROR] Error inesperado exportando a %s", sink.describe())
        notifications.publish(GENERIC_ERROR, level="error", kind="unexpected")
        return False

    logger.info("[💾] Dibujo exportado: %d segmentos -> %s", len(segments), sink.describe())
    notifications.publish(f"Imagen guardada: {sink.describe()}", kind="saved")
    return True


def submit_export(session, sink, executor=None):
    """
    Lanza la exportación en segundo plano con la copia de los trazos de este momento.
    El dibujo puede seguir cambiando mientras tanto.
    """
    segments = session.snapshot()
    width, height = export_size()
    logger.info("[SAVE] Exportación en cola: %d segmentos", len(segments))
    return (executor or _executor).submit(
        export_drawing, segments, sink, session.notifications, width, height
    )
