import math

import cv2
import numpy as np

from paint.domain.errors import EncodingFailure

# Coordenadas con 4 bits de fracción para cv2.line
SHIFT = 4
_SCALE = 1 << SHIFT
MAX_THICKNESS = 32767


def blank_canvas(width, height):
    """Lienzo BGRA blanco y opaco."""
    return np.full((height, width, 4), 255, np.uint8)


def _fixed_point(x, y):
    return (int(round(x * _SCALE)), int(round(y * _SCALE)))


def clip_segment(x1, y1, x2, y2, x_min, y_min, x_max, y_max):
    """
    Recorta el segmento al rectángulo (Liang-Barsky).
    Devuelve (x1, y1, x2, y2) o None si queda completamente fuera.
    """
    dx, dy = x2 - x1, y2 - y1
    if not (math.isfinite(dx) and math.isfinite(dy)):
        # la diferencia desborda: recortar cada mitad por separado
        mx, my = x1 / 2 + x2 / 2, y1 / 2 + y2 / 2
        first = clip_segment(x1, y1, mx, my, x_min, y_min, x_max, y_max)
        second = clip_segment(mx, my, x2, y2, x_min, y_min, x_max, y_max)
        if first is None or second is None:
            return first or second
        return first[:2] + second[2:]
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1 - x_min), (dx, x_max - x1), (-dy, y1 - y_min), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy)


def _thickness(stroke_width):
    return max(1, min(MAX_THICKNESS, int(round(stroke_width))))


def draw_segment(canvas, segment):
    """Dibuja un segmento con extremos redondeados (cv2.line los redondea al ser grueso)."""
    thickness = _thickness(segment.stroke_width)
    height, width = canvas.shape[:2]
    # fuera de este margen ningún píxel del trazo cae en el lienzo;
    # además mantiene las coordenadas dentro del int32 de OpenCV
    clipped = clip_segment(
        segment.start.x, segment.start.y, segment.end.x, segment.end.y,
        -thickness, -thickness, width + thickness, height + thickness,
    )
    if clipped is None:
        return canvas
    x1, y1, x2, y2 = clipped
    p1 = _fixed_point(x1, y1)
    p2 = _fixed_point(x2, y2)
    color = segment.color

    if color.a == 255:
        cv2.line(canvas, p1, p2, color.to_bgr() + (255,), thickness, cv2.LINE_8, SHIFT)
        return canvas

    # Color translúcido: mezclar solo los píxeles que cubre la línea
    mask = np.zeros(canvas.shape[:2], np.uint8)
    cv2.line(mask, p1, p2, 255, thickness, cv2.LINE_8, SHIFT)
    covered = mask > 0
    alpha = color.a / 255.0
    under = canvas[covered, :3].astype(np.float64)
    blended = alpha * np.array(color.to_bgr(), np.float64) + (1.0 - alpha) * under
    canvas[covered, :3] = np.round(blended).astype(np.uint8)
    return canvas


def rasterize(segments, width, height):
    """Crea una imagen desde los segmentos, en orden de inserción."""
    canvas = blank_canvas(width, height)
    for segment in segments:
        draw_segment(canvas, segment)
    return canvas


def encode_png(image):
    """PNG sin pérdida. Lanza EncodingFailure si OpenCV no puede codificar."""
    try:
        ok, buf = cv2.imencode(".png", image)
    except cv2.error as e:
        raise EncodingFailure(str(e)) from e
    if not ok:
        raise EncodingFailure("cv2.imencode devolvió False")
    return buf.tobytes()
