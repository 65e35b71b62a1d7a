ERASER_RADIUS_FACTOR = 1.5


def within_erase_radius(cursor, brush_size, target):
    """
    Indica si `target` cae dentro del área del borrador centrada en `cursor`.
    El área es una caja alineada a los ejes de lado 2 * brush_size * 1.5,
    no un círculo.
    """
    radius = brush_size * ERASER_RADIUS_FACTOR
    return (cursor.x - radius <= target.x <= cursor.x + radius and
            cursor.y - radius <= target.y <= cursor.y + radius)


def is_erasable(segment, cursor, brush_size):
    # basta con que uno de los extremos esté dentro
    return (within_erase_radius(cursor, brush_size, segment.start) or
            within_erase_radius(cursor, brush_size, segment.end))
