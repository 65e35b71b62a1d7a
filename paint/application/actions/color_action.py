from paint.domain.entities.segment import Color
from paint.application.use_cases.ui_config import PALETTE

COLOR_NAMES = [name for name, _ in PALETTE]


def parse_color(value):
    """
    Convierte lo que manda la paleta en un Color.
    Acepta nombre de la paleta ('red', 'Black'...) o '#RRGGBB' / '#RRGGBBAA'.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Color inválido: {value!r}")

    name = value.strip().lower()
    for palette_name, color in PALETTE:
        if palette_name == name:
            return color
    return Color.from_hex(value)


def choose_color(session, value):
    """Selecciona el color y sale del modo borrador."""
    return session.select_color(parse_color(value))


def palette_as_dicts():
    return [{"name": name, "color": color.to_hex()} for name, color in PALETTE]
