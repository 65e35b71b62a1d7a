import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Coordenada no finita: ({self.x}, {self.y})")

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def to_list(self):
        return [float(self.x), float(self.y)]

    @classmethod
    def from_pair(cls, pair):
        """Crea un punto desde [x, y] (lista o tupla del cliente)."""
        x, y = pair
        return cls(float(x), float(y))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Canal de color fuera de rango: {channel}")

    @classmethod
    def from_hex(cls, value):
        """Acepta '#RRGGBB' o '#RRGGBBAA'."""
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"Color hexadecimal inválido: {value!r}")
        channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        return cls(*channels)

    def to_hex(self):
        return "#{:02X}{:02X}{:02X}{:02X}".format(self.r, self.g, self.b, self.a)

    def to_bgr(self):
        """Orden de canales que espera OpenCV."""
        return (self.b, self.g, self.r)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: Color
    stroke_width: float = 10.0

    def to_dict(self):
        return {
            "start": self.start.to_list(),
            "end": self.end.to_list(),
            "color": self.color.to_hex(),
            "stroke_width": float(self.stroke_width),
        }
