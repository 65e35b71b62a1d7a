class StrokeStore:
    """
    Colección ordenada de segmentos del lienzo.
    El orden de inserción es el orden de dibujo (los últimos quedan encima).
    """

    def __init__(self, segments=None):
        self._segments = list(segments or [])

    def append(self, segment):
        self._segments.append(segment)
        return segment

    def remove_where(self, predicate):
        """Quita todos los segmentos que cumplan el predicado. Devuelve cuántos se quitaron."""
        kept = [s for s in self._segments if not predicate(s)]
        removed = len(self._segments) - len(kept)
        self._segments = kept
        return removed

    def clear(self):
        self._segments = []

    def snapshot(self):
        """Copia inmutable del estado actual (para exportar sin bloquear el dibujo)."""
        return tuple(self._segments)

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self.snapshot())

    def __getitem__(self, index):
        return self._segments[index]
