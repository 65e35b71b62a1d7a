from abc import ABC, abstractmethod


class ImageSinkPort(ABC):
    """Destino de bytes para la imagen exportada."""

    @abstractmethod
    def write(self, data):
        """Escribe todos los bytes. Lanza WriteFailure o PermissionDenied."""
        pass

    @abstractmethod
    def describe(self):
        pass
