class ExportError(Exception):
    """Error terminal para la exportación; nunca para la sesión de dibujo."""

    kind = "export_error"


class EncodingFailure(ExportError):
    kind = "encoding_failure"


class WriteFailure(ExportError):
    kind = "write_failure"


class PermissionDenied(ExportError):
    kind = "permission_denied"
