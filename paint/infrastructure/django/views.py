import json
import logging

from django.http import HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from paint.domain.entities.segment import Point
from paint.domain.errors import EncodingFailure
from paint.application.actions import color_action, save_action, tool_action
from paint.application.use_cases.drag_input import drag_delta
from paint.application.use_cases.paint_session import get_session
from paint.application.use_cases.ui_config import export_dir, export_size
from paint.infrastructure.storage.file_sink import FileImageSink, default_filename

logger = logging.getLogger(__name__)


def _bad_request(message):
    return JsonResponse({"success": False, "message": message}, status=400)


def _read_json(request):
    if not request.body:
        return {}
    payload = json.loads(request.body)
    if not isinstance(payload, dict):
        raise ValueError("Se esperaba un objeto JSON")
    return payload


def _state_response(session, **extra):
    data = {"success": True}
    data.update(session.to_dict())
    data.update(extra)
    return JsonResponse(data)


@require_GET
def canvas_view(request):
    width, height = export_size()
    return render(request, "paint/canvas.html", {
        "palette": color_action.palette_as_dicts(),
        "export_width": width,
        "export_height": height,
    })


@require_GET
def state(request):
    return _state_response(get_session())


@csrf_exempt
@require_POST
def drag(request):
    """
    Un evento de arrastre. Acepta {previous, position} o {position, drag}
    donde drag es el desplazamiento desde el evento anterior.
    """
    try:
        payload = _read_json(request)
        position = Point.from_pair(payload["position"])
        if "previous" in payload:
            previous = Point.from_pair(payload["previous"])
        else:
            previous = drag_delta(position, Point.from_pair(payload["drag"]))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"Evento de arrastre inválido: {e}")

    session = get_session()
    _, delta = session.on_drag(previous, position)
    return JsonResponse({
        "success": True,
        "delta": delta,
        "count": len(session.store),
    })


@csrf_exempt
@require_POST
def set_color(request):
    try:
        payload = _read_json(request)
        color_action.choose_color(get_session(), payload.get("color"))
    except ValueError as e:
        return _bad_request(str(e))
    return _state_response(get_session())


@csrf_exempt
@require_POST
def set_brush_size(request):
    try:
        payload = _read_json(request)
    except ValueError as e:
        return _bad_request(str(e))
    tool_action.update_brush_size(get_session(), payload.get("value"))
    return _state_response(get_session())


@csrf_exempt
@require_POST
def eraser(request):
    tool_action.activate_eraser(get_session())
    return _state_response(get_session())


@csrf_exempt
@require_POST
def reset(request):
    tool_action.reset_canvas(get_session())
    return _state_response(get_session())


@csrf_exempt
@require_POST
def save(request):
    """Exporta en segundo plano; el resultado llega como notificación."""
    try:
        payload = _read_json(request)
    except ValueError as e:
        return _bad_request(str(e))

    sink = FileImageSink(export_dir(), payload.get("filename"))
    save_action.submit_export(get_session(), sink)
    return JsonResponse({"success": True, "filename": sink.filename}, status=202)


@require_GET
def export_png(request):
    """Descarga directa del PNG con los trazos actuales."""
    try:
        data = save_action.render_png(get_session().snapshot())
    except EncodingFailure as e:
        logger.error("[ERROR] No se pudo codificar la imagen: %s", e)
        return JsonResponse({"success": False, "message": save_action.ERROR_MESSAGES[EncodingFailure]},
                            status=500)

    response = HttpResponse(data, content_type="image/png")
    response["Content-Disposition"] = f'attachment; filename="{default_filename()}"'
    return response


@require_GET
def notifications(request):
    notes = get_session().notifications.drain()
    return JsonResponse({"notifications": [n.to_dict() for n in notes]})
