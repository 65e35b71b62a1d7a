from django.urls import path

from paint.infrastructure.django import views

urlpatterns = [
    # --- Vista principal ---
    path("", views.canvas_view, name="canvas"),

    # --- API ---
    path("api/state/", views.state, name="state"),
    path("api/drag/", views.drag, name="drag"),
    path("api/color/", views.set_color, name="set_color"),
    path("api/brush-size/", views.set_brush_size, name="set_brush_size"),
    path("api/eraser/", views.eraser, name="eraser"),
    path("api/reset/", views.reset, name="reset"),

    # --- Exportación ---
    path("api/save/", views.save, name="save"),
    path("api/export.png", views.export_png, name="export_png"),
    path("api/notifications/", views.notifications, name="notifications"),
]
