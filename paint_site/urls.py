from django.urls import include, path

urlpatterns = [
    path("", include("paint.urls")),
]
