from django.urls import include, path

from purchases.handlers import metrics_view

urlpatterns = [
    path("api/", include("purchases.urls")),
    path("metrics", metrics_view, name="metrics"),
]
