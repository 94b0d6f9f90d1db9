from django.urls import include, path

urlpatterns = [
    path("", include("review_service.api.urls")),
]

handler404 = "review_service.api.views.not_found"
