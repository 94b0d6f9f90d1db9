from django.urls import re_path

from .views import (
    AllProgressView,
    DueCardsView,
    GradeView,
    HealthView,
    ProgressView,
    ResetView,
)

# Trailing slash optional on every route
urlpatterns = [
    re_path(r"^health/?$", HealthView.as_view(), name="health"),
    re_path(r"^grade/?$", GradeView.as_view(), name="grade"),
    re_path(r"^reset/?$", ResetView.as_view(), name="reset"),
    re_path(r"^progress/(?P<card_id>[^/]+)/?$", ProgressView.as_view(), name="progress"),
    re_path(r"^due/?$", DueCardsView.as_view(), name="due"),
    re_path(r"^due/(?P<deck_id>[^/]+)/?$", DueCardsView.as_view(), name="due-deck"),
    re_path(r"^all-progress/?$", AllProgressView.as_view(), name="all-progress"),
]
