from django.urls import path

from events.handlers import EventDetailView, EventListView, SimilarEventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:slug>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:slug>/similar",
        SimilarEventListView.as_view(),
        name="event-similar",
    ),
]
