from events.handlers.views import EventDetailView, EventListView, SimilarEventListView

__all__ = [
    "EventDetailView",
    "EventListView",
    "SimilarEventListView",
]
