from events.handlers.views import EventDetailView, EventListView, TicketListView

__all__ = ["EventListView", "EventDetailView", "TicketListView"]
