from django.contrib import admin

from events.models import Event, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "starts_at", "created_at"]
    search_fields = ["name", "location"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "stock"]
    list_filter = ["event"]
