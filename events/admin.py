from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from core.util import ActiveStatusFilter
from .models import Event, Hole


class HoleInline(admin.TabularInline):
    model = Hole
    can_delete = False
    extra = 0
    show_change_link = True
    verbose_name_plural = "Holes"
    fields = ["name", "par", "status", ]


@admin.register(Event)
class EventAdmin(SimpleHistoryAdmin):
    fields = ["name", "event_date", "status", ]
    inlines = [HoleInline]
    list_display = ["name", "event_date", "status", ]
    date_hierarchy = "event_date"
    list_filter = (ActiveStatusFilter, )
    ordering = ["-event_date", ]
    save_on_top = True


@admin.register(Hole)
class HoleAdmin(admin.ModelAdmin):
    fields = ["event", "name", "par", "description", "clubs", "status", ]
    filter_horizontal = ("clubs", )
    list_display = ["event", "name", "par", "created_date", "status", ]
    list_filter = (ActiveStatusFilter, "event", )
    ordering = ["event", "created_date", ]
