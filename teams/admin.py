from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from core.util import ActiveStatusFilter, linkify
from .models import Group


@admin.register(Group)
class GroupAdmin(SimpleHistoryAdmin):
    fields = ["hole", "name", "members", "score", "points", "status", ]
    filter_horizontal = ("members", )
    list_display = ["name", linkify("hole"), "score", "points", "status", ]
    list_filter = (ActiveStatusFilter, "hole__event", )
    search_fields = ("name", "members__name", )
    save_on_top = True

    def get_readonly_fields(self, request, obj=None):
        # a group stays on the hole it was created for
        if obj is not None:
            return ("hole", "score", "points", )
        return ("score", "points", )
