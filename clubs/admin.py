from django.contrib import admin

from core.util import ActiveStatusFilter
from .models import Club


@admin.register(Club)
class ClubAdmin(admin.ModelAdmin):
    fields = ["name", "orderby", "status", ]
    list_display = ["name", "orderby", "status", ]
    list_filter = (ActiveStatusFilter, )
    ordering = ["orderby", "name", ]
