from django.contrib import admin

from core.util import ActiveStatusFilter
from .models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    fields = ["name", "handicap", "status", ]
    list_display = ["name", "handicap", "status", ]
    list_filter = (ActiveStatusFilter, )
    search_fields = ("name", )
    ordering = ["name", ]
