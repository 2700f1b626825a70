from typing import Any, List, Tuple

from django.contrib.admin.filters import SimpleListFilter
from django.contrib.admin.options import IncorrectLookupParameters
from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils.encoding import force_str
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from core.models import ACTIVE, STATUS_CHOICES


def linkify(field_name):
    """Admin list column that links to the change page of a related object."""
    def _linkify(obj):
        linked_obj = getattr(obj, field_name)
        app_label = ContentType.objects.get_for_model(obj).app_label
        model_name = ContentType.objects.get_for_model(linked_obj).model
        link_url = reverse(f"admin:{app_label}_{model_name}_change", args=[linked_obj.pk])
        return format_html('<a href="{}">{}</a>', link_url, linked_obj)

    _linkify.short_description = field_name.replace("_", " ").capitalize()
    return _linkify


class PreFilteredListFilter(SimpleListFilter):
    """
    Admin list filter that is applied before the user picks anything. The
    "All" choice turns it off.
    """
    default_value = None
    no_filter_value = "all"
    no_filter_name = _("All")

    def get_default_value(self):
        if self.default_value is None:
            raise NotImplementedError("Set default_value or override get_default_value()")
        return self.default_value

    def get_lookups(self) -> List[Tuple[Any, str]]:
        raise NotImplementedError("get_lookups() must return (value, label) pairs")

    def lookups(self, request, model_admin) -> List[Tuple[Any, str]]:
        return [(self.no_filter_value, self.no_filter_name)] + self.get_lookups()

    def queryset(self, request, queryset):
        if self.value() is None:
            return queryset.filter(**{self.parameter_name: self.get_default_value()})
        if self.value() == self.no_filter_value:
            return queryset.all()
        try:
            return queryset.filter(**self.used_parameters)
        except (ValueError, ValidationError) as e:
            raise IncorrectLookupParameters(e)

    def choices(self, changelist):
        # no extra "All" entry; lookups() already has one
        value = self.value() or force_str(self.get_default_value())
        for lookup, title in self.lookup_choices:
            yield {
                "selected": value == force_str(lookup),
                "query_string": changelist.get_query_string({self.parameter_name: lookup}),
                "display": title,
            }


class ActiveStatusFilter(PreFilteredListFilter):
    default_value = ACTIVE
    title = _("Status")
    parameter_name = "status"

    def get_lookups(self):
        return list(STATUS_CHOICES)
