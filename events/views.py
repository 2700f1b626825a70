from rest_framework import viewsets

from core.models import ACTIVE

from .models import Event, Hole
from .serializers import EventSerializer, HoleSerializer


class EventViewSet(viewsets.ModelViewSet):
    serializer_class = EventSerializer

    def get_queryset(self):
        return Event.objects.active().newest_first()

    def perform_destroy(self, instance):
        instance.archive()


class HoleViewSet(viewsets.ModelViewSet):
    serializer_class = HoleSerializer

    def get_queryset(self):
        queryset = Hole.objects.active().filter(event__status=ACTIVE)
        event_id = self.request.query_params.get("event", None)

        if event_id is not None:
            queryset = queryset.filter(event=event_id)

        return queryset.select_related("event").prefetch_related("clubs").in_play_order()

    def perform_destroy(self, instance):
        instance.archive()
