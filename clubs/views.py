from rest_framework import viewsets

from .models import Club
from .serializers import ClubSerializer


class ClubViewSet(viewsets.ModelViewSet):

    serializer_class = ClubSerializer

    def get_queryset(self):
        return Club.objects.active().in_display_order()

    def perform_destroy(self, instance):
        instance.archive()
