from rest_framework import viewsets

from .models import Member
from .serializers import MemberSerializer


class MemberViewSet(viewsets.ModelViewSet):
    serializer_class = MemberSerializer

    def get_queryset(self):
        queryset = Member.objects.active()
        name = self.request.query_params.get("name", None)

        if name is not None:
            queryset = queryset.filter(name__icontains=name)

        return queryset.by_handicap()

    def perform_destroy(self, instance):
        instance.archive()
