import structlog

from django.shortcuts import get_object_or_404
from rest_framework import serializers, viewsets
from rest_framework.decorators import api_view
from rest_framework.response import Response

from events.models import Hole
from members.models import Member
from members.serializers import MemberSerializer
from .models import Group, unavailable_member_ids
from .serializers import GroupSerializer

logger = structlog.get_logger(__name__)


class GroupViewSet(viewsets.ModelViewSet):
    serializer_class = GroupSerializer

    def get_queryset(self):
        queryset = Group.objects.active()
        hole_id = self.request.query_params.get("hole", None)
        event_id = self.request.query_params.get("event", None)

        if hole_id is not None:
            queryset = queryset.filter(hole=hole_id)
        if event_id is not None:
            queryset = queryset.filter(hole__event=event_id)

        return queryset.prefetch_related("members").order_by("hole", "id")

    def perform_destroy(self, instance):
        logger.info("Archiving group", groupId=instance.id, holeId=instance.hole_id)
        instance.archive()


@api_view(("GET",))
def available_members(request, hole_id):
    hole = get_object_or_404(Hole.objects.active(), pk=hole_id)
    group_id = request.query_params.get("group", None)
    if group_id:
        group_id = serializers.IntegerField(min_value=1).run_validation(group_id)

    taken = unavailable_member_ids(hole.id, exclude_group_id=group_id or None)
    members = Member.objects.active().exclude(pk__in=taken).by_handicap()

    serializer = MemberSerializer(members, many=True, context={"request": request})
    return Response(serializer.data)
