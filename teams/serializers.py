from django.db import transaction
from rest_framework import serializers

from members.models import Member
from members.serializers import SimpleMemberSerializer
from .exceptions import ArchivedHoleError, GroupMoveError, MemberUnavailableError
from .models import Group, unavailable_member_ids


class GroupSerializer(serializers.ModelSerializer):
    members = serializers.PrimaryKeyRelatedField(many=True, required=False, queryset=Member.objects.active())
    roster = serializers.SerializerMethodField()

    class Meta:
        model = Group
        fields = ("id", "hole", "name", "score", "points", "members", "roster", )
        # score and points are only written by score entry
        read_only_fields = ("score", "points", )

    def get_roster(self, obj):
        return SimpleMemberSerializer(obj.members.active().order_by("name"), many=True).data

    def validate(self, attrs):
        # score and points are ranked against the other groups of the hole
        if self.instance is not None and "hole" in attrs and attrs["hole"].id != self.instance.hole_id:
            raise GroupMoveError()

        hole = attrs.get("hole") or getattr(self.instance, "hole", None)
        if hole is not None and hole.is_archived:
            raise ArchivedHoleError()

        members = attrs.get("members")
        if hole is not None and members:
            exclude_group_id = self.instance.id if self.instance is not None else None
            taken = unavailable_member_ids(hole.id, exclude_group_id=exclude_group_id)
            clashes = [member.name for member in members if member.id in taken]
            if clashes:
                raise MemberUnavailableError(clashes)

        return attrs

    @transaction.atomic()
    def create(self, validated_data):
        return super().create(validated_data)

    @transaction.atomic()
    def update(self, instance, validated_data):
        return super().update(instance, validated_data)
