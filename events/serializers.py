from rest_framework import serializers

from clubs.models import Club
from clubs.serializers import ClubSerializer
from .models import Event, Hole


class HoleSerializer(serializers.ModelSerializer):
    clubs = serializers.PrimaryKeyRelatedField(many=True, required=False, queryset=Club.objects.active())
    allowed_clubs = serializers.SerializerMethodField()

    class Meta:
        model = Hole
        fields = ("id", "event", "name", "par", "description", "clubs", "allowed_clubs", "created_date", )
        read_only_fields = ("created_date", )

    def get_allowed_clubs(self, obj):
        return ClubSerializer(obj.allowed_clubs(), many=True).data

    def validate_event(self, value):
        if value.is_archived:
            raise serializers.ValidationError("Holes cannot be added to an archived event")
        return value


class SimpleHoleSerializer(serializers.ModelSerializer):

    class Meta:
        model = Hole
        fields = ("id", "name", "par", "description", )


class EventSerializer(serializers.ModelSerializer):
    holes = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = ("id", "name", "event_date", "holes", )

    def get_holes(self, obj):
        return SimpleHoleSerializer(Hole.objects.for_event(obj.id), many=True).data
