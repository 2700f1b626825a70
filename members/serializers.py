from rest_framework import serializers

from .models import Member


class MemberSerializer(serializers.ModelSerializer):

    class Meta:
        model = Member
        fields = ("id", "name", "handicap", )


class SimpleMemberSerializer(serializers.ModelSerializer):

    class Meta:
        model = Member
        fields = ("id", "name", )
