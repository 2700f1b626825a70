from rest_framework import serializers

from points.engine import MAX_SCORE, MIN_SCORE


class ScoreEntrySerializer(serializers.Serializer):
    group = serializers.IntegerField()
    score = serializers.IntegerField(allow_null=True, min_value=MIN_SCORE, max_value=MAX_SCORE)


class HoleScoresSerializer(serializers.Serializer):
    scores = ScoreEntrySerializer(many=True, allow_empty=False)

    def validate_scores(self, value):
        group_ids = [entry["group"] for entry in value]
        if len(group_ids) != len(set(group_ids)):
            raise serializers.ValidationError("Each group may only be scored once")
        return value
