from rest_framework.decorators import api_view
from rest_framework.response import Response

from points.standings import hole_leaderboard as rank_hole_groups
from scores.repository import GroupRepository
from scores.serializers import HoleScoresSerializer
from scores.services import HoleScoringService, get_active_hole, scores_from_entries


@api_view(("POST",))
def record_hole_scores(request, hole_id):
    serializer = HoleScoresSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    service = HoleScoringService()
    result = service.record_scores(hole_id, scores_from_entries(serializer.validated_data["scores"]))

    return Response(result.to_dict(), status=200)


@api_view(("GET",))
def hole_leaderboard(request, hole_id):
    get_active_hole(hole_id)
    placings = rank_hole_groups(GroupRepository().load_hole_groups(hole_id))
    winners = [placing for placing in placings if placing.is_winner]

    return Response({
        "hole": hole_id,
        "groups": [placing.to_dict() for placing in placings],
        "is_tie": len(winners) > 1,
    }, status=200)
