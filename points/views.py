from django.shortcuts import get_object_or_404
from rest_framework.decorators import api_view
from rest_framework.response import Response

from events.models import Event
from points.standings import build_results, build_standings
from scores.repository import GroupRepository


@api_view(("GET",))
def event_standings(request, event_id):
    event = get_object_or_404(Event.objects.active(), pk=event_id)
    holes, members = GroupRepository().load_event_snapshot(event.id)
    standings = build_standings(holes, members)

    data = standings.to_dict()
    data["event"] = {"id": event.id, "name": event.name, "event_date": event.event_date}
    return Response(data, status=200)


@api_view(("GET",))
def event_results(request, event_id):
    event = get_object_or_404(Event.objects.active(), pk=event_id)
    holes, members = GroupRepository().load_event_snapshot(event.id)
    results = build_results(holes, members)
    winners = [result for result in results if result.is_winner]

    return Response({
        "event": {"id": event.id, "name": event.name, "event_date": event.event_date},
        "results": [result.to_dict() for result in results],
        "winners": [result.to_dict() for result in winners],
        "is_tie": len(winners) > 1,
    }, status=200)
