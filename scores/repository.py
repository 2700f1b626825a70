"""
Data access for scoring. Everything the points engine and the standings
aggregator need is read and written here, so the computations themselves
never touch the database.
"""
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import structlog

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError

from events.models import Hole
from members.models import Member
from points.standings import GroupResult, HoleResult, MemberInfo
from scores.exceptions import PartialPersistenceError
from scores.notifications import group_changes
from teams.models import Group

logger = structlog.get_logger(__name__)


class GroupRepository:

    def __init__(self, feed=None):
        self.feed = feed or group_changes

    def fetch_groups_for_hole(self, hole_id) -> List[Dict]:
        return list(Group.objects.for_hole(hole_id).values("id", "name", "score", "points"))

    def fetch_members_for_groups(self, group_ids: Iterable[int]) -> List[Dict]:
        return list(Member.objects
                    .active()
                    .filter(groups__in=list(group_ids))
                    .distinct()
                    .order_by("name", "id")
                    .values("id", "name", "handicap"))

    def fetch_group_memberships(self, group_ids: Iterable[int]) -> List[Tuple[int, int]]:
        return list(Group.members.through.objects
                    .filter(group_id__in=list(group_ids))
                    .order_by("group_id", "member_id")
                    .values_list("group_id", "member_id"))

    def persist_hole_points(self, hole_id, rows: Iterable[Tuple[int, Optional[int], Optional[int]]]):
        """
        Write (group id, score, points) for the groups of a hole, one row at a
        time. There is no transaction: if a row fails, the rows already written
        stay written and PartialPersistenceError names the failing group.
        """
        saved = []
        for group_id, score, points in rows:
            try:
                group = Group.objects.active().get(pk=group_id, hole_id=hole_id)
                group.score = score
                group.points = points
                group.save(update_fields=["score", "points"])
            except (ObjectDoesNotExist, DatabaseError) as e:
                logger.error("Failed to save hole points", holeId=hole_id, groupId=group_id,
                             saved=saved, error=str(e))
                raise PartialPersistenceError(group_id, saved_group_ids=saved, reason=str(e)) from e
            saved.append(group_id)
        return saved

    def subscribe_to_group_changes(self, group_ids: Iterable[int], on_change: Callable[[], None]):
        return self.feed.subscribe(group_ids, on_change)

    def fetch_group_ids_for_event(self, event_id) -> List[int]:
        return list(Group.objects.for_event(event_id).order_by("id").values_list("id", flat=True))

    def load_hole_groups(self, hole_id) -> List[GroupResult]:
        groups = self.fetch_groups_for_hole(hole_id)
        group_ids = [group["id"] for group in groups]
        active_members = {member["id"] for member in self.fetch_members_for_groups(group_ids)}

        members_by_group = defaultdict(list)
        for group_id, member_id in self.fetch_group_memberships(group_ids):
            if member_id in active_members:
                members_by_group[group_id].append(member_id)

        return [GroupResult(group["id"], group["name"], group["points"], members_by_group[group["id"]],
                            score=group["score"])
                for group in groups]

    def load_event_snapshot(self, event_id) -> Tuple[List[HoleResult], List[MemberInfo]]:
        """
        The aggregator's input for an event: its active holes in play order
        with their active groups, and every active member playing in them.
        Archived groups and members simply do not appear.
        """
        holes = list(Hole.objects.for_event(event_id).values("id", "name"))
        if not holes:
            return [], []

        groups_by_hole = defaultdict(list)
        groups = list(Group.objects
                      .active()
                      .filter(hole_id__in=[hole["id"] for hole in holes])
                      .order_by("id")
                      .values("id", "hole_id", "name", "score", "points"))
        group_ids = [group["id"] for group in groups]

        members = self.fetch_members_for_groups(group_ids)
        active_members = {member["id"] for member in members}

        members_by_group = defaultdict(list)
        for group_id, member_id in self.fetch_group_memberships(group_ids):
            if member_id in active_members:
                members_by_group[group_id].append(member_id)

        for group in groups:
            groups_by_hole[group["hole_id"]].append(
                GroupResult(group["id"], group["name"], group["points"], members_by_group[group["id"]],
                            score=group["score"]))

        hole_results = [HoleResult(hole["id"], hole["name"], groups_by_hole[hole["id"]]) for hole in holes]
        roster = [MemberInfo(member["id"], member["name"]) for member in members]
        return hole_results, roster
