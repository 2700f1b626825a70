"""
Event standings: turns the points every group earned on every hole into
member level results.

The inputs are plain objects built from whatever is currently stored, so a
partially scored event is fine: groups without points contribute nothing.
Every function here is pure and is meant to be re-run from scratch whenever
any group changes.
"""
from typing import Dict, Hashable, Iterable, List, Optional, Set

import structlog

logger = structlog.get_logger(__name__)


class GroupResult:
    """Points a group earned on one hole, with the members that played in it."""

    def __init__(self, group_id, name: Optional[str], points: Optional[int], member_ids: Iterable[Hashable],
                 score: Optional[int] = None):
        self.group_id = group_id
        self.name = name
        self.score = score
        self.points = points
        self.member_ids = list(member_ids)

    @property
    def earned(self) -> int:
        return self.points if self.points is not None and self.points > 0 else 0


class HoleResult:

    def __init__(self, hole_id, name: Optional[str], groups: Iterable[GroupResult]):
        self.hole_id = hole_id
        self.name = name
        self.groups = list(groups)

    def groups_in_credit_order(self) -> List[GroupResult]:
        # A member found in two groups on the same hole is credited by the
        # lowest group id only.
        return sorted(self.groups, key=lambda group: group.group_id)


class MemberInfo:

    def __init__(self, member_id, name: Optional[str]):
        self.member_id = member_id
        self.name = name


class MemberTrajectory:

    def __init__(self, member: MemberInfo, hole_names: List[str], cumulative: List[int]):
        self.member_id = member.member_id
        self.name = member.name
        self.hole_names = hole_names
        self.cumulative = cumulative

    @property
    def final(self) -> int:
        return self.cumulative[-1] if self.cumulative else 0

    def to_dict(self) -> Dict:
        return {
            "member": self.member_id,
            "name": self.name,
            "scores": [{"hole": hole, "cumulative_points": points}
                       for hole, points in zip(self.hole_names, self.cumulative)],
            "total_points": self.final,
        }


class MemberStanding:

    def __init__(self, member: MemberInfo, total_points: int, position: int, is_winner: bool, is_tied: bool,
                 groups: Optional[List[Dict]] = None):
        self.member_id = member.member_id
        self.name = member.name
        self.total_points = total_points
        self.position = position
        self.is_winner = is_winner
        self.is_tied = is_tied
        self.groups = list(groups or [])

    def to_dict(self) -> Dict:
        return {
            "member": self.member_id,
            "name": self.name,
            "total_points": self.total_points,
            "position": self.position,
            "is_winner": self.is_winner,
            "is_tied": self.is_tied,
            "groups": self.groups,
        }


class GroupPlacing:

    def __init__(self, group: GroupResult, is_winner: bool):
        self.group_id = group.group_id
        self.name = group.name
        self.score = group.score
        self.points = group.points
        self.member_ids = group.member_ids
        self.is_winner = is_winner

    def to_dict(self) -> Dict:
        return {
            "group": self.group_id,
            "name": self.name,
            "score": self.score,
            "points": self.points,
            "members": self.member_ids,
            "is_winner": self.is_winner,
        }


def hole_label(hole: HoleResult, index: int) -> str:
    return hole.name or "Hole {}".format(index + 1)


def _credit_hole(hole: HoleResult, roster: Set[Hashable]) -> Dict[Hashable, GroupResult]:
    """
    The group each rostered member is credited through on one hole. Members
    outside the roster (archived or unknown) are ignored.
    """
    credited = {}
    for group in hole.groups_in_credit_order():
        for member_id in group.member_ids:
            if member_id not in roster:
                continue
            if member_id in credited:
                logger.warning("Member appears in more than one group on a hole", holeId=hole.hole_id,
                               memberId=member_id, groupId=group.group_id)
                continue
            credited[member_id] = group
    return credited


def credit_holes(holes: List[HoleResult], members: List[MemberInfo]) -> List[Dict[Hashable, GroupResult]]:
    """Per hole, in the order given: member id -> the group that member is credited through."""
    roster = {member.member_id for member in members}
    return [_credit_hole(hole, roster) for hole in holes]


def _trajectories(hole_names: List[str], credits: List[Dict[Hashable, GroupResult]],
                  members: List[MemberInfo]) -> List[MemberTrajectory]:
    trajectories = []
    for member in members:
        running = 0
        series = []
        for credited in credits:
            group = credited.get(member.member_id)
            running += group.earned if group is not None else 0
            series.append(running)
        trajectories.append(MemberTrajectory(member, hole_names, series))
    return trajectories


def _totals(credits: List[Dict[Hashable, GroupResult]], members: List[MemberInfo]) -> Dict[Hashable, int]:
    totals = {member.member_id: 0 for member in members}
    for credited in credits:
        for member_id, group in credited.items():
            totals[member_id] += group.earned
    return totals


def _groups_by_member(holes: List[HoleResult], credits: List[Dict[Hashable, GroupResult]]) -> Dict[Hashable, List]:
    played = {}
    for index, (hole, credited) in enumerate(zip(holes, credits)):
        for member_id, group in credited.items():
            played.setdefault(member_id, []).append({
                "hole": hole_label(hole, index),
                "group": group.group_id,
                "name": group.name,
                "points": group.points,
            })
    return played


def build_trajectories(holes: List[HoleResult], members: List[MemberInfo]) -> List[MemberTrajectory]:
    """
    Cumulative points per member, one entry per hole in the order given.
    A member who did not play a hole carries the previous total forward.
    """
    hole_names = [hole_label(hole, index) for index, hole in enumerate(holes)]
    return _trajectories(hole_names, credit_holes(holes, members), members)


def total_points(holes: Iterable[HoleResult], members: List[MemberInfo]) -> Dict[Hashable, int]:
    """
    Total points per member, independent of hole order. Always agrees with
    the last entry of the member's trajectory.
    """
    return _totals(credit_holes(list(holes), members), members)


def rank_members(totals: Dict[Hashable, int], members: List[MemberInfo],
                 groups: Optional[Dict[Hashable, List]] = None) -> List[MemberStanding]:
    """
    Members by total points, highest first. Everyone sharing the top total
    is a winner; is_tied marks a shared first place. groups, when given,
    lists the groups each member was credited through.
    """
    if not members:
        return []

    groups = groups or {}
    ordered = sorted(members, key=lambda member: (-totals.get(member.member_id, 0), member.name or "",
                                                  str(member.member_id)))
    ordered_totals = [totals.get(member.member_id, 0) for member in ordered]
    best = ordered_totals[0]
    is_tie = ordered_totals.count(best) > 1

    standings = []
    for member, total in zip(ordered, ordered_totals):
        position = 1 + sum(1 for other in ordered_totals if other > total)
        is_winner = total == best
        standings.append(MemberStanding(member, total, position, is_winner, is_winner and is_tie,
                                        groups=groups.get(member.member_id, [])))
    return standings


def hole_leaderboard(groups: Iterable[GroupResult]) -> List[GroupPlacing]:
    """
    Groups on a hole by points, highest first, unscored groups last. The
    leading group, or every group tied for the lead, is flagged.
    """
    ordered = sorted(groups, key=lambda group: (group.points is None, -(group.points or 0), group.group_id))
    if not ordered or ordered[0].points is None:
        return [GroupPlacing(group, False) for group in ordered]

    best = ordered[0].points
    return [GroupPlacing(group, group.points == best) for group in ordered]


class Standings:

    def __init__(self, holes: List[HoleResult], members: List[MemberInfo]):
        credits = credit_holes(holes, members)
        self.hole_names = [hole_label(hole, index) for index, hole in enumerate(holes)]
        self.trajectories = _trajectories(self.hole_names, credits, members)
        self.totals = _totals(credits, members)
        self.ranking = rank_members(self.totals, members, _groups_by_member(holes, credits))

    @property
    def winners(self) -> List[MemberStanding]:
        return [standing for standing in self.ranking if standing.is_winner]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    def is_consistent(self) -> bool:
        return all(self.totals[trajectory.member_id] == trajectory.final for trajectory in self.trajectories)

    def chart_rows(self) -> List[Dict]:
        """
        One row per hole: the hole name and every member's running total keyed
        by member id, leaders first. Names come from the ranking.
        """
        by_member = {trajectory.member_id: trajectory for trajectory in self.trajectories}
        return [{"hole": hole_name,
                 "members": {standing.member_id: by_member[standing.member_id].cumulative[index]
                             for standing in self.ranking}}
                for index, hole_name in enumerate(self.hole_names)]

    def to_dict(self) -> Dict:
        by_member = {trajectory.member_id: trajectory for trajectory in self.trajectories}
        return {
            "holes": self.hole_names,
            "members": [by_member[standing.member_id].to_dict() for standing in self.ranking],
            "chart": self.chart_rows(),
            "ranking": [standing.to_dict() for standing in self.ranking],
            "is_tie": self.is_tie,
        }


def build_standings(holes: List[HoleResult], members: List[MemberInfo]) -> Standings:
    return Standings(holes, members)


def build_results(holes: Iterable[HoleResult], members: List[MemberInfo]) -> List[MemberStanding]:
    """Final results straight from the hole totals, without building trajectories."""
    holes = list(holes)
    credits = credit_holes(holes, members)
    return rank_members(_totals(credits, members), members, _groups_by_member(holes, credits))
