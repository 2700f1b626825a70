import structlog
from typing import Dict, List, Optional

from rest_framework.exceptions import NotFound
from sentry_sdk import capture_exception

from core.models import ACTIVE
from events.models import Hole
from points.engine import calculate_points, validate_score
from points.exceptions import InvalidScoreError
from scores.exceptions import PartialPersistenceError, ScoreOutOfRangeError, UnknownGroupError
from scores.repository import GroupRepository

logger = structlog.get_logger(__name__)


def get_active_hole(hole_id) -> Hole:
    try:
        return Hole.objects.active().get(pk=hole_id, event__status=ACTIVE)
    except Hole.DoesNotExist:
        raise NotFound("Hole {} not found".format(hole_id))


class HoleScoreResult:
    """Container for the scores and points saved for one hole"""

    def __init__(self, hole: Hole):
        self.hole_id = hole.id
        self.hole_name = hole.name
        self.groups = []

    def add_group(self, group_id: int, name: str, score: Optional[int], points: Optional[int]):
        self.groups.append({"group": group_id, "name": name, "score": score, "points": points})

    def points_by_group(self) -> Dict[int, Optional[int]]:
        return {group["group"]: group["points"] for group in self.groups}

    def to_dict(self) -> Dict:
        return {
            "hole": self.hole_id,
            "name": self.hole_name,
            "groups": self.groups,
        }


class HoleScoringService:
    def __init__(self, repository=None):
        self.repository = repository or GroupRepository()

    def record_scores(self, hole_id: int, scores: Dict[int, Optional[int]]) -> HoleScoreResult:
        """
        Save raw scores for a hole and re-award the points of every group on it.

        Args:
            hole_id: the hole being scored
            scores: group id -> raw score; None clears a score. Groups left out
                keep the score they already have.

        Returns:
            HoleScoreResult with the score and points now stored for every group

        Raises:
            NotFound: the hole does not exist or is archived
            UnknownGroupError: a group id is not an active group on the hole
            ScoreOutOfRangeError: a score is not a whole number from 1 to 20
            PartialPersistenceError: a group could not be saved
        """
        hole = get_active_hole(hole_id)
        groups = self.repository.fetch_groups_for_hole(hole.id)
        names = {group["id"]: group["name"] for group in groups}

        unknown = [group_id for group_id in scores if group_id not in names]
        if unknown:
            raise UnknownGroupError(unknown)

        for group_id, score in scores.items():
            if score is None:
                continue
            try:
                validate_score(score, group_id)
            except InvalidScoreError:
                raise ScoreOutOfRangeError(names[group_id], score)

        merged = {group["id"]: scores[group["id"]] if group["id"] in scores else group["score"]
                  for group in groups}
        points = calculate_points(merged)
        rows = [(group["id"], merged[group["id"]], points.get(group["id"])) for group in groups]

        try:
            self.repository.persist_hole_points(hole.id, rows)
        except PartialPersistenceError as e:
            capture_exception(e)
            raise

        logger.info("Saved hole scores", holeId=hole.id, groups=len(rows), scored=len(points))

        result = HoleScoreResult(hole)
        for group_id, score, group_points in rows:
            result.add_group(group_id, names[group_id], score, group_points)
        return result


def scores_from_entries(entries: List[Dict]) -> Dict[int, Optional[int]]:
    return {entry["group"]: entry.get("score") for entry in entries}
