"""
Hole points: converts the raw scores of the groups playing a hole into
rank based points. Lower scores are better, the best group earns 4 points,
then 3, 2 and 1 for everyone from fourth place down. Ties share the points
of the place they start on and use up the places they occupy.
"""
from typing import Dict, Hashable, Optional

from points.exceptions import InvalidScoreError

MIN_SCORE = 1
MAX_SCORE = 20
POINTS_BY_POSITION = (4, 3, 2, 1)


def validate_score(score, group_id=None, max_score: Optional[int] = MAX_SCORE) -> int:
    # bool is an int subclass, but True is not a golf score
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(group_id, score)
    if score < MIN_SCORE or (max_score is not None and score > max_score):
        raise InvalidScoreError(group_id, score)
    return score


def points_for_position(position: int) -> int:
    if position < len(POINTS_BY_POSITION):
        return POINTS_BY_POSITION[position]
    return POINTS_BY_POSITION[-1]


def calculate_points(scores: Dict[Hashable, Optional[int]],
                     max_score: Optional[int] = MAX_SCORE) -> Dict[Hashable, int]:
    """
    Award points for one hole.

    Args:
        scores: group id -> raw score, None for groups that have not posted a score
        max_score: highest score accepted; None lifts the ceiling, e.g. to rank round totals

    Returns:
        group id -> points (1-4). Groups without a score are left out.

    Raises:
        InvalidScoreError: a posted score is not an integer from 1 to max_score
    """
    scored = [(group_id, validate_score(score, group_id, max_score))
              for group_id, score in scores.items() if score is not None]
    if not scored:
        return {}

    scored.sort(key=lambda entry: entry[1])

    # everyone level: all groups share first place
    if scored[0][1] == scored[-1][1]:
        return {group_id: POINTS_BY_POSITION[0] for group_id, _ in scored}

    points = {}
    position = 0
    while position < len(scored):
        block_score = scored[position][1]
        block = [group_id for group_id, score in scored[position:] if score == block_score]
        award = points_for_position(position)
        for group_id in block:
            points[group_id] = award
        position += len(block)

    return points
