from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import CASCADE
from simple_history.models import HistoricalRecords

from core.models import ACTIVE, ArchivableModel
from events.models import Hole
from members.models import Member
from points.engine import MAX_SCORE, MIN_SCORE
from teams.managers import GroupQuerySet


class Group(ArchivableModel):
    """
    A team playing one hole. Every hole has its own set of groups; the raw
    score and the points derived from it always change together.
    """
    hole = models.ForeignKey(verbose_name="Hole", to=Hole, related_name="groups", on_delete=CASCADE)
    name = models.CharField(verbose_name="Group name", max_length=60)
    score = models.IntegerField(verbose_name="Score", blank=True, null=True,
                                validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)])
    points = models.IntegerField(verbose_name="Points", blank=True, null=True,
                                 validators=[MinValueValidator(1), MaxValueValidator(4)])
    members = models.ManyToManyField(verbose_name="Members", to=Member, blank=True, related_name="groups")

    history = HistoricalRecords(user_db_constraint=False)
    objects = GroupQuerySet.as_manager()

    class Meta:
        verbose_name = "Group"
        verbose_name_plural = "Groups"

    def __str__(self):
        return "{}: {}".format(self.hole, self.name)


def unavailable_member_ids(hole_id, exclude_group_id=None):
    """
    Members already playing in another active group on the hole. The group
    being edited (exclude_group_id) does not count against its own members.
    """
    groups = Group.objects.for_hole(hole_id)
    if exclude_group_id is not None:
        groups = groups.exclude(pk=exclude_group_id)

    return set(Group.members.through.objects
               .filter(group__in=groups, member__status=ACTIVE)
               .values_list("member_id", flat=True))
