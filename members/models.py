from django.db import models
from django.db.models import F

from core.models import ArchivableModel, ArchivableQuerySet


class MemberQuerySet(ArchivableQuerySet):

    def by_handicap(self):
        return self.order_by(F("handicap").asc(nulls_last=True), "name", "id")


class Member(ArchivableModel):
    name = models.CharField(verbose_name="Name", max_length=100)
    handicap = models.DecimalField(verbose_name="Handicap", max_digits=4, decimal_places=1, blank=True, null=True)

    objects = MemberQuerySet.as_manager()

    def __str__(self):
        return self.name
