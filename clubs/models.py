from django.db import models
from django.db.models import F

from core.models import ArchivableModel, ArchivableQuerySet


class ClubQuerySet(ArchivableQuerySet):

    def in_display_order(self):
        return self.order_by(F("orderby").asc(nulls_last=True), "name", "id")


class Club(ArchivableModel):
    name = models.CharField(verbose_name="Club", max_length=60)
    orderby = models.IntegerField(verbose_name="Display order", blank=True, null=True)

    objects = ClubQuerySet.as_manager()

    def __str__(self):
        return self.name
