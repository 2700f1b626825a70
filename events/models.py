import structlog

from django.db import models, transaction
from django.db.models import CASCADE
from django.utils import timezone
from simple_history.models import HistoricalRecords

from clubs.models import Club
from core.models import ArchivableModel
from events.managers import EventQuerySet, HoleQuerySet

logger = structlog.get_logger(__name__)


class Event(ArchivableModel):
    name = models.CharField(verbose_name="Event title", max_length=100)
    event_date = models.DateField(verbose_name="Event date", default=timezone.localdate)

    history = HistoricalRecords(user_db_constraint=False)
    objects = EventQuerySet.as_manager()

    def __str__(self):
        return "{} {}".format(self.event_date, self.name)

    @transaction.atomic()
    def archive(self):
        """
        Archive the event together with its holes. Groups hang off the holes
        and drop out of every active query with them.
        """
        hole_count = self.holes.active().archive()
        super().archive()
        logger.info("Archived event", eventId=self.id, holes=hole_count)


class Hole(ArchivableModel):
    event = models.ForeignKey(verbose_name="Event", to=Event, related_name="holes", on_delete=CASCADE)
    name = models.CharField(verbose_name="Hole", max_length=60, default="New Hole")
    par = models.IntegerField(verbose_name="Par", blank=True, null=True)
    description = models.TextField(verbose_name="Description", blank=True, null=True)
    clubs = models.ManyToManyField(verbose_name="Allowed clubs", to=Club, blank=True, related_name="holes")
    created_date = models.DateTimeField(verbose_name="Created", default=timezone.now)

    objects = HoleQuerySet.as_manager()

    def __str__(self):
        return "{} {}".format(self.event.name, self.name)

    def allowed_clubs(self):
        return self.clubs.active().in_display_order()
