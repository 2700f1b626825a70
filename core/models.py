from django.db import models

ACTIVE = "active"
ARCHIVED = "archived"

STATUS_CHOICES = (
    (ACTIVE, "Active"),
    (ARCHIVED, "Archived"),
)


class ArchivableQuerySet(models.QuerySet):

    def active(self):
        return self.filter(status=ACTIVE)

    def archived(self):
        return self.filter(status=ARCHIVED)

    def archive(self):
        return self.update(status=ARCHIVED)


class ArchivableModel(models.Model):
    """
    Base for entities that are soft deleted. An archived row is hidden from
    every listing and excluded from scoring, but stays in the database.
    """
    status = models.CharField(verbose_name="Status", max_length=10, choices=STATUS_CHOICES, default=ACTIVE)

    objects = ArchivableQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_archived(self):
        return self.status == ARCHIVED

    def archive(self):
        self.status = ARCHIVED
        self.save(update_fields=["status"])
