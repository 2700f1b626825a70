from core.models import ACTIVE, ArchivableQuerySet


class GroupQuerySet(ArchivableQuerySet):

    def for_hole(self, hole_id):
        return self.active().filter(hole_id=hole_id).order_by("id")

    def for_event(self, event_id):
        return self.active().filter(hole__event_id=event_id, hole__status=ACTIVE)
