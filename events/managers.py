from core.models import ArchivableQuerySet


class EventQuerySet(ArchivableQuerySet):

    def newest_first(self):
        return self.order_by("-event_date", "-id")


class HoleQuerySet(ArchivableQuerySet):

    def in_play_order(self):
        """
        The one ordering used for an event's holes everywhere: hole navigation,
        the hole-by-hole view and the cumulative standings all follow it.
        Holes are played in the order they were created.
        """
        return self.order_by("created_date", "id")

    def for_event(self, event_id):
        return self.active().filter(event_id=event_id).in_play_order()
