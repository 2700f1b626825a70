import threading
from typing import Callable, Optional

import structlog

from points.standings import Standings, build_standings
from scores.repository import GroupRepository

logger = structlog.get_logger(__name__)


class LiveStandings:
    """
    Keeps an event's standings current. Any change to one of the event's
    groups throws the current standings away and rebuilds them from the
    stored data; nothing is patched incrementally.

    Refreshes are numbered. A refresh that finishes after a newer one has
    been requested is discarded, so the newest request always wins.
    """

    def __init__(self, event_id, repository: Optional[GroupRepository] = None,
                 on_update: Optional[Callable[[Standings], None]] = None):
        self.event_id = event_id
        self.repository = repository or GroupRepository()
        self.on_update = on_update
        self.standings: Optional[Standings] = None
        self.is_stale = True
        self._lock = threading.Lock()
        self._requested = 0
        self._published = 0
        self._group_ids = frozenset()
        self._unsubscribe = None

    def start(self) -> Optional[Standings]:
        return self.refresh()

    def stop(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _resubscribe(self):
        group_ids = frozenset(self.repository.fetch_group_ids_for_event(self.event_id))
        if self._unsubscribe is not None and group_ids == self._group_ids:
            return
        self.stop()
        self._group_ids = group_ids
        self._unsubscribe = self.repository.subscribe_to_group_changes(group_ids, self.invalidate)

    def sync(self) -> bool:
        """
        Pick up changes written by other processes, including groups added
        to or removed from the event. Returns True when standings were rebuilt.
        """
        group_ids = frozenset(self.repository.fetch_group_ids_for_event(self.event_id))
        if group_ids != self._group_ids:
            self.invalidate()
            return True
        published = self._published
        self.repository.feed.poll()
        return self._published != published

    def invalidate(self):
        self.is_stale = True
        self.refresh()

    def begin_refresh(self) -> int:
        with self._lock:
            self._requested += 1
            return self._requested

    def complete_refresh(self, generation: int, holes, members) -> Optional[Standings]:
        """
        Publish standings computed for a refresh request. Returns the current
        standings, which are unchanged when this request has been superseded.
        """
        standings = build_standings(holes, members)
        with self._lock:
            if generation < self._requested or generation <= self._published:
                logger.debug("Discarding superseded standings", eventId=self.event_id, generation=generation,
                             latest=self._requested)
                return self.standings
            self._published = generation
            self.standings = standings
            self.is_stale = False

        if self.on_update is not None:
            self.on_update(standings)
        return standings

    def refresh(self) -> Optional[Standings]:
        generation = self.begin_refresh()
        # groups may have been added to or removed from the event; subscribe
        # before reading so nothing written after the read is missed
        self._resubscribe()
        holes, members = self.repository.load_event_snapshot(self.event_id)
        return self.complete_refresh(generation, holes, members)
