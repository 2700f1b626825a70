"""
Group change feed. Subscribers register interest in a set of group ids and
are called back, with no payload, whenever one of those groups changes.
A callback means "recompute from scratch"; it never describes the change.

Changes made in this process arrive through the model signals. Changes made
by other processes (another web worker, another organizer's phone) are
picked up by poll(), which compares a fingerprint of the subscribed rows.
"""
import itertools
import threading
from typing import Callable, Dict, FrozenSet, Iterable, Tuple

import structlog

from teams.models import Group

logger = structlog.get_logger(__name__)


class Subscription:

    def __init__(self, token: int, group_ids: FrozenSet[int], on_change: Callable[[], None]):
        self.token = token
        self.group_ids = group_ids
        self.on_change = on_change
        self.fingerprint: Tuple = ()


def group_fingerprint(group_ids: Iterable[int]) -> Tuple:
    ids = sorted(group_ids)
    groups = tuple(Group.objects
                   .filter(pk__in=ids)
                   .order_by("id")
                   .values_list("id", "name", "status", "score", "points"))
    members = tuple(Group.members.through.objects
                    .filter(group_id__in=ids)
                    .order_by("group_id", "member_id")
                    .values_list("group_id", "member_id"))
    return groups, members


class GroupChangeFeed:

    def __init__(self):
        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._subscriptions: Dict[int, Subscription] = {}

    def subscribe(self, group_ids: Iterable[int], on_change: Callable[[], None]) -> Callable[[], None]:
        """
        Call on_change whenever one of group_ids changes.

        Returns:
            A function that cancels the subscription. Calling it twice is harmless.
        """
        subscription = Subscription(next(self._tokens), frozenset(group_ids), on_change)
        subscription.fingerprint = group_fingerprint(subscription.group_ids)
        with self._lock:
            self._subscriptions[subscription.token] = subscription

        def unsubscribe():
            with self._lock:
                self._subscriptions.pop(subscription.token, None)

        return unsubscribe

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def _matching(self, group_id) -> list:
        with self._lock:
            return [sub for sub in self._subscriptions.values() if group_id in sub.group_ids]

    def _deliver(self, subscription: Subscription):
        try:
            subscription.on_change()
        except Exception as e:
            # one broken listener must not block the others or the save that triggered it
            logger.error("Group change subscriber failed", token=subscription.token, error=str(e), exc_info=True)

    def notify(self, group_id):
        for subscription in self._matching(group_id):
            # the recompute below sees this change, so poll() must not report it again
            subscription.fingerprint = group_fingerprint(subscription.group_ids)
            self._deliver(subscription)

    def poll(self) -> int:
        """
        Look for changes written outside this process. Returns the number of
        subscribers that were notified.
        """
        with self._lock:
            subscriptions = list(self._subscriptions.values())

        notified = 0
        for subscription in subscriptions:
            fingerprint = group_fingerprint(subscription.group_ids)
            previous = subscription.fingerprint
            subscription.fingerprint = fingerprint
            if previous != fingerprint:
                notified += 1
                self._deliver(subscription)
        return notified


group_changes = GroupChangeFeed()
