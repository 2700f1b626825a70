from unittest import mock

from django.test import TestCase

from members.tests.factories import MemberFactory
from scores.notifications import GroupChangeFeed, group_changes
from teams.models import Group
from teams.tests.factories import GroupFactory


class GroupChangeFeedTests(TestCase):

    def setUp(self):
        self.group = GroupFactory()
        self.other = GroupFactory(hole=self.group.hole)
        self.on_change = mock.Mock()
        unsubscribe = group_changes.subscribe([self.group.id], self.on_change)
        self.addCleanup(unsubscribe)

    def test_save_notifies(self):
        self.group.name = "Renamed"
        self.group.save()
        self.on_change.assert_called_once_with()

    def test_other_groups_do_not_notify(self):
        self.other.name = "Renamed"
        self.other.save()
        self.on_change.assert_not_called()

    def test_archive_notifies(self):
        self.group.archive()
        self.on_change.assert_called_once_with()

    def test_membership_changes_notify(self):
        member = MemberFactory()
        self.group.members.add(member)
        self.assertEqual(self.on_change.call_count, 1)

        member.groups.remove(self.group)
        self.assertEqual(self.on_change.call_count, 2)

    def test_delete_notifies(self):
        self.group.delete()
        self.on_change.assert_called_once_with()

    def test_unsubscribe(self):
        on_change = mock.Mock()
        unsubscribe = group_changes.subscribe([self.other.id], on_change)
        unsubscribe()
        unsubscribe()

        self.other.save()
        on_change.assert_not_called()

    def test_failing_subscriber_does_not_block_others(self):
        broken = mock.Mock(side_effect=RuntimeError("boom"))
        unsubscribe = group_changes.subscribe([self.group.id], broken)
        self.addCleanup(unsubscribe)

        self.group.save()
        broken.assert_called_once_with()
        self.on_change.assert_called_once_with()


class GroupChangePollTests(TestCase):

    def setUp(self):
        self.feed = GroupChangeFeed()
        self.group = GroupFactory()
        self.on_change = mock.Mock()
        self.feed.subscribe([self.group.id], self.on_change)

    def test_poll_without_changes(self):
        self.assertEqual(self.feed.poll(), 0)
        self.on_change.assert_not_called()

    def test_poll_sees_changes_made_without_signals(self):
        self.feed.poll()
        # a bulk update does not send post_save, just like a write from another process
        Group.objects.filter(pk=self.group.id).update(score=7, points=4)

        self.assertEqual(self.feed.poll(), 1)
        self.on_change.assert_called_once_with()
        self.assertEqual(self.feed.poll(), 0)

    def test_poll_sees_membership_changes(self):
        self.feed.poll()
        Group.members.through.objects.create(group_id=self.group.id, member_id=MemberFactory().id)

        self.assertEqual(self.feed.poll(), 1)

    def test_notify_does_not_repeat_on_poll(self):
        self.feed.poll()
        Group.objects.filter(pk=self.group.id).update(score=5)
        self.feed.notify(self.group.id)

        self.assertEqual(self.on_change.call_count, 1)
        self.assertEqual(self.feed.poll(), 0)

    def test_subscriber_count(self):
        unsubscribe = self.feed.subscribe([1, 2], mock.Mock())
        self.assertEqual(self.feed.subscriber_count(), 2)
        unsubscribe()
        self.assertEqual(self.feed.subscriber_count(), 1)
