from datetime import date, datetime, timezone
from http import HTTPStatus

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from clubs.tests.factories import ClubFactory
from core.models import ARCHIVED
from events.models import Event, Hole
from events.tests.factories import EventFactory, HoleFactory
from teams.models import Group
from teams.tests.factories import GroupFactory


class EventModelTests(TestCase):

    def test_archive_takes_the_holes_along(self):
        event = EventFactory()
        first = HoleFactory(event=event)
        second = HoleFactory(event=event)
        group = GroupFactory(hole=first)

        event.archive()

        self.assertEqual(Event.objects.get(pk=event.id).status, ARCHIVED)
        self.assertEqual(set(Hole.objects.archived().values_list("id", flat=True)), {first.id, second.id})
        # the group row survives but no longer shows up for its event
        self.assertTrue(Group.objects.filter(pk=group.id).exists())
        self.assertFalse(Group.objects.for_event(event.id).exists())

    def test_holes_in_creation_order(self):
        event = EventFactory()
        late = HoleFactory(event=event, name="Late", created_date=datetime(2026, 5, 16, 12, tzinfo=timezone.utc))
        early = HoleFactory(event=event, name="Early", created_date=datetime(2026, 5, 16, 9, tzinfo=timezone.utc))
        archived = HoleFactory(event=event)
        archived.archive()

        self.assertEqual(list(Hole.objects.for_event(event.id)), [early, late])

    def test_allowed_clubs_skip_archived(self):
        hole = HoleFactory()
        putter = ClubFactory(name="Putter", orderby=2)
        driver = ClubFactory(name="Driver", orderby=1)
        wedge = ClubFactory(name="Wedge", orderby=3)
        hole.clubs.add(putter, driver, wedge)
        wedge.archive()

        self.assertEqual(list(hole.allowed_clubs()), [driver, putter])


@override_settings(ADMIN_PIN="4321")
class EventApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_list_hides_archived_events(self):
        newer = EventFactory(name="Fall Classic", event_date=date(2026, 9, 12))
        older = EventFactory(name="Spring Scramble", event_date=date(2026, 5, 16))
        EventFactory(name="Old").archive()

        response = self.client.get("/api/events/")
        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual([event["id"] for event in response.data], [newer.id, older.id])

    def test_event_detail_lists_holes_in_order(self):
        event = EventFactory()
        HoleFactory(event=event, name="One")
        HoleFactory(event=event, name="Two")

        response = self.client.get("/api/events/{}/".format(event.id))
        self.assertEqual([hole["name"] for hole in response.data["holes"]], ["One", "Two"])

    def test_create_requires_pin(self):
        response = self.client.post("/api/events/", {"name": "Member Guest", "event_date": "2026-07-04"},
                                    format="json")
        self.assertEqual(response.status_code, HTTPStatus.FORBIDDEN)

        response = self.client.post("/api/events/", {"name": "Member Guest", "event_date": "2026-07-04"},
                                    format="json", HTTP_X_ADMIN_PIN="4321")
        self.assertEqual(response.status_code, HTTPStatus.CREATED)
        self.assertEqual(response.data["name"], "Member Guest")

    def test_delete_archives(self):
        event = EventFactory()
        HoleFactory(event=event)

        response = self.client.delete("/api/events/{}/".format(event.id), HTTP_X_ADMIN_PIN="4321")
        self.assertEqual(response.status_code, HTTPStatus.NO_CONTENT)
        self.assertTrue(Event.objects.get(pk=event.id).is_archived)
        self.assertFalse(Hole.objects.for_event(event.id).exists())


@override_settings(ADMIN_PIN="4321")
class HoleApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.event = EventFactory()

    def test_list_for_event(self):
        first = HoleFactory(event=self.event)
        second = HoleFactory(event=self.event)
        HoleFactory()

        response = self.client.get("/api/holes/", {"event": self.event.id})
        self.assertEqual([hole["id"] for hole in response.data], [first.id, second.id])

    def test_create_hole_with_clubs(self):
        club = ClubFactory(name="7 Iron")
        response = self.client.post("/api/holes/", {"event": self.event.id, "name": "Closest to Pin", "par": 3,
                                                    "clubs": [club.id]},
                                    format="json", HTTP_X_ADMIN_PIN="4321")

        self.assertEqual(response.status_code, HTTPStatus.CREATED)
        self.assertEqual(response.data["allowed_clubs"][0]["name"], "7 Iron")

    def test_new_holes_are_played_last(self):
        HoleFactory(event=self.event, name="Existing", created_date=datetime(2020, 1, 1, tzinfo=timezone.utc))
        self.client.post("/api/holes/", {"event": self.event.id, "name": "Added"}, format="json",
                         HTTP_X_ADMIN_PIN="4321")

        self.assertEqual([hole.name for hole in Hole.objects.for_event(self.event.id)], ["Existing", "Added"])

    def test_no_holes_on_archived_event(self):
        self.event.archive()
        response = self.client.post("/api/holes/", {"event": self.event.id, "name": "Late"}, format="json",
                                    HTTP_X_ADMIN_PIN="4321")
        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)

    def test_delete_archives(self):
        hole = HoleFactory(event=self.event)
        response = self.client.delete("/api/holes/{}/".format(hole.id), HTTP_X_ADMIN_PIN="4321")

        self.assertEqual(response.status_code, HTTPStatus.NO_CONTENT)
        self.assertTrue(Hole.objects.get(pk=hole.id).is_archived)
