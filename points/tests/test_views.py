from http import HTTPStatus

from django.test import TestCase
from rest_framework.test import APIClient

from events.tests.factories import EventFactory, HoleFactory
from members.tests.factories import MemberFactory
from teams.tests.factories import GroupFactory


class EventStandingsViewTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.event = EventFactory()
        self.ann = MemberFactory(name="Ann")
        self.bob = MemberFactory(name="Bob")
        self.cat = MemberFactory(name="Cat")

        self.first = HoleFactory(event=self.event, name="Long Drive")
        self.second = HoleFactory(event=self.event, name="Closest to Pin")
        GroupFactory(hole=self.first, name="A", score=3, points=4, members=[self.ann])
        GroupFactory(hole=self.first, name="B", score=5, points=3, members=[self.bob, self.cat])
        GroupFactory(hole=self.second, name="C", score=2, points=4, members=[self.bob])

    def test_standings(self):
        response = self.client.get("/api/events/{}/standings/".format(self.event.id))
        self.assertEqual(response.status_code, HTTPStatus.OK)

        self.assertEqual(response.data["event"]["id"], self.event.id)
        self.assertEqual(response.data["holes"], ["Long Drive", "Closest to Pin"])
        trajectories = {member["name"]: member for member in response.data["members"]}
        self.assertEqual([s["cumulative_points"] for s in trajectories["Ann"]["scores"]], [4, 4])
        self.assertEqual([s["cumulative_points"] for s in trajectories["Bob"]["scores"]], [3, 7])
        self.assertEqual([s["cumulative_points"] for s in trajectories["Cat"]["scores"]], [3, 3])
        self.assertEqual(response.data["ranking"][0]["name"], "Bob")
        self.assertFalse(response.data["is_tie"])

    def test_results(self):
        response = self.client.get("/api/events/{}/results/".format(self.event.id))
        self.assertEqual(response.status_code, HTTPStatus.OK)

        totals = {result["name"]: result["total_points"] for result in response.data["results"]}
        self.assertEqual(totals, {"Ann": 4, "Bob": 7, "Cat": 3})
        self.assertEqual([winner["name"] for winner in response.data["winners"]], ["Bob"])

    def test_archived_member_drops_out(self):
        self.bob.archive()
        response = self.client.get("/api/events/{}/results/".format(self.event.id))

        names = [result["name"] for result in response.data["results"]]
        self.assertEqual(names, ["Ann", "Cat"])
        self.assertEqual([winner["name"] for winner in response.data["winners"]], ["Ann"])

    def test_archived_hole_drops_out(self):
        self.second.archive()
        response = self.client.get("/api/events/{}/results/".format(self.event.id))

        totals = {result["name"]: result["total_points"] for result in response.data["results"]}
        self.assertEqual(totals, {"Ann": 4, "Bob": 3, "Cat": 3})

    def test_tied_winners(self):
        GroupFactory(hole=self.second, name="D", score=3, points=3, members=[self.cat, self.ann])
        response = self.client.get("/api/events/{}/results/".format(self.event.id))

        self.assertTrue(response.data["is_tie"])
        self.assertEqual([winner["name"] for winner in response.data["winners"]], ["Ann", "Bob"])

    def test_event_without_holes(self):
        event = EventFactory(name="Empty")
        response = self.client.get("/api/events/{}/standings/".format(event.id))

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["members"], [])
        self.assertEqual(response.data["ranking"], [])

    def test_archived_event_not_found(self):
        self.event.archive()
        response = self.client.get("/api/events/{}/standings/".format(self.event.id))
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)

    def test_missing_event_not_found(self):
        response = self.client.get("/api/events/999/results/")
        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)
