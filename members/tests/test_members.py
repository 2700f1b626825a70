from http import HTTPStatus

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from members.models import Member
from members.tests.factories import MemberFactory


@override_settings(ADMIN_PIN="4321")
class MemberApiTests(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_list_by_handicap(self):
        MemberFactory(name="Scratch", handicap=0)
        MemberFactory(name="Unknown", handicap=None)
        MemberFactory(name="Bogey", handicap=18)
        MemberFactory(name="Gone", handicap=5).archive()

        response = self.client.get("/api/members/")
        self.assertEqual([member["name"] for member in response.data], ["Scratch", "Bogey", "Unknown"])

    def test_search_by_name(self):
        MemberFactory(name="Pat Smith")
        MemberFactory(name="Lee Jones")

        response = self.client.get("/api/members/", {"name": "smith"})
        self.assertEqual([member["name"] for member in response.data], ["Pat Smith"])

    def test_create_member(self):
        response = self.client.post("/api/members/", {"name": "Pat", "handicap": "9.4"}, format="json",
                                    HTTP_X_ADMIN_PIN="4321")
        self.assertEqual(response.status_code, HTTPStatus.CREATED)
        self.assertEqual(Member.objects.get(name="Pat").status, "active")

    def test_delete_archives(self):
        member = MemberFactory()
        response = self.client.delete("/api/members/{}/".format(member.id), HTTP_X_ADMIN_PIN="4321")

        self.assertEqual(response.status_code, HTTPStatus.NO_CONTENT)
        self.assertTrue(Member.objects.get(pk=member.id).is_archived)
