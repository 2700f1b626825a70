import factory
from factory.django import DjangoModelFactory

from events.tests.factories import HoleFactory
from teams.models import Group


class GroupFactory(DjangoModelFactory):
    class Meta:
        model = Group
        skip_postgeneration_save = True

    hole = factory.SubFactory(HoleFactory)
    name = factory.Sequence(lambda n: "Group {}".format(n + 1))
    score = None
    points = None

    @factory.post_generation
    def members(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        self.members.add(*extracted)
