from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from clubs import views as club_views
from core import views as core_views
from events import views as event_views
from members import views as member_views
from points import views as points_views
from scores import views as scoring_views
from teams import views as team_views

admin.site.site_header = "Golf Outing Administration"

# Create a router and register our viewsets with it.
router = DefaultRouter()
router.register(r"clubs", club_views.ClubViewSet, "clubs")
router.register(r"events", event_views.EventViewSet, "events")
router.register(r"groups", team_views.GroupViewSet, "groups")
router.register(r"holes", event_views.HoleViewSet, "holes")
router.register(r"members", member_views.MemberViewSet, "members")

urlpatterns = [
      path("admin/", admin.site.urls),
      path("api/", include(router.urls)),
      path("api/events/<int:event_id>/standings/", points_views.event_standings, name="event-standings"),
      path("api/events/<int:event_id>/results/", points_views.event_results, name="event-results"),
      path("api/holes/<int:hole_id>/scores/", scoring_views.record_hole_scores, name="hole-scores"),
      path("api/holes/<int:hole_id>/leaderboard/", scoring_views.hole_leaderboard, name="hole-leaderboard"),
      path("api/holes/<int:hole_id>/available-members/", team_views.available_members, name="available-members"),
      path("auth/pin/", core_views.check_pin, name="check-pin"),
  ]
