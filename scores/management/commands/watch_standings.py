import time

from django.core.management.base import BaseCommand, CommandError

from events.models import Event
from scores.live import LiveStandings


class Command(BaseCommand):
    help = 'Print the leaderboard for an event and reprint it whenever a group changes'

    def add_arguments(self, parser):
        parser.add_argument("event_id", type=int)
        parser.add_argument("--interval", type=float, default=2.0, help="Seconds between checks for changes")
        parser.add_argument("--once", action="store_true", help="Print the current leaderboard and exit")

    def handle(self, *args, **options):
        event = Event.objects.active().filter(pk=options["event_id"]).first()
        if event is None:
            raise CommandError("Event %s does not exist or is archived" % options["event_id"])

        live = LiveStandings(event.id, on_update=lambda standings: self.print_leaderboard(event, standings))
        live.start()
        if options["once"]:
            live.stop()
            return

        try:
            while True:
                time.sleep(options["interval"])
                live.sync()
        except KeyboardInterrupt:
            pass
        finally:
            live.stop()

    def print_leaderboard(self, event, standings):
        self.stdout.write(self.style.MIGRATE_HEADING("%s (%s holes)" % (event.name, len(standings.hole_names))))
        if not standings.ranking:
            self.stdout.write("No members have played yet")
            return

        for standing in standings.ranking:
            marker = "*" if standing.is_winner else " "
            self.stdout.write("%s %2d. %-30s %3d" % (marker, standing.position, standing.name, standing.total_points))
        if standings.is_tie:
            self.stdout.write(self.style.WARNING("Tied for first"))
