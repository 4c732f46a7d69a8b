"""
Management command that replays the World Cup example on a fresh scoreboard
and prints the summary.
"""

from django.core.management.base import BaseCommand, CommandError

from worldcup.scoreboard_core import Scoreboard, ScoreboardError, Team

# (home, away, home score, away score) in start order
DEMO_FIXTURES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


class Command(BaseCommand):
    help = "Replay the World Cup example matches and print the scoreboard summary"

    def add_arguments(self, parser):
        parser.add_argument(
            "--finish",
            type=str,
            metavar="TEAM",
            help="Finish the match this team plays in before printing the summary",
        )

    def handle(self, *args, **options):
        scoreboard = Scoreboard()

        try:
            for home, away, home_score, away_score in DEMO_FIXTURES:
                match = scoreboard.start_match(home, away)
                scoreboard.update_score(match, home_score, away_score)

            if options["finish"]:
                team = Team(options["finish"])
                match = next(
                    (
                        m
                        for m in scoreboard.get_matches()
                        if team in (m.home_team, m.away_team)
                    ),
                    None,
                )
                if match is None:
                    raise CommandError(f"No match on the scoreboard for team '{team}'")
                scoreboard.finish_match(match)
                self.stdout.write(self.style.WARNING(f"Finished: {match}"))
        except ScoreboardError as e:
            raise CommandError(str(e))

        self.stdout.write(scoreboard.get_summary(), ending="")
