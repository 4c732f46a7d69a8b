"""
Management command to simulate a busy scoreboard.

Starts a number of matches between random countries, gives each a random
score, finishes some of them and prints what is left on the board.
"""

import logging
import random

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from faker import Faker
from faker.exceptions import UniquenessException

from worldcup.scoreboard_core import ScoreboardError, ScoreboardService

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Simulate live matches between random countries and print the summary"

    def add_arguments(self, parser):
        parser.add_argument(
            "--matches",
            type=int,
            default=8,
            help="Number of matches to start (default: 8)",
        )
        parser.add_argument(
            "--finish",
            type=int,
            default=0,
            help="Number of matches to finish before printing (default: 0)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Random seed for reproducible simulations",
        )
        parser.add_argument(
            "--locale",
            type=str,
            default=getattr(settings, "SCOREBOARD_FAKER_LOCALE", "en_US"),
            help="Faker locale for country names (default: SCOREBOARD_FAKER_LOCALE)",
        )

    def handle(self, *args, **options):
        num_matches = options["matches"]
        num_finished = options["finish"]
        max_score = getattr(settings, "SCOREBOARD_MAX_SIMULATED_SCORE", 10)

        if num_matches < 1:
            raise CommandError("--matches must be at least 1")
        if not 0 <= num_finished <= num_matches:
            raise CommandError(f"--finish must be between 0 and {num_matches}")

        fake = Faker(options["locale"])
        rng = random.Random(options["seed"])
        if options["seed"] is not None:
            fake.seed_instance(options["seed"])

        service = ScoreboardService()
        try:
            for _ in range(num_matches):
                home = fake.unique.country()
                away = fake.unique.country()
                match = service.start_match(home, away)
                service.update_score(
                    match, rng.randint(0, max_score), rng.randint(0, max_score)
                )

            for match in rng.sample(service.get_matches(), num_finished):
                service.finish_match(match)
                self.stdout.write(self.style.WARNING(f"Finished: {match}"))
        except UniquenessException:
            raise CommandError(f"Not enough distinct countries for {num_matches} matches")
        except ScoreboardError as e:
            raise CommandError(str(e))

        logger.info(f"Simulated {num_matches} matches, {len(service)} still in progress")
        self.stdout.write(service.get_summary(), ending="")
