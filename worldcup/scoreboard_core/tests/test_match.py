"""
Tests for a single match: scores, lifecycle and rendering.
"""

import unittest
from datetime import datetime

from worldcup.scoreboard_core.exceptions import InvalidArgument, InvalidState
from worldcup.scoreboard_core.match import Match
from worldcup.scoreboard_core.team import Team


class MatchTests(unittest.TestCase):
    def setUp(self):
        self.home_team = Team("Spain")
        self.away_team = Team("Brazil")
        self.match = Match(self.home_team, self.away_team)

    def test_new_match_starts_at_zero(self):
        self.assertEqual(self.match.home_team, self.home_team)
        self.assertEqual(self.match.away_team, self.away_team)
        self.assertEqual(self.match.home_score, 0)
        self.assertEqual(self.match.away_score, 0)
        self.assertTrue(self.match.in_progress)
        self.assertIsInstance(self.match.start_time, datetime)

    def test_rejects_missing_teams(self):
        with self.assertRaises(InvalidArgument):
            Match(None, self.away_team)
        with self.assertRaises(InvalidArgument):
            Match(self.home_team, None)

    def test_set_score(self):
        self.match.set_score(3, 2)
        self.assertEqual(self.match.home_score, 3)
        self.assertEqual(self.match.away_score, 2)
        self.assertEqual(self.match.total_score, 5)

    def test_total_score_tracks_every_update(self):
        for home, away in [(0, 0), (1, 0), (1, 1), (4, 7), (0, 0)]:
            self.match.set_score(home, away)
            self.assertEqual(self.match.total_score, home + away)

    def test_negative_scores_leave_state_unchanged(self):
        self.match.set_score(2, 1)
        with self.assertRaisesRegex(InvalidArgument, "negative"):
            self.match.set_score(-1, 5)
        with self.assertRaises(InvalidArgument):
            self.match.set_score(5, -1)
        self.assertEqual((self.match.home_score, self.match.away_score), (2, 1))

    def test_non_integer_scores_rejected(self):
        with self.assertRaises(InvalidArgument):
            self.match.set_score(1.5, 0)
        with self.assertRaises(InvalidArgument):
            self.match.set_score(True, 0)
        with self.assertRaises(InvalidArgument):
            self.match.set_score(0, "2")
        self.assertEqual((self.match.home_score, self.match.away_score), (0, 0))

    def test_set_score_after_finish(self):
        self.match.set_score(1, 0)
        self.match.finish()
        with self.assertRaisesRegex(InvalidState, "finished match"):
            self.match.set_score(2, 0)
        self.assertEqual((self.match.home_score, self.match.away_score), (1, 0))

    def test_finish_is_idempotent(self):
        self.match.finish()
        self.match.finish()
        self.assertFalse(self.match.in_progress)

    def test_render(self):
        self.match.set_score(10, 2)
        self.assertEqual(self.match.render(), "Spain 10 - Brazil 2")
        self.assertEqual(str(self.match), "Spain 10 - Brazil 2")

    def test_matches_compare_by_identity(self):
        other = Match(Team("Spain"), Team("Brazil"))
        self.assertNotEqual(self.match, other)
        self.assertEqual(self.match, self.match)


if __name__ == "__main__":
    unittest.main()
