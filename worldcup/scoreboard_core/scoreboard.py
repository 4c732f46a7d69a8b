"""
Public API for the World Cup scoreboard.

Example usage:

    scoreboard = Scoreboard()
    match = scoreboard.start_match("Mexico", "Canada")
    scoreboard.update_score(match, 0, 5)
    print(scoreboard.get_summary())
    scoreboard.finish_match(match)
"""

from typing import List

from worldcup.scoreboard_core.match import Match
from worldcup.scoreboard_core.service import ScoreboardService


class Scoreboard:
    """Manages football matches on a single scoreboard."""

    def __init__(self):
        self._service = ScoreboardService()

    def start_match(self, home_team_name: str, away_team_name: str) -> Match:
        """Start a 0-0 match between two teams, given by name."""
        return self._service.start_match(home_team_name, away_team_name)

    def update_score(self, match: Match, home_score: int, away_score: int) -> None:
        """Set the score of an in-progress match."""
        self._service.update_score(match, home_score, away_score)

    def finish_match(self, match: Match) -> None:
        """Finish a match and take it off the scoreboard."""
        self._service.finish_match(match)

    def get_summary(self) -> str:
        """Matches in progress by total score, most recent first on ties."""
        return self._service.get_summary()

    def get_matches(self) -> List[Match]:
        return self._service.get_matches()
