"""
The scoreboard service: owns the live matches and enforces the rules
that span more than one match.

Matches are kept in the order they were started. That order is the only
source of truth for the ranking tie-break, and finishing a match removes
it from the board.
"""

import logging
from typing import List

from worldcup.scoreboard_core.exceptions import InvalidArgument, InvalidState
from worldcup.scoreboard_core.match import Match
from worldcup.scoreboard_core.ranking import MatchRanking
from worldcup.scoreboard_core.team import Team

logger = logging.getLogger(__name__)

SUMMARY_HEADER = "Matches summary:"


class ScoreboardService:
    """Starts, scores and finishes matches and renders the summary."""

    def __init__(self):
        self._matches: List[Match] = []

    def __len__(self) -> int:
        return len(self._matches)

    def _contains(self, match: Match) -> bool:
        return any(candidate is match for candidate in self._matches)

    def start_match(self, home_team_name: str, away_team_name: str) -> Match:
        """
        Start a new 0-0 match between two different teams.

        Args:
            home_team_name: Raw home team name
            away_team_name: Raw away team name

        Returns:
            The new match, now on the scoreboard

        Raises:
            InvalidArgument: If either name is invalid or both normalize to
                the same team
        """
        home_team = Team(home_team_name)
        away_team = Team(away_team_name)
        if home_team == away_team:
            raise InvalidArgument("Home and away teams cannot be the same")

        match = Match(home_team, away_team)
        self._matches.append(match)
        logger.debug(f"Started match {home_team} - {away_team}")
        return match

    def update_score(self, match: Match, home_score: int, away_score: int) -> None:
        """
        Update the score of a match that is on the scoreboard.

        Raises:
            InvalidArgument: If match is None or a score is invalid
            InvalidState: If the match is not on the scoreboard or finished
        """
        if match is None:
            raise InvalidArgument("Match cannot be null")
        if not self._contains(match) or not match.in_progress:
            raise InvalidState(
                "Match is not in progress or not found on the scoreboard"
            )
        match.set_score(home_score, away_score)

    def finish_match(self, match: Match) -> None:
        """
        Finish a match and remove it from the scoreboard.

        Finishing a match that this scoreboard already finished is a no-op.

        Raises:
            InvalidArgument: If match is None
            InvalidState: If the match was never on the scoreboard
        """
        if match is None:
            raise InvalidArgument("Match cannot be null")

        if not self._contains(match):
            # A finished match no longer reports in_progress
            if match.in_progress:
                raise InvalidState("Match not found on the scoreboard")
            return

        match.finish()
        self._matches = [m for m in self._matches if m is not match]
        logger.debug(f"Finished match {match}")

    def get_summary(self) -> str:
        """
        Render the in-progress matches, best ranked first.

        Returns:
            The header line followed by one numbered line per match, each
            terminated by a newline
        """
        ranking = MatchRanking(self._matches)
        in_progress = [match for match in self._matches if match.in_progress]

        lines = [SUMMARY_HEADER]
        for position, match in enumerate(ranking.rank(in_progress), start=1):
            lines.append(f"{position}. {match.render()}")
        return "\n".join(lines) + "\n"

    def get_matches(self) -> List[Match]:
        """Return a copy of the matches on the scoreboard in start order."""
        return list(self._matches)
