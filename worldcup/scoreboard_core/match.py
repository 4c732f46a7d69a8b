"""
A single live match between two teams.

The match keeps its own score and whether it is still in progress. It
validates score updates on its own, but whether a match may be updated or
finished at all is decided by the scoreboard that owns it.
"""

from dataclasses import dataclass, field
from datetime import datetime

from worldcup.scoreboard_core.exceptions import InvalidArgument, InvalidState
from worldcup.scoreboard_core.team import Team


def _validate_score(value) -> None:
    # bool is an int subclass but never a score
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Score must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument("Scores cannot be negative")


@dataclass(eq=False)
class Match:
    """A match in progress, starting at 0-0.

    Matches compare by identity: two matches between the same teams are
    still different matches.
    """

    home_team: Team
    away_team: Team
    home_score: int = field(default=0, init=False)
    away_score: int = field(default=0, init=False)
    start_time: datetime = field(default_factory=datetime.now, init=False)
    in_progress: bool = field(default=True, init=False)

    def __post_init__(self):
        if not isinstance(self.home_team, Team) or not isinstance(self.away_team, Team):
            raise InvalidArgument("Teams must not be null")

    def set_score(self, home_score: int, away_score: int) -> None:
        """
        Replace both scores.

        Args:
            home_score: New home team score (must not be negative)
            away_score: New away team score (must not be negative)

        Raises:
            InvalidState: If the match has been finished
            InvalidArgument: If either score is negative or not an integer
        """
        if not self.in_progress:
            raise InvalidState("Cannot update score for a finished match")
        _validate_score(home_score)
        _validate_score(away_score)
        self.home_score = home_score
        self.away_score = away_score

    def finish(self) -> None:
        """Mark the match as finished. Finishing twice is a no-op."""
        self.in_progress = False

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def render(self) -> str:
        """Return "<Home> <home score> - <Away> <away score>"."""
        return (
            f"{self.home_team.name} {self.home_score} - "
            f"{self.away_team.name} {self.away_score}"
        )

    def __str__(self) -> str:
        return self.render()
