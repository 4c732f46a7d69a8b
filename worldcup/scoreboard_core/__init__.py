from worldcup.scoreboard_core.exceptions import (
    InvalidArgument,
    InvalidState,
    ScoreboardError,
)
from worldcup.scoreboard_core.match import Match
from worldcup.scoreboard_core.ranking import MatchRanking
from worldcup.scoreboard_core.scoreboard import Scoreboard
from worldcup.scoreboard_core.service import SUMMARY_HEADER, ScoreboardService
from worldcup.scoreboard_core.team import Team, normalize_team_name

__all__ = [
    "InvalidArgument",
    "InvalidState",
    "Match",
    "MatchRanking",
    "Scoreboard",
    "ScoreboardError",
    "ScoreboardService",
    "SUMMARY_HEADER",
    "Team",
    "normalize_team_name",
]
