"""
Team names as they appear on the scoreboard.

A team is identified by its normalized name only, so "  mexico" and
"MEXICO" are the same team.
"""

from dataclasses import dataclass

from worldcup.scoreboard_core.exceptions import InvalidArgument

MINIMUM_NAME_LENGTH = 3


def normalize_team_name(raw_name: str) -> str:
    """
    Normalize a raw team name for display and comparison.

    The name is trimmed, lowercased, and each whitespace-separated word is
    capitalized. Runs of whitespace collapse to a single space.

    Args:
        raw_name: The name as typed by the caller

    Returns:
        The normalized name (possibly empty for whitespace-only input)
    """
    words = raw_name.strip().lower().split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


@dataclass(frozen=True)
class Team:
    """A validated participant in a match. Immutable, compared by name."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgument("Name cannot be empty.")
        name = normalize_team_name(self.name)
        if len(name) < MINIMUM_NAME_LENGTH:
            raise InvalidArgument(
                f"Name must be at least {MINIMUM_NAME_LENGTH} characters long."
            )
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return self.name
