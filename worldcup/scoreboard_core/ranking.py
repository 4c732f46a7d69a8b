"""
Ordering rule for the scoreboard summary.

Matches are ranked by total score, highest first. Ties are broken by how
recently the match was started: the match added to the scoreboard later
comes first. The insertion position is always read from the scoreboard's
live list of matches, never stored on the match itself.
"""

from functools import cmp_to_key
from typing import Callable, Iterable, List, Sequence, Tuple

from worldcup.scoreboard_core.match import Match


class MatchRanking:
    """Ranks matches relative to the scoreboard's insertion order."""

    def __init__(self, matches: Sequence[Match]):
        """
        Args:
            matches: The scoreboard's matches in the order they were started
        """
        self.matches = matches

    def insertion_index(self, match: Match) -> int:
        """Position of the match in the scoreboard, compared by identity."""
        for index, candidate in enumerate(self.matches):
            if candidate is match:
                return index
        # Unknown matches sort as the oldest
        return -1

    def sort_key(self, match: Match) -> Tuple[int, int]:
        """Key that sorts ascending into summary order."""
        return (-match.total_score, -self.insertion_index(match))

    def compare(self, match1: Match, match2: Match) -> int:
        """
        Compare two matches for summary display.

        Returns:
            A negative number if match1 ranks first, positive if match2 ranks
            first, and zero for the same match
        """
        if match1 is match2:
            return 0
        key1 = self.sort_key(match1)
        key2 = self.sort_key(match2)
        return (key1 > key2) - (key1 < key2)

    def comparator(self) -> Callable[[Match], object]:
        """Key function wrapping compare() for use with sorted()."""
        return cmp_to_key(self.compare)

    def rank(self, matches: Iterable[Match]) -> List[Match]:
        """Return a new list of the given matches in summary order."""
        indexes = {id(match): index for index, match in enumerate(self.matches)}
        return sorted(
            matches,
            key=lambda match: (-match.total_score, -indexes.get(id(match), -1)),
        )
