"""
Errors raised by the scoreboard core.

There are only two kinds: a caller passed something structurally invalid
(InvalidArgument) or asked for an operation the current lifecycle state
does not allow (InvalidState). Both are raised before any state changes.
"""


class ScoreboardError(Exception):
    """Base class for all scoreboard errors."""


class InvalidArgument(ScoreboardError, ValueError):
    """A name, score or match reference is invalid."""


class InvalidState(ScoreboardError, RuntimeError):
    """The match is finished or not on the scoreboard."""
