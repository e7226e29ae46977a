"""Error action enum for handling unreadable directories during traversal."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a directory below the root cannot be listed.

    Values:
        IGNORE: Record the failure on the result, skip that subtree and continue (default)
        RAISE: Raise a TraversalError for the first directory that cannot be listed
    """

    IGNORE = "ignore"
    RAISE = "raise"
