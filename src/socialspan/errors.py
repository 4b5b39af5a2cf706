"""Exception classes for socialspan.

Provides standardized exceptions for error handling throughout socialspan.

Callback faults are not represented here: exceptions raised by user
click listeners or live-typing watchers propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from socialspan.kinds import PatternKind


class SocialSpanError(Exception):
    """Base exception for all socialspan errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidHostStateError(SocialSpanError):
    """Host text buffer cannot carry style annotations.

    Raised by a colorize pass before any annotation is cleared or applied,
    so the previously rendered spans stay intact.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize host state error.

        Args:
            message: Description of the host problem
            hint: How to configure the host correctly (optional)
        """
        self.message = message
        self.hint = hint
        if hint:
            super().__init__(f"{message} ({hint})")
        else:
            super().__init__(message)


class MatcherContractError(SocialSpanError):
    """A pattern matcher returned unordered, overlapping or out-of-range matches."""

    def __init__(self, kind: PatternKind, message: str) -> None:
        """Initialize matcher contract error.

        Args:
            kind: Pattern kind whose matcher misbehaved
            message: Description of the contract violation
        """
        self.kind = kind
        super().__init__(f"Matcher for {kind.name.lower()}: {message}")


class ConfigError(SocialSpanError):
    """Invalid configuration value.

    Raised when flags or kind names cannot be interpreted.
    """

    pass
