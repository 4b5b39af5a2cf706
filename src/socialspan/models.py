"""Suggestion models for live-typing watchers.

A live-typing watcher receives the partial token under the caret; the
usual next step is narrowing a list of known users or hashtags down to
those starting with it. Mention and Hashtag are the candidate records,
``suggest`` does the narrowing.

Example:
    >>> people = [Mention("bob"), Mention("bobby", display_name="Bobby T"), Mention("al")]
    >>> [m.username for m in suggest(people, "bo")]
    ['bob', 'bobby']

Thread Safety:
Models are frozen (immutable) and safe to share.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar


@dataclass(frozen=True, slots=True)
class Mention:
    """A mentionable account.

    Attributes:
        username: Text after ``@``
        display_name: Human-readable name (optional)
        avatar: Opaque avatar reference: URL, path or resource id (optional)
    """

    username: str
    display_name: str | None = None
    avatar: Any = None

    @property
    def key(self) -> str:
        return self.username

    def __str__(self) -> str:
        return f"@{self.username}"


@dataclass(frozen=True, slots=True)
class Hashtag:
    """A known hashtag with an optional usage count."""

    name: str
    count: int | None = None

    @property
    def key(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"#{self.name}"


T = TypeVar("T", Mention, Hashtag)


def suggest(candidates: Iterable[T], partial: str, *, limit: int | None = None) -> list[T]:
    """Return candidates whose key starts with ``partial`` (case-insensitive).

    Matching display names also count for mentions. Input order is kept.

    Args:
        candidates: Mentions or hashtags
        partial: Token text reported by a live-typing watcher
        limit: Maximum number of results (None = all)
    """
    if limit is not None and limit <= 0:
        return []
    needle = partial.casefold()
    results: list[T] = []
    for candidate in candidates:
        if candidate.key.casefold().startswith(needle) or (
            isinstance(candidate, Mention)
            and candidate.display_name is not None
            and candidate.display_name.casefold().startswith(needle)
        ):
            results.append(candidate)
            if limit is not None and len(results) >= limit:
                break
    return results


__all__ = ["Hashtag", "Mention", "suggest"]
