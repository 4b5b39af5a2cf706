"""Pattern matchers for hashtags, mentions and hyperlinks.

A matcher is any callable ``(text) -> Sequence[Match]`` returning matches
ordered by start offset and never overlapping each other. Matchers are
pluggable per kind; the defaults are:

- hashtag: ``#`` followed by letters/digits, not preceded by a letter/digit
- mention: ``@`` followed by letters/digits, not preceded by a letter/digit
  (so ``user@example.com`` is not a mention)
- hyperlink: ``http://``, ``https://``, ``ftp://`` or ``www.`` followed by
  non-space characters, trailing sentence punctuation excluded

``Match.value`` is the payload for click listeners: hashtags and mentions
drop their delimiter (``"#foo"`` -> ``"foo"``), hyperlinks keep the full URL.

Thread Safety:
Matchers are stateless (compiled patterns only) and safe to share.

"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from socialspan.charsets import is_letter_or_digit
from socialspan.errors import MatcherContractError
from socialspan.kinds import PatternKind


@dataclass(frozen=True, slots=True)
class Match:
    """A half-open text range ``[start, end)`` matched by a pattern kind.

    Attributes:
        start: Offset of the first matched character
        end: Offset one past the last matched character
        text: The matched substring (``text == source[start:end]``)
        value: Payload passed to click listeners
    """

    start: int
    end: int
    text: str
    value: str

    def overlaps(self, other: Match) -> bool:
        return self.start < other.end and other.start < self.end

    def __contains__(self, offset: int) -> bool:
        return self.start <= offset < self.end


class Matcher(Protocol):
    """Protocol for per-kind pattern matchers.

    Contract:
        - MUST return matches ordered by ``start``
        - MUST NOT return overlapping matches
        - MUST NOT mutate or retain ``text``
    """

    def __call__(self, text: str) -> Sequence[Match]: ...


class TokenMatcher:
    """Scanner for delimiter-prefixed tokens (``#tag``, ``@name``).

    Uses the same letter/digit classification as the live-token tracker,
    so a styled token always agrees with what the tracker reports.
    """

    __slots__ = ("delimiter",)

    def __init__(self, delimiter: str) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be one character, got {delimiter!r}")
        self.delimiter = delimiter

    def __call__(self, text: str) -> Sequence[Match]:
        matches: list[Match] = []
        delimiter = self.delimiter
        n = len(text)
        pos = text.find(delimiter)
        while pos != -1:
            end = pos + 1
            while end < n and is_letter_or_digit(text[end]):
                end += 1
            if end > pos + 1 and (pos == 0 or not is_letter_or_digit(text[pos - 1])):
                matches.append(Match(pos, end, text[pos:end], text[pos + 1 : end]))
            pos = text.find(delimiter, max(end, pos + 1))
        return matches

    def __repr__(self) -> str:
        return f"TokenMatcher({self.delimiter!r})"


class RegexMatcher:
    """Matcher backed by a compiled regular expression.

    ``re.finditer`` already yields ordered, non-overlapping matches.
    Empty matches are skipped.

    Args:
        pattern: Pattern string or compiled pattern
        value_group: Group used as ``Match.value`` (0 = whole match)
    """

    __slots__ = ("pattern", "value_group")

    def __init__(self, pattern: str | re.Pattern[str], value_group: int | str = 0) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.value_group = value_group

    def __call__(self, text: str) -> Sequence[Match]:
        return [
            Match(m.start(), m.end(), m.group(0), m.group(self.value_group) or "")
            for m in self.pattern.finditer(text)
            if m.end() > m.start()
        ]

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


# Scheme or www. prefix, body without whitespace, last char not sentence punctuation
HYPERLINK_PATTERN: re.Pattern[str] = re.compile(
    r"(?:(?:https?|ftp)://|www\.)[^\s<>\"]*[^\s<>\".,;:!?'\)\]]",
    re.IGNORECASE,
)

match_hashtags: Matcher = TokenMatcher("#")
match_mentions: Matcher = TokenMatcher("@")
match_hyperlinks: Matcher = RegexMatcher(HYPERLINK_PATTERN)

DEFAULT_MATCHERS: Mapping[PatternKind, Matcher] = {
    PatternKind.HASHTAG: match_hashtags,
    PatternKind.MENTION: match_mentions,
    PatternKind.HYPERLINK: match_hyperlinks,
}


def check_matches(kind: PatternKind, text: str, matches: Sequence[Match]) -> Sequence[Match]:
    """Verify a matcher's output honors the ordering and non-overlap contract.

    Returns:
        ``matches`` unchanged

    Raises:
        MatcherContractError: On out-of-range, unordered or overlapping matches

    Complexity: O(len(matches))
    """
    previous_end = 0
    for match in matches:
        if not 0 <= match.start < match.end <= len(text):
            raise MatcherContractError(
                kind, f"range [{match.start}, {match.end}) outside text of length {len(text)}"
            )
        if match.start < previous_end:
            raise MatcherContractError(
                kind, f"match at {match.start} overlaps or precedes previous match ending at {previous_end}"
            )
        previous_end = match.end
    return matches


__all__ = [
    "DEFAULT_MATCHERS",
    "HYPERLINK_PATTERN",
    "Match",
    "Matcher",
    "RegexMatcher",
    "TokenMatcher",
    "check_matches",
    "match_hashtags",
    "match_mentions",
    "match_hyperlinks",
]
