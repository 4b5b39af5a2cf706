"""Pattern kinds recognized by socialspan.

PatternKind is a Flag enum so a set of enabled kinds is a plain bitmask
(HASHTAG=1, MENTION=2, HYPERLINK=4), matching the ``flags`` value hosts
typically store in their style attributes.

Thread Safety:
PatternKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Flag

from socialspan.errors import ConfigError


class PatternKind(Flag):
    """Lexical pattern kinds.

    Iteration order of ``PRIORITY`` is the order a colorize pass visits
    kinds in.
    """

    HASHTAG = 1
    MENTION = 2
    HYPERLINK = 4

    ALL = HASHTAG | MENTION | HYPERLINK


# Fixed colorize order
PRIORITY: tuple[PatternKind, ...] = (
    PatternKind.HASHTAG,
    PatternKind.MENTION,
    PatternKind.HYPERLINK,
)

# Kinds that have an opening delimiter and can be live-typed
LIVE_KINDS: frozenset[PatternKind] = frozenset({PatternKind.HASHTAG, PatternKind.MENTION})

# Opening delimiter for each live kind
DELIMITERS: dict[str, PatternKind] = {
    "#": PatternKind.HASHTAG,
    "@": PatternKind.MENTION,
}


def require_single(kind: PatternKind) -> PatternKind:
    """Reject composite flag values where one kind is expected.

    Raises:
        ValueError: If ``kind`` is not exactly one of PRIORITY
    """
    if kind not in PRIORITY:
        raise ValueError(f"Expected a single pattern kind, got {kind!r}")
    return kind


def parse_flags(value: PatternKind | int | str | Iterable[str]) -> PatternKind:
    """Interpret a flags value from configuration.

    Accepts a PatternKind, an integer mask, a single kind name, or an
    iterable of kind names (case-insensitive, e.g. ``["hashtag", "mention"]``).

    Raises:
        ConfigError: For unknown names or masks outside HASHTAG|MENTION|HYPERLINK
    """
    if isinstance(value, PatternKind):
        return value
    if isinstance(value, bool):
        raise ConfigError(f"Invalid flags value: {value!r}")
    if isinstance(value, int):
        if value < 0 or value & ~PatternKind.ALL.value:
            raise ConfigError(f"Invalid flags mask: {value!r}")
        return PatternKind(value)
    if isinstance(value, str):
        value = [value]

    flags = PatternKind(0)
    for name in value:
        try:
            flags |= PatternKind[str(name).strip().upper()]
        except KeyError:
            raise ConfigError(f"Unknown pattern kind: {name!r}") from None
    return flags


__all__ = [
    "DELIMITERS",
    "LIVE_KINDS",
    "PRIORITY",
    "PatternKind",
    "parse_flags",
    "require_single",
]
