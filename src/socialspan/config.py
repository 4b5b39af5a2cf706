"""Configuration for socialspan views.

SocialConfig holds the enabled kinds, their colors and their matchers.
It is immutable; views keep the current config and replace it on change.

A ContextVar carries the default config used by views created without an
explicit one, so an application (or a test) can set house colors once.

Usage:
    from socialspan.config import SocialConfig, default_config_context

    config = SocialConfig.from_dict({"flags": ["hashtag", "mention"]})
    view = SocialView(host, config=config)

    with default_config_context(SocialConfig(hashtag_color="#ff0000")):
        view = SocialView(host)  # picks up the red hashtag color

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields, replace
from typing import Any

from socialspan.annotations import Color
from socialspan.kinds import PatternKind, parse_flags, require_single
from socialspan.matchers import DEFAULT_MATCHERS, Matcher

_COLOR_FIELDS: dict[PatternKind, str] = {
    PatternKind.HASHTAG: "hashtag_color",
    PatternKind.MENTION: "mention_color",
    PatternKind.HYPERLINK: "hyperlink_color",
}


@dataclass(frozen=True, slots=True)
class SocialConfig:
    """Immutable view configuration.

    Attributes:
        flags: Enabled pattern kinds (all three by default)
        hashtag_color: Color of hashtag spans
        mention_color: Color of mention spans
        hyperlink_color: Color of hyperlink spans
        matchers: Matcher per kind

    """

    flags: PatternKind = PatternKind.ALL
    hashtag_color: Color = "#1da1f2"
    mention_color: Color = "#1da1f2"
    hyperlink_color: Color = "#0645ad"
    matchers: Mapping[PatternKind, Matcher] = field(default_factory=lambda: DEFAULT_MATCHERS, hash=False)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> SocialConfig:
        """Create SocialConfig from a dictionary.

        Unknown keys are ignored. ``flags`` may be an int mask, a
        PatternKind, a kind name or a list of kind names.

        Raises:
            ConfigError: If ``flags`` cannot be interpreted

        Example:
            >>> config = SocialConfig.from_dict({"flags": ["hashtag"], "x": 1})
            >>> config.flags
            <PatternKind.HASHTAG: 1>

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "flags" in filtered:
            filtered["flags"] = parse_flags(filtered["flags"])
        return cls(**filtered)

    def is_enabled(self, kind: PatternKind) -> bool:
        return bool(self.flags & require_single(kind))

    def color_for(self, kind: PatternKind) -> Color:
        return getattr(self, _COLOR_FIELDS[require_single(kind)])

    @property
    def colors(self) -> dict[PatternKind, Color]:
        return {kind: getattr(self, name) for kind, name in _COLOR_FIELDS.items()}

    def with_flag(self, kind: PatternKind, enabled: bool) -> SocialConfig:
        kind = require_single(kind)
        flags = self.flags | kind if enabled else self.flags & ~kind
        return replace(self, flags=flags)

    def with_color(self, kind: PatternKind, color: Color) -> SocialConfig:
        return replace(self, **{_COLOR_FIELDS[require_single(kind)]: color})


_DEFAULT_CONFIG: SocialConfig = SocialConfig()

_default_config: ContextVar[SocialConfig] = ContextVar(
    "social_config",
    default=_DEFAULT_CONFIG,
)


def get_default_config() -> SocialConfig:
    """Get the config new views start from in this context."""
    return _default_config.get()


def set_default_config(config: SocialConfig) -> None:
    _default_config.set(config)


def reset_default_config() -> None:
    _default_config.set(_DEFAULT_CONFIG)


@contextmanager
def default_config_context(config: SocialConfig) -> Iterator[None]:
    """Context manager for a temporary default config.

    Restores the previous default even if an exception is raised.
    """
    previous = _default_config.get()
    _default_config.set(config)
    try:
        yield
    finally:
        _default_config.set(previous)


__all__ = [
    "SocialConfig",
    "default_config_context",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
]
