"""
socialspan — Hashtag, mention and hyperlink styling for editable text

Detects ``#hashtags``, ``@mentions`` and hyperlinks in a text buffer,
applies non-overlapping style spans for each enabled kind, and notifies
watchers while the user is typing a hashtag or mention.

Quick Start:
    >>> from socialspan import PatternKind, SocialView, SpannableText
    >>> host = SpannableText("check @bob and #news http://x.io")
    >>> view = SocialView(host)
    >>> [(s.kind.name, s.match.text) for s in view.applied]
    [('HASHTAG', '#news'), ('MENTION', '@bob'), ('HYPERLINK', 'http://x.io')]

    >>> # Clickable spans resolve the listener at click time
    >>> view.set_click_listener(PatternKind.HASHTAG, lambda v, tag: print(tag))
    >>> view.click_at(16)
    news
    True

Bring your own widget by implementing ``TextHost`` and ``StyleSink``
(see ``socialspan.protocols``); ``SpannableText`` is the in-memory host.

Installation:
    pip install socialspan           # Zero runtime dependencies
"""

from socialspan.annotations import Annotation, Clickable, Color, Plain, StyledMatch
from socialspan.buffer import AppliedSpan, SpannableText
from socialspan.colorizer import build_annotations, colorize
from socialspan.config import (
    SocialConfig,
    default_config_context,
    get_default_config,
    reset_default_config,
    set_default_config,
)
from socialspan.errors import (
    ConfigError,
    InvalidHostStateError,
    MatcherContractError,
    SocialSpanError,
)
from socialspan.kinds import PatternKind
from socialspan.matchers import (
    DEFAULT_MATCHERS,
    Match,
    Matcher,
    RegexMatcher,
    TokenMatcher,
)
from socialspan.models import Hashtag, Mention, suggest
from socialspan.protocols import StyleSink, TextHost, TextWatcher
from socialspan.tracker import EditContext, EditState, LiveTokenTracker
from socialspan.view import SocialView

__version__ = "0.1.0"

__all__ = [
    # Core
    "SocialView",
    "SpannableText",
    "AppliedSpan",
    "colorize",
    "build_annotations",
    "LiveTokenTracker",
    "EditContext",
    "EditState",
    # Patterns
    "PatternKind",
    "Match",
    "Matcher",
    "RegexMatcher",
    "TokenMatcher",
    "DEFAULT_MATCHERS",
    # Annotations
    "Annotation",
    "Plain",
    "Clickable",
    "Color",
    "StyledMatch",
    # Protocols
    "StyleSink",
    "TextHost",
    "TextWatcher",
    # Configuration
    "SocialConfig",
    "get_default_config",
    "set_default_config",
    "reset_default_config",
    "default_config_context",
    # Suggestions
    "Mention",
    "Hashtag",
    "suggest",
    # Errors
    "SocialSpanError",
    "InvalidHostStateError",
    "MatcherContractError",
    "ConfigError",
]
