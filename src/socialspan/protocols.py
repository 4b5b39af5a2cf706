"""Protocols for socialspan.

Defines the contracts between the core and the host text widget:
the style sink a colorize pass writes to, the host that owns the text,
and the edit notifications the host emits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from socialspan.annotations import Annotation
    from socialspan.matchers import Match


@runtime_checkable
class StyleSink(Protocol):
    """Mutable style-span storage attached to a live text buffer.

    A colorize pass calls ``clear()`` once and then ``apply()`` once per
    styled match. It never reads back from the sink.

    Contract:
        - ``supports_styles`` MUST be False when the buffer cannot carry spans;
          the core then refuses to touch it
        - ``clear()`` removes every annotation previously applied by the core
        - ``apply()`` MUST NOT modify the text content
    """

    @property
    def supports_styles(self) -> bool:
        """Whether annotations can be attached right now."""
        ...

    def clear(self) -> None:
        """Remove all previously applied annotations."""
        ...

    def apply(self, match: Match, annotation: Annotation) -> None:
        """Attach ``annotation`` to ``[match.start, match.end)``."""
        ...


@runtime_checkable
class TextWatcher(Protocol):
    """Receiver of host edit notifications.

    ``before_change`` sees the text before ``deleted`` characters at
    ``start`` are replaced; ``after_change`` sees the resulting text with
    ``inserted`` new characters at ``start``.
    """

    def before_change(self, text: str, start: int, deleted: int) -> None: ...

    def after_change(self, text: str, start: int, inserted: int) -> None: ...


@runtime_checkable
class TextHost(Protocol):
    """The editable text widget a SocialView is attached to.

    Thread Safety:
        Hosts are single-threaded; every call happens on the host's
        event-processing thread.
    """

    @property
    def text(self) -> str:
        """Current text content."""
        ...

    def style_sink(self) -> StyleSink | None:
        """Sink for annotations, or None if the buffer has no span support."""
        ...

    def enable_click_dispatch(self) -> None:
        """Route taps on clickable spans to the core (idempotent)."""
        ...

    def add_watcher(self, watcher: TextWatcher) -> None:
        """Register for edit notifications."""
        ...
