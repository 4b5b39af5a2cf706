"""In-memory editable text host.

SpannableText is a minimal text widget model: it owns a string and the
style spans applied to it, and notifies registered watchers around every
edit the same way a UI toolkit does (``before_change`` on the old text,
``after_change`` on the new text).

Spans follow edits: spans after an edit shift by its length delta, spans
overlapping the edited range are dropped. A SocialView attached to the
buffer recolorizes right after, so stale spans never outlive an edit.

Example:
    >>> buf = SpannableText("hello")
    >>> buf.insert(5, " #world")
    >>> buf.text
    'hello #world'
    >>> buf.delete(0, 6)
    >>> buf.text
    '#world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from socialspan.annotations import Annotation
    from socialspan.matchers import Match
    from socialspan.protocols import StyleSink, TextWatcher


class AppliedSpan(NamedTuple):
    """An annotation attached to ``[start, end)`` of the buffer."""

    start: int
    end: int
    annotation: Annotation


class SpannableText:
    """Editable text with style spans and edit notifications.

    Implements both ``TextHost`` and ``StyleSink``.

    Args:
        text: Initial content
        spannable: Whether the buffer accepts style spans; a non-spannable
            buffer makes colorize passes fail with InvalidHostStateError
    """

    __slots__ = ("_text", "_spans", "_watchers", "spannable", "click_dispatch_enabled")

    def __init__(self, text: str = "", *, spannable: bool = True) -> None:
        self._text = text
        self._spans: list[AppliedSpan] = []
        self._watchers: list[TextWatcher] = []
        self.spannable = spannable
        self.click_dispatch_enabled = False

    # -- TextHost ----------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def style_sink(self) -> StyleSink | None:
        return self

    def enable_click_dispatch(self) -> None:
        self.click_dispatch_enabled = True

    def add_watcher(self, watcher: TextWatcher) -> None:
        self._watchers.append(watcher)

    def remove_watcher(self, watcher: TextWatcher) -> None:
        self._watchers.remove(watcher)

    # -- StyleSink ---------------------------------------------------------

    @property
    def supports_styles(self) -> bool:
        return self.spannable

    def clear(self) -> None:
        self._spans.clear()

    def apply(self, match: Match, annotation: Annotation) -> None:
        self._spans.append(AppliedSpan(match.start, match.end, annotation))

    @property
    def spans(self) -> tuple[AppliedSpan, ...]:
        return tuple(self._spans)

    def spans_at(self, offset: int) -> list[AppliedSpan]:
        return [span for span in self._spans if span.start <= offset < span.end]

    # -- editing -----------------------------------------------------------

    def replace(self, start: int, end: int, new: str) -> None:
        """Replace ``text[start:end]`` with ``new``, notifying watchers.

        Raises:
            IndexError: If the range is outside the text
        """
        if not 0 <= start <= end <= len(self._text):
            raise IndexError(f"Edit range [{start}, {end}) outside text of length {len(self._text)}")

        old = self._text
        for watcher in list(self._watchers):
            watcher.before_change(old, start, end - start)

        self._text = old[:start] + new + old[end:]
        self._shift_spans(start, end, len(new) - (end - start))

        for watcher in list(self._watchers):
            watcher.after_change(self._text, start, len(new))

    def insert(self, offset: int, new: str) -> None:
        self.replace(offset, offset, new)

    def delete(self, start: int, count: int = 1) -> None:
        self.replace(start, start + count, "")

    def backspace(self, caret: int) -> None:
        """Delete the character before ``caret``."""
        if caret > 0:
            self.delete(caret - 1, 1)

    def set_text(self, text: str) -> None:
        self.replace(0, len(self._text), text)

    def _shift_spans(self, start: int, end: int, delta: int) -> None:
        kept: list[AppliedSpan] = []
        for span in self._spans:
            if span.end <= start:
                kept.append(span)
            elif span.start >= end:
                kept.append(AppliedSpan(span.start + delta, span.end + delta, span.annotation))
        self._spans = kept

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SpannableText({self._text!r}, spans={len(self._spans)})"


__all__ = ["AppliedSpan", "SpannableText"]
