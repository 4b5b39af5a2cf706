"""SocialView: hashtag, mention and hyperlink styling for one text host.

Wires the colorizer and the live-token tracker to a host widget:

- every configuration change triggers a full colorize pass
- the host's edit notifications drive the tracker, and every completed
  edit triggers a colorize pass over the resulting text
- taps on clickable spans are routed to the listener registered for the
  span's kind at the time of the tap

Usage:
    >>> from socialspan import PatternKind, SocialView, SpannableText
    >>> host = SpannableText("check @bob and #news ")
    >>> view = SocialView(host)
    >>> [m.match.text for m in view.applied]
    ['#news', '@bob']
    >>> view.set_live_typing_watcher(PatternKind.HASHTAG, lambda v, t: print(t))
    >>> for char in "#ab":
    ...     host.insert(len(host.text), char)
    a
    ab

Thread Safety:
Not thread-safe. Use one view per host, from the host's event thread.
Callbacks must not re-enter a colorize pass synchronously; text they
mutate arrives as a separate edit notification.

"""

from __future__ import annotations

from collections.abc import Callable

from socialspan.annotations import Clickable, Color, StyledMatch
from socialspan.colorizer import colorize
from socialspan.config import SocialConfig, get_default_config
from socialspan.kinds import PRIORITY, PatternKind, require_single
from socialspan.protocols import TextHost
from socialspan.tracker import EditContext, LiveTokenTracker
from socialspan.utils.logger import get_logger

logger = get_logger(__name__)

# (view, matched or partial text) -> None
Listener = Callable[["SocialView", str], None]


class SocialView:
    """Pattern styling and live-token notification for a text host.

    Args:
        host: Editable text widget (see ``TextHost``)
        config: Initial configuration; defaults to ``get_default_config()``
        attach: Register for the host's edit notifications and colorize
            immediately (set False to drive the hooks manually)

    Raises:
        InvalidHostStateError: If ``attach`` is true and the host buffer
            cannot carry styles
    """

    def __init__(
        self,
        host: TextHost,
        *,
        config: SocialConfig | None = None,
        attach: bool = True,
    ) -> None:
        self.host = host
        self._config = config if config is not None else get_default_config()
        self._listeners: dict[PatternKind, Listener | None] = dict.fromkeys(PRIORITY)
        self._tracker = LiveTokenTracker(self)
        self._applied: tuple[StyledMatch, ...] = ()
        if attach:
            self.colorize()
            host.add_watcher(self)

    # -- configuration -----------------------------------------------------

    @property
    def config(self) -> SocialConfig:
        return self._config

    @config.setter
    def config(self, config: SocialConfig) -> None:
        self._config = config
        self.colorize()

    def configure(
        self,
        flags: PatternKind | int,
        hashtag_color: Color,
        mention_color: Color,
        hyperlink_color: Color,
    ) -> None:
        """Set enabled kinds and all three colors, then recolorize."""
        self.config = SocialConfig.from_dict(
            {
                "flags": flags,
                "hashtag_color": hashtag_color,
                "mention_color": mention_color,
                "hyperlink_color": hyperlink_color,
                "matchers": self._config.matchers,
            }
        )

    def is_enabled(self, kind: PatternKind) -> bool:
        return self._config.is_enabled(kind)

    def set_enabled(self, kind: PatternKind, enabled: bool) -> None:
        """Enable or disable a kind; recolorizes only on change."""
        if self.is_enabled(kind) == enabled:
            return
        logger.debug("%s %s", "Enabling" if enabled else "Disabling", kind.name.lower())
        self.config = self._config.with_flag(kind, enabled)

    def get_color(self, kind: PatternKind) -> Color:
        return self._config.color_for(kind)

    def set_color(self, kind: PatternKind, color: Color) -> None:
        """Change the color of a kind; recolorizes only on change."""
        if self.get_color(kind) == color:
            return
        self.config = self._config.with_color(kind, color)

    # -- callbacks ---------------------------------------------------------

    def set_click_listener(self, kind: PatternKind, listener: Listener | None) -> None:
        """Register (or clear) the click listener of ``kind``.

        Spans of ``kind`` become clickable or plain accordingly.
        """
        kind = require_single(kind)
        self.host.enable_click_dispatch()
        self._listeners[kind] = listener
        self.colorize()

    def get_click_listener(self, kind: PatternKind) -> Listener | None:
        return self._listeners[require_single(kind)]

    def set_live_typing_watcher(self, kind: PatternKind, watcher: Listener | None) -> None:
        """Register (or clear) the live-typing watcher of HASHTAG or MENTION.

        Raises:
            ValueError: For HYPERLINK, which has no opening delimiter
        """
        self._tracker.set_watcher(kind, watcher)

    def get_live_typing_watcher(self, kind: PatternKind) -> Listener | None:
        return self._tracker.get_watcher(kind)

    # -- colorize ----------------------------------------------------------

    @property
    def applied(self) -> tuple[StyledMatch, ...]:
        """Styled matches of the last successful colorize pass."""
        return self._applied

    def colorize(self) -> tuple[StyledMatch, ...]:
        """Re-scan the host text and replace every annotation.

        Raises:
            InvalidHostStateError: If the host buffer cannot carry styles;
                the previous annotations are left in place
        """
        config = self._config
        self._applied = colorize(
            self.host.text,
            self.host.style_sink(),
            enabled=config.flags,
            colors=config.colors,
            clickable=[kind for kind, listener in self._listeners.items() if listener is not None],
            matchers=config.matchers,
        )
        return self._applied

    def click_at(self, offset: int) -> bool:
        """Dispatch a tap at ``offset`` to the listener of the span under it.

        The listener is looked up now, not when the span was created.

        Returns:
            True if a listener was called
        """
        for item in self._applied:
            annotation = item.annotation
            if isinstance(annotation, Clickable) and offset in item.match:
                listener = self._listeners[annotation.kind]
                if listener is None:
                    return False
                listener(self, item.match.value)
                return True
        return False

    # -- edit notifications ------------------------------------------------

    @property
    def edit_context(self) -> EditContext:
        return self._tracker.context

    def before_change(self, text: str, start: int, deleted: int) -> None:
        self._tracker.before_change(text, start, deleted)

    def after_change(self, text: str, start: int, inserted: int) -> None:
        """Recolorize the resulting text, then update the typing context."""
        self.colorize()
        self._tracker.after_change(text, start, inserted)

    def __repr__(self) -> str:
        return f"SocialView(flags={self._config.flags!r}, spans={len(self._applied)})"


__all__ = ["Listener", "SocialView"]
