"""Live-token tracking across text edits.

The tracker follows whether the caret sits inside an unfinished hashtag
or mention and reports the token typed so far to a registered watcher.
It is driven by the two host edit notifications:

``before_change(text, start, deleted)``
    Runs only for deletions (``deleted > 0``) not at the start of the text.
    Classifies the character just before the deleted region.

``after_change(text, start, inserted)``
    Runs only for a non-empty text with ``start < len(text)``.
    Classifies the last affected character ``text[start + inserted - 1]``;
    the letter/digit test and the backward token scan start at ``text[start]``,
    so a paste beginning with a boundary closes the open token.

Classification of a character ``c``:

- ``#`` opens a hashtag, ``@`` opens a mention
- any other non letter/digit closes the open token
- a letter/digit keeps the state; if a token is open and its kind has a
  watcher, the watcher receives the token text after the delimiter up
  to the caret (empty when the caret sits right after a boundary)

Deletion inspects the text as it was *before* the deletion, so deleting
the delimiter of an open token keeps the token open and the watcher sees
the letters preceding the deleted delimiter.

Watcher exceptions propagate to the caller of the hook.

Thread Safety:
Not thread-safe. One tracker per host, driven from the host's event thread.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from socialspan.charsets import is_letter_or_digit, token_start
from socialspan.kinds import DELIMITERS, PatternKind
from socialspan.utils.logger import get_logger

logger = get_logger(__name__)

# (owner, token text) -> None
Callback = Callable[[Any, str], None]


class EditState(Enum):
    """Typing context at the caret."""

    NEUTRAL = auto()
    OPEN_HASHTAG = auto()
    OPEN_MENTION = auto()


_OPEN_STATES: dict[PatternKind, EditState] = {
    PatternKind.HASHTAG: EditState.OPEN_HASHTAG,
    PatternKind.MENTION: EditState.OPEN_MENTION,
}


@dataclass(slots=True)
class EditContext:
    """Typing context attached to a host.

    A single state backs both flags, so a hashtag and a mention can
    never be open at the same time.
    """

    state: EditState = EditState.NEUTRAL

    @property
    def hashtag_editing(self) -> bool:
        return self.state is EditState.OPEN_HASHTAG

    @property
    def mention_editing(self) -> bool:
        return self.state is EditState.OPEN_MENTION

    @property
    def open_kind(self) -> PatternKind | None:
        """Kind of the open token, or None when neutral."""
        if self.state is EditState.OPEN_HASHTAG:
            return PatternKind.HASHTAG
        if self.state is EditState.OPEN_MENTION:
            return PatternKind.MENTION
        return None

    def reset(self) -> None:
        self.state = EditState.NEUTRAL


class LiveTokenTracker:
    """Per-host state machine firing live-typing watchers.

    Args:
        owner: Passed as the first argument to every watcher call
            (normally the SocialView)
    """

    __slots__ = ("owner", "context", "_watchers")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.context = EditContext()
        self._watchers: dict[PatternKind, Callback | None] = {
            PatternKind.HASHTAG: None,
            PatternKind.MENTION: None,
        }

    def set_watcher(self, kind: PatternKind, watcher: Callback | None) -> None:
        """Register (or clear with None) the watcher for a live kind.

        Raises:
            ValueError: If ``kind`` is not HASHTAG or MENTION
        """
        self._check_live(kind)
        self._watchers[kind] = watcher

    def get_watcher(self, kind: PatternKind) -> Callback | None:
        self._check_live(kind)
        return self._watchers[kind]

    def before_change(self, text: str, start: int, deleted: int) -> None:
        """Handle a pending deletion of ``deleted`` chars at ``start``."""
        if deleted <= 0 or start <= 0:
            return
        self._classify(text, start - 1, start - 1, start)

    def after_change(self, text: str, start: int, inserted: int) -> None:
        """Handle ``inserted`` chars now present at ``start``."""
        if not text or start >= len(text):
            return
        caret = start + inserted
        if caret - 1 < 0:
            return
        self._classify(text, caret - 1, start, caret)

    def _classify(self, text: str, index: int, origin: int, caret: int) -> None:
        kind = DELIMITERS.get(text[index])
        if kind is not None:
            self._transition(_OPEN_STATES[kind])
            return
        if not is_letter_or_digit(text[origin]):
            self._transition(EditState.NEUTRAL)
            return

        open_kind = self.context.open_kind
        if open_kind is None:
            return
        watcher = self._watchers[open_kind]
        if watcher is None:
            return
        watcher(self.owner, text[token_start(text, 0, origin) + 1 : caret])

    def _transition(self, state: EditState) -> None:
        if self.context.state is not state:
            logger.debug("Edit context %s -> %s", self.context.state.name, state.name)
            self.context.state = state

    @staticmethod
    def _check_live(kind: PatternKind) -> None:
        if kind not in _OPEN_STATES:
            raise ValueError(f"Live-typing watchers exist only for hashtags and mentions, got {kind!r}")


__all__ = ["Callback", "EditContext", "EditState", "LiveTokenTracker"]
