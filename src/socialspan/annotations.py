"""Style annotations attached to matched spans.

An annotation is either a plain foreground color or a clickable variant.
Clickable annotations carry only the kind of the match, never the listener
itself: the owning view resolves the kind to whatever listener is registered
at click time, so swapping listeners never requires a recolorize.

Thread Safety:
All annotations are frozen (immutable) and safe to share.

"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, TypeAlias

from socialspan.kinds import PatternKind

if TYPE_CHECKING:
    from socialspan.matchers import Match

# Opaque color value; resolution to pixels belongs to the host
Color: TypeAlias = Hashable


@dataclass(frozen=True, slots=True)
class Plain:
    """Foreground color, optionally underlined."""

    color: Color
    underline: bool = False

    @property
    def clickable(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Clickable:
    """Foreground color plus click dispatch for ``kind``."""

    color: Color
    underline: bool
    kind: PatternKind

    @property
    def clickable(self) -> bool:
        return True


Annotation: TypeAlias = Plain | Clickable


class StyledMatch(NamedTuple):
    """A match paired with the annotation produced for it."""

    kind: PatternKind
    match: Match
    annotation: Annotation


def annotate(kind: PatternKind, color: Color, *, clickable: bool) -> Annotation:
    """Build the annotation for a match of ``kind``.

    Only hyperlinks are underlined, clickable or not.
    """
    underline = kind is PatternKind.HYPERLINK
    if clickable:
        return Clickable(color, underline, kind)
    return Plain(color, underline)


__all__ = ["Annotation", "Clickable", "Color", "Plain", "StyledMatch", "annotate"]
