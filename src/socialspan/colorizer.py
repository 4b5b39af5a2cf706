"""Span colorizer: full re-scan and re-apply of pattern annotations.

Every pass discards all previously applied annotations and recomputes the
complete set from the current text and configuration. There is no
incremental diffing: any edit can move match boundaries anywhere.

Pass structure:
1. Validate the sink (before anything is cleared).
2. Run each enabled kind's matcher in priority order and build annotations.
3. Clear the sink and apply the new annotations.

Steps 1-2 can fail without side effects, so a failed pass leaves the
previous rendering untouched.

Thread Safety:
``build_annotations`` is a pure function. ``colorize`` mutates only the
sink it is given.

"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from socialspan.annotations import Color, StyledMatch, annotate
from socialspan.errors import InvalidHostStateError, MatcherContractError
from socialspan.kinds import PRIORITY, PatternKind
from socialspan.matchers import DEFAULT_MATCHERS, Matcher, check_matches
from socialspan.protocols import StyleSink
from socialspan.utils.logger import get_logger

logger = get_logger(__name__)


def build_annotations(
    text: str,
    *,
    enabled: PatternKind,
    colors: Mapping[PatternKind, Color],
    clickable: Collection[PatternKind] = (),
    matchers: Mapping[PatternKind, Matcher] = DEFAULT_MATCHERS,
) -> tuple[StyledMatch, ...]:
    """Compute the styled matches for ``text`` without touching any sink.

    Args:
        text: Full text to scan
        enabled: Bitmask of kinds to style
        colors: Color per kind (only enabled kinds are looked up)
        clickable: Kinds with a registered click listener
        matchers: Matcher per kind

    Returns:
        Styled matches grouped by kind in priority order, each group
        ordered by offset.

    Raises:
        MatcherContractError: If a matcher breaks ordering/non-overlap
            or an enabled kind has no matcher

    Complexity: O(len(text)) per enabled kind
    """
    styled: list[StyledMatch] = []
    for kind in PRIORITY:
        if not enabled & kind:
            continue
        matcher = matchers.get(kind)
        if matcher is None:
            raise MatcherContractError(kind, "no matcher registered")
        matches = check_matches(kind, text, matcher(text))
        annotation = annotate(kind, colors[kind], clickable=kind in clickable)
        styled.extend(StyledMatch(kind, match, annotation) for match in matches)
    return tuple(styled)


def colorize(
    text: str,
    sink: StyleSink | None,
    *,
    enabled: PatternKind,
    colors: Mapping[PatternKind, Color],
    clickable: Collection[PatternKind] = (),
    matchers: Mapping[PatternKind, Matcher] = DEFAULT_MATCHERS,
) -> tuple[StyledMatch, ...]:
    """Replace every annotation on ``sink`` with a fresh scan of ``text``.

    Args:
        text: Full text to scan
        sink: Style storage of the host buffer
        enabled: Bitmask of kinds to style
        colors: Color per kind
        clickable: Kinds with a registered click listener
        matchers: Matcher per kind

    Returns:
        The styled matches that were applied.

    Raises:
        InvalidHostStateError: If ``sink`` is missing or cannot carry styles
        MatcherContractError: If a matcher breaks ordering/non-overlap
    """
    if sink is None or not isinstance(sink, StyleSink):
        raise InvalidHostStateError(
            "Attached text does not support style annotations",
            hint="give the host a spannable text buffer before colorizing",
        )
    if not sink.supports_styles:
        raise InvalidHostStateError(
            "Attached text buffer is not spannable",
            hint="set the host text as spannable before colorizing",
        )

    styled = build_annotations(
        text,
        enabled=enabled,
        colors=colors,
        clickable=clickable,
        matchers=matchers,
    )

    sink.clear()
    for item in styled:
        sink.apply(item.match, item.annotation)

    logger.debug("Colorized %d spans over %d chars", len(styled), len(text))
    return styled


__all__ = ["build_annotations", "colorize"]
