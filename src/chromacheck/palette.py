"""Palette state, pair enumeration and result filtering for chromacheck.

A palette is an ordered, immutable tuple of :class:`~chromacheck.color_utils.Color`
values. Every change produces a new palette; an :class:`AppState` bundles the
palette with the filter flags, the mode flag and the cached contrast results
for the current palette.

Only palette changes recompute contrast. Toggling a filter flag or the mode
flag reuses the cached results and only changes which of them are visible.

Example:
    >>> state = initial_state()
    >>> len(state.results)
    6
    >>> report = build_report(with_filter_toggled(state, Tier.FAIL))
    >>> report.status
    <ReportStatus.OK: 'ok'>
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from .color_utils import Color, validate_hex
from .contrast import ContrastResult, Tier, evaluate_pair

__all__ = [
    "AppState",
    "FilterState",
    "PairResult",
    "Palette",
    "PaletteLimitError",
    "PaletteLimits",
    "Report",
    "ReportStatus",
    "add_color",
    "build_report",
    "default_palette",
    "enumerate_pairs",
    "evaluate_palette",
    "initial_state",
    "is_visible",
    "remove_color",
    "set_palette",
    "update_color",
    "with_added_color",
    "with_filter_toggled",
    "with_mode_toggled",
    "with_removed_color",
    "with_updated_color",
]

logger = logging.getLogger(__name__)

DEFAULT_HEXES = ("#0f172a", "#f8fafc", "#3b82f6")
EXTRA_HEXES = ("#10b981", "#f59e0b", "#ef4444", "#8b5cf6")


class PaletteLimitError(ValueError):
    """Raised when a palette would hold more or fewer colors than its limits."""


@dataclass(frozen=True)
class PaletteLimits:
    """How many colors a palette may hold."""

    min_colors: int = 2
    max_colors: int = 9

    def __post_init__(self) -> None:
        if self.min_colors < 2:
            raise ValueError(f"min_colors must be at least 2, got {self.min_colors}")
        if self.max_colors < self.min_colors:
            raise ValueError(
                f"max_colors ({self.max_colors}) must not be below "
                f"min_colors ({self.min_colors})"
            )


@dataclass(frozen=True)
class Palette:
    """Ordered palette colors plus the size limits they must respect."""

    colors: tuple[Color, ...] = ()
    limits: PaletteLimits = field(default_factory=PaletteLimits)

    def __post_init__(self) -> None:
        if len(self.colors) > self.limits.max_colors:
            raise PaletteLimitError(
                f"Palette holds {len(self.colors)} colors, at most "
                f"{self.limits.max_colors} allowed"
            )

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def hexes(self) -> list[str]:
        return [color.hex for color in self.colors]

    def index_of(self, color_id: str) -> int:
        for i, color in enumerate(self.colors):
            if color.id == color_id:
                return i
        raise KeyError(color_id)


def default_palette(limits: PaletteLimits | None = None) -> Palette:
    """Slate, off-white and blue: the palette a new session starts with."""
    colors = tuple(Color(hex_str) for hex_str in DEFAULT_HEXES)
    return Palette(colors, limits or PaletteLimits())


def _next_hex(palette: Palette) -> str:
    current = {hex_str.lower() for hex_str in palette.hexes}
    for candidate in EXTRA_HEXES:
        if candidate not in current:
            return candidate
    return f"#{np.random.randint(0, 0xFFFFFF + 1):06x}"


def add_color(palette: Palette, raw: str | None = None) -> Palette:
    """Append a color, picking the next unused default when raw is None.

    Raises:
        PaletteLimitError: the palette is already full.
        InvalidFormatError: raw is not a hex color.
    """
    if len(palette) >= palette.limits.max_colors:
        raise PaletteLimitError(
            f"Palette already holds the maximum of {palette.limits.max_colors} colors"
        )
    color = Color.from_input(raw if raw is not None else _next_hex(palette))
    logger.debug("Adding color %s (%s)", color.hex, color.id)
    return replace(palette, colors=palette.colors + (color,))


def remove_color(palette: Palette, color_id: str) -> Palette:
    """Drop the color with the given id.

    Raises:
        PaletteLimitError: the palette is already at its minimum size.
        KeyError: no color has that id.
    """
    if len(palette) <= palette.limits.min_colors:
        raise PaletteLimitError(
            f"Palette needs at least {palette.limits.min_colors} colors"
        )
    index = palette.index_of(color_id)
    logger.debug("Removing color %s (%s)", palette.colors[index].hex, color_id)
    return replace(palette, colors=palette.colors[:index] + palette.colors[index + 1:])


def update_color(palette: Palette, color_id: str, raw: str) -> Palette:
    """Replace the value of one color, keeping its id and position.

    An invalid raw value raises InvalidFormatError and the caller keeps the
    palette it already has.
    """
    index = palette.index_of(color_id)
    color = Color.from_input(raw, id=color_id)
    colors = list(palette.colors)
    colors[index] = color
    return replace(palette, colors=tuple(colors))


# Pairing


def enumerate_pairs(colors: Sequence[Color]) -> Iterator[tuple[Color, Color]]:
    """Yield every ordered (text, background) pair of distinct positions.

    Text index is the outer loop and background index the inner loop, both
    ascending. A palette of N colors yields N * (N - 1) pairs.
    """
    for i, text in enumerate(colors):
        for j, background in enumerate(colors):
            if i != j:
                yield text, background


@dataclass(frozen=True)
class PairResult:
    text: Color
    background: Color
    result: ContrastResult

    def as_dict(self) -> dict[str, object]:
        return {
            "text": self.text.display,
            "background": self.background.display,
            **self.result.as_dict(),
        }


def evaluate_palette(colors: Sequence[Color]) -> tuple[PairResult, ...]:
    """Score every ordered pair of the palette with both WCAG and APCA.

    Returns an empty tuple, without scoring anything, when there are fewer
    than two colors or any color is not a valid hex value.
    """
    if len(colors) < 2:
        return ()
    if not all(validate_hex(color.hex) for color in colors):
        return ()

    results = tuple(
        PairResult(text, background, evaluate_pair(text, background))
        for text, background in enumerate_pairs(colors)
    )
    logger.debug("Evaluated %d pairs for %d colors", len(results), len(colors))
    return results


# Filtering


@dataclass(frozen=True)
class FilterState:
    """Which tiers are shown. Every tier is shown unless hidden."""

    hidden: frozenset[Tier] = frozenset()

    def shows(self, tier: Tier) -> bool:
        return tier not in self.hidden

    def toggle(self, tier: Tier) -> "FilterState":
        return FilterState(self.hidden ^ {tier})

    def as_dict(self) -> dict[str, bool]:
        return {tier.value: self.shows(tier) for tier in Tier}


def is_visible(
    result: ContrastResult, filters: FilterState, apca_informational: bool = True
) -> bool:
    """Decide whether a result passes the filters.

    With apca_informational set, WCAG is the normative score and its tier is
    looked up; otherwise the APCA tier is.
    """
    tier = result.wcag_tier if apca_informational else result.apca_tier
    return filters.shows(tier)


# Application state


@dataclass(frozen=True)
class AppState:
    palette: Palette
    filters: FilterState = field(default_factory=FilterState)
    apca_informational: bool = True
    results: tuple[PairResult, ...] = ()


def set_palette(state: AppState, palette: Palette) -> AppState:
    """Swap in a new palette and recompute its contrast results."""
    return replace(state, palette=palette, results=evaluate_palette(palette.colors))


def initial_state(limits: PaletteLimits | None = None) -> AppState:
    palette = default_palette(limits)
    return AppState(palette=palette, results=evaluate_palette(palette.colors))


def with_added_color(state: AppState, raw: str | None = None) -> AppState:
    return set_palette(state, add_color(state.palette, raw))


def with_removed_color(state: AppState, color_id: str) -> AppState:
    return set_palette(state, remove_color(state.palette, color_id))


def with_updated_color(state: AppState, color_id: str, raw: str) -> AppState:
    return set_palette(state, update_color(state.palette, color_id, raw))


def with_filter_toggled(state: AppState, tier: Tier) -> AppState:
    return replace(state, filters=state.filters.toggle(tier))


def with_mode_toggled(state: AppState) -> AppState:
    return replace(state, apca_informational=not state.apca_informational)


class ReportStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    TOO_FEW_COLORS = "too-few-colors"
    INVALID_COLOR = "invalid-color"


@dataclass(frozen=True)
class Report:
    status: ReportStatus
    visible: tuple[PairResult, ...] = ()
    total: int = 0


def build_report(state: AppState) -> Report:
    """Apply the filters to the cached results of state.

    ``EMPTY`` means pairs were scored but the filters hide all of them, which
    is distinct from ``TOO_FEW_COLORS`` where nothing was scored at all.
    """
    colors = state.palette.colors
    if len(colors) < 2:
        return Report(ReportStatus.TOO_FEW_COLORS)
    if not all(validate_hex(color.hex) for color in colors):
        return Report(ReportStatus.INVALID_COLOR)

    visible = tuple(
        pair
        for pair in state.results
        if is_visible(pair.result, state.filters, state.apca_informational)
    )
    if not visible:
        return Report(ReportStatus.EMPTY, total=len(state.results))
    return Report(ReportStatus.OK, visible, len(state.results))
