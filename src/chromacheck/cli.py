"""Command-line interface for chromacheck."""

import json
import logging
import sys

import click

from . import __version__
from .color_utils import Color
from .contrast import Tier, format_lc, format_ratio
from .image_generation import create_png_grid
from .palette import (
    AppState,
    Palette,
    PaletteLimits,
    ReportStatus,
    build_report,
    default_palette,
    set_palette,
    with_filter_toggled,
)
from .simulation import SIMULATION_TYPES

EMPTY_MESSAGE = "No combinations match the active filters."


def _build_palette(raw_colors: tuple[str, ...], limits: PaletteLimits) -> Palette:
    if not raw_colors:
        return default_palette(limits)

    if len(raw_colors) > limits.max_colors:
        raise ValueError(
            f"Too many colors: {len(raw_colors)} given, at most "
            f"{limits.max_colors} allowed"
        )
    if len(raw_colors) < limits.min_colors:
        raise ValueError(
            f"Too few colors: {len(raw_colors)} given, at least "
            f"{limits.min_colors} required"
        )
    return Palette(tuple(Color.from_input(raw) for raw in raw_colors), limits)


def _echo_grid(state: AppState, visible: list) -> None:
    driver = "WCAG 2.1" if state.apca_informational else "APCA"
    click.echo(
        f"{len(visible)} of {len(state.results)} combinations shown "
        f"(filtering by {driver} tier):"
    )
    click.echo()
    for pair in visible:
        result = pair.result
        click.echo(
            f"  {pair.text.display} on {pair.background.display}  "
            f"WCAG {format_ratio(result.wcag_ratio):>8} {result.wcag_tier.value:<8}  "
            f"APCA Lc {format_lc(result.apca_lc):>6} {result.apca_tier.value}"
        )


@click.command()
@click.version_option(version=__version__, prog_name="chromacheck")
@click.argument("colors", nargs=-1)
@click.option(
    "-m",
    "--mode",
    type=click.Choice(["wcag", "apca"], case_sensitive=False),
    default="wcag",
    help=(
        "Which tier drives filtering (default: wcag). "
        "With wcag, APCA scores are informational only."
    ),
)
@click.option(
    "--hide",
    type=click.Choice([tier.value for tier in Tier], case_sensitive=False),
    multiple=True,
    help="Hide combinations in this tier. Can be repeated.",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json", "png"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-c",
    "--columns",
    type=click.IntRange(1, 12),
    default=3,
    help="Number of columns for the PNG layout (default: 3)",
)
@click.option(
    "-o", "--output", type=str, help="Output file path (required for PNG format)"
)
@click.option(
    "--simulate",
    type=click.Choice(SIMULATION_TYPES, case_sensitive=False),
    default="none",
    help="Color vision deficiency to simulate on PNG swatches (default: none)",
)
@click.option(
    "--min-colors",
    type=click.IntRange(2, 9),
    default=2,
    envvar="CHROMACHECK_MIN_COLORS",
    show_envvar=True,
    help="Smallest palette accepted (default: 2)",
)
@click.option(
    "--max-colors",
    type=click.IntRange(2, 9),
    default=9,
    envvar="CHROMACHECK_MAX_COLORS",
    show_envvar=True,
    help="Largest palette accepted (default: 9)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    colors: tuple[str, ...],
    mode: str,
    hide: tuple[str, ...],
    output_format: str,
    columns: int,
    output: str,
    simulate: str,
    min_colors: int,
    max_colors: int,
    verbose: bool,
) -> None:
    """Check WCAG 2.1 and APCA contrast for every pair of palette colors.

    Each color is tried as text on every other color as background, so N
    colors give N * (N - 1) combinations. Colors are #RGB or #RRGGBB hex
    values; the leading '#' is optional. Without colors the default palette
    #0F172A #F8FAFC #3B82F6 is used.

    Examples:

        chromacheck

        chromacheck "#000" "#fff" "#777"

        chromacheck 0f172a f8fafc 3b82f6 --hide Fail --hide "AA Large"

        chromacheck "#0f172a" "#f8fafc" --mode apca -F json

        chromacheck "#ef4444" "#ffffff" -F png -o pairs.png --simulate protanopia
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    try:
        limits = PaletteLimits(min_colors, max_colors)
        palette = _build_palette(colors, limits)

        state = set_palette(
            AppState(palette=palette, apca_informational=mode.lower() == "wcag"),
            palette,
        )
        for label in hide:
            tier = next(t for t in Tier if t.value.lower() == label.lower())
            if state.filters.shows(tier):
                state = with_filter_toggled(state, tier)

        report = build_report(state)
        visible = list(report.visible)

        if report.status is ReportStatus.EMPTY:
            if output_format == "json":
                click.echo(json.dumps([], indent=2))
            else:
                click.echo(EMPTY_MESSAGE)
            return

        if output_format == "json":
            click.echo(json.dumps([pair.as_dict() for pair in visible], indent=2))
        elif output_format == "png":
            if not output:
                click.echo("Error: PNG output requires -o/--output filename", err=True)
                sys.exit(1)

            try:
                create_png_grid(visible, columns, output, simulate=simulate.lower())
            except Exception as e:
                click.echo(f"Error creating PNG: {e}", err=True)
                sys.exit(1)
        else:
            _echo_grid(state, visible)

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
