"""Image generation utilities for chromacheck."""

import math

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .contrast import format_lc, format_ratio
from .palette import PairResult
from .simulation import simulate_hex


def create_png_grid(
    pairs: list[PairResult],
    columns: int,
    output_file: str,
    card_width: int = 160,
    card_height: int = 90,
    card_margin: int = 10,
    caption_height: int = 36,
    simulate: str = "none",
) -> None:
    """Create a PNG image with one preview card per text/background pair."""
    n_pairs = len(pairs)
    if n_pairs == 0:
        raise ValueError("No pairs provided")

    rows = math.ceil(n_pairs / columns)
    cell_height = card_height + caption_height

    w = (columns * (card_width + card_margin)) + card_margin
    h = (rows * (cell_height + card_margin)) + card_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor("white")
    ax.set_facecolor("white")

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    for i, pair in enumerate(pairs):
        row = i // columns
        col = i % columns

        # Flip y so the first row is at the top
        x = card_margin + col * (card_width + card_margin)
        y = h - card_margin - (row + 1) * (cell_height + card_margin) + caption_height

        background = simulate_hex(pair.background.hex, simulate)
        text = simulate_hex(pair.text.hex, simulate)

        swatch = patches.Rectangle(
            (x, y), card_width, card_height, linewidth=0, facecolor=background
        )
        ax.add_patch(swatch)
        ax.text(
            x + card_width / 2,
            y + card_height / 2,
            "Aa",
            color=text,
            fontsize=18,
            ha="center",
            va="center",
        )

        result = pair.result
        caption = (
            f"{pair.text.display} on {pair.background.display}\n"
            f"WCAG {format_ratio(result.wcag_ratio)} {result.wcag_tier.value}  "
            f"APCA Lc {format_lc(result.apca_lc)} {result.apca_tier.value}"
        )
        ax.text(x, y - 4, caption, color="black", fontsize=6, ha="left", va="top")

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG grid saved to: {output_file}")
