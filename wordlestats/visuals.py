"""PNG charts of bigram frequencies and vowel/consonant proportions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from matplotlib.figure import Figure

VISUALS_DIR = Path("data-visuals")

_DPI = 100
_BAR_SIZE = (1024, 768)
_PIE_SIZE = (700, 500)
_TITLE_FONT = 28
_LABEL_FONT = 14


def _output_path(filename: str) -> Path:
    path = VISUALS_DIR / f"{filename}.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _figure(size: tuple[int, int]) -> Figure:
    width, height = size
    return Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI, facecolor="white")


def _top_entries(
    frequencies: Mapping[str, int], x_limit: int | None
) -> list[tuple[str, int]]:
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    if x_limit is None:
        return ranked
    # Only a table with more entries than the limit is cut down; any other is dropped.
    return ranked[:x_limit] if len(ranked) > x_limit else []


def draw_bigram_bar(
    frequencies: Mapping[str, int],
    caption: str,
    filename: str,
    x_limit: int | None = None,
) -> Path:
    """Draw the counts as a bar chart, most frequent first, and return the PNG's path.

    With ``x_limit`` the chart holds only that many entries, and the table must
    have more entries than the limit.
    """
    top = _top_entries(frequencies, x_limit)
    if not top:
        raise ValueError("Failed to find max frequency.")
    labels = [label for label, _ in top]
    counts = [count for _, count in top]
    max_frequency = max(counts)

    figure = _figure(_BAR_SIZE)
    axes = figure.subplots()
    axes.bar(range(len(labels)), counts, color="blue", width=0.8)
    axes.set_xticks(range(len(labels)))
    axes.set_xticklabels(labels, fontsize=_LABEL_FONT, color="black")
    axes.tick_params(axis="y", labelsize=_LABEL_FONT, labelcolor="black")
    axes.set_ylim(0, max_frequency + 10)
    axes.set_title(caption, fontsize=_TITLE_FONT)

    path = _output_path(filename)
    figure.savefig(path, dpi=_DPI, facecolor="white")
    return path


def draw_vowel_pie(
    data: Sequence[float],
    colors: Sequence[str],
    title: str,
    filename: str,
    labels: Sequence[str],
) -> Path:
    """Draw a labelled pie chart with percentages and return the PNG's path."""
    if len(colors) != len(data) or len(labels) != len(data):
        raise ValueError(
            f"pie needs one colour and one label per slice: "
            f"{len(data)} slices, {len(colors)} colours, {len(labels)} labels"
        )

    figure = _figure(_PIE_SIZE)
    figure.suptitle(title, fontsize=_TITLE_FONT, color="black")
    axes = figure.subplots()
    _, texts, percentages = axes.pie(
        list(data),
        labels=list(labels),
        colors=list(colors),
        startangle=90,
        counterclock=False,
        autopct="%1.1f%%",
        labeldistance=1.1,
    )
    for text in texts:
        text.set_fontsize(_LABEL_FONT)
        text.set_color("black")
    for text in percentages:
        text.set_fontsize(_LABEL_FONT)
        text.set_color("white")
    axes.set_aspect("equal")

    path = _output_path(filename)
    figure.savefig(path, dpi=_DPI, facecolor="white")
    return path