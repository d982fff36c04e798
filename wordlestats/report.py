"""Plain-text reports of ranked letter frequencies."""

from __future__ import annotations

import os

from wordlestats.letters import PositionData


def write_letter_data(
    data: PositionData,
    index: int,
    filename: str | os.PathLike[str],
    title: str | None = None,
) -> None:
    """Write ``data``'s letters to ``filename``, ranked by count, most frequent first.

    The header is ``title`` as given, or a default naming ``index``.
    """
    header = title if title is not None else f"Letter Frequency at Position {index}\n"
    ranked = sorted(data.letters.items(), key=lambda item: item[1], reverse=True)

    with open(filename, "w", encoding="utf-8") as report:
        report.write(header)
        for rank, (letter, count) in enumerate(ranked, start=1):
            report.write(f"{rank}. {letter} ({count})\n")