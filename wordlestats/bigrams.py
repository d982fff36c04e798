"""Extraction and counting of two-letter sequences at a fixed word position."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator


def _bigrams_at(start_pos: int, word_list: Iterable[str]) -> Iterator[str]:
    if start_pos < 0:
        raise ValueError(f"start position must not be negative: {start_pos}")
    end = start_pos + 2
    for word in word_list:
        trimmed = word.strip()
        if len(trimmed) >= end:
            yield trimmed[start_pos:end]


def collect_bigrams(start_pos: int, word_list: Iterable[str]) -> list[str]:
    """Return the bigram starting at ``start_pos`` of every word long enough to have one."""
    return list(_bigrams_at(start_pos, word_list))


def count_bigrams(start_pos: int, word_list: Iterable[str]) -> dict[str, int]:
    """Count how often each bigram occurs at ``start_pos`` across the words."""
    return dict(Counter(_bigrams_at(start_pos, word_list)))