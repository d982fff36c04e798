"""Letter frequency tallies for a word position or a bigram table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass
class PositionData:
    """Letter occurrence counts together with the position they describe."""

    letters: dict[str, int] = field(default_factory=dict)
    index: int = 0


def analyze_position(dictionary: Iterable[str], position: int) -> PositionData:
    """Tally the letter found at ``position`` in each word.

    A letter's tally starts at one before its first occurrence is added.
    """
    data = PositionData(index=position)
    for word in dictionary:
        if not 0 <= position < len(word):
            raise ValueError(f"Failed to reach position {position} in word {word!r}.")
        letter = word[position]
        data.letters[letter] = data.letters.get(letter, 1) + 1
    return data


def analyze_bigram(bigrams: Mapping[str, int], first_letter: str | None) -> PositionData:
    """Tally the letters that follow ``first_letter`` in the bigram counts.

    A follower's tally starts at the bigram's own count before it is added.
    """
    data = PositionData(index=1)
    for bigram, count in bigrams.items():
        if not bigram:
            raise ValueError("Failed to reach bigram first letter.")
        if first_letter is None or bigram[0] != first_letter:
            continue
        if len(bigram) < 2:
            raise ValueError(f"Failed to reach bigram 2nd letter in {bigram!r}.")
        second = bigram[1]
        data.letters[second] = data.letters.get(second, count) + count
    return data