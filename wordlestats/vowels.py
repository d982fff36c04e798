"""Vowel and consonant statistics over a word list."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

VOWELS = "aeiou"
WORD_LENGTH = 5
_NO_LETTER = "."


class PairingPattern(Enum):
    """Kind of transition between two neighbouring letters."""

    VOWEL_TO_CONSONANT = "vowel-to-consonant"
    VOWEL_TO_VOWEL = "vowel-to-vowel"
    CONSONANT_TO_CONSONANT = "consonant-to-consonant"
    CONSONANT_TO_VOWEL = "consonant-to-vowel"


@dataclass(frozen=True, order=True)
class LetterPair:
    """A letter and the letter that follows it."""

    letter: str
    follower: str


@dataclass
class IndexedLetterStats:
    """Counts of letter pairs, pairing patterns, vowels and consonants."""

    alphabet: dict[LetterPair, int] = field(default_factory=dict)
    patterns: dict[PairingPattern, int] = field(default_factory=dict)
    vowels: int = 0
    consonants: int = 0
    vowel_percentage: float = 0.0

    def add_pair(self, pair: LetterPair) -> None:
        """Record a pair; a new pair's tally starts at one before it is added."""
        self.alphabet[pair] = self.alphabet.get(pair, 1) + 1

    def add_pattern(self, pattern: PairingPattern) -> None:
        """Record a pattern; a new pattern's tally starts at one before it is added."""
        self.patterns[pattern] = self.patterns.get(pattern, 1) + 1


def _pattern(previous: str, current_is_vowel: bool) -> PairingPattern:
    previous_is_vowel = previous in VOWELS
    if previous_is_vowel:
        return (
            PairingPattern.VOWEL_TO_VOWEL
            if current_is_vowel
            else PairingPattern.VOWEL_TO_CONSONANT
        )
    return (
        PairingPattern.CONSONANT_TO_VOWEL
        if current_is_vowel
        else PairingPattern.CONSONANT_TO_CONSONANT
    )


def _scan(
    dictionary: Iterable[str], track_patterns: bool
) -> tuple[IndexedLetterStats, list[Counter[str]]]:
    stats = IndexedLetterStats()
    positions: list[Counter[str]] = [Counter() for _ in range(WORD_LENGTH)]
    previous = _NO_LETTER

    for word in dictionary:
        if len(word) > WORD_LENGTH:
            raise ValueError(f"word longer than {WORD_LENGTH} letters: {word!r}")
        last = len(word) - 1
        for index, char in enumerate(word):
            tally = positions[index]
            tally[char] = tally.get(char, 1) + 1

            if index < last:
                is_vowel = char in VOWELS
                if is_vowel or char.isalpha():
                    if is_vowel:
                        stats.vowels += 1
                    else:
                        stats.consonants += 1
                    if index > 0 and previous != _NO_LETTER:
                        if track_patterns:
                            stats.add_pattern(_pattern(previous, is_vowel))
                        stats.add_pair(LetterPair(previous, char))
            previous = char

    return stats, positions


def count_pair_pattern(dictionary: Iterable[str]) -> IndexedLetterStats:
    """Count letter pairs and vowel/consonant transitions, printing last-letter rankings."""
    stats, positions = _scan(dictionary, track_patterns=True)

    print("First letter rankings:")
    ranked = sorted(positions[WORD_LENGTH - 1].items(), key=lambda item: (-item[1], item[0]))
    for rank, (letter, count) in enumerate(ranked, start=1):
        print(f"{rank}. {letter} ({count})")

    total = stats.vowels + stats.consonants
    stats.vowel_percentage = stats.vowels / total if total else math.nan
    return stats


def count_vowels(dictionary: Iterable[str]) -> IndexedLetterStats:
    """Count vowels, consonants and letter pairs without pattern or percentage."""
    stats, _ = _scan(dictionary, track_patterns=False)
    return stats