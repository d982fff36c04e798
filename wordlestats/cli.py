"""Command that analyses a word list and writes charts and text reports."""

from __future__ import annotations

import argparse
import os
import string
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from wordlestats.bigrams import count_bigrams
from wordlestats.letters import analyze_bigram, analyze_position
from wordlestats.report import write_letter_data
from wordlestats.visuals import draw_bigram_bar, draw_vowel_pie
from wordlestats.vowels import PairingPattern, count_pair_pattern, count_vowels

REPORTS_DIR = Path("data-reports")

BLUE = "#0000FF"
ORANGE = "#FF9800"
GREEN = "#00FF00"
PURPLE = "#9C27B0"

_PATTERN_ORDER = (
    PairingPattern.VOWEL_TO_VOWEL,
    PairingPattern.VOWEL_TO_CONSONANT,
    PairingPattern.CONSONANT_TO_CONSONANT,
    PairingPattern.CONSONANT_TO_VOWEL,
)
_PATTERN_LABELS = [
    "Vowel to Vowel",
    "Vowel to Consonant",
    "Consonant to Consonant",
    "Consonant to Vowel",
]
_BIGRAM_POSITIONS = range(4)
_LAST_POSITION = 4


@dataclass
class WordleDictionary:
    """The words of a word list, one per line."""

    all_words: list[str] = field(default_factory=list)

    @classmethod
    def from_file(cls, file_path: str | os.PathLike[str]) -> WordleDictionary:
        """Read a word list with one word on each line."""
        content = Path(file_path).read_text(encoding="utf-8")
        return cls([line.rstrip("\r") for line in content.split("\n")][: _line_count(content)])


def _line_count(content: str) -> int:
    # A trailing newline does not start another line.
    lines = content.split("\n")
    return len(lines) - 1 if lines[-1] == "" else len(lines)


def _draw_pairing_pie(words: list[str]) -> None:
    patterns = count_pair_pattern(words).patterns
    counts = [patterns.get(pattern, 0) for pattern in _PATTERN_ORDER]
    total = sum(counts)
    if total == 0:
        raise ValueError("word list has no letter pairs to chart")
    draw_vowel_pie(
        [count / total for count in counts],
        [BLUE, ORANGE, GREEN, PURPLE],
        "Linear Letter to Vowel/Consonant Change",
        "letter-change-pie",
        _PATTERN_LABELS,
    )


def _analyse_position(words: list[str], n: int, all_bigrams: dict[str, int]) -> None:
    bigram_freq = count_bigrams(n, words)
    all_bigrams.update(bigram_freq)

    draw_bigram_bar(bigram_freq, f"Bigram Frequency at Position {n}", f"bigram-freq-{n}", 20)

    vowel_stats = count_vowels(list(bigram_freq))
    vowel_percent = vowel_stats.vowel_percentage * 100.0
    draw_vowel_pie(
        [vowel_percent, 100.0 - vowel_percent],
        [BLUE, ORANGE],
        f"Vowel and Consonant Ratio at Position {n}",
        f"vowel-percent-{n}",
        ["Vowels", "Consonants"],
    )

    write_letter_data(
        analyze_position(words, n), n, REPORTS_DIR / f"letter-freqency-pos-{n}"
    )
    if n == _BIGRAM_POSITIONS[-1]:
        write_letter_data(
            analyze_position(words, _LAST_POSITION),
            n,
            REPORTS_DIR / f"letter-freqency-pos-{_LAST_POSITION}",
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Analyse a word list and write its charts and reports below the working directory."""
    parser = argparse.ArgumentParser(
        prog="wordlestats",
        description="Chart letter, bigram and vowel statistics of a five-letter word list.",
    )
    parser.add_argument(
        "words", nargs="?", default="words.txt", help="word list, one word per line"
    )
    args = parser.parse_args(argv)

    words = WordleDictionary.from_file(args.words).all_words
    (REPORTS_DIR / "letter-followers").mkdir(parents=True, exist_ok=True)

    _draw_pairing_pie(words)

    all_bigrams: dict[str, int] = {}
    for n in _BIGRAM_POSITIONS:
        _analyse_position(words, n, all_bigrams)

    for char in string.ascii_lowercase:
        write_letter_data(
            analyze_bigram(all_bigrams, char),
            _BIGRAM_POSITIONS[-1],
            REPORTS_DIR / "letter-followers" / f"{char}-followers",
            f"Occurences of Letter following '{char}'\n",
        )

    alphabet_hash: dict[str, int] = {}
    for char in string.ascii_lowercase:
        followers: dict[str, int] = {}
        for letter, count in analyze_bigram(all_bigrams, char).letters.items():
            followers[letter] = followers.get(letter, count) + count
            alphabet_hash[letter] = alphabet_hash.get(letter, count) + count

        file_name = f"letter-followers/{char}-followers"
        draw_bigram_bar(followers, f"Occurences of Letter following '{char}'", file_name, None)
        print(f"{file_name} added.")

    draw_bigram_bar(
        alphabet_hash,
        "Occurence's of Second Letter in All Bigrams",
        "second-letter-bar",
        None,
    )
    return 0