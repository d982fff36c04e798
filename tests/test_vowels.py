import math

import pytest

from wordlestats.vowels import (
    IndexedLetterStats,
    LetterPair,
    PairingPattern,
    count_pair_pattern,
    count_vowels,
)

WORDS = ["crane", "slate", "adieu", "tryst", "ouija"]


def test_letter_pair_ordering_and_hashing():
    assert LetterPair("a", "b") < LetterPair("a", "c") < LetterPair("b", "a")
    assert {LetterPair("x", "y"), LetterPair("x", "y")} == {LetterPair("x", "y")}


def test_add_pair_starts_at_one():
    stats = IndexedLetterStats()
    pair = LetterPair("c", "r")
    stats.add_pair(pair)
    first = stats.alphabet[pair]
    stats.add_pair(pair)
    assert first == 2
    assert stats.alphabet[pair] == first + 1


def test_add_pattern_starts_at_one():
    stats = IndexedLetterStats()
    stats.add_pattern(PairingPattern.VOWEL_TO_VOWEL)
    stats.add_pattern(PairingPattern.VOWEL_TO_VOWEL)
    assert stats.patterns == {PairingPattern.VOWEL_TO_VOWEL: 3}


def test_pair_pattern_counts_all_but_last_letter():
    stats = count_pair_pattern(WORDS)
    assert stats.vowels + stats.consonants == sum(len(w) - 1 for w in WORDS)


def test_pair_pattern_vowel_percentage():
    stats = count_pair_pattern(WORDS)
    assert stats.vowel_percentage == pytest.approx(
        stats.vowels / (stats.vowels + stats.consonants)
    )


def test_pair_pattern_single_transition():
    stats = count_pair_pattern(["abc"])
    assert stats.patterns == {PairingPattern.VOWEL_TO_CONSONANT: 2}
    assert stats.alphabet == {LetterPair("a", "b"): 2}


def test_pair_pattern_prints_rankings(capsys):
    count_pair_pattern(["crane", "slate"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "First letter rankings:"
    assert lines[1] == "1. e (3)"


def test_pair_pattern_empty_dictionary_gives_nan():
    stats = count_pair_pattern([])
    assert (stats.vowels, stats.consonants) == (0, 0)
    assert stats.patterns == {}
    percentage = stats.vowel_percentage
    assert math.isnan(percentage) is True


def test_too_long_word_rejected():
    with pytest.raises(ValueError):
        count_pair_pattern(["abcdef"])
    with pytest.raises(ValueError):
        count_vowels(["abcdef"])


def test_count_vowels_agrees_with_pair_pattern():
    full = count_pair_pattern(WORDS)
    plain = count_vowels(WORDS)
    assert (plain.vowels, plain.consonants) == (full.vowels, full.consonants)
    assert plain.alphabet == full.alphabet
    assert plain.patterns == {}
    assert plain.vowel_percentage == 0.0


def test_non_letters_are_ignored():
    stats = count_vowels(["a1b", "a.b"])
    assert stats.vowels + stats.consonants == 2
    assert stats.alphabet == {}