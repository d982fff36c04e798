import pytest

from wordlestats.letters import PositionData, analyze_bigram, analyze_position

WORDS = ["crane", "slate", "crate", "trace", "adieu"]


def test_position_index_recorded():
    assert analyze_position(WORDS, 2).index == 2


@pytest.mark.parametrize("pos", range(5))
def test_position_letters_are_those_of_the_words(pos):
    data = analyze_position(WORDS, pos)
    assert set(data.letters) == {w[pos] for w in WORDS}


@pytest.mark.parametrize("pos", range(5))
def test_position_tallies_start_at_one(pos):
    data = analyze_position(WORDS, pos)
    assert sum(data.letters.values()) == len(WORDS) + len(data.letters)


def test_position_single_word():
    data = analyze_position(["crane"], 0)
    assert data.letters == {"c": 2}


def test_position_out_of_range():
    with pytest.raises(ValueError):
        analyze_position(["crane", "ox"], 3)


def test_position_empty_dictionary():
    assert analyze_position([], 0) == PositionData(letters={}, index=0)


def test_bigram_followers_of_letter():
    bigrams = {"ab": 2, "ac": 3, "ba": 5}
    data = analyze_bigram(bigrams, "a")
    assert data.index == 1
    assert set(data.letters) == {"b", "c"}
    assert data.letters["b"] == 2 * bigrams["ab"]
    assert data.letters["c"] == 2 * bigrams["ac"]


def test_bigram_without_letter_is_empty():
    assert analyze_bigram({"ab": 2, "ba": 1}, None).letters == {}


def test_bigram_unknown_letter_is_empty():
    assert analyze_bigram({"ab": 2}, "z").letters == {}


def test_bigram_empty_key_rejected():
    with pytest.raises(ValueError):
        analyze_bigram({"": 1}, "a")