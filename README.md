# wordlestats

Statistics for a list of five-letter words, such as a Wordle dictionary.
wordlestats looks at each letter position, at the two-letter sequences
(bigrams) that start at each position, and at how vowels and consonants
follow one another. It writes the results as PNG charts and plain-text
rankings.

## Installation

```
pip install .
```

This installs `matplotlib`, which is used to draw the charts.

## Running the analysis

Put the word list in a file, one five-letter word per line, and run:

```
wordlestats words.txt
```

The file argument is optional and defaults to `words.txt` in the current
directory. The output directories are created as needed below the current
directory. The command writes:

- `data-visuals/letter-change-pie.png`: how often one letter leads to the
  next, split into vowel to vowel, vowel to consonant, consonant to consonant
  and consonant to vowel.
- `data-visuals/bigram-freq-<n>.png`: the 20 most common bigrams that start
  at position `n` (0 to 3).
- `data-visuals/vowel-percent-<n>.png`: the share of vowels and consonants
  among the bigrams at position `n`.
- `data-visuals/letter-followers/<letter>-followers.png`: which letters
  follow each letter of the alphabet.
- `data-visuals/second-letter-bar.png`: how often each letter is the second
  letter of a bigram, across all bigrams.
- `data-reports/letter-freqency-pos-<n>`: a ranked list of the letters at
  position `n` (0 to 4).
- `data-reports/letter-followers/<letter>-followers`: a ranked list of the
  letters that follow each letter.

While it runs, the command prints a ranking of the letters found in the last
position of the words (under the heading `First letter rankings:`), and a
line for each follower chart it writes.

Every word must reach position 4, and no word may be longer than five
letters; otherwise the command stops with a `ValueError`. The bigram chart for
a position is drawn only when the list has more than 20 distinct bigrams at
that position; with fewer, the command also stops with a `ValueError`.

## Using the library

The modules can also be used on their own:

```python
from wordlestats.bigrams import collect_bigrams, count_bigrams
from wordlestats.letters import analyze_position, analyze_bigram
from wordlestats.vowels import count_pair_pattern, count_vowels
from wordlestats.report import write_letter_data

words = ["crane", "slate", "trace"]

starts = collect_bigrams(0, words)      # ["cr", "sl", "tr"]
counts = count_bigrams(0, words)        # {"cr": 1, "sl": 1, "tr": 1}
first = analyze_position(words, 0)      # PositionData of letters at position 0
after_r = analyze_bigram(counts, "r")   # letters that follow 'r'
stats = count_pair_pattern(words)       # vowel/consonant transitions
plain = count_vowels(words)             # vowel, consonant and pair counts

write_letter_data(first, 0, "first-letters.txt", None)
```

Some points about the counts:

- `analyze_position`, `IndexedLetterStats.add_pair`,
  `IndexedLetterStats.add_pattern` and the per-position tallies start a new
  entry at one before adding the first occurrence, so each count is one higher
  than the number of occurrences. `analyze_bigram` likewise starts a follower
  at the bigram's own count before adding it.
- The vowel scan skips the last letter of each word and only counts pairs
  from the second letter on.
- `count_pair_pattern` fills `patterns` (keyed by `PairingPattern`) and
  `vowel_percentage`; `count_vowels` leaves both empty.
- `write_letter_data` writes the title as given, or
  `Letter Frequency at Position <index>` when the title is `None`, followed by
  lines of the form `1. e (42)`, most frequent first.

`wordlestats.visuals` has `draw_bigram_bar` and `draw_vowel_pie`, which draw
charts from your own counts into `data-visuals/<filename>.png` and return the
path of the file. `draw_bigram_bar` with an `x_limit` keeps only that many
entries and needs a table with more entries than the limit.

## Running the tests

```
pip install .[test]
pytest
```