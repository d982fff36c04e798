"""Letter, bigram and vowel/consonant statistics for five-letter word lists, with charts and reports."""

__version__ = "0.1.0"