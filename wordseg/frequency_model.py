"""Unigram frequency model used to score candidate words.

This module defines the `FrequencyModel`, a word -> corpus count mapping that
also tracks the corpus size and the length of the longest known word. The
segmentation engine only ever talks to it through `log_probability`, which
returns a log10 probability for any string, known or not.
"""
from __future__ import annotations
import math
from typing import Dict, Iterator, Mapping, Optional

__all__ = ["DEFAULT_CORPUS_SIZE", "FrequencyModel", "load_corpus_size"]

# Number of tokens in the Google Books Ngram corpus the default English
# frequency dictionary was derived from.
DEFAULT_CORPUS_SIZE = 1024908267229

def load_corpus_size() -> int:
    """Returns the default corpus size used when none is configured."""
    return DEFAULT_CORPUS_SIZE

class FrequencyModel:
    """
    A mapping of words to their observed corpus counts.

    The model is built incrementally with `upsert` (re-inserting a word
    overwrites its count) and is then treated as read-only while segmenting.
    Calling `freeze` makes that lifecycle explicit: any later mutation raises
    a `RuntimeError`, so a frozen model can be shared across threads.

    Attributes:
        corpus_size: Total token count `N` of the corpus the counts come from.
        frozen: True once `freeze` has been called.
    """
    def __init__(self, corpus_size: int = DEFAULT_CORPUS_SIZE):
        if int(corpus_size) <= 0:
            raise ValueError(f"corpus_size must be positive, got {corpus_size}")
        self.corpus_size = int(corpus_size)
        self._entries: Dict[str, int] = {}
        self._max_word_length = 0
        self._log_corpus_size = math.log10(self.corpus_size)
        self.frozen = False

    @classmethod
    def from_counts(cls, counts: Mapping[str, int], corpus_size: int = DEFAULT_CORPUS_SIZE) -> "FrequencyModel":
        model = cls(corpus_size)
        for word, count in counts.items():
            model.upsert(word, count)
        return model

    @property
    def max_word_length(self) -> int:
        """Length in characters of the longest word inserted so far."""
        return self._max_word_length

    def _check_mutable(self) -> None:
        if self.frozen:
            raise RuntimeError("FrequencyModel is frozen and can no longer be modified")

    def upsert(self, word: str, count: int) -> None:
        """
        Inserts `word` with `count`, replacing any previous count.

        Empty words are ignored. The maximum word length only ever grows here;
        it shrinks again only through `clear`.
        """
        self._check_mutable()
        if not word:
            return
        self._entries[word] = int(count)
        if len(word) > self._max_word_length:
            self._max_word_length = len(word)

    def lookup(self, word: str) -> Optional[int]:
        return self._entries.get(word)

    def log_probability(self, word: str) -> float:
        """
        Calculates the log10 probability of `word` under the unigram model.

        Known words score `log10(count / N)`. Unknown words get the estimate
        `log10(10 / (N * 10**len(word)))`, which costs one extra order of
        magnitude per character so long unknown fragments never beat a split
        into known words. The estimate is evaluated in log space to stay
        finite for arbitrarily long strings.

        Args:
            word: The candidate word.

        Returns:
            The log10 probability as a float (always <= 0 for sane counts).
        """
        count = self._entries.get(word)
        if count is not None:
            if count <= 0:
                return -math.inf
            return math.log10(count / self.corpus_size)
        return 1.0 - self._log_corpus_size - len(word)

    def freeze(self) -> "FrequencyModel":
        """Marks the model read-only and returns it."""
        self.frozen = True
        return self

    def clear(self) -> None:
        """Removes every entry and resets the maximum word length."""
        self._check_mutable()
        self._entries.clear()
        self._max_word_length = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
