# suggestion_engine.py
"""
SuggestionEngine - autocomplete, autocorrect and merged suggestions over a
FrequencyStore.

 - get_best_autocomplete(prefix): most frequent word starting with prefix
 - get_best_autocorrect(word): known words exactly one edit away
 - get_best_suggestions(word): both of the above, ranked by frequency

The engine keeps a reference to the store (never a copy) and never writes
to it, so results always reflect the store's current contents.
"""

from __future__ import annotations
import string
from typing import Callable, List, Optional, Set

from autocorrecter.core.frequency_store import FrequencyStore
from autocorrecter.core.mergesort import mergesort
from autocorrecter.errors import UnknownWordError

Word = str
Lookup = Callable[[str], Optional[int]]

ALPHABET = string.ascii_lowercase


def edits1(word: Word) -> Set[Word]:
    """
    Every string one deletion, adjacent transposition, replacement or
    insertion away from `word`. Replacements/insertions only use a-z.
    """
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    deletes = [L + R[1:] for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces = [L + c + R[1:] for L, R in splits if R for c in ALPHABET]
    inserts = [L + c + R for L, R in splits for c in ALPHABET]
    return set(deletes + transposes + replaces + inserts)


def by_frequency(lookup: Lookup) -> Callable[[Word, Word], int]:
    """
    Comparator ranking more frequent words first, equal frequencies in
    ascending text order. `lookup` maps a word to its count (None if absent).
    """

    def _freq(word: Word) -> int:
        count = lookup(word)
        if count is None:
            raise UnknownWordError(word)
        return count

    def compare(a: Word, b: Word) -> int:
        fa, fb = _freq(a), _freq(b)
        if fa != fb:
            return -1 if fa > fb else 1
        if a == b:
            return 0
        return -1 if a < b else 1

    return compare


class SuggestionEngine:
    """Read-only query layer over a FrequencyStore."""

    def __init__(self, store: FrequencyStore) -> None:
        self._store = store

    @property
    def store(self) -> FrequencyStore:
        return self._store

    # autocomplete --------------------------------------------------------
    def get_best_autocomplete(self, prefix: Word) -> Optional[Word]:
        """
        Most frequent known word that has `prefix` as a literal prefix
        (case-sensitive; a word equal to the prefix counts). Equal counts
        go to the lexicographically smallest word. None if nothing matches.
        """
        best: Optional[Word] = None
        best_count = 0
        for word, count in self._store.items():
            if not word.startswith(prefix):
                continue
            if best is None or count > best_count or (count == best_count and word < best):
                best, best_count = word, count
        return best

    # autocorrect ---------------------------------------------------------
    def get_best_autocorrect(self, word: Word) -> Set[Word]:
        """Known words exactly one edit away from `word` (unordered)."""
        return edits1(word) & self._store.key_set()

    # merged --------------------------------------------------------------
    def get_best_suggestions(self, word: Word) -> List[Word]:
        """
        Autocorrect results plus the autocomplete result, most frequent first
        and ties in ascending text order.
        """
        autocomplete = self.get_best_autocomplete(word)
        autocorrect = self.get_best_autocorrect(word)

        result = list(autocorrect)
        # the autocomplete word is only added when there is one
        if autocomplete is not None and autocomplete not in autocorrect:
            result.insert(0, autocomplete)
        return mergesort(result, by_frequency(self._store.lookup))
