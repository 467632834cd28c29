"""
autocorrecter.core

Frequency dictionary and the queries answered from it:
 - fixed-capacity chained hash table of word counts (FrequencyStore)
 - autocomplete / autocorrect / ranked suggestions (SuggestionEngine)
 - comparator-driven merge sort used for the final ordering (mergesort)
"""

from .frequency_store import FrequencyStore, string_hash
from .mergesort import mergesort
from .suggestion_engine import SuggestionEngine, by_frequency, edits1

__all__ = [
    "FrequencyStore",
    "string_hash",
    "mergesort",
    "SuggestionEngine",
    "by_frequency",
    "edits1",
]
