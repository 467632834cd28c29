# autocorrecter - word-frequency dictionary with autocomplete and autocorrect

from .core import FrequencyStore, SuggestionEngine, by_frequency, edits1, mergesort, string_hash
from .context.ingest import build_store, load_corpus
from .errors import AutocorrecterError, InvalidCapacityError, UnknownWordError

__all__ = [
    "FrequencyStore",
    "SuggestionEngine",
    "by_frequency",
    "edits1",
    "mergesort",
    "string_hash",
    "build_store",
    "load_corpus",
    "AutocorrecterError",
    "InvalidCapacityError",
    "UnknownWordError",
]

__version__ = "0.1.0"
