# autocorrecter/context/__init__.py
# turning raw corpus text into word counts

from .normalizer import normalize_text  # optional lowercase/punctuation clean-up
from .tokenizer import simple_tokenize  # whitespace tokenizer
from .ingest import build_store, load_corpus  # corpus -> FrequencyStore

__all__ = [
    "normalize_text",
    "simple_tokenize",
    "build_store",
    "load_corpus",
]
