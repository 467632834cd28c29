# autocorrecter/context/ingest.py
"""
Corpus ingestion: text lines -> FrequencyStore of word counts.

Every token counts once per occurrence. Tokenization is a plain
whitespace split; normalize_text() can optionally lowercase and strip
punctuation first.
"""

from __future__ import annotations
import logging
import os
from typing import Iterable

from autocorrecter.core.frequency_store import FrequencyStore
from .normalizer import normalize_text
from .tokenizer import simple_tokenize

logger = logging.getLogger(__name__)


def build_store(
    lines: Iterable[str],
    capacity: int,
    lowercase: bool = False,
    strip_punctuation: bool = False,
) -> FrequencyStore:
    """Count the words of `lines` into a new store with `capacity` slots."""
    store = FrequencyStore(capacity)
    n_lines = n_tokens = 0
    for line in lines:
        n_lines += 1
        text = normalize_text(line, lowercase=lowercase, strip_punctuation=strip_punctuation)
        for token in simple_tokenize(text):
            store.increment(token)
            n_tokens += 1
    logger.debug(
        "ingested %d lines, %d tokens, %d distinct words", n_lines, n_tokens, len(store)
    )
    return store


def load_corpus(
    path: str,
    capacity: int,
    lowercase: bool = False,
    strip_punctuation: bool = False,
) -> FrequencyStore:
    """Read a UTF-8 text file and count its words. Raises FileNotFoundError."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus not found: {path}")
    with open(path, "r", encoding="utf8") as fh:
        store = build_store(
            fh, capacity, lowercase=lowercase, strip_punctuation=strip_punctuation
        )
    logger.info("loaded %s: %d distinct words in %d slots", path, len(store), capacity)
    return store
