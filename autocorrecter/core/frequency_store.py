# frequency_store.py
# Fixed-capacity hash table mapping word -> occurrence count.
# Collisions are chained; the slot count is chosen once and never grows,
# so bucket layout (and therefore render() output) only depends on the
# words inserted and the hash function.

from __future__ import annotations
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Set, Tuple

from autocorrecter.errors import InvalidCapacityError

Word = str
Count = int
HashFunc = Callable[[str], int]

DEFAULT_RENDER_LIMIT = 100


def string_hash(s: str) -> int:
    """
    Stable 32-bit polynomial string hash (h = 31*h + ch), wrapped to a
    signed int. Builtin hash() is salted per process for str, this is not.
    """
    h = 0
    for ch in s:
        h = (31 * h + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


class _Entry:
    """One (word, count) link in a bucket chain."""

    __slots__ = ("key", "value")

    def __init__(self, key: Word, value: Count) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"{self.key}: {self.value}"


class FrequencyStore:
    """
    Word -> count hash table with chaining.

    Not thread-safe: callers sharing one store between threads must guard
    insert_or_update()/increment() against every read themselves.
    """

    def __init__(self, capacity: int, hash_func: HashFunc = string_hash) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(
                f"capacity must be a positive integer, got {capacity!r}"
            )
        self._capacity = capacity
        self._hash = hash_func
        self._table: List[Deque[_Entry]] = [deque() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return self._capacity

    def _bucket(self, word: Word) -> Deque[_Entry]:
        # raw hashes can be negative, the index never is
        return self._table[abs(self._hash(word)) % self._capacity]

    def _find(self, word: Word) -> Optional[_Entry]:
        for entry in self._bucket(word):
            if entry.key == word:
                return entry
        return None

    # mutation ------------------------------------------------------------
    def insert_or_update(self, word: Word, count: Count) -> None:
        """
        Set the count for `word`. An existing entry is overwritten in place,
        a new one goes to the front of its bucket.
        """
        bucket = self._bucket(word)
        for entry in bucket:
            if entry.key == word:
                entry.value = count
                return
        bucket.appendleft(_Entry(word, count))

    def increment(self, word: Word, delta: Count = 1) -> Count:
        """Add `delta` to the count of `word` (inserting it if new); returns the new count."""
        entry = self._find(word)
        if entry is None:
            self._bucket(word).appendleft(_Entry(word, delta))
            return delta
        entry.value += delta
        return entry.value

    # lookup --------------------------------------------------------------
    def lookup(self, word: Word) -> Optional[Count]:
        """Count stored for `word`, or None when the word is unknown."""
        entry = self._find(word)
        return None if entry is None else entry.value

    def contains(self, word: Word) -> bool:
        return self.lookup(word) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    # enumeration ---------------------------------------------------------
    def total_entries(self) -> int:
        """Number of stored words. Walks every bucket, O(capacity)."""
        return sum(len(bucket) for bucket in self._table)

    def __len__(self) -> int:
        return self.total_entries()

    def key_set(self) -> Set[Word]:
        return {entry.key for bucket in self._table for entry in bucket}

    def items(self) -> Iterator[Tuple[Word, Count]]:
        """Yield (word, count) bucket by bucket, chain order within a bucket."""
        for bucket in self._table:
            for entry in bucket:
                yield entry.key, entry.value

    # diagnostics ---------------------------------------------------------
    def bucket_sizes(self) -> List[int]:
        return [len(bucket) for bucket in self._table]

    def load_factor(self) -> float:
        return self.total_entries() / self._capacity

    def render(self, limit: int = DEFAULT_RENDER_LIMIT) -> str:
        """
        Text dump of the first min(capacity, limit) buckets, one per line:
            Index 0 (2): [the: 10, cat: 3]
            Index 1 (0): []
        """
        lines = []
        for i in range(min(self._capacity, limit)):
            bucket = self._table[i]
            body = ", ".join(repr(entry) for entry in bucket)
            lines.append(f"Index {i} ({len(bucket)}): [{body}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"FrequencyStore(capacity={self._capacity}, entries={self.total_entries()})"
