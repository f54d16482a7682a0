"""
Raw identifier generation.

Layout: 3 bytes coarse timestamp + 7 bytes random = 80 bits.
The random source is shared process-wide and is not cryptographically secure.
"""

import random
import threading

from identityref.utils.timestamp import timestamp_prefix

RANDOM_BYTES = 7

_source = None
_source_lock = threading.Lock()


class RandomSource:
    """Pseudo-random byte source that is safe to share between threads."""

    __slots__ = ("seed", "_random", "_lock")

    def __init__(self, seed=None):
        self.seed = seed
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def next_bytes(self, count=RANDOM_BYTES):
        with self._lock:
            bits = self._random.getrandbits(count * 8)
        return bits.to_bytes(count, "big")

    @classmethod
    def configure(cls, seed=None):
        global _source
        with _source_lock:
            _source = cls(seed)
        return _source


def get_random_source():
    global _source
    if _source is None:
        with _source_lock:
            if _source is None:
                _source = RandomSource()
    return _source


def generate_bytes(epoch_ms=None):
    """Generate a fresh 10-byte identifier value."""
    return timestamp_prefix(epoch_ms) + get_random_source().next_bytes(RANDOM_BYTES)
