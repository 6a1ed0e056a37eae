"""Immutable hash stream state.

A :class:`SeedState` wraps the current MD5 hex digest. Advancing hashes the
digest string itself and returns a *new* state; the previous one is left
untouched. Every generation stage takes a state and returns the advanced one
alongside its result, so the stream is threaded explicitly through the
pipeline and nothing is shared between concurrent generations.

The hash is used purely as a pseudo-random generator. Given the same seed
string the sequence of digests, and therefore the image, is identical.
"""

import hashlib
import random
from dataclasses import dataclass
from typing import Iterator, Optional


def hex_digest(value: str) -> str:
    """Return the 32 character MD5 hex digest of ``value`` (UTF-8)."""
    return hashlib.md5(value.encode("utf-8"), usedforsecurity=False).hexdigest()


@dataclass(frozen=True)
class SeedState:
    """Current position of the hash stream.

    Attributes:
        digest: Lowercase 32 character hex string.
    """

    digest: str

    @classmethod
    def from_seed(cls, seed: Optional[str] = None) -> "SeedState":
        """Create the initial state for ``seed``.

        A missing or empty seed falls back to a random token, the only
        non-deterministic input of the whole pipeline.
        """
        if not seed:
            seed = str(random.random())
        return cls(digest=hex_digest(seed))

    def advance(self) -> "SeedState":
        """Return the next state: the digest of the current digest."""
        return SeedState(digest=hex_digest(self.digest))

    def nibbles(self) -> Iterator[int]:
        """Yield every hex character of the digest as an int in [0, 15]."""
        for char in self.digest:
            yield int(char, 16)
