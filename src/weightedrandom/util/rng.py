"""Seedable random source handed to selectors for reproducible draws."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import random
import secrets


@dataclass
class Rng:
    seed: int

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    @classmethod
    def from_entropy(cls) -> "Rng":
        """Build an Rng seeded from the OS entropy pool."""
        return cls(secrets.randbits(64))

    def fork(self, salt: str) -> "Rng":
        digest = hashlib.sha256(f"{self.seed}:{salt}".encode("ascii")).hexdigest()
        new_seed = int(digest[:16], 16)
        return Rng(new_seed)

    def randint(self, a: int, b: int) -> int:
        """Return an int in the closed range [a, b]."""
        return self._random.randint(a, b)

    def randbelow(self, n: int) -> int:
        """Return an int in the half-open range [0, n)."""
        return self._random.randrange(n)
