"""
Random Source

One independent random stream: a numpy Generator for raw draws and a
Faker instance (seeded from the same stream) for lorem text. A source is
not meant to be shared between threads; give each worker its own via
``spawn``.
"""

import logging
from typing import List, Optional

import numpy as np
from faker import Faker

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Random stream backing every value primitive

    Args:
        seed: Seed for reproducible output (None for fresh entropy)
        locale: Faker locale used for words, sentences and paragraphs
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        locale: str = "en_US",
        seed_sequence: Optional[np.random.SeedSequence] = None,
    ):
        if seed_sequence is None:
            seed_sequence = np.random.SeedSequence(seed)

        self.seed = seed
        self.locale = locale
        self.seed_sequence = seed_sequence
        self.rng = np.random.default_rng(seed_sequence)

        self.faker = Faker(locale)
        self.faker.seed_instance(int(self.rng.integers(0, 2**63 - 1)))

    def spawn(self, n: int) -> List["RandomSource"]:
        """Create ``n`` statistically independent child sources"""
        children = self.seed_sequence.spawn(n)
        logger.debug(f"Spawned {n} random sources")
        return [RandomSource(locale=self.locale, seed_sequence=child) for child in children]

    def random(self) -> float:
        """Uniform float in [0, 1)"""
        return float(self.rng.random())

    def randbits(self, k: int) -> int:
        """Non-negative integer with ``k`` random bits, any size"""
        if k <= 0:
            return 0
        num_bytes = (k + 7) // 8
        value = int.from_bytes(self.rng.bytes(num_bytes), 'big')
        return value >> (num_bytes * 8 - k)

    def below(self, n: int) -> int:
        """Uniform integer in [0, n) for any positive Python int"""
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        k = n.bit_length()
        # Rejection sampling keeps the draw uniform; at most half the
        # candidates are rejected on average.
        value = self.randbits(k)
        while value >= n:
            value = self.randbits(k)
        return value

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r}, locale={self.locale!r})"
