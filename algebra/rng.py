"""Source of randomness for sampling field elements and polynomials.

Arithmetic never touches this module. Call set_seed(n) in tests or demos
for reproducible draws; without a seed every draw comes from os.urandom.
"""

import os
import random as _random


class SamplingRNG:
    """Seeded PRNG, or OS randomness when seed is None."""

    def __init__(self, seed: int | None = None):
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if self._rng is not None:
            return self._rng.randrange(n)
        return int.from_bytes(os.urandom(8), 'big') % n

    def randrange(self, start: int, stop: int) -> int:
        """Uniform integer in [start, stop)."""
        return start + self.randbelow(stop - start)


_global_rng = SamplingRNG()


def set_seed(seed: int | None):
    """Replace the global generator. None = cryptographic randomness."""
    global _global_rng
    _global_rng = SamplingRNG(seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randrange(start: int, stop: int) -> int:
    return _global_rng.randrange(start, stop)
