"""
Probable-prime generation.

Candidates are random odd integers with exactly the requested bit length.
Each one goes through gmpy2.is_prime, a Miller-Rabin test with a
configurable number of rounds; a composite survives with probability at
most 4**(-iterations).
"""

import time
import logging
from typing import Optional

import gmpy2

from . import config
from .errors import InvalidArgument, KeyGenerationTimeout
from .random_source import SecureRandom, default_random

logger = logging.getLogger(__name__)


class PrimeGenerator:
    """Draws probable primes of an exact bit length."""

    def __init__(self, rng: SecureRandom = None):
        self._rng = rng if rng is not None else default_random()

    @property
    def rng(self) -> SecureRandom:
        return self._rng

    def prime(self, bit_length: int, iterations: int = None,
              deadline: Optional[float] = None) -> int:
        """
        Return a probable prime with exactly bit_length bits.

        deadline is a time.monotonic() value; once passed, the search
        stops with KeyGenerationTimeout.
        """
        # no 1-bit primes exist, so 1 would loop forever
        if bit_length < 2:
            raise InvalidArgument(f"bit_length MUST be > 1 and it is {bit_length}")
        if iterations is None:
            iterations = config.PRIME_ITERATIONS

        trials = 0
        while True:
            if deadline is not None and time.monotonic() > deadline:
                raise KeyGenerationTimeout(
                    f"No {bit_length}-bit prime found before the deadline "
                    f"({trials} candidates tested)."
                )
            trials += 1
            candidate = self._rng.random_int_bits(bit_length, force_exact_length=True) | 1
            if gmpy2.is_prime(candidate, iterations):
                logger.debug(f"{bit_length}-bit prime after {trials} candidates")
                return candidate


def prime(bit_length: int, iterations: int = None) -> int:
    """Probable prime from the default randomness source."""
    return PrimeGenerator().prime(bit_length, iterations)
