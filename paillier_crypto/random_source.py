"""
Secure Randomness
=================
Cryptographically secure bytes, bit strings and uniform integers.

All entropy comes from a single byte source, os.urandom by default.
The source is injectable so that key generation and encryption can be
replayed in tests with a seeded callable; production code never needs
to pass one.

Uniform integers in a range are drawn by rejection sampling: draw just
enough bits to cover the interval and throw away anything above it.
A modulo reduction would bias the low end of the range.
"""

import os
import logging
from typing import Callable

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

ByteSource = Callable[[int], bytes]


class SecureRandom:
    """CSPRNG front-end: bytes, masked bit strings, ranged integers."""

    def __init__(self, source: ByteSource = None):
        """
        source(n) must return n uniformly random bytes.
        Omit to use the operating system CSPRNG.
        """
        self._source = source if source is not None else os.urandom

    def random_bytes(self, byte_length: int) -> bytes:
        if byte_length < 1:
            raise InvalidArgument(f"byte_length MUST be > 0 and it is {byte_length}")
        buf = self._source(byte_length)
        if len(buf) != byte_length:
            raise RuntimeError(
                f"Random source returned {len(buf)} bytes, expected {byte_length}."
            )
        return bytes(buf)

    def random_bits(self, bit_length: int, force_exact_length: bool = False) -> bytes:
        """
        Big-endian bytes holding at most bit_length significant bits.
        With force_exact_length the top bit is set, so the value has
        exactly bit_length significant bits.
        """
        if bit_length < 1:
            raise InvalidArgument(f"bit_length MUST be > 0 and it is {bit_length}")

        byte_length = (bit_length + 7) // 8
        spare       = byte_length * 8 - bit_length   # unused high bits of byte 0
        buf         = bytearray(self.random_bytes(byte_length))
        buf[0] &= 0xFF >> spare
        if force_exact_length:
            buf[0] |= 0x80 >> spare
        return bytes(buf)

    def random_int_bits(self, bit_length: int, force_exact_length: bool = False) -> int:
        """random_bits() read as a non-negative integer."""
        return int.from_bytes(self.random_bits(bit_length, force_exact_length), "big")

    def rand_between(self, max: int, min: int = 1) -> int:
        """Uniform integer in [min, max], both ends inclusive."""
        if max <= min:
            raise InvalidArgument(f"max must be > min (max={max}, min={min})")

        interval = max - min
        bit_len  = interval.bit_length()
        draws    = 1
        rnd      = self.random_int_bits(bit_len)
        while rnd > interval:
            rnd = self.random_int_bits(bit_len)
            draws += 1
        if draws > 8:
            logger.debug(f"rand_between: {draws} draws for a {bit_len}-bit interval")
        return rnd + min


_default = SecureRandom()


def default_random() -> SecureRandom:
    """Process-wide instance backed by os.urandom."""
    return _default


def random_bytes(byte_length: int) -> bytes:
    return _default.random_bytes(byte_length)


def random_bits(bit_length: int, force_exact_length: bool = False) -> bytes:
    return _default.random_bits(bit_length, force_exact_length)


def rand_between(max: int, min: int = 1) -> int:
    return _default.rand_between(max, min)
