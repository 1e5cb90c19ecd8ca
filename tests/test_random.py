"""
paillier_crypto — randomness and prime generation
==================================================
Run with:  python -m pytest tests/ -v
"""

import time

import gmpy2
import pytest

from paillier_crypto import (
    InvalidArgument,
    KeyGenerationTimeout,
    PrimeGenerator,
    SecureRandom,
    prime,
    rand_between,
    random_bits,
    random_bytes,
)


def scripted_source(*chunks):
    """Byte source replaying fixed chunks, one per call."""
    it = iter(chunks)
    return lambda n: next(it)[:n]

# ── random_bytes ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize("length", [1, 16, 257])
def test_random_bytes_length(length):
    assert len(random_bytes(length)) == length

@pytest.mark.parametrize("length", [0, -3])
def test_random_bytes_rejects_non_positive(length):
    with pytest.raises(InvalidArgument):
        random_bytes(length)

def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        random_bytes(0)

def test_short_source_is_an_error():
    rng = SecureRandom(lambda n: b"\x00")
    with pytest.raises(RuntimeError):
        rng.random_bytes(4)

# ── random_bits ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("bits", [1, 3, 8, 9, 17, 64, 1023])
def test_random_bits_never_exceeds_length(bits):
    rng = SecureRandom(lambda n: b"\xff" * n)
    buf = rng.random_bits(bits)
    assert len(buf) == (bits + 7) // 8
    assert int.from_bytes(buf, "big") == 2 ** bits - 1

@pytest.mark.parametrize("bits", [1, 3, 8, 9, 17, 64, 1023])
def test_random_bits_forced_length_sets_top_bit(bits):
    rng = SecureRandom(lambda n: b"\x00" * n)
    assert int.from_bytes(rng.random_bits(bits, True), "big") == 2 ** (bits - 1)

@pytest.mark.parametrize("bits", [5, 16, 130])
def test_random_bits_forced_length_is_exact(bits):
    for _ in range(50):
        value = int.from_bytes(random_bits(bits, force_exact_length=True), "big")
        assert value.bit_length() == bits

def test_random_bits_rejects_zero():
    with pytest.raises(InvalidArgument):
        random_bits(0)

# ── rand_between ─────────────────────────────────────────────────────────────
def test_rand_between_stays_in_range_and_covers_it():
    seen = {rand_between(10, 3) for _ in range(2000)}
    assert seen == set(range(3, 11))

def test_rand_between_default_min_is_one():
    for _ in range(500):
        assert 1 <= rand_between(4) <= 4

def test_rand_between_large_values_differ():
    top = 2 ** 2048
    a, b = rand_between(top), rand_between(top)
    assert 1 <= a <= top and 1 <= b <= top
    assert a != b

@pytest.mark.parametrize("max_, min_", [(5, 5), (4, 5), (0, 1)])
def test_rand_between_rejects_empty_range(max_, min_):
    with pytest.raises(InvalidArgument):
        rand_between(max_, min_)

def test_rand_between_rejects_instead_of_reducing():
    # interval = 5 needs 3 bits; 7 is above it and must be redrawn
    rng = SecureRandom(scripted_source(b"\x07", b"\x06", b"\x02"))
    assert rng.rand_between(6, 1) == 3

def test_rand_between_negative_min():
    for _ in range(200):
        assert -5 <= rand_between(5, -5) <= 5

# ── prime ────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("bits", [2, 8, 64, 256, 512, 1024])
def test_prime_has_exact_bit_length(bits):
    p = prime(bits, 1)
    assert p.bit_length() == bits
    assert gmpy2.is_prime(p, 25)

def test_prime_default_iterations():
    p = prime(128)
    assert p.bit_length() == 128
    assert p % 2 == 1

@pytest.mark.parametrize("bits", [0, 1, -8])
def test_prime_rejects_impossible_lengths(bits):
    with pytest.raises(InvalidArgument):
        prime(bits)

def test_prime_honours_deadline():
    with pytest.raises(KeyGenerationTimeout):
        PrimeGenerator().prime(512, deadline=time.monotonic() - 1)

def test_prime_is_reproducible_with_seeded_source(seeded_rng):
    a = PrimeGenerator(seeded_rng(7)).prime(256)
    b = PrimeGenerator(seeded_rng(7)).prime(256)
    c = PrimeGenerator(seeded_rng(8)).prime(256)
    assert a == b
    assert a != c
