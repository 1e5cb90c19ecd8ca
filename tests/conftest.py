"""Shared pytest fixtures for the paillier_crypto test suite."""

import sys
import os
import random
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from paillier_crypto import SecureRandom, generate_random_keys


@pytest.fixture(scope="session")
def keypairs():
    """Key pairs cached by (bit_length, simple_variant); large keys are slow."""
    cache = {}

    def get(bit_length, simple_variant=False):
        key = (bit_length, simple_variant)
        if key not in cache:
            cache[key] = generate_random_keys(bit_length, simple_variant)
        return cache[key]

    return get


@pytest.fixture(scope="session")
def keypair(keypairs):
    return keypairs(1024)


@pytest.fixture()
def seeded_rng():
    """Factory for reproducible SecureRandom instances. Tests only."""
    def make(seed):
        return SecureRandom(random.Random(seed).randbytes)
    return make
