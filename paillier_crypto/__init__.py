"""
paillier_crypto — Paillier Homomorphic Encryption
==================================================
Additively homomorphic public-key encryption over arbitrary-precision
integers. Sum (and scale) encrypted values without ever decrypting them:
secure aggregation, voting tallies, private statistics.

Components:
    SecureRandom     — CSPRNG bytes, bit strings, uniform ranged integers
    PrimeGenerator   — probable primes of an exact bit length
    generate_random_keys — Paillier key pairs (standard or g = n+1 variant)
    PublicKey        — encrypt, homomorphic addition, scalar multiplication
    PrivateKey       — decrypt

Dependencies: gmpy2, cryptography >= 41.0
"""

__version__  = "1.0.0"

from .errors        import PaillierError, InvalidArgument, KeyGenerationFailure, KeyGenerationTimeout
from .random_source import SecureRandom, random_bytes, random_bits, rand_between
from .primes        import PrimeGenerator, prime
from .keys          import PublicKey, PrivateKey, KeyPair
from .keygen        import generate_random_keys

__all__ = [
    "PaillierError",
    "InvalidArgument",
    "KeyGenerationFailure",
    "KeyGenerationTimeout",
    "SecureRandom",
    "random_bytes",
    "random_bits",
    "rand_between",
    "PrimeGenerator",
    "prime",
    "PublicKey",
    "PrivateKey",
    "KeyPair",
    "generate_random_keys",
]
