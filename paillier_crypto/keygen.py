"""
Paillier key generation.

Two probable primes p, q are drawn until n = p*q has exactly the
requested bit length and p != q. From there:

  standard  g = (alpha*n + 1) * beta^n mod n^2
            lambda = lcm(p-1, q-1)
            mu = L(g^lambda mod n^2)^-1 mod n
  simple    g = n + 1
            lambda = phi = (p-1)(q-1)
            mu = phi^-1 mod n
"""

import time
import logging
from typing import Optional

import gmpy2

from . import config
from .errors import InvalidArgument, KeyGenerationFailure
from .keys import L, KeyPair, PrivateKey, PublicKey
from .primes import PrimeGenerator
from .random_source import SecureRandom, default_random

logger = logging.getLogger(__name__)


def _invert(value: int, modulus: int, what: str) -> int:
    try:
        return int(gmpy2.invert(value, modulus))
    except ZeroDivisionError:
        raise KeyGenerationFailure(f"{what} has no inverse modulo n") from None


def get_generator(n: int, n2: int, rng: SecureRandom) -> int:
    """Random g = (alpha*n + 1) * beta^n mod n^2 with alpha, beta in [1, n-1]."""
    alpha = rng.rand_between(n - 1)
    beta  = rng.rand_between(n - 1)
    left  = alpha * n + 1
    mp    = int(gmpy2.powmod(beta, n, n2))
    return left * mp % n2


def generate_random_keys(bit_length: int = None, simple_variant: bool = False,
                         rng: SecureRandom = None,
                         timeout: Optional[float] = None) -> KeyPair:
    """
    Generate a Paillier key pair whose modulus has exactly bit_length bits.

    timeout bounds the prime search in seconds; KeyGenerationTimeout is
    raised once it runs out. Both default to the values in config.
    """
    if bit_length is None:
        bit_length = config.DEFAULT_BIT_LENGTH
    if timeout is None:
        timeout = config.KEYGEN_TIMEOUT
    if rng is None:
        rng = default_random()
    if bit_length < config.MIN_RECOMMENDED_BIT_LENGTH:
        logger.warning(
            f"Generating a {bit_length}-bit Paillier key; "
            f"use at least {config.MIN_RECOMMENDED_BIT_LENGTH} bits for real data."
        )

    started  = time.monotonic()
    deadline = started + timeout if timeout is not None else None
    primes   = PrimeGenerator(rng)

    # p one bit longer than q puts n in [2**(bit_length-1), 2**(bit_length+1))
    attempts = 0
    while True:
        attempts += 1
        p = primes.prime(bit_length // 2 + 1, deadline=deadline)
        q = primes.prime(bit_length // 2, deadline=deadline)
        n = p * q
        if p != q and n.bit_length() == bit_length:
            break
    logger.debug(f"Modulus found after {attempts} prime pair(s)")

    phi = (p - 1) * (q - 1)
    n2  = n * n

    if simple_variant:
        g   = n + 1
        lam = phi
        mu  = _invert(lam, n, "phi")
    else:
        g   = get_generator(n, n2, rng)
        lam = int(gmpy2.lcm(p - 1, q - 1))
        try:
            l_val = L(int(gmpy2.powmod(g, lam, n2)), n)
        except InvalidArgument:
            raise KeyGenerationFailure("g^lambda mod n^2 is not 1 mod n") from None
        mu  = _invert(l_val, n, "L(g^lambda mod n^2)")

    public_key  = PublicKey(n, g, rng)
    private_key = PrivateKey(lam, mu, public_key, p, q)

    elapsed = time.monotonic() - started
    logger.info(
        f"Paillier {bit_length}-bit key ready "
        f"({'simple' if simple_variant else 'standard'} variant, {elapsed:.2f}s) "
        f"fingerprint={public_key.fingerprint()[:16]}"
    )
    return KeyPair(public_key, private_key)
