"""
Paillier Keys
=============
Public key:  (n, g) with n = p*q and g an element of (Z/n^2 Z)*.
Private key: (lambda, mu) plus a reference to the public key.

    Encrypt   c = g^m * r^n  mod n^2        r fresh in [1, n-1]
    Decrypt   m = L(c^lambda mod n^2) * mu  mod n,   L(x) = (x - 1) / n

The scheme is additively homomorphic:

    D(E(a) * E(b) mod n^2) = a + b  mod n
    D(E(a)^k     mod n^2) = a * k  mod n

Both keys are immutable values. Nothing here holds mutable state apart
from the randomness source used for blinding, so the same keys can be
used from several threads at once.

Dependencies: gmpy2, cryptography >= 41.0
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import gmpy2
from cryptography.hazmat.primitives import hashes

from .errors import InvalidArgument
from .random_source import SecureRandom, default_random

logger = logging.getLogger(__name__)


def L(x: int, n: int) -> int:
    """Paillier's L function, (x - 1) / n. Raises unless x = 1 mod n."""
    quotient, remainder = divmod(x - 1, n)
    if remainder:
        raise InvalidArgument("L(x) is undefined: x is not 1 mod n")
    return quotient


def _int_bytes(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


@dataclass(frozen=True)
class PublicKey:
    n: int
    g: int
    rng: Optional[SecureRandom] = field(default=None, compare=False, repr=False)
    n2: int = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "n2", self.n * self.n)
        if self.rng is None:
            object.__setattr__(self, "rng", default_random())

    @property
    def bit_length(self) -> int:
        """Bit length of the public modulus n."""
        return self.n.bit_length()

    def fingerprint(self) -> str:
        """Hex SHA-256 over (n, g). Stable identifier for this key."""
        digest = hashes.Hash(hashes.SHA256())
        for value in (self.n, self.g):
            data = _int_bytes(value)
            digest.update(len(data).to_bytes(4, "big"))
            digest.update(data)
        return digest.finalize().hex()

    def _check_ciphertext(self, c: int) -> None:
        if not 0 <= c < self.n2:
            raise InvalidArgument("Ciphertext must be in the range [0, n^2 - 1]")

    def encrypt(self, m: int) -> int:
        """Probabilistic encryption of a plaintext in [0, n - 1]."""
        if not 0 <= m < self.n:
            raise InvalidArgument("Plaintext must be in the range [0, n - 1]")
        r  = self.rng.rand_between(self.n - 1)
        gm = gmpy2.powmod(self.g, m, self.n2)
        rn = gmpy2.powmod(r, self.n, self.n2)
        return int(gm * rn % self.n2)

    def addition(self, *ciphertexts: int) -> int:
        """
        Homomorphic addition. The product of the ciphertexts decrypts to
        the sum of their plaintexts mod n. No arguments gives 1, the
        (unblinded) encryption of 0.
        """
        total = 1
        for c in ciphertexts:
            self._check_ciphertext(c)
            total = total * c % self.n2
        return total

    def multiply(self, c: int, k: int) -> int:
        """
        Pseudo-homomorphic multiplication of ciphertext c by cleartext k.
        Decrypts to (plaintext of c) * k mod n.
        """
        self._check_ciphertext(c)
        # c^0 is always 1, which would reveal k == 0
        if k == 0:
            return self.encrypt(0)
        # c^1 is c itself, which would reveal k == 1
        if k == 1:
            return self.addition(c, self.encrypt(0))
        try:
            return int(gmpy2.powmod(c, k, self.n2))
        except ValueError:
            raise InvalidArgument("Ciphertext has no inverse modulo n^2") from None


@dataclass(frozen=True)
class PrivateKey:
    lam: int
    mu: int
    public_key: PublicKey
    p: Optional[int] = None
    q: Optional[int] = None

    @property
    def bit_length(self) -> int:
        return self.public_key.bit_length

    @property
    def n(self) -> int:
        """The public modulus n = p*q."""
        return self.public_key.n

    def decrypt(self, c: int) -> int:
        """Recover the plaintext in [0, n - 1] from a ciphertext in [0, n^2 - 1]."""
        n, n2 = self.public_key.n, self.public_key.n2
        if not 0 <= c < n2:
            raise InvalidArgument("Ciphertext must be in the range [0, n^2 - 1]")
        x = int(gmpy2.powmod(c, self.lam, n2))
        return L(x, n) * self.mu % n

    def __repr__(self):
        return f"PrivateKey(bit_length={self.bit_length}, public_key={self.public_key!r})"


class KeyPair(NamedTuple):
    public_key: PublicKey
    private_key: PrivateKey
