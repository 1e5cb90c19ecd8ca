"""
Library defaults. Each value can be overridden through the environment
before the package is imported.
"""

import os
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


DEFAULT_BIT_LENGTH  = _env_int("PAILLIER_KEY_BITS", 3072)
PRIME_ITERATIONS    = _env_int("PAILLIER_PRIME_ITERATIONS", 16)
KEYGEN_TIMEOUT      = _env_float("PAILLIER_KEYGEN_TIMEOUT")   # seconds, None = no limit

MIN_RECOMMENDED_BIT_LENGTH = 2048
