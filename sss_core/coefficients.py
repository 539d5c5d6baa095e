# sss_core/coefficients.py
import secrets
from typing import List

from .curve import N, Scalar


def random_coefficients(n: int, rng=None) -> List[Scalar]:
    """
    ``n`` uniform non-zero scalars. ``rng`` needs a ``randrange`` method and
    defaults to ``secrets.SystemRandom()``; pass a seeded ``random.Random``
    only in tests.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if rng is None:
        rng = secrets.SystemRandom()
    return [Scalar(rng.randrange(1, N)) for _ in range(n)]
