# sss_core/shamir.py
from typing import Iterable, List

from .curve import Scalar, ScalarLike
from .polynomials import SecretSharingPolynomial, SecretShareInterpolator
from .sharing import SecretShare


def shamir_split(secret: ScalarLike, n: int = 3, t: int = 2, rng=None) -> List[SecretShare]:
    """Shamir 秘密分享，将 secret 拆成 n 份（索引 1..n），阈值 t"""
    if not 1 <= t <= n:
        raise ValueError(f"need 1 <= t <= n, got t={t} n={n}")
    poly = SecretSharingPolynomial.from_secret(secret, t, rng)
    return poly.issue_shares(range(1, n + 1))


def shamir_reconstruct(shares: Iterable[SecretShare], x: ScalarLike = 0) -> Scalar:
    """Lagrange 插值重建秘密（默认在 x=0）"""
    return SecretShareInterpolator(shares).evaluate(x)
