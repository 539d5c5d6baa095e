# sss_core/polynomials/standard.py
from typing import Iterable, List, Sequence, Tuple

from ..coefficients import random_coefficients
from ..curve import Point, Scalar, ScalarLike, as_scalar
from ..sharing import PointShare, SecretShare


def _horner(coefficients, x: Scalar, zero):
    """
    Horner 法求值，系数按升幂排列（coefficients[0] 为常数项）。
    a0 + x(a1 + x(a2 + x(a3)))

    Works for scalar and point coefficients alike, since both support
    ``out * x + a``.
    """
    out = zero
    for a in reversed(coefficients):
        out = out * x + a
    return out


class _StandardFormPolynomial:
    coefficients: Tuple = ()

    def degree(self) -> int:
        return max(len(self.coefficients) - 1, 0)

    def interpolation_threshold(self) -> int:
        """Number of shares needed to interpolate this polynomial."""
        return len(self.coefficients)

    def __len__(self) -> int:
        return len(self.coefficients)

    def __repr__(self) -> str:
        # 不打印系数
        return f"{type(self).__name__}(degree={self.degree()})"


class SecretSharingPolynomial(_StandardFormPolynomial):
    """The dealer's scalar polynomial; ``evaluate(0)`` is the shared secret."""

    def __init__(self, coefficients: Sequence[ScalarLike]):
        self.coefficients = tuple(as_scalar(c) for c in coefficients)

    @classmethod
    def from_secret(cls, secret: ScalarLike, threshold: int, rng=None) -> "SecretSharingPolynomial":
        if threshold < 1:
            raise ValueError("threshold must be >= 1")
        return cls([as_scalar(secret)] + random_coefficients(threshold - 1, rng))

    def evaluate(self, x: ScalarLike) -> Scalar:
        return _horner(self.coefficients, as_scalar(x), Scalar(0))

    def issue_share(self, index: ScalarLike) -> SecretShare:
        index = as_scalar(index)
        return SecretShare(index, self.evaluate(index))

    def issue_shares(self, indices: Iterable[ScalarLike]) -> List[SecretShare]:
        return [self.issue_share(i) for i in indices]

    def __mul__(self, q):
        if isinstance(q, Point):
            return PointPolynomial.from_secret_polynomial(self, q)
        return NotImplemented

    __rmul__ = __mul__


class PointPolynomial(_StandardFormPolynomial):
    """
    ``Z(x) = f(x) * Q``: every coefficient of ``f`` multiplied by ``Q``.

    Only someone holding ``f`` can build one; the point coefficients alone do
    not reveal the scalars.
    """

    def __init__(self, coefficients: Sequence[Point]):
        for c in coefficients:
            if not isinstance(c, Point):
                raise TypeError(f"coefficient must be a Point, got {type(c).__name__}")
        self.coefficients = tuple(coefficients)

    @classmethod
    def from_secret_polynomial(cls, poly: SecretSharingPolynomial, q: Point) -> "PointPolynomial":
        return cls([c * q for c in poly.coefficients])

    def evaluate(self, x: ScalarLike) -> Point:
        return _horner(self.coefficients, as_scalar(x), Point.identity())

    def issue_share(self, index: ScalarLike) -> PointShare:
        index = as_scalar(index)
        return PointShare(index, self.evaluate(index))

    def issue_shares(self, indices: Iterable[ScalarLike]) -> List[PointShare]:
        return [self.issue_share(i) for i in indices]
