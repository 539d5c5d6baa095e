# sss_core/polynomials/lagrange.py
"""
Lagrange interpolation over scalar shares and over point shares.

Both interpolators use the same scalar weights ``L_i(x)`` and only differ in
how they combine them with the share values: multiply-accumulate mod N for
scalars, scalar-multiply then add for points. The point version is valid
because ``s -> s * Q`` is linear.

The implied degree is ``len(shares) - 1``. Interpolating with fewer shares
than the real polynomial's threshold still returns a value, just the wrong
one; this cannot be detected here, so callers must supply enough shares.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from .. import hashing
from ..curve import N, Point, Scalar, ScalarLike, as_scalar
from ..errors import DuplicateShareIndexError, EmptyShareSetError
from ..kdf import DEFAULT_INFO, derive_key
from ..sharing import PointShare, SecretShare


def lagrange_weights(indices: Sequence[ScalarLike], x: ScalarLike) -> List[Scalar]:
    """
    Lagrange basis values ``L_i(x) = prod_{j!=i} (x - x_j) / (x_i - x_j)`` mod N.

    Returns the unit vector when ``x`` equals one of the indices.
    """
    xs = [as_scalar(i).value for i in indices]
    x = as_scalar(x).value

    seen = set()
    for xi in xs:
        if xi in seen:
            raise DuplicateShareIndexError(Scalar(xi))
        seen.add(xi)

    if x in seen:
        hit = xs.index(x)
        return [Scalar(1 if k == hit else 0) for k in range(len(xs))]

    weights: List[Scalar] = []
    for i, xi in enumerate(xs):
        num, den = 1, 1
        for j, xj in enumerate(xs):
            if j == i:
                continue
            num = (num * (x - xj)) % N   # (x - xj)
            den = (den * (xi - xj)) % N  # (xi - xj)
        weights.append(Scalar(num * pow(den, N - 2, N)))
    return weights


def _check_shares(shares, share_type) -> Tuple:
    shares = tuple(shares)
    if not shares:
        raise EmptyShareSetError()
    seen = set()
    for s in shares:
        if not isinstance(s, share_type):
            raise TypeError(f"expected {share_type.__name__}, got {type(s).__name__}")
        if s.index in seen:
            raise DuplicateShareIndexError(s.index)
        seen.add(s.index)
    return shares


class _LagrangePolynomial:
    share_type = object

    def __init__(self, shares):
        self.shares = _check_shares(shares, self.share_type)

    @property
    def indices(self) -> List[Scalar]:
        return [s.index for s in self.shares]

    def degree(self) -> int:
        return len(self.shares) - 1

    def interpolation_threshold(self) -> int:
        return len(self.shares)

    def __len__(self) -> int:
        return len(self.shares)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shares={len(self.shares)})"


class SecretShareInterpolator(_LagrangePolynomial):
    """Evaluates the polynomial behind a set of scalar shares at any input."""

    share_type = SecretShare
    shares: Tuple[SecretShare, ...]

    def __init__(self, shares: Iterable[SecretShare]):
        super().__init__(shares)

    def evaluate(self, x: ScalarLike) -> Scalar:
        weights = lagrange_weights(self.indices, x)
        total = 0
        for share, w in zip(self.shares, weights):
            total = (total + share.value.value * w.value) % N
        return Scalar(total)

    def issue_share(self, index: ScalarLike) -> SecretShare:
        index = as_scalar(index)
        return SecretShare(index, self.evaluate(index))

    def to_point_interpolator(self, q: Point) -> "PointShareInterpolator":
        return PointShareInterpolator(s.to_point_share(q) for s in self.shares)

    def __mul__(self, q):
        if isinstance(q, Point):
            return self.to_point_interpolator(q)
        return NotImplemented

    __rmul__ = __mul__


class PointShareInterpolator(_LagrangePolynomial):
    """
    Evaluates ``Z(x) = f(x) * Q`` from point shares.

    Shares issued by the dealer from a PointPolynomial and shares computed by
    shareholders as ``f(i) * Q`` can be mixed freely.
    """

    share_type = PointShare
    shares: Tuple[PointShare, ...]

    def __init__(self, shares: Iterable[PointShare]):
        super().__init__(shares)

    def evaluate(self, x: ScalarLike) -> Point:
        weights = lagrange_weights(self.indices, x)
        # λ_i * P_i，再一次性点相加
        return Point.sum(w * share.value for share, w in zip(self.shares, weights))

    def issue_share(self, index: ScalarLike) -> PointShare:
        index = as_scalar(index)
        return PointShare(index, self.evaluate(index))

    def derive_secret(self, x: ScalarLike = 0, digest: str = "sha256") -> bytes:
        """``digest(Z(x))`` over the compressed point encoding, sha256 unless told otherwise."""
        return hashing.digest(digest, self.evaluate(x).to_bytes())

    def derive_key(self, x: ScalarLike = 0, length: int = 32, info: bytes = DEFAULT_INFO,
                   salt: Optional[bytes] = None) -> bytes:
        return derive_key(self.evaluate(x), length=length, info=info, salt=salt)
