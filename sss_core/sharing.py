# sss_core/sharing.py
from dataclasses import dataclass

from .curve import Point, Scalar, as_scalar


@dataclass(frozen=True)
class SecretShare:
    """
    A shareholder's scalar share: ``value = f(index)``.

    A share issued at index 0 is the secret itself; never hand one out.
    """

    index: Scalar
    value: Scalar

    def __post_init__(self):
        object.__setattr__(self, "index", as_scalar(self.index))
        object.__setattr__(self, "value", as_scalar(self.value))

    def to_point_share(self, q: Point) -> "PointShare":
        # 持有者本地计算: value * Q，不需要知道多项式
        return PointShare(self.index, self.value * q)

    def __mul__(self, q):
        if isinstance(q, Point):
            return self.to_point_share(q)
        return NotImplemented

    __rmul__ = __mul__


@dataclass(frozen=True)
class PointShare:
    """A point share ``(index, f(index) * Q)``, safe to distribute."""

    index: Scalar
    value: Point

    def __post_init__(self):
        object.__setattr__(self, "index", as_scalar(self.index))
        if not isinstance(self.value, Point):
            raise TypeError(f"PointShare value must be a Point, got {type(self.value).__name__}")
