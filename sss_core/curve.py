# sss_core/curve.py
"""
secp256k1 scalar / point value types.

Scalar arithmetic mod N is plain Python integers. Every group operation
(point addition, scalar multiplication, SEC1 parsing) goes through
``coincurve``, which wraps libsecp256k1.
"""
from typing import Iterable, List, Optional, Union

from coincurve import PublicKey

from .errors import InvalidEncodingError

# secp256k1 曲线阶
N = int("0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16)
# secp256k1 基域素数
P = int("0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F", 16)

SCALAR_BYTES = 32
POINT_BYTES = 33


def _strip0x(s: str) -> str:
    return s[2:] if s.lower().startswith("0x") else s


def _h2b(h: str) -> bytes:
    try:
        return bytes.fromhex(_strip0x(h.strip()))
    except ValueError as e:
        raise InvalidEncodingError(f"invalid hex: {e}") from e


def _b2h(b: bytes) -> str:
    return "0x" + b.hex()


class Scalar:
    """Element of Z_N. Zero is a valid value."""

    __slots__ = ("_v",)

    def __init__(self, value: int = 0):
        if isinstance(value, Scalar):
            value = value._v
        self._v = value % N

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar":
        if len(data) != SCALAR_BYTES:
            raise InvalidEncodingError(f"scalar must be {SCALAR_BYTES} bytes, got {len(data)}")
        v = int.from_bytes(data, "big")
        if v >= N:
            raise InvalidEncodingError("scalar not in [0, n-1]")
        return cls(v)

    @classmethod
    def from_hex(cls, h: str) -> "Scalar":
        return cls.from_bytes(_h2b(h))

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    def to_hex(self) -> str:
        return _b2h(self.to_bytes())

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    def inverse(self) -> "Scalar":
        if self._v == 0:
            raise ZeroDivisionError("zero scalar has no inverse")
        return Scalar(pow(self._v, N - 2, N))

    def __add__(self, o):
        if isinstance(o, (Scalar, int)):
            return Scalar(self._v + int(o))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, o):
        if isinstance(o, (Scalar, int)):
            return Scalar(self._v - int(o))
        return NotImplemented

    def __rsub__(self, o):
        if isinstance(o, int):
            return Scalar(o - self._v)
        return NotImplemented

    def __mul__(self, o):
        # Scalar * Point 交给 Point.__rmul__
        if isinstance(o, (Scalar, int)):
            return Scalar(self._v * int(o))
        return NotImplemented

    def __rmul__(self, o):
        if isinstance(o, int):
            return Scalar(o * self._v)
        return NotImplemented

    def __truediv__(self, o):
        if isinstance(o, (Scalar, int)):
            return self * Scalar(o).inverse()
        return NotImplemented

    def __neg__(self) -> "Scalar":
        return Scalar(-self._v)

    def __int__(self) -> int:
        return self._v

    def __index__(self) -> int:
        return self._v

    def __bool__(self) -> bool:
        return self._v != 0

    def __eq__(self, o) -> bool:
        if isinstance(o, Scalar):
            return self._v == o._v
        if isinstance(o, int):
            # 只与规约后的整数相等，保持与 __hash__ 一致
            return self._v == o
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        return f"Scalar({hex(self._v)})"


ScalarLike = Union[Scalar, int]


def as_scalar(v: ScalarLike) -> Scalar:
    if isinstance(v, Scalar):
        return v
    if isinstance(v, int) and not isinstance(v, bool):
        return Scalar(v)
    raise TypeError(f"expected Scalar or int, got {type(v).__name__}")


class Point:
    """
    secp256k1 group element.

    The identity (point at infinity) has no ``coincurve.PublicKey`` form, so it
    is stored as ``_pk = None`` and encoded as 33 zero bytes.
    """

    __slots__ = ("_pk",)

    def __init__(self, pk: Optional[PublicKey] = None):
        self._pk = pk

    @classmethod
    def identity(cls) -> "Point":
        return cls(None)

    @classmethod
    def generator(cls) -> "Point":
        return cls(PublicKey.from_secret((1).to_bytes(SCALAR_BYTES, "big")))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Point":
        """Parse the 33-byte SEC1 compressed encoding; 33 zero bytes is the identity."""
        if len(data) != POINT_BYTES or data[0] not in (0x00, 0x02, 0x03):
            raise InvalidEncodingError(f"point must be {POINT_BYTES}-byte compressed SEC1")
        if data == bytes(POINT_BYTES):
            return cls.identity()
        try:
            return cls(PublicKey(bytes(data)))
        except ValueError as e:
            raise InvalidEncodingError(f"invalid secp256k1 point: {e}") from e

    @classmethod
    def from_hex(cls, h: str) -> "Point":
        return cls.from_bytes(_h2b(h))

    @classmethod
    def lift_x(cls, x: int) -> "Point":
        """The point with X coordinate ``x`` and even Y."""
        if not 0 <= x < P:
            raise InvalidEncodingError("x coordinate not in [0, p-1]")
        return cls.from_bytes(b"\x02" + x.to_bytes(SCALAR_BYTES, "big"))

    def to_bytes(self) -> bytes:
        if self._pk is None:
            return bytes(POINT_BYTES)
        return self._pk.format(compressed=True)

    def to_hex(self) -> str:
        return _b2h(self.to_bytes())

    def is_identity(self) -> bool:
        return self._pk is None

    @property
    def x(self) -> int:
        if self._pk is None:
            raise ValueError("identity point has no affine coordinates")
        return self._pk.point()[0]

    @property
    def y(self) -> int:
        if self._pk is None:
            raise ValueError("identity point has no affine coordinates")
        return self._pk.point()[1]

    def has_even_y(self) -> bool:
        return self._pk is not None and self.to_bytes()[0] == 0x02

    @staticmethod
    def sum(points: Iterable["Point"]) -> "Point":
        """Add many points with a single libsecp256k1 combine call."""
        keys: List[PublicKey] = [p._pk for p in points if p._pk is not None]
        if not keys:
            return Point.identity()
        if len(keys) == 1:
            return Point(keys[0])
        try:
            return Point(PublicKey.combine_keys(keys))
        except ValueError:
            # inputs are all valid keys, so the only failure is a sum at infinity
            return Point.identity()

    def _mul(self, k: ScalarLike) -> "Point":
        k = as_scalar(k)
        if self._pk is None or k.is_zero():
            return Point.identity()
        # PublicKey.multiply 接受 32-byte big-endian 标量，返回新的 PublicKey
        return Point(self._pk.multiply(k.to_bytes()))

    def __add__(self, o):
        if not isinstance(o, Point):
            return NotImplemented
        return Point.sum([self, o])

    def __neg__(self) -> "Point":
        if self._pk is None:
            return self
        raw = bytearray(self.to_bytes())
        raw[0] ^= 0x01  # 0x02 <-> 0x03
        return Point(PublicKey(bytes(raw)))

    def __sub__(self, o):
        if not isinstance(o, Point):
            return NotImplemented
        return self + (-o)

    def __mul__(self, k):
        if isinstance(k, (Scalar, int)):
            return self._mul(k)
        return NotImplemented

    def __rmul__(self, k):
        if isinstance(k, (Scalar, int)):
            return self._mul(k)
        return NotImplemented

    def __eq__(self, o) -> bool:
        if not isinstance(o, Point):
            return NotImplemented
        return self.to_bytes() == o.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._pk is None:
            return "Point(identity)"
        return f"Point({self.to_hex()})"


G = Point.generator()
