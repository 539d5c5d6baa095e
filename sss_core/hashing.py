# sss_core/hashing.py
import hashlib
import logging
from typing import Callable, Dict, Union

from web3 import Web3

from .curve import P, Point
from .errors import HashToCurveError

logger = logging.getLogger(__name__)

COUNTER_BYTES = 4
DEFAULT_MAX_ATTEMPTS = 256


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def keccak256(data: bytes) -> bytes:
    return bytes(Web3.keccak(data))


_DIGESTS: Dict[str, Callable[[bytes], bytes]] = {
    "sha256": sha256,
    "keccak256": keccak256,
}


def digest(name: str, data: bytes) -> bytes:
    """Hash ``data`` with one of the publicly specified digests (sha256 | keccak256)."""
    try:
        fn = _DIGESTS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown digest {name!r}, expected one of {sorted(_DIGESTS)}")
    return fn(data)


def _is_valid_x(x: int) -> bool:
    # x^3 + 7 必须是模 p 的二次剩余（欧拉判别法）
    if x >= P:
        return False
    y_sq = (pow(x, 3, P) + 7) % P
    return pow(y_sq, (P - 1) // 2, P) == 1


def hash_to_point(tag: Union[bytes, str], max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Point:
    """
    Map a public ``tag`` to a secp256k1 point with no known discrete log
    relative to G (try-and-increment, **not constant time**).

    Candidate X = sha256(tag || counter), counter a 4-byte big-endian integer
    starting at zero. The first X on the curve wins and the returned point
    always has an even Y coordinate, so anyone can re-derive and check it.

    Raises HashToCurveError when ``max_attempts`` candidates all fail.
    """
    if isinstance(tag, str):
        tag = tag.encode("utf-8")
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    for counter in range(max_attempts):
        h = sha256(tag + counter.to_bytes(COUNTER_BYTES, "big"))
        x = int.from_bytes(h, "big")
        if _is_valid_x(x):
            logger.debug("hash_to_point: tag=%r found after %d attempt(s)", tag, counter + 1)
            return Point.lift_x(x)

    raise HashToCurveError(tag, max_attempts)
