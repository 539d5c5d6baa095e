# sss_core/kdf.py
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .curve import Point

DEFAULT_INFO = b"sss-core-derived-key"


def _kdf(shared_secret: bytes, info: bytes, length: int, salt: Optional[bytes]) -> bytes:
    hkdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=salt, info=info)
    return hkdf.derive(shared_secret)


def derive_key(point: Point, length: int = 32, info: bytes = DEFAULT_INFO,
               salt: Optional[bytes] = None) -> bytes:
    """HKDF-SHA256 over the compressed encoding of a reconstructed point."""
    return _kdf(point.to_bytes(), info=info, length=length, salt=salt)
