import hashlib
import os

import pytest

from sss_core import G, P, HashToCurveError, digest, hash_to_point, keccak256, sha256
from sss_core import hashing


def _reference_x(tag: bytes) -> int:
    """Independent re-derivation: first sha256(tag || u32be counter) with x^3 + 7 a square mod p."""
    for counter in range(256):
        x = int.from_bytes(hashlib.sha256(tag + counter.to_bytes(4, "big")).digest(), "big")
        if x < P and pow((x * x * x + 7) % P, (P - 1) // 2, P) == 1:
            return x
    raise AssertionError("no candidate found")


def test_known_digests():
    assert sha256(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    assert digest("SHA256", b"abc") == hashlib.sha256(b"abc").digest()
    with pytest.raises(ValueError):
        digest("sha1", b"abc")


def test_hash_to_point_deterministic():
    assert hash_to_point(b"tag") == hash_to_point(b"tag")
    assert hash_to_point("tag") == hash_to_point(b"tag")


@pytest.mark.parametrize("tag", [b"", b"tag", b"sss-core/Q/0", b"sss-core/Q/1", "ünïcode".encode()])
def test_hash_to_point_reproducible(tag):
    point = hash_to_point(tag)
    x = _reference_x(tag)
    assert point.x == x
    assert point.y % 2 == 0
    assert point.has_even_y()
    assert point.to_bytes() == b"\x02" + x.to_bytes(32, "big")
    assert (point.y ** 2 - x ** 3 - 7) % P == 0


def test_distinct_tags_give_distinct_points():
    points = {hash_to_point(f"Q{i}") for i in range(20)}
    assert len(points) == 20
    assert G not in points


def test_hash_to_point_exhaustion(monkeypatch):
    monkeypatch.setattr(hashing, "_is_valid_x", lambda x: False)
    with pytest.raises(HashToCurveError) as exc:
        hash_to_point(b"tag", max_attempts=5)
    assert exc.value.attempts == 5
    assert exc.value.tag == b"tag"


def test_hash_to_point_rejects_zero_cap():
    with pytest.raises(ValueError):
        hash_to_point(b"tag", max_attempts=0)


def test_is_valid_x():
    assert hashing._is_valid_x(G.x)
    assert not hashing._is_valid_x(P)


@pytest.mark.parametrize("tag,expected", [
    (b"sss-core/tests/Q", "02161196599f50ee687242c3f482fd911f87645dbd0539d6436ba4619c3af95afa"),
    (b"Q1", "0219ba9202b93d53b4cdd540a43adfb0cae93f8b2ad1d66a6ab2425adc7dadab6f"),
    (b"", "02b40711a88c7039756fb8a73827eabe2c0fe5a0346ca7e0a104adc0fc764f528d"),
])
def test_hash_to_point_known_answers(tag, expected):
    assert hash_to_point(tag).to_bytes().hex() == expected


def test_hash_to_point_ignores_environment(tmp_path, monkeypatch):
    # "Q1" 在 counter=1 才命中；若上限被 .env 缩为 1 就会失败
    (tmp_path / ".env").write_text("SSS_H2C_MAX_ATTEMPTS=1\nUNRELATED_APP_SECRET=leaked\n")
    nested = tmp_path / "sub" / "dir"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    monkeypatch.setenv("SSS_H2C_MAX_ATTEMPTS", "1")

    point = hash_to_point(b"Q1")
    assert point.to_bytes().hex() == "0219ba9202b93d53b4cdd540a43adfb0cae93f8b2ad1d66a6ab2425adc7dadab6f"
    assert "UNRELATED_APP_SECRET" not in os.environ
