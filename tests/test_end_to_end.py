from itertools import combinations

import pytest

from sss_core import (
    PointShareInterpolator, SecretSharingPolynomial, hash_to_point, sha256,
    shamir_reconstruct, shamir_split,
)

K = 0x5EC12E7C0FFEE5EC12E7C0FFEE5EC12E7C0FFEE


def test_derived_secret_flow():
    # 庄家：二次多项式，f(0) = K，索引 1..5 发出 5 份
    f = SecretSharingPolynomial([K, 0x1111, 0x2222222222])
    shares = f.issue_shares(range(1, 6))

    for subset in combinations(shares, 3):
        assert shamir_reconstruct(subset) == K

    q = hash_to_point(b"sss-core/derived-secret/#1")
    z = f * q

    # 两份预分发的点分片（新索引）+ 持有者 5 自己算的 y_5 * Q
    pre_shares = z.issue_shares([6, 7])
    derived = shares[4] * q
    assert derived.index == 5

    interp = PointShareInterpolator(pre_shares + [derived])
    assert interp.evaluate(0) == z.evaluate(0)
    assert interp.evaluate(0) == q * K
    assert interp.derive_secret(0) == sha256(z.evaluate(0).to_bytes())


def test_independent_q_give_independent_secrets():
    f = SecretSharingPolynomial([K, 3, 5])
    shares = f.issue_shares([1, 2, 3])
    secrets = set()
    for n in range(4):
        q = hash_to_point(f"sss-core/derived-secret/#{n}")
        interp = PointShareInterpolator(s * q for s in shares)
        secrets.add(interp.derive_secret(0))
    assert len(secrets) == 4


def test_shamir_split_and_reconstruct():
    shares = shamir_split(424242, n=6, t=4)
    assert [s.index for s in shares] == [1, 2, 3, 4, 5, 6]
    assert shamir_reconstruct(shares[:4]) == 424242
    assert shamir_reconstruct(shares) == 424242
    assert shamir_reconstruct(shares[:3]) != 424242


def test_shamir_edge_cases():
    assert shamir_reconstruct(shamir_split(77, n=1, t=1)) == 77
    assert shamir_reconstruct(shamir_split(88, n=4, t=4)) == 88
    with pytest.raises(ValueError):
        shamir_split(1, n=2, t=3)
    with pytest.raises(ValueError):
        shamir_split(1, n=2, t=0)
