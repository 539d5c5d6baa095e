import pytest

from sss_core import SecretSharingPolynomial, hash_to_point


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SSS_H2C_MAX_ATTEMPTS", raising=False)


@pytest.fixture(scope="session")
def q():
    return hash_to_point(b"sss-core/tests/Q")


@pytest.fixture
def poly():
    # f(x) = 4 + x + 8x^2
    return SecretSharingPolynomial([4, 1, 8])
