# sss_core/__init__.py
from .curve import N, P, G, Scalar, Point
from .errors import (
    SecretSharingError, EmptyShareSetError, DuplicateShareIndexError,
    InvalidEncodingError, HashToCurveError,
)
from .sharing import SecretShare, PointShare
from .polynomials import (
    SecretSharingPolynomial, PointPolynomial,
    lagrange_weights, SecretShareInterpolator, PointShareInterpolator,
)
from .hashing import sha256, keccak256, digest, hash_to_point
from .coefficients import random_coefficients
from .kdf import derive_key
from .shamir import shamir_split, shamir_reconstruct
