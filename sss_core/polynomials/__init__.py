# sss_core/polynomials/__init__.py
from .standard import SecretSharingPolynomial, PointPolynomial
from .lagrange import lagrange_weights, SecretShareInterpolator, PointShareInterpolator
