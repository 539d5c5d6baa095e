# sss_core/errors.py


class SecretSharingError(Exception):
    """Base class for every error raised by sss_core."""


class EmptyShareSetError(SecretSharingError, ValueError):
    def __init__(self):
        super().__init__("cannot interpolate from an empty share set")


class DuplicateShareIndexError(SecretSharingError, ValueError):
    """Two shares use the same index, so the Lagrange denominator would be zero."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"duplicate share index: {index!r}")


class InvalidEncodingError(SecretSharingError, ValueError):
    pass


class HashToCurveError(SecretSharingError, RuntimeError):
    def __init__(self, tag: bytes, attempts: int):
        self.tag = tag
        self.attempts = attempts
        super().__init__(f"no curve point found for tag {tag!r} after {attempts} attempts")
