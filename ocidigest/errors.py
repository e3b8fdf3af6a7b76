# -*- coding: utf-8 -*-
"""Exceptions raised while parsing and verifying digests.
"""

from enum import Enum


class Error(Enum):
    """Kind of failure reported by :func:`ocidigest.parse`."""

    ALGORITHM = "unsupported algorithm"
    CHARACTER = "invalid character"
    LENGTH = "invalid length"

    def __str__(self):
        return self.value


class ParseError(ValueError):
    """Raised when text is not a well formed digest.

    Attributes:
        kind (Error): Which check the text failed.
    """

    def __init__(self, kind: Error):
        super().__init__(str(kind))
        self.kind = kind

    def __eq__(self, other):
        if isinstance(other, ParseError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self):
        return hash(self.kind)

    def __reduce__(self):
        return (self.__class__, (self.kind,))


class DigestMismatch(OSError):
    """Raised at end-of-stream when the content read through a verifier does
    not hash to the expected digest.

    Attributes:
        expected (Digest): Digest the stream was supposed to have.
        actual (Digest): Digest of the bytes actually read.
    """

    def __init__(self, expected, actual):
        super().__init__(
            "digest mismatch: expected {0}, got {1}".format(expected, actual)
        )
        self.expected = expected
        self.actual = actual

    def __reduce__(self):
        return (self.__class__, (self.expected, self.actual))
