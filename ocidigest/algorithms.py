# -*- coding: utf-8 -*-
"""Supported hash algorithms.

The set is closed. Every table keyed on :class:`Algorithm` lists all of its
members so adding one means touching each of them.
"""

import hashlib
from enum import Enum
from typing import Union


class Algorithm(Enum):
    """Hash algorithm of a digest, valued by its text name."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    def __str__(self):
        return self.value

    @property
    def size(self) -> int:
        """Number of bytes in a digest produced by this algorithm."""
        return _SIZES[self]

    @property
    def hexlength(self) -> int:
        """Number of hex characters in the text form of a digest."""
        return 2 * _SIZES[self]

    def new(self):
        """Return a fresh ``hashlib`` object for this algorithm."""
        return _CONSTRUCTORS[self]()


_SIZES = {
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}

_CONSTRUCTORS = {
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA384: hashlib.sha384,
    Algorithm.SHA512: hashlib.sha512,
}

DEFAULT_ALGORITHM = Algorithm.SHA256

AlgorithmLike = Union[Algorithm, str]


def lookup(algorithm: AlgorithmLike) -> Algorithm:
    """Return the :class:`Algorithm` for a member or its exact lowercase name.

    Raises:
        ValueError: If `algorithm` names no supported algorithm.
    """
    if isinstance(algorithm, Algorithm):
        return algorithm

    try:
        return Algorithm(algorithm)
    except ValueError:
        raise ValueError(
            "Unsupported algorithm {0!r}, expected one of: {1}".format(
                algorithm, ", ".join(a.value for a in Algorithm)
            )
        ) from None
