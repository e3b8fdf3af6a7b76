# -*- coding: utf-8 -*-
"""ocidigest works with content-addressable digests as used by OCI container
images: ``sha256:e3b0c442...``. What does that give you?

- A :class:`Digest` value that parses and formats that text strictly.
- A :class:`Hasher` computing a digest incrementally.
- :class:`Measurer` and :class:`Verifier` wrappers that hash a stream while it
  is read or written, the latter failing at end-of-stream if the content does
  not match the digest it was promised.

Example::

    digest = ocidigest.parse("sha256:2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae")

    with digest.verify(open("blob", "rb")) as blob:
        data = blob.read()  # raises DigestMismatch if the blob was tampered with
"""

import logging

from .__meta__ import (
    __title__,
    __summary__,
    __url__,
    __version__,
    __author__,
    __email__,
    __license__,
)

from .algorithms import Algorithm
from .digest import Digest, algorithm_name, format, parse
from .errors import DigestMismatch, Error, ParseError
from .files import check, computehash
from .hasher import Hasher
from .io import Measurer, Verifier, measure, verify


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = (
    "Algorithm",
    "Digest",
    "DigestMismatch",
    "Error",
    "Hasher",
    "Measurer",
    "ParseError",
    "Verifier",
    "algorithm_name",
    "check",
    "computehash",
    "format",
    "measure",
    "parse",
    "verify",
)
