# -*- coding: utf-8 -*-
"""Module for the Digest value and its text form."""

from typing import Union

from .algorithms import Algorithm, AlgorithmLike, DEFAULT_ALGORITHM, lookup
from .errors import Error, ParseError


_NIBBLES = {char: value for value, char in enumerate(b"0123456789abcdef")}


class Digest(object):
    """Content-addressable digest following the OCI image specification.

    A digest is the pair of an :class:`Algorithm` and the raw bytes it
    produced, rendered as ``<algorithm>:<lowercase hex>``. Instances are
    immutable and compare equal when both the algorithm and the bytes match,
    so they can be used as dictionary keys.

    Attributes:
        algorithm (Algorithm): Algorithm that produced :attr:`value`.
        value (bytes): Raw digest bytes, exactly ``algorithm.size`` long.
    """

    __slots__ = ("algorithm", "value")

    def __init__(self, algorithm: AlgorithmLike, value: Union[bytes, bytearray]):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(
                "Digest value must be bytes-like, not {0}".format(type(value).__name__)
            )

        algorithm = lookup(algorithm)
        value = bytes(value)

        if len(value) != algorithm.size:
            raise ValueError(
                "A {0} digest is {1} bytes long, got {2}".format(
                    algorithm, algorithm.size, len(value)
                )
            )

        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "value", value)

    @classmethod
    def sha256(cls, value: bytes) -> "Digest":
        return cls(Algorithm.SHA256, value)

    @classmethod
    def sha384(cls, value: bytes) -> "Digest":
        return cls(Algorithm.SHA384, value)

    @classmethod
    def sha512(cls, value: bytes) -> "Digest":
        return cls(Algorithm.SHA512, value)

    @classmethod
    def parse(cls, text: str) -> "Digest":
        """Alias of :func:`parse`."""
        return parse(text)

    @property
    def algorithm_name(self) -> str:
        """Text name of :attr:`algorithm`, e.g. ``'sha256'``."""
        return self.algorithm.value

    def hexdigest(self) -> str:
        """Return the hex part of the text form."""
        return self.value.hex()

    def hasher(self):
        """Return a fresh :class:`~ocidigest.hasher.Hasher` using the same
        algorithm as this digest.
        """
        from .hasher import Hasher

        return Hasher(self.algorithm)

    def verify(self, inner):
        """Wrap the readable `inner` in a
        :class:`~ocidigest.io.Verifier` that checks its content against this
        digest once the end of the stream is read.
        """
        from .io import Verifier

        return Verifier(self, inner)

    def __setattr__(self, name, value):
        raise AttributeError("Digest objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Digest objects are immutable")

    def __reduce__(self):
        return (self.__class__, (self.algorithm, self.value))

    def __eq__(self, other):
        if isinstance(other, Digest):
            return self.algorithm is other.algorithm and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((self.algorithm, self.value))

    def __bytes__(self):
        return self.value

    def __len__(self):
        return len(self.value)

    def __str__(self):
        return format(self)

    def __repr__(self):
        return "Digest({0})".format(format(self))


def parse(text: str) -> Digest:
    """Parse ``<algorithm>:<hex>`` text into a :class:`Digest`.

    Text without a ``:`` is read as a bare sha256 hex digest, which is how
    digests were written before they carried an algorithm.

    Checks run in order: the algorithm must be one of the lowercase names in
    :class:`Algorithm`, the hex must encode to exactly twice the algorithm's
    byte size in UTF-8, and every hex character must be in ``[0-9a-f]``.

    Args:
        text: Digest in text form.

    Returns:
        Digest: The parsed digest.

    Raises:
        ParseError: With :attr:`~ParseError.kind` set to the first check that
            failed.
    """
    if not isinstance(text, str):
        raise TypeError(
            "Digest text must be a str, not {0}".format(type(text).__name__)
        )

    name, sep, hexpart = text.partition(":")
    if not sep:
        name, hexpart = DEFAULT_ALGORITHM.value, text

    try:
        algorithm = Algorithm(name)
    except ValueError:
        raise ParseError(Error.ALGORITHM) from None

    raw = hexpart.encode("utf-8", "surrogatepass")
    if len(raw) != algorithm.hexlength:
        raise ParseError(Error.LENGTH)

    value = bytearray(algorithm.size)
    for i in range(algorithm.size):
        value[i] = _dehex(raw[2 * i]) << 4 | _dehex(raw[2 * i + 1])

    return Digest(algorithm, value)


def format(digest: Digest) -> str:
    """Render `digest` as ``<algorithm>:<lowercase hex>``."""
    return "{0}:{1}".format(digest.algorithm.value, digest.value.hex())


def algorithm_name(digest: Digest) -> str:
    """Return the algorithm name of `digest`."""
    return digest.algorithm.value


def _dehex(char: int) -> int:
    try:
        return _NIBBLES[char]
    except KeyError:
        raise ParseError(Error.CHARACTER) from None
