# -*- coding: utf-8 -*-
"""Module for the Hasher class."""

from .algorithms import AlgorithmLike, DEFAULT_ALGORITHM, lookup
from .digest import Digest


class Hasher(object):
    """Incremental hash over one of the supported algorithms.

    The compression function itself comes from ``hashlib``; this class only
    picks the algorithm and shapes the result as a :class:`Digest`.

    Example::

        digest = Hasher().chain(b"Hello").chain(b", world!").finish()

    Args:
        algorithm: :class:`~ocidigest.algorithms.Algorithm` member or its
            name. Defaults to ``'sha256'``.

    Attributes:
        algorithm (Algorithm): Algorithm of the digests this hasher produces.
    """

    def __init__(self, algorithm: AlgorithmLike = DEFAULT_ALGORITHM):
        self.algorithm = lookup(algorithm)
        self._state = self.algorithm.new()

    @classmethod
    def default(cls) -> "Hasher":
        """Return a sha256 hasher."""
        return cls()

    @property
    def finished(self) -> bool:
        """Whether :meth:`finish` has consumed this hasher."""
        return self._state is None

    def reset(self) -> None:
        """Discard everything fed so far."""
        self._live()
        self._state = self.algorithm.new()

    def update(self, data) -> None:
        """Feed the bytes-like `data` into the running hash."""
        self._live().update(data)

    def chain(self, data) -> "Hasher":
        """Feed `data` and return this hasher so calls can be chained."""
        self.update(data)
        return self

    def finish(self) -> Digest:
        """Return the digest of everything fed so far.

        The hasher is consumed: any further call on it raises ``ValueError``.
        Use :meth:`copy` first to keep hashing.
        """
        state = self._live()
        self._state = None
        return Digest(self.algorithm, state.digest())

    def copy(self) -> "Hasher":
        """Return an independent hasher with the same in-progress state."""
        clone = self.__class__.__new__(self.__class__)
        clone.algorithm = self.algorithm
        clone._state = self._live().copy()
        return clone

    __copy__ = copy

    def measure(self, inner):
        """Wrap `inner` in a :class:`~ocidigest.io.Measurer` that feeds this
        hasher with every byte read from or written to it.
        """
        from .io import Measurer

        return Measurer(self, inner)

    def _live(self):
        if self._state is None:
            raise ValueError("Hasher already finished")
        return self._state

    def __repr__(self):
        return "Hasher({0}{1})".format(
            self.algorithm, ", finished" if self.finished else ""
        )
