# -*- coding: utf-8 -*-
"""Raw I/O wrappers that hash the bytes flowing through them.

:class:`Measurer` keeps a running digest of whatever is read from or written
to the channel it wraps. :class:`Verifier` reads through a :class:`Measurer`
and, when the channel reports end-of-stream, checks the running digest
against the expected one. Neither buffers the content, so streams of any
size are measured or verified in constant memory.

Both wrappers own their channel: closing the wrapper closes the channel.
Call :meth:`Measurer.into_inner` to take the channel back instead.
"""

import io

from .digest import Digest
from .errors import DigestMismatch
from .hasher import Hasher


class Measurer(io.RawIOBase):
    """Raw stream computing the digest of the data passing through it.

    Every byte returned by :meth:`readinto` or accepted by :meth:`write` is
    fed to the hasher exactly once, in order.

    Example::

        measurer = Hasher().measure(io.BytesIO(b"hello world"))
        measurer.read()
        measurer.measure()  # sha256 of b"hello world"

    Args:
        hasher (Hasher): Hasher fed with the data. The measurer takes
            ownership of it.
        inner: Readable and/or writable binary channel.
    """

    def __init__(self, hasher: Hasher, inner):
        super().__init__()
        self._hasher = hasher
        self._inner = inner

    @property
    def algorithm(self):
        return self._checked_hasher().algorithm

    def measure(self) -> Digest:
        """Return the digest of the data seen so far. The running hash is
        left untouched and keeps accumulating.
        """
        return self._checked_hasher().copy().finish()

    def readable(self):
        inner = self._checked()
        readable = getattr(inner, "readable", None)
        if readable is not None:
            return readable()
        return hasattr(inner, "read")

    def writable(self):
        inner = self._checked()
        writable = getattr(inner, "writable", None)
        if writable is not None:
            return writable()
        return hasattr(inner, "write")

    def readinto(self, b):
        """Read into `b` from the channel and hash exactly the bytes read.

        Failures of the channel propagate unchanged and nothing is hashed.
        """
        inner = self._checked()

        readinto = getattr(inner, "readinto", None)
        if readinto is not None:
            n = readinto(b)
        else:
            data = inner.read(len(b))
            if data is None:
                return None
            n = len(data)
            b[:n] = data

        if n:
            with memoryview(b) as view:
                self._hasher.update(view[:n])

        return n

    def write(self, b):
        """Write `b` to the channel and hash the bytes it accepted."""
        n = self._checked().write(b)

        if n:
            with memoryview(b) as view:
                self._hasher.update(view[:n])

        return n

    def flush(self):
        """Flush the channel. Nothing is hashed."""
        flush = getattr(self._checked(), "flush", None)
        if flush is not None:
            flush()

    def close(self):
        """Flush and close this wrapper and the channel it wraps. The digest
        is not checked or finished on close.
        """
        if self.closed:
            return

        try:
            super().close()
        finally:
            close = getattr(self._inner, "close", None)
            if close is not None:
                close()

    def detach(self):
        """Return the wrapped channel, discarding the hash state. The
        measurer is unusable afterwards and the channel stays open.
        """
        inner = self._checked()
        super().close()
        self._inner = None
        self._hasher = None
        return inner

    into_inner = detach

    def _checked(self):
        if self._inner is None:
            raise ValueError("raw stream has been detached")
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        return self._inner

    def _checked_hasher(self):
        if self._hasher is None:
            raise ValueError("raw stream has been detached")
        return self._hasher


class Verifier(io.RawIOBase):
    """Raw read-only stream checking its content against a digest.

    Reads are forwarded to an inner :class:`Measurer`. Short reads are never
    compared; only a zero-length read into a non-empty buffer (end-of-stream)
    triggers the check, and if the data read so far does not hash to
    :attr:`digest` that read raises :class:`~ocidigest.errors.DigestMismatch` instead of returning.
    Every later end-of-stream read repeats the check.

    A stream that is never read to its end is never checked.

    Args:
        digest (Digest): Expected digest of the whole stream.
        inner: Readable binary channel.

    Attributes:
        digest (Digest): Expected digest of the whole stream.
    """

    def __init__(self, digest: Digest, inner):
        super().__init__()
        self.digest = digest
        self._measurer = Measurer(digest.hasher(), inner)

    def measure(self) -> Digest:
        """Return the digest of the data read so far."""
        return self._measurer.measure()

    def readable(self):
        return self._measurer.readable()

    def writable(self):
        return False

    def readinto(self, b):
        n = self._measurer.readinto(b)

        # An empty buffer reads nothing without reaching end-of-stream.
        if n == 0 and len(b):
            actual = self._measurer.measure()
            if actual != self.digest:
                raise DigestMismatch(self.digest, actual)

        return n

    def close(self):
        """Close this wrapper and the channel it wraps without checking the
        digest.
        """
        if self.closed:
            return

        try:
            super().close()
        finally:
            self._measurer.close()

    def detach(self):
        """Return the wrapped channel. The verifier is unusable afterwards
        and the channel stays open.
        """
        inner = self._measurer.detach()
        super().close()
        return inner

    into_inner = detach


def measure(hasher: Hasher, inner) -> Measurer:
    """Bind `hasher` to the channel `inner`."""
    return Measurer(hasher, inner)


def verify(digest: Digest, inner) -> Verifier:
    """Wrap the readable `inner` so its content is checked against `digest`
    at end-of-stream.
    """
    return Verifier(digest, inner)
