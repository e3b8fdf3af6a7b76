# -*- coding: utf-8 -*-
"""Compute and check the digest of a file-like object or a file in a
PyFilesystem2 filesystem.
"""

import logging
import os
from contextlib import closing
from functools import partial
from typing import Optional, Union

import fs as pyfs
from fs.base import FS
from fs.osfs import OSFS

from .algorithms import AlgorithmLike, DEFAULT_ALGORITHM
from .digest import Digest, parse
from .errors import DigestMismatch
from .hasher import Hasher
from .io import measure, verify


logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024

FSLike = Union[FS, str]


def to_bytes(data):
    """Return `data` as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf8")
    return data


def load_fs(root: FSLike) -> FS:
    """Return `root` if it is already a filesystem, else open it as an FS URL
    or directory path.
    """
    if isinstance(root, FS):
        return root
    return pyfs.open_fs(root)


class Stream(object):
    """Common interface for file-like objects.

    The input `obj` can be a file-like object or a path to a file. A path is
    looked up in `fs` when one is given, otherwise on the local disk, and is
    opened until :meth:`close` is called. If `obj` is a file-like object, then
    its original position will be restored when :meth:`close` is called
    instead of closing the object. Closing of the object is deferred to
    whatever process passed it in.

    Text read from the object is encoded as UTF-8, so a :meth:`read` of
    ``size`` bytes may hold back the tail of a chunk for the next call.

    Args:
        obj: Readable object or path to a file.
        fs: Filesystem or FS URL that `obj` is a path in.
        chunk_size (int): Number of bytes yielded per iteration step.
    """

    def __init__(
        self,
        obj,
        fs: Optional[FSLike] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.chunk_size = chunk_size
        self._pos = None
        self._opened = False
        self._owned_fs = None
        self._pending = b""

        if hasattr(obj, "read"):
            if _seekable(obj):
                self._pos = obj.tell()
                obj.seek(0)
        else:
            obj = self._open(obj, fs)
            self._opened = True

        self._obj = obj

    def _open(self, path, fs):
        if fs is not None:
            filesystem = load_fs(fs)
            if filesystem is not fs:
                self._owned_fs = filesystem

            if not isinstance(path, str) or not filesystem.isfile(path):
                self._close_fs()
                raise ValueError(
                    "Could not locate file {0!r} in {1!r}".format(path, filesystem)
                )
            return self._openbin(filesystem, path)

        if not isinstance(path, (str, os.PathLike)) or not os.path.isfile(path):
            raise ValueError("Object must be a valid file path or a readable object.")

        path = os.path.abspath(path)
        self._owned_fs = OSFS(os.path.dirname(path))
        return self._openbin(self._owned_fs, os.path.basename(path))

    def _openbin(self, filesystem, path):
        try:
            return filesystem.openbin(path)
        except Exception:
            self._close_fs()
            raise

    def readable(self):
        return True

    def read(self, size=-1):
        """Read up to `size` bytes, or everything left when `size` is
        negative.
        """
        obj = self._checked()

        if size is None or size < 0:
            data, self._pending = self._pending + to_bytes(obj.read()), b""
            return data

        if not self._pending:
            chunk = obj.read(size)
            if chunk is None:
                return None
            self._pending = to_bytes(chunk)

        data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def __iter__(self):
        """Read underlying IO object and yield chunks of bytes. Return object
        to original position if we didn't open it originally.
        """
        obj = self._checked()
        if _seekable(obj):
            obj.seek(0)
        self._pending = b""

        while True:
            data = obj.read(self.chunk_size)

            if not data:
                break

            yield to_bytes(data)

        if self._pos is not None:
            obj.seek(self._pos)

    def close(self):
        """Close underlying IO object if we opened it, else return it to
        original position.
        """
        if self._obj is None:
            return

        obj, self._obj = self._obj, None

        if self._opened:
            obj.close()
        elif self._pos is not None:
            obj.seek(self._pos)

        self._close_fs()

    def _close_fs(self):
        if self._owned_fs is not None:
            self._owned_fs.close()
            self._owned_fs = None

    def _checked(self):
        if self._obj is None:
            raise ValueError("I/O operation on closed stream")
        return self._obj


def _seekable(obj):
    seekable = getattr(obj, "seekable", None)
    if seekable is not None:
        return seekable()
    return hasattr(obj, "seek") and hasattr(obj, "tell")


def computehash(
    content,
    algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    fs: Optional[FSLike] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Digest:
    """Compute the digest of `content`.

    Args:
        content: Readable object or path to a file.
        algorithm: Algorithm to hash with. Defaults to ``'sha256'``.
        fs: Filesystem or FS URL that a path `content` is looked up in.
        chunk_size: Number of bytes read at a time.

    Returns:
        Digest: Digest of the whole content.
    """
    with closing(Stream(content, fs=fs, chunk_size=chunk_size)) as stream:
        measurer = measure(Hasher(algorithm), stream)
        for _ in iter(partial(measurer.read, chunk_size), b""):
            pass
        digest = measurer.measure()
        measurer.detach()

    logger.debug("Computed %s for %r", digest, content)
    return digest


def check(
    content,
    digest: Union[Digest, str],
    fs: Optional[FSLike] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bool:
    """Return whether `content` hashes to `digest`.

    Args:
        content: Readable object or path to a file.
        digest: Expected digest, or its text form.
        fs: Filesystem or FS URL that a path `content` is looked up in.
        chunk_size: Number of bytes read at a time.

    Raises:
        ParseError: If `digest` is text that does not parse.
    """
    if not isinstance(digest, Digest):
        digest = parse(digest)

    with closing(Stream(content, fs=fs, chunk_size=chunk_size)) as stream:
        verifier = verify(digest, stream)
        try:
            for _ in iter(partial(verifier.read, chunk_size), b""):
                pass
        except DigestMismatch as exc:
            logger.debug("Content %r does not match: %s", content, exc)
            return False
        finally:
            verifier.detach()

    return True
