# -*- coding: utf-8 -*-

from io import BytesIO, StringIO

import pytest
from fs.errors import PermissionDenied
from fs.memoryfs import MemoryFS

import ocidigest
import ocidigest.files
from ocidigest import Algorithm, Hasher, ParseError
from ocidigest.files import Stream, load_fs

from .vectors import FOO


@pytest.fixture
def testpath(tmpdir):
    return tmpdir.mkdir("ocidigest")


@pytest.fixture
def filepath(testpath):
    testfile = testpath.join("foo.txt")
    testfile.write(b"foo")
    return testfile


@pytest.fixture
def stringio():
    return StringIO(u"foo")


@pytest.fixture
def fileio(filepath):
    io = open(str(filepath), "rb")

    yield io

    io.close()


@pytest.fixture
def memfs():
    with MemoryFS() as filesystem:
        filesystem.makedir("blobs")
        filesystem.writebytes("blobs/foo", b"foo")
        yield filesystem


@pytest.fixture
def foo_digest():
    return ocidigest.parse("sha256:" + FOO[Algorithm.SHA256])


def test_computehash_stringio(stringio, foo_digest):
    assert ocidigest.computehash(stringio) == foo_digest


def test_computehash_fileobj(fileio, foo_digest):
    fileio.read(1)

    assert ocidigest.computehash(fileio) == foo_digest
    assert not fileio.closed
    assert fileio.tell() == 1


def test_computehash_file(filepath, foo_digest):
    assert ocidigest.computehash(str(filepath)) == foo_digest


def test_computehash_memoryfs(memfs, foo_digest):
    assert ocidigest.computehash("blobs/foo", fs=memfs) == foo_digest


def test_computehash_fs_url(testpath, filepath, foo_digest):
    assert ocidigest.computehash("foo.txt", fs=str(testpath)) == foo_digest


def test_computehash_algorithm(stringio, algorithm):
    digest = ocidigest.computehash(stringio, algorithm=algorithm)

    assert digest.algorithm is algorithm
    assert digest.hexdigest() == FOO[algorithm]


def test_computehash_chunk_size():
    data = bytes(range(256)) * 100
    digest = ocidigest.computehash(BytesIO(data), chunk_size=7)

    assert digest == Hasher().chain(data).finish()


def test_computehash_text_encoded():
    text = u"café " * 1000

    digest = ocidigest.computehash(StringIO(text), chunk_size=3)

    assert digest == Hasher().chain(text.encode("utf8")).finish()


@pytest.mark.parametrize("content", ["foo", 42, None])
def test_computehash_error(content):
    with pytest.raises(ValueError):
        ocidigest.computehash(content)


def test_computehash_memoryfs_missing(memfs):
    with pytest.raises(ValueError):
        ocidigest.computehash("blobs/bar", fs=memfs)


def test_check(stringio, foo_digest):
    assert ocidigest.check(stringio, foo_digest)
    assert ocidigest.check(stringio, str(foo_digest))
    assert ocidigest.check(stringio, foo_digest.hexdigest())


def test_check_mismatch(memfs):
    memfs.writebytes("blobs/foo", b"bar")

    assert not ocidigest.check("blobs/foo", "sha256:" + FOO[Algorithm.SHA256], fs=memfs)


def test_check_algorithm(filepath, algorithm):
    digest = "{0}:{1}".format(algorithm, FOO[algorithm])

    assert ocidigest.check(str(filepath), digest)


def test_check_parse_error(stringio):
    with pytest.raises(ParseError):
        ocidigest.check(stringio, "sha256:nope")


def test_stream_iter(fileio):
    fileio.read(2)
    stream = Stream(fileio, chunk_size=1)

    assert list(stream) == [b"f", b"o", b"o"]
    assert list(stream) == [b"f", b"o", b"o"]

    stream.close()
    assert fileio.tell() == 2
    assert not fileio.closed


def test_stream_close_opened(filepath):
    stream = Stream(str(filepath))
    obj = stream._obj

    assert stream.read() == b"foo"

    stream.close()
    stream.close()

    assert obj.closed

    with pytest.raises(ValueError):
        stream.read()


def test_stream_read_holds_back_text():
    stream = Stream(StringIO(u"éé"))

    assert stream.read(3) == b"\xc3\xa9\xc3"
    assert stream.read(3) == b"\xa9"
    assert stream.read(3) == b""


def test_load_fs(testpath, memfs):
    assert load_fs(memfs) is memfs

    with load_fs(str(testpath)) as filesystem:
        assert filesystem.isdir("/")


class UnreadableFS(MemoryFS):
    def openbin(self, path, mode="r", buffering=-1, **options):
        raise PermissionDenied(path)


def test_stream_open_error_closes_filesystem(monkeypatch, filepath):
    opened = []

    def osfs(root):
        opened.append(UnreadableFS())
        return opened[0]

    monkeypatch.setattr(ocidigest.files, "OSFS", osfs)

    with pytest.raises(PermissionDenied):
        Stream(str(filepath))

    assert len(opened) == 1
    assert opened[0].isclosed()
