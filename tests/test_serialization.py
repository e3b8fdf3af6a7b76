# -*- coding: utf-8 -*-

import json

import pytest

import ocidigest
from ocidigest import Error, ParseError
from ocidigest.serialization import DigestEncoder, dumps, from_json, to_json


DIGEST = "sha256:2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"


@pytest.fixture
def digest():
    return ocidigest.parse(DIGEST)


def test_serialization_encode(digest):
    assert to_json(digest) == '"{0}"'.format(DIGEST)


def test_serialization_decode(digest):
    assert from_json('"{0}"'.format(DIGEST)) == digest


def test_serialization_decode_compat(digest):
    assert from_json('"{0}"'.format(DIGEST.split(":")[1])) == digest


@pytest.mark.parametrize(
    "document,kind",
    [
        ('"md5:d3b07384d113edec49eaa6238ad5ff00"', Error.ALGORITHM),
        ('"sha256:abc"', Error.LENGTH),
        ('"{0}"'.format(DIGEST.upper().replace("SHA256", "sha256")), Error.CHARACTER),
    ],
)
def test_serialization_decode_error(document, kind):
    with pytest.raises(ParseError) as excinfo:
        from_json(document)

    assert excinfo.value.kind is kind


@pytest.mark.parametrize("document", ["42", "null", '["{0}"]'.format(DIGEST)])
def test_serialization_decode_not_a_string(document):
    with pytest.raises(TypeError):
        from_json(document)


def test_serialization_dumps(digest):
    document = {"config": {"digest": digest, "size": 3}, "layers": [digest]}

    assert json.loads(dumps(document)) == {
        "config": {"digest": DIGEST, "size": 3},
        "layers": [DIGEST],
    }


def test_serialization_encoder(digest):
    assert json.dumps([digest], cls=DigestEncoder) == '["{0}"]'.format(DIGEST)

    with pytest.raises(TypeError):
        json.dumps([object()], cls=DigestEncoder)
