# -*- coding: utf-8 -*-
"""JSON support: a digest is encoded as one string in its text form and
decoded with :func:`~ocidigest.digest.parse`, so decode failures raise the
same :class:`~ocidigest.errors.ParseError` as parsing does.
"""

import json

from .digest import Digest, format, parse


class DigestEncoder(json.JSONEncoder):
    """JSON encoder writing :class:`Digest` values as strings."""

    def default(self, o):
        if isinstance(o, Digest):
            return format(o)
        return super().default(o)


def dumps(obj, **kwargs) -> str:
    """Serialize `obj` to JSON, encoding any digest it contains as a
    string.
    """
    kwargs.setdefault("cls", DigestEncoder)
    return json.dumps(obj, **kwargs)


def to_json(digest: Digest) -> str:
    """Return `digest` as a JSON string literal."""
    return json.dumps(format(digest))


def from_json(text) -> Digest:
    """Decode a JSON document holding a single digest string.

    Raises:
        TypeError: If the document is not a JSON string.
        ParseError: If the string is not a valid digest.
    """
    value = json.loads(text)

    if not isinstance(value, str):
        raise TypeError(
            "Expected a JSON string holding a digest, got {0}".format(
                type(value).__name__
            )
        )

    return parse(value)
