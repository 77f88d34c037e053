"""Document ids are the 16 UUID bytes as URL-safe base64 without padding."""

import base64
import binascii
import uuid

from ..errors import MalformedDocument


def encode_id(value):
    return base64.urlsafe_b64encode(value.bytes).rstrip(b"=").decode("ascii")


def decode_id(text):
    if not isinstance(text, str):
        raise MalformedDocument(f"color id must be a string, got {text!r}")
    padded = text + "=" * (-len(text) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        return uuid.UUID(bytes=raw)
    except (binascii.Error, UnicodeEncodeError, ValueError) as e:
        raise MalformedDocument(f"color id {text!r} is not an encoded UUID") from e
