from .color import hex_to_hsl, hsl_to_hex
from .editor import apply_requests, edit_document
from .errors import (
    InvalidColorFormat,
    InvalidColorValue,
    IoFailure,
    MalformedDocument,
    ReferenceNotFound,
    TintsError,
    UnsupportedDocumentVersion,
)
from .scale import BaseColorRequest, LinkRequest, generate, make_link, make_request

__version__ = "0.1.0"

__all__ = [
    "BaseColorRequest",
    "InvalidColorFormat",
    "InvalidColorValue",
    "IoFailure",
    "LinkRequest",
    "MalformedDocument",
    "ReferenceNotFound",
    "TintsError",
    "UnsupportedDocumentVersion",
    "apply_requests",
    "edit_document",
    "generate",
    "hex_to_hsl",
    "hsl_to_hex",
    "make_link",
    "make_request",
]
