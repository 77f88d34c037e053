class TintsError(Exception):
    """Base class for every error raised while editing a document palette."""


class InvalidColorFormat(TintsError, ValueError):
    """A seed color, stop or lightness bound is not acceptable."""


class InvalidColorValue(InvalidColorFormat):
    """Hex digits that do not parse as an unsigned integer."""


class ReferenceNotFound(TintsError, LookupError):
    """A link color names a group that is not in the palette."""


class MalformedDocument(TintsError, ValueError):
    """The document tree does not have the expected shape."""


class UnsupportedDocumentVersion(MalformedDocument):
    """The document container is not a layout this tool can read."""


class IoFailure(TintsError, OSError):
    """Reading or writing a file failed."""
