from .adapter import COLOR_VARIABLES, color_variables, load, save, touched_records
from .archive import DEFAULT_MEMBER, DocumentFile
from .ids import decode_id, encode_id

__all__ = [
    "COLOR_VARIABLES",
    "DEFAULT_MEMBER",
    "DocumentFile",
    "color_variables",
    "decode_id",
    "encode_id",
    "load",
    "save",
    "touched_records",
]
