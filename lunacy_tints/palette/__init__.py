from .loader import load_color_scheme
from .model import (
    DEFAULT_GROUP_PREFIX,
    Palette,
    PaletteEntry,
    PaletteGroup,
    group_of,
    new_entry,
    qualified_name,
    stop_of,
    suffix_of,
)
from .reconcile import (
    MERGE_MODES,
    MERGE_PRESERVE,
    MERGE_REPLACE,
    apply_request,
    reconcile,
    replace,
    resolve_link,
)

__all__ = [
    "DEFAULT_GROUP_PREFIX",
    "MERGE_MODES",
    "MERGE_PRESERVE",
    "MERGE_REPLACE",
    "Palette",
    "PaletteEntry",
    "PaletteGroup",
    "apply_request",
    "group_of",
    "load_color_scheme",
    "new_entry",
    "qualified_name",
    "reconcile",
    "replace",
    "resolve_link",
    "stop_of",
    "suffix_of",
]
