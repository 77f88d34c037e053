from .json_export import export_json, scales_to_dict
from .listing import print_records, print_scales
from .preview import render_preview, save_preview

__all__ = [
    "export_json",
    "print_records",
    "print_scales",
    "render_preview",
    "save_preview",
    "scales_to_dict",
]
