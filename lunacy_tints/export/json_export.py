import json

from ..errors import IoFailure


def scales_to_dict(scales):
    """``{group: {stop: hex}}`` for a mapping of group name to scale."""
    return {
        name: {str(color.stop): color.hex for color in colors}
        for name, colors in scales.items()
    }


def export_json(scales, filepath, group_prefix=None, source_file=None):
    """Export generated scales as JSON.

    Args:
        scales: Mapping of group name to GeneratedColor list
        filepath: Output file path
        group_prefix: Group prefix the scales were merged under, for metadata
        source_file: Edited document filename, for metadata
    """
    data = scales_to_dict(scales)

    if group_prefix:
        data["_group"] = group_prefix

    if source_file:
        data["_document"] = source_file

    try:
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise IoFailure(f"cannot write {filepath}: {e}") from e
