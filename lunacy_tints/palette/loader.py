import json

from ..errors import InvalidColorFormat, IoFailure
from ..scale import DEFAULT_STOP, check_unique, make_link, make_request
from .reconcile import MERGE_MODES


def _request_from_value(name, value):
    if isinstance(value, str):
        if value.startswith("#"):
            return make_request(name, value)
        return make_link(name, value)

    if isinstance(value, dict):
        stop = value.get("stop", DEFAULT_STOP)
        if "link" in value:
            return make_link(name, value["link"], stop)
        if "hex" in value:
            return make_request(
                name,
                value["hex"],
                stop,
                value.get("lightness_min", 0),
                value.get("lightness_max", 100),
            )

    raise InvalidColorFormat(
        f"color {name!r}: expected a hex string, a group name, "
        f"or an object with 'hex' or 'link', got {value!r}"
    )


def load_color_scheme(json_path):
    """Load base color requests from a color scheme JSON file.

    Top-level keys are group names. Keys starting with ``_`` are metadata:
    ``_group`` (group prefix) and ``_merge`` (merge mode) are returned,
    anything else is ignored.

    Args:
        json_path: Path to color scheme JSON file

    Returns:
        tuple: (list of BaseColorRequest/LinkRequest, metadata dict)
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise IoFailure(f"cannot read color scheme {json_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidColorFormat(f"color scheme {json_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidColorFormat(f"color scheme {json_path} must be a JSON object")

    requests = []
    metadata = {}

    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            if key in ("_group", "_merge") and isinstance(value, str):
                metadata[key[1:]] = value
            if key == "_merge" and value not in MERGE_MODES:
                raise InvalidColorFormat(
                    f"color scheme {json_path}: unknown merge mode {value!r}, "
                    f"expected one of {', '.join(MERGE_MODES)}"
                )
            continue

        requests.append(_request_from_value(key, value))

    if not requests:
        raise InvalidColorFormat(f"color scheme {json_path} defines no colors")

    return check_unique(requests), metadata
