from collections import namedtuple

from ..color import normalize_hex, parse_hex
from ..errors import InvalidColorFormat
from .stops import DEFAULT_LIGHTNESS_MAX, DEFAULT_LIGHTNESS_MIN, DEFAULT_STOP, STOPS

BaseColorRequest = namedtuple(
    "BaseColorRequest",
    ["name", "hex", "anchor_stop", "lightness_min", "lightness_max"],
    defaults=(DEFAULT_STOP, DEFAULT_LIGHTNESS_MIN, DEFAULT_LIGHTNESS_MAX),
)

# A group defined by another group's anchor color instead of its own seed
LinkRequest = namedtuple(
    "LinkRequest", ["name", "source", "anchor_stop"], defaults=(DEFAULT_STOP,)
)


def _check_name(name):
    if not isinstance(name, str) or not name.strip() or "/" in name:
        raise InvalidColorFormat(f"invalid group name: {name!r}")
    return name.strip()


def _check_stop(stop):
    try:
        stop = int(stop)
    except (TypeError, ValueError):
        raise InvalidColorFormat(f"stop must be an integer, got {stop!r}") from None
    if stop not in STOPS:
        allowed = ", ".join(str(s) for s in STOPS)
        raise InvalidColorFormat(f"stop {stop} is not one of {allowed}")
    return stop


def make_request(
    name,
    hex_color,
    anchor_stop=DEFAULT_STOP,
    lightness_min=DEFAULT_LIGHTNESS_MIN,
    lightness_max=DEFAULT_LIGHTNESS_MAX,
):
    """Build a validated BaseColorRequest.

    The hex is lowercased, the stop must be one of the public stops and the
    bounds must satisfy ``0 <= lightness_min <= lightness_max <= 100``.
    """
    parse_hex(hex_color)
    try:
        lightness_min = float(lightness_min)
        lightness_max = float(lightness_max)
    except (TypeError, ValueError):
        raise InvalidColorFormat(
            f"lightness bounds must be numbers, got {lightness_min!r}/{lightness_max!r}"
        ) from None
    if not 0 <= lightness_min <= lightness_max <= 100:
        raise InvalidColorFormat(
            f"lightness bounds must satisfy 0 <= min <= max <= 100, "
            f"got min={lightness_min:g} max={lightness_max:g}"
        )
    return BaseColorRequest(
        name=_check_name(name),
        hex=normalize_hex(hex_color),
        anchor_stop=_check_stop(anchor_stop),
        lightness_min=lightness_min,
        lightness_max=lightness_max,
    )


def make_link(name, source, anchor_stop=DEFAULT_STOP):
    return LinkRequest(
        name=_check_name(name),
        source=_check_name(source),
        anchor_stop=_check_stop(anchor_stop),
    )


def parse_color_arg(text, lightness_min=DEFAULT_LIGHTNESS_MIN, lightness_max=DEFAULT_LIGHTNESS_MAX):
    """Parse ``name:value[:stop]`` from the command line.

    A value starting with ``#`` is a seed hex, anything else names the group
    to link to.
    """
    parts = text.split(":")
    if len(parts) not in (2, 3) or not all(p.strip() for p in parts):
        raise InvalidColorFormat(f"expected name:value[:stop], got {text!r}")
    name, value = parts[0], parts[1].strip()
    stop = parts[2] if len(parts) == 3 else DEFAULT_STOP
    if value.startswith("#"):
        return make_request(name, value, stop, lightness_min, lightness_max)
    return make_link(name, value, stop)


def check_unique(requests):
    """Reject a batch that addresses the same group twice."""
    seen = set()
    for request in requests:
        if request.name in seen:
            raise InvalidColorFormat(f"group {request.name!r} requested more than once")
        seen.add(request.name)
    return list(requests)
