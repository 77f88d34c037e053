from .generator import GeneratedColor, distribute_lightness, generate
from .request import (
    BaseColorRequest,
    LinkRequest,
    check_unique,
    make_link,
    make_request,
    parse_color_arg,
)
from .stops import DEFAULT_STOP, STOPS

__all__ = [
    "BaseColorRequest",
    "DEFAULT_STOP",
    "GeneratedColor",
    "LinkRequest",
    "STOPS",
    "check_unique",
    "distribute_lightness",
    "generate",
    "make_link",
    "make_request",
    "parse_color_arg",
]
