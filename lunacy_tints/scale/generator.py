import logging
from collections import namedtuple

import numpy as np

from ..color import hex_to_hsl, hsl_to_hex
from .stops import DISTRIBUTION_GRID, STOPS, TRIM_HIGH, TRIM_LOW

logger = logging.getLogger(__name__)

GeneratedColor = namedtuple("GeneratedColor", ["group_name", "stop", "hex"])


def distribute_lightness(lightness, anchor_stop, lightness_min, lightness_max):
    """Spread lightness over the distribution grid.

    The lightest boundary is pinned to ``lightness_max``, the darkest to
    ``lightness_min`` and the anchor to the seed lightness. Every other grid
    point moves linearly from the anchor towards the boundary on its side,
    one step per 100 of stop distance, and is rounded to a whole percent.

    Args:
        lightness: Seed lightness (0-100)
        anchor_stop: Grid value carrying the seed
        lightness_min: Lightness at the darkest boundary
        lightness_max: Lightness at the lightest boundary

    Returns:
        numpy array of lightness values aligned with DISTRIBUTION_GRID
    """
    grid = np.asarray(DISTRIBUTION_GRID, dtype=float)
    anchor_index = DISTRIBUTION_GRID.index(anchor_stop)
    last_index = len(DISTRIBUTION_GRID) - 1

    # Steps between the anchor and each boundary, boundaries excluded
    lighter_steps = abs(anchor_index - 0) - 1
    darker_steps = abs(anchor_index - last_index) - 1

    distance = np.abs(grid - anchor_stop) / 100
    lighter = lightness + (lightness_max - lightness) / lighter_steps * distance
    darker = lightness - (lightness - lightness_min) / darker_steps * distance

    tweaks = np.floor(np.where(grid < anchor_stop, lighter, darker) + 0.5)
    tweaks[0] = lightness_max
    tweaks[last_index] = lightness_min
    tweaks[anchor_index] = lightness
    return tweaks


def generate(request):
    """Generate the tonal scale for a base color request.

    Args:
        request: A validated BaseColorRequest

    Returns:
        list of GeneratedColor, one per public stop in ascending order
    """
    hue, saturation, lightness = hex_to_hsl(request.hex)
    tweaks = distribute_lightness(
        lightness, request.anchor_stop, request.lightness_min, request.lightness_max
    )
    public = tweaks[TRIM_LOW : len(tweaks) - TRIM_HIGH]

    scale = []
    for stop, tweak in zip(STOPS, public):
        if stop == request.anchor_stop:
            # Seed is reproduced as given, never recomputed
            hex_color = request.hex
        else:
            hex_color = hsl_to_hex(hue, saturation, float(tweak))
        scale.append(GeneratedColor(request.name, stop, hex_color))

    logger.debug(
        "generated %s from %s at %d: %s",
        request.name,
        request.hex,
        request.anchor_stop,
        " ".join(c.hex for c in scale),
    )
    return scale
