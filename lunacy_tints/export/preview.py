from PIL import Image, ImageDraw

from ..color import hex_to_rgb, relative_luminance
from ..errors import IoFailure

SWATCH_SIZE = 80
LABEL_WIDTH = 140
BACKGROUND = (255, 255, 255)
DARK_TEXT = (0, 0, 0)
LIGHT_TEXT = (255, 255, 255)


def _text_color(rgb):
    return DARK_TEXT if relative_luminance(*rgb) > 0.35 else LIGHT_TEXT


def render_preview(scales, swatch_size=SWATCH_SIZE):
    """Draw one row per group with a labelled swatch per stop.

    Args:
        scales: Mapping of group name to GeneratedColor list
        swatch_size: Edge length of a swatch in pixels

    Returns:
        PIL.Image.Image
    """
    rows = list(scales.items())
    columns = max((len(colors) for _, colors in rows), default=0)
    width = LABEL_WIDTH + columns * swatch_size
    height = max(len(rows), 1) * swatch_size

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for row, (name, colors) in enumerate(rows):
        top = row * swatch_size
        draw.text((8, top + swatch_size // 2 - 6), name, fill=DARK_TEXT)

        for column, color in enumerate(colors):
            left = LABEL_WIDTH + column * swatch_size
            rgb = hex_to_rgb(color.hex)
            draw.rectangle(
                [left, top, left + swatch_size - 1, top + swatch_size - 1], fill=rgb
            )
            text = _text_color(rgb)
            draw.text((left + 6, top + 6), str(color.stop), fill=text)
            draw.text((left + 6, top + swatch_size - 18), color.hex, fill=text)

    return img


def save_preview(scales, filepath, swatch_size=SWATCH_SIZE):
    """Render the swatch sheet and save it as PNG."""
    img = render_preview(scales, swatch_size)
    try:
        img.save(filepath, format="PNG")
    except OSError as e:
        raise IoFailure(f"cannot write {filepath}: {e}") from e
