import json

from ..color import hex_to_hsl


def print_scales(scales, group_prefix):
    """Print each generated scale with its HSL breakdown"""
    print("\n" + "=" * 60)
    print(f"GENERATED SCALES ({group_prefix})")
    print("=" * 60)

    for name, colors in scales.items():
        print(f"\n{name}:")
        for color in colors:
            h, s, l = hex_to_hsl(color.hex)
            print(f"  {name}.{color.stop:<6} {color.hex}  (hsl: {h:3d}, {s:5.1f}%, {l:5.1f}%)")


def print_records(records):
    """Print document records as the JSON that would be written"""
    print(json.dumps(records, indent=2))
