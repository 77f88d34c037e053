import argparse
import logging
import os
import sys

from .document import DEFAULT_MEMBER, DocumentFile
from .editor import apply_requests
from .errors import TintsError
from .export import export_json, print_records, print_scales, save_preview
from .palette import DEFAULT_GROUP_PREFIX, MERGE_MODES, MERGE_PRESERVE, load_color_scheme
from .scale import check_unique, parse_color_arg

LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lunacy-tints",
        description="Generate tonal color scales and merge them into the color "
        "variables of a Lunacy document",
    )
    parser.add_argument(
        "file",
        help="Path to the .free document, or an extracted document .json",
    )
    parser.add_argument(
        "--group",
        default=None,
        help=f"Prefix of the color variables to edit (default: {DEFAULT_GROUP_PREFIX})",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--color",
        action="append",
        metavar="NAME:VALUE[:STOP]",
        help="Base color to generate, e.g. brand:#00fbb0 or brand:#00fbb0:600. "
        "A VALUE without '#' links to another group's color at STOP. Repeatable.",
    )
    source.add_argument(
        "--color-scheme",
        metavar="JSON",
        help="Load base colors from a color scheme JSON file",
    )
    parser.add_argument(
        "--merge",
        choices=MERGE_MODES,
        default=None,
        help="'preserve' keeps ids of existing stops and bumps their version, "
        f"'replace' regenerates the whole group (default: {MERGE_PRESERVE})",
    )
    parser.add_argument(
        "--lightness-min",
        type=float,
        default=0,
        help="Lightness the scale approaches at its darkest end (default: 0)",
    )
    parser.add_argument(
        "--lightness-max",
        type=float,
        default=100,
        help="Lightness the scale approaches at its lightest end (default: 100)",
    )
    parser.add_argument(
        "--member",
        default=DEFAULT_MEMBER,
        help=f"Document member inside the archive (default: {DEFAULT_MEMBER})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the color variables that would be written without saving",
    )
    parser.add_argument(
        "--export-json",
        metavar="PATH",
        help="Also write the generated scales as JSON",
    )
    parser.add_argument(
        "--preview",
        metavar="PNG",
        help="Also render the generated scales as a PNG swatch sheet",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Log progress (-v) or every color (-vv)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
        format="%(levelname)s: %(message)s",
    )

    try:
        _run(args)
    except TintsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def _load_requests(args):
    """Requests plus scheme metadata, from --color or --color-scheme."""
    if args.color_scheme:
        return load_color_scheme(args.color_scheme)
    requests = [
        parse_color_arg(text, args.lightness_min, args.lightness_max)
        for text in args.color
    ]
    return check_unique(requests), {}


def _run(args):
    """Edit the document and write any requested extra outputs."""
    requests, metadata = _load_requests(args)

    # CLI flag > color scheme metadata > default
    group_prefix = args.group or metadata.get("group") or DEFAULT_GROUP_PREFIX
    merge = args.merge or metadata.get("merge") or MERGE_PRESERVE

    print(f"Editing: {args.file}")
    print(f"Group: {group_prefix}  merge: {merge}  colors: {len(requests)}")

    # Document is committed only after every export has been written
    document = DocumentFile.read(args.file, args.member)
    result = apply_requests(document.tree, requests, group_prefix, merge)

    print_scales(result.scales, group_prefix)

    if args.dry_run:
        print("\nColor variables (not written):")
        print_records(result.records)

    exported = []
    if args.export_json:
        export_json(
            result.scales,
            args.export_json,
            group_prefix=group_prefix,
            source_file=os.path.basename(args.file),
        )
        exported.append(args.export_json)
    if args.preview:
        save_preview(result.scales, args.preview)
        exported.append(args.preview)

    if not args.dry_run:
        document.commit()

    print("\n" + "=" * 60)
    if args.dry_run:
        print(f"Dry run: {args.file} left unchanged")
    else:
        print(f"Updated: {args.file}")
    print(f"Groups: {', '.join(result.palette.touched)}")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)


if __name__ == "__main__":
    sys.exit(main())
