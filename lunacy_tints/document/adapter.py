"""Translate a document's ``colorVariables`` list to a Palette and back.

Only variables named ``<prefix> / ...`` are read. On save, the variables of
every touched group are taken out of the list and the group's current
entries are appended at the end, in ascending stop order. Everything else
keeps its relative order and is not rewritten.
"""

import logging

from ..color import normalize_hex
from ..errors import InvalidColorFormat, MalformedDocument
from ..palette import DEFAULT_GROUP_PREFIX, Palette, PaletteEntry, PaletteGroup, group_of
from .ids import decode_id, encode_id

logger = logging.getLogger(__name__)

COLOR_VARIABLES = "colorVariables"
RECORD_FIELDS = ("id", "version", "name", "value")


def color_variables(tree):
    if not isinstance(tree, dict):
        raise MalformedDocument("document root must be a JSON object")
    variables = tree.get(COLOR_VARIABLES)
    if not isinstance(variables, list):
        raise MalformedDocument(f"document has no {COLOR_VARIABLES!r} list")
    return variables


def _record_group(record, prefix):
    """Group of a record under ``prefix``; unnamed records belong to none."""
    if not isinstance(record, dict) or not isinstance(record.get("name"), str):
        return None
    return group_of(record["name"], prefix)


def entry_from_record(record):
    missing = [field for field in RECORD_FIELDS if field not in record]
    if missing:
        raise MalformedDocument(
            f"color variable {record.get('name')!r} is missing {', '.join(missing)}"
        )
    version = record["version"]
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        raise MalformedDocument(
            f"color variable {record['name']!r} has invalid version {version!r}"
        )
    try:
        hex_color = normalize_hex(record["value"])
    except InvalidColorFormat as e:
        raise MalformedDocument(f"color variable {record['name']!r}: {e}") from e
    return PaletteEntry(
        id=decode_id(record["id"]),
        version=version,
        qualified_name=record["name"],
        hex=hex_color,
    )


def record_from_entry(entry, original=None):
    """Document record for ``entry``; unknown keys of ``original`` are kept."""
    record = dict(original) if original else {}
    record.update(
        id=encode_id(entry.id),
        version=entry.version,
        name=entry.qualified_name,
        value=entry.hex.lstrip("#"),
    )
    return record


def load(tree, group_prefix=DEFAULT_GROUP_PREFIX):
    """Build a Palette from the variables named under ``group_prefix``.

    Args:
        tree: Parsed document (dict with a ``colorVariables`` list)
        group_prefix: First name segment selecting the editable variables

    Returns:
        Palette with one PaletteGroup per group segment, in document order
    """
    palette = Palette(group_prefix)
    for record in color_variables(tree):
        group_name = _record_group(record, group_prefix)
        if group_name is None:
            continue
        group = palette.groups.setdefault(group_name, PaletteGroup(group_name))
        group.entries.append(entry_from_record(record))

    logger.info(
        "loaded %d groups under %r: %s", len(palette), group_prefix, ", ".join(palette.groups)
    )
    return palette


def touched_records(palette, originals=None):
    """Records for every touched group, groups in touch order, stops ascending."""
    originals = originals or {}
    records = []
    for group in palette.touched_groups():
        for entry in group.sorted_entries():
            records.append(record_from_entry(entry, originals.get(entry.id)))
    return records


def save(tree, palette):
    """Write the touched groups of ``palette`` back into ``tree``.

    The variable list is rebuilt rather than edited in place: records of
    touched groups are dropped, the rest are kept in order, and the groups'
    entries are appended.

    Returns:
        the mutated tree
    """
    variables = color_variables(tree)
    touched = set(palette.touched)

    kept = []
    originals = {}
    for record in variables:
        if _record_group(record, palette.prefix) in touched:
            originals[decode_id(record.get("id"))] = record
        else:
            kept.append(record)

    appended = touched_records(palette, originals)
    tree[COLOR_VARIABLES] = kept + appended
    logger.info(
        "removed %d and appended %d color variables for %s",
        len(originals),
        len(appended),
        ", ".join(palette.touched) or "no groups",
    )
    return tree
