"""In-memory palette: groups of named color entries with stable identity.

Entry names follow ``<prefix> / <group> / <group>.<stop>``. Only the prefix
and the group segment carry meaning for membership; the trailing segment
identifies the slot within the group.
"""

import uuid
from collections import namedtuple

DEFAULT_GROUP_PREFIX = "theme"
SEPARATOR = " / "

PaletteEntry = namedtuple("PaletteEntry", ["id", "version", "qualified_name", "hex"])


def new_id():
    """Mint a fresh 128-bit random identity."""
    return uuid.uuid4()


def new_entry(qualified_name, hex_color):
    return PaletteEntry(id=new_id(), version=1, qualified_name=qualified_name, hex=hex_color)


def qualified_name(prefix, group_name, stop):
    return SEPARATOR.join((prefix, group_name, f"{group_name}.{stop}"))


def group_of(name, prefix):
    """Return the group a variable name belongs to under ``prefix``, or None."""
    head = prefix + SEPARATOR
    if not name.startswith(head):
        return None
    group = name[len(head) :].split("/", 1)[0].strip()
    return group or None


def suffix_of(name):
    """Trailing ``/`` segment of a name, e.g. ``brand.500``."""
    return name.rsplit("/", 1)[-1].strip()


def stop_of(name):
    """Stop number encoded in a name's trailing segment, or None."""
    _, dot, tail = suffix_of(name).rpartition(".")
    if dot and tail.isdigit():
        return int(tail)
    return None


def _stop_order(entry):
    stop = stop_of(entry.qualified_name)
    return (stop is None, stop if stop is not None else 0, suffix_of(entry.qualified_name))


class PaletteGroup:
    """Entries sharing one group name, keyed by their trailing name segment."""

    def __init__(self, name, entries=()):
        self.name = name
        self.entries = list(entries)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"PaletteGroup({self.name!r}, {len(self.entries)} entries)"

    def find(self, suffix):
        """Index of the entry whose trailing segment equals ``suffix``, or None."""
        for index, entry in enumerate(self.entries):
            if suffix_of(entry.qualified_name) == suffix:
                return index
        return None

    def entry_at_stop(self, stop):
        for entry in self.entries:
            if stop_of(entry.qualified_name) == stop:
                return entry
        return None

    def sorted_entries(self):
        """Entries by ascending stop; names without a stop sort last."""
        return sorted(self.entries, key=_stop_order)


class Palette:
    """Groups under one prefix, plus the set of groups touched this run."""

    def __init__(self, prefix=DEFAULT_GROUP_PREFIX, groups=()):
        self.prefix = prefix
        self.groups = {}
        self.touched = []
        for group in groups:
            self.groups[group.name] = group

    def __contains__(self, name):
        return name in self.groups

    def __iter__(self):
        return iter(self.groups.values())

    def __len__(self):
        return len(self.groups)

    def group(self, name):
        return self.groups.get(name)

    def put(self, group):
        """Store ``group`` and remember it must be written back."""
        self.groups[group.name] = group
        if group.name not in self.touched:
            self.touched.append(group.name)

    def touched_groups(self):
        return [self.groups[name] for name in self.touched]
