import logging

from ..errors import InvalidColorFormat, ReferenceNotFound
from ..scale import GeneratedColor, LinkRequest, generate
from .model import PaletteGroup, new_entry, qualified_name, suffix_of

logger = logging.getLogger(__name__)

MERGE_PRESERVE = "preserve"
MERGE_REPLACE = "replace"
MERGE_MODES = (MERGE_PRESERVE, MERGE_REPLACE)


def reconcile(group, generated, prefix):
    """Merge a generated scale into ``group``, keeping ids of matching slots.

    A generated color matches an existing entry when the trailing segment of
    its qualified name (``<name>.<stop>``) equals the entry's. Matches keep
    their id, take the new name and hex, and bump the version by one even if
    the hex is unchanged. Unmatched colors become new entries at version 1.
    Existing entries with no generated counterpart are kept as they are.

    Args:
        group: Existing PaletteGroup, or None when the group is new
        generated: Ordered GeneratedColor sequence
        prefix: Group prefix used to build qualified names

    Returns:
        a new PaletteGroup
    """
    name = generated[0].group_name if generated else group.name
    entries = list(group.entries) if group is not None else []
    merged = PaletteGroup(name, entries)

    for color in generated:
        full_name = qualified_name(prefix, color.group_name, color.stop)
        index = merged.find(suffix_of(full_name))
        if index is None:
            entry = new_entry(full_name, color.hex)
            merged.entries.append(entry)
            logger.debug("added %s %s (%s)", full_name, color.hex, entry.id)
        else:
            old = merged.entries[index]
            merged.entries[index] = old._replace(
                version=old.version + 1, qualified_name=full_name, hex=color.hex
            )
            logger.debug(
                "updated %s %s -> %s (v%d)", full_name, old.hex, color.hex, old.version + 1
            )
    return merged


def replace(group, generated, prefix):
    """Drop every existing entry of the group and insert the scale fresh."""
    if group is not None and len(group):
        logger.debug("replacing %d entries of %s", len(group), group.name)
    return reconcile(None, generated, prefix)


MERGE_FUNCTIONS = {
    MERGE_PRESERVE: reconcile,
    MERGE_REPLACE: replace,
}


def resolve_link(palette, link):
    """Copy the linked group's anchor-stop color under the link's name.

    Raises:
        ReferenceNotFound: the source group, or its anchor-stop entry, is
            not in the palette
    """
    source = palette.group(link.source)
    if source is None:
        raise ReferenceNotFound(
            f"{link.name!r} links to group {link.source!r}, "
            f"which is not in palette {palette.prefix!r}"
        )
    entry = source.entry_at_stop(link.anchor_stop)
    if entry is None:
        raise ReferenceNotFound(
            f"{link.name!r} links to {link.source}.{link.anchor_stop}, "
            f"but group {link.source!r} has no entry at stop {link.anchor_stop}"
        )
    return [GeneratedColor(link.name, link.anchor_stop, entry.hex)]


def apply_request(palette, request, merge=MERGE_PRESERVE):
    """Generate (or link) one request and merge it into the palette.

    Returns:
        list of GeneratedColor that was merged
    """
    try:
        merge_group = MERGE_FUNCTIONS[merge]
    except KeyError:
        raise InvalidColorFormat(f"unknown merge mode {merge!r}") from None

    if isinstance(request, LinkRequest):
        generated = resolve_link(palette, request)
    else:
        generated = generate(request)

    existing = palette.group(request.name)
    palette.put(merge_group(existing, generated, palette.prefix))
    logger.info(
        "%s group %s (%d colors, merge=%s)",
        "updated" if existing is not None else "created",
        request.name,
        len(generated),
        merge,
    )
    return generated
