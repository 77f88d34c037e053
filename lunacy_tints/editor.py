"""One invocation: load the palette, merge every request, write it back."""

import logging
from collections import namedtuple

from .document import DEFAULT_MEMBER, DocumentFile, load, save, touched_records
from .palette import DEFAULT_GROUP_PREFIX, MERGE_PRESERVE, apply_request
from .scale import check_unique

logger = logging.getLogger(__name__)

EditResult = namedtuple("EditResult", ["palette", "scales", "records"])


def apply_requests(tree, requests, group_prefix=DEFAULT_GROUP_PREFIX, merge=MERGE_PRESERVE):
    """Merge all requests into a parsed document tree.

    Requests are applied in order, so a link may name a group generated by
    an earlier request. The tree is only modified once every request has
    succeeded.

    Args:
        tree: Parsed document with a ``colorVariables`` list
        requests: BaseColorRequest/LinkRequest sequence with unique names
        group_prefix: Prefix selecting the editable variables
        merge: "preserve" keeps ids of matching stops, "replace" regenerates

    Returns:
        EditResult with the palette, ``{group: [GeneratedColor]}`` and the
        records written for the touched groups
    """
    requests = check_unique(requests)
    palette = load(tree, group_prefix)

    scales = {}
    for request in requests:
        scales[request.name] = apply_request(palette, request, merge)

    save(tree, palette)
    return EditResult(palette, scales, touched_records(palette))


def edit_document(
    path,
    requests,
    group_prefix=DEFAULT_GROUP_PREFIX,
    merge=MERGE_PRESERVE,
    member=DEFAULT_MEMBER,
    dry_run=False,
):
    """Apply requests to the document at ``path`` and commit it.

    With ``dry_run`` everything is computed but the file is left alone.
    """
    document = DocumentFile.read(path, member)
    result = apply_requests(document.tree, requests, group_prefix, merge)
    if dry_run:
        logger.info("dry run, %s not written", path)
    else:
        document.commit()
    return result
