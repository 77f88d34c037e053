"""Open a document from a ``.free`` archive or plain JSON and commit it back.

The file is only written by ``commit``, through a temporary file in the same
directory that replaces the original in one step.
"""

import json
import logging
import os
import shutil
import tempfile
import zipfile

from ..errors import IoFailure, MalformedDocument, UnsupportedDocumentVersion

logger = logging.getLogger(__name__)

DEFAULT_MEMBER = "document.json"


def _parse(raw, label):
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedDocument(f"{label} is not valid JSON: {e}") from e


def _dump(tree):
    return json.dumps(tree, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _member_info(info):
    fresh = zipfile.ZipInfo(info.filename, date_time=info.date_time)
    fresh.compress_type = info.compress_type
    fresh.external_attr = info.external_attr
    fresh.comment = info.comment
    fresh.extra = info.extra
    fresh.create_system = info.create_system
    return fresh


class DocumentFile:
    """A document tree together with the file it was read from."""

    def __init__(self, path, tree, member=None):
        self.path = path
        self.tree = tree
        # None for plain JSON files
        self.member = member

    @property
    def is_archive(self):
        return self.member is not None

    @classmethod
    def read(cls, path, member=DEFAULT_MEMBER):
        path = os.fspath(path)
        if path.lower().endswith(".json"):
            try:
                with open(path, "rb") as f:
                    raw = f.read()
            except OSError as e:
                raise IoFailure(f"cannot read {path}: {e}") from e
            return cls(path, _parse(raw, path))

        if not os.path.isfile(path):
            raise IoFailure(f"cannot read {path}: no such file")
        try:
            if not zipfile.is_zipfile(path):
                raise UnsupportedDocumentVersion(
                    f"{path} is neither a zip archive nor a .json document"
                )
            with zipfile.ZipFile(path) as archive:
                if member not in archive.namelist():
                    raise UnsupportedDocumentVersion(f"{path} has no {member!r} member")
                raw = archive.read(member)
        except (OSError, zipfile.BadZipFile) as e:
            raise IoFailure(f"cannot read {path}: {e}") from e
        logger.debug("read %s from %s (%d bytes)", member, path, len(raw))
        return cls(path, _parse(raw, f"{path}:{member}"), member)

    def commit(self):
        """Write the tree back over the original file."""
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "wb") as f:
                if self.is_archive:
                    self._write_archive(f)
                else:
                    f.write(_dump(self.tree))
            shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except (OSError, zipfile.BadZipFile) as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise IoFailure(f"cannot write {self.path}: {e}") from e
        logger.info("wrote %s", self.path)

    def _write_archive(self, out):
        # Every other member is copied through in order with its own compression
        with zipfile.ZipFile(self.path) as source, zipfile.ZipFile(out, "w") as target:
            for info in source.infolist():
                if info.filename == self.member:
                    data = _dump(self.tree)
                else:
                    data = source.read(info)
                target.writestr(_member_info(info), data)
