import json
import os
import struct
import tempfile
import unittest
import uuid
import zipfile

from lunacy_tints.document import (
    COLOR_VARIABLES,
    DocumentFile,
    decode_id,
    encode_id,
    load,
    save,
)
from lunacy_tints.editor import apply_requests, edit_document
from lunacy_tints.errors import (
    IoFailure,
    MalformedDocument,
    ReferenceNotFound,
    UnsupportedDocumentVersion,
)
from lunacy_tints.palette import MERGE_REPLACE
from lunacy_tints.scale import make_link, make_request


def _record(name, value, version=1):
    return {"id": encode_id(uuid.uuid4()), "version": version, "name": name, "value": value}


def _tree():
    return {
        "version": "1",
        COLOR_VARIABLES: [
            _record("theme / dark / dark.500", "1d2023", 2),
            _record("other / x", "ff0000"),
            _record("theme / light / light.500", "f5f5f5"),
            _record("theme / darker / darker.500", "000000"),
        ],
    }


def _names(tree):
    return [r["name"] for r in tree[COLOR_VARIABLES]]


class TestIds(unittest.TestCase):
    def test_round_trip(self):
        value = uuid.uuid4()
        text = encode_id(value)
        self.assertEqual(len(text), 22)
        self.assertNotIn("=", text)
        self.assertEqual(decode_id(text), value)

    def test_bad_ids(self):
        for text in ("short", "", 42, "ü" * 22):
            with self.assertRaises(MalformedDocument):
                decode_id(text)


class TestLoad(unittest.TestCase):
    def test_only_prefixed_groups(self):
        palette = load(_tree(), "theme")
        self.assertEqual(list(palette.groups), ["dark", "light", "darker"])
        entry = palette.group("dark").entries[0]
        self.assertEqual(entry.hex, "#1d2023")
        self.assertEqual(entry.version, 2)
        self.assertNotIn("x", palette)

    def test_other_prefix(self):
        palette = load(_tree(), "other")
        self.assertEqual(list(palette.groups), ["x"])

    def test_missing_color_variables(self):
        with self.assertRaises(MalformedDocument):
            load({"pages": []})
        with self.assertRaises(MalformedDocument):
            load([])

    def test_malformed_records(self):
        tree = _tree()
        del tree[COLOR_VARIABLES][0]["version"]
        with self.assertRaises(MalformedDocument):
            load(tree)

        tree = _tree()
        tree[COLOR_VARIABLES][0]["value"] = "not-a-color"
        with self.assertRaises(MalformedDocument):
            load(tree)

        tree = _tree()
        tree[COLOR_VARIABLES][0]["version"] = True
        with self.assertRaises(MalformedDocument):
            load(tree)

    def test_malformed_records_outside_prefix_ignored(self):
        tree = _tree()
        del tree[COLOR_VARIABLES][1]["value"]
        self.assertEqual(len(load(tree, "theme")), 3)

    def test_unnamed_records_ignored(self):
        tree = _tree()
        gradient = {"id": "x", "kind": "gradient"}
        tree[COLOR_VARIABLES].insert(1, gradient)
        tree[COLOR_VARIABLES].append("separator")
        palette = load(tree, "theme")
        self.assertEqual(list(palette.groups), ["dark", "light", "darker"])

        apply_requests(tree, [make_request("dark", "#1d2023")], "theme")
        variables = tree[COLOR_VARIABLES]
        self.assertEqual(variables[0], gradient)
        self.assertEqual(variables[4], "separator")
        self.assertEqual(len(variables), 5 + 9)


class TestSave(unittest.TestCase):
    def test_untouched_palette_leaves_list_alone(self):
        tree = _tree()
        before = json.dumps(tree)
        save(tree, load(tree))
        self.assertEqual(json.dumps(tree), before)

    def test_touched_group_moves_to_end(self):
        tree = _tree()
        other = dict(tree[COLOR_VARIABLES][1])
        dark_id = tree[COLOR_VARIABLES][0]["id"]

        apply_requests(tree, [make_request("dark", "#1d2023")], "theme")

        names = _names(tree)
        self.assertEqual(names[:3], ["other / x", "theme / light / light.500", "theme / darker / darker.500"])
        self.assertEqual(names[3:], [f"theme / dark / dark.{s}" for s in range(100, 1000, 100)])
        self.assertEqual(tree[COLOR_VARIABLES][0], other)

        dark500 = tree[COLOR_VARIABLES][3 + 4]
        self.assertEqual(dark500["id"], dark_id)
        self.assertEqual(dark500["version"], 3)
        self.assertEqual(dark500["value"], "1d2023")

    def test_group_name_prefix_does_not_remove_longer_names(self):
        tree = _tree()
        apply_requests(tree, [make_request("dark", "#1d2023")], "theme")
        self.assertIn("theme / darker / darker.500", _names(tree))

    def test_extra_record_keys_preserved(self):
        tree = _tree()
        tree[COLOR_VARIABLES][0]["description"] = "base"
        apply_requests(tree, [make_request("dark", "#1d2023")], "theme")
        dark500 = [r for r in tree[COLOR_VARIABLES] if r["name"] == "theme / dark / dark.500"][0]
        self.assertEqual(dark500["description"], "base")

    def test_new_records_have_document_shape(self):
        tree = _tree()
        result = apply_requests(tree, [make_request("brand", "#00fbb0")], "theme")
        record = tree[COLOR_VARIABLES][-1]
        self.assertEqual(set(record), {"id", "version", "name", "value"})
        self.assertEqual(record["name"], "theme / brand / brand.900")
        self.assertEqual(record["version"], 1)
        self.assertEqual(len(record["value"]), 6)
        self.assertEqual(len(result.records), 9)
        self.assertEqual(result.records, tree[COLOR_VARIABLES][-9:])

    def test_replace_mode_drops_old_ids(self):
        tree = _tree()
        dark_id = tree[COLOR_VARIABLES][0]["id"]
        apply_requests(tree, [make_request("dark", "#1d2023")], "theme", MERGE_REPLACE)
        ids = [r["id"] for r in tree[COLOR_VARIABLES]]
        self.assertNotIn(dark_id, ids)
        self.assertEqual(len(ids), 3 + 9)

    def test_failed_batch_leaves_tree_untouched(self):
        tree = _tree()
        before = json.dumps(tree)
        with self.assertRaises(ReferenceNotFound):
            apply_requests(
                tree,
                [make_request("brand", "#00fbb0"), make_link("accent", "missing")],
                "theme",
            )
        self.assertEqual(json.dumps(tree), before)

    def test_link_within_batch(self):
        tree = _tree()
        apply_requests(
            tree, [make_request("brand", "#00fbb0"), make_link("accent", "brand")], "theme"
        )
        accent = [r for r in tree[COLOR_VARIABLES] if r["name"].startswith("theme / accent")]
        self.assertEqual(len(accent), 1)
        self.assertEqual(accent[0]["value"], "00fbb0")


class TestDocumentFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _archive(self, tree):
        path = os.path.join(self.dir, "design.free")
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("meta.json", b'{"app":"lunacy"}')
            archive.writestr("document.json", json.dumps(tree), zipfile.ZIP_DEFLATED)
            archive.writestr("images/logo.png", b"\x89PNG...")
        return path

    def test_archive_edit_keeps_other_members(self):
        path = self._archive(_tree())
        edit_document(path, [make_request("brand", "#00fbb0")])

        with zipfile.ZipFile(path) as archive:
            self.assertEqual(archive.namelist(), ["meta.json", "document.json", "images/logo.png"])
            self.assertEqual(archive.read("images/logo.png"), b"\x89PNG...")
            self.assertEqual(archive.getinfo("document.json").compress_type, zipfile.ZIP_DEFLATED)
            tree = json.loads(archive.read("document.json"))
        self.assertEqual(len(tree[COLOR_VARIABLES]), 4 + 9)
        self.assertEqual(tree["version"], "1")

    def test_archive_edit_keeps_member_metadata(self):
        path = os.path.join(self.dir, "design.free")
        logo = zipfile.ZipInfo("images/logo.png", date_time=(2024, 5, 1, 12, 30, 0))
        logo.create_system = 0
        logo.extra = b"UT\x05\x00\x01" + struct.pack("<I", 1714566600)
        logo.external_attr = 0o644 << 16
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("document.json", json.dumps(_tree()))
            archive.writestr(logo, b"\x89PNG...")

        edit_document(path, [make_request("brand", "#00fbb0")])

        with zipfile.ZipFile(path) as archive:
            info = archive.getinfo("images/logo.png")
            self.assertEqual(info.extra, logo.extra)
            self.assertEqual(info.create_system, 0)
            self.assertEqual(info.date_time, (2024, 5, 1, 12, 30, 0))
            self.assertEqual(info.external_attr, logo.external_attr)
            self.assertEqual(archive.read(info), b"\x89PNG...")

    def test_failed_edit_leaves_file_identical(self):
        path = self._archive(_tree())
        with open(path, "rb") as f:
            before = f.read()
        with self.assertRaises(ReferenceNotFound):
            edit_document(path, [make_link("accent", "missing")])
        with open(path, "rb") as f:
            self.assertEqual(f.read(), before)
        self.assertEqual(os.listdir(self.dir), ["design.free"])

    def test_dry_run_does_not_write(self):
        path = self._archive(_tree())
        with open(path, "rb") as f:
            before = f.read()
        result = edit_document(path, [make_request("brand", "#00fbb0")], dry_run=True)
        self.assertEqual(len(result.records), 9)
        with open(path, "rb") as f:
            self.assertEqual(f.read(), before)

    def test_plain_json_document(self):
        path = os.path.join(self.dir, "document.json")
        with open(path, "w") as f:
            json.dump(_tree(), f)
        edit_document(path, [make_request("brand", "#00fbb0")])
        with open(path) as f:
            tree = json.load(f)
        self.assertEqual(_names(tree)[-1], "theme / brand / brand.900")

    def test_missing_member(self):
        path = self._archive(_tree())
        with self.assertRaises(UnsupportedDocumentVersion):
            DocumentFile.read(path, member="page.json")

    def test_not_an_archive(self):
        path = os.path.join(self.dir, "design.free")
        with open(path, "w") as f:
            f.write("plain text")
        with self.assertRaises(UnsupportedDocumentVersion):
            DocumentFile.read(path)

    def test_missing_file(self):
        with self.assertRaises(IoFailure):
            DocumentFile.read(os.path.join(self.dir, "absent.free"))
        with self.assertRaises(IoFailure):
            DocumentFile.read(os.path.join(self.dir, "absent.json"))

    def test_invalid_json(self):
        path = os.path.join(self.dir, "document.json")
        with open(path, "w") as f:
            f.write("{")
        with self.assertRaises(MalformedDocument):
            DocumentFile.read(path)


if __name__ == "__main__":
    unittest.main()
