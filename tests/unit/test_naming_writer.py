from __future__ import annotations

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from wallcolle.io.writer import write_pack_manifest
from wallcolle.util.naming import manifest_filename, normalize_pack_name, slugify


class NamingTests(unittest.TestCase):
    def test_slugify(self) -> None:
        self.assertEqual(slugify("Autumn Pack"), "autumn-pack")
        self.assertEqual(slugify("  Été -- 2024!! "), "ete-2024")
        self.assertEqual(slugify("***"), "")

    def test_normalize_pack_name(self) -> None:
        self.assertEqual(normalize_pack_name("Autumn Pack"), "Autumn.pack")
        self.assertEqual(normalize_pack_name("aosc os 12"), "Aosc.os.12")

    def test_manifest_filename(self) -> None:
        self.assertEqual(manifest_filename("Autumn Pack"), "Autumn.pack.md")
        self.assertEqual(manifest_filename("!!!"), "manifest.md")

    def test_non_latin_names_are_dropped_not_transliterated(self) -> None:
        self.assertEqual(slugify("Осень 2024"), "2024")
        self.assertEqual(manifest_filename("秋の壁紙"), "manifest.md")
        self.assertEqual(manifest_filename("Naïve Café"), "Naive.cafe.md")


class WriterTests(unittest.TestCase):
    def test_write_creates_parents_and_replaces(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "dir" / "Pack.md"
            write_pack_manifest("first\n", dest)
            result = write_pack_manifest("second\n", dest)

            self.assertEqual(result, dest)
            self.assertEqual(dest.read_text(encoding="utf-8"), "second\n")
            self.assertEqual(sorted(p.name for p in dest.parent.iterdir()), ["Pack.md"])

    def test_failed_replace_removes_temp_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "Pack.md"
            dest.write_text("old\n", encoding="utf-8")

            with patch.object(Path, "replace", side_effect=OSError("disk full")):
                with self.assertRaises(OSError):
                    write_pack_manifest("new\n", dest)

            self.assertEqual(dest.read_text(encoding="utf-8"), "old\n")
            self.assertEqual(sorted(p.name for p in dest.parent.iterdir()), ["Pack.md"])


if __name__ == "__main__":
    unittest.main()
