import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from metalauncher.utils.bundles import (
    bundle_name_from_path,
    is_app_bundle,
    normalize_app_path,
)
from metalauncher.utils.errors import InvalidBundleError, InvalidPathError


class TestBundleName(unittest.TestCase):

    def test_derives_bundle_name_from_path(self):
        self.assertEqual(bundle_name_from_path("/Applications/Companion.app"), "Companion")

    def test_bundle_name_with_spaces(self):
        self.assertEqual(
            bundle_name_from_path("/Applications/HM Admin Console.app"),
            "HM Admin Console",
        )

    def test_no_bundle_name_for_root(self):
        self.assertIsNone(bundle_name_from_path("/"))


class TestNormalizeAppPath(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.bundle = self.root / "Companion.app"
        self.bundle.mkdir()

    def tearDown(self):
        self._tmp.cleanup()

    def test_blank_path(self):
        with self.assertRaises(InvalidPathError):
            normalize_app_path("   ")

    def test_missing_bundle(self):
        with self.assertRaises(InvalidBundleError):
            normalize_app_path(str(self.root / "Dugout.app"))

    def test_wrong_extension(self):
        folder = self.root / "Companion"
        folder.mkdir()
        with self.assertRaises(InvalidBundleError):
            normalize_app_path(str(folder))

    def test_file_with_app_extension(self):
        fake = self.root / "Fake.app"
        fake.write_text("not a bundle")
        with self.assertRaises(InvalidBundleError):
            normalize_app_path(str(fake))

    def test_trims_and_canonicalizes(self):
        raw = f"  {self.root}/sub/../Companion.app  "
        (self.root / "sub").mkdir()
        self.assertEqual(normalize_app_path(raw), str(self.bundle))

    def test_extension_is_case_insensitive(self):
        upper = self.root / "Dugout.APP"
        upper.mkdir()
        self.assertTrue(is_app_bundle(upper))
        self.assertEqual(normalize_app_path(str(upper)), str(upper))

    def test_permission_denied_is_not_a_bundle(self):
        with patch.object(Path, "is_dir", side_effect=PermissionError("denied")):
            self.assertFalse(is_app_bundle(self.bundle))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_resolves_symlinks(self):
        link = self.root / "Link.app"
        link.symlink_to(self.bundle, target_is_directory=True)
        self.assertEqual(normalize_app_path(str(link)), str(self.bundle))


if __name__ == "__main__":
    unittest.main()
