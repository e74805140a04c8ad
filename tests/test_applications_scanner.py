import errno
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from metalauncher.scanners import applications
from metalauncher.storage.models import RegisteredApp


class TestApplicationsScan(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.system_apps = self.root / "Applications"
        self.user_apps = self.root / "home" / "Applications"
        self.system_apps.mkdir()
        self.user_apps.mkdir(parents=True)

    def tearDown(self):
        self._tmp.cleanup()

    def test_collects_top_level_bundles_only(self):
        (self.system_apps / "Dugout.app").mkdir()
        (self.system_apps / "Companion.app").mkdir()
        (self.system_apps / "Utilities").mkdir()
        (self.system_apps / "Utilities" / "Nested.app").mkdir()
        (self.system_apps / "notes.txt").write_text("x")
        (self.system_apps / "Broken.app").write_text("a file")

        apps = applications.scan([self.system_apps])

        self.assertEqual(apps, [
            RegisteredApp("Companion", str(self.system_apps / "Companion.app")),
            RegisteredApp("Dugout", str(self.system_apps / "Dugout.app")),
        ])

    def test_skips_missing_roots(self):
        (self.user_apps / "Companion.app").mkdir()

        apps = applications.scan([self.root / "missing", self.user_apps])

        self.assertEqual([a.name for a in apps], ["Companion"])

    def test_unreadable_root_is_skipped(self):
        (self.user_apps / "Companion.app").mkdir()
        real_iterdir = Path.iterdir

        def failing_iterdir(path):
            if path == self.system_apps:
                raise PermissionError("denied")
            return real_iterdir(path)

        with patch.object(Path, "iterdir", failing_iterdir):
            apps = applications.scan([self.system_apps, self.user_apps])

        self.assertEqual([a.name for a in apps], ["Companion"])

    def test_uninspectable_bundle_is_skipped(self):
        (self.system_apps / "Ok.app").mkdir()
        locked = self.system_apps / "Locked.app"
        locked.mkdir()
        real_stat = Path.stat

        def failing_stat(path, *args, **kwargs):
            if path.name == "Locked.app":
                raise PermissionError(errno.EACCES, "denied", str(path))
            return real_stat(path, *args, **kwargs)

        with patch.object(Path, "stat", failing_stat):
            apps = applications.scan([self.system_apps])

        self.assertEqual(apps, [RegisteredApp("Ok", str(self.system_apps / "Ok.app"))])

    def test_uninspectable_root_is_skipped(self):
        (self.user_apps / "Companion.app").mkdir()
        real_exists = Path.exists

        def failing_exists(path, *args, **kwargs):
            if path == self.system_apps:
                raise PermissionError(errno.EACCES, "denied", str(path))
            return real_exists(path, *args, **kwargs)

        with patch.object(Path, "exists", failing_exists):
            apps = applications.scan([self.system_apps, self.user_apps])

        self.assertEqual([a.name for a in apps], ["Companion"])

    def test_duplicate_discoveries_collapse(self):
        (self.system_apps / "Companion.app").mkdir()

        apps = applications.scan([self.system_apps, self.system_apps])

        self.assertEqual(len(apps), 1)

    def test_symlinked_bundle_uses_canonical_path(self):
        target = self.system_apps / "Companion.app"
        target.mkdir()
        (self.user_apps / "Companion.app").symlink_to(target, target_is_directory=True)

        apps = applications.scan([self.system_apps, self.user_apps])

        self.assertEqual(apps, [RegisteredApp("Companion", str(target))])

    def test_default_roots(self):
        with patch.object(applications, "applications_dirs", return_value=[self.user_apps]):
            (self.user_apps / "Dugout.app").mkdir()
            apps = applications.scan()

        self.assertEqual([a.name for a in apps], ["Dugout"])

    def test_no_roots(self):
        self.assertEqual(applications.scan([]), [])


if __name__ == "__main__":
    unittest.main()
