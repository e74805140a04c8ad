import json
import tempfile
import unittest
from pathlib import Path

from metalauncher.storage.preferences import Preferences, load_preferences, save_preferences


class TestPreferences(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config" / "global.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file(self):
        self.assertIsNone(load_preferences(self.path))

    def test_save_then_load(self):
        prefs = Preferences(user_name="Sam", ai_mode="cloud", theme="light")

        self.assertTrue(save_preferences(prefs, self.path))

        self.assertEqual(
            json.loads(self.path.read_text()),
            {"userName": "Sam", "aiMode": "cloud", "theme": "light"},
        )
        self.assertEqual(load_preferences(self.path), prefs)

    def test_malformed_file_loads_none(self):
        self.path.parent.mkdir(parents=True)
        for contents in ("{", "[]", '{"userName": "Sam"}',
                         '{"userName": "Sam", "aiMode": "hybrid", "theme": "dark"}'):
            self.path.write_text(contents)
            with self.assertLogs("metalauncher.storage.preferences", level="ERROR"):
                self.assertIsNone(load_preferences(self.path))

    def test_invalid_values_are_not_saved(self):
        prefs = Preferences(user_name="Sam", theme="sepia")

        with self.assertLogs("metalauncher.storage.preferences", level="ERROR"):
            self.assertFalse(save_preferences(prefs, self.path))
        self.assertFalse(self.path.exists())

    def test_unwritable_location(self):
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("file")

        with self.assertLogs("metalauncher.storage.preferences", level="ERROR"):
            self.assertFalse(save_preferences(Preferences("Sam"), blocker / "global.json"))


if __name__ == "__main__":
    unittest.main()
