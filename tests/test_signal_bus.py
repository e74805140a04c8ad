import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from metalauncher.signals.bus import (
    Signal,
    parse_signal_from_line,
    read_last_signal_line,
    read_signal_file,
    read_signals,
)
from metalauncher.utils.known_apps import KnownApp

TABLE = {
    "companion": KnownApp("companion", "Companion", "companion-signals.jsonl"),
    "dugout": KnownApp("dugout", "Dugout", "dugout-signals.jsonl"),
    "hmm": KnownApp("hmm", "HM Admin Console", "hmm-signals.jsonl"),
}


class TestParseSignal(unittest.TestCase):

    def test_valid_record(self):
        signal = parse_signal_from_line('{"value": 2, "timestamp": "t", "label": "l", "extra": 1}')
        self.assertEqual(signal, Signal(value=2.0, timestamp="t", label="l"))
        self.assertIsInstance(signal.value, float)

    def test_invalid_records(self):
        for line in (
            "not json",
            "[1, 2]",
            '{"timestamp": "t", "label": "l"}',
            '{"value": "2", "timestamp": "t", "label": "l"}',
            '{"value": true, "timestamp": "t", "label": "l"}',
            '{"value": 1, "timestamp": 5, "label": "l"}',
            '{"value": 1, "timestamp": "t"}',
        ):
            self.assertIsNone(parse_signal_from_line(line), line)

    def test_non_finite_values_are_rejected(self):
        for value in ("NaN", "Infinity", "-Infinity", "1e400", "-1e400", "1" + "0" * 400):
            line = '{"value": %s, "timestamp": "t", "label": "l"}' % value
            self.assertIsNone(parse_signal_from_line(line), value)


class TestReadSignalFile(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.bus = Path(self._tmp.name) / "cci-bus"

    def tearDown(self):
        self._tmp.cleanup()

    def test_last_non_blank_line_wins(self):
        self.bus.mkdir()
        path = self.bus / "companion-signals.jsonl"
        path.write_text(
            '{"value":1,"timestamp":"a","label":"first"}\n'
            '\n'
            '{"value":2,"timestamp":"t","label":"l"}\n'
            '   \n'
        )

        self.assertEqual(read_signal_file(path), Signal(2.0, "t", "l"))

    def test_missing_file(self):
        self.assertIsNone(read_last_signal_line(self.bus / "nope.jsonl"))
        self.assertIsNone(read_signal_file(self.bus / "nope.jsonl"))

    def test_malformed_last_line_hides_earlier_records(self):
        self.bus.mkdir()
        path = self.bus / "dugout-signals.jsonl"
        path.write_text('{"value":1,"timestamp":"a","label":"ok"}\n{"value":\n')

        self.assertIsNone(read_signal_file(path))

    def test_undecodable_file(self):
        self.bus.mkdir()
        path = self.bus / "hmm-signals.jsonl"
        path.write_bytes(b'{"value":1,"timestamp":"a","label":"ok"}\n\xff\xfe\n')

        self.assertIsNone(read_signal_file(path))

    def test_read_signals_per_app(self):
        self.bus.mkdir()
        (self.bus / "companion-signals.jsonl").write_text('{"value":0.5,"timestamp":"t1","label":"calm"}\n')
        (self.bus / "dugout-signals.jsonl").write_text("garbage\n")

        signals = read_signals(TABLE, bus_dir=self.bus)

        self.assertEqual(signals, {
            "companion": Signal(0.5, "t1", "calm"),
            "dugout": None,
            "hmm": None,
        })

    def test_read_signals_creates_bus_dir(self):
        signals = read_signals(TABLE, bus_dir=self.bus)

        self.assertTrue(self.bus.is_dir())
        self.assertEqual(signals, {"companion": None, "dugout": None, "hmm": None})

    def test_read_signals_rejects_escaping_file_names(self):
        self.bus.mkdir()
        (Path(self._tmp.name) / "secret.jsonl").write_text('{"value":1,"timestamp":"t","label":"l"}\n')
        table = {"evil": KnownApp("evil", "Evil", "../secret.jsonl")}

        self.assertEqual(read_signals(table, bus_dir=self.bus), {"evil": None})

    def test_default_bus_dir_under_home(self):
        with tempfile.TemporaryDirectory() as home:
            with patch.dict(os.environ, {"HOME": home}):
                read_signals(TABLE)
            self.assertTrue((Path(home) / ".hymetalab" / "shared" / "cci-bus").is_dir())


if __name__ == "__main__":
    unittest.main()
