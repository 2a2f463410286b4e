"""
Test cases for configuration loading.
"""
import os
import tempfile
import unittest
import sys
from pathlib import Path
from unittest import mock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from qgesture.config import CONFIG_ENV_VAR, RecognizerConfig, default_config_path, load_config
from qgesture.types import HIGH_CONFIDENCE


class TestLoadConfig(unittest.TestCase):
    """YAML configuration loading."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write_config(self, text: str) -> str:
        path = os.path.join(self.tmpdir.name, "config.yaml")
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_default_file(self):
        self.assertTrue(default_config_path().exists())

        cfg = load_config(str(default_config_path()))

        self.assertTrue(cfg.recognizer.load_defaults)
        self.assertAlmostEqual(cfg.recognizer.high_confidence_threshold, 0.7)
        self.assertEqual(cfg.server.host, "127.0.0.1")
        self.assertEqual(cfg.server.port, 8000)
        self.assertIn("http://localhost:5173", cfg.server.cors_origins)
        self.assertEqual(cfg.logging.level, "INFO")

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmpdir.name, "missing.yaml"))

    def test_partial_file_keeps_defaults(self):
        path = self.write_config("recognizer:\n  load_defaults: false\nlogging:\n  level: debug\n")

        cfg = load_config(path)

        self.assertFalse(cfg.recognizer.load_defaults)
        self.assertAlmostEqual(cfg.recognizer.high_confidence_threshold, 0.7)
        self.assertEqual(cfg.server.port, 8000)
        self.assertEqual(cfg.server.cors_origins, ["*"])
        self.assertEqual(cfg.logging.level, "DEBUG")

    def test_empty_file(self):
        cfg = load_config(self.write_config(""))
        self.assertTrue(cfg.recognizer.load_defaults)
        self.assertEqual(cfg.server.title, "Gesture Recognizer")

    def test_threshold_default_shared_with_result(self):
        cfg = load_config(self.write_config("recognizer:\n  load_defaults: true\n"))

        self.assertEqual(RecognizerConfig().high_confidence_threshold, HIGH_CONFIDENCE)
        self.assertEqual(cfg.recognizer.high_confidence_threshold, HIGH_CONFIDENCE)

    def test_environment_variable(self):
        path = self.write_config("server:\n  port: 9123\n")

        with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: path}):
            cfg = load_config()

        self.assertEqual(cfg.server.port, 9123)


if __name__ == '__main__':
    unittest.main()
