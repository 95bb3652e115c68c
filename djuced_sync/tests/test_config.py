#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from djuced_sync.core.config import ConfigurationManager, get_config, reset_config

SAMPLE_CONFIG = """
source:
  path: /data/mik.mikdb
  filename: Collection12.mikdb
destination:
  path:
sync:
  system_cue_threshold: 500
  cue_name_format: "Hot {index}"
logging:
  level: WARNING
environment_overrides:
  enabled: true
  prefix: DJS_
  mappings:
    destination.path: DEST_PATH
    sync.tempo_round_threshold: TEMPO_THRESHOLD
"""


class TestConfigurationManager(unittest.TestCase):
    """Test cases for ConfigurationManager."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = str(Path(self.temp_dir.name) / "config.yml")
        Path(self.config_path).write_text(SAMPLE_CONFIG, encoding="utf-8")
        reset_config()

    def tearDown(self) -> None:
        reset_config()
        self.temp_dir.cleanup()

    def test_values_from_file(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = ConfigurationManager(self.config_path)

        self.assertEqual(config.source_path, "/data/mik.mikdb")
        self.assertEqual(config.source_filename, "Collection12.mikdb")
        self.assertIsNone(config.destination_path)
        self.assertEqual(config.get("sync.system_cue_threshold"), 500)
        self.assertEqual(config.logging_settings, {"level": "WARNING", "file": None})

    def test_sync_settings_fall_back_to_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = ConfigurationManager(self.config_path).sync_settings

        self.assertEqual(settings["system_cue_threshold"], 500)
        self.assertEqual(settings["tempo_round_threshold"], 0.03)
        self.assertEqual(settings["comment_format"], "(*) {key} - Energy {energy}")
        self.assertEqual(settings["cue_name_format"], "Hot {index}")

    def test_environment_overrides(self) -> None:
        env = {"DJS_DEST_PATH": "/tmp/DJUCED.db", "DJS_TEMPO_THRESHOLD": "0.05"}
        with patch.dict(os.environ, env, clear=True):
            config = ConfigurationManager(self.config_path)

        self.assertEqual(config.destination_path, "/tmp/DJUCED.db")
        self.assertEqual(config.sync_settings["tempo_round_threshold"], 0.05)

    def test_get_missing_path(self) -> None:
        config = ConfigurationManager(self.config_path)
        self.assertEqual(config.get("nope.not.here", "fallback"), "fallback")
        self.assertIsNone(config.get("sync.missing"))

    def test_type_hint_conversion(self) -> None:
        config = ConfigurationManager(self.config_path)
        self.assertEqual(config.get("sync.system_cue_threshold", type_hint=str), "500")

    def test_missing_file_uses_defaults(self) -> None:
        config = ConfigurationManager(str(Path(self.temp_dir.name) / "missing.yml"))

        self.assertIsNone(config.source_path)
        self.assertEqual(config.source_filename, "Collection11.mikdb")
        self.assertEqual(config.sync_settings["system_cue_threshold"], 1000)

    def test_invalid_yaml_uses_defaults(self) -> None:
        Path(self.config_path).write_text("sync: [unclosed", encoding="utf-8")
        config = ConfigurationManager(self.config_path)

        self.assertIsNone(config.get("sync"))
        self.assertEqual(config.sync_settings["system_cue_threshold"], 1000)

    def test_cue_threshold_capped_at_system_cues(self) -> None:
        Path(self.config_path).write_text("sync:\n  system_cue_threshold: 5000\n")
        config = ConfigurationManager(self.config_path)

        with self.assertLogs("djuced_sync.core.config", level="WARNING"):
            self.assertEqual(config.system_cue_threshold, 1000)
        self.assertEqual(config.sync_settings["system_cue_threshold"], 1000)

    def test_cue_threshold_below_system_cues_kept(self) -> None:
        config = ConfigurationManager(self.config_path)
        self.assertEqual(config.system_cue_threshold, 500)

    def test_global_instance(self) -> None:
        first = get_config(self.config_path)
        self.assertIs(get_config(), first)
        self.assertEqual(first.sync_settings["system_cue_threshold"], 500)

        reset_config()
        self.assertIsNot(get_config(self.config_path), first)


if __name__ == "__main__":
    unittest.main()
