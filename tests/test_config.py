"""Tests for config loading and environment overrides.

Malformed config data must fall back to defaults rather than fail.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tfselect import config
from tfselect.ui_theme import DEFAULT_THEME, MONO_THEME, PLAIN_THEME, normalize_theme_name, resolve_theme


class LoadConfigTests(unittest.TestCase):
    def test_missing_file_yields_empty_dict(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(config.load_config(Path(tmp) / "nope.json"), {})

    def test_malformed_or_non_object_json_yields_empty_dict(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(config.load_config(path), {})
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(config.load_config(path), {})

    def test_default_path_is_used_without_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"theme": "mono"}), encoding="utf-8")
            with mock.patch("tfselect.config.CONFIG_PATH", path), mock.patch.dict(
                "tfselect.config.os.environ", {}, clear=True
            ):
                self.assertEqual(config.load_config(), {"theme": "mono"})


class LoadSettingsTests(unittest.TestCase):
    def _write(self, tmp: str, data: object) -> Path:
        path = Path(tmp) / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_defaults_without_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = config.load_settings({"TFSELECT_CONFIG": str(Path(tmp) / "missing.json")})
        self.assertEqual(settings, config.Settings())
        self.assertEqual(settings.terraform_binary, "terraform")
        self.assertEqual(settings.log_level, "WARNING")

    def test_values_from_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp,
                {"theme": " mono ", "terraform_binary": "tofu", "log_level": "debug", "auto_select_all": True},
            )
            settings = config.load_settings({"TFSELECT_CONFIG": str(path)})
        self.assertEqual(settings.theme, "mono")
        self.assertEqual(settings.terraform_binary, "tofu")
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertTrue(settings.auto_select_all)

    def test_environment_overrides_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, {"terraform_binary": "tofu", "log_level": "INFO"})
            settings = config.load_settings(
                {
                    "TFSELECT_CONFIG": str(path),
                    "TFSELECT_TERRAFORM": "/opt/terraform",
                    "TFSELECT_LOG_LEVEL": "error",
                    "NO_COLOR": "1",
                }
            )
        self.assertEqual(settings.terraform_binary, "/opt/terraform")
        self.assertEqual(settings.log_level, "ERROR")
        self.assertTrue(settings.no_color)

    def test_wrong_types_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp,
                {"theme": 3, "terraform_binary": "", "log_level": None, "auto_select_all": "yes"},
            )
            settings = config.load_settings({"TFSELECT_CONFIG": str(path)})
        self.assertEqual(settings, config.Settings())


class ThemeResolutionTests(unittest.TestCase):
    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("nope"), "default")
        self.assertEqual(normalize_theme_name(" MONO "), "mono")

    def test_no_color_wins(self) -> None:
        self.assertIs(resolve_theme("mono", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("mono"), MONO_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
