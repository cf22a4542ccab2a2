"""Tests for logging setup."""

from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tfselect.logger import setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("tfselect")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def test_default_level_has_only_console_handler(self) -> None:
        logger = setup_logging("WARNING")
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual([type(h) for h in logger.handlers], [logging.StreamHandler])

    def test_debug_level_adds_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("tfselect.logger.get_log_dir", return_value=Path(tmp) / "logs"):
                logger = setup_logging("debug")
                logging.getLogger("tfselect.scanner").debug("hello from scanner")
                file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
                self.assertEqual(len(file_handlers), 1)
                file_handlers[0].flush()
                content = Path(file_handlers[0].baseFilename).read_text(encoding="utf-8")
                for handler in list(logger.handlers):
                    handler.close()
                logger.handlers.clear()
        self.assertIn("hello from scanner", content)

    def test_unwritable_log_file_keeps_console_logging(self) -> None:
        with mock.patch(
            "tfselect.logger.logging.FileHandler", side_effect=PermissionError("read-only")
        ), mock.patch("tfselect.logger.get_log_dir", return_value=Path(tempfile.gettempdir())):
            stderr = io.StringIO()
            with mock.patch("sys.stderr", stderr):
                logger = setup_logging("DEBUG")
        self.assertEqual([type(h) for h in logger.handlers], [logging.StreamHandler])
        self.assertIn("WARNING: cannot open log file", stderr.getvalue())

    def test_console_handler_never_shows_debug(self) -> None:
        logger = setup_logging("DEBUG", log_file=False)
        console = logger.handlers[0]
        self.assertEqual(console.level, logging.WARNING)

    def test_unknown_level_falls_back_to_warning(self) -> None:
        logger = setup_logging("chatty")
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
