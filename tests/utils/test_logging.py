#!/usr/bin/env python3
"""
Tests for logging utilities.

This module tests the leveled debug printer, message formatting and the
timestamped log file naming.
"""

import logging
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from ibadmin.models import Record
from ibadmin.utils import debug_print, format_message, get_log_filename, setup_logging


class TestDebugPrint(unittest.TestCase):
    """Test cases for debug_print."""

    def setUp(self):
        self.logger = logging.getLogger("ibadmin.tests.debug")

    def test_suppressed_below_level(self):
        with patch.object(self.logger, "log") as mock_log:
            self.assertFalse(debug_print(3, "FILE", "hello", verbosity=2, logger=self.logger))
        mock_log.assert_not_called()

    def test_label_and_level_formatting(self):
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            self.assertTrue(debug_print(3, "FILE", "hello", verbosity=3, logger=self.logger))
        self.assertEqual(captured.records[0].getMessage(), "FILE   [03]:  hello")
        self.assertEqual(captured.records[0].levelno, logging.DEBUG)

    def test_empty_label_defaults_to_debug(self):
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            debug_print(99, "", "x", "y", verbosity=99, logger=self.logger)
        self.assertEqual(captured.records[0].getMessage(), "DEBUG  [99]:  x y")

    def test_levels_map_to_logging_levels(self):
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            debug_print(0, "ERROR", "a", verbosity=0, logger=self.logger)
            debug_print(1, "WARN", "b", verbosity=1, logger=self.logger)
            debug_print(2, "------", "c", verbosity=2, logger=self.logger)
        levels = [record.levelno for record in captured.records]
        self.assertEqual(levels, [logging.ERROR, logging.WARNING, logging.INFO])


class TestFormatMessage(unittest.TestCase):
    """Test cases for format_message."""

    def test_mapping_is_sorted(self):
        self.assertEqual(format_message({"b": "2", "a": "1"}), "[a=1], [b=2]")

    def test_record_lists_are_joined(self):
        record = Record({"name": "host1", "ips": ["10.0.0.1", "10.0.0.2"]})
        self.assertEqual(format_message(record), "[ips=10.0.0.1,10.0.0.2], [name=host1]")

    def test_plain_text_and_extra(self):
        self.assertEqual(format_message("count", 3), "count 3")


class TestLogFiles(unittest.TestCase):
    """Test cases for log file naming and setup."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.old_cwd = os.getcwd()
        os.chdir(self.temp_dir)

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
        os.chdir(self.old_cwd)
        shutil.rmtree(self.temp_dir)

    def test_log_filename_strips_script_suffix(self):
        filename = get_log_filename("update-api.py")
        self.assertTrue(filename.startswith("update-api."))
        self.assertTrue(filename.endswith(".log"))
        self.assertNotIn(".py", filename)

    def test_existing_log_file_is_removed(self):
        filename = get_log_filename("ibadmin", now=0)
        with open(filename, "w") as f:
            f.write("old")
        self.assertEqual(get_log_filename("ibadmin", now=0), filename)
        self.assertFalse(os.path.exists(filename))

    def test_setup_logging_levels(self):
        self.assertIsNone(setup_logging(debug=0))
        self.assertEqual(logging.getLogger().level, logging.INFO)
        setup_logging(debug=3)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_setup_logging_to_file(self):
        log_file = setup_logging(debug=0, log_to_file=True, log_file="run.log")
        self.assertEqual(log_file, "run.log")
        logging.getLogger("ibadmin.tests").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open("run.log", encoding="utf-8") as f:
            self.assertIn("INFO - written", f.read())


if __name__ == "__main__":
    unittest.main()
