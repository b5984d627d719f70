#!/usr/bin/env python3
"""
Tests for the INI-style config file reader.
"""

import os
import shutil
import tempfile
import unittest

from ibadmin.config import read_config

SAMPLE_CONFIG = """\
# Top of config file
username=admin
password=infoblox
; alternate comment
empty=

[dns6demo]
grid_master=dns6demo.infoblox.com
username=dns6_admin

[lab]
grid_master=10.0.0.2
username=lab_admin
"""


class TestReadConfig(unittest.TestCase):
    """Test cases for read_config."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "ibadmin.conf")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, content):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)

    def test_global_settings_only(self):
        self._write(SAMPLE_CONFIG)
        self.assertEqual(read_config(self.path), {"username": "admin", "password": "infoblox"})

    def test_named_section_overrides_globals(self):
        self._write(SAMPLE_CONFIG)
        config = read_config(self.path, "dns6demo")
        self.assertEqual(config, {
            "username": "dns6_admin",
            "password": "infoblox",
            "grid_master": "dns6demo.infoblox.com",
        })

    def test_later_section(self):
        self._write(SAMPLE_CONFIG)
        config = read_config(self.path, "lab")
        self.assertEqual(config["grid_master"], "10.0.0.2")
        self.assertEqual(config["username"], "lab_admin")

    def test_unknown_section_reads_globals(self):
        self._write(SAMPLE_CONFIG)
        self.assertEqual(read_config(self.path, "missing"), {"username": "admin", "password": "infoblox"})

    def test_end_marker_stops_reading(self):
        self._write("username=admin\n__END__\npassword=secret\n")
        self.assertEqual(read_config(self.path), {"username": "admin"})

    def test_keys_and_values_are_trimmed_and_crs_dropped(self):
        self._write("  username = admin \r\n")
        self.assertEqual(read_config(self.path), {"username": "admin"})

    def test_existing_record_is_updated(self):
        self._write("username=admin\n")
        record = {"password": "x"}
        result = read_config(self.path, record=record)
        self.assertIs(result, record)
        self.assertEqual(record, {"password": "x", "username": "admin"})

    def test_missing_file_returns_record(self):
        self.assertEqual(read_config(self.path, record={"a": "1"}), {"a": "1"})


if __name__ == "__main__":
    unittest.main()
