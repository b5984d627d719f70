#!/usr/bin/env python3
"""
Tests for the schema-driven configuration loader.

This module tests precedence across config files, .env.local, environment
variables, CLI flags and overrides, plus the generated CLI parser.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from ibadmin.config import ConfigError, ConfigLoader, ConfigSchema


class TestConfigLoader(unittest.TestCase):
    """Test cases for ConfigLoader.load."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.old_cwd = os.getcwd()
        os.chdir(self.temp_dir)
        self.parser = ConfigLoader.generate_cli_parser()

    def tearDown(self):
        os.chdir(self.old_cwd)
        shutil.rmtree(self.temp_dir)

    def _write(self, name, content):
        with open(name, "w", encoding="utf-8") as f:
            f.write(content)

    def _args(self, *argv):
        return self.parser.parse_args(list(argv) + ["update-api"])

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = ConfigLoader.load()
        self.assertEqual(config.grid_master, "192.168.1.2")
        self.assertEqual(config.username, "admin")
        self.assertEqual(config.wapi_version, "v2.12")
        self.assertEqual(config.debug, 0)
        self.assertEqual(config.report_every, 2500)
        self.assertFalse(config.verify_ssl)

    @patch.dict(os.environ, {}, clear=True)
    def test_default_config_file(self):
        self._write("ibadmin.conf", "username=conf_user\nbogus=1\n")
        config = ConfigLoader.load()
        self.assertEqual(config.username, "conf_user")

    @patch.dict(os.environ, {}, clear=True)
    def test_fallback_config_file(self):
        self._write("default.conf", "grid_master=gm.example.com\n")
        self.assertEqual(ConfigLoader.load().grid_master, "gm.example.com")

    @patch.dict(os.environ, {}, clear=True)
    def test_section_from_cli(self):
        self._write("site.conf", "username=admin\n[lab]\nusername=lab_admin\n")
        config = ConfigLoader.load(cli_args=self._args("-c", "site.conf", "-x", "lab"))
        self.assertEqual(config.username, "lab_admin")

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_explicit_config_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.load(config_file="nope.conf")

    @patch.dict(os.environ, {"IBADMIN_USERNAME": "env_user", "IBADMIN_TIMEOUT": "30"}, clear=True)
    def test_environment_overrides_config_file(self):
        self._write("ibadmin.conf", "username=conf_user\n")
        config = ConfigLoader.load()
        self.assertEqual(config.username, "env_user")
        self.assertEqual(config.timeout, 30)

    @patch.dict(os.environ, {}, clear=True)
    def test_dotenv_file(self):
        self._write(".env.local", "IBADMIN_GRID_MASTER=dotenv.example.com\n")
        self.assertEqual(ConfigLoader.load().grid_master, "dotenv.example.com")

    @patch.dict(os.environ, {"IBADMIN_USERNAME": "env_user"}, clear=True)
    def test_cli_overrides_environment(self):
        config = ConfigLoader.load(cli_args=self._args("-u", "cli_user", "--verify-ssl", "true"))
        self.assertEqual(config.username, "cli_user")
        self.assertTrue(config.verify_ssl)

    @patch.dict(os.environ, {}, clear=True)
    def test_overrides_win(self):
        config = ConfigLoader.load(cli_args=self._args("-u", "cli_user"), overrides={"username": "override"})
        self.assertEqual(config.username, "override")

    @patch.dict(os.environ, {"IBADMIN_DEBUG": "5"}, clear=True)
    def test_debug_flags(self):
        self.assertEqual(ConfigLoader.load(cli_args=self._args()).debug, 5)
        self.assertEqual(ConfigLoader.load(cli_args=self._args("-d", "-d")).debug, 2)
        self.assertEqual(ConfigLoader.load(cli_args=self._args("--debug-level", "99")).debug, 99)
        self.assertEqual(ConfigLoader.load(cli_args=self._args("-d", "--nodebug")).debug, 0)

    @patch.dict(os.environ, {"IBADMIN_TIMEOUT": "0"}, clear=True)
    def test_validation_error_names_environment_variable(self):
        with self.assertRaises(ConfigError) as context:
            ConfigLoader.load()
        self.assertIn("timeout (IBADMIN_TIMEOUT)", str(context.exception))

    @patch.dict(os.environ, {"IBADMIN_LOG_TO_FILE": "maybe"}, clear=True)
    def test_invalid_boolean(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.load()

    def test_masked_hides_password(self):
        masked = ConfigLoader.masked(ConfigSchema(password="secret"))
        self.assertEqual(masked["password"], "***")
        self.assertEqual(masked["username"], "admin")


class TestGeneratedParser(unittest.TestCase):
    """Test cases for the generated CLI parser."""

    def setUp(self):
        self.parser = ConfigLoader.generate_cli_parser()

    def test_server_aliases(self):
        for flag in ("-s", "--server", "--gmip", "--grid-master"):
            args = self.parser.parse_args([flag, "gm.example.com", "update-api"])
            self.assertEqual(args.grid_master, "gm.example.com")

    def test_unset_flags_are_none(self):
        args = self.parser.parse_args(["update-api"])
        self.assertIsNone(args.username)
        self.assertIsNone(args.debug)
        self.assertIsNone(args.log_to_file)

    def test_query_defaults(self):
        args = self.parser.parse_args(["query"])
        self.assertEqual(args.command, "query")
        self.assertEqual(args.object, "fixedaddress")
        self.assertEqual(args.ipv4addr, "192.168.1.97")

    def test_ingest_arguments(self):
        args = self.parser.parse_args(["-d", "ingest", "hosts.csv", "--key", "ip", "--show"])
        self.assertEqual(args.debug, 1)
        self.assertEqual(args.input_file, "hosts.csv")
        self.assertEqual(args.key, "ip")
        self.assertTrue(args.show)

    def test_dir_flag(self):
        args = self.parser.parse_args(["--dir", "/var/tmp/", "update-api"])
        self.assertEqual(args.temp_dir, "/var/tmp/")

    def test_command_is_required(self):
        with patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                self.parser.parse_args([])


if __name__ == "__main__":
    unittest.main()
