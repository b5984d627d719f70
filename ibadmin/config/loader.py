"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple
sources, and to generate the command line parser.
"""

import logging
import os
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .._version import __version__
from ..constants import (
    DEFAULT_CONFIG_FILE,
    FALLBACK_CONFIG_FILE,
)
from ..exceptions import ConfigError
from .conf_file import read_config
from .schema import ConfigSchema


logger = logging.getLogger(__name__)


def _extra(field_info) -> Dict[str, Any]:
    return field_info.json_schema_extra or {}


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        config_file: Optional[str] = None,
        section: Optional[str] = None,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. Config file (--config, else ibadmin.conf, else default.conf)
        3. .env.local file (if it exists)
        4. OS environment variables
        5. CLI arguments
        6. Explicit overrides keyed by field name (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            overrides: Direct overrides mapping, keyed by field name
            config_file: Config file path when not given on the command line
            section: Config file section when not given on the command line

        Returns:
            Validated configuration instance

        Raises:
            ConfigError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load from the INI-style config file
        if cli_args is not None:
            config_file = getattr(cli_args, "config", None) or config_file
            section = getattr(cli_args, "section", None) or section
        for name, value in _load_config_file(config_file, section).items():
            if name in schema.model_fields:
                config_dict[name] = value
            else:
                logger.debug(f"Ignoring unknown config file setting '{name}'")

        # Step 2: Load from .env.local file if available
        _load_from_dotenv_file()

        # Step 3: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            env_var = _extra(field_info).get("env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    # Strip whitespace and ignore empty strings
                    stripped = env_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped

        # Step 4: Apply CLI arguments
        if cli_args is not None:
            debug = _resolve_debug(cli_args)
            if debug is not None:
                config_dict["debug"] = debug

            for field_name, field_info in schema.model_fields.items():
                extra = _extra(field_info)
                cli_arg = extra.get("cli_arg")
                if not cli_arg or extra.get("cli_custom") or not hasattr(cli_args, cli_arg):
                    continue
                cli_value = getattr(cli_args, cli_arg)
                if cli_value is None:
                    continue
                if isinstance(cli_value, str):
                    stripped = cli_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped
                else:
                    config_dict[field_name] = cli_value

        # Step 5: Apply explicit overrides
        if overrides:
            for field_name, value in overrides.items():
                if value is not None:
                    config_dict[field_name] = value

        # Step 6: Create and validate the configuration
        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            # Convert Pydantic validation errors to more user-friendly messages
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = _extra(field_info).get("env_var") if field_info else str(field).upper()
                errors.append(f"{field} ({env_var}): {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ConfigError(error_msg) from e

    @staticmethod
    def masked(config: ConfigSchema) -> Dict[str, Any]:
        """Return the settings with sensitive values masked, for safe logging."""
        values = {}
        for field_name, field_info in type(config).model_fields.items():
            value = getattr(config, field_name)
            if _extra(field_info).get("sensitive") and value:
                value = "***"
            values[field_name] = value
        return values

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Infoblox grid administration toolkit",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Global options (schema settings, config file and debug flags) come
        before the sub-command.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            prog="ibadmin",
            description=description,
            epilog="""
Examples:
  ibadmin -s dns6demo.infoblox.com query --ipv4addr 192.168.1.97
  ibadmin -x dns6demo -d -d ingest networks.csv --key network
  ibadmin --dir /tmp/ update-api
            """,
        )

        # Standard options that don't map directly to a schema field
        parser.add_argument(
            "-c", "--config",
            help=f"Config file to read (default: {DEFAULT_CONFIG_FILE}, then {FALLBACK_CONFIG_FILE})",
        )
        parser.add_argument(
            "-x", "--section",
            help="Config file section to read in addition to the global settings",
        )
        parser.add_argument(
            "-d", "--debug",
            action="count",
            default=None,
            help="Increase the debug level (repeatable)",
        )
        parser.add_argument(
            "--debug-level",
            type=int,
            help="Set the debug level explicitly (0-99)",
        )
        parser.add_argument(
            "--nodebug",
            action="store_true",
            help="Disable debugging output",
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        # Add schema-based arguments
        for field_name, field_info in schema.model_fields.items():
            extra = _extra(field_info)
            cli_arg = extra.get("cli_arg")
            if not cli_arg or extra.get("cli_custom"):
                continue

            flags = extra.get("cli_flags") or []
            long_flag = f"--{cli_arg.replace('_', '-')}"
            if long_flag not in flags:
                flags = flags + [long_flag]

            kwargs = {
                "dest": cli_arg,
                "help": field_info.description or f"Override {extra.get('env_var', field_name.upper())}",
                "default": None,  # Don't set schema defaults here - let the loader handle it
            }

            field_type = field_info.annotation
            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float
            elif field_type == bool:
                choices = extra.get("cli_choices")
                if choices:
                    kwargs["choices"] = choices
                else:
                    kwargs["action"] = "store_true"

            parser.add_argument(*flags, **kwargs)

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        query = subparsers.add_parser("query", help="Query objects on the Grid Master")
        query.add_argument(
            "--object",
            default="fixedaddress",
            help="Object type to search for (default: fixedaddress)",
        )
        query.add_argument(
            "--ipv4addr",
            default="192.168.1.97",
            help="IPv4 address to search for (default: 192.168.1.97)",
        )

        ingest = subparsers.add_parser("ingest", help="Read a CSV export into a keyed index")
        ingest.add_argument("input_file", help="CSV file to read; the first line is the header")
        ingest.add_argument("--key", help="Key column (default: first header column)")
        ingest.add_argument("--store", help="Keep records in a persistent store at this path")
        ingest.add_argument("--output", help="Append selected fields of every record to this CSV file")
        ingest.add_argument(
            "--fields",
            help="Space separated list of fields to write with --output (default: all header fields)",
        )
        ingest.add_argument("--show", action="store_true", help="Print every record")

        subparsers.add_parser(
            "update-api",
            help="Download and unpack the API distribution from the Grid Master",
        )

        return parser


def _resolve_debug(cli_args: Namespace) -> Optional[int]:
    """Combine --nodebug, --debug-level and repeated -d into one level."""
    if getattr(cli_args, "nodebug", False):
        return 0
    level = getattr(cli_args, "debug_level", None)
    if level is not None:
        return level
    return getattr(cli_args, "debug", None) or None


def _load_config_file(config_file: Optional[str], section: Optional[str]) -> Dict[str, str]:
    """Read the explicit config file, or the first default one that exists."""
    if config_file:
        if not os.path.exists(config_file):
            raise ConfigError(f"Config file not found: {config_file}")
        return read_config(config_file, section)

    for candidate in (DEFAULT_CONFIG_FILE, FALLBACK_CONFIG_FILE):
        if os.path.exists(candidate):
            return read_config(candidate, section)
    return {}


def _load_from_dotenv_file() -> None:
    """Load values from .env.local file if it exists."""
    if os.path.exists(".env.local"):
        load_dotenv(".env.local", override=False)
        logger.debug("Loaded configuration from .env.local file")
    else:
        logger.debug(".env.local file not found, skipping")
