"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the toolkit.
"""

from typing import Any
from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEBUG,
    DEFAULT_API_PATH,
    DEFAULT_GRID_MASTER,
    DEFAULT_PASSWORD,
    DEFAULT_REPORT_EVERY,
    DEFAULT_TEMP_DIR,
    DEFAULT_TIMEOUT,
    DEFAULT_USERNAME,
    DEFAULT_WAPI_VERSION,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set from a config file (by field name), an
    environment variable or a CLI flag.
    """

    # Grid master connection
    grid_master: str = Field(
        DEFAULT_GRID_MASTER,
        description="IP address or hostname of the Grid Master",
        json_schema_extra={
            "env_var": "IBADMIN_GRID_MASTER",
            "cli_arg": "grid_master",
            "cli_flags": ["-s", "--server", "--gmip"],
        }
    )

    username: str = Field(
        DEFAULT_USERNAME,
        description="Admin username for the Grid Master",
        json_schema_extra={
            "env_var": "IBADMIN_USERNAME",
            "cli_arg": "username",
            "cli_flags": ["-u", "--username"],
        }
    )

    password: str = Field(
        DEFAULT_PASSWORD,
        description="Admin password for the Grid Master",
        json_schema_extra={
            "env_var": "IBADMIN_PASSWORD",
            "cli_arg": "password",
            "cli_flags": ["-p", "--password"],
            "sensitive": True,
        }
    )

    wapi_version: str = Field(
        DEFAULT_WAPI_VERSION,
        description="WAPI version used for session requests",
        json_schema_extra={
            "env_var": "IBADMIN_WAPI_VERSION",
            "cli_arg": "wapi_version",
        }
    )

    verify_ssl: bool = Field(
        False,
        description="Verify the Grid Master TLS certificate",
        json_schema_extra={
            "env_var": "IBADMIN_VERIFY_SSL",
            "cli_arg": "verify_ssl",
            "cli_choices": ["true", "false"],
        }
    )

    timeout: int = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="HTTP timeout in seconds",
        json_schema_extra={
            "env_var": "IBADMIN_TIMEOUT",
            "cli_arg": "timeout",
        }
    )

    # Logging
    debug: int = Field(
        0,
        ge=0,
        le=DEBUG,
        description="Debug level (0-99)",
        json_schema_extra={
            "env_var": "IBADMIN_DEBUG",
            "cli_arg": "debug",
            "cli_custom": True,  # -d/--debug and --nodebug are added by the CLI
        }
    )

    log_to_file: bool = Field(
        False,
        description="Also write log output to a timestamped log file",
        json_schema_extra={
            "env_var": "IBADMIN_LOG_TO_FILE",
            "cli_arg": "log_to_file",
        }
    )

    # Ingestion
    report_every: int = Field(
        DEFAULT_REPORT_EVERY,
        gt=0,
        description="Report progress every N records",
        json_schema_extra={
            "env_var": "IBADMIN_REPORT_EVERY",
            "cli_arg": "report_every",
        }
    )

    # API distribution download
    temp_dir: str = Field(
        DEFAULT_TEMP_DIR,
        description="Directory the API archive is downloaded to",
        json_schema_extra={
            "env_var": "IBADMIN_TEMP_DIR",
            "cli_arg": "temp_dir",
            "cli_flags": ["--dir"],
        }
    )

    api_path: str = Field(
        DEFAULT_API_PATH,
        description="Path of the API distribution listing on the Grid Master",
        json_schema_extra={
            "env_var": "IBADMIN_API_PATH",
            "cli_arg": "api_path",
        }
    )

    @field_validator('verify_ssl', 'log_to_file', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.strip().lower()
            if v_lower in ('1', 'true', 'yes', 'on'):
                return True
            elif v_lower in ('0', 'false', 'no', 'off'):
                return False
            else:
                raise ValueError(f"Invalid boolean value: {v}")
        return bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
