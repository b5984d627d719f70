"""
CLI argument parser module.

This module uses the schema-driven configuration system to
automatically generate the argument parser.
"""

from ..config.loader import ConfigLoader


def create_argument_parser():
    """
    Create and configure the argument parser.

    Global options are generated from the configuration schema by
    ConfigLoader; the sub-commands are added alongside them.
    """
    return ConfigLoader.generate_cli_parser()
