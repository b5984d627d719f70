"""
CLI main application module.

This module contains the main application entry point and the handlers
for the ``query``, ``ingest`` and ``update-api`` commands.
"""

import json
import logging
import sys
from typing import List, Optional

from ..constants import (
    DEBUG,
    EXIT_SUCCESS,
    EXIT_FAILURE,
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
)

from ..core import (
    ingest_file,
    ingest_file_to_shelf,
    write_csv_file,
)

from ..api import (
    create_session,
    update_api,
    next_steps,
)

from ..exceptions import (
    ConfigError,
    DownloadError,
    SessionError,
    SourceUnavailable,
)

from ..models import IngestSettings

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
    debug_print,
    format_message,
)

from ..config.loader import ConfigLoader
from ..config.schema import ConfigSchema

logger = logging.getLogger(__name__)


def _log_configuration(config: ConfigSchema) -> None:
    debug_print(DEBUG, "", f"Level={config.debug}", verbosity=config.debug, logger=logger)
    debug_print(
        DEBUG, "",
        f"Progress updates every [{config.report_every}] items within a group (or 100%)",
        verbosity=config.debug, logger=logger,
    )
    for name, value in ConfigLoader.masked(config).items():
        if value:
            debug_print(DEBUG, "CONFIG", f"  {name} = [{value}]", verbosity=config.debug, logger=logger)


def run_query(config: ConfigSchema, args) -> int:
    """Open a session and print every object matching the query."""
    try:
        with create_session(config) as session:
            debug_print(DEBUG, "", "Session established", verbosity=config.debug, logger=logger)
            objects = session.get(args.object, ipv4addr=args.ipv4addr)
    except SessionError as e:
        logger.error(f"ERROR :  {e}")
        return EXIT_FAILURE

    logger.info(f"Found {len(objects)} {args.object} object(s) for {args.ipv4addr}")
    for obj in objects:
        print(json.dumps(obj, indent=2))
    return EXIT_SUCCESS


def run_ingest(config: ConfigSchema, args) -> int:
    """Ingest a CSV export and optionally show or re-write it."""
    settings = IngestSettings(verbosity=config.debug, report_every=config.report_every)

    try:
        if args.store:
            result = ingest_file_to_shelf(args.input_file, key_column=args.key,
                                          settings=settings, store_path=args.store)
        else:
            result = ingest_file(args.input_file, key_column=args.key, settings=settings)
    except (SourceUnavailable, UnicodeDecodeError) as e:
        logger.error(f"Failed to process input file: {e}")
        return EXIT_INPUT_ERROR

    index = result.index
    try:
        logger.info(
            f"Read [{result.lines_read}] line(s), [{result.rejected_lines}] were rejected, "
            f"{len(index)} record(s) indexed from [{result.source}]"
        )

        if args.show:
            for key in sorted(index):
                print(f"{key}: {format_message(index[key])}")

        if args.output:
            if args.fields:
                fields = args.fields
            elif result.schema is not None:
                fields = list(result.schema.fields)
            else:
                fields = []
            written = write_csv_file(args.output, fields, index, settings=settings)
            logger.info(f"Wrote {written} record(s) to {args.output}")
    finally:
        index.close()

    return EXIT_SUCCESS


def run_update_api(config: ConfigSchema, args=None) -> int:
    """Download and unpack the API distribution, then print the remaining steps."""
    try:
        plan = update_api(config)
    except DownloadError as e:
        logger.error(f"ERROR :  {e}")
        return EXIT_FAILURE

    print("ACTION:  Copy and paste the next series of commands into a terminal window.")
    for command in next_steps(plan):
        print(f"  {command}")
    return EXIT_SUCCESS


COMMANDS = {
    "query": run_query,
    "ingest": run_ingest,
    "update-api": run_update_api,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Load configuration before logging so the config file can set the debug level
    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
    except ConfigError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    log_file = setup_logging(debug=config.debug, log_to_file=config.log_to_file)
    if log_file:
        logger.info(f"Logging to {log_file}")
    _log_configuration(config)

    try:
        exit_code = COMMANDS[args.command](config, args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)

    if exit_code != EXIT_SUCCESS:
        sys.exit(exit_code)


def update_api_main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the standalone ``ibadmin-update-api`` command."""
    argv = list(sys.argv[1:] if argv is None else argv)
    main(argv + ["update-api"])
