from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and merging
of configuration sources (defaults, optional JSON file, and CLI overrides),
analysis execution, and result rendering.

Exit codes:
    0: Success (warnings and incomplete results included).
    1: Output could not be rendered or written, or the analysis crashed.
    2: Invalid configuration.
    130: Interrupted by the user.
"""

import json
import sys
from typing import List, Optional

from file_analyzer.core.output.formatters import OutputFormat, render
from file_analyzer.core.pipeline.engine import analyze
from file_analyzer.core.pipeline.stages.validator import validate_config
from file_analyzer.domain.config import get_default_config, load_config_file, merge_config
from file_analyzer.domain.errors import ConfigurationError, SerializationError
from file_analyzer.infra.fs import write_output
from file_analyzer.infra.logging import LoggingConfig, configure_logging, get_logger
from file_analyzer.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    configure_logging(
        LoggingConfig.for_cli(debug=args.debug, verbose=args.verbose, log_file=args.log_file)
    )
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Output format is checked before any traversal work
    try:
        output_format = OutputFormat.parse(args.output_format)
    except ValueError as e:
        return _fail(str(e), EXIT_CONFIG_ERROR)

    # 4. Resolve configuration: defaults -> config file -> flags
    try:
        raw_conf = get_default_config()
        if args.config_file:
            raw_conf = merge_config(raw_conf, load_config_file(args.config_file))
        raw_conf = merge_config(raw_conf, cli_args.args_to_overrides(args))

        config, warnings = validate_config(raw_conf, strict=False)
    except ConfigurationError as e:
        return _fail(str(e), EXIT_CONFIG_ERROR)

    for w in warnings:
        logger.warning(f"Configuration Warning: {w}")

    # Short-circuit if configuration dump is requested
    if args.dump_config:
        print(json.dumps(config.as_dict(), ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Analysis phase
    try:
        result = analyze(config)
    except KeyboardInterrupt:
        msg = "Analysis interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = f"Analysis failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    try:
        content = render(result, output_format, root_path=config.root_path)
        write_output(content, args.output_path)
    except SerializationError as e:
        return _fail(str(e), EXIT_FAILURE)
    except OSError as e:
        return _fail(f"Error writing output: {e}", EXIT_FAILURE)

    if args.output_path:
        logger.info(f"Result written to {args.output_path}")

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _fail(msg: str, code: int) -> int:
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
