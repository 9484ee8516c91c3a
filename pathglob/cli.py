#!/usr/bin/env python3
"""Command-line interface for pathglob.

This module provides the ``pathglob`` command:
- Expand patterns against the local filesystem and print matching paths
- Test literal paths against patterns with --match
- Option loading from YAML configuration and PATHGLOB_* variables
- Logging setup

Example:
    >>> from pathglob.cli import parse_arguments
    >>> args = parse_arguments(["src/**/*.py", "--max-depth", "2"])
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from pathglob.core.constants import PATHGLOB_VERSION, ConfigKey
from pathglob.glob import expand_names, is_match
from pathglob.infrastructure.config_manager import ConfigError, ConfigManager, ConfigSource
from pathglob.infrastructure.logger import Logger, set_global_logger
from pathglob.options import GlobOptions

DESCRIPTION = "pathglob - expand glob patterns into matching paths"


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Argument list to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace

    Raises:
        SystemExit: On invalid arguments or --help/--version
        CLIError: If arguments are inconsistent
    """
    parser = argparse.ArgumentParser(
        prog="pathglob",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List every Python file below src
  pathglob 'src/**/*.py'

  # Alternation, case-sensitive
  pathglob --case-sensitive '/var/log/{syslog,messages}*'

  # Directories only, at most two levels deep
  pathglob -d --max-depth 2 '/srv/**'

  # Test paths without touching the disk
  pathglob '**/test_*.py' --match tests/test_cli.py src/app.py

Exit status is 0 when at least one path matched, 1 otherwise.
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {PATHGLOB_VERSION}",
    )

    parser.add_argument(
        "patterns",
        metavar="PATTERN",
        nargs="+",
        help="Glob pattern(s) to expand",
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        type=str,
        help="Configuration file path (YAML format)",
    )

    # Matching options
    match_group = parser.add_argument_group("matching options")

    match_group.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Compare names case-sensitively (default: ignore case)",
    )

    match_group.add_argument(
        "-d",
        "--directories-only",
        action="store_true",
        help="Only match directories",
    )

    match_group.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        help="Maximum directory levels a ** wildcard descends (negative: unlimited)",
    )

    match_group.add_argument(
        "--no-cache",
        action="store_true",
        help="Compile segment patterns fresh instead of using the process cache",
    )

    match_group.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first filesystem error instead of skipping it",
    )

    match_group.add_argument(
        "--match",
        metavar="PATH",
        nargs="+",
        help="Print the given paths that match any pattern instead of walking the disk",
    )

    # Logging options
    log_group = parser.add_argument_group("logging options")

    log_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        type=str,
        help="Also write log messages to FILE",
    )

    parsed = parser.parse_args(args)

    _validate_arguments(parsed)

    return parsed


def _validate_arguments(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments namespace

    Raises:
        CLIError: If validation fails
    """
    if args.config:
        config_path = Path(args.config)

        if not config_path.exists():
            raise CLIError(f"Configuration file does not exist: {args.config}")

        if not config_path.is_file():
            raise CLIError(f"Configuration path is not a file: {args.config}")

    if args.log_file:
        log_dir = Path(args.log_file).expanduser().resolve().parent
        if not log_dir.is_dir():
            raise CLIError(f"Log directory does not exist: {log_dir}")


def build_config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build configuration dictionary from command-line arguments.

    Only options given on the command line are included, so that lower
    precedence sources keep their values otherwise.

    Args:
        args: Parsed arguments namespace

    Returns:
        Configuration dictionary for ConfigManager
    """
    options: Dict[str, Any] = {}

    if args.case_sensitive:
        options[ConfigKey.IGNORE_CASE] = False
    if args.directories_only:
        options[ConfigKey.DIRECTORIES_ONLY] = True
    if args.max_depth is not None:
        options[ConfigKey.MAX_DEPTH] = args.max_depth
    if args.no_cache:
        options[ConfigKey.CACHE_COMPILED_MATCHERS] = False
    if args.strict:
        options[ConfigKey.THROW_ON_ERROR] = True

    logging_config: Dict[str, Any] = {}
    if args.debug:
        logging_config[ConfigKey.LOG_LEVEL] = "DEBUG"
    if args.log_file:
        logging_config[ConfigKey.LOG_FILE] = args.log_file
    if logging_config:
        options[ConfigKey.LOGGING] = logging_config

    return {ConfigKey.ROOT: options}


def load_configuration(args: argparse.Namespace) -> ConfigManager:
    """
    Load configuration from file, environment and arguments.

    Args:
        args: Parsed arguments namespace

    Returns:
        Configuration manager with every source loaded

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = ConfigManager(args.config)
    config.load_dict(build_config_from_args(args), ConfigSource.CLI_ARGS)
    return config


def setup_logging(args: argparse.Namespace, config: ConfigManager) -> Logger:
    """
    Setup logging based on arguments and configuration.

    The logger is installed globally so the expansion engine reports through
    the same handlers.

    Args:
        args: Parsed arguments namespace
        config: Loaded configuration

    Returns:
        Configured logger instance
    """
    log_level = "DEBUG" if args.debug else config.get("pathglob.logging.level", "INFO")
    log_file = args.log_file or config.get("pathglob.logging.file")

    logger = Logger("pathglob", level=log_level)

    if log_file:
        logger.add_handler(logger.create_file_handler(log_file))
        logger.debug("Logging to file", file=log_file)

    set_global_logger(logger)
    return logger


def run(
    args: argparse.Namespace,
    options: GlobOptions,
    logger: Logger,
    out: Optional[TextIO] = None,
) -> int:
    """
    Expand or match the requested patterns.

    Args:
        args: Parsed arguments namespace
        options: Glob options
        logger: Logger instance
        out: Output stream (defaults to stdout)

    Returns:
        Exit status: 0 if anything matched, 1 otherwise
    """
    out = out or sys.stdout
    matched = 0

    if args.match:
        for path in args.match:
            if any(is_match(pattern, path, options) for pattern in args.patterns):
                print(path, file=out)
                matched += 1
        logger.debug("Matched paths", matched=matched, tested=len(args.match))
        return 0 if matched else 1

    for pattern in args.patterns:
        with logger.add_context(pattern=pattern):
            logger.debug("Expanding pattern")
            for name in expand_names(pattern, options):
                print(name, file=out)
                matched += 1

    logger.debug("Expansion finished", matched=matched)
    return 0 if matched else 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    try:
        args = parse_arguments(argv)
        config = load_configuration(args)
        logger = setup_logging(args, config)
        options = config.to_options()

        return run(args, options, logger)

    except (CLIError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except OSError as e:
        # Only reachable with --strict
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
