"""Main entry point for Io source tools.

This module provides the CLI interface for normalizing, indenting,
highlighting and cleaning up Io programs.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional, List

import yaml

from preprocessor import strip_trailing_whitespace
from indent import DEFAULT_TAB_WIDTH
from indent.estimator import check_tab_width
from repl import ReplBridge, StreamSender
from output import JSONWriter
from api import (
    ProcessingOptions,
    ProcessingError,
    normalize_text,
    estimate_file_indentation,
    highlight_file,
)

__version__ = "0.1.0"

SUBCOMMANDS = ["normalize", "indent", "highlight", "cleanup", "show-config"]


def setup_logging(level: str = "INFO", quiet: bool = False) -> None:
    """Configure logging.

    Args:
        level: Logging level string (DEBUG, INFO, WARNING, ERROR)
        quiet: If True, suppress all output except errors
    """
    if quiet:
        level = "ERROR"
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    default_config = {
        "tab_width": DEFAULT_TAB_WIDTH,
        "strip_whitespace_on_save": True,
        "interpreter_command": "io",
        "source_extensions": [".io"],
        "output": {
            "pretty_print": True,
            "indent_size": 2,
        },
        "logging": {"level": "INFO"},
    }

    if config_path and config_path.exists():
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f)
            if user_config:
                # Merge user config with defaults
                for key, value in user_config.items():
                    if isinstance(value, dict) and key in default_config:
                        default_config[key].update(value)
                    else:
                        default_config[key] = value

    return default_config


def _create_writer(config: dict) -> JSONWriter:
    output_config = config.get("output", {})
    return JSONWriter(
        pretty_print=output_config.get("pretty_print", True),
        indent=output_config.get("indent_size", 2),
    )


def _validate_source(source: Path) -> bool:
    """Log an error and return False if source is not a readable file."""
    logger = logging.getLogger(__name__)

    if not source.exists():
        logger.error(f"Source file not found: {source}")
        return False

    if not source.is_file():
        logger.error(f"Source path is not a file: {source}")
        return False

    return True


def _resolve_tab_width(args, config: dict) -> int:
    tab_width = getattr(args, "tab_width", None)
    if tab_width is None:
        tab_width = config.get("tab_width", DEFAULT_TAB_WIDTH)
    return check_tab_width(tab_width)


def handle_normalize(args) -> int:
    """Handle the normalize subcommand.

    Args:
        args: Parsed arguments

    Returns:
        Exit code
    """
    logger = logging.getLogger(__name__)
    config = load_config(args.config)

    if str(args.source) == "-":
        source_path = None
        text = sys.stdin.read()
    else:
        if not _validate_source(args.source):
            return 1
        source_path = args.source
        try:
            text = source_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Failed to read source file: {e}")
            return 1

    try:
        if args.json:
            result = normalize_text(text, source_path)
            print(_create_writer(config).write(result))
        else:
            bridge = ReplBridge(StreamSender(sys.stdout))
            bridge.send_buffer(text)
            logger.info(f"Payloads sent: {bridge.sent}")
        return 0

    except Exception as e:
        logger.exception(f"Normalization failed: {e}")
        return 1


def handle_indent(args) -> int:
    """Handle the indent subcommand.

    Args:
        args: Parsed arguments

    Returns:
        Exit code
    """
    logger = logging.getLogger(__name__)

    if not _validate_source(args.source):
        return 1

    config = load_config(args.config)

    try:
        tab_width = _resolve_tab_width(args, config)
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        report = estimate_file_indentation(
            args.source,
            ProcessingOptions(tab_width=tab_width),
        )
        output = report.to_dict()
        if args.changed_only:
            output["lines"] = [line for line in output["lines"] if line["current"] != line["estimated"]]

        print(_create_writer(config).write(output))
        return 0

    except ProcessingError as e:
        logger.error(f"Indentation failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Indentation failed: {e}")
        return 1


def handle_highlight(args) -> int:
    """Handle the highlight subcommand.

    Args:
        args: Parsed arguments

    Returns:
        Exit code
    """
    logger = logging.getLogger(__name__)

    if not _validate_source(args.source):
        return 1

    config = load_config(args.config)

    try:
        result = highlight_file(args.source)
        output = result.to_dict()
        if args.categories:
            wanted = set(args.categories)
            output["spans"] = [span for span in output["spans"] if span["category"] in wanted]

        print(_create_writer(config).write(output))
        return 0

    except ProcessingError as e:
        logger.error(f"Highlighting failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Highlighting failed: {e}")
        return 1


def handle_cleanup(args) -> int:
    """Handle the cleanup subcommand.

    Args:
        args: Parsed arguments

    Returns:
        Exit code (1 with --check when the file needs cleaning)
    """
    logger = logging.getLogger(__name__)

    if not _validate_source(args.source):
        return 1

    config = load_config(args.config)

    if not (args.check or args.force or config.get("strip_whitespace_on_save", True)):
        logger.info("Whitespace cleanup disabled by configuration (use --force to override)")
        return 0

    try:
        with open(args.source, "r", encoding="utf-8", newline="") as f:
            text = f.read()

        cleaned = strip_trailing_whitespace(text)
        if cleaned == text:
            logger.info(f"Already clean: {args.source}")
            return 0

        if args.check:
            if not args.quiet:
                print(f"Would clean: {args.source}")
            return 1

        with open(args.source, "w", encoding="utf-8", newline="") as f:
            f.write(cleaned)

        if not args.quiet:
            print(f"Cleaned: {args.source}")
        return 0

    except (OSError, ValueError) as e:
        logger.error(f"Cleanup failed: {e}")
        return 1


def handle_show_config(args) -> int:
    """Handle the show-config subcommand.

    Args:
        args: Parsed arguments

    Returns:
        Exit code
    """
    config = load_config(args.config)
    print(yaml.safe_dump(config, sort_keys=False), end="")
    return 0


def _add_config_and_logging_options(parser) -> None:
    # Configuration options
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    # Logging options
    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "-V", "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable verbose output (debug level logging)",
    )
    logging_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )


def create_normalize_parser(subparsers):
    """Create the normalize subcommand parser."""
    parser = subparsers.add_parser(
        "normalize",
        help="Normalize Io source into a single interpreter line",
        description="Strip comments and join lines so the code can be sent to a line-oriented Io interpreter.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to Io source file ('-' reads standard input)",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON result instead of the raw payload",
    )

    _add_config_and_logging_options(parser)
    parser.set_defaults(func=handle_normalize)
    return parser


def create_indent_parser(subparsers):
    """Create the indent subcommand parser."""
    parser = subparsers.add_parser(
        "indent",
        help="Estimate the indentation of every line",
        description="Report current and estimated indentation for each line of an Io source file.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to Io source file",
    )
    parser.add_argument(
        "-t", "--tab-width",
        type=int,
        metavar="N",
        help=f"Columns per indentation step (default: from config, {DEFAULT_TAB_WIDTH})",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--changed-only",
        action="store_true",
        help="Only list lines whose estimated indentation differs",
    )

    _add_config_and_logging_options(parser)
    parser.set_defaults(func=handle_indent)
    return parser


def create_highlight_parser(subparsers):
    """Create the highlight subcommand parser."""
    parser = subparsers.add_parser(
        "highlight",
        help="Classify highlighted spans",
        description="List the highlighted spans of an Io source file with their categories.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to Io source file",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--category",
        action="append",
        dest="categories",
        metavar="NAME",
        help="Only list spans of this category (can be specified multiple times)",
    )

    _add_config_and_logging_options(parser)
    parser.set_defaults(func=handle_highlight)
    return parser


def create_cleanup_parser(subparsers):
    """Create the cleanup subcommand parser."""
    parser = subparsers.add_parser(
        "cleanup",
        help="Strip trailing whitespace in place",
        description="Remove trailing whitespace and trailing blank lines, as done on save.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to Io source file",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clean up even if strip_whitespace_on_save is disabled",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report whether the file needs cleaning without modifying it (runs even if cleanup is disabled)",
    )

    _add_config_and_logging_options(parser)
    parser.set_defaults(func=handle_cleanup)
    return parser


def create_show_config_parser(subparsers):
    """Create the show-config subcommand parser."""
    parser = subparsers.add_parser(
        "show-config",
        help="Print the effective configuration",
        description="Print the configuration after merging the YAML file over defaults.",
    )

    _add_config_and_logging_options(parser)
    parser.set_defaults(func=handle_show_config)
    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default to 'normalize' when the first argument is not a subcommand
    if argv and argv[0] not in SUBCOMMANDS + ["-h", "--help", "--version"]:
        argv.insert(0, "normalize")

    parser = argparse.ArgumentParser(
        prog="iotools",
        description="Io Source Tools - Normalizes, indents and highlights Io programs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  normalize    Normalize source into one interpreter line (default)
  indent       Estimate indentation for every line
  highlight    Classify highlighted spans
  cleanup      Strip trailing whitespace in place
  show-config  Print the effective configuration

Examples:
  %(prog)s normalize program.io | io
  %(prog)s program.io          # same as normalize
  %(prog)s indent program.io --tab-width 2
  %(prog)s highlight program.io --category comment

For more information on a command, use: %(prog)s <command> --help
        """,
    )

    # Version
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Create subparsers
    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        metavar="<command>",
    )

    # Add subcommands
    create_normalize_parser(subparsers)
    create_indent_parser(subparsers)
    create_highlight_parser(subparsers)
    create_cleanup_parser(subparsers)
    create_show_config_parser(subparsers)

    args = parser.parse_args(argv)

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.verbose and args.quiet:
        parser.error("--verbose and --quiet cannot be used together")

    # Setup logging
    config_level = load_config(args.config).get("logging", {}).get("level", "INFO")
    log_level = "DEBUG" if args.verbose else config_level
    setup_logging(log_level, quiet=args.quiet)

    # Execute the appropriate handler
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
