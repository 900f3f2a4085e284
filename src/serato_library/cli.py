"""
Serato Library CLI - Entry point

Reads the Serato library under a directory and prints its tracks and
crates.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from serato_library.core.config import Config, get_log_file_path, load_config
from serato_library.core.console import safe_print
from serato_library.core.output import setup_loguru
from serato_library.domain.library.loader import load_library
from serato_library.domain.records.exceptions import SeratoLibraryError
from serato_library.render import render_library


def run_print_library(root: str, config: Config, flat: bool = False) -> int:
    """Load the library under root and print it.

    Args:
        root: Directory containing the _Serato_ folder
        config: Loaded configuration
        flat: If True, list crates under their encoded names without nesting

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        library = load_library(root, config.library, nest_crates=not flat)
    except SeratoLibraryError as e:
        logger.error(f"Failed to read Serato library at {root}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    render_library(library)
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the serato-library command."""
    parser = argparse.ArgumentParser(
        description="Print the tracks and crates of a Serato DJ library",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'path',
        nargs='?',
        help='Directory containing the _Serato_ folder (default: library.root from config)'
    )
    parser.add_argument(
        '--config',
        help='Path to config.toml (default: ./config.toml or ~/.config/serato-library/config.toml)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log at DEBUG level and mirror logs to stderr'
    )
    parser.add_argument(
        '--flat',
        action='store_true',
        help='Do not rebuild subcrate nesting; list every crate file at the top level'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    level = args.log_level or ('DEBUG' if args.verbose else config.logging.level)
    setup_loguru(
        get_log_file_path(config),
        level=level,
        console_output=args.verbose or config.logging.console_output,
    )

    root = args.path or config.library.root
    if args.flat:
        safe_print("Subcrate nesting disabled (--flat)", style="dim")

    sys.exit(run_print_library(root, config, flat=args.flat))


if __name__ == "__main__":
    main()
