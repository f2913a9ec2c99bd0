"""
Command-line interface for the ebook sorter.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .tui import run_tui
from .types import Config, PlaceStrategy


LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)s: %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="ebook-sorter",
        description="Organize your ebooks by extracting metadata from them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Every EPUB file found under the root directory is placed into
<output>/<author>/<title>.epub. Books without an author go to
<output>/Unsorted/, books without a title keep their file name.
Existing files at the destination are overwritten.
        """
    )

    parser.add_argument(
        "-r", "--root",
        type=str,
        default=None,
        help="Directory to search for ebooks (default: current directory)"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Directory to store the ebooks in (default: the root directory)"
    )
    parser.add_argument(
        "-s", "--strategy",
        choices=[strategy.value for strategy in PlaceStrategy],
        default=PlaceStrategy.MOVE.value,
        help="Whether to copy or move the ebooks (default: move)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="",
        help="Optional path to write detailed operation log"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> Config:
    """Parse command-line arguments and create Config."""
    parser = create_parser()
    args = parser.parse_args(argv)

    root = os.path.abspath(args.root) if args.root else os.getcwd()
    if not os.path.exists(root):
        parser.error(f"Path does not exist: {root}")
    if not os.path.isdir(root):
        parser.error(f"Path is not a directory: {root}")

    output = os.path.abspath(args.output) if args.output else root

    return Config(
        root=root,
        output=output,
        strategy=PlaceStrategy(args.strategy),
        verbose=args.verbose,
        log_file=args.log_file if args.log_file else None,
    )


def setup_logging(config: Config) -> None:
    """Log to stderr, and to ``config.log_file`` when given."""
    console_level = logging.INFO if config.verbose else logging.WARNING
    console = logging.StreamHandler()
    console.setLevel(console_level)
    handlers: List[logging.Handler] = [console]

    # The log file records INFO even when the console shows warnings only
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.INFO if config.log_file else console_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        config = parse_args(argv)
        setup_logging(config)
        logging.info(f"Starting ebook sorter with config: {config}")
        return run_tui(config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
