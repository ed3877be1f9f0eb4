"""
Command-line interface for the svadilfari build utilities.

Each subcommand maps to one host operation, which makes the primitives usable
from shell scripts and easy to exercise by hand:

    svadilfari-utils find src -e c -r
    svadilfari-utils mkdir build
    svadilfari-utils fullclean build.ninja -b build
    svadilfari-utils exec ninja -f build.ninja
"""

import argparse
import dataclasses
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from ..config import get_config, set_config_path
from ..finder import iter_matches
from ..models import CleanSpec, SearchSpec
from ..orchestration import full_clean
from ..system import exec_replace, make_directory
from ..validation import ValidationError, handle_cli_error

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"

# Shell convention for "command not found / could not be executed".
EXEC_FAILED_EXIT_CODE = 127


def _setup_logging(level: int) -> None:
    # stdout carries command output (find results), so logs go to stderr.
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="svadilfari-utils",
        description="File discovery, exec, directory and clean primitives for build scripts.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to a config.toml file. Defaults to conf/config.toml when present.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging, including ignored filesystem failures.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    find_parser = subparsers.add_parser("find", help="List files matching an extension.")
    find_parser.add_argument("path", help="Directory to search.")
    find_parser.add_argument(
        "-e",
        "--extension",
        help="Extension to match, without the leading dot. Matches all files when omitted.",
    )
    find_parser.add_argument("-r", "--recursive", action="store_true", help="Descend into subdirectories.")
    find_parser.add_argument("--sort", action="store_true", help="Walk each directory in name order.")

    mkdir_parser = subparsers.add_parser("mkdir", help="Create one directory level, ignoring failures.")
    mkdir_parser.add_argument("path", help="Directory to create.")

    clean_parser = subparsers.add_parser(
        "fullclean", help="Run '<tool> -f OUTPUT -t clean', then remove the build artifacts."
    )
    clean_parser.add_argument("output", help="Build description file; removed afterwards.")
    clean_parser.add_argument("-b", "--build-folder", help="Build directory to remove if empty.")
    clean_parser.add_argument("--tool", help="Clean tool to run instead of the configured one.")

    exec_parser = subparsers.add_parser("exec", help="Replace this process with EXECUTABLE.")
    exec_parser.add_argument("executable", help="Executable, looked up on PATH.")
    exec_parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Arguments passed through.")

    return parser


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Main command-line interface.

    Args:
        argv: Arguments to parse; ``sys.argv[1:]`` when omitted

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    _setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.config:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (OSError, ValidationError, tomllib.TOMLDecodeError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )

    if not args.verbose:
        logging.getLogger().setLevel(app_config.log_level)

    if args.command == "find":
        finder_config = app_config
        if args.sort:
            finder_config = dataclasses.replace(app_config, sort_entries=True)
        spec = SearchSpec(path=args.path, extension=args.extension, recursive=args.recursive)
        for path in iter_matches(spec, finder_config):
            print(path)
        return 0

    if args.command == "mkdir":
        make_directory(args.path)
        return 0

    if args.command == "fullclean":
        full_clean(CleanSpec(output=args.output, build_folder=args.build_folder), tool=args.tool)
        return 0

    if args.command == "exec":
        exec_replace(args.executable, *args.arguments)
        return EXEC_FAILED_EXIT_CODE

    return 2


if __name__ == "__main__":
    sys.exit(main_cli())
