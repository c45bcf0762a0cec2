"""
v2df Command Line
=================

Entry point for the `v2df` console script.

Commands:
    init [path]    Write a default v2df_config.yaml (overwrites existing)
    run  [path]    Decode the video and write every project's output
    test [path]    Single-frame preview of every project
    help           Show usage

[path] defaults to the current directory.

Usage:
    v2df init ./my-project
    v2df run ./my-project
    python -m video_to_df test
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from video_to_df.config import (
    DEFAULT_CONFIG_FILENAME,
    Settings,
    default_config_text,
    load_config,
    setup_logging,
)
from video_to_df.errors import EmptyFrameCollectionError, V2DFError
from video_to_df.output.writers import ensure_directory, write_text
from video_to_df.pipeline.project import preview_projects, write_projects
from video_to_df.video import read_single_channel_frames


logger = logging.getLogger(__name__)


def format_duration(milliseconds: float) -> str:
    """Human readable duration: '850.00ms' or '2.35s'."""
    if milliseconds < 1000:
        return f"{milliseconds:.2f}ms"
    return f"{milliseconds / 1000.0:.2f}s"


def _project_dir(path: Optional[str]) -> Path:
    return Path(path) if path else Path.cwd()


def execute_init(path: Optional[str]) -> Path:
    """Create the project directory and write a default config into it."""
    directory = _project_dir(path)
    setup_logging(Settings())
    logger.info(f"Creating v2df project in directory: {directory}")

    ensure_directory(directory)
    config_path = directory / DEFAULT_CONFIG_FILENAME
    write_text(config_path, default_config_text())
    return config_path


def _load_frames(path: Optional[str]):
    settings = load_config(_project_dir(path))
    setup_logging(settings)

    frames = read_single_channel_frames(settings.video_file)
    if not frames:
        raise EmptyFrameCollectionError()
    return settings, frames


def execute_run(path: Optional[str]) -> None:
    """Run every project of the config in `path`."""
    logger.info(f"Running v2df in directory: {_project_dir(path)}")
    settings, frames = _load_frames(path)
    write_projects(frames, settings)


def execute_test(path: Optional[str]) -> None:
    """Run the single-frame preview for the config in `path`."""
    logger.info(f"Testing v2df in directory: {_project_dir(path)}")
    settings, frames = _load_frames(path)
    preview_projects(frames, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="v2df",
        description=(
            "Convert a video into per-frame distance field density functions "
            "laid out on a square spiral grid"
        ),
    )
    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new project with a default config (overwrites existing)",
    )
    run_parser = subparsers.add_parser(
        "run",
        help="Process the project's video into frame, grid and placement outputs",
    )
    test_parser = subparsers.add_parser(
        "test",
        help="Process only each project's test frame and save PNG previews",
    )
    for sub in (init_parser, run_parser, test_parser):
        sub.add_argument(
            "path",
            nargs="?",
            default=None,
            help="Project directory (default: current directory)",
        )

    subparsers.add_parser("help", help="Show this help message")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and dispatch a command.

    Returns:
        Process exit code (0 on success, 1 on a reported error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    start = time.time()
    try:
        if args.command == "init":
            config_path = execute_init(args.path)
            verb = f"created v2df project at {config_path}"
        elif args.command == "run":
            execute_run(args.path)
            verb = "ran v2df project"
        else:
            execute_test(args.path)
            verb = "ran v2df test"
    except V2DFError as e:
        logger.error(str(e))
        print(f"v2df: {e}", file=sys.stderr)
        return 1

    elapsed_ms = (time.time() - start) * 1000.0
    print(f"Successfully {verb} in {format_duration(elapsed_ms)}")
    return 0
