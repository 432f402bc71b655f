# fsgen/cli.py

"""
Command-line interface for :mod:`fsgen`.

Parses arguments, validates the input directory, creates the output file
and hands everything to :func:`fsgen.tree.render`.
"""


from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from fsgen.tree import render

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class TreeConfig:
    input_dir: Path = Path(".")
    skip_dirs: list[str] = field(default_factory=list)
    skip_files: list[str] = field(default_factory=list)
    output_file: Path = Path("output.txt")
    show_files: bool = True
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsgen",
        description="Write a directory's structure as a tree diagram to a file.",
    )
    parser.add_argument(
        "-i",
        dest="input_dir",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="input directory (default: current directory)",
    )
    parser.add_argument(
        "-s",
        dest="skip_dirs",
        nargs="*",
        action="extend",
        default=[],
        metavar="NAME",
        help="directory names to skip (can be multiple)",
    )
    parser.add_argument(
        "-f",
        dest="skip_files",
        nargs="*",
        action="extend",
        default=[],
        metavar="NAME",
        help="file names to skip (can be multiple)",
    )
    parser.add_argument(
        "-o",
        dest="output_file",
        type=Path,
        default=Path("output.txt"),
        metavar="FILE",
        help="output file (default: output.txt)",
    )
    parser.add_argument(
        "--no-files",
        dest="show_files",
        action="store_false",
        help="hide all files (only show directories)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log visited directories and read failures to stderr",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> TreeConfig:
    """
    Parse command-line arguments into a :class:`TreeConfig`.

    Unknown flags or missing values make ``argparse`` print the usage to
    stderr and exit with status 2.
    """

    args = build_parser().parse_args(argv)
    return TreeConfig(
        input_dir=args.input_dir,
        skip_dirs=args.skip_dirs,
        skip_files=args.skip_files,
        output_file=args.output_file,
        show_files=args.show_files,
        verbose=args.verbose,
    )


def main(argv: Sequence[str] | None = None) -> int:
    config = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if not config.input_dir.is_dir():
        print(
            f"Error: '{config.input_dir}' is not a valid directory", file=sys.stderr
        )
        return 1

    try:
        out = config.output_file.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        print(
            f"Error creating output file '{config.output_file}': {exc}",
            file=sys.stderr,
        )
        return 1

    logger.debug(
        "Rendering %s (skip_dirs=%s, skip_files=%s, show_files=%s)",
        config.input_dir,
        config.skip_dirs,
        config.skip_files,
        config.show_files,
    )
    with out:
        render(
            config.input_dir,
            config.skip_dirs,
            config.skip_files,
            config.show_files,
            out,
        )

    print(f"Directory structure has been written to '{config.output_file}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
