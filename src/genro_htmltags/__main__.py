# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line: render the sample page to a file or stdout.

Usage:
    python -m genro_htmltags [FILE] [--output-dir DIR] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import __version__
from .output import write_html
from .sample import sample_page

logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
LOG_LEVEL_ENV = "GENRO_HTMLTAGS_LOG_LEVEL"


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv(LOG_LEVEL_ENV)
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genro-htmltags",
        description="Render the sample HtmlTags page.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="File to write; prints to stdout when omitted",
    )
    parser.add_argument(
        "-d", "--output-dir",
        help="Directory for OUTPUT (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help=f"Logging level (overridden by ${LOG_LEVEL_ENV})",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    _configure_logging(args.log_level)

    page = sample_page()
    if args.output is None:
        sys.stdout.write(f"{page}\n")
    else:
        path = write_html(page, args.output, args.output_dir)
        print(f"HTML written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
