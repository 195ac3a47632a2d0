#!/usr/bin/env python3
"""
Command-line entry point: draw every fractal listed in a request file.

    fractal-drawer [-v|--verbose] [--] <file path>

Arguments after "--" are always file paths, so a file named "-v" can be
passed as "fractal-drawer -- -v".

Requests are printed in reverse of the order they are listed.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from simple_chalk import chalk  # type: ignore[import-untyped]

from ascii_render import render_requests
from fractal_types import InputError
from request_parser import load_requests

logger = logging.getLogger(__name__)

USAGE = "Usage: FractalDrawer <file path>"
ERR_INPUT = "Invalid input"
VERBOSE_FLAGS = ("-v", "--verbose")
END_OF_OPTIONS = "--"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the drawer and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if END_OF_OPTIONS in args:
        split = args.index(END_OF_OPTIONS)
        options, positional = args[:split], args[split + 1:]
    else:
        options, positional = args, []
    verbose = any(arg in VERBOSE_FLAGS for arg in options)
    paths = [arg for arg in options if arg not in VERBOSE_FLAGS] + positional

    if len(paths) != 1:
        print(chalk.yellow(USAGE), file=sys.stderr)
        return EXIT_FAILURE

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    # The whole file is validated before anything is drawn
    try:
        requests = load_requests(paths[0])
    except InputError as e:
        logger.info("Rejected request file: %s", e)
        print(chalk.red(ERR_INPUT), file=sys.stderr)
        return EXIT_FAILURE

    for block in render_requests(requests):
        sys.stdout.write(block)
    sys.stdout.flush()
    return EXIT_SUCCESS


def run() -> None:
    """Console-script entry point: exit with the status from main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
