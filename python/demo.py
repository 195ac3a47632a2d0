"""
Demonstration script for the fractal drawer.
"""

import logging
import sys

from ascii_render import render, render_requests
from fractal import expected_drawn_count, make_grid
from fractal_types import PatternKind, Request
from pattern_catalog import lookup


def demo(max_depth: int = 3) -> None:
    """Print every pattern at each depth up to max_depth."""
    for kind in PatternKind:
        pattern = lookup(kind)
        for depth in range(1, max_depth + 1):
            grid = make_grid(kind, depth)
            print("=" * 40)
            print(
                f"{pattern.name} (kind {kind.value}), depth {depth}: "
                f"{grid.side}x{grid.side}, "
                f"{grid.drawn_count()}/{grid.side**2} drawn "
                f"(expected {expected_drawn_count(pattern, depth)})"
            )
            print("=" * 40)
            print(render(grid), end="")


def ordering_demo() -> None:
    """Show that requests are drawn last-listed first."""
    requests = [Request(PatternKind.CARPET, 1), Request(PatternKind.TRIANGLE, 1)]

    print("=" * 40)
    print("Requests as listed:")
    for request in requests:
        print(f"  {request.kind.name.lower()}, depth {request.depth}")
    print("Drawn output:")
    print("=" * 40)
    for block in render_requests(requests):
        print(block, end="")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "verbose":
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    demo()
    print()
    ordering_demo()
