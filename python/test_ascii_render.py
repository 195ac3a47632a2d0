"""Tests for ascii_render module."""

from ascii_render import BLANK_CHAR, DRAWN_CHAR, render, render_requests, render_rows
from fractal import make_grid
from fractal_types import CellState, Grid, PatternKind, Request


class TestRenderRows:
    """Tests for row rendering."""

    def test_glyphs(self) -> None:
        assert DRAWN_CHAR == "#"
        assert BLANK_CHAR == " "

    def test_triangle_depth_1(self) -> None:
        """Row 1 is drawn then blank, not the other way round."""
        assert render_rows(make_grid(PatternKind.TRIANGLE, 1)) == ["##", "# "]

    def test_vicsek_depth_1(self) -> None:
        assert render_rows(make_grid(PatternKind.VICSEK, 1)) == ["# #", " # ", "# #"]

    def test_carpet_depth_1(self) -> None:
        assert render_rows(make_grid(PatternKind.CARPET, 1)) == ["###", "# #", "###"]

    def test_hand_built_grid(self) -> None:
        grid = Grid(
            (
                (CellState.BLANK, CellState.DRAWN),
                (CellState.DRAWN, CellState.BLANK),
            )
        )
        assert render_rows(grid) == [" #", "# "]

    def test_row_width_matches_side(self) -> None:
        grid = make_grid(PatternKind.CARPET, 3)
        lines = render_rows(grid)
        assert len(lines) == 27
        assert all(len(line) == 27 for line in lines)


class TestRender:
    """Tests for block rendering."""

    def test_block_ends_with_blank_line(self) -> None:
        """Each row is terminated, then one blank line follows."""
        text = render(make_grid(PatternKind.TRIANGLE, 1))
        assert text == "##\n# \n\n"

    def test_vicsek_block(self) -> None:
        text = render(make_grid(PatternKind.VICSEK, 1))
        assert text == "# #\n # \n# #\n\n"

    def test_line_count(self) -> None:
        text = render(make_grid(PatternKind.TRIANGLE, 3))
        lines = text.split("\n")
        # 8 rows, the blank line, and the empty tail after the last newline
        assert len(lines) == 10
        assert lines[8] == ""
        assert lines[9] == ""

    def test_drawn_glyph_count(self) -> None:
        text = render(make_grid(PatternKind.VICSEK, 3))
        assert text.count(DRAWN_CHAR) == 5**3


class TestRenderRequests:
    """Tests for multi-request rendering order."""

    def test_reverse_order(self) -> None:
        """Last listed request is rendered first."""
        requests = [Request(PatternKind.CARPET, 1), Request(PatternKind.TRIANGLE, 1)]
        blocks = list(render_requests(requests))
        assert blocks == [
            "##\n# \n\n",
            "###\n# #\n###\n\n",
        ]

    def test_joined_output(self) -> None:
        requests = [
            Request(PatternKind.VICSEK, 1),
            Request(PatternKind.CARPET, 1),
            Request(PatternKind.TRIANGLE, 1),
        ]
        output = "".join(render_requests(requests))
        assert output == "##\n# \n\n###\n# #\n###\n\n# #\n # \n# #\n\n"

    def test_empty(self) -> None:
        assert list(render_requests([])) == []

    def test_repeated_request(self) -> None:
        """Requests are independent; equal requests give equal blocks."""
        requests = [Request(PatternKind.TRIANGLE, 2)] * 3
        blocks = list(render_requests(requests))
        assert len(blocks) == 3
        assert blocks[0] == blocks[1] == blocks[2]

    def test_accepts_iterator(self) -> None:
        requests = iter([Request(PatternKind.CARPET, 1), Request(PatternKind.VICSEK, 1)])
        blocks = list(render_requests(requests))
        assert blocks[0] == "# #\n # \n# #\n\n"
