"""
Unit tests for discussion point and agenda parsing.
"""
from docgen.points import parse_multiline_input, parse_points, strip_marker


class TestParsePoints:

    def test_markers_stripped(self):
        assert parse_points("- first\n2. second\n• third\n* fourth") == [
            "first", "second", "third", "fourth"
        ]

    def test_blank_lines_skipped(self):
        assert parse_points("\n  \n- a \n\n") == ["a"]

    def test_bullet_then_number(self):
        assert strip_marker("- 3. item") == "item"

    def test_marker_only_line_dropped(self):
        assert parse_points("-\nreal point") == ["real point"]

    def test_empty(self):
        assert parse_points("") == []
        assert parse_points(None) == []

    def test_inner_numbers_kept(self):
        assert parse_points("Allocate 2. lab slots") == ["Allocate 2. lab slots"]


class TestParseMultilineInput:

    def test_one_item_per_line(self):
        assert parse_multiline_input("Workload\n\nSyllabus, revision") == [
            "Workload", "Syllabus, revision"
        ]

    def test_single_line_split_on_commas(self):
        assert parse_multiline_input("A, B ,C,") == ["A", "B", "C"]

    def test_single_item(self):
        assert parse_multiline_input("  NBA documentation ") == ["NBA documentation"]

    def test_empty(self):
        assert parse_multiline_input("") == []
