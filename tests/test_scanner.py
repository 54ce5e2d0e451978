"""Tests for the template line scanner."""

from termdecl.template.scanner import Line, indentation_of, scan_lines


class TestScanLines:
    """Tests for scan_lines."""

    def test_skips_blank_and_comment_lines(self):
        """Blank lines and // comments are dropped at any depth."""
        source = "Layout:\n\n    // a comment\n        // deeper comment\n    Paragraph:\n   \n"
        lines = list(scan_lines(source))

        assert [line.text for line in lines] == ["Layout:", "Paragraph:"]

    def test_line_numbers_are_one_based_source_positions(self):
        """Line numbers refer to the source text, not the filtered stream."""
        source = "// header\nLayout:\n\n    Paragraph:\n"
        lines = list(scan_lines(source))

        assert [line.line_number for line in lines] == [2, 4]

    def test_indentation_counts_leading_spaces(self):
        """Indentation is the number of leading spaces."""
        lines = list(scan_lines("Layout:\n    Paragraph:\n        text: hi\n"))

        assert [line.indent for line in lines] == [0, 4, 8]

    def test_text_is_trimmed_and_raw_is_kept(self):
        """Lines keep both trimmed text and the raw source line."""
        line = next(scan_lines("    text: hi   "))

        assert line == Line(text="text: hi", indent=4, line_number=1, raw="    text: hi   ")

    def test_tabs_are_not_indentation(self):
        """A tab is an ordinary character, not an indentation unit."""
        assert indentation_of("\tLayout:") == 0
        assert indentation_of("  \tLayout:") == 2

    def test_empty_source(self):
        """Empty input yields no lines."""
        assert list(scan_lines("")) == []

    def test_restartable_by_recomputation(self):
        """Calling scan_lines again starts over."""
        source = "Layout:\n    Paragraph:\n"
        assert list(scan_lines(source)) == list(scan_lines(source))
