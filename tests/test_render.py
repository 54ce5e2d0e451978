"""
Tests for interpolation, render targets and the render engine.
"""

import pytest

from termdecl.exceptions import RenderError
from termdecl.render.engine import render, render_to_console
from termdecl.render.geometry import Region
from termdecl.render.target import Canvas, DrawCall, RenderTarget
from termdecl.render.text import interpolate, placeholders, render_text, strip_quotes
from termdecl.template.parser import compile_template
from termdecl.widgets import LayoutWidget, LeafWidget, ParagraphWidget

from template_samples import DASHBOARD_TEMPLATE, HELLO_SUBSTITUTIONS, HELLO_TEMPLATE


class TestInterpolation:
    """Tests for {{key}} substitution."""

    def test_adjacent_placeholders(self):
        assert interpolate("{{hello}}{{world}}", HELLO_SUBSTITUTIONS) == "Hello, World!"

    def test_missing_key_left_verbatim(self):
        """Unknown keys are not an error."""
        assert interpolate("Hi {{name}}!", {}) == "Hi {{name}}!"
        assert interpolate("{{a}} {{b}}", {"a": "1"}) == "1 {{b}}"

    def test_repeated_placeholder(self):
        assert interpolate("{{x}}-{{x}}", {"x": "7"}) == "7-7"

    def test_replacement_not_rescanned(self):
        """Values containing placeholders are drawn literally."""
        assert interpolate("{{a}}", {"a": "{{b}}", "b": "nope"}) == "{{b}}"

    def test_keys_match_exactly(self):
        """Whitespace inside braces is part of the key."""
        assert interpolate("{{ name }}", {"name": "x"}) == "{{ name }}"
        assert interpolate("{{ name }}", {" name ": "x"}) == "x"

    def test_placeholders(self):
        assert placeholders('"{{hello}}{{world}} {{hello}}"') == ["hello", "world", "hello"]


class TestQuoteStripping:
    """Tests for strip_quotes and render_text."""

    @pytest.mark.parametrize("raw,expected", [
        ('"quoted"', "quoted"),
        ("'single'", "single"),
        ("bare", "bare"),
        ('"mismatched\'', '"mismatched\''),
        ('"', '"'),
        ('""', ""),
        ('"inner "quotes""', 'inner "quotes"'),
    ])
    def test_strip_quotes(self, raw, expected):
        assert strip_quotes(raw) == expected

    def test_quotes_stripped_after_substitution(self):
        assert render_text('"{{hello}}{{world}}"', HELLO_SUBSTITUTIONS) == "Hello, World!"

    def test_quotes_from_values_are_kept(self):
        """Only quotes written around the literal are stripped."""
        assert render_text("{{q}}", {"q": '"hi"'}) == '"hi"'

    def test_lone_literal_quote_not_closed_by_value(self):
        """A value ending in a quote does not pair with a lone literal quote."""
        assert render_text('"{{a}}', {"a": 'b"'}) == '"b"'

    def test_quoted_value_inside_quoted_literal(self):
        assert render_text("'{{q}}'", {"q": "'x'"}) == "'x'"

    def test_paragraph_draws_value_quotes(self, canvas):
        root = compile_template('Layout:\n    Paragraph:\n        text: {{q}}\n')
        render(root, {"q": '"hi"'}, canvas)

        assert canvas.draw_calls[0].text == '"hi"'


class TestCanvas:
    """Tests for the in-memory render target."""

    def test_is_a_render_target(self, canvas):
        assert isinstance(canvas, RenderTarget)
        assert canvas.area == Region(0, 0, 40, 10)

    def test_draw_text_clips_to_region(self):
        canvas = Canvas(10, 3)
        canvas.draw_text(Region(2, 1, 4, 1), "abcdefgh\nsecond line")

        assert canvas.lines() == ["          ", "  abcd    ", "          "]

    def test_multiline_text(self):
        canvas = Canvas(5, 3)
        canvas.draw_text(canvas.area, "one\ntwo")

        assert canvas.lines() == ["one  ", "two  ", "     "]

    def test_draw_calls_are_recorded(self, canvas):
        canvas.draw_text(Region(0, 0, 5, 1), "hi")

        assert canvas.draw_calls == [DrawCall(Region(0, 0, 5, 1), "hi")]

    def test_empty_region_draws_nothing(self):
        canvas = Canvas(3, 1)
        canvas.draw_text(Region(1, 0, 0, 1), "xyz")

        assert canvas.lines() == ["   "]

    def test_out_of_bounds_region(self):
        with pytest.raises(RenderError, match="outside the canvas"):
            Canvas(5, 5).draw_text(Region(3, 0, 5, 1), "x")

    def test_text_at_and_clear(self):
        canvas = Canvas(6, 2)
        canvas.draw_text(Region(3, 1, 3, 1), "abc")

        assert canvas.text_at(Region(3, 1, 3, 1)) == ["abc"]
        canvas.clear()
        assert canvas.lines() == ["      ", "      "]
        assert canvas.draw_calls == []

    def test_to_text_trims_fill(self):
        canvas = Canvas(6, 2)
        canvas.draw_text(Region(0, 0, 6, 1), "ab")

        assert canvas.to_text().plain == "ab\n"


class TestRender:
    """Tests for the render entry point."""

    def test_hello_world_end_to_end(self, canvas):
        """The hello template renders into the full target."""
        root = compile_template(HELLO_TEMPLATE)
        render(root, HELLO_SUBSTITUTIONS, canvas)

        assert canvas.draw_calls == [DrawCall(canvas.area, "Hello, World!")]
        assert canvas.lines()[0].rstrip() == "Hello, World!"

    def test_missing_substitution_drawn_verbatim(self, canvas):
        root = compile_template(HELLO_TEMPLATE)
        render(root, {"hello": "Hi "}, canvas)

        assert canvas.draw_calls[0].text == "Hi {{world}}"

    def test_nested_layout_regions(self):
        """Horizontal then vertical splits, remainder to the last child."""
        canvas = Canvas(21, 5)
        root = compile_template(DASHBOARD_TEMPLATE)
        render(root, {"left": "L", "name": "Ada"}, canvas)

        assert canvas.draw_calls == [
            DrawCall(Region(0, 0, 10, 5), "L"),
            DrawCall(Region(10, 0, 11, 2), "Header"),
            DrawCall(Region(10, 2, 11, 3), "Body of Ada"),
        ]
        assert canvas.lines()[0] == "L         Header     "
        assert canvas.lines()[2] == "          Body of Ada"

    def test_empty_container_draws_nothing(self, canvas):
        render(LayoutWidget(), {}, canvas)

        assert canvas.draw_calls == []

    def test_default_target_uses_configured_size(self, monkeypatch):
        monkeypatch.setenv("TERMDECL_WIDTH", "30")
        monkeypatch.setenv("TERMDECL_HEIGHT", "4")

        target = render(compile_template(HELLO_TEMPLATE), HELLO_SUBSTITUTIONS)

        assert isinstance(target, Canvas)
        assert target.size == (30, 4)
        assert target.draw_calls[0].region == Region(0, 0, 30, 4)

    def test_substitutions_not_mutated(self, canvas):
        substitutions = dict(HELLO_SUBSTITUTIONS)
        render(compile_template(HELLO_TEMPLATE), substitutions, canvas)

        assert substitutions == HELLO_SUBSTITUTIONS

    def test_rendering_twice_is_stable(self):
        """No state is kept between render passes."""
        root = compile_template(DASHBOARD_TEMPLATE)
        first = render(root, {"left": "x"}, Canvas(20, 4)).lines()
        second = render(root, {"left": "x"}, Canvas(20, 4)).lines()

        assert first == second

    def test_leaf_render_without_region_uses_target(self, canvas):
        """A node rendered without a region fills the target."""
        paragraph = ParagraphWidget()
        paragraph.accept_attribute("text", "solo")
        paragraph.render(None, {}, canvas)

        assert canvas.draw_calls == [DrawCall(canvas.area, "solo")]

    def test_backend_failure_is_wrapped(self, canvas):
        """Unexpected exceptions surface as RenderError."""

        class BrokenWidget(LeafWidget):
            kind = "Broken"

            def content(self, substitutions):
                raise KeyError("boom")

        root = LayoutWidget()
        root.accept_child(BrokenWidget())

        with pytest.raises(RenderError) as exc_info:
            render(root, {}, canvas)

        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_render_error_propagates_unchanged(self):
        """Errors raised by a target are surfaced as-is, without retry."""
        failure = RenderError("backend unavailable")

        class FailingTarget:
            area = Region(0, 0, 10, 2)
            attempts = 0

            def draw_text(self, region, text):
                self.attempts += 1
                raise failure

        root = LayoutWidget()
        root.accept_child(ParagraphWidget())
        target = FailingTarget()

        with pytest.raises(RenderError) as exc_info:
            render(root, {}, target)

        assert exc_info.value is failure
        assert target.attempts == 1


class TestRenderToConsole:
    """Tests for printing a render to a rich console."""

    def test_prints_canvas(self):
        from rich.console import Console

        console = Console(width=30, height=5, record=True, color_system=None)
        canvas = render_to_console(compile_template(HELLO_TEMPLATE), HELLO_SUBSTITUTIONS, console)

        assert canvas.size == (30, 5)
        assert "Hello, World!" in console.export_text()

    def test_explicit_size(self):
        from rich.console import Console

        console = Console(width=30, height=5, record=True, color_system=None)
        canvas = render_to_console(
            compile_template(HELLO_TEMPLATE), HELLO_SUBSTITUTIONS, console, width=8, height=1
        )

        assert canvas.size == (8, 1)
        assert "Hello, W" in console.export_text()
