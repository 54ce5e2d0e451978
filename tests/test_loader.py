"""
Tests for loading templates and substitution files.
"""

import pytest

from termdecl.exceptions import ConfigurationError, TemplateFileError, TooManyRootsError
from termdecl.template.loader import (
    compile_file,
    load_substitutions,
    load_template,
    parse_assignments,
)
from termdecl.widgets import LayoutWidget

from template_samples import HELLO_TEMPLATE


class TestLoadTemplate:
    """Tests for reading template files."""

    def test_reads_text(self, template_file):
        path = template_file()

        assert load_template(path) == HELLO_TEMPLATE
        assert load_template(str(path)) == HELLO_TEMPLATE

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.tdl"

        with pytest.raises(TemplateFileError) as exc_info:
            load_template(missing)

        assert exc_info.value.context["path"] == str(missing)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "binary.tdl"
        path.write_bytes(b"\xff\xfe\x00Layout:")

        with pytest.raises(TemplateFileError):
            load_template(path)

    def test_compile_file(self, template_file):
        root = compile_file(template_file())

        assert isinstance(root, LayoutWidget)

    def test_compile_file_propagates_parser_errors(self, template_file):
        path = template_file("Layout:\nLayout:\n")

        with pytest.raises(TooManyRootsError):
            compile_file(path)


class TestLoadSubstitutions:
    """Tests for YAML substitution files."""

    def test_scalar_mapping(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text('hello: "Hello, "\nworld: World!\ncount: 3\nempty:\n')

        assert load_substitutions(path) == {
            "hello": "Hello, ",
            "world": "World!",
            "count": "3",
            "empty": "",
        }

    def test_empty_file(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("")

        assert load_substitutions(path) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_substitutions(path)

    def test_nested_values_rejected(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("user:\n  name: Ada\n")

        with pytest.raises(ConfigurationError, match="scalars"):
            load_substitutions(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("key: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_substitutions(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(TemplateFileError):
            load_substitutions(tmp_path / "nope.yaml")


class TestParseAssignments:
    """Tests for key=value parsing."""

    def test_pairs(self):
        assert parse_assignments(["hello=Hello, ", "world=World!"]) == {
            "hello": "Hello, ",
            "world": "World!",
        }

    def test_value_may_contain_equals(self):
        assert parse_assignments(["expr=a=b"]) == {"expr": "a=b"}

    def test_later_wins(self):
        assert parse_assignments(["a=1", "a=2"]) == {"a": "2"}

    @pytest.mark.parametrize("bad", ["novalue", "=value"])
    def test_invalid(self, bad):
        with pytest.raises(ConfigurationError, match="key=value"):
            parse_assignments([bad])
