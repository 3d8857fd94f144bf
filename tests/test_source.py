"""Tests for the in-memory source unit."""

import pytest

from vue_declassify.source import SourceUnit


class TestEdits:
    def test_insert_text(self):
        source = SourceUnit("ac")
        source.insert_text(1, "b")
        assert source.text == "abc"

    def test_insert_out_of_range(self):
        with pytest.raises(ValueError):
            SourceUnit("abc").insert_text(4, "x")

    def test_remove_takes_trailing_newline(self):
        source = SourceUnit("a\nclass Foo {}  \nb\n")
        source.remove(2, 14)
        assert source.get_full_text() == "a\nb\n"

    def test_remove_keeps_rest_of_line(self):
        source = SourceUnit("x = 1; y = 2\n")
        source.remove(0, 6)
        assert source.get_full_text() == " y = 2\n"

    def test_remove_at_end_of_text(self):
        source = SourceUnit("a\nclass Foo {}")
        source.remove(2, 14)
        assert source.get_full_text() == "a\n"

    def test_remove_crlf(self):
        source = SourceUnit("class Foo {}\r\nb")
        source.remove(0, 12)
        assert source.get_full_text() == "b"

    @pytest.mark.parametrize("start, end", [(-1, 2), (3, 2), (0, 10)])
    def test_remove_bad_span(self, start, end):
        with pytest.raises(ValueError):
            SourceUnit("abc").remove(start, end)


class TestExportAssignment:
    def test_appends_after_blank_line(self):
        source = SourceUnit("import Vue from 'vue'\n\n\n")
        source.add_export_assignment("Vue.extend({})")
        assert source.get_full_text() == (
            "import Vue from 'vue'\n\nexport default Vue.extend({});\n"
        )

    def test_leading_documentation(self):
        source = SourceUnit("")
        source.add_export_assignment("{}", leading_trivia="\n/** Doc */\n")
        assert source.get_full_text() == "/** Doc */\nexport default {};\n"


class TestFiles:
    def test_from_file_and_save(self, tmp_path):
        # Arrange
        path = tmp_path / "Foo.ts"
        path.write_text("const a = 1\n", encoding="utf-8")

        # Act
        source = SourceUnit.from_file(path)
        source.insert_text(0, "// head\n")
        source.save()

        # Assert
        assert source.path == str(path)
        assert path.read_text(encoding="utf-8") == "// head\nconst a = 1\n"

    def test_save_elsewhere(self, tmp_path):
        target = tmp_path / "out.ts"
        SourceUnit("x").save(target)
        assert target.read_text(encoding="utf-8") == "x"

    def test_save_without_path(self):
        with pytest.raises(ValueError, match="no path"):
            SourceUnit("x").save()

    def test_format_text(self):
        source = SourceUnit("a({\nb\n})\n\n\n")
        source.format_text(indent_size=2)
        assert source.get_full_text() == "a({\n  b\n})\n"
