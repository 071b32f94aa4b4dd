"""Tests for render/console.py"""

from procwatch import config
from procwatch.render.console import ConsoleOutput, plain_text

ERASE_ROW = "\x1b[1A\x1b[2K"


def written(output: ConsoleOutput) -> str:
    return output.console.file.getvalue()


class TestConfigureStyles:
    """Tests for style registration."""

    def test_registers_status_styles(self, output):
        """Status tags resolve to their colours after registration."""
        assert output.configure_styles() is True
        assert output.styles_configured is True
        for tag, colour in config.STATUS_STYLES.items():
            style = output.console.get_style(tag)
            assert style.color is not None
            assert style.color.name == colour

    def test_idempotent(self, output):
        """A second call does not push another theme."""
        output.configure_styles()
        depth = len(output.console._theme_stack._entries)

        assert output.configure_styles() is False
        assert len(output.console._theme_stack._entries) == depth

    def test_guard_is_per_console(self, make_console):
        """Two wrappers around one Console share the guard."""
        console = make_console()
        first = ConsoleOutput(console)
        second = ConsoleOutput(console)

        assert first.configure_styles() is True
        assert second.styles_configured is True
        assert second.configure_styles() is False


class TestWriteln:
    """Tests for plain sequential writes."""

    def test_writes_lines_without_markup(self, output):
        output.writeln(["build is [success]successful[/success]", "done"])
        assert written(output) == "build is successful\ndone\n"

    def test_empty_batch(self, output):
        output.writeln([])
        assert written(output) == ""


class TestMeasure:
    """Tests for row counting."""

    def test_counts_rows(self, output):
        assert output.measure(["a", "", "b"]) == 3

    def test_embedded_newlines(self, output):
        assert output.measure(["a\nb\nc"]) == 3

    def test_wrapping(self, make_console):
        output = ConsoleOutput(make_console(width=10))
        assert output.measure(["x" * 25]) == 3


class TestSections:
    """Tests for ConsoleSection."""

    def test_section_names(self, output):
        first = output.section()
        second = output.section(name="group:abc")
        assert first.name == "section-0"
        assert second.name == "group:abc"
        assert output.sections == [first, second]

    def test_overwrite_replaces_content(self, output):
        section = output.section()
        section.overwrite(["one", "two"])
        section.overwrite(["three"])

        assert section.plain_lines == ["three"]
        assert section.height == 1

    def test_writeln_appends(self, output):
        section = output.section()
        section.writeln(["one"])
        section.writeln(["two"])
        assert section.lines == ["one", "two"]
        assert section.height == 2

    def test_clear(self, output):
        section = output.section()
        section.overwrite(["one"])
        section.clear()
        assert section.lines == []
        assert section.height == 0

    def test_non_terminal_appends(self, output):
        """Without a terminal no cursor control is written."""
        section = output.section()
        section.overwrite(["one"])
        section.overwrite(["two"])

        assert written(output) == "one\ntwo\n"
        assert "\x1b" not in written(output)

    def test_terminal_first_write_has_no_erase(self, terminal_output):
        section = terminal_output.section()
        section.overwrite(["one", "two"])
        assert ERASE_ROW not in written(terminal_output)
        assert "one\ntwo\n" in written(terminal_output)

    def test_terminal_rewrite_erases_previous_rows(self, terminal_output):
        section = terminal_output.section()
        section.overwrite(["one", "two"])
        terminal_output.console.file.truncate(0)
        terminal_output.console.file.seek(0)

        section.overwrite(["three"])

        text = written(terminal_output)
        assert text.count(ERASE_ROW) == 2
        assert text.endswith("three\n")

    def test_terminal_rewrite_reprints_later_sections(self, terminal_output):
        """Rewriting an upper section also redraws the sections below it."""
        upper = terminal_output.section()
        lower = terminal_output.section()
        upper.overwrite(["u1"])
        lower.overwrite(["l1", "l2"])
        terminal_output.console.file.truncate(0)
        terminal_output.console.file.seek(0)

        upper.overwrite(["u2"])

        text = written(terminal_output)
        assert text.count(ERASE_ROW) == 3
        assert text.index("u2") < text.index("l1") < text.index("l2")

    def test_terminal_rewrite_of_lower_section_leaves_upper(self, terminal_output):
        upper = terminal_output.section()
        lower = terminal_output.section()
        upper.overwrite(["u1"])
        lower.overwrite(["l1"])
        terminal_output.console.file.truncate(0)
        terminal_output.console.file.seek(0)

        lower.overwrite(["l2"])

        text = written(terminal_output)
        assert text.count(ERASE_ROW) == 1
        assert "u1" not in text


class TestPlainText:
    """Tests for plain_text helper."""

    def test_strips_markup(self):
        assert plain_text("[error]boom[/error]") == "boom"

    def test_escaped_brackets(self):
        assert plain_text("\\[not a tag]") == "[not a tag]"
