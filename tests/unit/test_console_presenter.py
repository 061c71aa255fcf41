"""Tests for ConsolePresenter output formatting."""

import io

from tfvc.presenters import ConsolePresenter


class TestConsolePresenter:
    def test_print(self) -> None:
        out = io.StringIO()
        ConsolePresenter(file=out).print("hello")
        assert out.getvalue() == "hello\n"

    def test_no_color_when_not_a_tty(self) -> None:
        out = io.StringIO()
        presenter = ConsolePresenter(use_color=True, file=out)
        presenter.print_table(["A"], [["x"]])
        assert "\033[" not in out.getvalue()

    def test_print_error_goes_to_stderr(self, capsys) -> None:
        out = io.StringIO()
        ConsolePresenter(file=out).print_error("broken")
        assert out.getvalue() == ""
        assert capsys.readouterr().err == "Error: broken\n"

    def test_print_warning(self, capsys) -> None:
        ConsolePresenter(file=io.StringIO()).print_warning("careful")
        assert capsys.readouterr().err == "Warning: careful\n"

    def test_table_alignment(self) -> None:
        out = io.StringIO()
        ConsolePresenter(file=out).print_table(
            ["Change", "Path"],
            [["added", "$/a"], ["modified", "$/longer"]],
        )
        lines = out.getvalue().splitlines()
        assert lines[0].rstrip() == "Change    Path"
        assert lines[1] == "-" * len("Change    Path    ")
        assert lines[2] == "added     $/a"
        assert lines[3] == "modified  $/longer"

    def test_empty_table_prints_nothing(self) -> None:
        out = io.StringIO()
        ConsolePresenter(file=out).print_table(["A", "B"], [])
        assert out.getvalue() == ""
