"""
End-to-end tests for the command line entry point.
"""
import sys

import click
import pytest

from chalked_cases.converter import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CHALKED_CASES_COLOR", raising=False)
    monkeypatch.chdir(tmp_path)


def run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["chalked-cases", *args])
    cli()


class TestCli:
    """Tests for reading input and printing results."""

    def test_arguments(self, monkeypatch, capsys):
        run(monkeypatch, "snake", "helloWorld", "fooBar")
        assert capsys.readouterr().out == "hello_world\nfoo_bar\n"

    def test_file(self, monkeypatch, capsys, tmp_path):
        source = tmp_path / "titles.txt"
        source.write_text("the lord of the rings\n\nhello-world\n")
        run(monkeypatch, "title", "--file", str(source))
        assert capsys.readouterr().out == "The Lord Of The Rings\nHello World\n"

    def test_split_prints_pieces_on_one_line(self, monkeypatch, capsys):
        run(monkeypatch, "split", "helloWorld")
        assert capsys.readouterr().out == "hello world\n"

    def test_color_is_stripped_when_not_a_terminal(self, monkeypatch, capsys):
        run(monkeypatch, "camel", "hello world", "--color", "blue", "bold")
        assert capsys.readouterr().out == "helloWorld\n"

    def test_color_always_keeps_styling(self, monkeypatch, capsys):
        run(monkeypatch, "camel", "hello world", "--color", "blue", "--color-always")
        assert capsys.readouterr().out == click.style("helloWorld", fg="blue") + "\n"

    def test_color_always_with_no_color(self, monkeypatch, capsys):
        monkeypatch.setenv("NO_COLOR", "1")
        run(monkeypatch, "camel", "hello world", "--color", "blue", "--color-always")
        assert capsys.readouterr().out == "helloWorld\n"

    def test_color_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("CHALKED_CASES_COLOR", "red")
        run(monkeypatch, "constant", "hello world")
        assert capsys.readouterr().out == "HELLO_WORLD\n"

    def test_no_color_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("NO_COLOR", "1")
        run(monkeypatch, "kebab", "hello world", "--color", "blue")
        assert capsys.readouterr().out == "hello-world\n"

    def test_no_color_flag(self, monkeypatch, capsys):
        run(monkeypatch, "pascal", "hello world", "--no-color")
        assert capsys.readouterr().out == "HelloWorld\n"


class TestCliErrors:
    """Tests for exit codes."""

    def test_unknown_style(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, "camel", "hello", "--color", "purple")
        assert exc_info.value.code == 1
        assert "Unknown style: purple" in capsys.readouterr().err

    def test_unknown_case(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, "sponge", "hello")
        assert exc_info.value.code == 2

    def test_no_input(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, "camel")
        assert exc_info.value.code == 2
