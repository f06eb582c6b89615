"""
Tests for the plurals command line.
"""

import pytest

from plurals.cli import create_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PLURALS_LANGUAGE", "PLURALS_DICTIONARY", "PLURALS_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ru_dictionary(tmp_path):
    path = tmp_path / "ru.txt"
    path.write_text("# test\nгод,года,лет\nклиент,клиента,клиентов\n", encoding="utf-8")
    return path


class TestPl:
    """Tests for the 'pl' command."""

    def test_bundled_words(self, capsys):
        assert main(["pl", "5", "год", "-l", "ru"]) == 0
        assert capsys.readouterr().out.splitlines() == ["лет"]

    def test_several_words(self, capsys):
        assert main(["pl", "2", "year", "day", "unknown"]) == 0
        assert capsys.readouterr().out.splitlines() == ["years", "days", "unknown"]

    def test_with_number(self, capsys, ru_dictionary):
        assert main(["pl", "2", "  клиент", "-l", "ru", "-d", str(ru_dictionary), "-n"]) == 0
        assert capsys.readouterr().out.splitlines() == ["2  клиента"]

    def test_language_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("PLURALS_LANGUAGE", "russian")
        assert main(["pl", "3", "год"]) == 0
        assert capsys.readouterr().out.strip() == "года"

    def test_negative_number(self, capsys):
        assert main(["pl", "-1", "year"]) == 0
        assert capsys.readouterr().out.strip() == "year"

    def test_unknown_language(self, capsys):
        assert main(["pl", "1", "year", "-l", "tlh"]) == 1
        assert "unsupported language" in capsys.readouterr().err

    def test_missing_dictionary_file(self, capsys, tmp_path):
        assert main(["pl", "1", "year", "-d", str(tmp_path / "missing.txt")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_no_bundled_words(self, capsys):
        assert main(["pl", "1", "pomme", "-l", "fr"]) == 1
        assert "No bundled dictionary" in capsys.readouterr().err


class TestCheck:
    """Tests for the 'check' command."""

    def test_valid(self, capsys, ru_dictionary):
        assert main(["check", str(ru_dictionary), "-l", "ru"]) == 0
        assert "2 words" in capsys.readouterr().out

    def test_invalid(self, capsys, ru_dictionary):
        assert main(["check", str(ru_dictionary), "-l", "en"]) == 1
        assert "Illegal count of word forms" in capsys.readouterr().err

    def test_duplicate(self, capsys, tmp_path):
        path = tmp_path / "dup.txt"
        path.write_text("day,days\nday,days\n", encoding="utf-8")
        assert main(["check", str(path)]) == 1
        assert "Duplicate word: day" in capsys.readouterr().err


class TestRules:
    """Tests for the 'rules' command."""

    def test_lists_languages(self, capsys):
        assert main(["rules"]) == 0
        out = capsys.readouterr().out
        assert "russian" in out
        assert "arabic" in out
        assert "Japanese" in out


class TestParser:
    """Tests for argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: plurals" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "plurals" in capsys.readouterr().out

    def test_pl_arguments(self):
        args = create_parser().parse_args(["pl", "3", " day", "-n", "-l", "en"])
        assert args.n == 3
        assert args.words == [" day"]
        assert args.number is True
        assert args.language == "en"
