"""Command-line entry point tests."""

from __future__ import annotations

import main
import pytest


class TestMain:
    def test_spells_arguments(self, capsys) -> None:
        assert main.main(["42", "-7"]) == 0
        out = capsys.readouterr().out
        assert "forty-two" in out
        assert "negative seven" in out

    def test_conjunction_flag(self, capsys) -> None:
        assert main.main(["--and", "1001"]) == 0
        assert "one thousand and one" in capsys.readouterr().out

    def test_rejected_argument_exits_nonzero(self, capsys) -> None:
        assert main.main(["12a"]) == 1
        assert "NUMERAL_FORMAT_INVALID" in capsys.readouterr().out

    def test_sample_set(self, capsys) -> None:
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "one hundred twenty" in out

    def test_negative_numeral_is_not_an_option(self, capsys) -> None:
        assert main.main(["-120"]) == 0
        assert "negative one hundred twenty" in capsys.readouterr().out

    def test_help_prints_usage(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main.main(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "usage:" in out
        assert "--and" in out

    def test_dash_prefixed_argument_after_separator(self, capsys) -> None:
        assert main.main(["--", "-1x"]) == 1
        assert "NUMERAL_FORMAT_INVALID" in capsys.readouterr().out

    def test_invalid_log_level_setting(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("NUMERAL_TEXT_LOG_LEVEL", "verbose")
        assert main.main(["42"]) == 2
        assert "NUMERAL_TEXT_" in capsys.readouterr().err

    def test_invalid_conjunction_setting(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("NUMERAL_TEXT_CONJUNCTION", "maybe")
        assert main.main(["120"]) == 2
        assert "one hundred twenty" not in capsys.readouterr().out
