"""Tests for formcheck.cli — ``formcheck check`` and ``formcheck validate``."""

import pytest

from formcheck.cli import main


class TestNoCommand:
    def test_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "formcheck" in capsys.readouterr().out


class TestCheck:
    def test_clean_rules(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "username=required|min:3", "email=email"])
        assert "2 field(s) OK" in capsys.readouterr().out

    def test_problems_exit_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "zip=required|zipcode", "age=min"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "zipcode" in out
        assert "2 problem(s)" in out

    def test_bad_pair(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "no-equals-sign"])
        assert exc_info.value.code == 2
        assert "Error:" in capsys.readouterr().err


class TestValidate:
    def test_passing_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", "--rule", "age=numeric|max:3", "--value", "age=42"])
        assert "all fields passed" in capsys.readouterr().out

    def test_failing_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "--rule", "age=numeric|max:3", "--value", "age=1234"])
        assert exc_info.value.code == 1
        assert "age: 3 characters max required." in capsys.readouterr().out

    def test_missing_value_is_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["validate", "--rule", "name=required"])
        assert "name: This field is required." in capsys.readouterr().out

    def test_html_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["validate", "--html", "--rule", "name=required"])
        out = capsys.readouterr().out
        assert "<form" in out
        assert 'class="error-message"' in out

    def test_configuration_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "--rule", "name=zipcode"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
