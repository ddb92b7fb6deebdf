"""CLI tests through Typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


class TestValidateCommand:
    def test_valid_document_exits_zero(self):
        result = runner.invoke(app, ["validate", "dni", "00113918205"])
        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_invalid_document_exits_one(self):
        result = runner.invoke(app, ["validate", "rnc", "101010633", "--explain"])
        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "check_digit" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["validate", "passport", "ab1234567", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["is_valid"] is True
        assert data["document_type"] == "passport"

    def test_unknown_type_is_usage_error(self):
        result = runner.invoke(app, ["validate", "ssn", "123456789"])
        assert result.exit_code == 2


class TestCheckDigitCommand:
    def test_dni(self):
        result = runner.invoke(app, ["check-digit", "dni", "0011391820"])
        assert result.exit_code == 0
        assert "00113918205" in result.output

    def test_rnc(self):
        result = runner.invoke(app, ["check-digit", "rnc", "10101063"])
        assert result.exit_code == 0
        assert "101010632" in result.output

    def test_rnc_prefix_without_valid_digit(self):
        result = runner.invoke(app, ["check-digit", "rnc", "00000006"])
        assert result.exit_code == 1
        assert "No valid RNC" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["check-digit", "dni", "123"],
            ["check-digit", "rnc", "1234567x"],
            ["check-digit", "passport", "AB123456"],
        ],
    )
    def test_usage_errors(self, args):
        assert runner.invoke(app, args).exit_code == 2


class TestBatchCommand:
    def test_reports_invalid_rows(self, batch_file, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(app, ["--no-banner", "batch", str(batch_file), "-o", str(out)])

        assert result.exit_code == 1
        assert "Summary" in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["total"] == 4
        assert data["invalid_count"] == 1

    def test_all_valid_with_default_type(self, tmp_path):
        path = tmp_path / "rnc.txt"
        path.write_text("101010632\n131246796\n", encoding="utf-8")
        result = runner.invoke(app, ["--no-banner", "batch", str(path), "--type", "rnc"])
        assert result.exit_code == 0

    def test_default_type_from_settings(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RD_DOCS_DEFAULT_DOCUMENT_TYPE", "rnc")
        path = tmp_path / "rnc.txt"
        path.write_text("101010632\n", encoding="utf-8")
        result = runner.invoke(app, ["--no-banner", "batch", str(path)])
        assert result.exit_code == 0

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.csv")])
        assert result.exit_code == 2

    def test_unknown_type_option(self, batch_file):
        result = runner.invoke(app, ["batch", str(batch_file), "--type", "ssn"])
        assert result.exit_code == 2

    def test_rows_with_markup_characters_are_listed(self, tmp_path):
        path = tmp_path / "brackets.csv"
        path.write_text("dni,[/bold]\n[red],AB1234567\npassport,[b]1234567\n", encoding="utf-8")
        result = runner.invoke(app, ["--no-banner", "batch", str(path)])

        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert result.exit_code == 1
        assert "[/bold]" in result.output
        assert "Summary" in result.output

    def test_only_invalid_keeps_report_totals(self, tmp_path):
        path = tmp_path / "mixed.csv"
        path.write_text("dni,00113918205\ndni,00113918206\n", encoding="utf-8")
        out = tmp_path / "r.json"
        result = runner.invoke(
            app, ["--no-banner", "batch", str(path), "--only-invalid", "-o", str(out)]
        )

        assert result.exit_code == 1
        assert "00113918206" in result.output
        assert "00113918205" not in result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["total"] == 2
        assert data["valid_count"] == 1
        assert data["invalid_count"] == 1
        assert len(data["checks"]) == 2


class TestConfigCommands:
    def test_set_default_type_then_show(self):
        result = runner.invoke(app, ["config", "set-default-type", "Passport"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "passport" in result.output

    def test_set_unknown_type(self):
        result = runner.invoke(app, ["config", "set-default-type", "ssn"])
        assert result.exit_code == 2


def test_invalid_log_level():
    result = runner.invoke(app, ["--log-level", "LOUD", "validate", "dni", "00113918205"])
    assert result.exit_code == 2


class TestSettingsErrors:
    def test_uppercase_default_type_setting(self, monkeypatch):
        monkeypatch.setenv("RD_DOCS_DEFAULT_DOCUMENT_TYPE", "DNI")
        result = runner.invoke(app, ["validate", "dni", "00113918205"])
        assert result.exit_code == 0

    def test_bad_setting_is_usage_error(self, monkeypatch):
        monkeypatch.setenv("RD_DOCS_DEFAULT_DOCUMENT_TYPE", "ssn")
        result = runner.invoke(app, ["validate", "dni", "00113918205"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
