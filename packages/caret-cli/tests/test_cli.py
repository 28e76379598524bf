"""Tests for the caret command line."""

import pytest
from caret_cli.cli import cli
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CARET_PROGRAM_NAME", "CARET_PREFIX", "CARET_WIDTH", "CARET_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "default.nix"
    path.write_text("{\n  x = y;\n}\n", encoding="utf-8")
    return path


class TestShow:
    """Test reports built from options."""

    def test_description_only(self, runner):
        result = runner.invoke(cli, ["show", "--description", "oops", "--stdout", "--no-color"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["error: " + "-" * 72 + " ", "oops", ""]

    def test_with_position(self, runner, source_file):
        result = runner.invoke(
            cli,
            [
                "show",
                "--name",
                "undefined-variable",
                "--description",
                "undefined variable 'y'",
                "--hint",
                "bind y first",
                "--file",
                str(source_file),
                "--line",
                "2",
                "--column",
                "7",
                "--program-name",
                "nix",
                "--stdout",
                "--no-color",
            ],
        )

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("error: --- undefined-variable ")
        assert lines[0].endswith(" nix")
        assert len(lines[0]) == 80
        assert lines[1:] == [
            f"in file: {source_file} (2:7)",
            "",
            "undefined variable 'y'",
            "",
            "     1| {",
            "     2|   x = y;",
            "      |       ^",
            "     3| }",
            "",
            "bind y first",
            "",
        ]

    def test_string_source(self, runner):
        result = runner.invoke(
            cli,
            ["show", "--file", "(string)", "--line", "10", "--column", "2", "--stdout", "--no-color"],
        )

        assert result.exit_code == 0
        assert "from command line argument" in result.output
        assert "in file:" not in result.output

    def test_severity_and_width(self, runner):
        result = runner.invoke(
            cli,
            ["show", "--severity", "warning", "--name", "w", "--width", "40", "--stdout", "--no-color"],
        )

        assert result.exit_code == 0
        header = result.output.splitlines()[0]
        assert header.startswith("warning: --- w ")
        assert len(header) == 40

    def test_prefix(self, runner):
        result = runner.invoke(cli, ["show", "--description", "d", "--prefix", "# ", "--stdout", "--no-color"])
        assert all(line.startswith("# ") for line in result.output.splitlines())

    def test_color_forced(self, runner):
        result = runner.invoke(cli, ["show", "--description", "d", "--stdout", "--color"])
        assert "\x1b[" in result.output

    def test_env_program_name(self, runner, monkeypatch):
        monkeypatch.setenv("CARET_PROGRAM_NAME", "nix-env")
        result = runner.invoke(cli, ["show", "--stdout", "--no-color"])
        assert result.output.splitlines()[0].endswith(" nix-env")

    def test_strict(self, runner):
        assert runner.invoke(cli, ["show", "--strict", "--stdout"]).exit_code == 1
        assert runner.invoke(cli, ["show", "--severity", "info", "--strict", "--stdout"]).exit_code == 0

    def test_bad_severity(self, runner):
        result = runner.invoke(cli, ["show", "--severity", "loud"])
        assert result.exit_code == 2


class TestRender:
    """Test reports loaded from YAML."""

    def test_render_file(self, runner, tmp_path, source_file):
        report_file = tmp_path / "report.yaml"
        report_file.write_text(
            f"severity: info\nname: note\ndescription: looks fine\nposition:\n  file: {source_file}\n  line: 1\n"
        )

        result = runner.invoke(cli, ["render", str(report_file), "--stdout", "--no-color"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("info: --- note ")
        assert "     1| {" in lines
        assert "     2|   x = y;" in lines
        assert not any("^" in line for line in lines)

    def test_missing_report(self, runner, tmp_path):
        result = runner.invoke(cli, ["render", str(tmp_path / "none.yaml"), "--stdout", "--no-color"])

        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0].startswith("error: --- UsageError ")
        assert lines[1] == f"cannot load report '{tmp_path / 'none.yaml'}': File not found: {tmp_path / 'none.yaml'}"

    def test_invalid_report(self, runner, tmp_path):
        report_file = tmp_path / "report.yaml"
        report_file.write_text("severity: loud\n")

        result = runner.invoke(cli, ["render", str(report_file), "--stdout", "--no-color"])

        assert result.exit_code == 1
        assert "UsageError" in result.output
