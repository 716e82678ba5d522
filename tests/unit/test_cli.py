"""Unit tests for respath.cli.main — resolve, alias, aliases and version
commands driven through Click's test runner.
"""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from respath.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "respath.yaml"
    path.write_text(
        "prefix: /app\n"
        "aliases:\n"
        "  home: /index\n"
        "actions:\n"
        "  user.list: /user/list\n",
        encoding="utf-8",
    )
    return path


class TestVersionCommand:
    def test_prints_version(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output


class TestResolveCommand:
    def test_string_output_without_config(self) -> None:
        result = _make_runner().invoke(cli, ["resolve", "a.b.c", "#", "--string"])
        assert result.exit_code == 0
        assert result.output.strip() == "a.b"

    def test_string_output_with_config(self, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["resolve", "/x", "<home>..jsp", "-c", str(config_file), "--string"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/index.jsp"

    def test_prefix_option_overrides_config(self, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli,
            ["resolve", "/a/b", "#c", "-c", str(config_file), "-p", "/v2", "--string"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/v2/a.c"

    def test_alias_option(self) -> None:
        result = _make_runner().invoke(
            cli, ["resolve", "/x", "<go>", "-a", "go=/target", "--string"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/target"

    def test_value_is_optional(self) -> None:
        result = _make_runner().invoke(cli, ["resolve", "/a", "-p", "/p", "--string"])
        assert result.exit_code == 0
        assert result.output.strip() == "/p/a"

    def test_table_output(self) -> None:
        result = _make_runner().invoke(cli, ["resolve", "/x", "/foo..bar"])
        assert result.exit_code == 0
        assert "/foo" in result.output
        assert "bar" in result.output
        assert "/foo.bar" in result.output

    def test_table_output_marks_absent_value(self) -> None:
        result = _make_runner().invoke(cli, ["resolve", "/x", "/foo"])
        assert result.exit_code == 0
        assert "none" in result.output

    def test_malformed_alias_option(self) -> None:
        result = _make_runner().invoke(cli, ["resolve", "/x", "-a", "novalue"])
        assert result.exit_code != 0
        assert "NAME=TARGET" in result.output

    def test_missing_config_file_exits_with_error(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(
            cli, ["resolve", "/x", "-c", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1

    def test_invalid_config_file_exits_with_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("prefix: [1]\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["resolve", "/x", "-c", str(path)])
        assert result.exit_code == 1


class TestAliasCommand:
    def test_expands_markers(self, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["alias", "<home>/<missing>x", "-c", str(config_file)]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "/index/x"

    def test_action_fallback(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["alias", "user.list", "-c", str(config_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "/user/list"

    def test_unknown_whole_string_is_unchanged(self) -> None:
        result = _make_runner().invoke(cli, ["alias", "plain"])
        assert result.exit_code == 0
        assert result.output.strip() == "plain"


class TestAliasesCommand:
    def test_lists_aliases_and_actions(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["aliases", "-c", str(config_file)])
        assert result.exit_code == 0
        assert "home" in result.output
        assert "user.list" in result.output
        assert "/app" in result.output

    def test_no_aliases(self) -> None:
        result = _make_runner().invoke(cli, ["aliases"])
        assert result.exit_code == 0
        assert "No aliases configured" in result.output
