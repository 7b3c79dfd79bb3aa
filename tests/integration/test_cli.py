"""
Integration tests for the infothek command line.

Runs the click commands against the fixture database with CliRunner.
"""
from importlib import metadata

import pytest
from click.testing import CliRunner

import infothek
from infothek.core import paths
from infothek.pipeline.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def base_args(db_path, tmp_path, monkeypatch):
    monkeypatch.setattr("infothek.core.paths.CONFIG_PATH", tmp_path / "no-config.yaml")
    return ["--database", str(db_path), "--log-dir", str(tmp_path / "logs")]


class TestExportCommand:
    """Tests for 'infothek export'."""

    def test_export_single_movie(self, runner, base_args, tmp_path):
        out = tmp_path / "wiki"
        result = runner.invoke(cli, [*base_args, "export", "movie", "--id", "_xxx", "--output", str(out)])

        assert result.exit_code == 0, result.output
        page = out / "de" / "cinema_and_television_movie" / "alien_1979.txt"
        assert page.is_file()
        assert "1 pages written, 0 skipped, 0 errors" in result.output

    def test_export_all_as_english_markdown(self, runner, base_args, tmp_path):
        out = tmp_path / "wiki"
        result = runner.invoke(
            cli,
            [*base_args, "export", "movie", "--id", "*", "--lang", "en", "--format", "markdown", "--output", str(out)],
        )

        assert result.exit_code == 0, result.output
        folder = out / "en" / "cinema_and_television_movie"
        assert sorted(path.name for path in folder.iterdir()) == ["alien_1979.md", "aliens_1986.md"]

    def test_export_series_with_status(self, runner, base_args, tmp_path):
        out = tmp_path / "wiki"
        result = runner.invoke(
            cli, [*base_args, "export", "series", "--id", "*", "--status", "ok", "--output", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert (out / "de" / "cinema_and_television_series" / "firefly_2002.txt").is_file()

    def test_prompts_for_id(self, runner, base_args, tmp_path):
        out = tmp_path / "wiki"
        result = runner.invoke(cli, [*base_args, "export", "movie", "--output", str(out)], input="_yyy\n")

        assert result.exit_code == 0, result.output
        assert (out / "de" / "cinema_and_television_movie" / "aliens_1986.txt").is_file()

    def test_missing_id_is_skipped(self, runner, base_args, tmp_path):
        result = runner.invoke(
            cli, [*base_args, "export", "movie", "--id", "_missing", "--output", str(tmp_path / "wiki")]
        )
        assert result.exit_code == 0, result.output
        assert "0 pages written, 1 skipped" in result.output

    def test_unknown_format_rejected(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "export", "movie", "--id", "_xxx", "--format", "html"])
        assert result.exit_code == 2

    def test_missing_database_reports_error(self, runner, tmp_path, monkeypatch):
        monkeypatch.setattr("infothek.core.paths.CONFIG_PATH", tmp_path / "no-config.yaml")
        result = runner.invoke(
            cli,
            [
                "--database", str(tmp_path / "missing.db"),
                "--log-dir", str(tmp_path / "logs"),
                "export", "movie", "--id", "_xxx",
            ],
        )
        assert result.exit_code == 1
        assert "DatabaseError" in result.output


class TestConfigFile:
    def test_config_file_values_used(self, runner, db_path, tmp_path):
        config = tmp_path / "infothek.yaml"
        config.write_text(
            f"database: {db_path}\n"
            "output_dir: pages\n"
            "language: en\n"
            "formatter: obsidian\n"
            "log_dir: logs\n",
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["--config", str(config), "export", "movie", "--id", "_xxx"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "pages" / "en" / "cinema_and_television_movie" / "alien_1979.md").is_file()

    def test_invalid_config_reports_error(self, runner, tmp_path):
        config = tmp_path / "infothek.yaml"
        config.write_text("formatter: mediawiki\n", encoding="utf-8")
        result = runner.invoke(cli, ["--config", str(config), "list", "movie"])
        assert result.exit_code == 1
        assert "ConfigError" in result.output


class TestListAndShow:
    def test_list(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "list", "movie"])
        assert result.exit_code == 0, result.output
        assert "_xxx\tAlien" in result.output
        assert "_yyy\tAliens" in result.output
        assert "_zzz" not in result.output
        assert "2 movie article(s) with status 'ok'" in result.output

    def test_list_other_status(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "list", "movie", "--status", "wip"])
        assert "_zzz\tPrometheus" in result.output

    def test_list_invalid_order(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "list", "movie", "--order", "ID;"])
        assert result.exit_code == 1
        assert "QueryError" in result.output

    def test_show(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "show", "movie", "_xxx"])
        assert result.exit_code == 0, result.output
        assert "movie _xxx: found" in result.output
        assert "Original title: Alien" in result.output
        assert "genres: 2" in result.output
        assert "14 child rows loaded" in result.output

    def test_show_missing(self, runner, base_args):
        result = runner.invoke(cli, [*base_args, "show", "series", "_nope"])
        assert result.exit_code == 0
        assert "series _nope: not found" in result.output


def test_init_db(runner, tmp_path, monkeypatch):
    monkeypatch.setattr("infothek.core.paths.CONFIG_PATH", tmp_path / "no-config.yaml")
    target = tmp_path / "new" / "infothek.db"
    result = runner.invoke(cli, ["--log-dir", str(tmp_path / "logs"), "init-db", str(target)])
    assert result.exit_code == 0, result.output
    assert target.is_file()
    assert "Created database" in result.output


class TestGroupOptions:
    def test_help_names_default_config_file(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "infothek.yaml in the project root" in " ".join(result.output.split())
        assert paths.CONFIG_PATH == paths.ROOT / "infothek.yaml"

    def test_verbose_echoes_debug_messages(self, runner, base_args):
        result = runner.invoke(cli, ["-v", *base_args, "show", "movie", "_xxx"])
        assert result.exit_code == 0, result.output
        assert "DEBUG" in result.output


def test_package_version_matches_metadata():
    try:
        installed = metadata.version("infothek")
    except metadata.PackageNotFoundError:
        pytest.skip("infothek is not installed")
    assert infothek.__version__ == installed
