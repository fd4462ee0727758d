"""Tests for the command-line interface."""

import json

import pytest
import structlog
from typer.testing import CliRunner

from fediview import __version__
from fediview.cli import app

from conftest import FIXTURES_DIR, HOST


runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Run every command from an empty directory against the fixture host."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FEDIVIEW_HOST", HOST)
    monkeypatch.setenv("FEDIVIEW_LOG_FORMAT", "json")
    yield
    structlog.reset_defaults()


@pytest.fixture
def db(tmp_path):
    db_path = tmp_path / "cli.db"
    result = runner.invoke(app, ["load", str(FIXTURES_DIR / "snapshot.json"), "--db", str(db_path)])
    assert result.exit_code == 0, result.output
    return db_path


class TestCli:
    """Test load and show commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_load_reports_rows(self, tmp_path, snapshot):
        result = runner.invoke(app, ["load", str(FIXTURES_DIR / "snapshot.json"), "--db", str(tmp_path / "x.db")])

        expected = len(snapshot.entities()) + len(snapshot.edges)
        assert result.exit_code == 0
        assert f"Loaded {expected} rows" in result.output

    def test_show_account(self, db):
        result = runner.invoke(app, ["show", "account", "01ALICE", "--db", str(db)])

        assert result.exit_code == 0, result.output
        view = json.loads(result.stdout)
        assert view["acct"] == "alice"
        assert view["followers_count"] == 2
        assert view["source"] is None

    def test_show_account_sensitive(self, db):
        result = runner.invoke(app, ["show", "account-sensitive", "01CAROL", "--db", str(db)])

        assert result.exit_code == 0, result.output
        view = json.loads(result.stdout)
        assert view["source"]["follow_requests_count"] == 1

    def test_show_status_with_viewer(self, db):
        result = runner.invoke(app, ["show", "status", "01S3", "--viewer", "01BOB", "--db", str(db)])

        assert result.exit_code == 0, result.output
        view = json.loads(result.stdout)
        assert view["reblog"]["id"] == "01S1"
        assert view["reblog"]["favourited"] is True

    def test_show_instance(self, db):
        result = runner.invoke(app, ["show", "instance-v1", "--db", str(db)])

        assert result.exit_code == 0, result.output
        view = json.loads(result.stdout)
        assert view["stats"]["user_count"] == 2
        assert view["thumbnail"] == "https://example.org/assets/logo.png"

    def test_show_missing_entity(self, db):
        result = runner.invoke(app, ["show", "account", "nobody", "--db", str(db)])

        assert result.exit_code == 1
        assert "Failed to render" in result.output
