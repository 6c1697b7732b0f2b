"""Tests for CLI commands."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import StubStore
from gids.cli import cli
from gids.store import StoreError

ENV = {
    "GIDS_SUPABASE_URL": "https://xyz.supabase.co",
    "GIDS_SUPABASE_ANON_KEY": "anon-key",
    "GIDS_FETCH_TIMEOUT": "5",
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(env=ENV)


@pytest.fixture
def mock_store_cls(store: StubStore):
    with patch("gids.cli.SupabaseStore", return_value=store) as mock_cls:
        yield mock_cls


class TestConfiguration:
    """Tests for environment handling."""

    def test_missing_env(self):
        """Test that missing store settings exit with an error."""
        runner = CliRunner(
            env={
                "GIDS_SUPABASE_URL": None,
                "GIDS_SUPABASE_ANON_KEY": None,
                "SUPABASE_URL": None,
                "SUPABASE_ANON_KEY": None,
            }
        )

        result = runner.invoke(cli, ["articles"])

        assert result.exit_code == 1
        assert "Missing required environment variables" in result.output

    def test_store_built_from_env(self, runner: CliRunner, mock_store_cls):
        """Test that the store is built from environment settings."""
        result = runner.invoke(cli, ["articles"])

        assert result.exit_code == 0
        mock_store_cls.assert_called_once_with(
            "https://xyz.supabase.co", "anon-key", timeout=5.0
        )

    def test_version(self, runner: CliRunner):
        """Test that --version prints the package version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestArticlesCommand:
    """Tests for the articles command."""

    def test_articles(self, runner: CliRunner, mock_store_cls):
        """Test listing articles newest first."""
        result = runner.invoke(cli, ["articles"])

        assert result.exit_code == 0
        assert "Uitgelichte Artikelen" in result.output
        assert "[1] Derde" in result.output
        assert "[3] Voorbeeld" in result.output

    def test_articles_fetch_failure(self, runner: CliRunner):
        """Test that a failing store still prints an empty list."""
        store = StubStore(articles=StoreError("down"))
        with patch("gids.cli.SupabaseStore", return_value=store):
            result = runner.invoke(cli, ["articles"])

        assert result.exit_code == 0
        assert "Uitgelichte Artikelen" in result.output
        assert "[1]" not in result.output


class TestCategoriesCommand:
    """Tests for the categories command."""

    def test_categories(self, runner: CliRunner, mock_store_cls):
        """Test listing categories with their subcategories."""
        result = runner.invoke(cli, ["categories"])

        assert result.exit_code == 0
        assert "Categorieën" in result.output
        assert "- Steden" in result.output
        assert "Cultuur" in result.output


class TestReadCommand:
    """Tests for the read command."""

    def test_read(self, runner: CliRunner, mock_store_cls):
        """Test showing a loaded article as text."""
        result = runner.invoke(cli, ["read", "a1"])

        assert result.exit_code == 0
        assert "← Terug" in result.output
        assert "Voorbeeld" in result.output
        assert "Hallo" in result.output

    def test_read_html(self, runner: CliRunner, mock_store_cls):
        """Test showing a loaded article as an HTML fragment."""
        result = runner.invoke(cli, ["read", "a1", "--html"])

        assert result.exit_code == 0
        assert '<div class="prose"><p>Hallo</p></div>' in result.output

    def test_read_not_found(self, runner: CliRunner, mock_store_cls):
        """Test that an unknown article id exits with an error."""
        result = runner.invoke(cli, ["read", "nope"])

        assert result.exit_code == 1
        assert "Article 'nope' not found" in result.output


class TestBrowseCommand:
    """Tests for the interactive browse command."""

    def test_open_and_go_back(self, runner: CliRunner, mock_store_cls):
        """Test opening a card and returning to the home screen."""
        result = runner.invoke(cli, ["browse"], input="2\nb\nq\n")

        assert result.exit_code == 0
        assert "← Terug" in result.output
        assert result.output.count("Welkom bij Nederlandse Gids") == 2

    def test_menu_and_theme(self, runner: CliRunner, mock_store_cls):
        """Test toggling the menu and the theme."""
        result = runner.invoke(cli, ["browse"], input="m\nt\nq\n")

        assert result.exit_code == 0
        assert "Categorieën" in result.output
        assert "[zon]" in result.output

    def test_unknown_number(self, runner: CliRunner, mock_store_cls):
        """Test that a number without a card is reported."""
        result = runner.invoke(cli, ["browse"], input="9\nq\n")

        assert result.exit_code == 0
        assert "No article with number 9" in result.output

    def test_unknown_choice(self, runner: CliRunner, mock_store_cls):
        """Test that an unknown command is reported."""
        result = runner.invoke(cli, ["browse"], input="x\nq\n")

        assert result.exit_code == 0
        assert "Unknown choice 'x'" in result.output

    def test_number_on_detail_screen_ignored(self, runner: CliRunner, mock_store_cls):
        """Test that card numbers are not accepted on the detail screen."""
        result = runner.invoke(cli, ["browse"], input="1\n2\nq\n")

        assert result.exit_code == 0
        assert "Unknown choice '2'" in result.output

    def test_empty_input_quits(self, runner: CliRunner, mock_store_cls):
        """Test that an empty answer ends the session."""
        result = runner.invoke(cli, ["browse"], input="\n")

        assert result.exit_code == 0
