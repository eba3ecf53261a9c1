"""Tests for the Page Digest CLI."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import app
from pagedigest.scraper.models import RawPage

runner = CliRunner()

_URL = "https://example.com/harvest"

_ARTICLE_HTML = """\
<html>
<head><title>Harvest Report</title></head>
<body>
  <article>
    <p>The weather in the valley was mild during spring.</p>
    <p>Farmers planted rows of barley along the river banks.</p>
    <p>Traders arrived each week with carts full of goods.</p>
    <p>Children played near the old stone bridge every evening.</p>
    <p>However the key result was a crucial and important harvest.</p>
  </article>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Point both stores at a temporary workspace."""
    monkeypatch.setattr("pagedigest.config.settings.workspace_dir", tmp_path)
    monkeypatch.setattr("pagedigest.config.settings.summaries_db_override", None)
    monkeypatch.setattr("pagedigest.config.settings.contents_db_override", None)
    return tmp_path


def _raw_page() -> RawPage:
    return RawPage(url=_URL, html=_ARTICLE_HTML, status_code=200)


class TestScrapeCommand:
    def test_prints_title_and_text(self) -> None:
        with patch("pagedigest.pipeline.fetch_url", return_value=_raw_page()):
            result = runner.invoke(app, ["scrape", "--url", _URL])

        assert result.exit_code == 0
        assert "Harvest Report" in result.output
        assert "Farmers planted rows of barley" in result.output

    def test_invalid_url_exits_1(self) -> None:
        result = runner.invoke(app, ["scrape", "--url", "not a url"])
        assert result.exit_code == 1
        assert "Invalid URL" in result.output


class TestSummarizeCommand:
    def test_summarize_url(self) -> None:
        with patch("pagedigest.pipeline.fetch_url", return_value=_raw_page()):
            result = runner.invoke(app, ["summarize", "--url", _URL])

        assert result.exit_code == 0
        assert "However the key result was a crucial and important harvest." in result.output

    def test_summarize_file(self, tmp_path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("Too short.", encoding="utf-8")
        result = runner.invoke(app, ["summarize", "--file", str(path)])

        assert result.exit_code == 0
        assert "Text too short to summarize." in result.output

    def test_non_utf8_file_exits_1(self, tmp_path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa not text")
        result = runner.invoke(app, ["summarize", "--file", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_requires_exactly_one_source(self) -> None:
        result = runner.invoke(app, ["summarize"])
        assert result.exit_code == 1

    def test_save_writes_both_stores(self, workspace) -> None:
        with patch("pagedigest.pipeline.fetch_url", return_value=_raw_page()):
            result = runner.invoke(app, ["summarize", "--url", _URL, "--save"])

        assert result.exit_code == 0
        assert "Summary store: saved, content store: saved" in result.output
        assert (workspace / "summaries.db").exists()
        assert (workspace / "contents.db").exists()

        listed = runner.invoke(app, ["db", "list"])
        assert "Harvest Report" in listed.output


class TestDbCommands:
    def test_init(self, workspace) -> None:
        result = runner.invoke(app, ["db", "init"])
        assert result.exit_code == 0
        assert (workspace / "summaries.db").exists()
        assert (workspace / "contents.db").exists()

    def test_status(self) -> None:
        result = runner.invoke(app, ["db", "status"])
        assert result.exit_code == 0
        assert "Summary store : ok" in result.output
        assert "Content store : ok" in result.output

    def test_list_empty(self) -> None:
        result = runner.invoke(app, ["db", "list"])
        assert result.exit_code == 0
        assert "No summaries saved yet." in result.output
