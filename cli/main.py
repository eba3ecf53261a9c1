"""Page Digest CLI — entry-point for the scrape/summarise pipeline.

Usage:
    python cli/main.py --help

Commands:
    scrape      fetch a page and print its extracted text
    summarize   summarise a page (or a local text file), optionally saving it
    db          summary / content store operations
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pagedigest.xxx import
# ...` works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import httpx
import typer

from pagedigest.config import configure_logging
from pagedigest.scraper.fetcher import InvalidUrlError

from cli.commands.db import db_app, open_stores

app = typer.Typer(
    name="pagedigest",
    help="Page Digest CLI.",
    no_args_is_help=True,
)
app.add_typer(db_app, name="db")


@app.callback()
def main() -> None:
    configure_logging()


def _fail(command: str, message: str) -> None:
    typer.echo(f"[{command}] Error: {message}", err=True)
    raise typer.Exit(1)


def _fetch_digest(command: str, url: str):
    from pagedigest.pipeline import digest_url

    typer.echo(f"[{command}] Fetching {url!r} …")
    try:
        return digest_url(url)
    except InvalidUrlError as exc:
        _fail(command, str(exc))
    except httpx.HTTPStatusError as exc:
        _fail(command, f"upstream returned HTTP {exc.response.status_code}")
    except httpx.RequestError as exc:
        _fail(command, f"request failed: {exc}")


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="URL to scrape."),
) -> None:
    """Scrape a URL and print extracted clean text to stdout."""
    digest = _fetch_digest("scrape", url)

    typer.echo(f"[scrape] Title  : {digest.title}")
    typer.echo(f"[scrape] Words  : {len(digest.full_text.split())}")
    typer.echo("")
    typer.echo(digest.full_text)


# ---------------------------------------------------------------------------
# Summarize
# ---------------------------------------------------------------------------
@app.command("summarize")
def summarize_cmd(
    url: Optional[str] = typer.Option(None, help="URL to fetch and summarise."),
    file: Optional[Path] = typer.Option(
        None, "--file", exists=True, dir_okay=False, help="Local text file to summarise."
    ),
    save: bool = typer.Option(False, "--save", help="Persist the result to both stores."),
) -> None:
    """Summarise a page (or a text file) and print the Urdu translation."""
    from pagedigest.pipeline import Digest, save_digest
    from pagedigest.summary import summarize
    from pagedigest.translator import translate_to_urdu

    if (url is None) == (file is None):
        _fail("summarize", "pass exactly one of --url or --file")

    if url is not None:
        digest = _fetch_digest("summarize", url)
    else:
        try:
            text = file.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            _fail("summarize", f"{file} is not valid UTF-8 text")
        summary = summarize(text)
        digest = Digest(
            url=file.resolve().as_uri(),
            title=file.stem,
            content=text,
            full_text=text,
            summary=summary,
            urdu_summary=translate_to_urdu(summary),
        )

    typer.echo(f"[summarize] Title : {digest.title}")
    typer.echo("")
    typer.echo(digest.summary)
    typer.echo("")
    typer.echo(digest.urdu_summary)

    if save:
        summaries_db, contents_db = open_stores()
        try:
            report = save_digest(summaries_db, contents_db, digest)
        finally:
            summaries_db.close()
            contents_db.close()
        typer.echo("")
        typer.echo(
            f"[summarize] Summary store: {'saved' if report.summary_saved else 'FAILED'}, "
            f"content store: {'saved' if report.content_saved else 'FAILED'}"
        )
        for error in report.errors:
            typer.echo(f"  {error}")
        if not report.success:
            raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
