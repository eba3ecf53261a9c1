"""Database commands for the two stores."""

from __future__ import annotations

import typer

from pagedigest.config import settings
from pagedigest.db import get_connection, init_contents_db, init_summaries_db
from pagedigest.db.summaries import list_summaries
from pagedigest.pipeline import check_stores

db_app = typer.Typer(help="Summary and content store operations.", no_args_is_help=True)


def open_stores():
    """Open and initialise both stores; the caller closes them."""
    summaries_db = get_connection(settings.summaries_db_path)
    contents_db = get_connection(settings.contents_db_path)
    init_summaries_db(summaries_db)
    init_contents_db(contents_db)
    return summaries_db, contents_db


@db_app.command("init")
def db_init() -> None:
    """Create both stores (tables are only created if missing)."""
    summaries_db, contents_db = open_stores()
    summaries_db.close()
    contents_db.close()
    typer.echo(f"[db init] Summary store ready at {settings.summaries_db_path}")
    typer.echo(f"[db init] Content store ready at {settings.contents_db_path}")


@db_app.command("status")
def db_status() -> None:
    """Check that each store answers a query."""
    summaries_db, contents_db = open_stores()
    try:
        status = check_stores(summaries_db, contents_db)
    finally:
        summaries_db.close()
        contents_db.close()

    typer.echo(f"[db status] Summary store : {'ok' if status.summaries else 'FAILED'}")
    typer.echo(f"[db status] Content store : {'ok' if status.contents else 'FAILED'}")
    for error in status.errors:
        typer.echo(f"  {error}")
    if status.errors:
        raise typer.Exit(1)


@db_app.command("list")
def db_list(
    limit: int = typer.Option(20, help="Maximum number of summaries to show."),
) -> None:
    """List the most recently saved summaries."""
    summaries_db, contents_db = open_stores()
    try:
        records = list_summaries(summaries_db, limit=limit)
    finally:
        summaries_db.close()
        contents_db.close()

    if not records:
        typer.echo("[db list] No summaries saved yet.")
        return
    for r in records:
        typer.echo(f"  {r.id}  {r.title!r}  {r.url}")
