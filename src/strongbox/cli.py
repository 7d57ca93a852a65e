"""Strongbox CLI - encrypted journal."""

import json
import logging
import sys
from datetime import datetime, timezone

import click

from .config import load_config
from .core.entries import JournalEntry
from .service import get_journal


def _entry_json(entry: JournalEntry) -> dict:
    return {
        "id": entry.id,
        "content": entry.content,
        "timestamp": entry.timestamp.isoformat(),
    }


def _show_entries(entries: list[JournalEntry], as_json: bool, empty_msg: str) -> None:
    """Shared entry display logic."""
    if as_json:
        click.echo(json.dumps([_entry_json(e) for e in entries], indent=2))
        return

    if not entries:
        click.echo(empty_msg)
        return

    for entry in entries:
        stamp = entry.timestamp.strftime("%Y-%m-%d %H:%M")
        click.echo(f"#{entry.id:<4} {stamp}  {entry.content}")


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Strongbox - encrypted journal CLI."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command()
@click.argument("words", nargs=-1)
def add(words: tuple[str, ...]):
    """Add an entry. Reads stdin when no text is given."""
    content = " ".join(words) if words else click.get_text_stream("stdin").read().strip()

    journal = get_journal()
    entry = journal.add(content)
    click.echo(f"Added entry #{entry.id} at {entry.timestamp.isoformat()}")

    if not journal.health().ok:
        click.echo(f"Warning: entry not saved to disk: {journal.health().last_error}", err=True)


@main.command("list")
@click.option("--limit", "-n", type=click.IntRange(min=0), default=0, help="Max entries (0 = all)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(limit: int, as_json: bool):
    """List entries, newest first."""
    journal = get_journal()
    _show_entries(journal.list(limit), as_json, "Journal is empty.")


@main.command()
@click.argument("day", type=click.DateTime(formats=["%Y-%m-%d"]), required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def day(day: datetime | None, as_json: bool):
    """List entries for a date (YYYY-MM-DD, default today UTC)."""
    target = day.date() if day else datetime.now(timezone.utc).date()
    journal = get_journal()
    _show_entries(
        journal.list_by_date(target),
        as_json,
        f"No entries for {target.strftime('%A, %b %d')}.",
    )


@main.command()
def status():
    """Show backing file and store health."""
    config = load_config()
    journal = get_journal(config)
    health = journal.health()

    click.echo(f"Backing file: {config.journal_file}")
    click.echo(f"Entries:      {len(journal.list())}")
    click.echo(f"Next id:      {journal.next_id}")
    if config.uses_default_secrets:
        click.echo("Secrets:      built-in fallback (not secure)")

    if health.ok:
        click.echo("Health:       ok")
        return

    click.echo(
        f"Health:       {health.last_operation} failed at {health.failed_at:%Y-%m-%d %H:%M:%S} UTC",
        err=True,
    )
    click.echo(f"Error:        {health.last_error}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    main()
