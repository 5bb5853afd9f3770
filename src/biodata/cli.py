"""Biodata CLI - launch the TUI or query Entrez from the command line."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from biodata import configure_logging, main
from biodata.config import get_settings
from biodata.entrez import EntrezClient
from biodata.exceptions import BiodataError
from biodata.formatting import format_record, summarize_records

console = Console()

cli = typer.Typer(
    name="biodata",
    help="Biodata - browse NCBI sequence records from the terminal.",
    rich_markup_mode="rich",
)


def run_async(coro: Any) -> Any:
    """Run async coroutine in sync context."""
    return asyncio.run(coro)


@cli.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Start the interactive browser when no command is given."""
    if ctx.invoked_subcommand is None:
        raise typer.Exit(main())


@cli.command()
def search(
    query: Annotated[str, typer.Argument(help="Free-text Entrez query")],
    filter: Annotated[str, typer.Option("--filter", "-f", help="Entrez filter token")] = "genbank",
    database: Annotated[
        str | None, typer.Option("--database", "-d", help="Entrez database")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Output JSON")] = False,
) -> None:
    """Search a database and list the matching records."""
    settings = get_settings()
    configure_logging(settings)
    db = database or settings.default_database

    async def _run() -> tuple[list[str], str, list[Any]]:
        async with EntrezClient(settings) as client:
            ids, normalized = await client.search(db, filter, query)
            records = await client.efetch(db, ids)
            return ids, normalized, records

    try:
        ids, normalized, records = run_async(_run())
    except BiodataError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    summaries = summarize_records(records, ids)

    if as_json:
        data = {
            "query": normalized,
            "results": [
                {"id": s.accession, "title": s.title, "description": s.description}
                for s in summaries
            ],
        }
        print(json.dumps(data, indent=2))
        return

    table = Table(title=f"[bold]{escape(normalized)}[/bold]")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Accession", style="magenta")
    table.add_column("Definition")
    for summary, record in zip(summaries, records):
        table.add_row(
            escape(summary.accession), escape(record.primary_accession), escape(summary.title)
        )
    console.print(table)
    console.print(f"[dim]{len(summaries)} results[/dim]")


@cli.command()
def show(
    accession: Annotated[str, typer.Argument(help="Accession or id of the record")],
    database: Annotated[
        str | None, typer.Option("--database", "-d", help="Entrez database")
    ] = None,
    save: Annotated[
        Path | None, typer.Option("--save", help="Write the full sequence to this file")
    ] = None,
) -> None:
    """Print one formatted record."""
    settings = get_settings()
    configure_logging(settings)
    db = database or settings.default_database

    async def _run() -> list[Any]:
        async with EntrezClient(settings) as client:
            records = await client.efetch(db, [accession])
            if save is not None and records:
                await client.save_sequence(db, accession, save)
            return records

    try:
        records = run_async(_run())
    except BiodataError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    if not records:
        console.print(f"[yellow]No record found for[/yellow] {accession}")
        raise typer.Exit(1)

    console.print(format_record(records[0], settings.label_padding), markup=False)
    if save is not None:
        console.print(f"[green]✓ Sequence saved to[/green] {save}")


if __name__ == "__main__":
    cli()
