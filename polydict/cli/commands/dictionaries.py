"""Dictionary listing command."""

import typer
from rich.table import Table

from polydict.cli.utils.console import console
from polydict.container import Container


def list_dictionaries(
    ctx: typer.Context,
    bidirectional: bool | None = typer.Option(
        None,
        "--bidirectional/--one-way",
        help="Only show bidirectional or only one-way dictionaries",
    ),
) -> None:
    """List the dictionaries served by registered engines."""
    container: Container = ctx.obj
    registry = container.registry

    dictionaries = sorted(registry.supported_dictionaries(), key=lambda d: d.key)
    if bidirectional is not None:
        dictionaries = [d for d in dictionaries if d.bidirectional == bidirectional]

    if not dictionaries:
        console.print("[warning]No dictionaries available[/]")
        return

    table = Table(title="Dictionaries")
    table.add_column("Query", style="lang", no_wrap=True)
    table.add_column("Input")
    table.add_column("Output")
    table.add_column("Both ways", justify="center")
    table.add_column("Engines", justify="right")

    for dictionary in dictionaries:
        table.add_row(
            dictionary.query_string_with_dialect,
            dictionary.input.display_name,
            dictionary.output.display_name,
            "[green]yes[/]" if dictionary.bidirectional else "no",
            str(len(registry.engines_for(dictionary))),
        )

    console.print(table)
