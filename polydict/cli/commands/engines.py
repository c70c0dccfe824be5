"""Engine listing command."""

import typer
from rich.panel import Panel
from rich.table import Table

from polydict.cli.utils.console import console
from polydict.container import Container


def list_engines(ctx: typer.Context) -> None:
    """Show registered engines and what they support."""
    container: Container = ctx.obj
    registry = container.registry

    engine_ids = sorted(registry.registered_engine_ids())
    if not engine_ids:
        console.print("[warning]No engines registered[/]")
        return

    console.print()
    for engine_id in engine_ids:
        description = registry.description_by_id(engine_id)
        feature_set = registry.feature_set_by_id(engine_id)

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Label", style="bold")
        table.add_column("Value")

        table.add_row("Id", f"[engine]{engine_id}[/]")
        if description.author:
            table.add_row("Author", description.author)
        if description.license:
            table.add_row("License", description.license)
        if description.summary:
            table.add_row("Summary", f"[dim]{description.summary}[/]")
        dictionaries = sorted(feature_set.supported_dictionaries or (), key=lambda d: d.key)
        table.add_row("Dictionaries", ", ".join(d.key for d in dictionaries) or "-")

        console.print(Panel(table, title=f"[bold]{description.name}[/]", border_style="blue"))
    console.print()
