"""Query planning and execution commands."""

import typer
from rich.table import Table

from polydict.cli.utils.async_runner import dispatch_query
from polydict.cli.utils.console import console, error_console
from polydict.container import Container
from polydict.errors import PolydictError
from polydict.models import Dictionary, GroupingType, OrderType, QueryStep

DictionaryOption = typer.Option(
    [],
    "--dictionary",
    "-d",
    help="Dictionary to query, e.g. de-en or de-no_ny (repeatable, comma-separated)",
)
GroupingOption = typer.Option(None, "--group-by", help="Grouping for the merge stage")
OrderOption = typer.Option(None, "--order-by", help="Order for the merge stage")


def _resolve(container: Container, dictionary: list[str]) -> list[Dictionary]:
    try:
        return container.planner.resolve_dictionaries(dictionary)
    except PolydictError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None


def _steps_table(steps: tuple[QueryStep, ...] | list[QueryStep]) -> Table:
    table = Table(title="Query plan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Engine", style="engine", overflow="fold")
    table.add_column("Direction", style="lang", no_wrap=True)
    table.add_column("Both ways", justify="center", no_wrap=True)
    for number, step in enumerate(steps, start=1):
        table.add_row(
            str(number),
            step.engine_id,
            f"{step.input_language.code} -> {step.output_language.code}",
            "[green]yes[/]" if step.allow_both_way else "no",
        )
    return table


def plan(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Text to look up"),
    dictionary: list[str] = DictionaryOption,
    grouping: GroupingType | None = GroupingOption,
    order: OrderType | None = OrderOption,
) -> None:
    """Show which engine calls a query would make."""
    container: Container = ctx.obj
    dictionaries = _resolve(container, dictionary)
    try:
        request = container.planner.build_request(
            query,
            dictionaries,
            grouping or container.settings.default_grouping,
            order or container.settings.default_order,
        )
    except PolydictError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    if not request.steps:
        console.print("[warning]No engine serves the requested dictionaries[/]")
        return
    console.print(_steps_table(request.steps))


def run_query(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Text to look up"),
    dictionary: list[str] = DictionaryOption,
    grouping: GroupingType | None = GroupingOption,
    order: OrderType | None = OrderOption,
) -> None:
    """Run a query against all engines serving the requested dictionaries."""
    container: Container = ctx.obj
    dictionaries = _resolve(container, dictionary)
    try:
        request, results = dispatch_query(container, query, dictionaries, grouping, order)
    except PolydictError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    if not request.steps:
        console.print("[warning]No engine serves the requested dictionaries[/]")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("Engine", style="engine", overflow="fold")
    table.add_column("Input", no_wrap=True)
    table.add_column("Output", no_wrap=True)
    table.add_column("Direction", style="lang", no_wrap=True)
    table.add_column("Type", style="dim", no_wrap=True)

    total = 0
    for result in results:
        if not result.ok:
            error_console.print(f"[warning]{result.step.engine_id}: {result.error}[/]")
            continue
        for entry in result.entries:
            table.add_row(
                result.step.engine_id,
                entry.input_text,
                entry.output_text,
                f"{entry.input_language.code} -> {entry.output_language.code}",
                entry.entry_type.value,
            )
            total += 1

    if total:
        console.print(table)
    else:
        console.print("[dim]No matches[/]")
