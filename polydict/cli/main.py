"""Main CLI application entry point."""

import typer

from polydict.cli.commands import dictionaries, engines, query
from polydict.cli.utils.console import error_console
from polydict.config import settings
from polydict.container import build_container

app = typer.Typer(
    name="polydict",
    help="Query many dictionary engines at once",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(ctx: typer.Context) -> None:
    """Initialize application on startup."""
    if ctx.obj is not None:
        return

    try:
        ctx.obj = build_container(settings)
    except Exception as e:
        error_console.print(f"[error]Failed to initialize engines: {e}[/]")
        raise typer.Exit(1) from None


app.command(name="dictionaries", help="List available dictionaries")(
    dictionaries.list_dictionaries
)
app.command(name="engines", help="List registered engines")(engines.list_engines)
app.command(name="plan", help="Show the engine calls a query would make")(query.plan)
app.command(name="query", help="Run a query against the engines")(query.run_query)


if __name__ == "__main__":
    app()
