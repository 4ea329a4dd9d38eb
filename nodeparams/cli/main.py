"""nodeparams CLI: Typer application."""

import logging

import typer
from rich.console import Console

from nodeparams.version import __version__

app = typer.Typer(
    name="nodeparams",
    help="nodeparams: resolve, validate and route node parameters of a workflow.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level"),
):
    """nodeparams CLI."""
    if version:
        console.print(f"nodeparams v{__version__}")
        raise typer.Exit()

    from nodeparams.config import config
    logging.basicConfig(
        level="DEBUG" if debug or config.debug else config.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Parameter commands ─────────────────────────────────────────────────────────
from nodeparams.cli.commands import resolve, validate, webhooks  # noqa: E402

app.command(name="resolve", help="Resolve node parameters and print them as JSON")(resolve.resolve_workflow)
app.command(name="validate", help="Report missing required parameters")(validate.validate_workflow)
app.command(name="webhooks", help="List the webhook routes a workflow registers")(webhooks.webhooks_list)

# ── Inspection commands ────────────────────────────────────────────────────────
from nodeparams.cli.commands import config, node_types  # noqa: E402

app.command(name="types", help="List all registered node types")(node_types.node_types_list)
app.command(name="config", help="Show resolved configuration")(config.config_show)


if __name__ == "__main__":
    app()
