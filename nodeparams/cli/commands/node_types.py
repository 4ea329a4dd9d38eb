"""nodeparams types: List all registered node types."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def node_types_list(
    node_types_file: Optional[Path] = typer.Option(None, "--node-types", help="node_types.yaml to use"),
):
    """List all registered node types and their schema size.

    Shows name, display name, parameter count, required parameters
    and declared webhooks for every node type.

    Example:
        nodeparams types
    """
    from nodeparams.config import build_registry, config

    if node_types_file is None and config.node_types_file:
        node_types_file = Path(config.node_types_file)

    try:
        registry = build_registry(node_types_file)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2)

    descriptions = registry.list_types()
    if not descriptions:
        console.print("[yellow]No node types registered.[/yellow]")
        return

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(descriptions)} Node Types[/bold]",
    )
    table.add_column("Name", style="cyan", width=18)
    table.add_column("Display Name", width=20)
    table.add_column("Parameters", justify="right", width=11)
    table.add_column("Required", width=30, style="dim")
    table.add_column("Webhooks", justify="right", width=9)

    for description in sorted(descriptions, key=lambda d: d.name):
        required = sorted({p.name for p in description.properties if p.required})
        table.add_row(
            description.name,
            description.display_name or description.name,
            str(len(description.properties)),
            ", ".join(required) or "—",
            str(len(description.webhooks)),
        )

    console.print()
    console.print(table)
    console.print()
