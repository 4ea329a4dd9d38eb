"""nodeparams webhooks: List the webhook routes a workflow registers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def webhooks_list(
    workflow_file: Path = typer.Argument(..., help="Workflow file (YAML or JSON)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Public base URL (default from config)"),
    ignore_restart: bool = typer.Option(False, "--ignore-restart", help="Skip restart webhooks"),
    node_types_file: Optional[Path] = typer.Option(None, "--node-types", help="node_types.yaml to use"),
):
    """Show method, path and URL of every webhook in a workflow.

    Webhooks whose path or method cannot be resolved are listed as
    warnings below the table.

    Example:
        nodeparams webhooks workflow.yaml --base-url https://hooks.example.com
    """
    from nodeparams.cli.loading import load_workflow
    from nodeparams.config import config
    from nodeparams.exceptions import ConfigurationError
    from nodeparams.triggers import get_route_url, get_workflow_webhooks

    workflow = load_workflow(workflow_file, node_types_file)
    base = (base_url or config.webhook_base_url).rstrip("/")

    try:
        routes = get_workflow_webhooks(workflow, ignore_restart_webhooks=ignore_restart)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    if not routes.webhooks and not routes.warnings:
        console.print("[yellow]No webhooks registered.[/yellow]")
        return

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(routes.webhooks)} Webhook Routes[/bold]",
    )
    table.add_column("Node", style="cyan", width=20)
    table.add_column("Method", width=8)
    table.add_column("Path", width=40)
    table.add_column("URL", style="dim", width=60)

    for webhook in routes.webhooks:
        table.add_row(webhook.node, webhook.http_method, webhook.path, get_route_url(base, workflow, webhook))

    console.print()
    console.print(table)
    for warning in routes.warnings:
        console.print(f"[yellow]⚠ {warning.message}[/yellow]")
    console.print()
