"""nodeparams config: Show resolved nodeparams configuration."""

from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def config_show():
    """Show the resolved nodeparams configuration.

    Reads from environment variables and .env file.

    Example:
        nodeparams config
    """
    from nodeparams.config import NodeParamsConfig
    cfg = NodeParamsConfig()

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title="[bold]nodeparams Configuration[/bold]",
    )
    table.add_column("Key", style="cyan", width=24)
    table.add_column("Value", width=45)
    table.add_column("Env Var", style="dim", width=32)

    sections = [
        ("App", [
            ("debug", "NODEPARAMS_DEBUG"),
            ("log_level", "NODEPARAMS_LOG_LEVEL"),
        ]),
        ("Node Types", [
            ("node_types_file", "NODEPARAMS_NODE_TYPES_FILE"),
        ]),
        ("Webhooks", [
            ("webhook_base_url", "NODEPARAMS_WEBHOOK_BASE_URL"),
        ]),
    ]

    first = True
    for section_name, fields in sections:
        if not first:
            table.add_row("", "", "")
        first = False
        table.add_row(f"[bold dim]── {section_name} ──[/bold dim]", "", "")
        for attr, env_var in fields:
            val = getattr(cfg, attr, None)
            display = "[dim](not set)[/dim]" if val is None else str(val)
            table.add_row(f"  {attr}", display, env_var)

    console.print()
    console.print(table)
    console.print()
    console.print("[dim]Source: environment variables + .env file (prefix: NODEPARAMS_)[/dim]")
