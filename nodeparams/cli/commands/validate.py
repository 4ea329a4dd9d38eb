"""nodeparams validate: Report missing required parameters per node."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def validate_workflow(
    workflow_file: Path = typer.Argument(..., help="Workflow file (YAML or JSON)"),
    node_types_file: Optional[Path] = typer.Option(None, "--node-types", help="node_types.yaml to use"),
):
    """Check every node for missing required parameters.

    Exits with status 1 when any node has issues, so it can gate
    activation in scripts.

    Example:
        nodeparams validate workflow.yaml
    """
    from nodeparams.cli.loading import load_workflow
    from nodeparams.parameters import get_node_parameters_issues, node_issues_to_string
    from nodeparams.types import NodeIssues

    workflow = load_workflow(workflow_file, node_types_file)

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]Issues: {workflow.name or workflow.id or 'workflow'}[/bold]",
    )
    table.add_column("Node", style="cyan", width=24)
    table.add_column("Issue", width=60)

    issue_count = 0
    for node in workflow.nodes.values():
        if workflow.node_types.has_type(node.type):
            issues = get_node_parameters_issues(
                workflow.node_types.get_properties(node.type), node
            )
        else:
            issues = NodeIssues(type_unknown=True)

        if issues is None:
            continue
        for line in node_issues_to_string(issues, node):
            table.add_row(node.name, line)
            issue_count += 1

    if issue_count == 0:
        console.print("[green]✓ No issues found.[/green]")
        return

    console.print()
    console.print(table)
    console.print()
    raise typer.Exit(1)
