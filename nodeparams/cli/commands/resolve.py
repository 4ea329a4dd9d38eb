"""nodeparams resolve: Resolve every node's parameters and print them as JSON."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

console = Console()


def resolve_workflow(
    workflow_file: Path = typer.Argument(..., help="Workflow file (YAML or JSON)"),
    defaults: bool = typer.Option(True, "--defaults/--no-defaults", help="Fill in default values"),
    hidden: bool = typer.Option(False, "--hidden", help="Include parameters hidden by display conditions"),
    node: Optional[str] = typer.Option(None, "--node", "-n", help="Only resolve this node"),
    node_types_file: Optional[Path] = typer.Option(None, "--node-types", help="node_types.yaml to use"),
):
    """Resolve node parameters against their node type schema.

    With --no-defaults only values that differ from their defaults are
    printed, which is the form workflows are stored in.

    Example:
        nodeparams resolve workflow.yaml --no-defaults
    """
    from nodeparams.cli.loading import load_definition
    from nodeparams.exceptions import ConfigurationError
    from nodeparams.parameters import get_node_parameters

    definition, registry = load_definition(workflow_file, node_types_file)

    # Parameters as written in the file
    nodes = list(definition.nodes)
    if node is not None:
        nodes = [n for n in nodes if n.name == node]
        if not nodes:
            console.print(f"[red]No node named[/red] {node!r}")
            raise typer.Exit(1)

    result: dict[str, dict] = {}
    for current in nodes:
        try:
            properties = registry.get_properties(current.type)
            result[current.name] = get_node_parameters(
                properties, current.parameters, defaults, hidden
            )
        except ConfigurationError as exc:
            console.print(f"[red]{current.name}:[/red] {exc}")
            raise typer.Exit(1)

    console.print_json(json.dumps(result))
