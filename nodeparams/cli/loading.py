"""Shared loading for CLI commands: workflow file + node type registry."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from nodeparams.registry import NodeTypeRegistry
from nodeparams.types import WorkflowDefinition
from nodeparams.workflow import Workflow

console = Console(stderr=True)


def load_definition(
    workflow_file: Path, node_types_file: Optional[Path] = None
) -> tuple[WorkflowDefinition, NodeTypeRegistry]:
    """Load *workflow_file* as written, plus the configured node types.

    Exits with status 2 when either file is missing or invalid.
    """
    from nodeparams.config import build_registry, config, load_workflow_file

    if node_types_file is None and config.node_types_file:
        node_types_file = Path(config.node_types_file)

    try:
        registry = build_registry(node_types_file)
        definition = load_workflow_file(workflow_file)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2)
    except (ValidationError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid file:[/red] {exc}")
        raise typer.Exit(2)

    return definition, registry


def load_workflow(workflow_file: Path, node_types_file: Optional[Path] = None) -> Workflow:
    """Load *workflow_file* with every node's parameters resolved.

    Exits with status 2 for missing or invalid files and with status 1
    when a node's parameters do not fit its schema.
    """
    from nodeparams.exceptions import ConfigurationError

    definition, registry = load_definition(workflow_file, node_types_file)
    try:
        return Workflow.from_definition(definition, registry)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
