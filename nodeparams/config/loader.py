"""Load and validate node_types.yaml and workflow files into Python objects.

Resolution order for node type files:
  1. Path passed explicitly by caller
  2. ./node_types.yaml in current working directory
  3. Built-in defaults (nodeparams/config/defaults/node_types.yaml)

Workflow files are YAML or JSON (JSON is valid YAML).
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from nodeparams.config.schema import NodeTypesConfig
from nodeparams.registry import NodeTypeRegistry
from nodeparams.types import NodeTypeDescription, WorkflowDefinition

logger = logging.getLogger(__name__)

# Path to bundled defaults
_DEFAULTS_DIR = Path(__file__).parent / "defaults"


def _find_file(name: str, explicit: Optional[Path]) -> Path:
    """Locate config file: explicit > cwd > defaults."""
    if explicit is not None:
        p = Path(explicit)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {p}")
        return p

    cwd_path = Path.cwd() / name
    if cwd_path.exists():
        return cwd_path

    defaults_path = _DEFAULTS_DIR / name
    if defaults_path.exists():
        return defaults_path

    raise FileNotFoundError(
        f"No {name} found. Create one in your project directory "
        f"or use load_node_types_yaml(path=...)."
    )


def load_node_types_yaml(path: Optional[Path] = None) -> list[NodeTypeDescription]:
    """Load node_types.yaml → list of NodeTypeDescription objects.

    Args:
        path: Explicit path to node_types.yaml. If None, searches cwd then defaults.

    Returns:
        List of validated NodeTypeDescription instances.
    """
    resolved = _find_file("node_types.yaml", path)
    raw = yaml.safe_load(resolved.read_text())
    config = NodeTypesConfig.model_validate(raw or {"node_types": []})
    logger.debug("Loaded %d node types from %s", len(config.node_types), resolved)
    return config.node_types


def build_registry(path: Optional[Path] = None) -> NodeTypeRegistry:
    """Registry populated from load_node_types_yaml(path)."""
    return NodeTypeRegistry(load_node_types_yaml(path))


def load_workflow_file(path: Path) -> WorkflowDefinition:
    """Load a workflow definition (``id``, ``name``, ``nodes``) from YAML or JSON."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Workflow file not found: {p}")
    raw = yaml.safe_load(p.read_text())
    return WorkflowDefinition.model_validate(raw or {})
