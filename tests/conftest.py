"""Shared fixtures for the nodeparams test suite."""

import pytest

from nodeparams.config import load_node_types_yaml
from nodeparams.config.loader import _DEFAULTS_DIR
from nodeparams.registry import NodeTypeRegistry
from nodeparams.types import ExecutionData, Node, NodeProperty, RunExecutionData
from nodeparams.workflow import Workflow


def make_properties(*raw: dict) -> list[NodeProperty]:
    """Build a field schema from authoring-form dicts."""
    return [NodeProperty.model_validate(item) for item in raw]


# ── Registry ─────────────────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def bundled_node_types():
    return load_node_types_yaml(_DEFAULTS_DIR / "node_types.yaml")


@pytest.fixture
def registry(bundled_node_types):
    return NodeTypeRegistry(bundled_node_types)


@pytest.fixture
def webhook_properties(registry):
    return registry.get_properties("webhook")


@pytest.fixture
def http_request_properties(registry):
    return registry.get_properties("httpRequest")


@pytest.fixture
def make_workflow(registry):
    """Factory: Workflow bound to the bundled node types."""
    def _make(nodes: list[Node], workflow_id="wf1"):
        return Workflow(workflow_id, nodes, registry)
    return _make


# ── Execution data ───────────────────────────────────────────────────────────


@pytest.fixture
def run_data():
    return RunExecutionData(execution_data=ExecutionData())
