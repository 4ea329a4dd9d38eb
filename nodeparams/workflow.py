"""Workflow: the nodes of one workflow plus the collaborators needed to read them."""

from typing import Optional

from nodeparams.expressions import ExpressionEvaluator, ParameterExpressionEvaluator
from nodeparams.parameters import get_node_parameters
from nodeparams.registry import NodeTypeRegistry
from nodeparams.types import Node, WorkflowDefinition


class Workflow:
    """Binds a workflow's nodes to a node-type registry and an expression evaluator.

    Parameters of nodes with a registered type are stored fully resolved
    (defaults filled in, hidden fields dropped), so expressions and
    validation see the same values a running node would.  Nodes of unknown
    types keep their parameters as given.

    Args:
        id:         Workflow ID, or None for a workflow that was never saved.
        nodes:      Configured nodes.  They are copied, never modified.
        node_types: Registry used to look up each node's schema.
        expression: Evaluator for expression-valued parameters.  Defaults
                    to :class:`ParameterExpressionEvaluator`.

    Raises:
        ConfigurationError: a node's parameters cannot be resolved against
            its schema.
    """

    def __init__(
        self,
        id: Optional[str],
        nodes: list[Node],
        node_types: NodeTypeRegistry,
        expression: Optional[ExpressionEvaluator] = None,
    ) -> None:
        self.id = id
        self.name = ""
        self.node_types = node_types
        self.expression = expression or ParameterExpressionEvaluator()
        self.nodes: dict[str, Node] = {node.name: self._with_defaults(node) for node in nodes}

    def _with_defaults(self, node: Node) -> Node:
        if not self.node_types.has_type(node.type):
            return node.model_copy(deep=True)
        parameters = get_node_parameters(
            self.node_types.get_properties(node.type), node.parameters, True, False
        )
        return node.model_copy(update={"parameters": parameters}, deep=True)

    @classmethod
    def from_definition(
        cls,
        definition: WorkflowDefinition,
        node_types: NodeTypeRegistry,
        expression: Optional[ExpressionEvaluator] = None,
    ) -> "Workflow":
        workflow = cls(definition.id, definition.nodes, node_types, expression)
        workflow.name = definition.name
        return workflow

    def get_node(self, name: str) -> Optional[Node]:
        return self.nodes.get(name)
