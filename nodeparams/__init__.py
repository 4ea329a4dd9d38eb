"""nodeparams: node parameter schema resolution and validation.

Usage:
    from nodeparams import NodeProperty, get_node_parameters

    props = [NodeProperty.model_validate(p) for p in raw_properties]
    values = get_node_parameters(props, node.parameters, True, False)
"""

from nodeparams.types import (
    NodeProperty, PropertyCollection, DisplayOptions, TypeOptions, OptionValue,
    NodeTypeDescription, WebhookDescription, Node, WorkflowDefinition,
    NodeIssues, WebhookData, WebhookRoutes, RouteWarning,
    RunExecutionData, ExecutionData,
    PropertyType, FieldKind, ContextType, RouteWarningReason,
)
from nodeparams.exceptions import (
    NodeParamsError, ConfigurationError, OptionNotFoundError,
    DependencyResolutionError, ExecutionContextError, NodeTypeNotFound,
)
from nodeparams.expressions import DeferredExpression, ParameterExpressionEvaluator, classify, is_expression
from nodeparams.parameters import (
    display_parameter, display_parameter_path,
    get_parameter_dependencies, get_parameter_resolve_order,
    get_node_parameters, get_parameter_issues, get_node_parameters_issues,
    merge_issues, node_issues_to_string, merge_node_properties,
)
from nodeparams.registry import NodeTypeRegistry
from nodeparams.workflow import Workflow
from nodeparams.triggers import (
    get_node_webhooks, get_node_webhooks_basic, get_node_webhook_path, get_node_webhook_url,
)
from nodeparams.execution import get_context, prepare_output_data
from nodeparams.version import __version__

__all__ = [
    "NodeProperty", "PropertyCollection", "DisplayOptions", "TypeOptions", "OptionValue",
    "NodeTypeDescription", "WebhookDescription", "Node", "WorkflowDefinition",
    "NodeIssues", "WebhookData", "WebhookRoutes", "RouteWarning",
    "RunExecutionData", "ExecutionData",
    "PropertyType", "FieldKind", "ContextType", "RouteWarningReason",
    "NodeParamsError", "ConfigurationError", "OptionNotFoundError",
    "DependencyResolutionError", "ExecutionContextError", "NodeTypeNotFound",
    "DeferredExpression", "ParameterExpressionEvaluator", "classify", "is_expression",
    "display_parameter", "display_parameter_path",
    "get_parameter_dependencies", "get_parameter_resolve_order",
    "get_node_parameters", "get_parameter_issues", "get_node_parameters_issues",
    "merge_issues", "node_issues_to_string", "merge_node_properties",
    "NodeTypeRegistry", "Workflow",
    "get_node_webhooks", "get_node_webhooks_basic", "get_node_webhook_path", "get_node_webhook_url",
    "get_context", "prepare_output_data",
    "__version__",
]
