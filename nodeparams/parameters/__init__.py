"""nodeparams.parameters: visibility, ordering, resolution and validation of node parameters."""

from .dependencies import get_parameter_dependencies, get_parameter_resolve_order
from .display import ROOT_MARKER, display_parameter, display_parameter_path, select_alternative
from .issues import (
    add_to_issues_if_missing,
    get_node_parameters_issues,
    get_parameter_issues,
    get_parameter_value_by_path,
    has_issues,
    merge_issues,
    node_issues_to_string,
)
from .merge import merge_node_properties
from .resolver import get_node_parameters

__all__ = [
    "ROOT_MARKER",
    "display_parameter",
    "display_parameter_path",
    "select_alternative",
    "get_parameter_dependencies",
    "get_parameter_resolve_order",
    "get_node_parameters",
    "get_parameter_issues",
    "get_node_parameters_issues",
    "get_parameter_value_by_path",
    "add_to_issues_if_missing",
    "merge_issues",
    "has_issues",
    "node_issues_to_string",
    "merge_node_properties",
]
