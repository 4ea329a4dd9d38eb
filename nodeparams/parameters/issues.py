"""
Required-parameter validation for node values.

Findings are data, never exceptions: every check returns a ``NodeIssues``
and callers merge them.  Only visible fields are checked.

Missing-value rules by type:
  - string:       empty string or no value
  - multiOptions: empty list
  - dateTime:     no value
Other types are never reported as missing.

Nested fields:
  - collection children are always checked.
  - fixedCollection children are checked only for alternatives the user
    actually supplied; a nested ``required`` only applies once its
    container exists.
"""

from __future__ import annotations

from typing import Any, Optional

from nodeparams.exceptions import ConfigurationError
from nodeparams.paths import get_path, join_path
from nodeparams.types import FieldKind, Node, NodeIssues, NodeProperty, PropertyType

from .display import display_parameter_path


def add_to_issues_if_missing(
    found_issues: NodeIssues, prop: NodeProperty, value: Any
) -> None:
    """Record a "required" finding on *found_issues* if *value* counts as missing."""
    missing = (
        (prop.type is PropertyType.STRING and (value == "" or value is None))
        or (prop.type is PropertyType.MULTI_OPTIONS and isinstance(value, list) and len(value) == 0)
        or (prop.type is PropertyType.DATE_TIME and value is None)
    )
    if missing:
        found_issues.parameters.setdefault(prop.name, []).append(
            f'Parameter "{prop.display_name}" is required.'
        )


def get_parameter_value_by_path(values: dict[str, Any], parameter_name: str, path: str) -> Any:
    """Return the value of *parameter_name* below *path* in *values*."""
    return get_path(values, join_path(path, parameter_name))


def get_parameter_issues(prop: NodeProperty, values: dict[str, Any], path: str) -> NodeIssues:
    """
    Return all issues of *prop* and its children.

    Args:
        prop:   Field to check.
        values: Full value tree the field lives in.
        path:   Path of the field's level inside *values* ("" for top level).
    """
    found_issues = NodeIssues()

    if prop.required and display_parameter_path(values, prop, path):
        value = get_parameter_value_by_path(values, prop.name, path)
        if prop.multiple_values:
            if isinstance(value, list):
                for single_value in value:
                    add_to_issues_if_missing(found_issues, prop, single_value)
        else:
            add_to_issues_if_missing(found_issues, prop, value)

    kind = prop.kind
    if kind is FieldKind.SCALAR:
        return found_issues

    base_path = join_path(path, prop.name)
    to_check: list[tuple[str, NodeProperty]] = []

    if kind is FieldKind.COLLECTION:
        value = get_path(values, base_path)
        if prop.multiple_values and isinstance(value, list):
            for index in range(len(value)):
                for child in prop.values:
                    to_check.append((f"{base_path}[{index}]", child))
        else:
            for child in prop.values:
                to_check.append((base_path, child))
    elif kind is FieldKind.FIXED_COLLECTION:
        for option in prop.collections:
            value = get_parameter_value_by_path(values, option.name, base_path)
            if value is None:
                continue
            option_path = join_path(base_path, option.name)
            if prop.multiple_values:
                if isinstance(value, list):
                    for index in range(len(value)):
                        for child in option.values:
                            to_check.append((f"{option_path}[{index}]", child))
            else:
                for child in option.values:
                    to_check.append((option_path, child))
    else:
        raise ConfigurationError(
            f"Parameter '{prop.name}' has unsupported kind {kind!r}",
            details={"parameter": prop.name, "kind": str(kind)},
        )

    for child_path, child in to_check:
        merge_issues(found_issues, get_parameter_issues(child, values, child_path))

    return found_issues


def merge_issues(destination: NodeIssues, source: Optional[NodeIssues]) -> None:
    """Merge *source* into *destination*.  Flags are OR-ed, messages appended."""
    if source is None:
        return

    if source.execution:
        destination.execution = True

    for name, messages in source.parameters.items():
        destination.parameters.setdefault(name, []).extend(messages)
    for name, messages in source.credentials.items():
        destination.credentials.setdefault(name, []).extend(messages)

    if source.type_unknown:
        destination.type_unknown = True


def has_issues(issues: NodeIssues) -> bool:
    return bool(
        issues.execution or issues.type_unknown or issues.parameters or issues.credentials
    )


def get_node_parameters_issues(properties: list[NodeProperty], node: Node) -> Optional[NodeIssues]:
    """
    Return all parameter issues of *node*, or None if there are none.

    Disabled nodes never have issues.
    """
    if node.disabled:
        return None

    found_issues = NodeIssues()
    for prop in properties:
        merge_issues(found_issues, get_parameter_issues(prop, node.parameters, ""))

    if not has_issues(found_issues):
        return None
    return found_issues


def node_issues_to_string(issues: NodeIssues, node: Optional[Node] = None) -> list[str]:
    """Flatten *issues* into display lines."""
    lines: list[str] = []

    if issues.execution:
        lines.append("Execution Error.")

    for group in (issues.parameters, issues.credentials):
        for messages in group.values():
            lines.extend(messages)

    if issues.type_unknown:
        if node is not None:
            lines.append(f'Node Type "{node.type}" is not known.')
        else:
            lines.append("Node Type is not known.")

    return lines
