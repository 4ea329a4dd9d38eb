"""
Display-condition evaluation: is a field visible given the current values?

All functions are pure and never mutate the values they inspect.

Rules:
  - No display options → visible.
  - ``show``: every key must resolve to a value in its accepted list.  A
    resolved value that is an unevaluated expression makes the field
    visible immediately, since its runtime value is unknown.
  - ``hide``: any key whose (non-empty) resolved values hit its list hides.
  - Keys starting with ``/`` read from the root values, others from the
    current level.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from nodeparams.expressions import is_expression
from nodeparams.paths import get_path
from nodeparams.types import NodeCredentialDescription, NodeProperty

ROOT_MARKER = "/"

Displayable = Union[NodeProperty, NodeCredentialDescription]


def _resolve_condition_values(key: str, values: Any, root: Any) -> list[Any]:
    """Look up *key* and normalise the result to a flat list."""
    if key.startswith(ROOT_MARKER):
        value = get_path(root, key[len(ROOT_MARKER):])
    else:
        value = get_path(values, key)
    if isinstance(value, list):
        return list(value)
    return [value]


def _matches(resolved: list[Any], accepted: list[Any]) -> bool:
    """True when any accepted value is among *resolved*.  Booleans never equal numbers."""
    return any(
        isinstance(candidate, bool) is isinstance(value, bool) and candidate == value
        for value in accepted
        for candidate in resolved
    )


def display_parameter(
    values: dict[str, Any],
    parameter: Displayable,
    root_values: Optional[dict[str, Any]] = None,
) -> bool:
    """
    Return True if *parameter* should be displayed.

    Args:
        values:      Values at the parameter's own nesting level.
        parameter:   Field (or credential) carrying the display options.
        root_values: Top-level values for ``/``-prefixed keys.  Defaults
                     to *values*.
    """
    display_options = parameter.display_options
    if display_options is None:
        return True

    root = values if root_values is None else root_values

    for key, accepted in display_options.show.items():
        resolved = _resolve_condition_values(key, values, root)
        if any(is_expression(v) for v in resolved):
            return True
        if not resolved or not _matches(resolved, accepted):
            return False

    for key, rejected in display_options.hide.items():
        resolved = _resolve_condition_values(key, values, root)
        if resolved and _matches(resolved, rejected):
            return False

    return True


def display_parameter_path(
    values: dict[str, Any],
    parameter: Displayable,
    path: str,
) -> bool:
    """
    Like display_parameter, but *parameter* lives at *path* inside *values*.

    When *path* starts inside the ``parameters`` sub-tree of a full node
    record, root-relative keys are read from that sub-tree.
    """
    resolved_values = values
    if path != "":
        resolved_values = get_path(values, path)

    root_values = values
    if path and path.split(".")[0] == "parameters":
        root_values = get_path(values, "parameters")

    return display_parameter(resolved_values, parameter, root_values)


def select_alternative(
    alternatives: list[NodeProperty],
    values: dict[str, Any],
    root_values: Optional[dict[str, Any]] = None,
) -> Optional[NodeProperty]:
    """
    Pick the declaration that applies when several fields share one name.

    Alternatives are tried in declaration order and the first visible one
    wins.  Returns None when none of them is visible.
    """
    for alternative in alternatives:
        if display_parameter(values, alternative, root_values):
            return alternative
    return None
