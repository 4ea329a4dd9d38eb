"""
Value resolution: turn a field schema plus user values into a value tree.

Depending on the flags the result holds either every value with defaults
filled in, or only the values that differ from their defaults (the form
that gets stored).  Hidden fields are dropped unless asked for.

Visibility is always judged against a *baseline* tree: the same level
resolved with all defaults and all hidden fields, simple fields only.
That keeps "what the caller wants back" separate from "what the display
conditions need to see", so a sibling's default affects visibility the
same way whether or not it is part of the returned tree.

Nothing here mutates the schema or the user values; defaults are copied
before they are placed into the result.

An explicit ``None`` (YAML or JSON null) counts as absent, the same as a
missing key: it is never stored, and gets the default when defaults are
requested.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Optional, Union

from nodeparams.exceptions import ConfigurationError, OptionNotFoundError
from nodeparams.types import (
    FALSY_PRESERVING_TYPES,
    FieldKind,
    NodeProperty,
    PropertyType,
)

from .dependencies import get_parameter_dependencies, get_parameter_resolve_order
from .display import display_parameter, select_alternative

logger = logging.getLogger(__name__)

ParentType = Union[PropertyType, str, None]

_OMIT = object()


def get_node_parameters(
    properties: list[NodeProperty],
    node_values: dict[str, Any],
    return_defaults: bool,
    return_hidden: bool,
    only_simple: bool = False,
    already_baseline: bool = False,
    root_values: Optional[dict[str, Any]] = None,
    parent_type: ParentType = None,
    dependencies: Optional[dict[str, list[str]]] = None,
) -> dict[str, Any]:
    """
    Resolve *node_values* against *properties*.

    Args:
        properties:       Field schema of this nesting level.
        node_values:      User-supplied values of this level.
        return_defaults:  Fill in defaults.  When False only values that
                          differ from their default are returned.
        return_hidden:    Also return fields whose display conditions fail.
        only_simple:      Do not descend into collections.
        already_baseline: *node_values* is already a baseline tree; skip
                          computing one.
        root_values:      Top-level values for root-relative conditions.
        parent_type:      Kind of the enclosing container, if any.
        dependencies:     Precomputed result of get_parameter_dependencies.

    Returns:
        The resolved value tree (possibly empty).

    Raises:
        OptionNotFoundError: a fixedCollection value names an unknown
            alternative.
        DependencyResolutionError: display conditions cannot be ordered.
    """
    resolved = _resolve_level(
        properties, node_values, return_defaults, return_hidden,
        only_simple, already_baseline, root_values, parent_type, dependencies,
    )
    return {} if resolved is None else resolved


def _resolve_level(
    properties: list[NodeProperty],
    node_values: Any,
    return_defaults: bool,
    return_hidden: bool,
    only_simple: bool,
    already_baseline: bool,
    root_values: Optional[dict[str, Any]],
    parent_type: ParentType,
    dependencies: Optional[dict[str, list[str]]],
) -> Optional[dict[str, Any]]:
    """Resolve one level.  None means the level has nothing to contribute."""
    if not isinstance(node_values, dict):
        return None

    if dependencies is None:
        dependencies = get_parameter_dependencies(properties)

    alternatives = _group_alternatives(properties)
    chosen: dict[str, Optional[NodeProperty]] = {}

    node_parameters: dict[str, Any] = {}

    # In baseline mode visibility is judged against what has been resolved
    # so far, which the dependency order makes sufficient.
    display_check = node_parameters
    if not already_baseline and not return_hidden:
        display_check = _resolve_level(
            properties, node_values, True, True, True, True,
            root_values, parent_type, dependencies,
        ) or {}

    root = display_check if root_values is None else root_values

    for index in get_parameter_resolve_order(properties, dependencies):
        prop = properties[index]
        value = node_values.get(prop.name)

        if value is None and (not return_defaults or parent_type == PropertyType.COLLECTION):
            continue

        if not return_hidden and not display_parameter(display_check, prop, root):
            continue

        if prop.name in alternatives:
            if prop.name not in chosen:
                chosen[prop.name] = select_alternative(alternatives[prop.name], display_check, root)
            if chosen[prop.name] is not prop:
                continue

        kind = prop.kind
        if kind is FieldKind.SCALAR:
            resolved = _resolve_scalar(prop, value, return_defaults, parent_type)
        elif only_simple:
            continue
        elif kind is FieldKind.COLLECTION:
            resolved = _resolve_collection(
                prop, value, return_defaults, return_hidden, root,
            )
        elif kind is FieldKind.FIXED_COLLECTION:
            resolved = _resolve_fixed_collection(
                prop, value, return_defaults, return_hidden, root,
            )
        else:
            raise ConfigurationError(
                f"Parameter '{prop.name}' has unsupported kind {kind!r}",
                details={"parameter": prop.name, "kind": str(kind)},
            )

        if resolved is not _OMIT:
            node_parameters[prop.name] = resolved

    return node_parameters


def _group_alternatives(properties: list[NodeProperty]) -> dict[str, list[NodeProperty]]:
    """Names declared more than once → their declarations in order."""
    grouped: dict[str, list[NodeProperty]] = {}
    for prop in properties:
        grouped.setdefault(prop.name, []).append(prop)
    return {name: props for name, props in grouped.items() if len(props) > 1}


def _is_set(value: Any) -> bool:
    # Empty strings, 0 and False count as unset; empty lists and dicts do not
    if value is None:
        return False
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def _resolve_scalar(
    prop: NodeProperty,
    value: Any,
    return_defaults: bool,
    parent_type: ParentType,
) -> Any:
    if return_defaults:
        if prop.type in FALSY_PRESERVING_TYPES:
            return copy.deepcopy(prop.default) if value is None else value
        return value if _is_set(value) else copy.deepcopy(prop.default)

    # Inside a collection every explicit value is kept, default or not
    if value != prop.default or parent_type == PropertyType.COLLECTION:
        return value
    return _OMIT


def _resolve_collection(
    prop: NodeProperty,
    value: Any,
    return_defaults: bool,
    return_hidden: bool,
    root: dict[str, Any],
) -> Any:
    if prop.multiple_values:
        if value is not None:
            return value
        if not return_defaults:
            return _OMIT
        # A non-list default is tolerated and treated as empty
        if isinstance(prop.default, list):
            return copy.deepcopy(prop.default)
        return []

    if value is not None:
        nested = _resolve_level(
            prop.values, value, return_defaults, return_hidden,
            False, False, root, PropertyType.COLLECTION, None,
        )
        return _OMIT if nested is None else nested

    if return_defaults:
        return copy.deepcopy(prop.default) if prop.default is not None else {}
    return _OMIT


def _resolve_fixed_collection(
    prop: NodeProperty,
    value: Any,
    return_defaults: bool,
    return_hidden: bool,
    root: dict[str, Any],
) -> Any:
    property_values = value
    if return_defaults and property_values is None:
        property_values = copy.deepcopy(prop.default)
    if not isinstance(property_values, dict):
        property_values = {}

    collection_values: dict[str, Any] = {}
    for item_name, item_value in property_values.items():
        option = prop.get_collection(item_name)
        if option is None:
            raise OptionNotFoundError(
                f"Could not find property option '{item_name}' for '{prop.name}'",
                property_name=prop.name,
                option_name=item_name,
            )

        if prop.multiple_values:
            items: list[dict[str, Any]] = []
            for element in item_value if isinstance(item_value, list) else []:
                nested = _resolve_level(
                    option.values, element, return_defaults, return_hidden,
                    False, False, root, PropertyType.FIXED_COLLECTION, None,
                )
                if nested is not None:
                    items.append(nested)
            collection_values[item_name] = items
        else:
            nested = _resolve_level(
                option.values, item_value, return_defaults, return_hidden,
                False, False, root, PropertyType.FIXED_COLLECTION, None,
            )
            if nested is None:
                continue
            if nested or return_defaults:
                collection_values[item_name] = nested

    if return_defaults:
        return collection_values
    if collection_values and collection_values != prop.default:
        return collection_values
    return _OMIT
