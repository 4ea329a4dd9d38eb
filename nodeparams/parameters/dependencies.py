"""
Evaluation order for the fields of one nesting level.

A field depends on every key named in its display options.  Fields are
evaluated only after the fields they depend on, so that visibility checks
made during resolution see their final values.  Root-relative keys
(``/name``) are assumed to be resolved already.
"""

from __future__ import annotations

import logging
from collections import deque

from nodeparams.exceptions import DependencyResolutionError
from nodeparams.types import NodeProperty

from .display import ROOT_MARKER

logger = logging.getLogger(__name__)


def get_parameter_dependencies(properties: list[NodeProperty]) -> dict[str, list[str]]:
    """
    Map each field name to the condition keys it is gated on.

    Fields declared more than once under the same name share one entry
    holding the union of their keys.
    """
    dependencies: dict[str, list[str]] = {}
    for prop in properties:
        names = dependencies.setdefault(prop.name, [])
        if prop.display_options is None:
            continue
        for rule in (prop.display_options.show, prop.display_options.hide):
            for key in rule:
                if key not in names:
                    names.append(key)
    return dependencies


def get_parameter_resolve_order(
    properties: list[NodeProperty],
    dependencies: dict[str, list[str]],
) -> list[int]:
    """
    Return indices into *properties* in a safe evaluation order.

    Worklist algorithm: pop the head; if all its non-root dependencies are
    resolved, emit it, otherwise requeue it at the tail.

    Raises:
        DependencyResolutionError: when more than ``len(properties)`` pops
            pass without any field being resolved (cycle, or a key naming
            a field that does not exist at this level).
    """
    order: list[int] = []
    pending: deque[int] = deque(range(len(properties)))
    resolved: set[str] = set()

    iterations = 0
    since_progress = 0

    while pending:
        iterations += 1
        index = pending.popleft()
        prop = properties[index]

        missing = [
            dep for dep in dependencies.get(prop.name, [])
            if not dep.startswith(ROOT_MARKER) and dep not in resolved
        ]
        if missing:
            pending.append(index)
            since_progress += 1
            if since_progress > len(properties):
                unresolved = sorted({properties[i].name for i in pending})
                raise DependencyResolutionError(
                    "Could not resolve parameter dependencies. "
                    f"Unresolved parameters: {unresolved}",
                    unresolved=unresolved,
                    iterations=iterations,
                )
            continue

        order.append(index)
        resolved.add(prop.name)
        since_progress = 0

    logger.debug(
        "Resolved order for %d parameters in %d iterations", len(properties), iterations
    )
    return order
