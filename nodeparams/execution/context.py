"""Run-scoped context storage handed to executing nodes.

One ``ExecutionData`` per workflow run holds a dict per scope key:
``"flow"`` for the whole run and ``"node:<name>"`` per node.  Slots are
created on first access.  Creation happens under the run's lock so two
nodes executing concurrently get the same slot.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from nodeparams.exceptions import ExecutionContextError
from nodeparams.types import ContextType, Node, RunExecutionData


def _context_key(context_type: Union[ContextType, str], node: Optional[Node]) -> str:
    try:
        scope = ContextType(context_type)
    except ValueError as exc:
        raise ExecutionContextError(
            f'The context type "{context_type}" is not known. '
            'Only "flow" and "node" are supported!',
            context_type=str(context_type),
        ) from exc

    if scope is ContextType.FLOW:
        return "flow"
    if node is None:
        raise ExecutionContextError(
            'The request data of context type "node" the node parameter has to be set!',
            context_type=scope.value,
        )
    return f"node:{node.name}"


def get_context(
    run_execution_data: RunExecutionData,
    context_type: Union[ContextType, str],
    node: Optional[Node] = None,
) -> dict[str, Any]:
    """
    Return the mutable context dict for a scope, creating it if needed.

    Args:
        run_execution_data: Data of the current run.
        context_type:       "flow" or "node".
        node:               Required for "node" scope.

    Raises:
        ExecutionContextError: execution data is not initialized, *node*
            is missing for node scope, or *context_type* is unknown.
    """
    execution_data = run_execution_data.execution_data
    if execution_data is None:
        raise ExecutionContextError('The "executionData" is not initialized!')

    key = _context_key(context_type, node)

    with execution_data._lock:
        if key not in execution_data.context_data:
            execution_data.context_data[key] = {}
        return execution_data.context_data[key]
