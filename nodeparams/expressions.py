"""
Expression boundary for user-supplied parameter values.

A value is either a literal or a ``DeferredExpression``: a string starting
with ``=`` that only a runtime evaluator can turn into a value.  Callers
classify once at the boundary instead of checking the first character at
every call site.

``ParameterExpressionEvaluator`` is the in-process evaluator used when
deriving webhook routes.  It understands the one expression shape webhook
descriptors use, a reference to one of the node's own parameters::

    ={{$parameter["path"]}}
    ={{ $parameter.options.rawBody }}

Anything else it cannot evaluate falls back to the caller's default.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Protocol, Union

from pydantic import BaseModel

from nodeparams.paths import get_path
from nodeparams.types import Node

EXPRESSION_MARKER = "="

_PARAMETER_REF = re.compile(
    r"""^\{\{\s*\$parameter(?:\[\s*["']([^"']+)["']\s*\]|\.([\w.\[\]]+))\s*\}\}$"""
)


class DeferredExpression(BaseModel):
    """An unevaluated runtime expression (marker stripped)."""
    raw: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return EXPRESSION_MARKER + self.raw


def is_expression(value: Any) -> bool:
    """True when *value* is a string carrying the expression marker."""
    return isinstance(value, str) and value.startswith(EXPRESSION_MARKER)


def classify(value: Any) -> Union[DeferredExpression, Any]:
    """Return a DeferredExpression for marked strings, *value* unchanged otherwise."""
    if is_expression(value):
        return DeferredExpression(raw=value[len(EXPRESSION_MARKER):])
    return value


class ExpressionEvaluator(Protocol):
    """What the webhook deriver needs from an expression engine."""

    def get_simple_parameter_value(
        self,
        node: Node,
        raw: Any,
        mode: str,
        additional_keys: dict[str, Any],
        fallback: Any = None,
    ) -> Any: ...


class ParameterExpressionEvaluator:
    """Resolves literals and ``$parameter`` references against the node itself."""

    def get_simple_parameter_value(
        self,
        node: Node,
        raw: Any,
        mode: str,
        additional_keys: Optional[dict[str, Any]] = None,
        fallback: Any = None,
    ) -> Any:
        """
        Evaluate *raw* for *node*.

        Args:
            node:            Node whose parameters back ``$parameter`` lookups.
            raw:             Literal value or expression string.
            mode:            Evaluation mode (only "internal" is used here).
            additional_keys: Extra context; unused by this evaluator.
            fallback:        Returned when *raw* is None or cannot be evaluated.

        Returns:
            The evaluated value, or *fallback*.
        """
        value = classify(raw)
        if value is None:
            return fallback
        if not isinstance(value, DeferredExpression):
            return value

        match = _PARAMETER_REF.match(value.raw.strip())
        if match is None:
            return fallback
        path = match.group(1) or match.group(2)
        resolved = get_path(node.parameters, path)
        return fallback if resolved is None else resolved
