"""Webhook route derivation: which HTTP routes a node registers.

Each webhook a node type declares is evaluated against the node
(``path``, ``isFullPath``, ``restartWebhook``, ``httpMethod``) and turned
into a final path usable as a router key.

Path composition:
  - restart webhooks:        ``<path>``
  - node with a webhook ID:  ``<path>`` for full paths, else ``<webhookId>/<path>``
  - otherwise:               ``<workflowId>/<url-encoded lower-case node name>/<path>``

A webhook whose path or method cannot be resolved is skipped and reported
as a ``RouteWarning``; the node's other webhooks are still derived.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from nodeparams.types import (
    Node,
    RouteWarning,
    RouteWarningReason,
    WebhookData,
    WebhookDescription,
    WebhookRoutes,
)
from nodeparams.workflow import Workflow

logger = logging.getLogger(__name__)

UNSAVED_WORKFLOW_ID = "__UNSAVED__"
EVALUATION_MODE = "internal"
DYNAMIC_SEGMENT_MARKER = ":"

# Same character set encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


# ── Path helpers ─────────────────────────────────────────────────────────────


def is_dynamic_path(path: str) -> bool:
    """True when *path* contains a ``:param`` segment."""
    return path.startswith(DYNAMIC_SEGMENT_MARKER) or f"/{DYNAMIC_SEGMENT_MARKER}" in path


def _trim_slashes(path: str) -> str:
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path


def get_node_webhook_path(
    workflow_id: str,
    node: Node,
    path: str,
    is_full_path: bool = False,
    restart_webhook: bool = False,
) -> str:
    """Compose the final router path of one webhook."""
    if restart_webhook is True:
        return path
    if node.webhook_id is None:
        node_segment = quote(node.name.lower(), safe=_URI_COMPONENT_SAFE)
        return f"{workflow_id}/{node_segment}/{path}"
    if is_full_path is True:
        return path
    return f"{node.webhook_id}/{path}"


def get_node_webhook_url(
    base_url: str,
    workflow_id: str,
    node: Node,
    path: str,
    is_full_path: bool = False,
) -> str:
    """Full public URL of a webhook.

    Dynamic paths of nodes with a webhook ID are always prefixed with the
    ID, even when declared as full paths.
    """
    if is_dynamic_path(path) and node.webhook_id:
        is_full_path = False
    if path.startswith("/"):
        path = path[1:]
    return f"{base_url}/{get_node_webhook_path(workflow_id, node, path, is_full_path)}"


# ── Derivation ───────────────────────────────────────────────────────────────


def _evaluate(workflow: Workflow, node: Node, raw: Any, fallback: Any = None) -> Any:
    # Expressions read the workflow's resolved copy of the node
    resolved_node = workflow.get_node(node.name) or node
    return workflow.expression.get_simple_parameter_value(
        resolved_node, raw, EVALUATION_MODE, {}, fallback
    )


def _skip(
    routes: WebhookRoutes,
    node: Node,
    workflow_id: str,
    description: WebhookDescription,
    reason: RouteWarningReason,
    message: str,
) -> None:
    logger.warning(message)
    routes.warnings.append(RouteWarning(
        node=node.name,
        workflow_id=workflow_id,
        webhook_name=description.name,
        reason=reason,
        message=message,
    ))


def _resolve_path(
    workflow: Workflow,
    node: Node,
    workflow_id: str,
    description: WebhookDescription,
    routes: WebhookRoutes,
) -> str | None:
    node_webhook_path = _evaluate(workflow, node, description.path)
    if node_webhook_path is None:
        _skip(
            routes, node, workflow_id, description, RouteWarningReason.MISSING_PATH,
            f'No webhook path could be found for node "{node.name}" in workflow "{workflow_id}".',
        )
        return None
    return _trim_slashes(str(node_webhook_path))


def get_node_webhooks(
    workflow: Workflow,
    node: Node,
    ignore_restart_webhooks: bool = False,
) -> WebhookRoutes:
    """
    Derive every webhook route *node* should register.

    Args:
        workflow:                Workflow the node belongs to.
        node:                    The node.
        ignore_restart_webhooks: Skip webhooks declared as restart webhooks.

    Returns:
        Routes plus warnings for webhooks that had to be skipped.  A
        disabled node, or a node type without webhooks, yields no routes.

    Raises:
        NodeTypeNotFound: the node's type is not registered.
    """
    routes = WebhookRoutes()
    if node.disabled:
        return routes

    node_type = workflow.node_types.get_by_name(node.type)
    if not node_type.webhooks:
        return routes

    workflow_id = workflow.id or UNSAVED_WORKFLOW_ID

    for description in node_type.webhooks:
        node_webhook_path = _resolve_path(workflow, node, workflow_id, description, routes)
        if node_webhook_path is None:
            continue

        is_full_path = _evaluate(workflow, node, description.is_full_path, False)
        restart_webhook = _evaluate(workflow, node, description.restart_webhook, False)
        path = get_node_webhook_path(
            workflow_id, node, node_webhook_path, is_full_path, restart_webhook
        )

        if ignore_restart_webhooks and description.restart_webhook is True:
            continue

        http_method = _evaluate(workflow, node, description.http_method, "GET")
        if http_method is None:
            _skip(
                routes, node, workflow_id, description, RouteWarningReason.MISSING_HTTP_METHOD,
                f'The webhook "{path}" for node "{node.name}" in workflow "{workflow_id}" '
                "could not be added because the httpMethod is not defined.",
            )
            continue

        webhook_id = None
        if is_dynamic_path(path) and node.webhook_id:
            webhook_id = node.webhook_id

        routes.webhooks.append(WebhookData(
            http_method=str(http_method),
            path=path,
            node=node.name,
            workflow_id=workflow_id,
            webhook_id=webhook_id,
            webhook_description=description,
        ))

    return routes


def get_node_webhooks_basic(workflow: Workflow, node: Node) -> WebhookRoutes:
    """
    Lightweight variant of get_node_webhooks for listing routes.

    Restart webhooks are not treated specially, no webhook ID is attached,
    and a missing HTTP method is not defaulted.
    """
    routes = WebhookRoutes()
    if node.disabled:
        return routes

    node_type = workflow.node_types.get_by_name(node.type)
    if not node_type.webhooks:
        return routes

    workflow_id = workflow.id or UNSAVED_WORKFLOW_ID

    for description in node_type.webhooks:
        node_webhook_path = _resolve_path(workflow, node, workflow_id, description, routes)
        if node_webhook_path is None:
            continue

        is_full_path = _evaluate(workflow, node, description.is_full_path, False)
        path = get_node_webhook_path(workflow_id, node, node_webhook_path, is_full_path)

        http_method = _evaluate(workflow, node, description.http_method)
        if http_method is None:
            _skip(
                routes, node, workflow_id, description, RouteWarningReason.MISSING_HTTP_METHOD,
                f'The webhook "{path}" for node "{node.name}" in workflow "{workflow_id}" '
                "could not be added because the httpMethod is not defined.",
            )
            continue

        routes.webhooks.append(WebhookData(
            http_method=str(http_method),
            path=path,
            node=node.name,
            workflow_id=workflow_id,
            webhook_description=description,
        ))

    return routes


def get_workflow_webhooks(workflow: Workflow, ignore_restart_webhooks: bool = False) -> WebhookRoutes:
    """Routes and warnings of every node in *workflow*, in node order."""
    combined = WebhookRoutes()
    for node in workflow.nodes.values():
        routes = get_node_webhooks(workflow, node, ignore_restart_webhooks)
        combined.webhooks.extend(routes.webhooks)
        combined.warnings.extend(routes.warnings)
    return combined


def get_route_url(base_url: str, workflow: Workflow, webhook: WebhookData) -> str:
    """Public URL of a derived route, composed by get_node_webhook_url.

    Restart webhooks and routes whose node is not part of *workflow* use
    the route path as is.
    """
    node = workflow.get_node(webhook.node)
    description = webhook.webhook_description
    if node is None or description.restart_webhook is True:
        return f"{base_url}/{webhook.path}"

    path = _trim_slashes(str(_evaluate(workflow, node, description.path, "")))
    is_full_path = _evaluate(workflow, node, description.is_full_path, False)
    return get_node_webhook_url(base_url, webhook.workflow_id, node, path, is_full_path)
