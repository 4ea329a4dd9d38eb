"""nodeparams trigger routes: webhook path derivation."""

from nodeparams.triggers.webhook import (
    UNSAVED_WORKFLOW_ID,
    get_node_webhook_path,
    get_node_webhook_url,
    get_node_webhooks,
    get_node_webhooks_basic,
    get_route_url,
    get_workflow_webhooks,
    is_dynamic_path,
)

__all__ = [
    "UNSAVED_WORKFLOW_ID",
    "get_node_webhook_path",
    "get_node_webhook_url",
    "get_node_webhooks",
    "get_node_webhooks_basic",
    "get_route_url",
    "get_workflow_webhooks",
    "is_dynamic_path",
]
