"""Application configuration + declarative YAML loaders for nodeparams.

All env vars defined here with NODEPARAMS_ prefix.
YAML loaders: load_node_types_yaml(), load_workflow_file()
"""

from typing import Optional

from pydantic_settings import BaseSettings

from nodeparams.config.loader import build_registry, load_node_types_yaml, load_workflow_file
from nodeparams.config.schema import NodeTypesConfig


class NodeParamsConfig(BaseSettings):
    # ── App ──
    app_name: str = "nodeparams"
    debug: bool = False
    log_level: str = "INFO"

    # ── Node types ──
    node_types_file: Optional[str] = None            # falls back to ./node_types.yaml, then bundled defaults

    # ── Webhooks ──
    webhook_base_url: str = "http://localhost:5678/webhook"  # public base URL for webhook URLs

    model_config = {"env_prefix": "NODEPARAMS_", "env_file": ".env", "extra": "ignore"}


config = NodeParamsConfig()


__all__ = [
    "NodeParamsConfig",
    "config",
    "build_registry",
    "load_node_types_yaml",
    "load_workflow_file",
    "NodeTypesConfig",
]
