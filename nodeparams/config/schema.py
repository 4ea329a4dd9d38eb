"""Pydantic models for YAML configuration validation.

Node type entries use the camelCase authoring form accepted by
nodeparams/types.py (``displayName``, ``displayOptions``, ...).
"""

from pydantic import BaseModel, Field, field_validator

from nodeparams.types import NodeTypeDescription


class NodeTypesConfig(BaseModel):
    """Root schema for node_types.yaml."""
    node_types: list[NodeTypeDescription] = Field(default_factory=list)

    @field_validator("node_types")
    @classmethod
    def unique_names(cls, v):
        seen: set[str] = set()
        for description in v:
            if description.name in seen:
                raise ValueError(f"Node type '{description.name}' is declared more than once")
            seen.add(description.name)
        return v
