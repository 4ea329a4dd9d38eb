"""Central registry of all known node types."""

from nodeparams.exceptions import NodeTypeNotFound
from nodeparams.types import NodeProperty, NodeTypeDescription


class NodeTypeRegistry:
    """Central registry of all known node types."""

    def __init__(self, descriptions: list[NodeTypeDescription] | None = None):
        self._types: dict[str, NodeTypeDescription] = {}
        for description in descriptions or []:
            self.register(description)

    def register(self, description: NodeTypeDescription) -> None:
        """Register a node type.  A later registration of the same name replaces the earlier one."""
        self._types[description.name] = description

    def has_type(self, name: str) -> bool:
        return name in self._types

    def get_by_name(self, name: str) -> NodeTypeDescription:
        """Get a node type description.

        Args:
            name: Node type name, e.g. "webhook"

        Returns:
            The registered NodeTypeDescription

        Raises:
            NodeTypeNotFound: if no type with that name is registered
        """
        if name not in self._types:
            raise NodeTypeNotFound(f"Node type '{name}' is not known", type_name=name)
        return self._types[name]

    def get_properties(self, name: str) -> list[NodeProperty]:
        """Field schema of a node type."""
        return list(self.get_by_name(name).properties)

    def list_types(self) -> list[NodeTypeDescription]:
        """List all registered node types."""
        return list(self._types.values())
