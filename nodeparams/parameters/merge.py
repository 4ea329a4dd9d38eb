"""Overlay one list of field schemas onto another by field name."""

from nodeparams.types import NodeProperty


def merge_node_properties(
    main_properties: list[NodeProperty],
    add_properties: list[NodeProperty],
) -> list[NodeProperty]:
    """Return *main_properties* with *add_properties* overlaid.

    A field whose name already exists replaces the first field of that
    name in place; new names are appended in order.  Neither input list is
    modified.
    """
    merged = list(main_properties)
    for prop in add_properties:
        existing_index = next(
            (i for i, current in enumerate(merged) if current.name == prop.name), -1
        )
        if existing_index == -1:
            merged.append(prop)
        else:
            merged[existing_index] = prop
    return merged
