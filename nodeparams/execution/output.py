"""Output-channel wrapper for node results."""

from typing import Any


def prepare_output_data(output_data: list[Any], output_index: int = 0) -> list[list[Any]]:
    """Place *output_data* on output *output_index*.

    Every output before it is returned empty, e.g. index 2 gives
    ``[[], [], output_data]``.
    """
    return_data: list[list[Any]] = [[] for _ in range(output_index)]
    return_data.append(output_data)
    return return_data
