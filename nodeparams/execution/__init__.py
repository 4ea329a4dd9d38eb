"""nodeparams.execution: helpers handed to running nodes."""

from .context import get_context
from .output import prepare_output_data

__all__ = ["get_context", "prepare_output_data"]
