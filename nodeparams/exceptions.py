"""Typed exception hierarchy. Every error nodeparams can raise.

Only configuration problems are raised.  Validation findings are returned
as ``NodeIssues`` and unresolvable webhooks as ``RouteWarning`` records.
"""


class NodeParamsError(Exception):
    """Base exception for all nodeparams errors."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(NodeParamsError):
    """Schema or caller bug.  Aborts the current resolution call."""
    pass


class OptionNotFoundError(ConfigurationError):
    """A fixedCollection value names an alternative the schema does not declare."""
    def __init__(self, message: str, property_name: str = "", option_name: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.property_name = property_name
        self.option_name = option_name


class DependencyResolutionError(ConfigurationError):
    """Display-condition dependencies contain a cycle or a dangling reference."""
    def __init__(self, message: str, unresolved: list = None, iterations: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.unresolved = unresolved or []
        self.iterations = iterations


class ExecutionContextError(ConfigurationError):
    """Malformed request for run-scoped context data."""
    def __init__(self, message: str, context_type: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.context_type = context_type


class NodeTypeNotFound(ConfigurationError):
    """Requested node type is not registered."""
    def __init__(self, message: str, type_name: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.type_name = type_name
