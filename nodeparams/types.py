"""All shared types, enums, and type aliases. Everything imports from here."""

import threading
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, model_validator


# ── Enums ──────────────────────────────────────────────────────────────

class PropertyType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OPTIONS = "options"
    MULTI_OPTIONS = "multiOptions"
    DATE_TIME = "dateTime"
    COLOR = "color"
    JSON = "json"
    HIDDEN = "hidden"
    NOTICE = "notice"
    COLLECTION = "collection"            # optional flat bag of sub-fields
    FIXED_COLLECTION = "fixedCollection"  # named alternative groups

class FieldKind(str, Enum):
    SCALAR = "scalar"
    COLLECTION = "collection"
    FIXED_COLLECTION = "fixedCollection"

class ContextType(str, Enum):
    FLOW = "flow"
    NODE = "node"

class RouteWarningReason(str, Enum):
    MISSING_PATH = "missing_path"
    MISSING_HTTP_METHOD = "missing_http_method"


_FIELD_KINDS: dict[PropertyType, FieldKind] = {
    t: FieldKind.SCALAR for t in PropertyType
}
_FIELD_KINDS[PropertyType.COLLECTION] = FieldKind.COLLECTION
_FIELD_KINDS[PropertyType.FIXED_COLLECTION] = FieldKind.FIXED_COLLECTION

# Falsy values (False, 0) are real choices for these and never replaced by the default
FALSY_PRESERVING_TYPES: frozenset[PropertyType] = frozenset({
    PropertyType.BOOLEAN,
    PropertyType.NUMBER,
    PropertyType.OPTIONS,
})


# ── Schema shapes ──────────────────────────────────────────────────────

_SCHEMA_CONFIG = {"frozen": True, "populate_by_name": True}


class DisplayOptions(BaseModel):
    """show: every key must match.  hide: any matching key hides."""
    show: dict[str, list[Any]] = Field(default_factory=dict)
    hide: dict[str, list[Any]] = Field(default_factory=dict)

    model_config = _SCHEMA_CONFIG


class TypeOptions(BaseModel):
    multiple_values: bool = Field(False, alias="multipleValues")
    multiple_value_button_text: Optional[str] = Field(None, alias="multipleValueButtonText")

    # minValue, maxValue, rows, ... are kept as extras
    model_config = {**_SCHEMA_CONFIG, "extra": "allow"}


class OptionValue(BaseModel):
    """One selectable choice of an options / multiOptions field."""
    name: str
    value: Any = None
    description: Optional[str] = None

    model_config = _SCHEMA_CONFIG


class NodeProperty(BaseModel):
    """Author-declared description of one configurable value a node accepts.

    The authoring form uses a single ``options`` key for three different
    things.  It is routed by ``type`` on input:

      - options / multiOptions  → ``options`` (selectable choices)
      - collection              → ``values`` (nested fields)
      - fixedCollection         → ``collections`` (named alternatives)
    """
    name: str
    display_name: str = Field("", alias="displayName")
    type: PropertyType = PropertyType.STRING
    default: Any = None
    required: bool = False
    description: str = ""
    placeholder: str = ""
    type_options: Optional[TypeOptions] = Field(None, alias="typeOptions")
    display_options: Optional[DisplayOptions] = Field(None, alias="displayOptions")
    options: list[OptionValue] = Field(default_factory=list)
    values: list["NodeProperty"] = Field(default_factory=list)
    collections: list["PropertyCollection"] = Field(default_factory=list)

    model_config = _SCHEMA_CONFIG

    @model_validator(mode="before")
    @classmethod
    def route_children(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("displayName") and not data.get("display_name"):
            data["display_name"] = data.get("name", "")
        prop_type = data.get("type", PropertyType.STRING)
        if isinstance(prop_type, PropertyType):
            prop_type = prop_type.value
        if "options" in data:
            if prop_type == PropertyType.COLLECTION.value and "values" not in data:
                data["values"] = data.pop("options")
            elif prop_type == PropertyType.FIXED_COLLECTION.value and "collections" not in data:
                data["collections"] = data.pop("options")
        return data

    @property
    def kind(self) -> FieldKind:
        return _FIELD_KINDS[self.type]

    @property
    def multiple_values(self) -> bool:
        return self.type_options is not None and self.type_options.multiple_values

    def get_collection(self, name: str) -> Optional["PropertyCollection"]:
        """Return the fixedCollection alternative called *name*, or None."""
        for collection in self.collections:
            if collection.name == name:
                return collection
        return None


class PropertyCollection(BaseModel):
    """A named alternative of a fixedCollection with its own nested fields."""
    name: str
    display_name: str = Field("", alias="displayName")
    values: list[NodeProperty] = Field(default_factory=list)

    model_config = _SCHEMA_CONFIG


NodeProperty.model_rebuild()


class NodeCredentialDescription(BaseModel):
    name: str
    required: bool = False
    display_options: Optional[DisplayOptions] = Field(None, alias="displayOptions")

    model_config = _SCHEMA_CONFIG


class WebhookDescription(BaseModel):
    """Raw webhook declaration of a node type.  Values may be expressions."""
    name: str = "default"
    http_method: Any = Field(None, alias="httpMethod")
    path: Any = None
    is_full_path: Any = Field(False, alias="isFullPath")
    restart_webhook: Any = Field(False, alias="restartWebhook")
    response_mode: Any = Field(None, alias="responseMode")

    model_config = _SCHEMA_CONFIG


class NodeTypeDescription(BaseModel):
    """Everything the registry knows about one node type."""
    name: str
    display_name: str = Field("", alias="displayName")
    version: int = 1
    description: str = ""
    polling: bool = False
    outputs: list[str] = Field(default_factory=lambda: ["main"])
    properties: list[NodeProperty] = Field(default_factory=list)
    credentials: list[NodeCredentialDescription] = Field(default_factory=list)
    webhooks: list[WebhookDescription] = Field(default_factory=list)

    model_config = _SCHEMA_CONFIG


# ── Node and workflow data ─────────────────────────────────────────────

class Node(BaseModel):
    """A configured node instance inside a workflow."""
    name: str
    type: str
    type_version: float = Field(1, alias="typeVersion")
    parameters: dict[str, Any] = Field(default_factory=dict)
    credentials: dict[str, Any] = Field(default_factory=dict)
    disabled: bool = False
    webhook_id: Optional[str] = Field(None, alias="webhookId")

    model_config = {"populate_by_name": True}


class WorkflowDefinition(BaseModel):
    """Serialized workflow as read from a file."""
    id: Optional[str] = None
    name: str = ""
    nodes: list[Node] = Field(default_factory=list)


class NodeIssues(BaseModel):
    """Issues found on a node.  Messages are kept in order, never deduplicated."""
    execution: bool = False
    type_unknown: bool = False
    parameters: dict[str, list[str]] = Field(default_factory=dict)
    credentials: dict[str, list[str]] = Field(default_factory=dict)


class WebhookData(BaseModel):
    """A derived, registrable webhook route."""
    http_method: str
    path: str                               # registration key for the HTTP router
    node: str                               # node name
    workflow_id: str
    webhook_id: Optional[str] = None        # set for dynamic (":param") paths only
    webhook_description: WebhookDescription


class RouteWarning(BaseModel):
    """A webhook that was skipped because its path or method did not resolve."""
    node: str
    workflow_id: str
    webhook_name: str
    reason: RouteWarningReason
    message: str


class WebhookRoutes(BaseModel):
    webhooks: list[WebhookData] = Field(default_factory=list)
    warnings: list[RouteWarning] = Field(default_factory=list)


# ── Run-scoped execution data ──────────────────────────────────────────

class ExecutionData(BaseModel):
    """Per-run scratch storage.  Keys are "flow" or "node:<name>"."""
    context_data: dict[str, dict[str, Any]] = Field(default_factory=dict)

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)


class RunExecutionData(BaseModel):
    execution_data: Optional[ExecutionData] = None
