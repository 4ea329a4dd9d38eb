"""Tests for required-parameter validation and issue bookkeeping."""

from conftest import make_properties

from nodeparams.parameters import (
    get_node_parameters_issues,
    get_parameter_issues,
    get_parameter_value_by_path,
    has_issues,
    merge_issues,
    node_issues_to_string,
)
from nodeparams.registry import NodeTypeRegistry
from nodeparams.types import Node, NodeIssues, NodeTypeDescription
from nodeparams.workflow import Workflow


def _node(parameters, **kwargs):
    return Node(name="Node", type="test", parameters=parameters, **kwargs)


# ── Missing required values ──────────────────────────────────────────────────


def test_required_string_empty(webhook_properties):
    issues = get_node_parameters_issues(webhook_properties, _node({"path": ""}))
    assert issues.parameters == {"path": ['Parameter "Path" is required.']}


def test_required_string_absent(webhook_properties):
    issues = get_node_parameters_issues(webhook_properties, _node({}))
    assert issues.parameters == {"path": ['Parameter "Path" is required.']}


def test_required_string_set(webhook_properties):
    assert get_node_parameters_issues(webhook_properties, _node({"path": "hook"})) is None


def test_required_multi_options_empty_list():
    properties = make_properties({"name": "tags", "type": "multiOptions", "required": True})
    issues = get_node_parameters_issues(properties, _node({"tags": []}))
    assert issues.parameters == {"tags": ['Parameter "tags" is required.']}
    assert get_node_parameters_issues(properties, _node({"tags": ["a"]})) is None


def test_required_date_time_absent():
    properties = make_properties(
        {"name": "start", "displayName": "Start", "type": "dateTime", "required": True}
    )
    issues = get_node_parameters_issues(properties, _node({}))
    assert issues.parameters == {"start": ['Parameter "Start" is required.']}


def test_required_number_never_missing():
    properties = make_properties({"name": "amount", "type": "number", "required": True})
    assert get_node_parameters_issues(properties, _node({})) is None


def test_hidden_required_field_not_checked(http_request_properties):
    node = _node({"url": "https://x", "responseFormat": "json"})
    assert get_node_parameters_issues(http_request_properties, node) is None


def test_only_visible_alternative_checked(http_request_properties):
    node = _node({"url": "https://x", "responseFormat": "file", "dataPropertyName": ""})
    issues = get_node_parameters_issues(http_request_properties, node)
    assert issues.parameters == {"dataPropertyName": ['Parameter "Binary Property" is required.']}


def test_required_multiple_values_checks_each_element():
    properties = make_properties({
        "name": "names", "type": "string", "required": True,
        "typeOptions": {"multipleValues": True},
    })
    issues = get_node_parameters_issues(properties, _node({"names": ["a", "", ""]}))
    assert len(issues.parameters["names"]) == 2


# ── Nested fields ────────────────────────────────────────────────────────────


def test_fixed_collection_children_checked_when_supplied(http_request_properties):
    node = _node({
        "url": "https://x",
        "headerParameters": {"parameter": [{"name": ""}, {"name": "X-Ok"}]},
    })
    issues = get_node_parameters_issues(http_request_properties, node)
    assert issues.parameters == {"name": ['Parameter "Name" is required.']}


def test_fixed_collection_children_skipped_when_absent(http_request_properties):
    node = _node({"url": "https://x", "headerParameters": {}})
    assert get_node_parameters_issues(http_request_properties, node) is None


def test_fixed_collection_single_alternative_path():
    prop = make_properties({
        "name": "conditions", "type": "fixedCollection",
        "options": [{"name": "string", "values": [
            {"name": "value1", "type": "string", "required": True},
        ]}],
    })[0]
    values = {"conditions": {"string": {"value1": ""}}}
    issues = get_parameter_issues(prop, values, "")
    assert issues.parameters == {"value1": ['Parameter "value1" is required.']}
    assert not has_issues(get_parameter_issues(prop, {"conditions": {"string": {"value1": "a"}}}, ""))


def test_collection_children_always_checked():
    properties = make_properties({
        "name": "opts", "type": "collection", "default": {},
        "options": [{"name": "label", "type": "string", "required": True}],
    })
    issues = get_node_parameters_issues(properties, _node({}))
    assert issues.parameters == {"label": ['Parameter "label" is required.']}
    assert get_node_parameters_issues(properties, _node({"opts": {"label": "x"}})) is None


def test_multi_value_collection_checked_per_element():
    properties = make_properties({
        "name": "rows", "type": "collection",
        "typeOptions": {"multipleValues": True},
        "options": [{"name": "label", "type": "string", "required": True}],
    })
    issues = get_node_parameters_issues(
        properties, _node({"rows": [{"label": ""}, {"label": "ok"}, {}]})
    )
    assert len(issues.parameters["label"]) == 2


def test_parameter_value_by_path():
    values = {"a": {"b": [{"c": 1}]}}
    assert get_parameter_value_by_path(values, "c", "a.b[0]") == 1
    assert get_parameter_value_by_path(values, "a", "") == {"b": [{"c": 1}]}
    assert get_parameter_value_by_path(values, "c", "a.b[3]") is None


# ── Node-level results ───────────────────────────────────────────────────────


def test_required_field_shown_by_default_sibling():
    """Validation sees the defaulted parameters of a workflow node."""
    registry = NodeTypeRegistry([NodeTypeDescription.model_validate({
        "name": "modal",
        "properties": [
            {"name": "mode", "type": "options", "default": "a"},
            {"name": "x", "type": "string", "default": "", "required": True,
             "displayOptions": {"show": {"mode": ["a"]}}},
        ],
    })])
    workflow = Workflow("wf1", [Node(name="M", type="modal")], registry)

    issues = get_node_parameters_issues(registry.get_properties("modal"), workflow.get_node("M"))
    assert issues.parameters == {"x": ['Parameter "x" is required.']}


def test_disabled_node_has_no_issues(webhook_properties):
    assert get_node_parameters_issues(webhook_properties, _node({}, disabled=True)) is None


def test_merge_appends_messages():
    destination = NodeIssues(parameters={"p": ["m1"]})
    merge_issues(destination, NodeIssues(parameters={"p": ["m1"]}, execution=True))
    assert destination.parameters == {"p": ["m1", "m1"]}
    assert destination.execution is True


def test_merge_none_is_noop():
    destination = NodeIssues(parameters={"p": ["m1"]})
    merge_issues(destination, None)
    assert destination == NodeIssues(parameters={"p": ["m1"]})


def test_merge_is_associative():
    def parts():
        return (
            NodeIssues(parameters={"p": ["a"]}),
            NodeIssues(parameters={"p": ["b"], "q": ["c"]}, type_unknown=True),
            NodeIssues(credentials={"cred": ["d"]}, parameters={"q": ["e"]}),
        )

    a, b, c = parts()
    merge_issues(a, b)
    merge_issues(a, c)

    x, y, z = parts()
    merge_issues(y, z)
    merge_issues(x, y)

    assert a == x


def test_issues_to_string_order():
    issues = NodeIssues(
        execution=True,
        type_unknown=True,
        parameters={"p": ["m1", "m2"]},
        credentials={"c": ["m3"]},
    )
    node = Node(name="N", type="custom")
    assert node_issues_to_string(issues, node) == [
        "Execution Error.",
        "m1",
        "m2",
        "m3",
        'Node Type "custom" is not known.',
    ]


def test_issues_to_string_without_node():
    assert node_issues_to_string(NodeIssues(type_unknown=True)) == ["Node Type is not known."]


def test_has_issues():
    assert has_issues(NodeIssues()) is False
    assert has_issues(NodeIssues(credentials={"c": ["m"]})) is True
