"""Tests for display-condition evaluation."""

from conftest import make_properties

from nodeparams.parameters import display_parameter, display_parameter_path, select_alternative
from nodeparams.types import NodeCredentialDescription


def _shown_when_a_is_x():
    return make_properties(
        {"name": "b", "type": "string", "displayOptions": {"show": {"a": ["x"]}}}
    )[0]


def _hidden_when_a_is_x():
    return make_properties(
        {"name": "b", "type": "string", "displayOptions": {"hide": {"a": ["x"]}}}
    )[0]


# ── show ─────────────────────────────────────────────────────────────────────


def test_no_display_options_is_visible():
    prop = make_properties({"name": "a"})[0]
    assert display_parameter({}, prop) is True


def test_show_matching_value():
    assert display_parameter({"a": "x"}, _shown_when_a_is_x()) is True


def test_show_non_matching_value():
    assert display_parameter({"a": "y"}, _shown_when_a_is_x()) is False


def test_show_missing_key_hides():
    assert display_parameter({}, _shown_when_a_is_x()) is False


def test_show_expression_value_is_visible():
    """An unevaluated expression can be anything at runtime, so the field stays visible."""
    assert display_parameter({"a": "=expr()"}, _shown_when_a_is_x()) is True


def test_show_empty_list_hides():
    assert display_parameter({"a": []}, _shown_when_a_is_x()) is False


def test_show_list_value_intersects():
    assert display_parameter({"a": ["y", "x"]}, _shown_when_a_is_x()) is True


def test_show_requires_every_key():
    prop = make_properties({
        "name": "c",
        "displayOptions": {"show": {"a": ["x"], "b": [True]}},
    })[0]
    assert display_parameter({"a": "x", "b": True}, prop) is True
    assert display_parameter({"a": "x", "b": False}, prop) is False


# ── hide ─────────────────────────────────────────────────────────────────────


def test_hide_matching_value():
    assert display_parameter({"a": "x"}, _hidden_when_a_is_x()) is False


def test_hide_non_matching_value():
    assert display_parameter({"a": "y"}, _hidden_when_a_is_x()) is True


def test_hide_empty_list_never_hides():
    assert display_parameter({"a": []}, _hidden_when_a_is_x()) is True


def test_hide_any_key_hides():
    prop = make_properties({
        "name": "c",
        "displayOptions": {"hide": {"a": ["x"], "b": ["y"]}},
    })[0]
    assert display_parameter({"a": "nope", "b": "y"}, prop) is False


def test_show_booleans_never_match_numbers():
    prop = make_properties({"name": "b", "displayOptions": {"show": {"a": [1]}}})[0]
    assert display_parameter({"a": True}, prop) is False
    assert display_parameter({"a": 1}, prop) is True

    prop = make_properties({"name": "b", "displayOptions": {"show": {"a": [True]}}})[0]
    assert display_parameter({"a": 1}, prop) is False
    assert display_parameter({"a": True}, prop) is True


def test_hide_booleans_never_match_numbers():
    prop = make_properties({"name": "b", "displayOptions": {"hide": {"a": [False]}}})[0]
    assert display_parameter({"a": 0}, prop) is True
    assert display_parameter({"a": False}, prop) is False

    prop = make_properties({"name": "b", "displayOptions": {"hide": {"a": [0]}}})[0]
    assert display_parameter({"a": False}, prop) is True


def test_numbers_match_across_int_and_float():
    prop = make_properties({"name": "b", "displayOptions": {"show": {"a": [2]}}})[0]
    assert display_parameter({"a": 2.0}, prop) is True


def test_credentials_use_the_same_rules():
    credential = NodeCredentialDescription.model_validate({
        "name": "httpBasicAuth",
        "displayOptions": {"show": {"authentication": ["basicAuth"]}},
    })
    assert display_parameter({"authentication": "basicAuth"}, credential) is True
    assert display_parameter({"authentication": "none"}, credential) is False


# ── Root keys and paths ──────────────────────────────────────────────────────


def test_root_key_reads_root_values():
    prop = make_properties({"name": "c", "displayOptions": {"show": {"/mode": ["a"]}}})[0]
    assert display_parameter({"mode": "b"}, prop, {"mode": "a"}) is True
    assert display_parameter({"mode": "a"}, prop, {"mode": "b"}) is False


def test_root_key_defaults_to_own_level():
    prop = make_properties({"name": "c", "displayOptions": {"show": {"/mode": ["a"]}}})[0]
    assert display_parameter({"mode": "a"}, prop) is True


def test_nested_key_path():
    prop = make_properties({"name": "c", "displayOptions": {"show": {"options.mode": ["a"]}}})[0]
    assert display_parameter({"options": {"mode": "a"}}, prop) is True


def test_display_parameter_path_nested_level():
    prop = make_properties({
        "name": "c",
        "displayOptions": {"show": {"/mode": ["a"], "x": [1]}},
    })[0]
    values = {"parameters": {"mode": "a", "options": {"x": 1}}}
    assert display_parameter_path(values, prop, "parameters.options") is True


def test_display_parameter_path_top_level():
    assert display_parameter_path({"a": "x"}, _shown_when_a_is_x(), "") is True


def test_display_parameter_does_not_mutate_values():
    values = {"a": ["x"]}
    display_parameter(values, _shown_when_a_is_x())
    assert values == {"a": ["x"]}


# ── Alternatives ─────────────────────────────────────────────────────────────


def test_select_alternative_first_visible_wins():
    alternatives = make_properties(
        {"name": "p", "default": "one", "displayOptions": {"show": {"mode": ["a"]}}},
        {"name": "p", "default": "two", "displayOptions": {"show": {"mode": ["b"]}}},
        {"name": "p", "default": "three"},
    )
    assert select_alternative(alternatives, {"mode": "b"}) is alternatives[1]
    assert select_alternative(alternatives, {"mode": "c"}) is alternatives[2]


def test_select_alternative_none_visible():
    alternatives = make_properties(
        {"name": "p", "displayOptions": {"show": {"mode": ["a"]}}},
        {"name": "p", "displayOptions": {"show": {"mode": ["b"]}}},
    )
    assert select_alternative(alternatives, {"mode": "c"}) is None
