"""
Tests for ${name} / $name substitution.
"""

from plugconf.properties import ProcessOverrides, replace_property, system_properties


class TestReplaceProperty:

    def test_round_trip(self):
        assert replace_property("${a}-${b}", {"a": "1", "b": "2"}, ProcessOverrides()) == "1-2"

    def test_bare_dollar_form_with_dots(self):
        assert replace_property("$app.name!", {"app.name": "demo"}, ProcessOverrides()) == "demo!"

    def test_whitespace_inside_braces(self):
        assert replace_property("${ a }", {"a": "x"}, ProcessOverrides()) == "x"

    def test_unresolved_becomes_empty(self):
        assert replace_property("[${missing}]", {}, ProcessOverrides()) == "[]"
        assert replace_property("[${missing}]", None, ProcessOverrides()) == "[]"

    def test_literal_dollar_kept(self):
        assert replace_property("cost: $", {}, ProcessOverrides()) == "cost: $"
        assert replace_property("a $- b", {}, ProcessOverrides()) == "a $- b"
        assert replace_property("${}", {}, ProcessOverrides()) == "${}"

    def test_override_wins_over_params(self):
        overrides = ProcessOverrides({"a": "sys"})
        assert replace_property("${a}", {"a": "param"}, overrides) == "sys"

    def test_values_are_not_rescanned(self):
        params = {"a": "${b}", "b": "x"}
        assert replace_property("${a}", params, ProcessOverrides()) == "${b}"

    def test_no_placeholder_returns_input(self):
        assert replace_property(None, {}) is None
        assert replace_property("", {}) == ""
        assert replace_property("plain", {}) == "plain"

    def test_process_wide_overrides_by_default(self):
        system_properties.set("user", "root")
        assert replace_property("${user}@host", {"user": "nobody"}) == "root@host"
