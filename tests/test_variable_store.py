"""Tests for input_settings.core.variable_store — VariableStore."""
from input_settings.core.local_variable import LocalVariable
from input_settings.core.variable_store import VariableStore


class TestVariableStore:
    def test_set_and_get(self):
        vs = VariableStore()
        vs.set("Threads", "1-5")
        assert vs.get("Threads") == LocalVariable("Threads", "1-5")

    def test_get_missing_is_absent(self):
        vs = VariableStore()
        var = vs.get("Missing")
        assert var.name == "Missing"
        assert var.value is None
        assert var.text == ""

    def test_overwrite(self):
        vs = VariableStore()
        vs.set("x", "1")
        vs.set("x", "2")
        assert vs.get("x").value == "2"

    def test_init_from_mapping(self):
        vs = VariableStore({"a": "1", "b": "hello"})
        assert len(vs) == 2
        assert "a" in vs
        assert [v.name for v in vs] == ["a", "b"]

    def test_as_dict(self):
        vs = VariableStore()
        vs.set("a", "1")
        vs.set("b", "hello")
        d = vs.as_dict()
        assert d == {"a": "1", "b": "hello"}
        # Returned dict should be a copy
        d["c"] = "99"
        assert "c" not in vs

    def test_repr(self):
        vs = VariableStore({"x": "1"})
        assert "VariableStore" in repr(vs)
        assert "x" in repr(vs)
