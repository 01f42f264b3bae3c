"""Tests for DispatchTable type-tag dispatch."""

import logging

import pytest

from attribute_templates import DispatchTable, IncompleteDispatchError, render_value
from core import Attribute


def _upper(attr):
    return str(attr.value).upper()


class TestDispatch:
    def test_registered_tag_uses_its_renderer(self):
        table = DispatchTable()
        table.register("string", _upper)
        assert table(Attribute(type="string", value="abc")) == "ABC"

    def test_unknown_tag_uses_fallback(self):
        table = DispatchTable()
        table.register("string", _upper)
        assert table(Attribute(type="number", value=4)) == 4

    def test_no_fallback_means_no_output(self):
        table = DispatchTable(fallback=None)
        assert table(Attribute(type="number", value=4)) is None

    def test_overwrite_logs_warning(self, caplog):
        table = DispatchTable()
        table.register("string", _upper)
        with caplog.at_level(logging.WARNING):
            table.register("string", render_value)
        assert "already registered" in caplog.text
        assert table(Attribute(type="string", value="abc")) == "abc"

    def test_unregister(self):
        table = DispatchTable()
        table.register("string", _upper)
        assert table.unregister("string") is True
        assert table.unregister("string") is False
        assert "string" not in table


class TestCompleteness:
    def test_require_passes_when_covered(self):
        table = DispatchTable()
        table.register("a", render_value)
        table.register("b", render_value)
        table.require(["a", "b"])

    def test_require_lists_missing_tags(self):
        table = DispatchTable()
        table.register("a", render_value)
        with pytest.raises(IncompleteDispatchError) as exc_info:
            table.require(["a", "c", "b"])
        assert exc_info.value.missing == ["b", "c"]


class TestDerivedTables:
    def test_copy_is_independent(self):
        table = DispatchTable()
        table.register("a", _upper)
        clone = table.copy()
        clone.register("b", _upper)

        assert table.type_tags() == ["a"]
        assert clone.type_tags() == ["a", "b"]

    def test_extend_layers_other_over_self(self):
        base = DispatchTable()
        base.register("a", render_value)
        overlay = DispatchTable(fallback=None)
        overlay.register("a", _upper)
        overlay.register("b", _upper)

        merged = base.extend(overlay)

        assert merged(Attribute(type="a", value="x")) == "X"
        assert merged.fallback is render_value
        assert base.get("a").renderer is render_value

    def test_summary(self):
        table = DispatchTable()
        table.register("b", _upper, "upper-cased")
        table.register("a", render_value)

        summary = table.to_summary()

        assert summary["total_renderers"] == 2
        assert summary["has_fallback"] is True
        assert [r["type"] for r in summary["renderers"]] == ["a", "b"]
        assert summary["renderers"][1]["description"] == "upper-cased"
