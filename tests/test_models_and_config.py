"""Tests for attribute payload parsing, core types and settings."""

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from attribute_field import AttributeView, parse_attribute
from attribute_field.config import RenderSettings, get_settings, get_user_timezone, load_settings
from attribute_field.utilities import setup_logging
from core import Attribute, ValueType


class TestParseAttribute:
    def test_minimal_payload(self):
        attr = parse_attribute({"type": "number", "value": 42})
        assert attr == Attribute(type="number", value=42)

    def test_none_payload(self):
        assert parse_attribute(None) is None

    def test_value_timestamp_alias_in_millis(self):
        attr = parse_attribute(
            {"name": "temp", "type": "temperature", "value": 20.5, "valueTimestamp": 1704110400000}
        )
        assert attr.timestamp == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def test_iso_timestamp(self):
        attr = parse_attribute({"type": "string", "value": "x", "timestamp": "2024-01-01T12:00:00Z"})
        assert attr.timestamp == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def test_meta_and_unknown_keys(self):
        attr = parse_attribute(
            {"type": "boolean", "value": True, "meta": {"label": "Power"}, "extra": 1}
        )
        assert attr.label == "Power"

    def test_null_meta(self):
        assert parse_attribute({"type": "string", "meta": None}).meta == {}

    @pytest.mark.parametrize("payload", [{"value": 1}, {"type": "", "value": 1}])
    def test_missing_type_rejected(self, payload):
        with pytest.raises(ValidationError):
            parse_attribute(payload)

    def test_parsed_attribute_renders(self, registry):
        view = AttributeView(parse_attribute({"type": "string", "value": "hi"}), registry=registry)
        assert view.render() == "hi"


class TestAttribute:
    def test_with_value_returns_new_attribute(self):
        attr = Attribute(type="number", value=1, name="n")
        updated = attr.with_value(2)

        assert attr.value == 1
        assert updated.value == 2
        assert updated.name == "n"

    def test_with_value_does_not_share_meta(self):
        attr = Attribute(type="number", value=1, meta={"label": "A"})
        updated = attr.with_value(2)

        with pytest.raises(TypeError):
            updated.meta["label"] = "B"
        assert attr.label == "A"
        assert updated.meta is not attr.meta

    def test_meta_copied_from_caller(self):
        meta = {"label": "A"}
        attr = Attribute(type="number", value=1, meta=meta)

        meta["label"] = "B"

        assert attr.label == "A"

    def test_attributes_are_hashable(self):
        attr = Attribute(type="x", value=1, meta={"label": "A"})
        assert hash(attr) == hash(Attribute(type="x", value=1))
        assert attr in {attr}

    def test_label_falls_back_to_name(self):
        assert Attribute(type="number", name="level").label == "level"
        assert Attribute(type="number").label == ""

    def test_attributes_are_frozen(self):
        attr = Attribute(type="number", value=1)
        with pytest.raises(AttributeError):
            attr.value = 2

    def test_well_known_tags(self):
        assert ValueType.BOOLEAN in ValueType.all()
        assert len(ValueType.all()) == len(set(ValueType.all()))


class TestSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings == RenderSettings()
        assert settings.timezone == "UTC"

    def test_environment_overrides(self):
        settings = load_settings(
            {"ATTRFIELD_DECIMAL_PLACES": "3", "ATTRFIELD_TIMEZONE": "Europe/London", "OTHER": "x"}
        )
        assert settings.decimal_places == 3
        assert settings.timezone == "Europe/London"

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError):
            load_settings({"ATTRFIELD_TIMEZONE": "Mars/Olympus"})

    def test_negative_precision_rejected(self):
        with pytest.raises(ValidationError):
            RenderSettings(decimal_places=-1)

    def test_settings_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("ATTRFIELD_TRUE_LABEL", "Yes")
        assert get_settings() is first

    def test_user_timezone(self, monkeypatch):
        monkeypatch.setenv("ATTRFIELD_TIMEZONE", "Asia/Tokyo")
        assert get_user_timezone() == ZoneInfo("Asia/Tokyo")

    def test_user_timezone_from_explicit_settings(self):
        assert get_user_timezone(RenderSettings(timezone="Europe/London")) == ZoneInfo("Europe/London")


class TestLogging:
    def test_setup_logging_accepts_level_name(self, monkeypatch):
        basic_config = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: basic_config.append(kw))

        setup_logging("debug")

        assert basic_config[0]["level"] == logging.DEBUG

    def test_setup_logging_uses_configured_level(self, monkeypatch):
        basic_config = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: basic_config.append(kw))
        monkeypatch.setenv("ATTRFIELD_LOG_LEVEL", "warning")

        setup_logging()

        assert basic_config[0]["level"] == logging.WARNING
