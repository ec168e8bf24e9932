"""Tests for tools/registry.py — category normalization, lookup, registration."""
import pytest

from portfolio.tools import Category, ToolDescriptor, all_categories, get_category, normalize_category, resolve
from portfolio.tools.registry import FALLBACK, FALLBACK_MESSAGE, RegistrationError, register_category


class TestNormalize:
    def test_lower_and_trim(self):
        assert normalize_category("  Web Security ") == "web security"

    def test_collapses_inner_whitespace(self):
        assert normalize_category("Penetration   Testing") == "penetration testing"

    def test_none(self):
        assert normalize_category(None) == ""


class TestResolve:
    def test_all_categories_registered(self):
        assert set(all_categories()) == {c.value for c in Category}

    @pytest.mark.parametrize("a,b", [
        ("Web Security", "web security"),
        ("Penetration Testing", "penetration testing"),
        ("Network Security", "NETWORK SECURITY"),
        ("Network Analysis", " network analysis"),
        ("SSL", "ssl"),
    ])
    def test_case_and_spacing_insensitive(self, a, b):
        assert resolve(a) is resolve(b)
        assert resolve(a) is not FALLBACK
        assert resolve(a).fields == resolve(b).fields

    def test_enum_lookup(self):
        assert resolve(Category.RISK) is get_category("risk")

    def test_unknown_is_fallback(self):
        defn = resolve("quantum decryption")
        assert defn is FALLBACK
        assert defn.handler({}, {}, None) == FALLBACK_MESSAGE
        assert defn.fields == []

    def test_get_category_unknown_is_none(self):
        assert get_category("nope") is None

    def test_delegated_flags(self):
        delegated = {k for k, v in all_categories().items() if v.delegated}
        assert delegated == {"password", "leak", "security", "ssl", "web security", "network security"}

    def test_describe_has_presentation_metadata(self):
        info = resolve("password").describe()
        assert info["icon"] == "key"
        assert "blue" in info["color"]
        assert info["fields"] == []


class TestRegistration:
    def test_unknown_category_rejected(self):
        with pytest.raises(RegistrationError):
            register_category("quantum decryption")

    def test_duplicate_rejected(self):
        with pytest.raises(RegistrationError):
            register_category("Risk")


class TestToolDescriptor:
    def test_immutable(self):
        tool = ToolDescriptor(id="t1", name="x", category="risk", config={"a": 1})
        with pytest.raises(AttributeError):
            tool.name = "y"
        with pytest.raises(TypeError):
            tool.config["a"] = 2

    def test_config_is_copied(self):
        config = {"includeNumbers": True}
        tool = ToolDescriptor(id="t1", name="x", category="password", config=config)
        config["includeNumbers"] = False
        assert tool.config["includeNumbers"] is True

    def test_to_dict(self):
        tool = ToolDescriptor(id="t1", name="x", description="d", category="ssl", config={"k": "v"})
        assert tool.to_dict() == {"id": "t1", "name": "x", "description": "d", "category": "ssl", "config": {"k": "v"}}
