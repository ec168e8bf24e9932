"""Tests for tools/forms.py — form contract parsing."""
import pytest

from portfolio.tools.forms import FormField, ValidationError, parse_input

RATING = FormField("network", type="int", min=1, max=10, default=5)


class TestIntFields:
    def test_string_parsed(self):
        assert parse_input([RATING], {"network": "7"}) == {"network": 7}

    def test_whitespace_and_sign(self):
        assert parse_input([RATING], {"network": " +3 "}) == {"network": 3}

    def test_int_passthrough(self):
        assert parse_input([RATING], {"network": 10}) == {"network": 10}

    def test_integral_float(self):
        assert parse_input([RATING], {"network": 4.0}) == {"network": 4}

    def test_default_when_missing(self):
        assert parse_input([RATING], {}) == {"network": 5}

    def test_default_when_blank(self):
        assert parse_input([RATING], {"network": "  "}) == {"network": 5}

    @pytest.mark.parametrize("value", ["0", "11", -3, 42])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            parse_input([RATING], {"network": value})
        assert "between 1 and 10" in exc.value.errors["network"]

    @pytest.mark.parametrize("value", ["5.5", "abc", 2.5, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            parse_input([RATING], {"network": value})
        assert exc.value.errors["network"] == "must be an integer"


class TestTextFields:
    def test_required_missing(self):
        with pytest.raises(ValidationError) as exc:
            parse_input([FormField("email", type="email")], {})
        assert exc.value.errors == {"email": "is required"}

    def test_email(self):
        assert parse_input([FormField("email", type="email")], {"email": " a@b.io "}) == {"email": "a@b.io"}

    def test_bad_email(self):
        with pytest.raises(ValidationError):
            parse_input([FormField("email", type="email")], {"email": "not-an-email"})

    def test_url(self):
        field = FormField("url", type="url")
        assert parse_input([field], {"url": "https://example.com/x"}) == {"url": "https://example.com/x"}
        with pytest.raises(ValidationError):
            parse_input([field], {"url": "ftp://example.com"})

    def test_choice(self):
        field = FormField("template", type="choice", choices=("banking", "work"), default="banking")
        assert parse_input([field], {"template": "work"}) == {"template": "work"}
        assert parse_input([field], {}) == {"template": "banking"}
        with pytest.raises(ValidationError):
            parse_input([field], {"template": "casino"})

    def test_optional_without_default_is_omitted(self):
        assert parse_input([FormField("note", required=False)], {}) == {}

    def test_non_scalar_rejected(self):
        with pytest.raises(ValidationError):
            parse_input([FormField("domain")], {"domain": ["a", "b"]})


class TestParseInput:
    def test_unknown_keys_dropped(self):
        assert parse_input([RATING], {"network": "2", "extra": "x"}) == {"network": 2}

    def test_none_input(self):
        assert parse_input([], None) == {}

    def test_all_errors_collected(self):
        fields = [RATING, FormField("email", type="email")]
        with pytest.raises(ValidationError) as exc:
            parse_input(fields, {"network": "99"})
        assert set(exc.value.errors) == {"network", "email"}
        assert "network" in str(exc.value)


class TestDescribe:
    def test_int_field(self):
        assert RATING.describe() == {
            "name": "network", "type": "int", "label": "", "required": True, "default": 5, "min": 1, "max": 10,
        }

    def test_choice_field(self):
        info = FormField("t", type="choice", choices=("a", "b"), placeholder="p").describe()
        assert info["choices"] == ["a", "b"]
        assert info["placeholder"] == "p"
