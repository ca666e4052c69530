from datetime import date

import pytest

from smsedgeapi.exceptions import RuleDefinitionError
from smsedgeapi.models.validation import Constraint
from smsedgeapi.validator import RuleValidator, parse_rule, parse_rules, validate


class TestParseRule:
    def test_splits_rules_and_parameters(self):
        constraints = parse_rule("required|numeric|digits_between:7,64")
        assert [c.name for c in constraints] == ["required", "numeric", "digits_between"]
        assert constraints[2].args == ("7", "64")

    def test_constraint_str_roundtrips_rule_text(self):
        assert str(parse_rule("digits_between:1,32")[0]) == "digits_between:1,32"
        assert str(parse_rule("email")[0]) == "email"

    def test_unknown_rule_raises(self):
        with pytest.raises(RuleDefinitionError):
            parse_rule("required|phone")

    def test_wrong_parameter_count_raises(self):
        with pytest.raises(RuleDefinitionError):
            parse_rule("digits_between:7")
        with pytest.raises(RuleDefinitionError):
            parse_rule("required:1")

    def test_inverted_bounds_raise(self):
        with pytest.raises(RuleDefinitionError):
            parse_rule("digits_between:9,3")

    def test_parse_rules_accepts_constraint_lists(self):
        parsed = parse_rules({"id": [Constraint(name="required")], "to": "numeric"})
        assert parsed["id"][0].name == "required"
        assert parsed["to"][0].name == "numeric"


class TestRuleValidator:
    def test_empty_rules_always_pass(self):
        assert validate({}, {}).passes
        assert validate(None, {}).passes
        assert validate({"anything": "goes"}, {}).passes

    def test_missing_required_field_is_reported(self):
        result = validate({"text": "Hi"}, {"from": "required|string", "text": "required"})
        assert not result.passes
        assert [e.field for e in result.errors] == ["from"]
        assert result.errors[0].rule == "required"
        assert result.errors[0].message == "The from field is required."

    def test_blank_string_fails_required(self):
        assert not validate({"name": "   "}, {"name": "required"}).passes

    def test_optional_rules_skip_absent_values(self):
        rules = {"email": "email", "delay": "numeric|digits_between:1,32"}
        assert validate({}, rules).passes
        assert validate({"email": "", "delay": None}, rules).passes

    def test_missing_required_numeric_reports_only_required(self):
        result = validate({}, {"id": "required|numeric"})
        assert [e.rule for e in result.errors] == ["required"]

    def test_reports_every_violation_across_fields(self):
        rules = {
            "to": "required|numeric|digits_between:7,64",
            "email": "email",
            "shorten_url": "boolean",
        }
        result = validate({"to": "abc", "email": "nope", "shorten_url": "yes"}, rules)
        assert [(e.field, e.rule) for e in result.errors] == [
            ("to", "numeric"),
            ("to", "digits_between:7,64"),
            ("email", "email"),
            ("shorten_url", "boolean"),
        ]
        assert result.errors_by_field()["shorten_url"] == [
            "The shorten url attribute has errors."
        ]

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("123456", False),
            ("1234567", True),
            ("1" * 64, True),
            ("1" * 65, False),
            (15551234567, True),
            ("+123456", False),
            (-123456, False),
            ("+1234567", True),
            ("0044123", True),
            (12345.6, False),
            (1234.567, True),
            (1e16, True),
            ("1e6", True),
        ],
    )
    def test_digits_between_is_inclusive(self, value, expected):
        result = validate({"to": value}, {"to": "digits_between:7,64"})
        assert result.passes is expected

    def test_digits_between_message(self):
        result = validate({"to": "123"}, {"to": "digits_between:7,64"})
        assert result.errors[0].message == "The to field must be between 7 and 64 digits."

    @pytest.mark.parametrize("value", [12, 1.5, "42", " 7 ", "-3.2", "1e3"])
    def test_numeric_accepts_numbers_and_numeric_strings(self, value):
        assert validate({"n": value}, {"n": "numeric"}).passes

    @pytest.mark.parametrize("value", ["abc", "1_000", "12a", True, float("nan")])
    def test_numeric_rejects(self, value):
        assert not validate({"n": value}, {"n": "numeric"}).passes

    def test_string_requires_text(self):
        assert validate({"s": "x"}, {"s": "string"}).passes
        assert not validate({"s": 5}, {"s": "string"}).passes

    @pytest.mark.parametrize("value", [True, False, 0, 1, "0", "1", "true", "false"])
    def test_boolean_accepts_conventional_encodings(self, value):
        assert validate({"b": value}, {"b": "boolean"}).passes

    @pytest.mark.parametrize("value", ["yes", 2, "TRUE"])
    def test_boolean_rejects_other_values(self, value):
        assert not validate({"b": value}, {"b": "boolean"}).passes

    def test_email(self):
        assert validate({"e": "user@example.com"}, {"e": "email"}).passes
        assert not validate({"e": "user@example"}, {"e": "email"}).passes
        assert not validate({"e": "us er@example.com"}, {"e": "email"}).passes

    @pytest.mark.parametrize(
        "value", ["2024-01-31", "2024-01-31T10:00:00", "2024-01-31T10:00:00Z", "2024/01/31", "01/31/2024", date(2024, 1, 31)]
    )
    def test_date_accepts(self, value):
        assert validate({"d": value}, {"d": "date"}).passes

    @pytest.mark.parametrize("value", ["2024-13-01", "tomorrow", 20240131])
    def test_date_rejects(self, value):
        result = validate({"d": value}, {"d": "date"})
        assert not result.passes
        assert result.errors[0].message == "The d is not a valid date format."

    def test_does_not_mutate_fields(self):
        fields = {"to": "abc"}
        RuleValidator({"to": "required|numeric", "from": "required"}).validate(fields)
        assert fields == {"to": "abc"}

    def test_passes_shortcut(self):
        validator = RuleValidator({"id": "required|numeric"})
        assert validator.passes({"id": "5"})
        assert not validator.passes({})
