"""Declarative parameter validation.

Rules are written the way the SMSEdge API documents them, e.g.
``"required|numeric|digits_between:7,64"``, and parsed once into
:class:`Constraint` lists. Apart from ``required``, a rule only applies
when the field carries a value, so optional fields may be left out.
"""

import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping

from smsedgeapi.exceptions import RuleDefinitionError
from smsedgeapi.models.validation import Constraint, FieldError, ValidationResult

RuleSpec = str | list[Constraint]
RuleSet = dict[str, list[Constraint]]
FieldMap = Mapping[str, Any]

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_DATE_FORMATS = ("%Y/%m/%d", "%m/%d/%Y", "%Y-%m-%d %H:%M", "%Y/%m/%d %H:%M:%S")
_BOOLEAN_VALUES = ("0", "1", "true", "false")


def _is_required(value: Any, args: tuple[str, ...]) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return len("".join(str(value).split())) > 0


def _is_string(value: Any, args: tuple[str, ...]) -> bool:
    return isinstance(value, str)


def _is_numeric(value: Any, args: tuple[str, ...]) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if isinstance(value, str):
        return bool(_NUMBER_RE.match(value.strip()))
    return False


def _digit_count(value: Any, limit: float) -> int | None:
    text = str(value).strip()
    if "e" in text.lower():
        number = Decimal(text)
        if number.adjusted() > limit:
            return None
        text = format(number, "f")
    return sum(ch.isdigit() for ch in text)


def _is_digits_between(value: Any, args: tuple[str, ...]) -> bool:
    low, high = (float(arg) for arg in args)
    if not _is_numeric(value, ()):
        return False
    count = _digit_count(value, high)
    return count is not None and low <= count <= high


def _is_boolean(value: Any, args: tuple[str, ...]) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_VALUES


def _is_email(value: Any, args: tuple[str, ...]) -> bool:
    return isinstance(value, str) and bool(_EMAIL_RE.match(value))


def _is_date(value: Any, args: tuple[str, ...]) -> bool:
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
        return True
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            datetime.strptime(text, fmt)
            return True
        except ValueError:
            continue
    return False


Check = Callable[[Any, tuple[str, ...]], bool]

# name -> (check, number of parameters, message template)
RULES: dict[str, tuple[Check, int, str]] = {
    "required": (_is_required, 0, "The {attribute} field is required."),
    "string": (_is_string, 0, "The {attribute} must be a string."),
    "numeric": (_is_numeric, 0, "The {attribute} must be a number."),
    "digits_between": (
        _is_digits_between,
        2,
        "The {attribute} field must be between {0} and {1} digits.",
    ),
    "boolean": (_is_boolean, 0, "The {attribute} attribute has errors."),
    "email": (_is_email, 0, "The {attribute} format is invalid."),
    "date": (_is_date, 0, "The {attribute} is not a valid date format."),
}

IMPLICIT_RULES = frozenset({"required"})


def parse_rule(spec: str) -> list[Constraint]:
    """Parse ``"required|digits_between:1,32"`` into constraints."""
    constraints = []
    for part in spec.split("|"):
        part = part.strip()
        if not part:
            continue
        name, _, raw_args = part.partition(":")
        args = tuple(arg.strip() for arg in raw_args.split(",")) if raw_args else ()
        constraints.append(_make_constraint(name.strip(), args))
    return constraints


def _make_constraint(name: str, args: tuple[str, ...]) -> Constraint:
    if name not in RULES:
        raise RuleDefinitionError(f"Unknown validation rule: {name!r}")
    expected = RULES[name][1]
    if len(args) != expected:
        raise RuleDefinitionError(
            f"Rule {name!r} takes {expected} parameter(s), got {len(args)}"
        )
    if name == "digits_between":
        try:
            low, high = (float(arg) for arg in args)
        except ValueError as e:
            raise RuleDefinitionError(f"Invalid digits_between bounds: {args}") from e
        if low > high:
            raise RuleDefinitionError(f"Invalid digits_between bounds: {args}")
    return Constraint(name=name, args=args)


def parse_rules(rules: Mapping[str, RuleSpec]) -> RuleSet:
    parsed: RuleSet = {}
    for field, spec in rules.items():
        if isinstance(spec, str):
            parsed[field] = parse_rule(spec)
        else:
            parsed[field] = [_make_constraint(c.name, c.args) for c in spec]
    return parsed


class RuleValidator:
    def __init__(self, rules: Mapping[str, RuleSpec] | None = None) -> None:
        self.rules = parse_rules(rules or {})

    def validate(self, fields: FieldMap | None) -> ValidationResult:
        fields = fields or {}
        errors: list[FieldError] = []
        for field, constraints in self.rules.items():
            value = fields.get(field)
            present = _is_required(value, ())
            for constraint in constraints:
                if constraint.name not in IMPLICIT_RULES and not present:
                    continue
                check, _, template = RULES[constraint.name]
                if check(value, constraint.args):
                    continue
                errors.append(
                    FieldError(
                        field=field,
                        rule=str(constraint),
                        message=template.format(
                            *constraint.args, attribute=field.replace("_", " ")
                        ),
                    )
                )
        return ValidationResult(errors=errors)

    def passes(self, fields: FieldMap | None) -> bool:
        return self.validate(fields).passes


def validate(fields: FieldMap | None, rules: Mapping[str, RuleSpec]) -> ValidationResult:
    return RuleValidator(rules).validate(fields)
