import pytest

from verconstraint.constraint import (
    Constraint,
    ConstraintError,
    Constraints,
    Operator,
    parse_constraints,
)
from verconstraint.version import Version


@pytest.mark.parametrize(
    "text, count",
    [
        (">= 1.2", 1),
        ("1.0", 1),
        (">= 1.2, < 1.0", 2),
    ],
)
def test_new_constraint_count(text, count):
    assert len(parse_constraints(text)) == count


@pytest.mark.parametrize(
    "text",
    [
        ">= 1.x",
        "11387778780781445675529500000000000000000",
        "",
        "=> 1.0",
    ],
)
def test_new_constraint_errors(text):
    with pytest.raises(ConstraintError):
        parse_constraints(text)


def test_malformed_message():
    with pytest.raises(ConstraintError, match="malformed constraint: >= 1.x"):
        Constraint.parse(">= 1.x")


@pytest.mark.parametrize(
    "constraint, version, expected",
    [
        (">= 1.0, < 1.2", "1.1.5", True),
        ("< 1.0, < 1.2", "1.1.5", False),
        ("= 1.0", "1.1.5", False),
        ("= 1.0", "1.0.0", True),
        ("1.0", "1.0.0", True),
        ("~> 1.0", "2.0", False),
        ("~> 1.0", "1.1", True),
        ("~> 1.0", "1.2.3", True),
        ("~> 1.0.0", "1.2.3", False),
        ("~> 1.0.0", "1.0.7", True),
        ("~> 1.0.0", "1.1.0", False),
        ("~> 1.0.7", "1.0.4", False),
        ("~> 1.0.7", "1.0.7", True),
        ("~> 1.0.7", "1.0.8", True),
        ("~> 1.0.7", "1.0.7.5", True),
        ("~> 1.0.7", "1.0.6.99", False),
        ("~> 1.0.7", "1.0.8.0", True),
        ("~> 1.0.9.5", "1.0.9.5", True),
        ("~> 1.0.9.5", "1.0.9.4", False),
        ("~> 1.0.9.5", "1.0.9.6", True),
        ("~> 1.0.9.5", "1.0.9.5.0", True),
        ("~> 1.0.9.5", "1.0.9.5.1", True),
        ("~> 2.0", "2.1.0-beta", False),
        ("~> 2.1.0-a", "2.2.0", False),
        ("~> 2.1.0-a", "2.1.0", False),
        ("~> 2.1.0-a", "2.1.0-beta", True),
        ("~> 2.1.0-a", "2.2.0-alpha", False),
        ("> 2.0", "2.1.0-beta", False),
        (">= 2.1.0-a", "2.1.0-beta", True),
        (">= 2.1.0-a", "2.1.1-beta", False),
        (">= 2.0.0", "2.1.0-beta", False),
        (">= 2.1.0-a", "2.1.1", True),
        (">= 2.1.0-a", "2.1.1-beta", False),
        (">= 2.1.0-a", "2.1.0", True),
        ("<= 2.1.0-a", "2.0.0", True),
    ],
)
def test_constraint_check(constraint, version, expected):
    assert parse_constraints(constraint).check(Version.parse(version)) is expected


@pytest.mark.parametrize(
    "constraint, version, expected",
    [
        ("!= 1.0", "1.0.0", False),
        ("!= 1.0", "1.0.1", True),
        ("> 1.0", "1.0.1", True),
        ("< 1.0", "0.9", True),
    ],
)
def test_single_operators(constraint, version, expected):
    assert Constraint.parse(constraint).check(Version.parse(version)) is expected


@pytest.mark.parametrize(
    "text, operator",
    [
        ("1.0", Operator.EQUAL),
        ("= 1.0", Operator.EQUAL),
        ("!= 1.0", Operator.NOT_EQUAL),
        ("> 1.0", Operator.GREATER_THAN),
        ("< 1.0", Operator.LESS_THAN),
        (">= 1.0", Operator.GREATER_THAN_EQUAL),
        ("<= 1.0", Operator.LESS_THAN_EQUAL),
        ("~> 1.0", Operator.PESSIMISTIC),
    ],
)
def test_operator_parsed(text, operator):
    assert Constraint.parse(text).operator is operator


@pytest.mark.parametrize(
    "constraint, prerelease",
    [
        ("= 1.0", False),
        ("= 1.0-beta", True),
        ("~> 2.1.0", False),
        ("~> 2.1.0-dev", True),
        ("> 2.0", False),
        (">= 2.1.0-a", True),
    ],
)
def test_constraint_prerelease(constraint, prerelease):
    assert Constraint.parse(constraint).prerelease is prerelease


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("0.0.1", "0.0.1", True),
        (" 0.0.1 ", "0.0.1", True),
        ("=0.0.1 ", "0.0.1", True),
        ("=0.0.1", "=0.0.2", False),
        (">0.0.1", "=0.0.1", False),
        (">0.1.0, <=1.0.0", "<=1.0.0, >0.1.0", True),
        (">0.1.0", ">0.1.0, <1.0", False),
    ],
)
def test_constraints_equal(left, right, expected):
    assert parse_constraints(left).equals(parse_constraints(right)) is expected


def test_equals_keeps_original_order():
    left = parse_constraints(">0.1.0, <=1.0.0")
    right = parse_constraints("<=1.0.0, >0.1.0")
    left.equals(right)
    assert str(left) == ">0.1.0, <=1.0.0"
    assert str(right) == "<=1.0.0, >0.1.0"


@pytest.mark.parametrize(
    "text, expected",
    [
        (">= 0.1.0,< 1.12", "< 1.12,>= 0.1.0"),
        ("< 1.12,>= 0.1.0", "< 1.12,>= 0.1.0"),
        ("< 1.12,>= 0.1.0,0.2.0", "< 1.12,0.2.0,>= 0.1.0"),
        (">1.0,>0.1.0,>0.3.0,>0.2.0", ">0.1.0,>0.2.0,>0.3.0,>1.0"),
    ],
)
def test_constraints_sort(text, expected):
    constraints = parse_constraints(text)
    constraints.sort()
    assert str(constraints) == expected


@pytest.mark.parametrize("text", [">= 1.0, < 1.2", "~> 1.0.7"])
def test_constraints_string(text):
    assert str(parse_constraints(text)) == text


def test_constraint_string_is_original():
    assert str(Constraint.parse("  >=  1.0 ")) == "  >=  1.0 "


def test_constraints_indexing_and_iteration():
    constraints = Constraints.parse(">= 1.0, < 2.0")
    assert constraints[1].operator is Operator.LESS_THAN
    assert [c.operator for c in constraints] == [
        Operator.GREATER_THAN_EQUAL,
        Operator.LESS_THAN,
    ]


def test_empty_constraints_accept_anything():
    assert Constraints([]).check(Version.parse("9.9.9")) is True


def test_constraint_equals_ignores_whitespace():
    assert Constraint.parse(" = 1.0").equals(Constraint.parse("1.0.0")) is True
    assert Constraint.parse("> 1.0").equals(Constraint.parse("< 1.0")) is False


def test_sort_key_orders_by_operator_then_version():
    lower = Constraint.parse("< 2.0")
    higher = Constraint.parse("< 3.0")
    equal = Constraint.parse("1.0")
    ordered = sorted([equal, higher, lower], key=Constraint.sort_key)
    assert [str(c) for c in ordered] == ["< 2.0", "< 3.0", "1.0"]