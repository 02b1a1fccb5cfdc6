"""Version constraints such as ``>= 1.0, < 2.0`` and their evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator

from .version import VERSION_PATTERN, Version, VersionError


class ConstraintError(ValueError):
    """Raised when a constraint string cannot be parsed."""


class Operator(Enum):
    """Comparison operators; constraints sort by the symbol's code point."""

    EQUAL = "="
    NOT_EQUAL = "≠"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_EQUAL = "≥"
    LESS_THAN_EQUAL = "≤"
    PESSIMISTIC = "~"

    @property
    def rank(self) -> int:
        return ord(self.value)


def _prerelease_check(version: Version, check: Version) -> bool:
    if check.prerelease and version.prerelease:
        # A prerelease constraint only matches prereleases of the same base.
        return version.equal_segments(check)
    if version.prerelease:
        # A plain constraint never matches a prerelease.
        return False
    return True


def _equal(version: Version, check: Version) -> bool:
    return version == check


def _not_equal(version: Version, check: Version) -> bool:
    return version != check


def _greater_than(version: Version, check: Version) -> bool:
    return _prerelease_check(version, check) and version.compare(check) == 1


def _less_than(version: Version, check: Version) -> bool:
    return _prerelease_check(version, check) and version.compare(check) == -1


def _greater_than_equal(version: Version, check: Version) -> bool:
    return _prerelease_check(version, check) and version.compare(check) >= 0


def _less_than_equal(version: Version, check: Version) -> bool:
    return _prerelease_check(version, check) and version.compare(check) <= 0


def _pessimistic(version: Version, check: Version) -> bool:
    # A prerelease in the constraint restricts matches to prereleases.
    if not _prerelease_check(version, check) or (
        check.prerelease and not version.prerelease
    ):
        return False
    if version < check:
        return False

    wanted, actual = check.segments, version.segments
    count = len(wanted)
    if count > len(actual):
        return False

    # Every segment the constraint spells out, except the last, must match.
    specified = check._specified  # number of segments written in the constraint
    if wanted[: specified - 1] != actual[: specified - 1]:
        return False

    return wanted[count - 1] <= actual[count - 1]


_CHECKS: dict[Operator, Callable[[Version, Version], bool]] = {
    Operator.EQUAL: _equal,
    Operator.NOT_EQUAL: _not_equal,
    Operator.GREATER_THAN: _greater_than,
    Operator.LESS_THAN: _less_than,
    Operator.GREATER_THAN_EQUAL: _greater_than_equal,
    Operator.LESS_THAN_EQUAL: _less_than_equal,
    Operator.PESSIMISTIC: _pessimistic,
}

_OPERATORS: dict[str, Operator] = {
    "": Operator.EQUAL,
    "=": Operator.EQUAL,
    "!=": Operator.NOT_EQUAL,
    ">": Operator.GREATER_THAN,
    "<": Operator.LESS_THAN,
    ">=": Operator.GREATER_THAN_EQUAL,
    "<=": Operator.LESS_THAN_EQUAL,
    "~>": Operator.PESSIMISTIC,
}

_SPACE = r"[\t\n\f\r ]*"
_OPERATOR_ALTERNATIVES = "|".join(
    re.escape(symbol) for symbol in sorted(_OPERATORS, key=len, reverse=True)
)
_CONSTRAINT_RE = re.compile(
    f"{_SPACE}({_OPERATOR_ALTERNATIVES}){_SPACE}({VERSION_PATTERN}){_SPACE}"
)


@dataclass(frozen=True, eq=False)
class Constraint:
    """A single constraint on a version, such as ``>= 1.0``."""

    operator: Operator
    version: Version
    original: str

    @classmethod
    def parse(cls, text: str) -> "Constraint":
        """Parse one constraint; raise ConstraintError if it is malformed."""
        match = _CONSTRAINT_RE.fullmatch(text)
        if match is None:
            raise ConstraintError(f"malformed constraint: {text}")
        try:
            version = Version.parse(match.group(2))
        except VersionError as exc:
            raise ConstraintError(str(exc)) from exc
        return cls(_OPERATORS[match.group(1)], version, text)

    def check(self, version: Version) -> bool:
        """Tell whether ``version`` satisfies this constraint."""
        return _CHECKS[self.operator](version, self.version)

    @property
    def prerelease(self) -> bool:
        """Whether the constraint's version has a prerelease."""
        return bool(self.version.prerelease)

    def equals(self, other: "Constraint") -> bool:
        """Same operator and an equal version."""
        return self.operator is other.operator and self.version == other.version

    def sort_key(self) -> tuple[int, Version]:
        """Key ordering constraints by operator, then by version."""
        return (self.operator.rank, self.version)

    def __str__(self) -> str:
        return self.original


class Constraints:
    """A list of constraints that must all hold."""

    def __init__(self, constraints: Iterable[Constraint] = ()) -> None:
        self._items: list[Constraint] = list(constraints)

    @classmethod
    def parse(cls, text: str) -> "Constraints":
        """Parse a comma-separated list of constraints."""
        return cls(Constraint.parse(part) for part in text.split(","))

    def check(self, version: Version) -> bool:
        """Tell whether ``version`` satisfies every constraint."""
        return all(constraint.check(version) for constraint in self._items)

    def equals(self, other: "Constraints") -> bool:
        """Compare after sorting; this is not logical equivalence."""
        if len(self) != len(other):
            return False
        left = sorted(self._items, key=Constraint.sort_key)
        right = sorted(other, key=Constraint.sort_key)
        return all(mine.equals(theirs) for mine, theirs in zip(left, right))

    def sort(self) -> None:
        """Sort in place by operator, then by version."""
        self._items.sort(key=Constraint.sort_key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Constraint:
        return self._items[index]

    def __str__(self) -> str:
        return ",".join(str(constraint) for constraint in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def parse_constraints(text: str) -> Constraints:
    """Parse a comma-separated list of constraints."""
    return Constraints.parse(text)