"""Parsing, comparison and ordering of version strings."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Iterable

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_SEGMENTS = r"v?([0-9]+(\.[0-9]+)*?)"
_METADATA = r"(\+([0-9A-Za-z\-~]+(\.[0-9A-Za-z\-~]+)*))?" + "?"

VERSION_PATTERN = (
    _SEGMENTS
    + r"(-([0-9]+[0-9A-Za-z\-~]*(\.[0-9A-Za-z\-~]+)*)"
    + r"|(-?([A-Za-z\-~]+[0-9A-Za-z\-~]*(\.[0-9A-Za-z\-~]+)*)))?"
    + _METADATA
)

# The strict form requires a separator between the segments and the prerelease.
SEMVER_PATTERN = (
    _SEGMENTS
    + r"(-([0-9]+[0-9A-Za-z\-~]*(\.[0-9A-Za-z\-~]+)*)"
    + r"|(-([A-Za-z\-~]+[0-9A-Za-z\-~]*(\.[0-9A-Za-z\-~]+)*)))?"
    + _METADATA
)

_VERSION_RE = re.compile(VERSION_PATTERN)
_SEMVER_RE = re.compile(SEMVER_PATTERN)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class VersionError(ValueError):
    """Raised when a version string cannot be parsed."""


def _parse_int64(text: str) -> int | None:
    """Return the signed 64-bit integer spelled by ``text``, or None."""
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _parse_segment(text: str) -> int:
    value = _parse_int64(text)
    if value is None:
        raise VersionError(f"error parsing version: value out of range: {text}")
    return value


class Version:
    """A parsed version: numeric segments, prerelease and metadata."""

    __slots__ = ("_segments", "_specified", "_prerelease", "_metadata", "_original")

    def __init__(self, text: str, strict: bool = False) -> None:
        pattern = _SEMVER_RE if strict else _VERSION_RE
        match = pattern.fullmatch(text)
        if match is None:
            raise VersionError(f"malformed version: {text}")

        parts = match.group(1).split(".")
        segments = [_parse_segment(part) for part in parts]
        # Pad to MAJOR.MINOR.PATCH at the minimum.
        segments.extend([0] * (3 - len(segments)))

        self._segments: tuple[int, ...] = tuple(segments)
        self._specified = len(parts)
        self._prerelease: str = match.group(7) or match.group(4) or ""
        self._metadata: str = match.group(10) or ""
        self._original = text

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version leniently."""
        return cls(text)

    @classmethod
    def parse_semver(cls, text: str) -> "Version":
        """Parse a version that strictly follows SemVer."""
        return cls(text, strict=True)

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as this version is lower, equal or higher."""
        if str(self) == str(other):
            return 0

        if self.equal_segments(other):
            mine, theirs = self._prerelease, other._prerelease
            if not mine and not theirs:
                return 0
            if not mine:
                return 1
            if not theirs:
                return -1
            return compare_prereleases(mine, theirs)

        left, right = self._segments, other._segments
        for lhs, rhs in zip(left, right):
            if lhs != rhs:
                return -1 if lhs < rhs else 1

        # Versions of different specificity: the extra segments decide.
        if len(left) > len(right):
            return 1 if any(left[len(right):]) else 0
        if len(right) > len(left):
            return -1 if any(right[len(left):]) else 0
        return 0

    def core(self) -> "Version":
        """Return a version made of MAJOR.MINOR.PATCH only."""
        major, minor, patch = self._segments[:3]
        return type(self)(f"{major}.{minor}.{patch}")

    def equal_segments(self, other: "Version") -> bool:
        """Tell whether both versions have identical numeric segments."""
        return self._segments == other._segments

    @property
    def metadata(self) -> str:
        """Build metadata: whatever follows the ``+``."""
        return self._metadata

    @property
    def prerelease(self) -> str:
        """Prerelease information, or an empty string."""
        return self._prerelease

    @property
    def segments(self) -> tuple[int, ...]:
        """The numeric segments, padded to at least three."""
        return self._segments

    @property
    def original(self) -> str:
        """The text the version was parsed from, unchanged."""
        return self._original

    def __str__(self) -> str:
        text = ".".join(str(segment) for segment in self._segments)
        if self._prerelease:
            text += f"-{self._prerelease}"
        if self._metadata:
            text += f"+{self._metadata}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._original!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Equal versions always share their segments up to trailing zeros.
        trimmed = list(self._segments)
        while trimmed and trimmed[-1] == 0:
            trimmed.pop()
        return hash(tuple(trimmed))


def parse_version(text: str) -> Version:
    """Parse a version leniently."""
    return Version.parse(text)


def parse_semver(text: str) -> Version:
    """Parse a version that strictly follows SemVer."""
    return Version.parse_semver(text)


def _compare_part(left: str, right: str) -> int:
    if left == right:
        return 0

    left_int = _parse_int64(left)
    right_int = _parse_int64(right)
    left_numeric = left_int is not None
    right_numeric = right_int is not None

    if not left:
        return -1 if right_numeric else 1
    if not right:
        return 1 if left_numeric else -1

    if left_numeric and not right_numeric:
        return -1
    if right_numeric and not left_numeric:
        return 1
    if not left_numeric and not right_numeric:
        return 1 if left > right else -1
    return 1 if left_int > right_int else -1


def compare_prereleases(left: str, right: str) -> int:
    """Compare two prerelease strings part by part."""
    if left == right:
        return 0
    for mine, theirs in zip_longest(left.split("."), right.split("."), fillvalue=""):
        result = _compare_part(mine, theirs)
        if result:
            return result
    return 0


def sort_versions(versions: Iterable[Version]) -> list[Version]:
    """Return the versions in ascending order."""
    return sorted(versions)