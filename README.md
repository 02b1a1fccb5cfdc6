# verconstraint

Parse version strings, compare and sort them, and check them against
constraints. The package has no dependencies outside the standard library.

## Installing

```
pip install verconstraint
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "verconstraint[test]"
pytest
```

## Versions

```python
from verconstraint.version import Version, parse_version, parse_semver, sort_versions

v = parse_version("v1.2-beta+build")
str(v)            # "1.2.0-beta+build"
v.original        # "v1.2-beta+build"
v.segments        # (1, 2, 0)
v.prerelease      # "beta"
v.metadata        # "build"
str(v.core())     # "1.2.0"

parse_version("1.2") > parse_version("1.2-beta")      # True
parse_version("1.2.0.0") == parse_version("1.2")      # True
parse_version("1.2") < parse_version("1.2.0.0.1")     # True
parse_version("1.2.3").compare(parse_version("1.4.5"))  # -1

[str(x) for x in sort_versions(map(parse_version, ["1.1.1", "1.0", "2", "0.7.1"]))]
# ["0.7.1", "1.0.0", "1.1.1", "2.0.0"]
```

`parse_version` (also `Version.parse` or `Version(text)`) is lenient. It
accepts a leading `v`, fewer than three segments and a pre-release written
straight after the numbers (`1.7rc2`). `parse_semver` (also
`Version.parse_semver` or `Version(text, strict=True)`) requires a `-`
before the pre-release. A string that neither accepts raises
`VersionError`, a subclass of `ValueError`. So does a segment that does
not fit in a signed 64-bit integer.

Segments are padded with zeros to at least three, and `str()` gives the
canonical form: `17.03.0-ce` becomes `17.3.0-ce`. `original` keeps the
text exactly as it was given.

`compare` returns -1, 0 or 1, and the comparison operators follow it.
The build metadata after `+` plays no part in comparison. Trailing zero
segments do not count either, so `1.2` equals `1.2.0.0`. A version with
a pre-release sorts before the same version without one. Two pre-releases
are compared by `compare_prereleases`, one dot-separated part at a time:
numbers as numbers, numbers before words, and words in byte order.
Versions are hashable, and equal versions hash alike.

## Constraints

```python
from verconstraint.constraint import parse_constraints
from verconstraint.version import parse_version

c = parse_constraints(">= 1.0, < 1.2")
c.check(parse_version("1.1.5"))   # True
len(c)                            # 2
str(c)                            # ">= 1.0, < 1.2"
```

A constraint string is a comma-separated list. `parse_constraints` (also
`Constraints.parse`) returns a `Constraints`, which can be iterated and
indexed. Each entry is a `Constraint` with `operator`, `version` and
`original` fields. `check` succeeds only if every entry holds. The
operators are `=` (also written as nothing), `!=`, `>`, `<`, `>=`, `<=`
and `~>`. They appear as the members of the `Operator` enum.

`~>` is the pessimistic operator. It lets the last segment given rise,
with all the segments before it fixed. `~> 1.0` matches `1.1` and
`1.2.3` but not `2.0`. `~> 1.0.7` matches `1.0.8` but not `1.1.0`.

A pre-release version matches an ordering constraint only if the
constraint names a pre-release with the same segments. `>= 2.1.0-a`
matches `2.1.0-beta` but not `2.1.1-beta`. A `~>` constraint with a
pre-release matches only pre-releases. `Constraint.prerelease` tells
whether a constraint names a pre-release. A malformed constraint, or one
whose version cannot be parsed, raises `ConstraintError`, a subclass of
`ValueError`.

`Constraints.equals` compares two lists and ignores their order and
whitespace. It does not test logical equivalence: `>0.1,>0.2` is not
equal to `>0.2`. `Constraints.sort` orders the entries in place, first
by operator and then by version, and `Constraint.sort_key` gives that key.

## What it does not do

The package is a library only. It has no command-line tool. It has no
hooks for JSON or database serialisation either: to store a version, save
`str(version)` and read it back with `parse_version`.