# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Two orderings are provided:

- precedence (``compare_versions``/``PRECEDENCE``): the SemVer order, which
  ignores build metadata
- precedence with build (``compare_with_build``/``PRECEDENCE_WITH_BUILD``): a
  deterministic tiebreak that also looks at build metadata, for stable
  display or storage ordering. It is not part of SemVer.

Both return -1, 0 or 1. Use the ``*_key`` wrappers with ``sorted``.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Sequence, Union

from .precedence import compare_build_tiebreak, compare_precedence
from .semver import Version, parse_version

Comparator = Callable[[Version, Version], int]


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return compare_precedence(_coerce(version1), _coerce(version2))


def compare_with_build(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions by precedence, breaking ties with build metadata.

    This is a deterministic ordering aid only; it does not change SemVer
    semantics.

    Examples:
        >>> compare_with_build("1.0.0+build.1", "1.0.0+build.2")
        -1
        >>> compare_with_build("1.0.0+exp", "1.0.0")
        1
    """
    return compare_build_tiebreak(_coerce(version1), _coerce(version2))


# Reusable comparator values
PRECEDENCE: Comparator = compare_precedence
PRECEDENCE_WITH_BUILD: Comparator = compare_build_tiebreak

_PrecedenceKey = cmp_to_key(compare_precedence)
_BuildKey = cmp_to_key(compare_build_tiebreak)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        An object ordering like the version's SemVer precedence

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _PrecedenceKey(_coerce(version))


def version_build_key(version: Union[str, Version]) -> Any:
    """Like :func:`version_key`, but ties are broken by build metadata."""
    return _BuildKey(_coerce(version))


def sort_versions(
    versions: Sequence[Union[str, Version]], *, with_build: bool = False, reverse: bool = False
) -> list[Version]:
    """Parse (where needed) and sort versions.

    Examples:
        >>> [str(v) for v in sort_versions(["1.0.0", "2.0.0", "1.0.0-alpha"])]
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    key = version_build_key if with_build else version_key
    return sorted((_coerce(v) for v in versions), key=key, reverse=reverse)
