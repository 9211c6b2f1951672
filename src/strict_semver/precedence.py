# SPDX-License-Identifier: MIT
"""SemVer precedence and build tiebreak rules over Version values.

These take parsed versions only; compare.py adds string input and sort keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ._numeric import compare_numeric, is_numeric

if TYPE_CHECKING:
    from .semver import Version


def _compare_text(a: str, b: str) -> int:
    # Identifiers are ASCII, so code point order is byte order.
    if a != b:
        return -1 if a < b else 1
    return 0


def _compare_prerelease(pre1: Sequence[str], pre2: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        is_num1 = is_numeric(p1)
        is_num2 = is_numeric(p2)

        if is_num1 and is_num2:
            result = compare_numeric(p1, p2)
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        else:
            result = _compare_text(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1
    return 0


def _compare_build(build1: Sequence[str], build2: Sequence[str]) -> int:
    """Compare build metadata for tiebreaking.

    Numeric identifiers compare by value only when both sides are numeric;
    any other pair compares as text. Unlike pre-release ordering there is
    no "numeric sorts first" rule.
    """
    for b1, b2 in zip(build1, build2):
        if is_numeric(b1) and is_numeric(b2):
            result = compare_numeric(b1, b2)
        else:
            result = _compare_text(b1, b2)
        if result:
            return result

    if len(build1) != len(build2):
        return -1 if len(build1) < len(build2) else 1
    return 0


def compare_precedence(v1: Version, v2: Version) -> int:
    """Compare two Version objects by SemVer precedence."""
    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    # Compare pre-release (build metadata is ignored)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def compare_build_tiebreak(v1: Version, v2: Version) -> int:
    """Compare two Version objects by precedence, then by build metadata."""
    result = compare_precedence(v1, v2)
    if result:
        return result
    return _compare_build(v1.build, v2.build)

