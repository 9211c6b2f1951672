# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import random
from typing import Any, get_type_hints

import pytest

from strict_semver import (
    PRECEDENCE,
    PRECEDENCE_WITH_BUILD,
    InvalidVersionError,
    parse_version,
    compare_versions,
    compare_with_build,
    sort_versions,
    version_build_key,
    version_key,
)
from strict_semver.precedence import compare_build_tiebreak, compare_precedence

SEMVER_ORDER = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexical_core(self):
        """Test that core components compare as numbers."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_big_integer_core(self):
        """Test comparison beyond 64-bit range."""
        assert compare_versions("18446744073709551616.0.0", "18446744073709551615.0.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b.c") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("2.0.0")
        assert compare_versions(v1, v2) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings are rejected."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_semver_ordering_chain(self):
        """Test the ordering example from the SemVer document."""
        for i in range(len(SEMVER_ORDER)):
            for j in range(len(SEMVER_ORDER)):
                expected = (i > j) - (i < j)
                assert compare_versions(SEMVER_ORDER[i], SEMVER_ORDER[j]) == expected, (
                    f"{SEMVER_ORDER[i]} vs {SEMVER_ORDER[j]}"
                )

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1  # Numeric comparison

    def test_numeric_lower_than_alphanumeric(self):
        """Test that numeric identifiers sort before alphanumeric ones."""
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-a", "1.0.0-999") == 1
        assert compare_versions("1.0.0-1", "1.0.0-1a") == -1

    def test_ascii_order(self):
        """Test that alphanumeric identifiers compare by ASCII value."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0--", "1.0.0-0a") == -1
        assert compare_versions("1.0.0-rc10", "1.0.0-rc9") == -1

    def test_longer_prerelease_wins_on_tie(self):
        """Test that more identifiers means higher precedence."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.0") == -1
        assert compare_versions("1.0.0-a.b.c", "1.0.0-a.b") == 1

    def test_big_integer_prerelease(self):
        """Test numeric identifiers beyond 64-bit range."""
        assert compare_versions("1.0.0-99999999999999999999", "1.0.0-100000000000000000000") == -1


class TestVersionOperators:
    """Tests for rich comparison on Version."""

    def test_operators_follow_precedence(self):
        """Test <, <=, >, >= on Version objects."""
        a = parse_version("1.0.0-rc.1")
        b = parse_version("1.0.0")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert not b < a

    def test_build_only_difference(self):
        """Test versions equal in precedence but not in identity."""
        a = parse_version("1.0.0+a")
        b = parse_version("1.0.0+b")
        assert not a < b
        assert not a > b
        assert a <= b
        assert a >= b
        assert a != b

    def test_comparison_with_other_types(self):
        """Test that ordering against non-versions is unsupported."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # noqa: B015

    def test_sorted_and_max(self):
        """Test that builtins use precedence."""
        versions = [parse_version(v) for v in SEMVER_ORDER]
        shuffled = versions[:]
        random.Random(7).shuffle(shuffled)
        assert sorted(shuffled) == versions
        assert max(shuffled) == parse_version("1.0.0")


class TestComparatorValues:
    """Tests for PRECEDENCE and PRECEDENCE_WITH_BUILD."""

    def test_precedence_ignores_build(self):
        """Test that PRECEDENCE ignores build metadata."""
        a = parse_version("1.2.3+a")
        b = parse_version("1.2.3+b")
        assert PRECEDENCE(a, b) == 0
        assert a != b

    def test_precedence_with_build_respects_precedence(self):
        """Test that build never overrides precedence."""
        a = parse_version("1.2.3+zzz")
        b = parse_version("1.2.4+aaa")
        assert PRECEDENCE_WITH_BUILD(a, b) < 0

    def test_precedence_with_build_tiebreak(self):
        """Test build tiebreak and antisymmetry."""
        c = parse_version("1.2.3+b")
        d = parse_version("1.2.3+a")
        cd = PRECEDENCE_WITH_BUILD(c, d)
        assert cd > 0
        assert PRECEDENCE_WITH_BUILD(d, c) == -cd

    def test_numeric_build_identifiers(self):
        """Test that numeric build identifiers compare by value."""
        assert compare_with_build("1.0.0+9", "1.0.0+10") == -1
        assert compare_with_build("1.0.0+009", "1.0.0+9") == 0
        assert compare_with_build("1.0.0+build.2", "1.0.0+build.11") == -1

    def test_mixed_build_identifiers_compare_as_text(self):
        """Test that numeric vs alphanumeric build identifiers compare lexically."""
        assert compare_with_build("1.0.0+10", "1.0.0+1a") == -1
        # "-" sorts before digits as text; pre-release rules would put "1" first.
        assert compare_with_build("1.0.0+1", "1.0.0+-") == 1
        assert compare_versions("1.0.0-1", "1.0.0--") == -1
        assert compare_with_build("1.0.0+a", "1.0.0+1") == 1

    def test_shorter_build_is_lesser(self):
        """Test that fewer build identifiers sort first on tie."""
        assert compare_with_build("1.0.0", "1.0.0+0") == -1
        assert compare_with_build("1.0.0+a.b", "1.0.0+a") == 1

    def test_identical_versions(self):
        """Test that identical versions tie."""
        assert compare_with_build("1.0.0-rc.1+sha.5", "1.0.0-rc.1+sha.5") == 0


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        shuffled = SEMVER_ORDER[:]
        random.Random(42).shuffle(shuffled)
        assert sorted(shuffled, key=version_key) == SEMVER_ORDER

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2

    def test_sorting_is_stable_for_build_only_differences(self):
        """Test that version_key keeps input order for precedence ties."""
        versions = ["1.0.0+b", "1.0.0+a"]
        assert sorted(versions, key=version_key) == versions

    def test_build_key(self):
        """Test that version_build_key orders by build on ties."""
        versions = ["1.0.0+b", "1.0.0+a", "0.9.0+z", "1.0.0"]
        assert sorted(versions, key=version_build_key) == ["0.9.0+z", "1.0.0", "1.0.0+a", "1.0.0+b"]


class TestSortVersions:
    """Tests for sort_versions function."""

    def test_sort_strings(self):
        """Test sorting mixed input into Version objects."""
        result = sort_versions(["1.0.0", parse_version("1.0.0-rc.1"), "0.1.0"])
        assert [str(v) for v in result] == ["0.1.0", "1.0.0-rc.1", "1.0.0"]

    def test_sort_reverse_with_build(self):
        """Test descending sort with build tiebreak."""
        result = sort_versions(["1.0.0+1", "1.0.0+2", "1.0.0"], with_build=True, reverse=True)
        assert [str(v) for v in result] == ["1.0.0+2", "1.0.0+1", "1.0.0"]


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a = "1.0.0-alpha"
        b = "1.0.0-beta"
        c = "1.0.0"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0+build"]
        for v in versions:
            assert compare_versions(v, v) == 0
            assert compare_with_build(v, v) == 0


class TestPrecedenceModule:
    """Tests for the precedence rules used by both Version and compare."""

    def test_comparator_values_are_shared(self):
        """Test that the exported comparators are the precedence functions."""
        assert PRECEDENCE is compare_precedence
        assert PRECEDENCE_WITH_BUILD is compare_build_tiebreak

    def test_operators_agree_with_precedence(self):
        """Test that Version operators use the same rules."""
        versions = [parse_version(v) for v in SEMVER_ORDER + ["1.0.0+b", "0.9.0+a"]]
        for a in versions:
            for b in versions:
                result = compare_precedence(a, b)
                assert (a < b) == (result < 0)
                assert (a >= b) == (result >= 0)

    def test_key_functions_are_annotated(self):
        """Test that both sort key helpers declare their return type."""
        assert get_type_hints(version_key)["return"] is Any
        assert get_type_hints(version_build_key)["return"] is Any
