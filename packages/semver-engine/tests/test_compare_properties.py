# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering.

These tests verify that:
- compare_versions is a total order over arbitrary strings
- Numeric components are ordered as integers, not text
- sort_versions, max_version and min_version agree with compare_versions
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_engine import (
    compare_versions,
    is_equal,
    max_version,
    min_version,
    parse_version,
    sort_versions,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=30)
identifiers = st.one_of(
    st.integers(min_value=0, max_value=20).map(str),
    st.from_regex(r"[0-9A-Za-z-]{1,6}", fullmatch=True),
)


@st.composite
def version_strings(draw):
    """Generate version-like strings, including partial and decorated ones."""
    core = draw(st.lists(components, min_size=1, max_size=3))
    version = ".".join(str(c) for c in core)
    if draw(st.booleans()):
        version = "v" + version
    if draw(st.booleans()):
        version += "-" + ".".join(draw(st.lists(identifiers, min_size=1, max_size=3)))
    if draw(st.booleans()):
        version += "+" + draw(st.from_regex(r"[0-9A-Za-z.-]{1,8}", fullmatch=True))
    return version


any_version = st.one_of(version_strings(), st.text(max_size=20))


# =============================================================================
# Order properties
# =============================================================================


class TestOrderProperties:
    """compare_versions behaves as a total order."""

    @given(a=any_version)
    @settings(max_examples=200)
    def test_reflexivity(self, a: str):
        assert compare_versions(a, a) == 0

    @given(a=any_version, b=any_version)
    @settings(max_examples=300)
    def test_antisymmetry(self, a: str, b: str):
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=version_strings(), b=version_strings(), c=version_strings())
    @settings(max_examples=300)
    def test_transitivity(self, a: str, b: str, c: str):
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0

    @given(a=any_version, b=any_version)
    @settings(max_examples=200)
    def test_result_range(self, a: str, b: str):
        assert compare_versions(a, b) in (-1, 0, 1)

    @given(a=version_strings(), build=st.from_regex(r"[0-9A-Za-z.]{1,8}", fullmatch=True))
    @settings(max_examples=100)
    def test_build_metadata_never_matters(self, a: str, build: str):
        base = a.split("+", 1)[0]
        assert compare_versions(base, f"{base}+{build}") == 0


class TestNumericOrdering:
    """Core components order as integers."""

    @given(x=components, y=components)
    @settings(max_examples=100)
    def test_major_ordered_as_integer(self, x: int, y: int):
        expected = (x > y) - (x < y)
        assert compare_versions(f"{x}.0.0", f"{y}.0.0") == expected

    @given(x=components, y=components)
    @settings(max_examples=100)
    def test_prerelease_number_ordered_as_integer(self, x: int, y: int):
        expected = (x > y) - (x < y)
        assert compare_versions(f"1.0.0-rc.{x}", f"1.0.0-rc.{y}") == expected

    @given(a=version_strings())
    @settings(max_examples=100)
    def test_release_above_own_prereleases(self, a: str):
        v = parse_version(a)
        if v.is_prerelease:
            assert compare_versions(v.base_version, a) == 1


class TestDerivedOperations:
    """sort_versions, max_version and min_version agree with compare_versions."""

    @given(versions=st.lists(version_strings(), max_size=12))
    @settings(max_examples=150)
    def test_sorted_output_is_ordered(self, versions: list[str]):
        result = sort_versions(versions)
        assert sorted(result) == sorted(versions)
        for left, right in zip(result, result[1:]):
            assert compare_versions(left, right) <= 0

    @given(versions=st.lists(version_strings(), max_size=12))
    @settings(max_examples=150)
    def test_descending_output_is_ordered(self, versions: list[str]):
        result = sort_versions(versions, descending=True)
        for left, right in zip(result, result[1:]):
            assert compare_versions(left, right) >= 0

    @given(a=version_strings(), b=version_strings())
    @settings(max_examples=150)
    def test_min_max_symmetric_in_value(self, a: str, b: str):
        assert is_equal(max_version(a, b), max_version(b, a))
        assert is_equal(min_version(a, b), min_version(b, a))

    @given(a=version_strings(), b=version_strings())
    @settings(max_examples=150)
    def test_max_not_below_min(self, a: str, b: str):
        assert compare_versions(max_version(a, b), min_version(a, b)) >= 0
