# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and precedence.

These tests verify that:
- Rendering a parsed version reproduces the input string
- Precedence is a total order (reflexive, antisymmetric, transitive)
- Build metadata affects equality but never precedence
- version_key agrees with compare_versions
- Derived versions never alter their source
"""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from semver_value import (
    MAX_COMPONENT,
    Version,
    compare_versions,
    is_valid_semver,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=MAX_COMPONENT)

# Small numbers so that generated versions collide often enough to hit the
# pre-release comparison paths
small_components = st.integers(min_value=0, max_value=3)

numeric_identifiers = st.from_regex(r"0|[1-9][0-9]{0,3}", fullmatch=True)
alphanumeric_identifiers = st.from_regex(r"[0-9]{0,2}[a-zA-Z-][0-9a-zA-Z-]{0,4}", fullmatch=True)
prerelease_identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)
build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,6}", fullmatch=True)

prereleases = st.none() | st.lists(prerelease_identifiers, min_size=1, max_size=4).map(".".join)
builds = st.none() | st.lists(build_identifiers, min_size=1, max_size=3).map(".".join)


@st.composite
def versions(draw, numbers=components):
    """Generate a valid Version."""
    return Version(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        prerelease=draw(prereleases),
        build=draw(builds),
    )


close_versions = versions(numbers=small_components)


# =============================================================================
# Round trip
# =============================================================================


@given(versions())
def test_render_parse_round_trip(version):
    """Parsing the rendered string gives back an equal version."""
    text = str(version)
    assert is_valid_semver(text)
    parsed = parse_version(text)
    assert parsed == version
    assert str(parsed) == text


# =============================================================================
# Total order laws
# =============================================================================


@given(close_versions)
def test_reflexive(a):
    assert compare_versions(a, a) == 0


@given(close_versions, close_versions)
def test_antisymmetric(a, b):
    assert compare_versions(a, b) == -compare_versions(b, a)


@settings(max_examples=300)
@given(close_versions, close_versions, close_versions)
def test_transitive(a, b, c):
    if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
        assert compare_versions(a, c) <= 0


@given(close_versions, close_versions)
def test_operators_match_compare(a, b):
    result = compare_versions(a, b)
    assert (a < b) == (result < 0)
    assert (a <= b) == (result <= 0)
    assert (a > b) == (result > 0)
    assert (a >= b) == (result >= 0)


@given(close_versions, close_versions)
def test_version_key_agrees_with_compare(a, b):
    result = compare_versions(a, b)
    key_a, key_b = version_key(a), version_key(b)
    expected = (key_a > key_b) - (key_a < key_b)
    assert result == expected


@given(close_versions)
def test_release_outranks_its_prereleases(version):
    assume(version.prerelease is not None)
    release = version.with_prerelease(None)
    assert compare_versions(version, release) == -1


# =============================================================================
# Build metadata
# =============================================================================


@given(versions(), builds, builds)
def test_build_metadata_irrelevant_to_precedence(version, build1, build2):
    assume(build1 != build2)
    a = version.with_build(build1)
    b = version.with_build(build2)
    assert compare_versions(a, b) == 0
    assert a != b


# =============================================================================
# Immutability
# =============================================================================


@given(versions(numbers=st.integers(min_value=0, max_value=10**6)), prereleases)
def test_derived_versions_leave_source_unchanged(version, prerelease):
    before = str(version)
    version.increment_major()
    version.increment_minor()
    version.increment_patch()
    version.with_prerelease(prerelease)
    version.with_build(None)
    version.with_major(0)
    assert str(version) == before


@given(versions(numbers=st.integers(min_value=0, max_value=10**6)))
def test_increments_strip_suffixes(version):
    for bumped in (version.increment_major(), version.increment_minor(), version.increment_patch()):
        assert bumped.prerelease is None
        assert bumped.build is None
        assert compare_versions(bumped, version) == 1
