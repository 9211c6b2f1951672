# SPDX-License-Identifier: MIT
"""Semantic version value type and parsing entry points.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +001, +exp.sha.5114f85

Core components are unbounded non-negative integers. Equality and hashing
include build metadata; ordering (``<``, ``>``, ...) follows SemVer
precedence and ignores it, so two versions can be neither less nor greater
than each other and still be unequal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ._numeric import int_to_digits
from .errors import InvalidVersionError, NegativeComponentError
from .parser import parse_components, validate_build_identifier, validate_prerelease_identifier
from .precedence import compare_precedence


def _identifiers(name: str, values: Optional[Iterable[str]]) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of identifiers, not a string")
    identifiers = tuple(values)
    for identifier in identifiers:
        if not isinstance(identifier, str):
            raise TypeError(f"{name} identifiers must be strings, got {type(identifier).__name__}")
    return identifiers


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a validated semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), empty for releases
        build: Build metadata identifiers (e.g., ("build", "123")), never used for precedence
        canonical: Cached canonical string form
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    canonical: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise NegativeComponentError(name, value)

        prerelease = _identifiers("prerelease", self.prerelease)
        build = _identifiers("build", self.build)
        for identifier in prerelease:
            validate_prerelease_identifier(identifier)
        for identifier in build:
            validate_build_identifier(identifier)

        object.__setattr__(self, "prerelease", prerelease)
        object.__setattr__(self, "build", build)
        object.__setattr__(self, "canonical", self._render())

    @classmethod
    def of(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Optional[Iterable[str]] = None,
        build: Optional[Iterable[str]] = None,
    ) -> Version:
        """Build a version from its components.

        ``None`` identifier sequences are treated as empty. Identifiers go
        through the same checks as the string parser.

        Raises:
            NegativeComponentError: If major, minor or patch is negative
            InvalidVersionError: If an identifier is invalid
        """
        return cls(
            major,
            minor,
            patch,
            _identifiers("prerelease", prerelease),
            _identifiers("build", build),
        )

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Alias for :func:`parse_version`."""
        return parse_version(version_string)

    def _render(self) -> str:
        version = ".".join(int_to_digits(n) for n in (self.major, self.minor, self.patch))
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self.canonical

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(int_to_digits(n) for n in (self.major, self.minor, self.patch))

    def bump_major(self) -> Version:
        """Return the next major release, e.g. 1.2.3-rc.1 -> 2.0.0."""
        return Version(self.major + 1, 0, 0)

    def bump_minor(self) -> Version:
        """Return the next minor release, e.g. 1.2.3-rc.1 -> 1.3.0."""
        return Version(self.major, self.minor + 1, 0)

    def bump_patch(self) -> Version:
        """Return the next patch release, e.g. 1.2.3-rc.1 -> 1.2.4."""
        return Version(self.major, self.minor, self.patch + 1)

    def _precedence(self, other: object) -> int:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other)

    def __lt__(self, other: object) -> bool:
        result = self._precedence(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other: object) -> bool:
        result = self._precedence(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._precedence(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._precedence(other)
        return result if result is NotImplemented else result >= 0


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning.
            The concrete subclass names the first rule violated.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build=('build', '456'))
    """
    components = parse_components(version_string)
    return Version(*components)


def try_parse(version_string: Optional[str]) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse("1.0.0")
        Version(major=1, minor=0, patch=0, prerelease=(), build=())
        >>> try_parse("not-a-version") is None
        True
    """
    if version_string is None:
        return None
    try:
        return parse_version(version_string)
    except InvalidVersionError:
        return None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return try_parse(version_string) is not None
