# SPDX-License-Identifier: MIT
"""Exception types raised while parsing or constructing versions.

Every rejection maps to exactly one subclass of InvalidVersionError so
callers can branch on the violated rule, or catch the base class to treat
all invalid input alike.
"""

from __future__ import annotations

from typing import Optional

from ._numeric import int_to_digits


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class EmptyInputError(InvalidVersionError):
    """The input is empty after stripping surrounding whitespace."""

    def __init__(self, version: str):
        super().__init__(version, "Version string cannot be empty")


class InvalidCoreArityError(InvalidVersionError):
    """The core section is not exactly three dot-separated pieces."""

    def __init__(self, version: str, core: str):
        self.fragment = core
        super().__init__(
            version,
            "Core version must be three dot-separated numeric identifiers "
            f"'major.minor.patch' (found: '{core}')",
        )


class CoreNotNumericError(InvalidVersionError):
    """A core component is empty or contains a non-digit."""

    def __init__(self, version: str, component: str, fragment: str):
        self.component = component
        self.fragment = fragment
        if fragment:
            message = f"{component} component must be numeric: '{fragment}'"
        else:
            message = f"{component} component is missing"
        super().__init__(version, message)


class CoreLeadingZeroError(InvalidVersionError):
    """A core component has a leading zero."""

    def __init__(self, version: str, component: str, fragment: str):
        self.component = component
        self.fragment = fragment
        super().__init__(
            version, f"{component} component must not contain leading zeros: '{fragment}'"
        )


class EmptyPrereleaseSectionError(InvalidVersionError):
    """A '-' is present with nothing after it."""

    def __init__(self, version: str):
        self.section = "prerelease"
        super().__init__(version, f"Empty prerelease part after '-' in version: '{version}'")


class EmptyBuildSectionError(InvalidVersionError):
    """A '+' is present with nothing after it."""

    def __init__(self, version: str):
        self.section = "build"
        super().__init__(version, f"Empty build metadata part after '+' in version: '{version}'")


class EmptyIdentifierError(InvalidVersionError):
    """An identifier between dots is empty."""

    def __init__(self, version: str, section: str, position: Optional[int] = None):
        self.section = section
        self.position = position
        message = f"Empty identifier in {section} part"
        if position is not None:
            message += f" at position {position}"
        super().__init__(version, message)


class InvalidCharactersError(InvalidVersionError):
    """An identifier contains characters outside [0-9A-Za-z-]."""

    def __init__(self, version: str, section: str, fragment: str):
        self.section = section
        self.fragment = fragment
        super().__init__(
            version, f"{section.capitalize()} identifier contains invalid characters: '{fragment}'"
        )


class PrereleaseLeadingZeroError(InvalidVersionError):
    """A numeric prerelease identifier has a leading zero."""

    def __init__(self, version: str, fragment: str):
        self.section = "prerelease"
        self.fragment = fragment
        super().__init__(
            version,
            f"Numeric prerelease identifier must not contain leading zeros: '{fragment}'",
        )


class NegativeComponentError(InvalidVersionError):
    """A major, minor or patch value passed to Version.of is negative."""

    def __init__(self, component: str, value: int):
        self.component = component
        self.value = value
        rendered = int_to_digits(value)
        super().__init__(rendered, f"{component} must be non-negative, got {rendered}")
