# SPDX-License-Identifier: MIT
"""Strict SemVer 2.0.0 parsing, validation and comparison.

This package parses version strings without regex leniency, reports the
exact rule an invalid string breaks, and orders versions by SemVer
precedence. Equality includes build metadata; precedence does not.

Example:
    >>> from strict_semver import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    CoreLeadingZeroError,
    CoreNotNumericError,
    EmptyBuildSectionError,
    EmptyIdentifierError,
    EmptyInputError,
    EmptyPrereleaseSectionError,
    InvalidCharactersError,
    InvalidCoreArityError,
    InvalidVersionError,
    NegativeComponentError,
    PrereleaseLeadingZeroError,
)
from .semver import (
    Version,
    parse_version,
    try_parse,
    is_valid_semver,
)
from .compare import (
    PRECEDENCE,
    PRECEDENCE_WITH_BUILD,
    compare_versions,
    compare_with_build,
    sort_versions,
    version_build_key,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "try_parse",
    "is_valid_semver",
    # Errors
    "InvalidVersionError",
    "EmptyInputError",
    "InvalidCoreArityError",
    "CoreNotNumericError",
    "CoreLeadingZeroError",
    "EmptyPrereleaseSectionError",
    "EmptyBuildSectionError",
    "EmptyIdentifierError",
    "InvalidCharactersError",
    "PrereleaseLeadingZeroError",
    "NegativeComponentError",
    # Version comparison
    "PRECEDENCE",
    "PRECEDENCE_WITH_BUILD",
    "compare_versions",
    "compare_with_build",
    "sort_versions",
    "version_key",
    "version_build_key",
]
