# SPDX-License-Identifier: MIT
"""Strict SemVer 2.0.0 string parsing without a monolithic pattern.

The input is split once, left to right, into its core, prerelease and build
sections. Each section is then validated piece by piece so that the first
violated rule can be reported precisely:

- core: exactly three numeric components, no leading zeros
- prerelease: [0-9A-Za-z-] identifiers, numeric ones without leading zeros
- build: [0-9A-Za-z-] identifiers, leading zeros allowed
"""

from __future__ import annotations

import string
from typing import NamedTuple, Optional

from ._numeric import digits_to_int, has_leading_zero, is_numeric
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
    PrereleaseLeadingZeroError,
)

IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")

_CORE_NAMES = ("major", "minor", "patch")

# Surrounding characters trimmed from input: ASCII control characters and space.
_TRIM_CHARACTERS = "".join(map(chr, range(0x21)))


class Sections(NamedTuple):
    """Raw sections of a version string, before validation."""

    core: str
    prerelease: Optional[str]
    build: Optional[str]


class ParsedComponents(NamedTuple):
    """Validated components of a version string."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...]
    build: tuple[str, ...]


def is_identifier(text: str) -> bool:
    """Return True if text is a non-empty run of [0-9A-Za-z-]."""
    return bool(text) and all(char in IDENTIFIER_CHARACTERS for char in text)


def split_sections(text: str) -> Sections:
    """Split a stripped, non-empty version string into its three sections.

    Only the first '+' is structural. The prerelease '-' is searched for
    before it, since identifiers themselves may contain hyphens.

    Raises:
        EmptyBuildSectionError: '+' with nothing after it
        EmptyPrereleaseSectionError: '-' with nothing after it
    """
    remainder, plus, build = text.partition("+")
    if plus and not build:
        raise EmptyBuildSectionError(text)

    core, dash, prerelease = remainder.partition("-")
    if dash and not prerelease:
        raise EmptyPrereleaseSectionError(text)

    return Sections(
        core=core,
        prerelease=prerelease if dash else None,
        build=build if plus else None,
    )


def parse_core_number(piece: str, component: str, version: str = "") -> int:
    """Validate and convert one of the major/minor/patch pieces."""
    if not is_numeric(piece):
        raise CoreNotNumericError(version or piece, component, piece)
    if has_leading_zero(piece):
        raise CoreLeadingZeroError(version or piece, component, piece)
    return digits_to_int(piece)


def validate_prerelease_identifier(identifier: str, version: str = "") -> None:
    """Check a single prerelease identifier.

    Raises:
        EmptyIdentifierError: identifier is empty
        InvalidCharactersError: characters outside [0-9A-Za-z-]
        PrereleaseLeadingZeroError: numeric identifier with a leading zero
    """
    version = version or identifier
    if not identifier:
        raise EmptyIdentifierError(version, "prerelease")
    if not is_identifier(identifier):
        raise InvalidCharactersError(version, "prerelease", identifier)
    if is_numeric(identifier) and has_leading_zero(identifier):
        raise PrereleaseLeadingZeroError(version, identifier)


def validate_build_identifier(identifier: str, version: str = "") -> None:
    """Check a single build identifier. Leading zeros are allowed here."""
    version = version or identifier
    if not identifier:
        raise EmptyIdentifierError(version, "build")
    if not is_identifier(identifier):
        raise InvalidCharactersError(version, "build", identifier)


def _split_identifiers(section: str, name: str, version: str) -> tuple[str, ...]:
    if name == "prerelease":
        validate = validate_prerelease_identifier
    else:
        validate = validate_build_identifier
    identifiers = section.split(".")
    for position, identifier in enumerate(identifiers):
        if not identifier:
            raise EmptyIdentifierError(version, name, position)
        validate(identifier, version)
    return tuple(identifiers)


def parse_components(text: str) -> ParsedComponents:
    """Parse a version string into validated components.

    Args:
        text: Version string; surrounding spaces and ASCII control characters
            are ignored (other Unicode whitespace is not)

    Returns:
        ParsedComponents with integer core values and identifier tuples

    Raises:
        InvalidVersionError: subclass naming the first violated rule
    """
    if not isinstance(text, str):
        raise InvalidVersionError(
            str(text), f"Version must be a string, got {type(text).__name__}"
        )

    text = text.strip(_TRIM_CHARACTERS)
    if not text:
        raise EmptyInputError(text)

    sections = split_sections(text)

    pieces = sections.core.split(".")
    if len(pieces) != 3:
        raise InvalidCoreArityError(text, sections.core)
    major, minor, patch = (
        parse_core_number(piece, name, text) for piece, name in zip(pieces, _CORE_NAMES)
    )

    prerelease: tuple[str, ...] = ()
    if sections.prerelease is not None:
        prerelease = _split_identifiers(sections.prerelease, "prerelease", text)

    build: tuple[str, ...] = ()
    if sections.build is not None:
        build = _split_identifiers(sections.build, "build", text)

    return ParsedComponents(major, minor, patch, prerelease, build)
