"""Semantic version parsing and precedence, per https://semver.org."""

import re
from dataclasses import dataclass, field
from functools import total_ordering

from .util import InvalidVersionFormat

SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*))*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$",
    re.ASCII,
)


def _prerelease_key(identifiers: tuple[str, ...]) -> tuple:
    # Numeric identifiers sort before alphanumeric ones.
    return tuple(
        (0, int(i), "") if i.isdigit() else (1, 0, i) for i in identifiers
    )


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """An immutable semantic version.

    Build metadata is kept for display but takes no part in comparisons.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    def _key(self) -> tuple:
        # A release outranks any prerelease of the same triple.
        return (
            self.major, self.minor, self.patch,
            not self.prerelease, _prerelease_key(self.prerelease),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            s += "-" + ".".join(self.prerelease)
        if self.build:
            s += "+" + ".".join(self.build)
        return s


def parse_version(value: str) -> Version:
    """Parse a semver string.

    :param value: The candidate version string. It's not trimmed.
    :raises InvalidVersionFormat: if ``value`` isn't a valid semver string.
    :return: The parsed `Version`.
    """
    if (match := SEMVER_RE.fullmatch(value)) is None:
        raise InvalidVersionFormat(value)

    major, minor, patch, prerelease, build = match.groups()
    return Version(
        int(major), int(minor), int(patch),
        tuple(prerelease.split(".")) if prerelease else (),
        tuple(build.split(".")) if build else (),
    )
