"""Semantic versions of dialog programs, comparable with plain tuples."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_SEMVER = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)


@dataclass(frozen=True, eq=False)
class Version:
    """A semantic version such as ``3.91.0-beta.1+build``."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "Version | None":
        """Parse a whole string as a semantic version, or return None."""
        match = _SEMVER.fullmatch(text)
        if match is None:
            return None
        major, minor, patch, pre, build = match.groups()
        return cls(
            int(major),
            int(minor),
            int(patch),
            tuple(pre.split(".")) if pre else (),
            tuple(build.split(".")) if build else (),
        )

    def _key(self) -> tuple:
        if not self.prerelease:
            pre_key: tuple = (1,)
        else:
            pre_key = (
                0,
                tuple((0, int(p), "") if p.isdigit() else (1, 0, p) for p in self.prerelease),
            )
        return (self.major, self.minor, self.patch, pre_key)

    @staticmethod
    def _coerce(other: object) -> "Version | None":
        if isinstance(other, Version):
            return other
        if isinstance(other, tuple) and len(other) == 3 and all(isinstance(x, int) for x in other):
            return Version(*other)
        return None

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() == o._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: _Comparable) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() < o._key()

    def __le__(self, other: _Comparable) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() <= o._key()

    def __gt__(self, other: _Comparable) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() > o._key()

    def __ge__(self, other: _Comparable) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() >= o._key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


_Comparable = Union[Version, "tuple[int, int, int]"]