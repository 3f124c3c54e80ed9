"""Seed identity: a stable hash, base color and initials for an input string."""

from __future__ import annotations

import hashlib

from avatarsmith.support.color import RGBColor

# Number of hex digits read for a base color.
_COLOR_WIDTH = 6


class Name:
    """Hash and initials derived from a seed or display name.

    The MD5 digest is computed once at construction; everything else is a
    pure function of it, so two instances built from the same string always
    agree on hash, colors and initials.
    """

    __slots__ = ("_name", "_hash", "_parts")

    def __init__(self, name: str) -> None:
        self._name = name
        self._hash = hashlib.md5(name.encode("utf-8")).hexdigest()
        self._parts = tuple(name.split())

    @classmethod
    def make(cls, name: str) -> Name:
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def hash(self) -> str:
        """32-character lowercase hex digest of the name."""
        return self._hash

    @property
    def parts(self) -> tuple[str, ...]:
        return self._parts

    def initials(self) -> str:
        """First character of every whitespace-separated token, upper-cased.

        Tokens are only dropped when empty, so ``Name("0").initials()`` is
        ``"0"``.
        """
        return "".join(part[0] for part in self._parts).upper()

    def base_color(self, offset: int = 0) -> RGBColor:
        """Read six hex digits of the hash starting at *offset* as RGB.

        Raises:
            ValueError: If *offset* is negative or leaves fewer than six
                digits after it.
        """
        limit = len(self._hash) - _COLOR_WIDTH
        if not 0 <= offset < limit:
            raise ValueError(
                f"Color offset must be between 0 and {limit - 1}, got {offset}"
            )
        return RGBColor.from_hex(self._hash[offset:offset + _COLOR_WIDTH])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Name({self._name!r})"
