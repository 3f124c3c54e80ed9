"""Boolean pixel grids shared by the pixel engines."""

from __future__ import annotations

import hashlib
import math

from avatarsmith.support.hashing import hex_digit_to_bool, hex_stream
from avatarsmith.support.name import Name

Matrix = list[list[bool]]


def symmetry_groups(pixels: int) -> list[list[int]]:
    """Fold column indices around the vertical axis.

    For 5 pixels: ``[[0, 4], [1, 3], [2]]``.
    """
    last = pixels - 1
    groups = []
    for x in range(math.ceil(pixels / 2)):
        group = [x]
        if x != last - x:
            group.append(last - x)
        groups.append(group)
    return groups


def symmetric_matrix(name: Name, pixels: int) -> Matrix:
    """Left-right mirrored grid, ``matrix[y][x]``.

    Each row reads one hex digit per column group from the seed hash.
    """
    groups = symmetry_groups(pixels)
    stream = hex_stream(name.hash, pixels * len(groups))
    matrix = [[False] * pixels for _ in range(pixels)]
    for y in range(pixels):
        for g, columns in enumerate(groups):
            filled = hex_digit_to_bool(stream[y * len(groups) + g])
            for x in columns:
                matrix[y][x] = filled
    return matrix


def random_matrix(name: Name, pixels: int) -> Matrix:
    """Grid with an independent digit per cell, read from ``sha256(hash)``."""
    root = hashlib.sha256(name.hash.encode("ascii")).hexdigest()
    stream = hex_stream(root, pixels * pixels)
    matrix = [[False] * pixels for _ in range(pixels)]
    for i in range(pixels * pixels):
        x, y = divmod(i, pixels)
        matrix[y][x] = hex_digit_to_bool(stream[i])
    return matrix


def build_matrix(name: Name, pixels: int, symmetry: bool) -> Matrix:
    return symmetric_matrix(name, pixels) if symmetry else random_matrix(name, pixels)
