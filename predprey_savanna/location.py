"""
Grid coordinate value.
"""

from __future__ import annotations

from typing import NamedTuple


class Location(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
