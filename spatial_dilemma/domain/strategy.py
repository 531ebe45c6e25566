"""Two-valued cell strategy."""

from __future__ import annotations

from enum import Enum

from spatial_dilemma.config.constants import COOPERATE_MARKER, DEFECT_MARKER


class Strategy(Enum):
    """Cell strategy; the value is the single-character file marker."""

    COOPERATE = COOPERATE_MARKER
    DEFECT = DEFECT_MARKER

    @classmethod
    def from_marker(cls, marker: str) -> Strategy:
        """Parse a file marker into a strategy."""
        try:
            return cls(marker)
        except ValueError as exc:
            valid = ", ".join(repr(s.value) for s in cls)
            raise ValueError(
                f"invalid strategy marker {marker!r}; must be one of {valid}"
            ) from exc

    @property
    def marker(self) -> str:
        return self.value
