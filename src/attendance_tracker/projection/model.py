from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Projection:
    """Result of the attendance target calculator (never persisted)."""

    current_percent: float
    classes_to_attend: int
    classes_can_miss: int
    message: str

    def to_dict(self) -> dict:
        return {
            "currentPercentage": self.current_percent,
            "classesToAttend": self.classes_to_attend,
            "classesCanMiss": self.classes_can_miss,
            "message": self.message,
        }
