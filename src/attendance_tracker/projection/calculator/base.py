from __future__ import annotations

from abc import ABC, abstractmethod
from fractions import Fraction


class ProjectionCalculator(ABC):
    """Calculator interface (Strategy Pattern for target projections).

    Inputs are already validated: 0 <= attended <= held, 0 <= target <= 100.
    """

    @abstractmethod
    def current_percent(self, held: int, attended: int) -> Fraction:
        raise NotImplementedError

    @abstractmethod
    def classes_to_attend(self, held: int, attended: int, target: Fraction) -> int:
        raise NotImplementedError

    @abstractmethod
    def classes_can_miss(self, held: int, attended: int, target: Fraction) -> int:
        raise NotImplementedError
