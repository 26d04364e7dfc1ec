from __future__ import annotations

import math
from fractions import Fraction

from ...core.exceptions import UnboundedTargetError, UnreachableTargetError
from .base import ProjectionCalculator


class StandardProjectionCalculator(ProjectionCalculator):
    """Closed-form rule, evaluated with exact fractions.

    to attend x: (attended + x) / (held + x) >= target/100
    can miss x:  attended / (held + x) >= target/100
    """

    def current_percent(self, held: int, attended: int) -> Fraction:
        if held <= 0:
            return Fraction(0)
        return Fraction(100 * attended, held)

    def classes_to_attend(self, held: int, attended: int, target: Fraction) -> int:
        if target >= 100:
            raise UnreachableTargetError(f"{target}% can no longer be reached")
        ratio = target / 100
        x = math.ceil((ratio * held - attended) / (1 - ratio))
        if held == 0:
            # 0/0 is undefined; one attended class already means 100%.
            x = max(x, 1)
        return max(x, 0)

    def classes_can_miss(self, held: int, attended: int, target: Fraction) -> int:
        if target <= 0:
            raise UnboundedTargetError("Any number of classes can be missed at a 0% target")
        ratio = target / 100
        return max(math.floor((attended - ratio * held) / ratio), 0)
