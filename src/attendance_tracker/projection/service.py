from __future__ import annotations

from fractions import Fraction
from typing import Optional

from ..common.validators import require_int, require_percent
from ..core.constants import DEFAULT_TARGET_PERCENT
from ..core.exceptions import InvalidInputError
from .calculator.base import ProjectionCalculator
from .calculator.standard_calculator import StandardProjectionCalculator
from .model import Projection


def _fmt_percent(value: Fraction) -> str:
    # 75 -> "75", 72.5 -> "72.5"
    return f"{float(value):g}"


class TargetProjector:
    """Stateless: how many classes to attend, or how many may be missed, for a target %."""

    def __init__(self, *, calculator: Optional[ProjectionCalculator] = None):
        self._calculator = calculator or StandardProjectionCalculator()

    def project(self, classes_held, classes_attended, target_percent=DEFAULT_TARGET_PERCENT) -> Projection:
        held = require_int(classes_held, "Classes held")
        attended = require_int(classes_attended, "Classes attended")
        target = require_percent(target_percent, "Target percentage")

        if held < 0:
            raise InvalidInputError("Classes held cannot be negative")
        if attended < 0:
            raise InvalidInputError("Classes attended cannot be negative")
        if attended > held:
            raise InvalidInputError("Classes attended cannot exceed classes held")

        current = self._calculator.current_percent(held, attended)
        shown = _fmt_percent(target)

        to_attend = 0
        can_miss = 0
        if current < target:
            to_attend = self._calculator.classes_to_attend(held, attended, target)
            message = f"You need to attend {to_attend} more consecutive classes to reach {shown}% attendance."
        elif current > target:
            can_miss = self._calculator.classes_can_miss(held, attended, target)
            if can_miss > 0:
                message = f"You can miss up to {can_miss} classes and still maintain {shown}% attendance."
            else:
                message = f"You need to attend all future classes to maintain {shown}% attendance."
        else:
            message = f"You're exactly at {shown}%! Attend all future classes to maintain this."

        return Projection(
            current_percent=round(float(current), 2),
            classes_to_attend=to_attend,
            classes_can_miss=can_miss,
            message=message,
        )
