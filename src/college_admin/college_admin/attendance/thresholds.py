from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_int_range
from ..core.constants import DEFAULT_EXCELLENT_THRESHOLD, DEFAULT_GOOD_THRESHOLD
from ..core.exceptions import ValidationError

EXCELLENT = "Excellent"
GOOD = "Good"
NEEDS_IMPROVEMENT = "Needs Improvement"


@dataclass(frozen=True)
class AttendanceThresholds:
    """Percentage cut-offs (inclusive) for the attendance status label."""

    excellent: int = DEFAULT_EXCELLENT_THRESHOLD
    good: int = DEFAULT_GOOD_THRESHOLD

    def __post_init__(self) -> None:
        require_int_range(int(self.excellent), "excellent", maximum=100)
        require_int_range(int(self.good), "good", maximum=100)
        if self.good > self.excellent:
            raise ValidationError("good threshold cannot exceed excellent threshold")

    @classmethod
    def from_settings(cls, values: dict | None) -> "AttendanceThresholds":
        values = values or {}
        return cls(
            excellent=int(values.get("excellent", DEFAULT_EXCELLENT_THRESHOLD)),
            good=int(values.get("good", DEFAULT_GOOD_THRESHOLD)),
        )


DEFAULT_THRESHOLDS = AttendanceThresholds()


def attendance_status_label(percentage: int, thresholds: AttendanceThresholds = DEFAULT_THRESHOLDS) -> str:
    if percentage >= thresholds.excellent:
        return EXCELLENT
    if percentage >= thresholds.good:
        return GOOD
    return NEEDS_IMPROVEMENT
