from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_int_range
from ..core.constants import DEFAULT_ANNUAL_LEAVE_QUOTA, DEFAULT_MONTHLY_LEAVE_CAP


@dataclass(frozen=True)
class LeavePolicy:
    """Institution leave rules.

    ``split_across_months`` selects how a leave crossing a month boundary is
    bucketed: False attributes every day to the start month (the historical
    behaviour), True counts each day in its own calendar month.
    """

    annual_quota: int = DEFAULT_ANNUAL_LEAVE_QUOTA
    monthly_cap: int = DEFAULT_MONTHLY_LEAVE_CAP
    split_across_months: bool = False

    def __post_init__(self) -> None:
        require_int_range(int(self.annual_quota), "annual_quota")
        require_int_range(int(self.monthly_cap), "monthly_cap")

    @classmethod
    def from_settings(cls, values: dict | None) -> "LeavePolicy":
        values = values or {}
        return cls(
            annual_quota=int(values.get("annual_quota", DEFAULT_ANNUAL_LEAVE_QUOTA)),
            monthly_cap=int(values.get("monthly_cap", DEFAULT_MONTHLY_LEAVE_CAP)),
            split_across_months=bool(values.get("split_across_months", False)),
        )


DEFAULT_LEAVE_POLICY = LeavePolicy()
