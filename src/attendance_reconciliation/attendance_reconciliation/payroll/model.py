from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import MatchStatus


@dataclass(frozen=True)
class PayrollMatchRecord:
    """Attendance vs. payroll verdict for one employee-month. Never persisted."""

    record_id: str
    employee_id: int
    employee_name: str
    employee_code: str
    department: str
    payroll_month: str
    attendance_days: float
    payroll_days: Optional[float]
    difference: Optional[float]
    attendance_amount: int
    payroll_amount: Optional[int]
    amount_difference: Optional[int]
    match_status: MatchStatus
    remarks: Optional[str] = None

    def to_dict(self) -> dict:
        out = asdict(self)
        out["id"] = out.pop("record_id")
        out["match_status"] = self.match_status.value
        return out
