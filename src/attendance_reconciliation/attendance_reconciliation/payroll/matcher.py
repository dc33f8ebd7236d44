from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..attendance.model import DailyAttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_month, month_bounds, parse_month
from ..common.local_calendar import LocalCalendar
from ..core import constants
from ..core.enums import ATTENDANCE_DAY_WEIGHTS, MatchStatus
from ..core.exceptions import PayrollDaysUnavailableError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.fixed_earnings_calculator import FixedEarningsSalaryCalculator
from .model import PayrollMatchRecord
from .repository import PayrollDaysProvider

logger = logging.getLogger(__name__)


def round_half_up(value: float, step: str = "1") -> Decimal:
    """Round to the nearest multiple of `step`, halves away from zero."""
    q = Decimal(step)
    return (Decimal(str(value)) / q).quantize(Decimal("1"), rounding=ROUND_HALF_UP) * q


def count_attendance_days(records: Iterable[DailyAttendanceRecord]) -> float:
    """PRESENT/LATE count 1, HALF_DAY 0.5; rounded to the nearest 0.5."""
    total = sum(ATTENDANCE_DAY_WEIGHTS.get(r.status, 0) for r in records)
    return float(round_half_up(total, "0.5"))


def prorate(monthly_salary: float, days: float, working_days_per_month: int) -> int:
    if not working_days_per_month:
        return 0
    return int(round_half_up(monthly_salary / working_days_per_month * days))


@dataclass(frozen=True)
class MatchThresholds:
    review_days: float = constants.DEFAULT_REVIEW_DAY_THRESHOLD
    review_amount: float = constants.DEFAULT_REVIEW_AMOUNT_THRESHOLD

    def classify(self, days_difference: float, amount_difference: int) -> MatchStatus:
        if days_difference == 0 and amount_difference == 0:
            return MatchStatus.MATCHED
        if abs(days_difference) <= self.review_days and abs(amount_difference) <= self.review_amount:
            return MatchStatus.UNDER_REVIEW
        return MatchStatus.MISMATCH


def _parse_status_filter(status: Optional[str]) -> Optional[MatchStatus]:
    v = (status or "").strip()
    if not v or v.lower() == "all":
        return None
    try:
        return MatchStatus.parse(v)
    except ValueError:
        raise ValidationError(f"Invalid match status: {status!r}")


class PayrollVarianceMatcher:
    """Cross-check attendance-derived days against payroll-reported days.

    Payroll days are a required external input: when the payroll
    collaborator has no figure the row is reported as UNAVAILABLE rather than
    compared against itself.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payroll_days: PayrollDaysProvider,
        *,
        calendar: LocalCalendar,
        calculator: Optional[SalaryCalculator] = None,
        working_days_per_month: int = constants.DEFAULT_WORKING_DAYS_PER_MONTH,
        thresholds: Optional[MatchThresholds] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payroll_days = payroll_days
        self._calendar = calendar
        self._calculator = calculator or FixedEarningsSalaryCalculator()
        self._working_days = int(working_days_per_month)
        self._thresholds = thresholds or MatchThresholds()

    def match(
        self,
        status: Optional[str] = None,
        month: Optional[str] = None,
        search: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> list[PayrollMatchRecord]:
        wanted = _parse_status_filter(status)
        if month:
            year, month_num = parse_month(month)
        else:
            today = self._calendar.today(now)
            year, month_num = today.year, today.month

        records = [
            self.match_employee(e, year, month_num)
            for e in self._employees.list_active(search=(search or "").strip() or None)
        ]
        if wanted is not None:
            records = [r for r in records if r.match_status == wanted]
        return records

    def attendance_days(self, employee_id: int, year: int, month: int) -> float:
        start, end = month_bounds(year, month)
        return count_attendance_days(self._attendance.list_for_employee_between(employee_id, start, end))

    def _payroll_days_for(self, employee_id: int, month_key: str) -> Optional[float]:
        try:
            days = self._payroll_days.get_payroll_days(employee_id, month_key)
        except PayrollDaysUnavailableError as exc:
            logger.warning("Payroll days unavailable for employee %s in %s: %s", employee_id, month_key, exc)
            return None
        if days is None:
            logger.warning("Payroll days unavailable for employee %s in %s", employee_id, month_key)
            return None
        return float(days)

    def match_employee(self, employee: Employee, year: int, month: int) -> PayrollMatchRecord:
        month_key = format_month(year, month)
        attendance_days = self.attendance_days(employee.employee_id, year, month)
        monthly_salary = self._calculator.monthly_salary(employee.salary_components)
        attendance_amount = prorate(monthly_salary, attendance_days, self._working_days)

        base = dict(
            record_id=f"{employee.employee_id}-{month_key}",
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            employee_code=employee.employee_code,
            department=employee.department_name or "N/A",
            payroll_month=month_key,
            attendance_days=attendance_days,
            attendance_amount=attendance_amount,
        )

        payroll_days = self._payroll_days_for(employee.employee_id, month_key)
        if payroll_days is None:
            return PayrollMatchRecord(
                **base,
                payroll_days=None,
                difference=None,
                payroll_amount=None,
                amount_difference=None,
                match_status=MatchStatus.UNAVAILABLE,
                remarks=constants.PAYROLL_UNAVAILABLE_REMARK,
            )

        payroll_amount = prorate(monthly_salary, payroll_days, self._working_days)
        days_difference = float(round_half_up(attendance_days - payroll_days, "0.1"))
        amount_difference = attendance_amount - payroll_amount

        remarks = None
        if days_difference != 0 or amount_difference != 0:
            remarks = f"Days difference: {days_difference:g}, Amount difference: {abs(amount_difference)}"

        return PayrollMatchRecord(
            **base,
            payroll_days=payroll_days,
            difference=days_difference,
            payroll_amount=payroll_amount,
            amount_difference=amount_difference,
            match_status=self._thresholds.classify(days_difference, amount_difference),
            remarks=remarks,
        )
