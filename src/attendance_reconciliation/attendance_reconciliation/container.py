from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.punctuality import PunctualityPolicy
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.synchronizer import ReconciliationSynchronizer
from .calendar_rules.mysql_holiday_repository import MySQLHolidayRepository
from .calendar_rules.repository import HolidayRepository
from .calendar_rules.resolver import CalendarResolver
from .calendar_rules.rules import week_off_rule_from_config
from .calendar_rules.service import HolidayService
from .common.local_calendar import LocalCalendar
from .core import constants
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.matcher import MatchThresholds, PayrollVarianceMatcher
from .payroll.mysql_payroll_days_repository import MySQLPayrollDaysRepository
from .payroll.repository import PayrollDaysProvider
from .punches.aggregator import PunchAggregator
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService


@dataclass(frozen=True)
class Container:
    calendar: LocalCalendar

    employees_repo: EmployeeRepository
    punches_repo: PunchRepository
    holidays_repo: HolidayRepository
    attendance_repo: AttendanceRepository
    payroll_days: PayrollDaysProvider

    synchronizer: ReconciliationSynchronizer
    attendance_service: AttendanceService
    punch_service: PunchService
    holiday_service: HolidayService
    payroll_matcher: PayrollVarianceMatcher


def build_services(
    *,
    employees_repo: EmployeeRepository,
    punches_repo: PunchRepository,
    holidays_repo: HolidayRepository,
    attendance_repo: AttendanceRepository,
    payroll_days: PayrollDaysProvider,
    engine_config: Optional[dict] = None,
    calendar: Optional[LocalCalendar] = None,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""

    engine_config = dict(engine_config or {})
    calendar = calendar or LocalCalendar.for_zone(engine_config.get("timezone", constants.DEFAULT_TIMEZONE))

    resolver = CalendarResolver(week_off_rule_from_config(engine_config))
    synchronizer = ReconciliationSynchronizer(
        attendance_repo,
        employees_repo,
        punches_repo,
        holidays_repo,
        calendar=calendar,
        resolver=resolver,
        aggregator=PunchAggregator(calendar),
        classifier=AttendanceClassifier(calendar),
    )
    attendance_service = AttendanceService(
        attendance_repo,
        synchronizer,
        punctuality=PunctualityPolicy.from_config(engine_config),
    )
    payroll_matcher = PayrollVarianceMatcher(
        employees_repo,
        attendance_repo,
        payroll_days,
        calendar=calendar,
        working_days_per_month=int(
            engine_config.get("working_days_per_month", constants.DEFAULT_WORKING_DAYS_PER_MONTH)
        ),
        thresholds=MatchThresholds(
            review_days=float(engine_config.get("review_day_threshold", constants.DEFAULT_REVIEW_DAY_THRESHOLD)),
            review_amount=float(
                engine_config.get("review_amount_threshold", constants.DEFAULT_REVIEW_AMOUNT_THRESHOLD)
            ),
        ),
    )

    return Container(
        calendar=calendar,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        payroll_days=payroll_days,
        synchronizer=synchronizer,
        attendance_service=attendance_service,
        punch_service=PunchService(punches_repo, employees_repo, calendar),
        holiday_service=HolidayService(holidays_repo),
        payroll_matcher=payroll_matcher,
    )


def build_container(*, db_config: dict, engine_config: Optional[dict] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        payroll_days=MySQLPayrollDaysRepository(conn),
        engine_config=engine_config,
    )
