class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id):
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class AttendanceRecordNotFoundError(NotFoundError):
    def __init__(self, record_id):
        super().__init__(f"Daily attendance not found: {record_id}")
        self.record_id = record_id


class HolidayNotFoundError(NotFoundError):
    def __init__(self, holiday_id):
        super().__init__(f"Holiday not found: {holiday_id}")
        self.holiday_id = holiday_id


class PayrollDaysUnavailableError(DomainError):
    """Raised by a payroll collaborator that has no figure for an employee-month."""
