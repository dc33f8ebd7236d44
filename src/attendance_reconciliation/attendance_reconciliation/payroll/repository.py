from __future__ import annotations

from typing import Optional, Protocol


class PayrollDaysProvider(Protocol):
    """External payroll collaborator.

    Returns None (or raises PayrollDaysUnavailableError) when payroll has no
    figure for the employee-month.
    """

    def get_payroll_days(self, employee_id: int, month: str) -> Optional[float]:
        raise NotImplementedError
