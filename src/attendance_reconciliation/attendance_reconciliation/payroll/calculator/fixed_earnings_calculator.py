from __future__ import annotations

from typing import Iterable

from .base import SalaryCalculator
from ...employees.model import SalaryComponent

EARNING = "earning"
FIXED_AMOUNT = "fixed-amount"


class FixedEarningsSalaryCalculator(SalaryCalculator):
    """Standard rule: sum of active fixed-amount earnings.

    Percentage/formula components and deductions are ignored.
    """

    def monthly_salary(self, components: Iterable[SalaryComponent]) -> float:
        total = 0.0
        for c in components or ():
            if c.component_type != EARNING or not c.is_active or c.calculation_type != FIXED_AMOUNT:
                continue
            if isinstance(c.value, bool) or not isinstance(c.value, (int, float)):
                continue
            total += c.value
        return total
