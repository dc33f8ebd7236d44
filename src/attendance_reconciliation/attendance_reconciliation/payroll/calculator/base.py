from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...employees.model import SalaryComponent


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def monthly_salary(self, components: Iterable[SalaryComponent]) -> float:
        raise NotImplementedError
