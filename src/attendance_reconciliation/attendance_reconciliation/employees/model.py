from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SalaryComponent:
    name: str
    component_type: str
    calculation_type: str
    value: Optional[float]
    is_active: bool = True


@dataclass(frozen=True)
class Employee:
    """Employee as seen by the reconciliation engine (owned by the HR system).

    Note: Read-only here; the engine never writes employees.
    """

    employee_id: int
    employee_code: str
    first_name: str
    last_name: str
    department_id: Optional[int] = None
    department_name: Optional[str] = None
    designation_id: Optional[int] = None
    is_active: bool = True
    salary_components: tuple[SalaryComponent, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
