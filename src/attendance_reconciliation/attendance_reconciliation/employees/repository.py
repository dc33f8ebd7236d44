from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only view of the employee directory."""

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        """Active employees, optionally filtered by name or employee code."""

        raise NotImplementedError
