from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Employee, SalaryComponent
from .repository import EmployeeRepository

_SELECT = """
    SELECT
        e.employee_id, e.employee_code, e.first_name, e.last_name,
        e.department_id, d.department_name, e.designation_id, e.status
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _components_for(self, cur, employee_ids: list[int]) -> dict[int, list[SalaryComponent]]:
        out: dict[int, list[SalaryComponent]] = {eid: [] for eid in employee_ids}
        if not employee_ids:
            return out

        placeholders = ",".join(["%s"] * len(employee_ids))
        cur.execute(
            f"""
            SELECT employee_id, component_name, component_type, calculation_type, value, is_active
            FROM salary_template_components
            WHERE employee_id IN ({placeholders})
            ORDER BY component_id
            """,
            tuple(employee_ids),
        )
        for r in fetchall(cur):
            out[int(r["employee_id"])].append(
                SalaryComponent(
                    name=r["component_name"],
                    component_type=r["component_type"],
                    calculation_type=r["calculation_type"],
                    value=as_float(r.get("value")),
                    is_active=bool(r["is_active"]),
                )
            )
        return out

    @staticmethod
    def _to_employee(r: dict, components: list[SalaryComponent]) -> Employee:
        return Employee(
            employee_id=int(r["employee_id"]),
            employee_code=r["employee_code"],
            first_name=r["first_name"],
            last_name=r.get("last_name") or "",
            department_id=r.get("department_id"),
            department_name=r.get("department_name"),
            designation_id=r.get("designation_id"),
            is_active=r["status"] == "ACTIVE",
            salary_components=tuple(components),
        )

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            if not r:
                return None
            components = self._components_for(cur, [int(r["employee_id"])])
            return self._to_employee(r, components[int(r["employee_id"])])

    def list_active(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        clauses = ["e.status='ACTIVE'"]
        params: list[object] = []
        if search:
            like = f"%{search.strip()}%"
            clauses.append("(e.first_name LIKE %s OR e.last_name LIKE %s OR e.employee_code LIKE %s)")
            params.extend([like, like, like])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY e.employee_code", tuple(params))
            rows = fetchall(cur)
            components = self._components_for(cur, [int(r["employee_id"]) for r in rows])
            return [self._to_employee(r, components[int(r["employee_id"])]) for r in rows]
