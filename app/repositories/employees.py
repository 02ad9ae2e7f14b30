from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.errors import EmployeeNotFoundError
from app.models.hr import Employee
from app.schemas.hr import EmployeeIn

logger = logging.getLogger(__name__)


class EmployeeRepository(Protocol):
    def list(self) -> list[Employee]: ...

    def get(self, employee_id: int) -> Employee | None: ...

    def create(self, fields: EmployeeIn) -> Employee: ...

    def update(self, employee_id: int, fields: EmployeeIn) -> Employee: ...

    def delete(self, employee_id: int) -> bool: ...


class SqlEmployeeRepository:
    """
    Employee persistence over an explicit SQLAlchemy session.

    Each mutating call is one statement plus one commit. `fields` arrive
    already validated (see `EmployeeIn`), so nothing here re-checks them.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[Employee]:
        return list(self.db.scalars(select(Employee).order_by(Employee.id)).all())

    def get(self, employee_id: int) -> Employee | None:
        return self.db.get(Employee, employee_id)

    def create(self, fields: EmployeeIn) -> Employee:
        employee = Employee(**fields.model_dump())
        self.db.add(employee)
        self.db.commit()
        self.db.refresh(employee)
        logger.info("Created employee id=%s", employee.id)
        return employee

    def update(self, employee_id: int, fields: EmployeeIn) -> Employee:
        employee = self.db.get(Employee, employee_id)
        if employee is None:
            logger.info("Update skipped, employee id=%s not found", employee_id)
            raise EmployeeNotFoundError(employee_id)

        # Full replacement of the business fields; id and created_at are untouched.
        for name, value in fields.model_dump().items():
            setattr(employee, name, value)

        self.db.commit()
        self.db.refresh(employee)
        logger.info("Updated employee id=%s", employee.id)
        return employee

    def delete(self, employee_id: int) -> bool:
        result = self.db.execute(delete(Employee).where(Employee.id == employee_id))
        self.db.commit()
        removed = result.rowcount > 0
        logger.info("Deleted employee id=%s removed=%s", employee_id, removed)
        return removed
