from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.errors import EmployeeNotFoundError
from app.models.hr import Employee
from app.repositories.employees import EmployeeRepository, SqlEmployeeRepository
from app.schemas.hr import EmployeeIn, EmployeeOut

router = APIRouter(tags=["employees"])

# Ids are positive and must fit a signed 64-bit column.
EmployeeId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def get_employee_repository(db: Session = Depends(get_db)) -> EmployeeRepository:
    return SqlEmployeeRepository(db)


@router.get("/employees", response_model=list[EmployeeOut])
def list_employees(repo: EmployeeRepository = Depends(get_employee_repository)) -> list[Employee]:
    return repo.list()


@router.get("/employees/{id}", response_model=EmployeeOut | None)
def get_employee(id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)) -> Employee | None:
    # A missing id is answered with `null`, not 404.
    return repo.get(id)


@router.post("/employees", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeIn,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Employee:
    return repo.create(payload)


@router.put("/employees/{id}", response_model=EmployeeOut)
def update_employee(
    id: EmployeeId,
    payload: EmployeeIn,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Employee:
    try:
        return repo.update(id, payload)
    except EmployeeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found") from exc


@router.delete("/employees/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_employee(id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)) -> Response:
    repo.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
