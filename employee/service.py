import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select
from .models import Employee
from .schema import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

# columns a PATCH may not clear
_REQUIRED = ("first_name", "last_name")

def get_employees(db: Session, *, org_id: int) -> List[Employee]:
    statement = (
        select(Employee)
        .where(Employee.org_id == org_id)
        .order_by(Employee.last_name.asc(), Employee.first_name.asc())
    )
    return list(db.scalars(statement))

def get_employee_for_org(db: Session, employee_id: int, org_id: int) -> Optional[Employee]:
    statement = select(Employee).where(Employee.id == employee_id, Employee.org_id == org_id)
    return db.scalars(statement).first()

def create_employee(db: Session, employee: EmployeeCreate) -> Employee:
    db_employee = Employee(**employee.model_dump())
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    logger.info("created employee %s in org %s", db_employee.id, db_employee.org_id)
    return db_employee

def update_employee(db: Session, employee_id: int, patch: EmployeeUpdate) -> Optional[Employee]:
    db_employee = db.get(Employee, employee_id)
    if not db_employee:
        return None
    data = patch.model_dump(exclude_unset=True)
    for k in _REQUIRED:
        if k in data and data[k] is None:
            data.pop(k)
    for k,v in data.items():
        setattr(db_employee, k, v)
    db.commit()
    db.refresh(db_employee)
    return db_employee

def delete_employee(db: Session, employee_id: int) -> None:
    db_employee = db.get(Employee, employee_id)
    if db_employee:
        db.delete(db_employee)
        db.commit()
        logger.info("deleted employee %s", employee_id)
    return
