# app/routes/employee.py
import logging
from fastapi import APIRouter, Depends, Path, Request, Response
from app.database import get_employee_repository
from app.models.employee import MAX_EMPLOYEE_ID, Employee, NewEmployee
from app.repositories.base import EmployeeRepository
from app.schemas.employee import EmployeeIn, EmployeeOut
from app.utils.existence import resolve_employee

logger = logging.getLogger(__name__)

router = APIRouter()

def employee_url(request: Request, employee_id: int) -> str:
    """Canonical, absolute URL of an employee resource."""
    return str(request.url_for("get_employee", employee_id=employee_id))

@router.post("/employees", response_model=EmployeeOut, status_code=201)
async def create_employee(
    payload: EmployeeIn,
    request: Request,
    response: Response,
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    # Identity is always assigned by the repository, never taken from the body.
    employee = await repository.save(NewEmployee(name=payload.name, role=payload.role))
    response.headers["Location"] = employee_url(request, employee.id)
    logger.info("Created employee %s", employee.id)
    return employee

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(
    employee_id: int = Path(..., gt=0, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    employee = await resolve_employee(employee_id, repository)
    if employee is None:
        return Response(status_code=404)
    return employee

@router.put("/employees/{employee_id}", response_model=EmployeeOut)
async def replace_employee(
    payload: EmployeeIn,
    request: Request,
    response: Response,
    employee_id: int = Path(..., gt=0, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    """Create the employee at ``employee_id`` or replace the stored one.

    The path id is authoritative. Both branches write; only the status code
    tells the caller which one ran.
    """
    existing = await resolve_employee(employee_id, repository)
    employee = await repository.save(Employee.at(employee_id, name=payload.name, role=payload.role))
    if existing is None:
        response.status_code = 201
        logger.info("Created employee %s at client-chosen id", employee_id)
    else:
        response.status_code = 200
        logger.info("Replaced employee %s", employee_id)
    response.headers["Content-Location"] = employee_url(request, employee_id)
    return employee

@router.delete("/employees/{employee_id}", status_code=204)
async def delete_employee(
    employee_id: int = Path(..., gt=0, le=MAX_EMPLOYEE_ID),
    repository: EmployeeRepository = Depends(get_employee_repository)
):
    # No existence check: deleting an absent id is still 204.
    await repository.delete_by_id(employee_id)
    logger.info("Deleted employee %s", employee_id)
    return Response(status_code=204)
