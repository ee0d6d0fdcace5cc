# app/utils/existence.py
import logging
from typing import Optional
from app.models.employee import Employee
from app.repositories.base import EmployeeRepository

logger = logging.getLogger(__name__)

async def resolve_employee(employee_id: int, repository: EmployeeRepository) -> Optional[Employee]:
    """Return the stored employee for ``employee_id``, or ``None`` if absent.

    Absence is a normal result; storage failures propagate as
    ``RepositoryUnavailable``.
    """
    employee = await repository.find_by_id(employee_id)
    logger.debug("Employee %s is %s", employee_id, "present" if employee else "absent")
    return employee
