# app/repositories/memory.py
import asyncio
from typing import Dict, Optional, Union

from app.models.employee import Employee, NewEmployee
from app.repositories.base import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local store, used by default and in tests."""

    def __init__(self):
        self._records: Dict[int, Employee] = {}
        # Highest id ever handed out or upserted; ids are never reused.
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._records.get(employee_id)

    async def save(self, employee: Union[NewEmployee, Employee]) -> Employee:
        async with self._lock:
            if isinstance(employee, NewEmployee):
                self._last_id += 1
                employee = Employee.assigned(self._last_id, employee)
            else:
                self._last_id = max(self._last_id, employee.id)
            self._records[employee.id] = employee
            return employee

    async def delete_by_id(self, employee_id: int) -> None:
        async with self._lock:
            self._records.pop(employee_id, None)
