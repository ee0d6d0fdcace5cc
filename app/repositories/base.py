# app/repositories/base.py
from abc import ABC, abstractmethod
from typing import Optional, Union

from app.models.employee import Employee, NewEmployee


class EmployeeRepository(ABC):
    """Durable store of employees keyed by integer identifier.

    ``save`` of an :class:`Employee` must be an atomic upsert keyed by its id;
    the upsert handler relies on this when two requests race on the same
    absent id. Storage failures are raised as
    :class:`app.errors.RepositoryUnavailable`.
    """

    async def connect(self) -> None:
        pass

    async def close(self) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError("Implement find_by_id method")

    @abstractmethod
    async def save(self, employee: Union[NewEmployee, Employee]) -> Employee:
        raise NotImplementedError("Implement save method")

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError("Implement delete_by_id method")
