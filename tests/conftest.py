"""
pytest configuration and fixtures.
"""

from typing import Dict, Generator, List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from app.database import get_employee_repository
from app.main import app
from app.models.employee import Employee, NewEmployee
from app.repositories import InMemoryEmployeeRepository


class RecordingRepository(InMemoryEmployeeRepository):
    """In-memory repository that records every call made to it."""

    def __init__(self):
        super().__init__()
        self.calls: Dict[str, List] = {"find_by_id": [], "save": [], "delete_by_id": []}

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        self.calls["find_by_id"].append(employee_id)
        return await super().find_by_id(employee_id)

    async def save(self, employee: Union[NewEmployee, Employee]) -> Employee:
        self.calls["save"].append(employee)
        return await super().save(employee)

    async def delete_by_id(self, employee_id: int) -> None:
        self.calls["delete_by_id"].append(employee_id)
        await super().delete_by_id(employee_id)

    def count(self, operation: str) -> int:
        return len(self.calls[operation])

    def reset_calls(self):
        for calls in self.calls.values():
            calls.clear()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def repository() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def client(repository: RecordingRepository) -> Generator[TestClient, None, None]:
    """Test client wired to a fresh recording repository."""
    app.dependency_overrides[get_employee_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def manager_body():
    """JSON body for a manager with the given name."""
    def build(name: str) -> dict:
        return {"role": "Manager", "name": name}
    return build
