# app/repositories/mongo.py
import logging
from typing import Any, Dict, Optional, Union

from motor.motor_asyncio import AsyncIOMotorClient
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.errors import RepositoryUnavailable
from app.models.employee import Employee, NewEmployee
from app.repositories.base import EmployeeRepository

logger = logging.getLogger(__name__)

COUNTER_ID = "employees"


def to_document(employee: Employee) -> Dict[str, Any]:
    return {"_id": employee.id, "name": employee.name, "role": employee.role}


def from_document(document: Dict[str, Any]) -> Employee:
    try:
        return Employee(id=document["_id"], name=document["name"], role=document["role"])
    except (KeyError, ValidationError) as e:
        raise RepositoryUnavailable("find_by_id", e) from e


class MongoEmployeeRepository(EmployeeRepository):
    """Employees stored in MongoDB with the integer id as ``_id``.

    Fresh ids come from a sequence document in the ``counters`` collection.
    Client-assigned ids push the sequence forward with ``$max`` so a later
    generated id never lands on a record created through an upsert.
    """

    def __init__(self, uri: str, db_name: str, client: Optional[AsyncIOMotorClient] = None):
        self.uri = uri
        self.db_name = db_name
        self.client = client
        self.db = client[db_name] if client is not None else None

    @property
    def employees(self):
        return self.db.employees

    @property
    def counters(self):
        return self.db.counters

    async def connect(self) -> None:
        if self.client is None:
            self.client = AsyncIOMotorClient(self.uri)
            self.db = self.client[self.db_name]
        try:
            await self.counters.update_one(
                {"_id": COUNTER_ID},
                {"$setOnInsert": {"seq": 0}},
                upsert=True
            )
        except (PyMongoError, OverflowError) as e:
            raise RepositoryUnavailable("connect", e) from e
        logger.info("Connected to MongoDB: %s", self.db_name)

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("Closed MongoDB connection")

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        try:
            document = await self.employees.find_one({"_id": employee_id})
        except (PyMongoError, OverflowError) as e:
            raise RepositoryUnavailable("find_by_id", e) from e
        if document is None:
            return None
        return from_document(document)

    async def save(self, employee: Union[NewEmployee, Employee]) -> Employee:
        try:
            if isinstance(employee, NewEmployee):
                employee = Employee.assigned(await self._next_id(), employee)
            else:
                await self.counters.update_one(
                    {"_id": COUNTER_ID},
                    {"$max": {"seq": employee.id}},
                    upsert=True
                )
            await self.employees.replace_one(
                {"_id": employee.id},
                to_document(employee),
                upsert=True
            )
        except (PyMongoError, OverflowError) as e:
            raise RepositoryUnavailable("save", e) from e
        return employee

    async def delete_by_id(self, employee_id: int) -> None:
        try:
            await self.employees.delete_one({"_id": employee_id})
        except (PyMongoError, OverflowError) as e:
            raise RepositoryUnavailable("delete_by_id", e) from e

    async def _next_id(self) -> int:
        counter = await self.counters.find_one_and_update(
            {"_id": COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter["seq"]
