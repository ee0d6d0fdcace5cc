# app/models/employee.py
from pydantic import BaseModel, ConfigDict, Field

# Largest id that fits a signed 64-bit integer, the widest BSON integer type.
MAX_EMPLOYEE_ID = 2**63 - 1


class NewEmployee(BaseModel):
    """An employee that has not been persisted yet and has no identity.

    Only a repository can turn it into an :class:`Employee`, by assigning a
    fresh identifier in ``save``.
    """
    name: str
    role: str

    model_config = ConfigDict(frozen=True)


class Employee(BaseModel):
    """A persisted employee, addressed by its integer identifier."""
    id: int = Field(..., gt=0, le=MAX_EMPLOYEE_ID)
    name: str
    role: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def at(cls, employee_id: int, *, name: str, role: str) -> "Employee":
        """Build an employee at a caller-chosen identifier, honored verbatim."""
        return cls(id=employee_id, name=name, role=role)

    @classmethod
    def assigned(cls, employee_id: int, draft: NewEmployee) -> "Employee":
        """Attach a repository-assigned identifier to a transient employee."""
        return cls(id=employee_id, name=draft.name, role=draft.role)
