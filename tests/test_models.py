"""
Unit tests for the employee entity.
"""

import pytest
from pydantic import ValidationError

from app.models.employee import Employee, NewEmployee


def test_new_employee_has_no_identity():
    draft = NewEmployee(name="Mary", role="Manager")

    assert not hasattr(draft, "id")


def test_assigned_copies_draft_fields():
    draft = NewEmployee(name="Mary", role="Manager")

    assert Employee.assigned(1, draft) == Employee(id=1, name="Mary", role="Manager")


def test_at_honors_given_id():
    assert Employee.at(7, name="Tom", role="Manager").id == 7


def test_employee_is_immutable():
    employee = Employee.at(1, name="Tom", role="Manager")

    with pytest.raises(ValidationError):
        employee.role = "Director"


def test_id_must_be_positive():
    with pytest.raises(ValidationError):
        Employee.at(0, name="Tom", role="Manager")


def test_id_must_fit_64_bits():
    with pytest.raises(ValidationError):
        Employee.at(2**63, name="Tom", role="Manager")
