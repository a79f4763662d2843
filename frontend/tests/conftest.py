from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from staffboard.core.dependencies import get_flow_controller
from staffboard.main import app
from staffboard.models.employee import Employee, EmployeeDraft
from staffboard.services.employee_client import EmployeeStoreError, NotFoundError
from staffboard.services.flow_controller import FlowController
from staffboard.services.notifications import NotificationCenter


def make_employee(**overrides) -> Employee:
    data = {
        "id": 1,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "role": "Engineer",
        "department": "Engineering",
        "salary": 95000,
        "date_joined": "2021-03-01",
    }
    data.update(overrides)
    return Employee(**data)


class FakeStore:
    """In-memory employee backend with optional failure injection."""

    def __init__(self, records: list[Employee] | None = None) -> None:
        self.records: list[Employee] = list(records or [])
        self.next_id = max((int(r.id) for r in self.records), default=0) + 1
        self.fail_with: EmployeeStoreError | None = None
        self.calls: list[tuple] = []

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def list_employees(self) -> list[Employee]:
        self.calls.append(("list",))
        self._maybe_fail()
        return list(self.records)

    async def create_employee(self, draft: EmployeeDraft) -> Employee:
        self.calls.append(("create", draft))
        self._maybe_fail()
        created = Employee(id=self.next_id, **draft.model_dump())
        self.next_id += 1
        self.records.append(created)
        return created

    async def update_employee(self, employee_id, draft: EmployeeDraft) -> Employee:
        self.calls.append(("update", employee_id, draft))
        self._maybe_fail()
        for index, record in enumerate(self.records):
            if str(record.id) == str(employee_id):
                updated = Employee(id=record.id, **draft.model_dump())
                self.records[index] = updated
                return updated
        raise NotFoundError(404, "Employee not found")

    async def delete_employee(self, employee_id) -> None:
        self.calls.append(("delete", employee_id))
        self._maybe_fail()
        before = len(self.records)
        self.records = [r for r in self.records if str(r.id) != str(employee_id)]
        if len(self.records) == before:
            raise NotFoundError(404, "Employee not found")


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [
        make_employee(id=1, name="Ada Lovelace", email="ada@example.com", role="Engineer",
                      department="Engineering", salary=95000, date_joined="2021-03-01"),
        make_employee(id=2, name="Grace Hopper", email="grace@example.com", role="Manager",
                      department="Operations", salary=120000, date_joined="2019-07-15"),
        make_employee(id=3, name="alan Turing", email="alan@example.com", role="Analyst",
                      department="Engineering", salary=80000, date_joined="2023-01-10"),
    ]


@pytest.fixture
def fake_store(sample_employees) -> FakeStore:
    return FakeStore(sample_employees)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(fake_store, clock) -> FlowController:
    return FlowController(fake_store, NotificationCenter(ttl_seconds=5.0, clock=clock))


@pytest.fixture
def client(controller):
    app.dependency_overrides[get_flow_controller] = lambda: controller
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
