"""Employee models exchanged with the employee REST resource."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# Empty department means "no department"; it never shows up as a filter option.
NO_DEPARTMENT = ""

EmployeeId = int | str


class EmployeeDraft(BaseModel):
    """Employee fields sent on create and update (everything except the id)."""

    name: str
    email: str
    role: str
    department: str = NO_DEPARTMENT
    salary: float = Field(..., ge=0)
    date_joined: str

    @field_validator("department", mode="before")
    @classmethod
    def _normalize_department(cls, value: object) -> object:
        if value is None:
            return NO_DEPARTMENT
        return value


class Employee(EmployeeDraft):
    """Employee record as returned by the server."""

    id: EmployeeId

    def to_draft(self) -> EmployeeDraft:
        return EmployeeDraft(**self.model_dump(exclude={"id"}))
