"""View-side models: filter/sort criteria and the derived board view."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from staffboard.models.employee import Employee, EmployeeId

ALL_DEPARTMENTS = "all"


class SortKey(str, Enum):
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    SALARY_ASC = "salary-asc"
    SALARY_DESC = "salary-desc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS: dict[SortKey, str] = {
    SortKey.NAME_ASC: "Name (A-Z)",
    SortKey.NAME_DESC: "Name (Z-A)",
    SortKey.SALARY_ASC: "Salary (Low to High)",
    SortKey.SALARY_DESC: "Salary (High to Low)",
    SortKey.DATE_ASC: "Date Joined (Oldest)",
    SortKey.DATE_DESC: "Date Joined (Newest)",
}


class Criteria(BaseModel):
    """Search text, department selector and sort key driving the projection."""

    search: str = ""
    department: str = ALL_DEPARTMENTS
    sort: SortKey = SortKey.NAME_ASC

    model_config = {"frozen": True}

    @field_validator("search", mode="before")
    @classmethod
    def _strip_search(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("department", mode="before")
    @classmethod
    def _default_department(cls, value: object) -> object:
        # An empty selector value means "All Departments".
        if value is None or value == "":
            return ALL_DEPARTMENTS
        return value


class Statistics(BaseModel):
    count: int = 0
    total_salary: float = 0.0
    avg_salary: float = 0.0
    department_count: int = 0


class EmptyState(str, Enum):
    NONE = "none"
    NO_EMPLOYEES = "no_employees"
    NO_MATCHES = "no_matches"
    LOAD_FAILED = "load_failed"


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class Notification(BaseModel):
    id: int
    message: str
    level: NotificationLevel = NotificationLevel.SUCCESS
    expires_at: float


class BoardView(BaseModel):
    """Everything the page needs to render the employee board."""

    projection: list[Employee] = Field(default_factory=list)
    statistics: Statistics = Field(default_factory=Statistics)
    department_options: list[str] = Field(default_factory=list)
    criteria: Criteria = Field(default_factory=Criteria)
    total_records: int = 0
    edit_target: EmployeeId | None = None
    edit_record: Employee | None = None
    form_open: bool = False
    empty_state: EmptyState = EmptyState.NONE
    notifications: list[Notification] = Field(default_factory=list)
