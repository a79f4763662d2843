"""User intents emitted by the board page and consumed by the flow controller."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from staffboard.models.employee import EmployeeDraft, EmployeeId
from staffboard.models.view import SortKey


class IntentKind(str, Enum):
    LOAD = "load"
    SEARCH_CHANGED = "search_changed"
    SEARCH_CLEARED = "search_cleared"
    FILTER_CHANGED = "filter_changed"
    SORT_CHANGED = "sort_changed"
    ADD_REQUESTED = "add_requested"
    EDIT_REQUESTED = "edit_requested"
    DELETE_REQUESTED = "delete_requested"
    FORM_SUBMITTED = "form_submitted"
    MODAL_CLOSED = "modal_closed"
    NOTIFICATION_DISMISSED = "notification_dismissed"


class Intent(BaseModel):
    kind: IntentKind
    text: str | None = None
    sort: SortKey | None = None
    employee_id: EmployeeId | None = None
    draft: EmployeeDraft | None = None
    confirmed: bool = False
    notification_id: int | None = None

    model_config = {"frozen": True}

    @classmethod
    def load(cls) -> Intent:
        return cls(kind=IntentKind.LOAD)

    @classmethod
    def search_changed(cls, text: str) -> Intent:
        return cls(kind=IntentKind.SEARCH_CHANGED, text=text)

    @classmethod
    def search_cleared(cls) -> Intent:
        return cls(kind=IntentKind.SEARCH_CLEARED)

    @classmethod
    def filter_changed(cls, department: str) -> Intent:
        return cls(kind=IntentKind.FILTER_CHANGED, text=department)

    @classmethod
    def sort_changed(cls, sort: SortKey) -> Intent:
        return cls(kind=IntentKind.SORT_CHANGED, sort=sort)

    @classmethod
    def add_requested(cls) -> Intent:
        return cls(kind=IntentKind.ADD_REQUESTED)

    @classmethod
    def edit_requested(cls, employee_id: EmployeeId) -> Intent:
        return cls(kind=IntentKind.EDIT_REQUESTED, employee_id=employee_id)

    @classmethod
    def delete_requested(cls, employee_id: EmployeeId, confirmed: bool) -> Intent:
        return cls(kind=IntentKind.DELETE_REQUESTED, employee_id=employee_id, confirmed=confirmed)

    @classmethod
    def form_submitted(cls, draft: EmployeeDraft, employee_id: EmployeeId | None = None) -> Intent:
        """A saved form. `employee_id` names the record being edited; None creates."""
        return cls(kind=IntentKind.FORM_SUBMITTED, draft=draft, employee_id=employee_id)

    @classmethod
    def modal_closed(cls) -> Intent:
        return cls(kind=IntentKind.MODAL_CLOSED)

    @classmethod
    def notification_dismissed(cls, notification_id: int) -> Intent:
        return cls(kind=IntentKind.NOTIFICATION_DISMISSED, notification_id=notification_id)
