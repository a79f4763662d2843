"""Single dispatcher turning user intents into remote calls and view updates."""

from __future__ import annotations

import logging
import math
from collections.abc import Awaitable, Callable, Mapping
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from staffboard.models.employee import Employee, EmployeeDraft, EmployeeId
from staffboard.models.intent import Intent, IntentKind
from staffboard.models.view import ALL_DEPARTMENTS, BoardView, Criteria, EmptyState
from staffboard.services.collection import EmployeeCollection
from staffboard.services.employee_client import EmployeeStoreError, NotFoundError, employee_client
from staffboard.services.notifications import NotificationCenter
from staffboard.services.view_pipeline import (
    compute_department_options,
    compute_projection,
    compute_statistics,
)

logger = logging.getLogger(__name__)

MSG_LOAD_FAILED = "Failed to load employees. Make sure the backend is running."
MSG_CREATED = "Employee added successfully!"
MSG_CREATE_FAILED = "Failed to create employee. Please check the data and try again."
MSG_UPDATED = "Employee updated successfully!"
MSG_UPDATE_FAILED = "Failed to update employee. Please try again."
MSG_UPDATE_MISSING = "Failed to update employee. It no longer exists on the server."
MSG_DELETED = "Employee deleted successfully!"
MSG_DELETE_FAILED = "Failed to delete employee. Please try again."

_FORM_FIELDS = ("name", "email", "role", "department", "salary", "date_joined")


class EmployeeStore(Protocol):
    async def list_employees(self) -> list[Employee]: ...

    async def create_employee(self, draft: EmployeeDraft) -> Employee: ...

    async def update_employee(self, employee_id: EmployeeId, draft: EmployeeDraft) -> Employee: ...

    async def delete_employee(self, employee_id: EmployeeId) -> None: ...


class FormError(ValueError):
    pass


def parse_employee_form(form: Mapping[str, str]) -> EmployeeDraft:
    """Build a draft from submitted form fields, rejecting unusable input."""
    values = {field: (form.get(field) or "").strip() for field in _FORM_FIELDS}
    missing = [field for field in ("name", "email", "role", "date_joined") if not values[field]]
    if missing:
        raise FormError(f"Please fill in: {', '.join(missing)}")

    try:
        salary = float(values["salary"])
    except ValueError as err:
        raise FormError("Salary must be a number") from err
    if not math.isfinite(salary):
        raise FormError("Salary must be a number")

    try:
        return EmployeeDraft(
            name=values["name"],
            email=values["email"],
            role=values["role"],
            department=values["department"],
            salary=salary,
            date_joined=values["date_joined"],
        )
    except PydanticValidationError as err:
        raise FormError(describe_draft_errors(err)) from err


def describe_draft_errors(err: PydanticValidationError) -> str:
    problems = []
    for error in err.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        if field == "salary" and error["type"] == "greater_than_equal":
            problems.append("Salary must not be negative")
        else:
            problems.append(f"Invalid {field.replace('_', ' ')}: {error['msg']}")
    return "; ".join(problems)


class FlowController:
    """Owns the collection state and the current criteria for one board."""

    def __init__(self, store: EmployeeStore, notifications: NotificationCenter | None = None) -> None:
        self.store = store
        self.collection = EmployeeCollection()
        self.notifications = notifications or NotificationCenter()
        self.criteria = Criteria()
        self.loaded = False
        self.load_attempted = False
        self.form_open = False
        self._handlers: dict[IntentKind, Callable[[Intent], Awaitable[None]]] = {
            IntentKind.LOAD: self._load,
            IntentKind.SEARCH_CHANGED: self._search_changed,
            IntentKind.SEARCH_CLEARED: self._search_cleared,
            IntentKind.FILTER_CHANGED: self._filter_changed,
            IntentKind.SORT_CHANGED: self._sort_changed,
            IntentKind.ADD_REQUESTED: self._add_requested,
            IntentKind.EDIT_REQUESTED: self._edit_requested,
            IntentKind.DELETE_REQUESTED: self._delete_requested,
            IntentKind.FORM_SUBMITTED: self._form_submitted,
            IntentKind.MODAL_CLOSED: self._modal_closed,
            IntentKind.NOTIFICATION_DISMISSED: self._notification_dismissed,
        }

    async def dispatch(self, intent: Intent) -> BoardView:
        logger.debug("Dispatching %s", intent.kind.value)
        await self._handlers[intent.kind](intent)
        return self.view()

    async def ensure_loaded(self) -> BoardView:
        """Load once per board. After a failure only an explicit LOAD retries."""
        if not self.load_attempted:
            return await self.dispatch(Intent.load())
        return self.view()

    def view(self) -> BoardView:
        records = self.collection.records
        options, department = compute_department_options(records, self.criteria.department)
        if department != self.criteria.department:
            self.criteria = self.criteria.model_copy(update={"department": department})

        projection = compute_projection(records, self.criteria)
        edit_target = self.collection.edit_target
        return BoardView(
            projection=projection,
            statistics=compute_statistics(records),
            department_options=options,
            criteria=self.criteria,
            total_records=len(records),
            edit_target=edit_target,
            edit_record=self.collection.find(edit_target) if edit_target is not None else None,
            form_open=self.form_open,
            empty_state=self._empty_state(projection),
            notifications=self.notifications.active(),
        )

    def _empty_state(self, projection: list[Employee]) -> EmptyState:
        if projection:
            return EmptyState.NONE
        if self.collection.load_failed:
            return EmptyState.LOAD_FAILED
        if len(self.collection) == 0:
            return EmptyState.NO_EMPLOYEES
        return EmptyState.NO_MATCHES

    async def _load(self, intent: Intent) -> None:
        self.load_attempted = True
        try:
            records = await self.store.list_employees()
        except EmployeeStoreError:
            logger.exception("Error loading employees")
            self.collection.load_failed = True
            self.notifications.error(MSG_LOAD_FAILED)
            return

        self.collection.replace_all(records)
        self.loaded = True
        logger.info("Loaded %d employees", len(records))

    async def _search_changed(self, intent: Intent) -> None:
        self.criteria = self.criteria.model_copy(update={"search": (intent.text or "").strip()})

    async def _search_cleared(self, intent: Intent) -> None:
        self.criteria = self.criteria.model_copy(update={"search": ""})

    async def _filter_changed(self, intent: Intent) -> None:
        self.criteria = self.criteria.model_copy(update={"department": intent.text or ALL_DEPARTMENTS})

    async def _sort_changed(self, intent: Intent) -> None:
        if intent.sort is not None:
            self.criteria = self.criteria.model_copy(update={"sort": intent.sort})

    async def _add_requested(self, intent: Intent) -> None:
        self.collection.begin_create()
        self.form_open = True

    async def _edit_requested(self, intent: Intent) -> None:
        if intent.employee_id is None or self.collection.begin_edit(intent.employee_id) is None:
            return
        self.form_open = True

    async def _modal_closed(self, intent: Intent) -> None:
        self._close_form()

    async def _notification_dismissed(self, intent: Intent) -> None:
        if intent.notification_id is not None:
            self.notifications.dismiss(intent.notification_id)

    async def _delete_requested(self, intent: Intent) -> None:
        if intent.employee_id is None or not intent.confirmed:
            return

        try:
            await self.store.delete_employee(intent.employee_id)
        except EmployeeStoreError:
            logger.exception("Error deleting employee %s", intent.employee_id)
            self.notifications.error(MSG_DELETE_FAILED)
            return

        self.collection.remove_one(intent.employee_id)
        self.notifications.success(MSG_DELETED)

    async def _form_submitted(self, intent: Intent) -> None:
        if intent.draft is None:
            return

        # Route on the id the form carried, never on the shared edit target.
        if intent.employee_id is None:
            await self._create(intent.draft)
            return

        record = self.collection.find(intent.employee_id)
        if record is None:
            logger.warning("Form submitted for unknown employee %s", intent.employee_id)
            self.notifications.error(MSG_UPDATE_MISSING)
            return
        await self._update(record.id, intent.draft)

    async def _create(self, draft: EmployeeDraft) -> None:
        try:
            created = await self.store.create_employee(draft)
        except EmployeeStoreError:
            logger.exception("Error creating employee")
            self.notifications.error(MSG_CREATE_FAILED)
            return

        self.collection.append(created)
        self._close_form()
        self.notifications.success(MSG_CREATED)

    async def _update(self, employee_id: EmployeeId, draft: EmployeeDraft) -> None:
        try:
            updated = await self.store.update_employee(employee_id, draft)
        except NotFoundError:
            logger.exception("Employee %s no longer exists", employee_id)
            self.notifications.error(MSG_UPDATE_MISSING)
            return
        except EmployeeStoreError:
            logger.exception("Error updating employee %s", employee_id)
            self.notifications.error(MSG_UPDATE_FAILED)
            return

        self.collection.replace_one(employee_id, updated)
        self._close_form()
        self.notifications.success(MSG_UPDATED)

    def _close_form(self) -> None:
        self.form_open = False
        self.collection.end_edit()


flow_controller = FlowController(employee_client)
