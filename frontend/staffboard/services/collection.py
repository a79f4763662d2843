"""In-memory copy of the employee collection and the active edit target."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from staffboard.models.employee import Employee, EmployeeId

logger = logging.getLogger(__name__)


def same_id(left: EmployeeId, right: EmployeeId) -> bool:
    # Ids from URLs arrive as text while the server may send integers.
    return str(left) == str(right)


class EmployeeCollection:
    """Authoritative local mirror of the server's employee set.

    Mutations are applied only after the matching remote call succeeded.
    ``replace_one`` and ``remove_one`` with an unknown id change nothing and
    return ``False``.
    """

    def __init__(self, records: Iterable[Employee] = ()) -> None:
        self._records: list[Employee] = list(records)
        self._edit_target: EmployeeId | None = None
        self.load_failed = False

    @property
    def records(self) -> tuple[Employee, ...]:
        return tuple(self._records)

    @property
    def edit_target(self) -> EmployeeId | None:
        return self._edit_target

    @property
    def editing(self) -> bool:
        return self._edit_target is not None

    def __len__(self) -> int:
        return len(self._records)

    def find(self, employee_id: EmployeeId) -> Employee | None:
        return next((r for r in self._records if same_id(r.id, employee_id)), None)

    def replace_all(self, records: Iterable[Employee]) -> None:
        self._records = list(records)
        self.load_failed = False

    def append(self, record: Employee) -> None:
        self._records.append(record)

    def replace_one(self, employee_id: EmployeeId, record: Employee) -> bool:
        for index, existing in enumerate(self._records):
            if same_id(existing.id, employee_id):
                self._records[index] = record
                return True
        logger.warning("replace_one: employee %s not in collection", employee_id)
        return False

    def remove_one(self, employee_id: EmployeeId) -> bool:
        remaining = [r for r in self._records if not same_id(r.id, employee_id)]
        if len(remaining) == len(self._records):
            logger.warning("remove_one: employee %s not in collection", employee_id)
            return False
        self._records = remaining
        return True

    def begin_create(self) -> None:
        self._edit_target = None

    def begin_edit(self, employee_id: EmployeeId) -> Employee | None:
        record = self.find(employee_id)
        if record is None:
            logger.warning("begin_edit: employee %s not in collection", employee_id)
            return None
        self._edit_target = record.id
        return record

    def end_edit(self) -> None:
        self._edit_target = None
