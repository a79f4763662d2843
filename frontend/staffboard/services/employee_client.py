"""REST client for the employee resource (list, create, update, delete)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError as PydanticValidationError

from staffboard.core.config import Settings
from staffboard.models.employee import Employee, EmployeeDraft, EmployeeId

logger = logging.getLogger(__name__)


class EmployeeStoreError(Exception):
    pass


class NetworkError(EmployeeStoreError):
    """The request could not be sent or no response was received."""


class HttpError(EmployeeStoreError):
    def __init__(self, status: int, detail: str = "") -> None:
        self.status = status
        self.detail = detail
        message = f"Employee API returned {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ValidationError(HttpError):
    """The server rejected a create/update payload."""


class NotFoundError(HttpError):
    """The addressed employee does not exist server-side."""


class InvalidResponseError(EmployeeStoreError):
    """A success response carried a body that is not an employee payload."""


def error_for_status(status: int, detail: str = "") -> HttpError:
    if status == 404:
        return NotFoundError(status, detail)
    if status in (400, 422):
        return ValidationError(status, detail)
    return HttpError(status, detail)


class EmployeeClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 30.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_API_BASE_URL:
            logger.warning("Employee API base URL missing; EmployeeClient not initialized")
            return

        base = settings.EMPLOYEE_API_BASE_URL.rstrip("/")
        path = "/" + settings.EMPLOYEE_API_PATH.strip("/")
        self.base_url = f"{base}{path}"
        self.timeout_seconds = settings.EMPLOYEE_API_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("EmployeeClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    async def list_employees(self) -> list[Employee]:
        data = await self._request("GET", self.base_url)
        if not isinstance(data, list):
            raise InvalidResponseError("Expected a JSON array of employees")
        return [self._parse_employee(item) for item in data]

    async def create_employee(self, draft: EmployeeDraft) -> Employee:
        data = await self._request("POST", self.base_url, payload=draft.model_dump())
        return self._parse_employee(data)

    async def update_employee(self, employee_id: EmployeeId, draft: EmployeeDraft) -> Employee:
        data = await self._request("PUT", self._item_url(employee_id), payload=draft.model_dump())
        return self._parse_employee(data)

    async def delete_employee(self, employee_id: EmployeeId) -> None:
        await self._request("DELETE", self._item_url(employee_id), expect_body=False)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self._request("GET", self.base_url)
            return True
        except EmployeeStoreError:
            logger.exception("EmployeeClient connection check failed")
            return False

    def _item_url(self, employee_id: EmployeeId) -> str:
        return f"{self.base_url}/{employee_id}"

    async def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        if not self.initialized:
            raise RuntimeError("EmployeeClient not initialized")

        headers = {"Accept": "application/json"}
        if payload is not None:
            headers["Content-Type"] = "application/json"

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, headers=headers, json=payload) as response:
                    if 200 <= response.status < 300:
                        if not expect_body or response.status == 204:
                            return None
                        return await response.json()

                    detail = await self._error_detail(response)
                    logger.warning("%s %s failed: %s %s", method, url, response.status, detail)
                    raise error_for_status(response.status, detail)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise NetworkError(f"{method} {url} failed: {err}") from err

    async def _error_detail(self, response: Any) -> str:
        try:
            body = await response.json(content_type=None)
        except Exception:
            return await response.text()
        if isinstance(body, dict) and "detail" in body:
            return str(body["detail"])
        return str(body) if body else ""

    def _parse_employee(self, raw: Any) -> Employee:
        try:
            return Employee.model_validate(raw)
        except PydanticValidationError as err:
            raise InvalidResponseError(f"Malformed employee payload: {err}") from err


employee_client = EmployeeClient()
