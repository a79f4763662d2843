from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from staffboard.core.config import settings
from staffboard.models.view import ALL_DEPARTMENTS, SortKey
from staffboard.services.formatting import format_currency, format_date, format_number

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["currency"] = format_currency
templates.env.filters["number"] = format_number
templates.env.filters["date_label"] = format_date
templates.env.globals["ALL_DEPARTMENTS"] = ALL_DEPARTMENTS
templates.env.globals["SORT_KEYS"] = list(SortKey)

EMPTY_STATE_TEXT: dict[str, tuple[str, str]] = {
    "no_employees": ("No Employees Found", "Start by adding your first employee to the system"),
    "no_matches": ("No Employees Match Your Search", "Try adjusting your search or filter criteria"),
    "load_failed": ("Cannot Reach Employee Service", "Make sure the backend is running, then reload"),
}
templates.env.globals["EMPTY_STATE_TEXT"] = EMPTY_STATE_TEXT
templates.env.globals["NOTIFICATION_TTL_SECONDS"] = settings.NOTIFICATION_TTL_SECONDS
