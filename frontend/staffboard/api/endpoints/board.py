from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from staffboard.api.templating import templates
from staffboard.core.dependencies import get_flow_controller
from staffboard.models.intent import Intent
from staffboard.models.view import SortKey
from staffboard.services.flow_controller import FlowController

router = APIRouter(tags=["board"])


def redirect_to_board() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def show_board(
    request: Request,
    search: str | None = None,
    department: str | None = None,
    sort: SortKey | None = None,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    await controller.ensure_loaded()
    if search is not None:
        await controller.dispatch(Intent.search_changed(search))
    if department is not None:
        await controller.dispatch(Intent.filter_changed(department))
    if sort is not None:
        await controller.dispatch(Intent.sort_changed(sort))

    return templates.TemplateResponse(request, "board.html", {"view": controller.view()})


@router.post("/search/clear")
async def clear_search(controller: FlowController = Depends(get_flow_controller)):  # noqa: B008
    await controller.dispatch(Intent.search_cleared())
    return redirect_to_board()


@router.post("/reload")
async def reload_employees(controller: FlowController = Depends(get_flow_controller)):  # noqa: B008
    await controller.dispatch(Intent.load())
    return redirect_to_board()


@router.post("/notifications/{notification_id}/dismiss")
async def dismiss_notification(
    notification_id: int,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    await controller.dispatch(Intent.notification_dismissed(notification_id))
    return redirect_to_board()
