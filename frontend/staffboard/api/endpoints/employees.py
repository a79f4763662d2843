from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from staffboard.api.endpoints.board import redirect_to_board
from staffboard.api.templating import templates
from staffboard.core.dependencies import get_flow_controller
from staffboard.models.intent import Intent
from staffboard.services.flow_controller import FlowController, FormError, parse_employee_form

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _render_form(request: Request, controller: FlowController, values: dict | None = None, status_code: int = 200):
    view = controller.view()
    if values is None:
        values = {}
        if view.edit_record is not None:
            values = {**view.edit_record.model_dump(), "employee_id": view.edit_record.id}
    return templates.TemplateResponse(
        request,
        "employee_form.html",
        {"view": view, "values": values, "editing": values.get("employee_id") not in (None, "")},
        status_code=status_code,
    )


@router.get("/new", response_class=HTMLResponse)
async def new_employee(
    request: Request,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    await controller.ensure_loaded()
    await controller.dispatch(Intent.add_requested())
    return _render_form(request, controller)


@router.get("/{employee_id}/edit", response_class=HTMLResponse)
async def edit_employee(
    request: Request,
    employee_id: str,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    await controller.ensure_loaded()
    if controller.collection.find(employee_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    await controller.dispatch(Intent.edit_requested(employee_id))
    return _render_form(request, controller)


@router.post("/form", response_class=HTMLResponse)
async def submit_employee_form(
    request: Request,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    form = await request.form()
    values = {key: str(value) for key, value in form.items()}
    try:
        draft = parse_employee_form(values)
    except FormError as e:
        logger.info("Rejected employee form: %s", e)
        controller.notifications.warning(str(e))
        return _render_form(request, controller, values, status.HTTP_422_UNPROCESSABLE_ENTITY)

    employee_id = values.get("employee_id", "").strip() or None
    view = await controller.dispatch(Intent.form_submitted(draft, employee_id))
    if view.form_open:
        return _render_form(request, controller, values, status.HTTP_502_BAD_GATEWAY)
    return redirect_to_board()


@router.post("/form/cancel")
async def cancel_employee_form(controller: FlowController = Depends(get_flow_controller)):  # noqa: B008
    await controller.dispatch(Intent.modal_closed())
    return redirect_to_board()


@router.get("/{employee_id}/delete", response_class=HTMLResponse)
async def confirm_delete_employee(
    request: Request,
    employee_id: str,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    await controller.ensure_loaded()
    employee = controller.collection.find(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    return templates.TemplateResponse(
        request,
        "confirm_delete.html",
        {"view": controller.view(), "employee": employee},
    )


@router.post("/{employee_id}/delete")
async def delete_employee(
    employee_id: str,
    controller: FlowController = Depends(get_flow_controller),  # noqa: B008
):
    employee = controller.collection.find(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    await controller.dispatch(Intent.delete_requested(employee.id, confirmed=True))
    return redirect_to_board()
