"""Endpoints de apontamentos quinzenais.

Endpoints:
- POST   /apontamentos                       cria (201)
- GET    /apontamentos                       lista paginada
- GET    /apontamentos/{id}                  detalhe
- PUT    /apontamentos/{id}                  edita apontamento em aberto
- PATCH  /apontamentos/{id}/aprovar          aprova para pagamento
- PATCH  /apontamentos/{id}/pagar            registra pagamento
- PATCH  /apontamentos/{id}/aprovar-e-pagar  aprova e paga direto
- POST   /apontamentos/replicar              replica lote (207)
- GET    /funcionarios/{id}/apontamentos     lista por funcionário

Endpoints síncronos: rodam no threadpool, um request por thread.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.routes.timesheets.dependencies import (
    get_container,
    list_filters,
    require_all_permissions,
    require_any_permission,
)
from app.authz import (
    PERMISSION_TIMESHEET_APPROVE,
    PERMISSION_TIMESHEET_PAY,
    PERMISSION_TIMESHEET_READ,
    PERMISSION_TIMESHEET_WRITE,
)
from app.bootstrap.dependencies import ServiceContainer
from app.domain.pagination import ListFilters
from app.domain.timesheet import Timesheet
from app.domain.timesheet_commands import (
    CreateTimesheetInput,
    RegisterPaymentInput,
    ReplicateTimesheetsInput,
    UpdateTimesheetInput,
)

logger = logging.getLogger(__name__)

router = APIRouter()
employee_router = APIRouter()

can_read = require_any_permission(PERMISSION_TIMESHEET_READ, PERMISSION_TIMESHEET_WRITE)
can_write = require_any_permission(PERMISSION_TIMESHEET_WRITE)
can_approve = require_any_permission(PERMISSION_TIMESHEET_APPROVE)
can_pay = require_any_permission(PERMISSION_TIMESHEET_PAY)
can_approve_and_pay = require_all_permissions(
    PERMISSION_TIMESHEET_APPROVE,
    PERMISSION_TIMESHEET_PAY,
)


def _serialize(timesheet: Timesheet) -> dict[str, Any]:
    return timesheet.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(can_write)])
def create_timesheet(
    body: CreateTimesheetInput,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return _serialize(container.timesheets.create(body))


@router.get("", dependencies=[Depends(can_read)])
def list_timesheets(
    filters: ListFilters = Depends(list_filters),
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return container.timesheets.list(filters).to_response(_serialize)


@router.post("/replicar", dependencies=[Depends(can_write)])
def replicate_timesheets(
    body: ReplicateTimesheetsInput,
    container: ServiceContainer = Depends(get_container),
) -> JSONResponse:
    """Replica o último apontamento de cada funcionário para a próxima quinzena.

    Sempre 207: o resultado carrega sucessos e falhas por funcionário.
    """
    result = container.replicate.execute(body.employee_ids)
    return JSONResponse(status_code=status.HTTP_207_MULTI_STATUS, content=result.to_response())


@router.get("/{timesheet_id}", dependencies=[Depends(can_read)])
def get_timesheet(
    timesheet_id: str,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return _serialize(container.timesheets.get(timesheet_id))


@router.put("/{timesheet_id}", dependencies=[Depends(can_write)])
def edit_timesheet(
    timesheet_id: str,
    body: UpdateTimesheetInput,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return _serialize(container.timesheets.edit(timesheet_id, body))


@router.patch("/{timesheet_id}/aprovar", dependencies=[Depends(can_approve)])
def approve_timesheet(
    timesheet_id: str,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return _serialize(container.timesheets.approve(timesheet_id))


@router.patch("/{timesheet_id}/pagar", dependencies=[Depends(can_pay)])
def register_payment(
    timesheet_id: str,
    body: RegisterPaymentInput,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    timesheet = container.timesheets.register_payment(timesheet_id, body.payment_account_id)
    return _serialize(timesheet)


@router.patch("/{timesheet_id}/aprovar-e-pagar", dependencies=[Depends(can_approve_and_pay)])
def approve_and_pay(
    timesheet_id: str,
    body: RegisterPaymentInput,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    timesheet = container.timesheets.approve_and_pay(timesheet_id, body.payment_account_id)
    return _serialize(timesheet)


@employee_router.get("/{employee_id}/apontamentos", dependencies=[Depends(can_read)])
def list_employee_timesheets(
    employee_id: str,
    filters: ListFilters = Depends(list_filters),
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    return container.timesheets.list_by_employee(employee_id, filters).to_response(_serialize)
