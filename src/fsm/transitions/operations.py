"""
Operações de negócio sobre o apontamento e seus status de origem.

O grafo em ``rules`` diz quais mudanças de status existem; esta tabela diz
qual operação pode ser executada a partir de qual status. EDIT não muda o
status, apenas exige um status editável (EDITABLE_STATES).
"""

from enum import StrEnum

from fsm.states.timesheet import EDITABLE_STATES, TimesheetStatus


class TimesheetOperation(StrEnum):
    """Operações que atuam sobre o ciclo de vida do apontamento."""

    APPROVE = "approve"
    REGISTER_PAYMENT = "register_payment"
    APPROVE_AND_PAY = "approve_and_pay"
    EDIT = "edit"


OPERATION_SOURCES: dict[TimesheetOperation, frozenset[TimesheetStatus]] = {
    TimesheetOperation.APPROVE: frozenset({TimesheetStatus.OPEN}),
    TimesheetOperation.REGISTER_PAYMENT: frozenset({
        TimesheetStatus.OPEN,
        TimesheetStatus.APPROVED_FOR_PAYMENT,
    }),
    TimesheetOperation.APPROVE_AND_PAY: frozenset({TimesheetStatus.OPEN}),
    TimesheetOperation.EDIT: EDITABLE_STATES,
}

# None = operação sem mudança de status
OPERATION_TARGETS: dict[TimesheetOperation, TimesheetStatus | None] = {
    TimesheetOperation.APPROVE: TimesheetStatus.APPROVED_FOR_PAYMENT,
    TimesheetOperation.REGISTER_PAYMENT: TimesheetStatus.PAID,
    TimesheetOperation.APPROVE_AND_PAY: TimesheetStatus.PAID,
    TimesheetOperation.EDIT: None,
}

REJECTION_MESSAGES: dict[TimesheetOperation, str] = {
    TimesheetOperation.APPROVE: (
        "só é possível aprovar um apontamento que está 'Em Aberto'"
    ),
    TimesheetOperation.REGISTER_PAYMENT: (
        "só é possível pagar um apontamento 'Em Aberto' ou 'Aprovado para Pagamento'"
    ),
    TimesheetOperation.APPROVE_AND_PAY: (
        "só é possível aprovar e pagar um apontamento que está 'Em Aberto'"
    ),
    TimesheetOperation.EDIT: (
        "só é possível editar um apontamento que está 'Em Aberto'"
    ),
}


def allowed_sources(operation: TimesheetOperation) -> frozenset[TimesheetStatus]:
    """Retorna os status a partir dos quais a operação é permitida."""
    return OPERATION_SOURCES.get(operation, frozenset())


def target_of(operation: TimesheetOperation) -> TimesheetStatus | None:
    """Retorna o status resultante da operação (None se não muda status)."""
    return OPERATION_TARGETS.get(operation)
