"""
Status canônicos do ciclo de vida de um apontamento quinzenal.

Um apontamento nasce EM ABERTO, pode ser aprovado para pagamento e
termina PAGO. PAGO é terminal: nenhuma operação altera um registro pago.
"""

from enum import StrEnum


class TimesheetStatus(StrEnum):
    """
    Status de um apontamento.

    Não-terminais:
        - OPEN: Em aberto, valores ainda editáveis
        - APPROVED_FOR_PAYMENT: Aprovado, aguardando pagamento

    Terminal:
        - PAID: Pagamento registrado
    """

    OPEN = "OPEN"
    APPROVED_FOR_PAYMENT = "APPROVED_FOR_PAYMENT"
    PAID = "PAID"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[TimesheetStatus] = frozenset({TimesheetStatus.PAID})

# Status permitidos para edição de valores e período
EDITABLE_STATES: frozenset[TimesheetStatus] = frozenset({TimesheetStatus.OPEN})

DEFAULT_INITIAL_STATE: TimesheetStatus = TimesheetStatus.OPEN


def is_terminal(state: TimesheetStatus) -> bool:
    """Verifica se o status é terminal."""
    return state in TERMINAL_STATES


def is_valid_state(state: object) -> bool:
    """Verifica se o valor é um TimesheetStatus válido."""
    return isinstance(state, TimesheetStatus)
