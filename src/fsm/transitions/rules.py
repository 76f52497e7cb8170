"""
Grafo de transições válidas do apontamento.

OPEN → APPROVED_FOR_PAYMENT → PAID, com atalho OPEN → PAID
(aprovação e pagamento na mesma operação).
"""

from fsm.states.timesheet import TERMINAL_STATES, TimesheetStatus

TransitionMap = dict[TimesheetStatus, frozenset[TimesheetStatus]]

VALID_TRANSITIONS: TransitionMap = {
    TimesheetStatus.OPEN: frozenset({
        TimesheetStatus.APPROVED_FOR_PAYMENT,
        TimesheetStatus.PAID,  # atalho: pagamento sem aprovação prévia
    }),
    TimesheetStatus.APPROVED_FOR_PAYMENT: frozenset({
        TimesheetStatus.PAID,
    }),
    TimesheetStatus.PAID: frozenset(),
}


def get_valid_targets(state: TimesheetStatus) -> frozenset[TimesheetStatus]:
    """
    Retorna os status de destino válidos para um status de origem.

    Args:
        state: Status de origem

    Returns:
        Conjunto de destinos permitidos (vazio se terminal)
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: TimesheetStatus, to_state: TimesheetStatus) -> bool:
    """Verifica se a transição existe no grafo."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in TimesheetStatus:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Status {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Status terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, TimesheetStatus):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    return errors
