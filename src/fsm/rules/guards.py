"""
Guards para transições de status do apontamento.

Guards são regras adicionais ao grafo de transições. Todos recebem
(origem, destino) e devolvem um GuardResult; o primeiro que negar vence.
"""

from collections.abc import Callable, Iterable

from fsm.states.timesheet import TERMINAL_STATES, TimesheetStatus


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[TimesheetStatus, TimesheetStatus], GuardResult]


def guard_valid_state(
    from_state: TimesheetStatus,
    to_state: TimesheetStatus,
) -> GuardResult:
    """Guard: ambos os status precisam ser membros do enum."""
    if not isinstance(from_state, TimesheetStatus):
        return GuardResult.deny(f"Status de origem inválido: {from_state}")

    if not isinstance(to_state, TimesheetStatus):
        return GuardResult.deny(f"Status de destino inválido: {to_state}")

    return GuardResult.allow()


def guard_terminal_state(
    from_state: TimesheetStatus,
    to_state: TimesheetStatus,
) -> GuardResult:
    """Guard: apontamento pago não sai mais do status PAID."""
    if from_state in TERMINAL_STATES:
        return GuardResult.deny(
            f"Status {from_state.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_state(
    from_state: TimesheetStatus,
    to_state: TimesheetStatus,
) -> GuardResult:
    """Guard: nenhuma mudança de status é reflexiva."""
    if from_state == to_state:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )
    return GuardResult.allow()


def require_source(
    allowed: Iterable[TimesheetStatus],
    reason: str,
) -> Guard:
    """
    Cria guard que só permite transições a partir dos status informados.

    Args:
        allowed: Status de origem aceitos
        reason: Motivo devolvido quando a origem não é aceita

    Returns:
        Guard pronto para compor com DEFAULT_GUARDS
    """
    accepted = frozenset(allowed)

    def _guard(from_state: TimesheetStatus, to_state: TimesheetStatus) -> GuardResult:
        if from_state not in accepted:
            return GuardResult.deny(reason)
        return GuardResult.allow()

    return _guard


DEFAULT_GUARDS: list[Guard] = [
    guard_valid_state,
    guard_terminal_state,
    guard_same_state,
]


def evaluate_guards(
    from_state: TimesheetStatus,
    to_state: TimesheetStatus,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia guards em ordem.

    Args:
        from_state: Status de origem
        to_state: Status de destino
        guards: Lista de guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result

    return GuardResult.allow()
