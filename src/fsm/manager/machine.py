"""
Máquina de estados (TimesheetStateMachine) do apontamento.

Valida operações contra a tabela de origens, o grafo de transições e os
guards, e mantém histórico das transições aceitas. Uma instância vive
apenas durante uma operação; o agregado não compartilha máquinas.
"""

from typing import Any

from fsm.rules.guards import DEFAULT_GUARDS, GuardResult, evaluate_guards, require_source
from fsm.states.timesheet import (
    DEFAULT_INITIAL_STATE,
    TimesheetStatus,
    is_terminal,
)
from fsm.transitions.operations import (
    REJECTION_MESSAGES,
    TimesheetOperation,
    allowed_sources,
    target_of,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class TimesheetStateMachine:
    """
    Máquina de estados de um apontamento.

    Attributes:
        current_state: Status atual
        history: Transições aceitas nesta instância
    """

    __slots__ = ("_current_state", "_history", "_timesheet_id")

    def __init__(
        self,
        initial_state: TimesheetStatus | None = None,
        timesheet_id: str = "",
    ) -> None:
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._timesheet_id = timesheet_id

    @property
    def current_state(self) -> TimesheetStatus:
        """Status atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def timesheet_id(self) -> str:
        """Identificador do apontamento."""
        return self._timesheet_id

    @property
    def is_terminal(self) -> bool:
        """Verifica se está em status terminal."""
        return is_terminal(self._current_state)

    def get_valid_targets(self) -> frozenset[TimesheetStatus]:
        """Retorna status de destino válidos a partir do status atual."""
        return get_valid_targets(self._current_state)

    def can_apply(self, operation: TimesheetOperation) -> bool:
        """Verifica se a operação é aceita a partir do status atual."""
        return self._check(operation).allowed

    def apply(
        self,
        operation: TimesheetOperation,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta aplicar uma operação de negócio.

        Args:
            operation: Operação solicitada
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        guard_result = self._check(operation)
        if not guard_result.allowed:
            return TransitionResult(success=False, error_reason=guard_result.reason)

        target = target_of(operation) or self._current_state
        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=operation.value,
            metadata=metadata or {},
        )

        self._current_state = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def _check(self, operation: TimesheetOperation) -> GuardResult:
        source_guard = require_source(
            allowed_sources(operation),
            REJECTION_MESSAGES[operation],
        )
        target = target_of(operation)

        if target is None:
            # Operação sem mudança de status: vale apenas a origem
            return source_guard(self._current_state, self._current_state)

        if not is_transition_valid(self._current_state, target):
            source_result = source_guard(self._current_state, target)
            if not source_result.allowed:
                return source_result
            return GuardResult.deny(
                f"Transição inválida: {self._current_state.name} → {target.name}"
            )

        return evaluate_guards(
            self._current_state,
            target,
            [source_guard, *DEFAULT_GUARDS],
        )

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual para observabilidade."""
        return {
            "timesheet_id": self._timesheet_id,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }


def create_fsm(
    timesheet_id: str,
    initial_state: TimesheetStatus | None = None,
) -> TimesheetStateMachine:
    """
    Factory da máquina de estados.

    Args:
        timesheet_id: Identificador do apontamento
        initial_state: Status inicial (OPEN se None)

    Returns:
        TimesheetStateMachine configurada
    """
    return TimesheetStateMachine(
        initial_state=initial_state,
        timesheet_id=timesheet_id,
    )
