"""
Módulo FSM: máquina de estados do ciclo de vida do apontamento.

Estrutura:
    - states/: Status do apontamento (TimesheetStatus enum)
    - transitions/: Grafo de transições e tabela de operações
    - rules/: Guards aplicados às transições
    - manager/: Máquina de estados (TimesheetStateMachine)
    - types/: Registros (StateTransition, TransitionResult)
"""

from fsm.manager import TimesheetStateMachine, create_fsm
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    EDITABLE_STATES,
    TERMINAL_STATES,
    TimesheetStatus,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    TimesheetOperation,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "EDITABLE_STATES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "StateTransition",
    "TimesheetOperation",
    "TimesheetStateMachine",
    "TimesheetStatus",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
