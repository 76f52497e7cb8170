"""
Exports públicos do módulo fsm/transitions.

Grafo de transições válidas e tabela de operações do apontamento.
"""

from fsm.transitions.operations import (
    OPERATION_SOURCES,
    OPERATION_TARGETS,
    REJECTION_MESSAGES,
    TimesheetOperation,
    allowed_sources,
    target_of,
)
from fsm.transitions.rules import (
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

__all__ = [
    "OPERATION_SOURCES",
    "OPERATION_TARGETS",
    "REJECTION_MESSAGES",
    "VALID_TRANSITIONS",
    "TimesheetOperation",
    "TransitionMap",
    "allowed_sources",
    "get_valid_targets",
    "is_transition_valid",
    "target_of",
    "validate_transition_map",
]
