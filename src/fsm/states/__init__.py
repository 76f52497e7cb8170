"""
Exports públicos do módulo fsm/states.

Status canônicos do ciclo de vida do apontamento.
"""

from fsm.states.timesheet import (
    DEFAULT_INITIAL_STATE,
    EDITABLE_STATES,
    TERMINAL_STATES,
    TimesheetStatus,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "EDITABLE_STATES",
    "TERMINAL_STATES",
    "TimesheetStatus",
    "is_terminal",
    "is_valid_state",
]
