"""
Exports públicos do módulo fsm/manager.

Máquina de estados (TimesheetStateMachine) do apontamento.
"""

from fsm.manager.machine import TimesheetStateMachine, create_fsm

__all__ = [
    "TimesheetStateMachine",
    "create_fsm",
]
