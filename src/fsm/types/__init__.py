"""
Exports públicos do módulo fsm/types.

Registros de transição de status do apontamento.
"""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
