"""
Exports públicos do módulo fsm/transitions.

Transições observáveis do status de tarefas.
"""

from fsm.transitions.task import (
    VALID_TASK_TRANSITIONS,
    TaskTransitionMap,
    get_valid_task_targets,
    is_task_transition_valid,
    validate_task_transition_map,
)

__all__ = [
    "VALID_TASK_TRANSITIONS",
    "TaskTransitionMap",
    "get_valid_task_targets",
    "is_task_transition_valid",
    "validate_task_transition_map",
]
