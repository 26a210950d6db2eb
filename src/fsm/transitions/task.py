"""
Transições observáveis do status de tarefas.

O status é derivado (flag de ativa + relógio), então o mapa abaixo
descreve o que a derivação pode produzir entre duas observações da
mesma tarefa, e não comandos aceitos pelo backend.
"""

from fsm.states.task import TERMINAL_TASK_STATUSES, TaskStatus

TaskTransitionMap = dict[TaskStatus, frozenset[TaskStatus]]

VALID_TASK_TRANSITIONS: TaskTransitionMap = {
    # PENDENTE: o horário passa ou a tarefa é concluída
    TaskStatus.PENDENTE: frozenset({
        TaskStatus.ATRASADA,
        TaskStatus.RESOLVIDA,
    }),
    # ATRASADA: só sai quando concluída
    TaskStatus.ATRASADA: frozenset({
        TaskStatus.RESOLVIDA,
    }),
    TaskStatus.RESOLVIDA: frozenset(),
}


def get_valid_task_targets(state: TaskStatus) -> frozenset[TaskStatus]:
    """Retorna os destinos possíveis a partir de `state` (vazio se terminal)."""
    return VALID_TASK_TRANSITIONS.get(state, frozenset())


def is_task_transition_valid(from_state: TaskStatus, to_state: TaskStatus) -> bool:
    """
    Verifica se `to_state` pode suceder `from_state`.

    Observar o mesmo status duas vezes é sempre válido (nenhuma mudança).
    """
    if from_state == to_state:
        return True
    if from_state in TERMINAL_TASK_STATUSES:
        return False
    return to_state in get_valid_task_targets(from_state)


def validate_task_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições de tarefas.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in TaskStatus:
        if state not in VALID_TASK_TRANSITIONS:
            errors.append(f"Status {state.name} ausente em VALID_TASK_TRANSITIONS")

    for state in TERMINAL_TASK_STATUSES:
        if VALID_TASK_TRANSITIONS.get(state):
            errors.append(f"Status terminal {state.name} possui transições de saída")

    return errors
