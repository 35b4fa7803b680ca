from typing import List

from django.db import transaction

from apps.core.storage import Store
from .dtos import TarefaIn, TarefaUpdateIn


def list_tarefas(store: Store) -> List[dict]:
    """All tasks, newest first."""
    return list(store.tarefas().order_by('-data_criacao', '-id').values())


def create_tarefa(store: Store, payload: TarefaIn) -> int:
    with transaction.atomic(using=store.alias):
        tarefa = store.tarefas().create(titulo=payload.titulo, descricao=payload.descricao)
    return tarefa.id


def update_tarefa(store: Store, tarefa_id: int, payload: TarefaUpdateIn) -> int:
    """Full replacement of the mutable fields. Returns the number of rows changed."""
    with transaction.atomic(using=store.alias):
        return store.tarefas().filter(id=tarefa_id).update(
            titulo=payload.titulo,
            descricao=payload.descricao,
            concluida=bool(payload.concluida),
        )


def delete_tarefa(store: Store, tarefa_id: int) -> int:
    with transaction.atomic(using=store.alias):
        deleted, _ = store.tarefas().filter(id=tarefa_id).delete()
    return deleted
