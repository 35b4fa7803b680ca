"""
Tarefas API endpoints.

Provides CRUD operations for tasks. Store errors are returned to the
client with the store's own message.
"""
from asgiref.sync import sync_to_async
from django.db import DatabaseError
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.core.decorators import valid_id, valid_payload
from apps.core.storage import Store
from . import services
from .dtos import TarefaIn, TarefaUpdateIn, validate_tarefa

NAO_ENCONTRADA = "Tarefa não encontrada"


def build_router(store: Store) -> Router:
    router = Router(tags=["Tarefas"])

    @router.get("")
    async def list_tarefas_api(request: HttpRequest):
        """
        List all tasks, most recently created first.
        """
        try:
            tarefas = await sync_to_async(services.list_tarefas)(store)
        except DatabaseError as e:
            raise HttpError(500, str(e))
        return {"tarefas": tarefas, "total": len(tarefas)}

    @router.post("")
    @valid_payload(validate_tarefa)
    async def create_tarefa_api(request: HttpRequest, payload: TarefaIn):
        try:
            tarefa_id = await sync_to_async(services.create_tarefa)(store, payload)
        except DatabaseError as e:
            raise HttpError(500, str(e))
        return {
            "id": tarefa_id,
            "titulo": payload.titulo,
            "descricao": payload.descricao,
            "mensagem": "Tarefa criada com sucesso!",
        }

    @router.put("/{tarefa_id}")
    @valid_id("tarefa_id")
    @valid_payload(validate_tarefa)
    async def update_tarefa_api(request: HttpRequest, tarefa_id: str, payload: TarefaUpdateIn):
        """
        Edit a task or mark it as done.
        """
        try:
            changed = await sync_to_async(services.update_tarefa)(store, tarefa_id, payload)
        except DatabaseError as e:
            raise HttpError(500, str(e))
        if changed == 0:
            raise HttpError(404, NAO_ENCONTRADA)
        return {
            "id": tarefa_id,
            "titulo": payload.titulo,
            "descricao": payload.descricao,
            "concluida": bool(payload.concluida),
            "mensagem": "Tarefa atualizada com sucesso!",
        }

    @router.delete("/{tarefa_id}")
    @valid_id("tarefa_id")
    async def delete_tarefa_api(request: HttpRequest, tarefa_id: str):
        try:
            deleted = await sync_to_async(services.delete_tarefa)(store, tarefa_id)
        except DatabaseError as e:
            raise HttpError(500, str(e))
        if deleted == 0:
            raise HttpError(404, NAO_ENCONTRADA)
        return {"id": tarefa_id, "mensagem": "Tarefa removida com sucesso!"}

    return router
