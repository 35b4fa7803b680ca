"""
Usuarios API endpoints.

Provides CRUD operations for users. Each endpoint issues a single store
statement; "no row matched" (404) is told apart from a store failure (500)
by the affected-row count.
"""
from asgiref.sync import sync_to_async
from django.db import DatabaseError
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.core.decorators import valid_id, valid_payload
from apps.core.errors import StoreError
from apps.core.storage import Store
from . import services
from .dtos import UsuarioIn, validate_usuario

NAO_ENCONTRADO = "Usuário não encontrado"


def build_router(store: Store) -> Router:
    router = Router(tags=["Usuarios"])

    @router.get("")
    async def list_usuarios_api(request: HttpRequest):
        """
        List all users.
        """
        try:
            usuarios = await sync_to_async(services.list_usuarios)(store)
        except DatabaseError as e:
            raise HttpError(500, str(e))
        return {"usuarios": usuarios, "total": len(usuarios)}

    @router.post("")
    @valid_payload(validate_usuario)
    async def create_usuario_api(request: HttpRequest, payload: UsuarioIn):
        """
        Create a user. Fails with 500 when the email is already taken.
        """
        try:
            usuario_id = await sync_to_async(services.create_usuario)(store, payload)
        except DatabaseError as e:
            raise StoreError("Erro ao criar usuário", e)
        return {
            "id": usuario_id,
            "nome": payload.nome,
            "email": payload.email,
            "mensagem": "Usuário criado com sucesso!",
        }

    @router.put("/{usuario_id}")
    @valid_id("usuario_id")
    @valid_payload(validate_usuario)
    async def update_usuario_api(request: HttpRequest, usuario_id: str, payload: UsuarioIn):
        """
        Replace a user's name and email.
        """
        try:
            changed = await sync_to_async(services.update_usuario)(store, usuario_id, payload)
        except DatabaseError as e:
            raise StoreError("Erro ao atualizar usuário", e)
        if changed == 0:
            raise HttpError(404, NAO_ENCONTRADO)
        return {
            "id": usuario_id,
            "nome": payload.nome,
            "email": payload.email,
            "mensagem": "Usuário atualizado com sucesso!",
        }

    @router.delete("/{usuario_id}")
    @valid_id("usuario_id")
    async def delete_usuario_api(request: HttpRequest, usuario_id: str):
        try:
            deleted = await sync_to_async(services.delete_usuario)(store, usuario_id)
        except DatabaseError as e:
            raise StoreError("Erro ao deletar usuário", e)
        if deleted == 0:
            raise HttpError(404, NAO_ENCONTRADO)
        return {"id": usuario_id, "mensagem": "Usuário deletado com sucesso!"}

    return router
