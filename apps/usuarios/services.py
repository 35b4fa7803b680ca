from typing import List

from django.db import transaction

from apps.core.storage import Store
from .dtos import UsuarioIn


def list_usuarios(store: Store) -> List[dict]:
    return list(store.usuarios().values())


def create_usuario(store: Store, payload: UsuarioIn) -> int:
    """Insert a user and return its new id. Raises IntegrityError on a duplicate email."""
    with transaction.atomic(using=store.alias):
        usuario = store.usuarios().create(nome=payload.nome, email=payload.email)
    return usuario.id


def update_usuario(store: Store, usuario_id: int, payload: UsuarioIn) -> int:
    """Replace name and email. Returns the number of rows changed (0 or 1)."""
    with transaction.atomic(using=store.alias):
        return store.usuarios().filter(id=usuario_id).update(
            nome=payload.nome,
            email=payload.email,
        )


def delete_usuario(store: Store, usuario_id: int) -> int:
    with transaction.atomic(using=store.alias):
        deleted, _ = store.usuarios().filter(id=usuario_id).delete()
    return deleted
