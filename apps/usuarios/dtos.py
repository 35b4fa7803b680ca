from typing import Optional
from ninja import Schema
from ninja.errors import HttpError

from apps.core.validators import is_blank

CAMPOS_OBRIGATORIOS = "Nome e email são obrigatórios"


class UsuarioIn(Schema):
    """Body for creating or replacing a user. Both fields are required."""
    nome: Optional[str] = None
    email: Optional[str] = None


def validate_usuario(payload: UsuarioIn) -> None:
    if is_blank(payload.nome) or is_blank(payload.email):
        raise HttpError(400, CAMPOS_OBRIGATORIOS)
