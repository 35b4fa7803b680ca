from typing import Optional
from ninja import Schema
from ninja.errors import HttpError

from apps.core.validators import require_text
from .models import TITULO_MAX_LENGTH

TITULO_OBRIGATORIO = "Título é obrigatório"
TITULO_LONGO = f"Título muito longo (máximo {TITULO_MAX_LENGTH} caracteres)"


class TarefaIn(Schema):
    """Body for creating a task."""
    titulo: Optional[str] = None
    descricao: Optional[str] = None


class TarefaUpdateIn(TarefaIn):
    """
    Body for replacing a task. Omitted fields are not kept from the stored
    row: a missing description becomes null and `concluida` becomes false.
    """
    concluida: Optional[bool] = None


def validate_tarefa(payload: TarefaIn) -> None:
    require_text(payload.titulo, TITULO_OBRIGATORIO)
    # Length is counted in Unicode code points, so an emoji counts as one.
    if len(payload.titulo) > TITULO_MAX_LENGTH:
        raise HttpError(400, TITULO_LONGO)
