"""
Error rendering for the NinjaAPI.

Every error body carries an `erro` key with a human-readable message.
Store failures additionally expose the underlying error text as `detalhe`.
"""
import logging

from django.http import HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

logger = logging.getLogger(__name__)

DADOS_INVALIDOS = "Dados da requisição inválidos"


class StoreError(HttpError):
    """A storage failure surfaced to the client as HTTP 500."""

    def __init__(self, message: str, cause: Exception):
        super().__init__(500, message)
        self.detalhe = str(cause)


def install_error_handlers(api: NinjaAPI) -> None:
    @api.exception_handler(HttpError)
    def on_http_error(request: HttpRequest, exc: HttpError):
        body = {"erro": str(exc)}
        detalhe = getattr(exc, 'detalhe', None)
        if detalhe is not None:
            body["detalhe"] = detalhe
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.path} failed: {exc} ({detalhe})")
        return api.create_response(request, body, status=exc.status_code)

    @api.exception_handler(ValidationError)
    def on_validation_error(request: HttpRequest, exc: ValidationError):
        return api.create_response(
            request,
            {"erro": DADOS_INVALIDOS, "detalhes": exc.errors},
            status=400,
        )
