from django.http import HttpRequest
from ninja import Router

router = Router(tags=["Core"])


@router.get("/")
def root(request: HttpRequest):
    """Health check."""
    return {"mensagem": "API funcionando! 🚀"}
