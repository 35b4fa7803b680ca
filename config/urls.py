"""
URL configuration for the meuapp API.
"""
from django.urls import path
from ninja import NinjaAPI

from apps.core.errors import install_error_handlers
from apps.core.storage import Store

api = NinjaAPI(
    title="meuapp API",
    version="1.0.0",
    description="CRUD API for users and tasks",
    docs_url="/docs",
)
install_error_handlers(api)

# Single shared handle, passed to every resource router.
store = Store()

from apps.core.api import router as core_router
from apps.usuarios.api import build_router as build_usuarios_router
from apps.tarefas.api import build_router as build_tarefas_router

api.add_router("/", core_router)
api.add_router("/usuarios", build_usuarios_router(store))
api.add_router("/tarefas", build_tarefas_router(store))

urlpatterns = [
    path('', api.urls),
]
