"""
Storage handle for the meuapp API.

A Store wraps one Django database alias. It is constructed once when the
URLconf loads and handed to every router factory, so handlers never reach
for a module-level connection.

Usage:
    from apps.core.storage import Store

    store = Store()
    store.bootstrap()
    store.tarefas().filter(id=1).update(concluida=True)
"""
import logging

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.models import QuerySet

from apps.tarefas.models import Tarefa
from apps.usuarios.models import Usuario

logger = logging.getLogger(__name__)

MODELS = (Usuario, Tarefa)


class Store:
    """Handle on the single-file database holding `usuarios` and `tarefas`."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS):
        self.alias = alias

    @property
    def connection(self):
        return connections[self.alias]

    def usuarios(self) -> QuerySet:
        return Usuario.objects.using(self.alias)

    def tarefas(self) -> QuerySet:
        return Tarefa.objects.using(self.alias)

    def bootstrap(self) -> bool:
        """
        Create the `usuarios` and `tarefas` tables if they are missing.

        Safe to call on every start. Returns True when the store is usable.
        On failure the error is logged and False is returned, unless
        STORE_FAIL_FAST is set, in which case the error is re-raised.
        """
        try:
            existing = set(self.connection.introspection.table_names())
            missing = [m for m in MODELS if m._meta.db_table not in existing]
            if missing:
                with self.connection.schema_editor() as editor:
                    for model in missing:
                        editor.create_model(model)
                        logger.info(f"Created table {model._meta.db_table}")
        except DatabaseError as e:
            logger.exception(f"Could not open store {self.name}: {e}")
            if getattr(settings, 'STORE_FAIL_FAST', False):
                raise
            return False

        logger.info(f"Connected to store {self.name}")
        return True

    @property
    def name(self) -> str:
        return str(self.connection.settings_dict.get('NAME'))
