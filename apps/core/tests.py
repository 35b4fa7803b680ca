from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.db import OperationalError, connection
from django.test import Client, SimpleTestCase, TestCase, TransactionTestCase, override_settings
from ninja.errors import HttpError

from apps.tarefas.models import Tarefa
from .storage import Store
from .validators import ID_INVALIDO, parse_id


class ParseIdTest(SimpleTestCase):
    def test_accepts_positive_integers(self):
        self.assertEqual(parse_id("7"), 7)
        self.assertEqual(parse_id(" 12 "), 12)

    def test_rejects_everything_else(self):
        for value in ["abc", "0", "-3", "1.5", "", "1e3", "1_000", "\u0663", "+5"]:
            with self.subTest(value=value):
                with self.assertRaises(HttpError) as ctx:
                    parse_id(value)
                self.assertEqual(ctx.exception.status_code, 400)
                self.assertEqual(str(ctx.exception), ID_INVALIDO)


class StoreBootstrapTest(TestCase):
    def test_bootstrap_is_idempotent(self):
        store = Store()
        with self.assertLogs('apps.core.storage', level='INFO') as logs:
            self.assertTrue(store.bootstrap())
            self.assertTrue(store.bootstrap())
        self.assertTrue(any("Connected to store" in line for line in logs.output))

    def test_open_failure_is_logged_and_not_fatal(self):
        store = Store()
        with patch.object(
            store.connection.introspection,
            'table_names',
            side_effect=OperationalError("unable to open database file"),
        ):
            with self.assertLogs('apps.core.storage', level='ERROR') as logs:
                self.assertFalse(store.bootstrap())
        self.assertIn("unable to open database file", logs.output[0])

    @override_settings(STORE_FAIL_FAST=True)
    def test_open_failure_raises_when_fail_fast(self):
        store = Store()
        with patch.object(
            store.connection.introspection,
            'table_names',
            side_effect=OperationalError("unable to open database file"),
        ):
            with self.assertLogs('apps.core.storage', level='ERROR'):
                with self.assertRaises(OperationalError):
                    store.bootstrap()


class StoreCreatesTablesTest(TransactionTestCase):
    def test_bootstrap_creates_missing_table(self):
        with connection.schema_editor() as editor:
            editor.delete_model(Tarefa)
        self.assertNotIn('tarefas', connection.introspection.table_names())

        self.assertTrue(Store().bootstrap())

        self.assertIn('tarefas', connection.introspection.table_names())
        self.assertEqual(Tarefa.objects.count(), 0)


class RootAndLoggingTest(TestCase):
    def setUp(self):
        self.client = Client()

    def test_root_reports_api_is_up(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"mensagem": "API funcionando! 🚀"})

    def test_every_request_is_logged(self):
        with self.assertLogs('apps.core.middleware', level='INFO') as logs:
            self.client.get('/tarefas')
            self.client.delete('/tarefas/abc')
        self.assertEqual(len(logs.output), 2)
        self.assertIn("GET /tarefas", logs.output[0])
        self.assertIn("DELETE /tarefas/abc", logs.output[1])


class ServeCommandTest(TestCase):
    def test_serve_bootstraps_then_runs_server_on_fixed_port(self):
        out = StringIO()
        with patch('apps.core.management.commands.serve.call_command') as runserver:
            call_command('serve', stdout=out)

        self.assertIn("Store ready", out.getvalue())
        runserver.assert_called_once_with('runserver', '127.0.0.1:3000', use_reloader=False)
