"""
Tests for the /tarefas endpoints.

Covers:
1. Create/list round trip and newest-first ordering
2. Title validation (required, max length)
3. Full-replacement update semantics
4. 404 vs 400 handling for update/delete
"""
import json
from unittest.mock import patch

from django.db import OperationalError
from django.test import TestCase, Client

from apps.core.storage import Store
from .dtos import TarefaIn, TarefaUpdateIn
from .models import Tarefa
from . import services


class TarefaServicesTest(TestCase):
    def setUp(self):
        self.store = Store()

    def test_update_missing_row_changes_nothing(self):
        changed = services.update_tarefa(self.store, 42, TarefaUpdateIn(titulo="X"))
        self.assertEqual(changed, 0)
        self.assertEqual(Tarefa.objects.count(), 0)

    def test_created_task_starts_open(self):
        tarefa_id = services.create_tarefa(self.store, TarefaIn(titulo="Ler"))
        tarefa = Tarefa.objects.get(id=tarefa_id)
        self.assertFalse(tarefa.concluida)
        self.assertIsNone(tarefa.descricao)
        self.assertIsNotNone(tarefa.data_criacao)


class TarefaAPITest(TestCase):
    def setUp(self):
        self.client = Client()

    def post(self, payload):
        return self.client.post('/tarefas', data=json.dumps(payload), content_type='application/json')

    def put(self, tarefa_id, payload):
        return self.client.put(
            f'/tarefas/{tarefa_id}', data=json.dumps(payload), content_type='application/json'
        )

    def test_create_then_list_round_trip(self):
        response = self.post({"titulo": "Buy milk", "descricao": "2%"})
        self.assertEqual(response.status_code, 200)
        created = response.json()
        self.assertEqual(created["titulo"], "Buy milk")
        self.assertEqual(created["descricao"], "2%")
        self.assertEqual(created["mensagem"], "Tarefa criada com sucesso!")

        listing = self.client.get('/tarefas').json()
        self.assertEqual(listing["total"], 1)
        tarefa = listing["tarefas"][0]
        self.assertIsInstance(tarefa["id"], int)
        self.assertGreater(tarefa["id"], 0)
        self.assertEqual(tarefa["id"], created["id"])
        self.assertEqual(tarefa["titulo"], "Buy milk")
        self.assertEqual(tarefa["descricao"], "2%")
        self.assertIs(tarefa["concluida"], False)

    def test_list_is_newest_first(self):
        a = self.post({"titulo": "A"}).json()
        b = self.post({"titulo": "B"}).json()

        ids = [t["id"] for t in self.client.get('/tarefas').json()["tarefas"]]
        self.assertEqual(ids, [b["id"], a["id"]])

    def test_title_is_required(self):
        for payload in [{}, {"titulo": ""}, {"titulo": "   "}, {"descricao": "sem titulo"}]:
            with self.subTest(payload=payload):
                response = self.post(payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"erro": "Título é obrigatório"})
        self.assertEqual(Tarefa.objects.count(), 0)

    def test_title_length_limit(self):
        response = self.post({"titulo": "x" * 101})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"erro": "Título muito longo (máximo 100 caracteres)"})
        self.assertEqual(Tarefa.objects.count(), 0)

        response = self.post({"titulo": "x" * 100})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Tarefa.objects.count(), 1)

    def test_empty_body_is_rejected(self):
        response = self.client.post('/tarefas', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Tarefa.objects.count(), 0)

    def test_update_marks_done(self):
        created = self.post({"titulo": "Buy milk", "descricao": "2%"}).json()

        response = self.put(created["id"], {"titulo": "Buy milk", "descricao": "2%", "concluida": True})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "id": created["id"],
            "titulo": "Buy milk",
            "descricao": "2%",
            "concluida": True,
            "mensagem": "Tarefa atualizada com sucesso!",
        })
        self.assertTrue(Tarefa.objects.get(id=created["id"]).concluida)

    def test_update_replaces_omitted_fields(self):
        created = self.post({"titulo": "Buy milk", "descricao": "2%"}).json()
        self.put(created["id"], {"titulo": "Buy milk", "concluida": True})

        response = self.put(created["id"], {"titulo": "Buy bread"})
        self.assertEqual(response.status_code, 200)
        self.assertIs(response.json()["concluida"], False)
        self.assertIsNone(response.json()["descricao"])

        tarefa = Tarefa.objects.get(id=created["id"])
        self.assertEqual(tarefa.titulo, "Buy bread")
        self.assertIsNone(tarefa.descricao)
        self.assertFalse(tarefa.concluida)

    def test_update_validates_title(self):
        created = self.post({"titulo": "Buy milk"}).json()
        response = self.put(created["id"], {"titulo": "y" * 101})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Tarefa.objects.get(id=created["id"]).titulo, "Buy milk")

    def test_update_and_delete_unknown_id_is_404(self):
        self.post({"titulo": "Keep me"})

        response = self.put(999, {"titulo": "X"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"erro": "Tarefa não encontrada"})

        response = self.client.delete('/tarefas/999')
        self.assertEqual(response.status_code, 404)

        self.assertEqual(list(Tarefa.objects.values_list('titulo', flat=True)), ["Keep me"])

    def test_invalid_id_is_rejected_before_store_access(self):
        with patch('apps.tarefas.services.update_tarefa') as update, \
                patch('apps.tarefas.services.delete_tarefa') as delete:
            for bad_id in ["abc", "0", "-5", "2.5", "1_000", "%D9%A3"]:
                with self.subTest(bad_id=bad_id):
                    response = self.put(bad_id, {"titulo": "X"})
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(response.json(), {"erro": "ID deve ser um número válido"})

                    response = self.client.delete(f'/tarefas/{bad_id}')
                    self.assertEqual(response.status_code, 400)
            update.assert_not_called()
            delete.assert_not_called()

    def test_delete_twice(self):
        created = self.post({"titulo": "Buy milk"}).json()

        response = self.client.delete(f'/tarefas/{created["id"]}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": created["id"], "mensagem": "Tarefa removida com sucesso!"})

        response = self.client.delete(f'/tarefas/{created["id"]}')
        self.assertEqual(response.status_code, 404)

    def test_separator_id_does_not_reach_an_existing_row(self):
        Tarefa.objects.create(id=1000, titulo="Keep me")

        response = self.client.delete('/tarefas/1_000')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"erro": "ID deve ser um número válido"})
        self.assertTrue(Tarefa.objects.filter(id=1000).exists())

    def test_title_length_counts_emoji_once(self):
        response = self.post({"titulo": "🚀" * 100})
        self.assertEqual(response.status_code, 200)

        response = self.post({"titulo": "🚀" * 101})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Tarefa.objects.count(), 1)


class TarefaStoreErrorTest(TestCase):
    """Store failures surface as 500 with the store's own message."""

    def setUp(self):
        self.client = Client()
        self.failure = OperationalError("disk I/O error")

    def test_list_failure(self):
        with patch('apps.tarefas.services.list_tarefas', side_effect=self.failure):
            response = self.client.get('/tarefas')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"erro": "disk I/O error"})

    def test_create_failure(self):
        with patch('apps.tarefas.services.create_tarefa', side_effect=self.failure):
            response = self.client.post(
                '/tarefas', data=json.dumps({"titulo": "Buy milk"}), content_type='application/json'
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"erro": "disk I/O error"})
        self.assertEqual(Tarefa.objects.count(), 0)

    def test_update_failure(self):
        with patch('apps.tarefas.services.update_tarefa', side_effect=self.failure):
            response = self.client.put(
                '/tarefas/1', data=json.dumps({"titulo": "Buy milk"}), content_type='application/json'
            )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"erro": "disk I/O error"})

    def test_delete_failure(self):
        with patch('apps.tarefas.services.delete_tarefa', side_effect=self.failure):
            response = self.client.delete('/tarefas/1')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"erro": "disk I/O error"})
