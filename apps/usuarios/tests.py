import json
from unittest.mock import patch

from django.db import OperationalError
from django.test import TestCase, Client

from apps.core.storage import Store
from .dtos import UsuarioIn
from .models import Usuario
from . import services


class UsuarioServicesTest(TestCase):
    def setUp(self):
        self.store = Store()

    def test_update_and_delete_report_affected_rows(self):
        usuario_id = services.create_usuario(self.store, UsuarioIn(nome="Ana", email="ana@x.com"))

        changed = services.update_usuario(self.store, usuario_id, UsuarioIn(nome="Ana B", email="ana@x.com"))
        self.assertEqual(changed, 1)
        self.assertEqual(services.update_usuario(self.store, usuario_id + 1, UsuarioIn(nome="X", email="y")), 0)

        self.assertEqual(services.delete_usuario(self.store, usuario_id), 1)
        self.assertEqual(services.delete_usuario(self.store, usuario_id), 0)


class UsuarioAPITest(TestCase):
    """Test the /usuarios endpoints end to end."""

    def setUp(self):
        self.client = Client()

    def post(self, payload):
        return self.client.post('/usuarios', data=json.dumps(payload), content_type='application/json')

    def put(self, usuario_id, payload):
        return self.client.put(
            f'/usuarios/{usuario_id}', data=json.dumps(payload), content_type='application/json'
        )

    def test_create_and_list(self):
        response = self.post({"nome": "Maria", "email": "maria@example.com"})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertGreater(data["id"], 0)
        self.assertEqual(data["nome"], "Maria")
        self.assertEqual(data["email"], "maria@example.com")
        self.assertEqual(data["mensagem"], "Usuário criado com sucesso!")

        response = self.client.get('/usuarios')
        self.assertEqual(response.status_code, 200)
        listing = response.json()
        self.assertEqual(listing["total"], 1)
        self.assertEqual(listing["usuarios"][0]["id"], data["id"])
        self.assertEqual(listing["usuarios"][0]["email"], "maria@example.com")
        self.assertIn("data_criacao", listing["usuarios"][0])

    def test_create_requires_name_and_email(self):
        for payload in [{}, {"nome": "Maria"}, {"email": "m@x.com"}, {"nome": "   ", "email": "m@x.com"}]:
            with self.subTest(payload=payload):
                response = self.post(payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"erro": "Nome e email são obrigatórios"})
        self.assertEqual(Usuario.objects.count(), 0)

    def test_create_rejects_body_of_wrong_shape(self):
        for payload in [["Maria"], {"nome": 42, "email": "m@x.com"}]:
            with self.subTest(payload=payload):
                response = self.post(payload)
                self.assertEqual(response.status_code, 400)
                self.assertIn("erro", response.json())
        self.assertEqual(Usuario.objects.count(), 0)

    def test_duplicate_email_is_a_store_error(self):
        first = self.post({"nome": "Maria", "email": "maria@example.com"}).json()

        response = self.post({"nome": "Outra", "email": "maria@example.com"})
        self.assertEqual(response.status_code, 500)
        data = response.json()
        self.assertEqual(data["erro"], "Erro ao criar usuário")
        self.assertIn("UNIQUE", data["detalhe"])

        self.assertEqual(Usuario.objects.count(), 1)
        self.assertEqual(Usuario.objects.get(id=first["id"]).nome, "Maria")

    def test_update(self):
        created = self.post({"nome": "Maria", "email": "maria@example.com"}).json()

        response = self.put(created["id"], {"nome": "Maria Silva", "email": "ms@example.com"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "id": created["id"],
            "nome": "Maria Silva",
            "email": "ms@example.com",
            "mensagem": "Usuário atualizado com sucesso!",
        })
        usuario = Usuario.objects.get(id=created["id"])
        self.assertEqual(usuario.nome, "Maria Silva")

    def test_update_unknown_id_is_404(self):
        response = self.put(999, {"nome": "X", "email": "x@example.com"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"erro": "Usuário não encontrado"})
        self.assertEqual(Usuario.objects.count(), 0)

    def test_update_to_taken_email_is_a_store_error(self):
        self.post({"nome": "A", "email": "a@example.com"})
        b = self.post({"nome": "B", "email": "b@example.com"}).json()

        response = self.put(b["id"], {"nome": "B", "email": "a@example.com"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["erro"], "Erro ao atualizar usuário")
        self.assertEqual(Usuario.objects.get(id=b["id"]).email, "b@example.com")

    def test_invalid_id_is_rejected_before_store_access(self):
        with patch('apps.usuarios.services.update_usuario') as update, \
                patch('apps.usuarios.services.delete_usuario') as delete:
            for bad_id in ["abc", "0", "-1", "1_000", "%D9%A3"]:
                with self.subTest(bad_id=bad_id):
                    response = self.put(bad_id, {"nome": "X", "email": "x@example.com"})
                    self.assertEqual(response.status_code, 400)
                    self.assertEqual(response.json(), {"erro": "ID deve ser um número válido"})

                    response = self.client.delete(f'/usuarios/{bad_id}')
                    self.assertEqual(response.status_code, 400)
            update.assert_not_called()
            delete.assert_not_called()

    def test_delete_twice(self):
        created = self.post({"nome": "Maria", "email": "maria@example.com"}).json()

        response = self.client.delete(f'/usuarios/{created["id"]}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": created["id"], "mensagem": "Usuário deletado com sucesso!"})

        response = self.client.delete(f'/usuarios/{created["id"]}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"erro": "Usuário não encontrado"})


class UsuarioStoreErrorTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.failure = OperationalError("disk I/O error")

    def test_list_failure_exposes_store_text(self):
        with patch('apps.usuarios.services.list_usuarios', side_effect=self.failure):
            response = self.client.get('/usuarios')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"erro": "disk I/O error"})

    def test_delete_failure_adds_store_text_as_detail(self):
        with patch('apps.usuarios.services.delete_usuario', side_effect=self.failure):
            response = self.client.delete('/usuarios/1')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {
            "erro": "Erro ao deletar usuário",
            "detalhe": "disk I/O error",
        })
