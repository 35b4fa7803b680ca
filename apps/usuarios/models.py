from django.db import models


class Usuario(models.Model):
    """
    A registered user. `email` is unique across all users; the store
    enforces it.
    """
    nome = models.TextField()
    email = models.TextField(unique=True)
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'usuarios'
        ordering = ['id']

    def __str__(self):
        return f"{self.nome} <{self.email}>"
