from django.db import models

TITULO_MAX_LENGTH = 100


class Tarefa(models.Model):
    """
    A to-do item. Listed newest first.
    """
    titulo = models.CharField(max_length=TITULO_MAX_LENGTH)
    descricao = models.TextField(null=True, blank=True)
    concluida = models.BooleanField(default=False)
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'tarefas'
        ordering = ['-data_criacao', '-id']

    def __str__(self):
        return self.titulo
