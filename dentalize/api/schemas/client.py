from dentalize.models.client import ClientPublic
from dentalize.models.task import TaskWithRelations


class ClientDetail(ClientPublic):
    tasks: list[TaskWithRelations] = []
