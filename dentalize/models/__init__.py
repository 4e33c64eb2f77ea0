from dentalize.models.user import User, UserCreate, UserPublic
from dentalize.models.client import Client, ClientCreate, ClientPublic
from dentalize.models.service import Service, ServiceCreate, ServicePublic
from dentalize.models.task import Task, TaskFields, TaskPublic, TaskStatus, TaskWithRelations

__all__ = [
    "User",
    "UserCreate",
    "UserPublic",
    "Client",
    "ClientCreate",
    "ClientPublic",
    "Service",
    "ServiceCreate",
    "ServicePublic",
    "Task",
    "TaskFields",
    "TaskPublic",
    "TaskStatus",
    "TaskWithRelations",
]
