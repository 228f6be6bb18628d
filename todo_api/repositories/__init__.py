from todo_api.repositories.base_repository import BaseRepository
from todo_api.repositories.todo_repository import TodoRepository

__all__ = ["BaseRepository", "TodoRepository"]
