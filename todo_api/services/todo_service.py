import logging
from typing import List

from todo_api.core.exceptions import TodoAPIError, TodoNotFoundError
from todo_api.models.entities.todo import Todo
from todo_api.models.domain.todo import TodoCreate, TodoResponse, TodoUpdate
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.utils.helpers import handle_service_error

logger = logging.getLogger(__name__)

class TodoService:
    def __init__(self, repository: TodoRepository):
        self.repository = repository

    async def _get_existing(self, todo_id: str) -> Todo:
        todo = await self.repository.find_by_id(todo_id)

        if not todo:
            logger.warning(f"Todo with id {todo_id} not found")
            raise TodoNotFoundError(todo_id)

        return todo

    async def get_todos(self) -> List[TodoResponse]:
        try:
            todos = await self.repository.find_all()
            return [TodoResponse.model_validate(todo) for todo in todos]
        except Exception as e:
            handle_service_error(e, "todo_service", "get_todos")

    async def get_pending_todos(self) -> List[TodoResponse]:
        try:
            todos = await self.repository.find_pending()
            return [TodoResponse.model_validate(todo) for todo in todos]
        except Exception as e:
            handle_service_error(e, "todo_service", "get_pending_todos")

    async def get_todo(self, todo_id: str) -> TodoResponse:
        try:
            todo = await self._get_existing(todo_id)
            return TodoResponse.model_validate(todo)
        except TodoAPIError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "get_todo")

    async def create_todo(self, todo_data: TodoCreate) -> TodoResponse:
        try:
            # id stays unset so the entity default generates it on insert
            todo = Todo(
                title=todo_data.title,
                completed=todo_data.completed,
                order=todo_data.order
            )

            created_todo = await self.repository.save(todo)
            return TodoResponse.model_validate(created_todo)
        except Exception as e:
            handle_service_error(e, "todo_service", "create_todo")

    async def update_todo(self, todo_id: str, todo_data: TodoUpdate) -> TodoResponse:
        try:
            todo = await self._get_existing(todo_id)

            for field, value in todo_data.changes().items():
                setattr(todo, field, value)

            updated_todo = await self.repository.save(todo)
            return TodoResponse.model_validate(updated_todo)
        except TodoAPIError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "update_todo")

    async def delete_todo(self, todo_id: str) -> None:
        try:
            await self._get_existing(todo_id)
            await self.repository.delete_by_id(todo_id)
        except TodoAPIError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "delete_todo")

    async def delete_all_todos(self) -> None:
        try:
            await self.repository.delete_all()
        except Exception as e:
            handle_service_error(e, "todo_service", "delete_all_todos")
