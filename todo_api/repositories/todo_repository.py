from operator import eq
from typing import List
from sqlalchemy.orm import Session
import logging

from todo_api.models.entities.todo import Todo
from todo_api.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

class TodoRepository(BaseRepository[Todo]):
    def __init__(self, db: Session):
        super().__init__(db, Todo)

    async def find_pending(self) -> List[Todo]:
        try:
            return self.db.query(Todo).filter(eq(Todo.completed, False)).all()
        except Exception as e:
            logger.error(f"Error retrieving pending todos: {str(e)}")
            raise
